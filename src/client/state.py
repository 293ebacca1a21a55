# src/client/state.py
"""
Display state for the offers table.

The state is an explicit, immutable value: every interaction takes the
current UiState and returns a new one, so the table logic can be exercised
without any interface attached.

Rendering rules:
- filter: case-insensitive substring match on the company name
- sort: by company or price, ascending or descending; ties keep the order
  the server returned them in
- the row(s) with the minimum visible price are flagged as cheapest
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from operator import itemgetter
from typing import Any, Dict, Iterable, List, Tuple

from src.client.i18n import DEFAULT_LANG, SUPPORTED_LANGS

SORT_KEYS = ("company", "price")


@dataclass(frozen=True)
class UiState:
    lang: str = DEFAULT_LANG
    offers: Tuple[Dict[str, Any], ...] = ()
    sort_key: str = "price"
    sort_asc: bool = True
    filter_text: str = ""


@dataclass(frozen=True)
class Row:
    company: str
    price: int
    cheapest: bool


def set_language(state: UiState, lang: str) -> UiState:
    """Switch locale; offers and sort/filter are kept so the table re-renders without a fetch."""
    if lang not in SUPPORTED_LANGS:
        raise ValueError(f"Unsupported language: {lang!r}")
    return replace(state, lang=lang)


def toggle_sort(state: UiState, key: str) -> UiState:
    """
    Clicking the active column flips the direction; a new column starts ascending.
    """
    if key not in SORT_KEYS:
        raise ValueError(f"Unsupported sort key: {key!r}. Expected one of {SORT_KEYS}")
    if state.sort_key == key:
        return replace(state, sort_asc=not state.sort_asc)
    return replace(state, sort_key=key, sort_asc=True)


def set_filter(state: UiState, text: str) -> UiState:
    return replace(state, filter_text=text or "")


def replace_offers(state: UiState, offers: Iterable[Dict[str, Any]]) -> UiState:
    """After a successful fetch: new offers, sort reset to price ascending."""
    return replace(state, offers=tuple(dict(o) for o in offers), sort_key="price", sort_asc=True)


def visible_rows(state: UiState) -> List[Row]:
    needle = state.filter_text.lower()
    rows = [o for o in state.offers if needle in str(o["company"]).lower()]
    # sorted() keeps equal items in server order, reverse=True included
    rows = sorted(rows, key=itemgetter(state.sort_key), reverse=not state.sort_asc)

    if not rows:
        return []

    min_price = min(r["price"] for r in rows)
    return [Row(company=str(r["company"]), price=int(r["price"]), cheapest=r["price"] == min_price) for r in rows]


def format_price(price: int) -> str:
    return f"{price:,}"
