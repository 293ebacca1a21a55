# src/client/cli.py
"""
Command-line client for the quote endpoint.

Usage:
  python -m src.client.cli --year 2012 --city Riyadh --accidents 1 --driver-age 22
  python -m src.client.cli --lang en --sort company --desc --filter a
  python -m src.client.cli --url http://localhost:3000 --model Camry --year 2020

Cheapest offer(s) in the filtered table are marked with '*'.
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from src.client.api import QuoteApiClient, submit_quote
from src.client.i18n import calculating_label, labels
from src.client.state import UiState, Row, format_price, set_filter, toggle_sort, visible_rows


def render_table(rows: List[Row], lang: str) -> str:
    t = labels(lang)
    width = max([len(t["table_company"])] + [len(r.company) for r in rows])
    lines = [f"  {t['table_company']:<{width}}  {t['table_price']}"]
    for r in rows:
        mark = "*" if r.cheapest else " "
        lines.append(f"{mark} {r.company:<{width}}  {format_price(r.price)}")
    return "\n".join(lines)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Request a fair car insurance price and compare offers.")
    p.add_argument("--url", type=str, default=None, help="Backend base URL (default: QUOTE_API_URL)")
    p.add_argument("--model", type=str, default="")
    p.add_argument("--year", type=str, default="")
    p.add_argument("--city", type=str, default="")
    p.add_argument("--accidents", type=str, default="")
    p.add_argument("--driver-age", dest="driver_age", type=str, default="")
    p.add_argument("--lang", type=str, default="ar", choices=["ar", "en"])
    p.add_argument("--sort", type=str, default="price", choices=["company", "price"])
    p.add_argument("--desc", action="store_true", help="Sort descending")
    p.add_argument("--filter", dest="filter_text", type=str, default="")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    form = {
        "model": args.model,
        "year": args.year,
        "city": args.city,
        "accidents": args.accidents,
        "driver_age": args.driver_age,
    }

    print(calculating_label(args.lang), file=sys.stderr)
    outcome = submit_quote(UiState(lang=args.lang), form, QuoteApiClient(base_url=args.url))
    if not outcome.ok:
        print(outcome.error, file=sys.stderr)
        return 1

    state = outcome.state
    if args.sort != state.sort_key:
        state = toggle_sort(state, args.sort)
    if args.desc:
        state = toggle_sort(state, args.sort)
    state = set_filter(state, args.filter_text)

    print(labels(state.lang)["result_title"])
    print(render_table(visible_rows(state), state.lang))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
