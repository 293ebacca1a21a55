# src/client/api.py
"""
HTTP client for POST /api/quote and the form submit flow.

A failed submit (transport error or non-2xx status) never touches the
offers already on display; the caller gets the unchanged state back along
with a localized error message.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional

import httpx

from src.client.i18n import error_message, submit_label
from src.client.state import UiState, replace_offers
from src.utils.config import get_client_config

logger = logging.getLogger(__name__)

FORM_FIELDS = ("model", "year", "city", "accidents", "driver_age")


class QuoteApiError(Exception):
    """Raised when the quote endpoint cannot be reached or answers non-2xx."""


def build_payload(form: Mapping[str, Any]) -> Dict[str, str]:
    """Form values are posted as trimmed strings; absent fields as empty strings."""
    payload: Dict[str, str] = {}
    for name in FORM_FIELDS:
        val = form.get(name)
        payload[name] = "" if val is None else str(val).strip()
    return payload


class QuoteApiClient:
    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        cfg = get_client_config()
        self.base_url = (base_url or cfg.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else cfg.timeout
        self._transport = transport

    def fetch_quote(self, form: Mapping[str, Any]) -> Dict[str, Any]:
        url = f"{self.base_url}/api/quote"
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                resp = client.post(url, json=build_payload(form))
                resp.raise_for_status()
                return resp.json()
        except httpx.HTTPStatusError as e:
            raise QuoteApiError(f"Quote request failed with status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise QuoteApiError(f"Quote request to {url} failed: {e}") from e
        except ValueError as e:
            raise QuoteApiError("Quote response was not valid JSON") from e


@dataclass(frozen=True)
class SubmitOutcome:
    state: UiState
    # Idle submit text, restored whether the request succeeded or not
    button_label: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def submit_quote(state: UiState, form: Mapping[str, Any], client: QuoteApiClient) -> SubmitOutcome:
    try:
        data = client.fetch_quote(form)
    except QuoteApiError as e:
        logger.error("Quote submit failed: %s", e)
        return SubmitOutcome(state=state, button_label=submit_label(state.lang), error=error_message(state.lang))

    offers: List[Dict[str, Any]] = list(data.get("offers") or [])
    return SubmitOutcome(state=replace_offers(state, offers), button_label=submit_label(state.lang))
