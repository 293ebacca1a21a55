# src/service/quote_service.py
"""
End-to-end quote service for the fair price calculator.

Single source of truth:
- raw payload -> runtime input builder -> QuoteRequest
- QuoteRequest -> fair price -> company offers
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Tuple

from src.features.runtime import build_request_from_raw
from src.pricing.config import OfferConfig, PricingConfig
from src.pricing.offers import RandomSource, generate_offers
from src.pricing.quote import compute_fair_price
from src.service.schemas import QuoteResponse

logger = logging.getLogger(__name__)


def quote_from_payload(
    payload: Optional[Dict[str, Any]],
    *,
    rng: Optional[RandomSource] = None,
    current_year: Optional[int] = None,
    pricing_cfg: Optional[PricingConfig] = None,
    offer_cfg: Optional[OfferConfig] = None,
) -> Tuple[QuoteResponse, list[str]]:
    """
    Full quote generation:
      raw payload -> fair price -> offers -> QuoteResponse
    Returns (QuoteResponse, warnings).
    """
    cfg = pricing_cfg or PricingConfig()
    built = build_request_from_raw(payload, cfg)
    for w in built.warnings:
        logger.warning(w)

    price = compute_fair_price(built.request, cfg=cfg, current_year=current_year)
    offers = generate_offers(price.fair_price, rng=rng, cfg=offer_cfg)

    logger.info(
        "Quoted fair_price=%s %s (modifiers=%.2f, city=%r, offers=%d)",
        price.fair_price,
        cfg.currency,
        price.modifiers,
        built.request.city,
        len(offers),
    )

    resp = QuoteResponse(
        fair_price=price.fair_price,
        offers=[o.to_dict() for o in offers],
    )
    return resp, built.warnings


def quote_from_payload_dict(
    payload: Optional[Dict[str, Any]],
    *,
    rng: Optional[RandomSource] = None,
    current_year: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Convenience: returns the JSON-ready response body.
    Warnings are logged, not returned; the public contract is {fair_price, offers}.
    """
    resp, _ = quote_from_payload(payload, rng=rng, current_year=current_year)
    return resp.to_dict()
