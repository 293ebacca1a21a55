# src/pricing/quote.py
"""
Fair price calculation.

Provides:
- the normalised quote request
- additive risk modifier accumulation
- fair price with clamping

Notes:
- This pricing logic is deliberately simple and explainable.
- The car age uses the wall-clock year at call time, so a quote for the same
  vehicle drifts by one year of age at each calendar boundary.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import date
from typing import Any, Dict, Optional

import numpy as np

from src.pricing.config import PricingConfig


@dataclass(frozen=True)
class QuoteRequest:
    model: str = ""
    year: Optional[int] = None
    city: str = ""
    accidents: int = 0
    driver_age: int = 30

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class PriceQuote:
    fair_price: int
    # Pre-clamp sum of risk fractions (informational)
    modifiers: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Unlike round(), halves are never sent to the even neighbour.
    """
    return int(math.floor(value + 0.5))


def wall_clock_year() -> int:
    return date.today().year


def _saturating_float(value: int) -> float:
    # Counts beyond float range become +/-inf; the clamp then caps the price
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def compute_modifiers(
    request: QuoteRequest,
    cfg: PricingConfig,
    year_now: int,
) -> float:
    """
    Sum the risk fractions in a fixed order:
    vehicle age, accidents, driver age, city.
    """
    modifiers = 0.0

    year = request.year if request.year is not None else year_now
    car_age = year_now - year
    if car_age > cfg.old_car_age:
        modifiers += cfg.old_car_loading
    if car_age > cfg.very_old_car_age:
        modifiers += cfg.very_old_car_loading

    modifiers += _saturating_float(request.accidents) * cfg.accident_loading

    if request.driver_age < cfg.young_driver_age:
        modifiers += cfg.young_driver_loading
    if request.driver_age > cfg.senior_driver_age:
        modifiers += cfg.senior_driver_loading

    # Exact match only; unknown cities add nothing
    modifiers += cfg.city_risk.get(request.city, 0.0)

    return modifiers


def compute_fair_price(
    request: QuoteRequest,
    cfg: Optional[PricingConfig] = None,
    current_year: Optional[int] = None,
) -> PriceQuote:
    """
    Fair price with clamping.

    fair_price = round(clip(base_price * (1 + modifiers), min_price, max_price))
    """
    cfg = cfg or PricingConfig()
    year_now = current_year if current_year is not None else wall_clock_year()

    modifiers = compute_modifiers(request, cfg, year_now)
    raw = cfg.base_price * (1.0 + modifiers)
    clamped = float(np.clip(raw, cfg.min_price, cfg.max_price))

    return PriceQuote(fair_price=round_half_up(clamped), modifiers=float(modifiers))
