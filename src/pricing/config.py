# src/pricing/config.py
"""
Pricing configuration.

This is intentionally simple and explainable for an illustrative calculator:
- base_price: price before any risk modifier (SAR)
- additive risk modifiers for vehicle age, accidents, driver age and city
- min/max clamps on the fair price
- offer spread: the random band applied per company on top of the fair price
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Tuple


# Ordered: offers are always returned in this order.
COMPANIES: Tuple[str, ...] = ("Najm", "TameenX", "Aman", "Wathiq", "Sanad")

# Illustrative values; real insurers would use actuarial data.
CITY_RISK: Dict[str, float] = {
    "Riyadh": 0.10,
    "Jeddah": 0.08,
    "Dammam": 0.05,
    "Mecca": 0.07,
    "Medina": 0.06,
}


@dataclass(frozen=True)
class PricingConfig:
    currency: str = "SAR"

    # price = base_price * (1 + modifiers)
    base_price: float = 900.0

    # Clamp final fair price
    min_price: float = 600.0
    max_price: float = 3000.0

    # Vehicle age loadings (cumulative: an age over 20 gets both)
    old_car_age: int = 10
    old_car_loading: float = 0.10
    very_old_car_age: int = 20
    very_old_car_loading: float = 0.20

    # Per recorded accident, uncapped
    accident_loading: float = 0.05

    # Driver age loadings
    young_driver_age: int = 25
    young_driver_loading: float = 0.15
    senior_driver_age: int = 60
    senior_driver_loading: float = 0.10

    city_risk: Dict[str, float] = field(default_factory=lambda: dict(CITY_RISK))

    # Fallbacks for missing or unusable inputs
    default_accidents: int = 0
    default_driver_age: int = 30


@dataclass(frozen=True)
class OfferConfig:
    companies: Tuple[str, ...] = COMPANIES

    # Modifier drawn uniformly from [min_modifier, max_modifier)
    min_modifier: float = -0.12
    max_modifier: float = 0.18

    modifier_decimals: int = 3
