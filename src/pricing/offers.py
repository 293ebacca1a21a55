# src/pricing/offers.py
"""
Comparison offers.

Each company's offer is the fair price moved by a uniform random modifier
in [min_modifier, max_modifier). Offer prices are not clamped.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Protocol

import numpy as np

from src.pricing.config import OfferConfig
from src.pricing.quote import round_half_up


class RandomSource(Protocol):
    """Anything with numpy's Generator.uniform signature for scalars."""

    def uniform(self, low: float, high: float) -> float: ...


@dataclass(frozen=True)
class Offer:
    company: str
    modifier: float
    price: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def draw_modifier(rng: RandomSource, cfg: OfferConfig) -> float:
    return float(rng.uniform(cfg.min_modifier, cfg.max_modifier))


def make_offer(company: str, fair_price: int, modifier: float, cfg: OfferConfig) -> Offer:
    """
    price = round(fair_price * (1 + modifier)), using the unrounded modifier.
    """
    return Offer(
        company=company,
        modifier=round(modifier, cfg.modifier_decimals),
        price=round_half_up(fair_price * (1.0 + modifier)),
    )


def generate_offers(
    fair_price: int,
    rng: Optional[RandomSource] = None,
    cfg: Optional[OfferConfig] = None,
) -> List[Offer]:
    """
    One offer per company, in the configured company order.
    """
    cfg = cfg or OfferConfig()
    rng = rng if rng is not None else np.random.default_rng()

    return [make_offer(company, fair_price, draw_modifier(rng, cfg), cfg) for company in cfg.companies]
