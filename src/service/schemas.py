# src/service/schemas.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class QuoteResponse:
    fair_price: int
    offers: List[Dict[str, Any]]

    def to_dict(self) -> Dict[str, Any]:
        return {"fair_price": self.fair_price, "offers": [dict(o) for o in self.offers]}
