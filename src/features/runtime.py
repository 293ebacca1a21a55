# src/features/runtime.py
"""
Runtime input builder for the quote API.

Goal:
- Convert a raw form payload (dict) into the QuoteRequest expected by the
  pricing engine, without ever rejecting the request.

Form fields arrive as strings or numbers. This builder mirrors how the form
posts them:
- Integers are read from the leading digits ("12abc" -> 12, " 7" -> 7)
- Floats truncate toward zero
- Unusable values and zero fall back to the field default
- Negative accident counts fall back to 0
- city is matched verbatim later on, so it is never stripped or case-folded
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from src.pricing.config import PricingConfig
from src.pricing.quote import QuoteRequest

_LEADING_INT = re.compile(r"\s*([+-]?)(\d+)")

# Longer digit runs are past float range; they saturate instead of being converted
_MAX_DIGITS = 400


@dataclass(frozen=True)
class RuntimeBuildResult:
    request: QuoteRequest
    warnings: List[str]


def _is_blank(val: Any) -> bool:
    return val is None or (isinstance(val, str) and val.strip() == "")


def parse_int(val: Any) -> Optional[int]:
    """
    Lenient integer parse. Returns None when no integer can be read.
    """
    if val is None or isinstance(val, bool):
        return None
    if isinstance(val, int):
        return val
    if isinstance(val, float):
        if math.isnan(val) or math.isinf(val):
            return None
        return int(val)
    if isinstance(val, str):
        m = _LEADING_INT.match(val)
        if not m:
            return None
        sign, digits = m.group(1), m.group(2).lstrip("0") or "0"
        if len(digits) > _MAX_DIGITS:
            value = 10 ** _MAX_DIGITS
        else:
            value = int(digits)
        return -value if sign == "-" else value
    return None


def _int_field(
    raw: Dict[str, Any],
    name: str,
    default: Optional[int],
    warnings: List[str],
    *,
    allow_negative: bool = True,
) -> Optional[int]:
    val = raw.get(name)
    parsed = parse_int(val)

    if parsed is None:
        if not _is_blank(val):
            warnings.append(f"Could not read {name}='{val}' as an integer; using default.")
        return default

    if parsed == 0:
        return default

    if parsed < 0 and not allow_negative:
        warnings.append(f"{name}={parsed} is negative; using default.")
        return default

    return parsed


def _text_field(raw: Dict[str, Any], name: str) -> str:
    val = raw.get(name)
    if val is None:
        return ""
    return val if isinstance(val, str) else str(val)


def build_request_from_raw(
    raw: Optional[Dict[str, Any]],
    cfg: Optional[PricingConfig] = None,
) -> RuntimeBuildResult:
    """
    Build a QuoteRequest from a raw payload.

    raw: dict of form fields (from API request); None is treated as empty
    """
    cfg = cfg or PricingConfig()
    raw = raw or {}
    warnings: List[str] = []

    # year=None means "current year" and is resolved at pricing time
    year = _int_field(raw, "year", None, warnings)
    accidents = _int_field(raw, "accidents", cfg.default_accidents, warnings, allow_negative=False)
    driver_age = _int_field(raw, "driver_age", cfg.default_driver_age, warnings)

    city = _text_field(raw, "city")
    if city and city not in cfg.city_risk:
        warnings.append(f"Unknown city '{city}'; no city modifier applied.")

    request = QuoteRequest(
        model=_text_field(raw, "model"),
        year=year,
        city=city,
        accidents=accidents if accidents is not None else cfg.default_accidents,
        driver_age=driver_age if driver_age is not None else cfg.default_driver_age,
    )
    return RuntimeBuildResult(request=request, warnings=warnings)
