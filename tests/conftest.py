"""Pytest fixtures for pricing, offer and client tests."""

from typing import Iterable, List, Tuple

import pytest

CURRENT_YEAR = 2026


class ScriptedRandom:
    """Random source returning scripted values in order (last value repeats)."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.calls: List[Tuple[float, float]] = []

    def uniform(self, low: float, high: float) -> float:
        self.calls.append((low, high))
        idx = min(len(self.calls) - 1, len(self.values) - 1)
        return self.values[idx]


@pytest.fixture
def scripted_random():
    def _make(*values: float) -> ScriptedRandom:
        return ScriptedRandom(values)

    return _make


@pytest.fixture
def current_year():
    return CURRENT_YEAR


@pytest.fixture
def sample_offers():
    return [
        {"company": "Najm", "modifier": 0.111, "price": 1000},
        {"company": "TameenX", "modifier": 0.0, "price": 900},
        {"company": "Aman", "modifier": 0.056, "price": 950},
        {"company": "Wathiq", "modifier": 0.0, "price": 900},
        {"company": "Sanad", "modifier": 0.167, "price": 1050},
    ]
