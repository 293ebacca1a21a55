"""Tests for the end-to-end quote service."""

import logging

import pytest

from src.service.quote_service import quote_from_payload, quote_from_payload_dict


def test_quote_from_payload_composes_price_and_offers(scripted_random, current_year):
    payload = {"year": current_year, "accidents": 0, "driver_age": 30, "city": "Riyadh"}
    resp, warnings = quote_from_payload(payload, rng=scripted_random(0.0), current_year=current_year)
    assert resp.fair_price == 990
    assert [o["price"] for o in resp.offers] == [990] * 5
    assert warnings == []


def test_quote_from_payload_dict_shape(scripted_random, current_year):
    out = quote_from_payload_dict({"city": "Unknown"}, rng=scripted_random(0.1), current_year=current_year)
    assert set(out) == {"fair_price", "offers"}
    assert out["fair_price"] == 900
    assert len(out["offers"]) == 5
    assert out["offers"][0] == {"company": "Najm", "modifier": 0.1, "price": 990}


def test_none_payload_is_accepted(scripted_random, current_year):
    resp, _ = quote_from_payload(None, rng=scripted_random(0.0), current_year=current_year)
    assert resp.fair_price == 900


def test_malformed_input_is_logged_not_raised(scripted_random, current_year, caplog):
    with caplog.at_level(logging.WARNING, logger="src.service.quote_service"):
        resp, warnings = quote_from_payload(
            {"year": "soon", "accidents": [], "driver_age": {}},
            rng=scripted_random(0.0),
            current_year=current_year,
        )
    assert resp.fair_price == 900
    assert len(warnings) == 3
    assert "year" in caplog.text


def test_high_risk_payload_clamps(scripted_random, current_year):
    resp, _ = quote_from_payload({"accidents": "100"}, rng=scripted_random(0.0), current_year=current_year)
    assert resp.fair_price == 3000
    assert all(o["price"] == 3000 for o in resp.offers)


@pytest.mark.parametrize("payload,expected", [
    ({"accidents": "1" + "0" * 400}, 3000),
    ({"accidents": "9" * 5000}, 3000),
    ({"year": "9" * 5000}, 900),
    ({"driver_age": "9" * 5000}, 990),
])
def test_huge_digit_strings_never_fail(payload, expected, scripted_random, current_year):
    out = quote_from_payload_dict(payload, rng=scripted_random(0.0), current_year=current_year)
    assert out["fair_price"] == expected
    assert [o["price"] for o in out["offers"]] == [expected] * 5
