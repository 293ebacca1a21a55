"""Tests for the offers table display state."""

import pytest

from src.client.i18n import calculating_label, direction, error_message, labels, submit_label
from src.client.state import (
    UiState,
    format_price,
    replace_offers,
    set_filter,
    set_language,
    toggle_sort,
    visible_rows,
)


@pytest.fixture
def state(sample_offers):
    return replace_offers(UiState(), sample_offers)


def _names(rows):
    return [r.company for r in rows]


def test_default_is_price_ascending_stable_on_ties(state):
    rows = visible_rows(state)
    assert _names(rows) == ["TameenX", "Wathiq", "Aman", "Najm", "Sanad"]
    assert [r.price for r in rows] == [900, 900, 950, 1000, 1050]


def test_cheapest_rows_highlighted(state):
    rows = visible_rows(state)
    assert [r.company for r in rows if r.cheapest] == ["TameenX", "Wathiq"]


def test_same_header_twice_toggles_direction(state):
    desc = toggle_sort(state, "price")
    assert desc.sort_key == "price" and desc.sort_asc is False
    # ties keep server order when descending too
    assert _names(visible_rows(desc)) == ["Sanad", "Najm", "Aman", "TameenX", "Wathiq"]

    asc = toggle_sort(desc, "price")
    assert asc.sort_asc is True
    assert _names(visible_rows(asc)) == _names(visible_rows(state))


def test_new_header_starts_ascending(state):
    by_company = toggle_sort(toggle_sort(state, "price"), "company")
    assert by_company.sort_key == "company" and by_company.sort_asc is True
    assert _names(visible_rows(by_company)) == ["Aman", "Najm", "Sanad", "TameenX", "Wathiq"]
    assert _names(visible_rows(toggle_sort(by_company, "company"))) == [
        "Wathiq", "TameenX", "Sanad", "Najm", "Aman"
    ]


def test_filter_is_case_insensitive_substring(state):
    filtered = set_filter(state, "AM")
    rows = visible_rows(filtered)
    assert _names(rows) == ["TameenX", "Aman"]
    assert [r.company for r in rows if r.cheapest] == ["TameenX"]


def test_cheapest_follows_filter(state):
    rows = visible_rows(set_filter(state, "na"))
    # Najm (1000) and Sanad (1050)
    assert _names(rows) == ["Najm", "Sanad"]
    assert [r.cheapest for r in rows] == [True, False]


def test_filter_without_match(state):
    assert visible_rows(set_filter(state, "zzz")) == []


def test_empty_state_has_no_rows():
    assert visible_rows(UiState()) == []


def test_language_switch_keeps_offers(state):
    en = set_language(toggle_sort(state, "company"), "en")
    assert en.lang == "en"
    assert en.offers == state.offers
    assert en.sort_key == "company"


def test_invalid_values_rejected(state):
    with pytest.raises(ValueError):
        set_language(state, "fr")
    with pytest.raises(ValueError):
        toggle_sort(state, "modifier")


def test_replace_offers_resets_sort_keeps_filter(state, sample_offers):
    s = set_filter(toggle_sort(state, "company"), "a")
    s = replace_offers(s, sample_offers[:2])
    assert (s.sort_key, s.sort_asc, s.filter_text) == ("price", True, "a")
    assert len(s.offers) == 2


def test_state_is_not_mutated(state):
    toggle_sort(state, "price")
    set_filter(state, "x")
    assert state.sort_asc is True
    assert state.filter_text == ""


def test_format_price():
    assert format_price(1234) == "1,234"
    assert format_price(990) == "990"


def test_labels_and_direction():
    assert labels("en")["btn_calc"] == "Calculate Price"
    assert direction("ar") == "rtl"
    assert direction("en") == "ltr"
    assert error_message("en") == "An error occurred while contacting the server"
    with pytest.raises(ValueError):
        labels("de")
    assert set(labels("ar")) == set(labels("en"))


@pytest.mark.parametrize("lang,busy,idle", [
    ("ar", "جاري الحساب...", "احسب السعر"),
    ("en", "Calculating...", "Calculate Price"),
])
def test_submit_button_labels(lang, busy, idle):
    assert calculating_label(lang) == busy
    assert submit_label(lang) == idle
