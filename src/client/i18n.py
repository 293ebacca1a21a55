# src/client/i18n.py
"""
Label dictionaries for the calculator form. Arabic is the default locale.
"""

from __future__ import annotations

from typing import Dict

DEFAULT_LANG = "ar"

LABELS: Dict[str, Dict[str, str]] = {
    "ar": {
        "title": "حاسبة السعر العادل لتأمين السيارات",
        "model": "موديل السيارة",
        "year": "سنة الصنع",
        "city": "المدينة",
        "accidents": "عدد الحوادث المسجلة",
        "driver_age": "عمر السائق",
        "btn_calc": "احسب السعر",
        "btn_calculating": "جاري الحساب...",
        "result_title": "نتائج العروض",
        "filter_label": "بحث عن شركة:",
        "table_company": "الشركة",
        "table_price": "السعر (ريال)",
        "city_placeholder": "-- اختر المدينة --",
        "select_language": "اللغة",
        "error": "حدث خطأ أثناء الاتصال بالخادم",
    },
    "en": {
        "title": "Fair Car Insurance Price Calculator",
        "model": "Car Model",
        "year": "Year of Manufacture",
        "city": "City",
        "accidents": "Number of Recorded Accidents",
        "driver_age": "Driver's Age",
        "btn_calc": "Calculate Price",
        "btn_calculating": "Calculating...",
        "result_title": "Offers Results",
        "filter_label": "Search Company:",
        "table_company": "Company",
        "table_price": "Price (SAR)",
        "city_placeholder": "-- Select City --",
        "select_language": "Language",
        "error": "An error occurred while contacting the server",
    },
}

SUPPORTED_LANGS = tuple(LABELS)


def labels(lang: str) -> Dict[str, str]:
    if lang not in LABELS:
        raise ValueError(f"Unsupported language: {lang!r}. Expected one of {SUPPORTED_LANGS}")
    return LABELS[lang]


def direction(lang: str) -> str:
    return "rtl" if lang == "ar" else "ltr"


def error_message(lang: str) -> str:
    return labels(lang)["error"]


def calculating_label(lang: str) -> str:
    """Submit button text while a quote request is in flight."""
    return labels(lang)["btn_calculating"]


def submit_label(lang: str) -> str:
    """Submit button text when idle; restored after every request."""
    return labels(lang)["btn_calc"]
