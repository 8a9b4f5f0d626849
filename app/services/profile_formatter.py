"""
Profile Formatting
Human-readable country and language labels for guide profiles
"""

import string
from typing import Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency

from app.models.guide import FormattedGuideProfile, GuideProfile
from app.utils.i18n import DEFAULT_LOCALE

# Some imported rows store language codes wrapped in quotes, e.g. '"en"'
_STRIP_CHARS = string.whitespace + "\"'"


def clean_language_code(code: str) -> str:
    """Drop surrounding whitespace and single/double quotes"""
    return code.strip(_STRIP_CHARS)


def _display_locale(locale: str) -> Locale:
    try:
        return Locale.parse(locale.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError):
        return Locale.parse(DEFAULT_LOCALE)


def _language_label(display: Locale, code: str) -> str:
    key = code.replace("-", "_")
    candidates = [key, key.lower()]
    if "_" in key:
        language, _, region = key.partition("_")
        candidates.append(f"{language.lower()}_{region.upper()}")

    for candidate in candidates:
        label = display.languages.get(candidate)
        if label:
            return label
    return code


def _country_label(display: Locale, code: Optional[str]) -> Optional[str]:
    code = (code or "").strip()
    if not code:
        return None
    return display.territories.get(code.upper()) or code


def format_guide_profile(profile: GuideProfile, locale: str) -> FormattedGuideProfile:
    """
    Enrich a guide profile with labels in the requested locale

    Codes that cannot be resolved are returned as-is instead of being dropped.
    """
    display = _display_locale(locale)
    language_labels = [
        _language_label(display, clean_language_code(code))
        for code in profile.languages
    ]

    return FormattedGuideProfile(
        profile=profile,
        country_label=_country_label(display, profile.country_code),
        language_labels=language_labels,
    )


def format_hourly_rate(amount_cents: Optional[int], currency: Optional[str], locale: str) -> Optional[str]:
    """Whole-unit currency string, or None when the rate is not set"""
    if amount_cents is None or currency is None:
        return None

    value = amount_cents / 100
    try:
        return format_currency(
            round(value), currency, format="¤#,##0",
            locale=_display_locale(locale), currency_digits=False
        )
    except (ValueError, TypeError):
        return f"{value:.0f} {currency}"
