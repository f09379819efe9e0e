import json
import logging
from functools import lru_cache
from importlib.resources import files
from typing import Any

import calgrid.locales
from calgrid.enums import CalendarErrorKind, SupportedLocale, Weekday
from calgrid.exceptions import calendar_error

logger = logging.getLogger(__name__)

MONTH_NAMES = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def parse_locale(value: Any) -> SupportedLocale:
    """Validate a language tag, raising InvalidLocaleError for unknown ones"""
    if isinstance(value, SupportedLocale):
        return value
    if not isinstance(value, str):
        raise calendar_error(CalendarErrorKind.INVALID_LOCALE, value)
    try:
        return SupportedLocale(value.strip().lower())
    except ValueError:
        raise calendar_error(CalendarErrorKind.INVALID_LOCALE, value) from None


@lru_cache()
def load_translations(locale: SupportedLocale) -> dict:
    """Load translations using importlib.resources and cache in memory"""
    try:
        locale_file = files(calgrid.locales).joinpath(f"{locale}.json")
        return json.loads(locale_file.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning("No translations for locale '%s', using English", locale)
        locale_file = files(calgrid.locales).joinpath("en.json")
        return json.loads(locale_file.read_text(encoding="utf-8"))


def translate(locale: SupportedLocale, name: str) -> str:
    """
    Translate a canonical English weekday or month name.

    Args:
        locale: Language code (e.g., "en", "fr")
        name: English name (e.g., "Sunday", "March")

    Returns:
        Localized display string
    """
    translations = load_translations(locale)
    if name in translations["weekdays"]:
        return translations["weekdays"][name]
    return translations["months"][name]


def _canonical_weekday(weekday: int) -> str:
    return Weekday(weekday).name.capitalize()


def weekday_name(locale: SupportedLocale, weekday: int) -> str:
    return translate(locale, _canonical_weekday(weekday))


def weekday_abbr(locale: SupportedLocale, weekday: int) -> str:
    """Two character weekday abbreviation, used for calendar headers"""
    return load_translations(locale)["weekday_abbr"][_canonical_weekday(weekday)]


def month_name(locale: SupportedLocale, month: int) -> str:
    """Localized month name, month is 0-based"""
    return translate(locale, MONTH_NAMES[month])
