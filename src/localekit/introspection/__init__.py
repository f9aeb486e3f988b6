"""Introspection of locale data supplied by external tables.

This package provides two data sources the identifier model relies on
but does not compute:

1. ISO Standards Introspection (localekit.introspection.iso):
   - Available locale identifiers
   - ISO 639 language, ISO 3166-1 territory and ISO 4217 currency codes
   - Territory currencies and the user's preferred languages
   - Requires Babel for CLDR data

2. Windows Locale Codes (localekit.introspection.windows):
   - LCID <-> identifier mapping
   - Standard library data only

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from .iso import (
    CurrencyCode,
    LanguageCode,
    TerritoryCode,
    available_locale_identifiers,
    clear_iso_cache,
    common_iso_currency_codes,
    get_territory_currency,
    iso_country_codes,
    iso_currency_codes,
    iso_language_codes,
    preferred_languages,
)
from .windows import (
    UNKNOWN_WINDOWS_LOCALE_CODE,
    locale_identifier_from_windows_code,
    windows_locale_code,
)

__all__ = [
    # ISO type aliases
    "LanguageCode",
    "TerritoryCode",
    "CurrencyCode",
    # ISO enumeration
    "available_locale_identifiers",
    "iso_language_codes",
    "iso_country_codes",
    "iso_currency_codes",
    "common_iso_currency_codes",
    "preferred_languages",
    # ISO lookup functions
    "get_territory_currency",
    # ISO cache management
    "clear_iso_cache",
    # Windows locale codes
    "UNKNOWN_WINDOWS_LOCALE_CODE",
    "locale_identifier_from_windows_code",
    "windows_locale_code",
]
