"""ISO 639/3166/4217 code tables and locale enumeration via Babel CLDR data.

Provides the external data the identifier model does not compute itself:
the available locale identifiers, flat ISO code lists, territory currencies
and the user's preferred languages. All results are immutable tuples and
cached for performance.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import os
from functools import lru_cache

from localekit.constants import (
    ENCODING_SEPARATOR,
    MAX_LOCALE_CACHE_SIZE,
    PSEUDO_LOCALES,
    ROOT_LOCALE,
)
from localekit.enums import ComponentKey
from localekit.identifiers import canonicalize_language_tag, parse_components
from localekit.locale_utils import get_babel_locale, get_system_locale

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Type aliases
    "LanguageCode",
    "TerritoryCode",
    "CurrencyCode",
    # Enumeration
    "available_locale_identifiers",
    "iso_language_codes",
    "iso_country_codes",
    "iso_currency_codes",
    "common_iso_currency_codes",
    "preferred_languages",
    # Lookup functions
    "get_territory_currency",
    # Cache management
    "clear_iso_cache",
]


# ============================================================================
# TYPE ALIASES (PEP 695)
# ============================================================================

type LanguageCode = str
"""ISO 639-1 language code (e.g., 'en', 'lv', 'de')."""

type TerritoryCode = str
"""ISO 3166-1 alpha-2 territory code (e.g., 'US', 'LV', 'DE')."""

type CurrencyCode = str
"""ISO 4217 currency code (e.g., 'USD', 'EUR', 'GBP')."""

# Colon-separated language priority list (GNU gettext convention)
_LANGUAGE_ENV = "LANGUAGE"
_LANGUAGE_ENV_SEPARATOR = ":"

# Display tables are read from English, which has the complete code lists
_REFERENCE_LOCALE = "en"


# ============================================================================
# BABEL INTERFACE (LAZY IMPORT)
# ============================================================================


def _get_babel_territory_currencies(territory: str) -> list[str]:
    """Get currencies used by a territory from Babel.

    Returns list of currently active legal tender currencies.
    """
    from babel.core import get_global  # noqa: PLC0415

    try:
        # Data format: list of (code, start_date, end_date, tender)
        # end_date=None means still active; tender=True means legal tender
        territory_currencies = get_global("territory_currencies")
        currencies_info = territory_currencies.get(territory, [])
        return [c[0] for c in currencies_info if c[2] is None and c[3]]
    except (ValueError, LookupError, KeyError, AttributeError):
        # Babel raises ValueError/LookupError for invalid data,
        # KeyError/AttributeError for data access. Logic bugs propagate.
        return []


# ============================================================================
# ENUMERATION
# ============================================================================


@lru_cache(maxsize=1)
def available_locale_identifiers() -> tuple[str, ...]:
    """List every locale identifier with CLDR data, sorted.

    The CLDR root locale is excluded; it names no language.

    Thread-safe. Result cached.
    """
    from babel.localedata import locale_identifiers  # noqa: PLC0415

    return tuple(sorted(code for code in locale_identifiers() if code != ROOT_LOCALE))


@lru_cache(maxsize=1)
def iso_language_codes() -> tuple[LanguageCode, ...]:
    """List ISO 639-1 two-letter language codes known to CLDR, sorted.

    Thread-safe. Result cached.
    """
    languages = get_babel_locale(_REFERENCE_LOCALE).languages
    return tuple(
        sorted(code for code in languages if len(code) == 2 and code.isalpha() and code.islower())
    )


@lru_cache(maxsize=1)
def iso_country_codes() -> tuple[TerritoryCode, ...]:
    """List ISO 3166-1 alpha-2 territory codes known to CLDR, sorted.

    Thread-safe. Result cached.
    """
    territories = get_babel_locale(_REFERENCE_LOCALE).territories
    return tuple(
        sorted(
            code for code in territories if len(code) == 2 and code.isalpha() and code.isupper()
        )
    )


@lru_cache(maxsize=1)
def iso_currency_codes() -> tuple[CurrencyCode, ...]:
    """List all ISO 4217 currency codes known to CLDR, sorted.

    Includes historic currencies (e.g. DEM). Use common_iso_currency_codes()
    for the ones in current circulation.

    Thread-safe. Result cached.
    """
    from babel.numbers import list_currencies  # noqa: PLC0415

    codes = list_currencies()
    return tuple(sorted(code for code in codes if len(code) == 3 and code.isalpha()))


@lru_cache(maxsize=1)
def common_iso_currency_codes() -> tuple[CurrencyCode, ...]:
    """List currencies that are legal tender in at least one territory, sorted.

    Thread-safe. Result cached.
    """
    from babel.core import get_global  # noqa: PLC0415

    codes: set[str] = set()
    for territory in get_global("territory_currencies"):
        codes.update(_get_babel_territory_currencies(territory))
    return tuple(sorted(codes))


def preferred_languages() -> tuple[str, ...]:
    """User's preferred languages, most preferred first.

    Reads the LANGUAGE environment variable (colon-separated, GNU gettext
    convention) followed by the detected system locale. Each entry is
    canonicalized as a language tag and duplicates are dropped.

    Not cached: reflects the environment at call time. With
    LANGUAGE=pt_BR:pt:en the result starts with ("pt", "en").
    """
    candidates = os.environ.get(_LANGUAGE_ENV, "").split(_LANGUAGE_ENV_SEPARATOR)
    candidates.append(get_system_locale())

    result: list[str] = []
    for candidate in candidates:
        code = candidate.split(ENCODING_SEPARATOR)[0].strip()
        if code in PSEUDO_LOCALES or ComponentKey.LANGUAGE_CODE not in parse_components(code):
            continue
        tag = canonicalize_language_tag(code)
        if tag not in result:
            result.append(tag)
    return tuple(result)


# ============================================================================
# LOOKUP FUNCTIONS
# ============================================================================


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _get_territory_currency_impl(territory_upper: str) -> CurrencyCode | None:
    """Internal cached implementation for get_territory_currency.

    Args:
        territory_upper: Pre-uppercased ISO 3166-1 alpha-2 code.

    Returns:
        ISO 4217 currency code or None if unknown.
    """
    currencies = _get_babel_territory_currencies(territory_upper)

    if not currencies:
        return None

    # Return first active tender currency
    return currencies[0]


def get_territory_currency(territory: str) -> CurrencyCode | None:
    """Get default currency for a territory.

    Args:
        territory: ISO 3166-1 alpha-2 code. Case-insensitive.

    Returns:
        ISO 4217 currency code or None if unknown.

    Thread-safe. Result cached per normalized territory code.
    """
    return _get_territory_currency_impl(territory.upper())


# ============================================================================
# CACHE MANAGEMENT
# ============================================================================


def clear_iso_cache() -> None:
    """Clear all ISO introspection caches.

    Call this if you need to free memory or after locale configuration changes.
    Thread-safe.
    """
    available_locale_identifiers.cache_clear()
    iso_language_codes.cache_clear()
    iso_country_codes.cache_clear()
    iso_currency_codes.cache_clear()
    common_iso_currency_codes.cache_clear()
    _get_territory_currency_impl.cache_clear()
