"""Locale utilities for identifier normalization and Babel lookups.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import os
from typing import TYPE_CHECKING

from localekit.constants import DEFAULT_LOCALE, ENCODING_SEPARATOR, PSEUDO_LOCALES
from localekit.identifiers import canonicalize, subtag_identifier

if TYPE_CHECKING:
    from collections.abc import Iterator

    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "get_system_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a BCP-47 or POSIX locale code to its canonical ICU form.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Casing is normalized and legacy aliases are resolved, so "en-us",
    "EN_US" and "en_US" all share one cache key.

    This is the canonical normalization function. All locale handling should
    normalize at the system boundary (entry point) using this function, then
    use the normalized form for cache keys and lookups.

    Args:
        locale_code: Locale code (e.g., "en-US", "pt_br", "iw")

    Returns:
        Canonical locale code (e.g., "en_US", "pt_BR", "he")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("pt-br")
        'pt_BR'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return canonicalize(locale_code)


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Extensions such as
    @calendar=hebrew are not part of Babel's locale data and are stripped
    before the lookup.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47, POSIX or ICU format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("en-US@currency=EUR")
        >>> locale.language
        'en'
        >>> locale.territory
        'US'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(subtag_identifier(normalize_locale(locale_code)))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()


def _system_locale_candidates() -> Iterator[str]:
    """Raw locale names from the OS, then LC_ALL, LC_MESSAGES and LANG."""
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
    except (ValueError, AttributeError):
        system_locale = None
    if system_locale:
        yield system_locale

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            yield value


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to canonical form.
    Filters out "C" and "POSIX" pseudo-locales, with or without a codeset
    suffix. With no OS locale and LANG=de_DE.UTF-8 the result is "de_DE".

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in canonical form.
        Returns "en_US" if not determinable and raise_on_failure is False.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.

    """
    for value in _system_locale_candidates():
        # Strip encoding suffix first so C.UTF-8 is filtered too
        locale_code = value.split(ENCODING_SEPARATOR)[0].strip()
        if locale_code not in PSEUDO_LOCALES:
            return normalize_locale(locale_code)

    # No locale detected
    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    return DEFAULT_LOCALE
