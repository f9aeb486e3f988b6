"""Windows locale code (LCID) mapping.

Bidirectional lookup between numeric Windows LCIDs and canonical locale
identifiers, backed by the standard library's locale.windows_locale table.

Python 3.13+. Zero external dependencies beyond the alias data used by
canonicalize().
"""

from __future__ import annotations

import locale as locale_module
from functools import lru_cache

from localekit.enums import ComponentKey
from localekit.identifiers import canonicalize, compose_identifier, parse_components

__all__ = [
    "UNKNOWN_WINDOWS_LOCALE_CODE",
    "locale_identifier_from_windows_code",
    "windows_locale_code",
]

# Returned when an identifier has no LCID
UNKNOWN_WINDOWS_LOCALE_CODE: int = 0


@lru_cache(maxsize=1)
def _identifiers_by_code() -> dict[int, str]:
    return {lcid: canonicalize(name) for lcid, name in locale_module.windows_locale.items()}


@lru_cache(maxsize=1)
def _codes_by_identifier() -> dict[str, int]:
    codes: dict[str, int] = {}
    # Lowest LCID wins when several share an identifier
    for lcid, identifier in sorted(_identifiers_by_code().items(), reverse=True):
        codes[identifier] = lcid
    return codes


def locale_identifier_from_windows_code(lcid: int) -> str | None:
    """Canonical identifier for a Windows LCID.

    Example:
        >>> locale_identifier_from_windows_code(0x0409)
        'en_US'
        >>> locale_identifier_from_windows_code(0xFFFF) is None
        True
    """
    return _identifiers_by_code().get(lcid)


def windows_locale_code(identifier: str) -> int:
    """Windows LCID for a locale identifier, or 0 if none exists.

    The identifier is canonicalized first. Without an exact match the lookup
    retries with language and country, then language alone.

    Example:
        >>> hex(windows_locale_code("en-US"))
        '0x409'
        >>> hex(windows_locale_code("de_DE@collation=phonebook"))
        '0x407'
    """
    codes = _codes_by_identifier()
    components = parse_components(canonicalize(identifier))
    fallbacks = (
        tuple(components),
        (ComponentKey.LANGUAGE_CODE, ComponentKey.COUNTRY_CODE),
        (ComponentKey.LANGUAGE_CODE,),
    )
    for keys in fallbacks:
        candidate = compose_identifier({key: components[key] for key in keys if key in components})
        if candidate in codes:
            return codes[candidate]
    return UNKNOWN_WINDOWS_LOCALE_CODE
