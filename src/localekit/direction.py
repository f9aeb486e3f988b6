"""Writing-direction lookups keyed by language code.

Character direction is the order of glyphs within a line; line direction is
the order of lines within a block. Both come from CLDR layout data:
characterOrder via Babel, lineOrder from a fixed table because Babel does
not expose it.

Both lookups are total: unknown or unparseable codes yield
LanguageDirection.UNKNOWN.

Python 3.13+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import logging
from functools import lru_cache

from babel import UnknownLocaleError

from localekit.constants import MAX_LOCALE_CACHE_SIZE
from localekit.enums import ComponentKey, LanguageDirection
from localekit.identifiers import parse_components
from localekit.locale_utils import get_babel_locale

__all__ = ["character_direction", "clear_direction_cache", "line_direction"]

logger = logging.getLogger(__name__)

# CLDR layout/orientation values
_CLDR_ORDERS: dict[str, LanguageDirection] = {
    "left-to-right": LanguageDirection.LEFT_TO_RIGHT,
    "right-to-left": LanguageDirection.RIGHT_TO_LEFT,
    "top-to-bottom": LanguageDirection.TOP_TO_BOTTOM,
    "bottom-to-top": LanguageDirection.BOTTOM_TO_TOP,
}

# CLDR lineOrder is top-to-bottom everywhere except vertical scripts,
# where lines advance horizontally. Keyed by (language, script).
_LINE_ORDER_OVERRIDES: dict[tuple[str, str | None], LanguageDirection] = {
    ("mn", "Mong"): LanguageDirection.LEFT_TO_RIGHT,
}


def _character_order(language: str) -> str | None:
    """CLDR characterOrder for a bare language code, or None if unknown."""
    try:
        return str(get_babel_locale(language).character_order)
    except (UnknownLocaleError, ValueError, LookupError, AttributeError) as e:
        logger.debug("No layout data for language '%s': %s", language, e)
        return None


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _character_direction_impl(language: str) -> LanguageDirection:
    order = _character_order(language)
    if order is None:
        return LanguageDirection.UNKNOWN
    return _CLDR_ORDERS.get(order, LanguageDirection.UNKNOWN)


def character_direction(language_code: str) -> LanguageDirection:
    """Direction of characters within a line for a language.

    Args:
        language_code: ISO 639 language code. Full identifiers are accepted;
            only the language subtag is used.

    Returns:
        LanguageDirection, UNKNOWN for codes without CLDR data.

    Example:
        >>> character_direction("ar")
        <LanguageDirection.RIGHT_TO_LEFT: 2>
        >>> character_direction("zz")
        <LanguageDirection.UNKNOWN: 0>
    """
    language = parse_components(language_code).get(ComponentKey.LANGUAGE_CODE)
    if language is None:
        return LanguageDirection.UNKNOWN
    return _character_direction_impl(language)


@lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _line_direction_impl(language: str, script: str | None) -> LanguageDirection:
    override = _LINE_ORDER_OVERRIDES.get((language, script))
    if override is not None:
        return override
    if _character_order(language) is None:
        return LanguageDirection.UNKNOWN
    return LanguageDirection.TOP_TO_BOTTOM


def line_direction(language_code: str) -> LanguageDirection:
    """Direction of lines within a block for a language.

    Args:
        language_code: ISO 639 language code, optionally with a script
            subtag (mn-Mong). Country and variant are ignored.

    Returns:
        LanguageDirection, UNKNOWN for codes without CLDR data.

    Example:
        >>> line_direction("en")
        <LanguageDirection.TOP_TO_BOTTOM: 3>
        >>> line_direction("mn_Mong")
        <LanguageDirection.LEFT_TO_RIGHT: 1>
    """
    components = parse_components(language_code)
    language = components.get(ComponentKey.LANGUAGE_CODE)
    if language is None:
        return LanguageDirection.UNKNOWN
    return _line_direction_impl(language, components.get(ComponentKey.SCRIPT_CODE))


def clear_direction_cache() -> None:
    """Clear cached direction lookups."""
    _character_direction_impl.cache_clear()
    _line_direction_impl.cache_clear()
