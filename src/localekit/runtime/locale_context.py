"""Locale context: object-style access to a locale and its CLDR properties.

This module provides the object API on top of the identifier model.
Uses Babel for CLDR-compliant separators, symbols and display names.

Architecture:
    - LocaleContext: Immutable locale value (canonical identifier + Babel Locale)
    - Property lookups keyed by ComponentKey (object_for_key)
    - No dependency on Python's locale module for data (avoids global state)
    - current()/system() are lazily built and cached, never mutated

Design Principles:
    - Explicit over implicit (locale always visible)
    - Immutable by default (frozen dataclass)
    - Thread-safe (no shared mutable state outside the locked cache)
    - Equality by canonical identifier only

Python 3.13+. Uses Babel for i18n.
"""

import logging
from collections import OrderedDict
from collections.abc import Callable
from dataclasses import dataclass, field
from functools import lru_cache
from threading import RLock
from typing import Any, ClassVar

from babel import Locale, UnknownLocaleError
from babel import numbers as babel_numbers
from babel.core import get_global

from localekit.constants import (
    DEFAULT_CALENDAR,
    DEFAULT_LOCALE,
    DEFAULT_QUOTATION_DELIMITERS,
    MAX_LOCALE_CACHE_SIZE,
    MEASUREMENT_METRIC,
    MEASUREMENT_SYSTEMS,
    MEASUREMENT_US,
    QUOTATION_DELIMITERS,
)
from localekit.direction import character_direction, line_direction
from localekit.enums import SUBTAG_KEYS, ComponentKey, LanguageDirection
from localekit.errors import UnknownLocaleIdentifierError
from localekit.identifiers import LocaleIdentifier, compose_identifier, parse_components
from localekit.introspection.iso import get_territory_currency
from localekit.locale_utils import get_babel_locale, get_system_locale, normalize_locale

__all__ = ["LocaleContext"]

logger = logging.getLogger(__name__)

type PropertyValue = str | bool | None


def _babel_candidates(locale_id: LocaleIdentifier) -> list[str]:
    """Identifiers to try against Babel, most specific first."""
    components = locale_id.components
    language = components.get(ComponentKey.LANGUAGE_CODE)
    if language is None:
        return []
    candidates: list[str] = []
    for keys in (
        SUBTAG_KEYS,
        (ComponentKey.LANGUAGE_CODE, ComponentKey.SCRIPT_CODE, ComponentKey.COUNTRY_CODE),
        (ComponentKey.LANGUAGE_CODE, ComponentKey.COUNTRY_CODE),
        (ComponentKey.LANGUAGE_CODE,),
    ):
        candidate = compose_identifier({key: components[key] for key in keys if key in components})
        if candidate not in candidates:
            candidates.append(candidate)
    return candidates


def _resolve_babel_locale(locale_id: LocaleIdentifier) -> Locale | None:
    for candidate in _babel_candidates(locale_id):
        try:
            return get_babel_locale(candidate)
        except (UnknownLocaleError, ValueError) as e:
            logger.debug("No CLDR data for '%s': %s", candidate, e)
    return None


@dataclass(frozen=True, slots=True, eq=False)
class LocaleContext:
    """Immutable locale value with CLDR-backed property lookups.

    Use LocaleContext.create() factory to construct instances with proper
    canonicalization. Direct construction via __init__ is not recommended.

    Cache Management:
        LocaleContext uses an internal LRU cache for instance reuse. Use class
        methods for cache management:
        - LocaleContext.clear_cache(): Clear all cached instances
        - LocaleContext.cache_size(): Get current cache size
        - LocaleContext.cache_info(): Get detailed cache statistics

    Examples:
        >>> ctx = LocaleContext.create('en-US')
        >>> ctx.identifier
        'en_US'
        >>> ctx.object_for_key(ComponentKey.DECIMAL_SEPARATOR)
        '.'

        >>> ctx = LocaleContext.create('de_DE@currency=CHF')
        >>> ctx.object_for_key(ComponentKey.CURRENCY_CODE)
        'CHF'

        >>> # Unknown locales fall back to en_US data with warning logged
        >>> ctx = LocaleContext.create('xx_YY')
        >>> ctx.identifier  # Canonical identifier preserved
        'xx_YY'
        >>> ctx.is_fallback
        True

    Thread Safety:
        LocaleContext is immutable and thread-safe. Multiple threads can
        share the same instance without synchronization. Cache operations
        are protected by RLock.
    """

    # Class-level cache for LocaleContext instances (identity caching)
    # OrderedDict provides LRU semantics with O(1) operations
    # Note: ClassVar is excluded from dataclass fields
    _cache: ClassVar[OrderedDict[str, "LocaleContext"]] = OrderedDict()
    _cache_lock: ClassVar[RLock] = RLock()

    locale_id: LocaleIdentifier
    _babel_locale: Locale = field(repr=False)
    is_fallback: bool = False

    @classmethod
    def clear_cache(cls) -> None:
        """Clear the locale context cache.

        Use this method to free memory or reset state in tests.
        Thread-safe via RLock.
        """
        with cls._cache_lock:
            cls._cache.clear()

    @classmethod
    def cache_size(cls) -> int:
        """Get current number of cached LocaleContext instances."""
        with cls._cache_lock:
            return len(cls._cache)

    @classmethod
    def cache_info(cls) -> dict[str, int | tuple[str, ...]]:
        """Get detailed cache statistics.

        Returns:
            Dictionary with cache statistics:
            - size: Current number of cached instances
            - max_size: Maximum cache size
            - identifiers: Tuple of cached identifiers (LRU order)

        Example:
            >>> LocaleContext.clear_cache()
            >>> LocaleContext.create('en-US')
            >>> LocaleContext.cache_info()
            {'size': 1, 'max_size': 128, 'identifiers': ('en_US',)}
        """
        with cls._cache_lock:
            return {
                "size": len(cls._cache),
                "max_size": MAX_LOCALE_CACHE_SIZE,
                "identifiers": tuple(cls._cache.keys()),
            }

    @classmethod
    def create(cls, identifier: str) -> "LocaleContext":
        """Create LocaleContext with graceful fallback for unknown locales.

        The identifier is canonicalized; the canonical form is the cache key,
        so "en-US", "en_us" and "EN_US" share one instance. Unknown locales
        log a warning and use en_US data while keeping their own identifier.
        This method always succeeds - use create_or_raise() if you need
        strict validation.

        Args:
            identifier: Locale identifier in ICU, POSIX or BCP 47 form

        Returns:
            LocaleContext instance (cached).
        """
        cache_key = normalize_locale(identifier)

        with cls._cache_lock:
            if cache_key in cls._cache:
                # Move to end (mark as recently used) and return cached instance
                cls._cache.move_to_end(cache_key)
                return cls._cache[cache_key]

        locale_id = LocaleIdentifier(cache_key)
        babel_locale = _resolve_babel_locale(locale_id)
        used_fallback = babel_locale is None
        if babel_locale is None:
            logger.warning(
                "Unknown locale '%s'. Falling back to %s data", identifier, DEFAULT_LOCALE
            )
            babel_locale = get_babel_locale(DEFAULT_LOCALE)

        ctx = cls(locale_id=locale_id, _babel_locale=babel_locale, is_fallback=used_fallback)

        # Double-check pattern: another thread may have stored it meanwhile
        with cls._cache_lock:
            if cache_key in cls._cache:
                return cls._cache[cache_key]

            if len(cls._cache) >= MAX_LOCALE_CACHE_SIZE:
                cls._cache.popitem(last=False)

            cls._cache[cache_key] = ctx
            return ctx

    @classmethod
    def create_or_raise(cls, identifier: str) -> "LocaleContext":
        """Create LocaleContext or raise when no CLDR data exists.

        Args:
            identifier: Locale identifier in ICU, POSIX or BCP 47 form

        Returns:
            LocaleContext instance backed by real locale data

        Raises:
            UnknownLocaleIdentifierError: If no CLDR locale matches (a ValueError)
        """
        ctx = cls.create(identifier)
        if ctx.is_fallback:
            raise UnknownLocaleIdentifierError(identifier)
        return ctx

    @classmethod
    def current(cls) -> "LocaleContext":
        """Locale of the running process, detected once from the environment."""
        # Builder runs at most once per reset_current()
        with cls._cache_lock:
            return _current_context()

    @classmethod
    def reset_current(cls) -> None:
        """Forget the detected current locale so the next current() re-detects it."""
        with cls._cache_lock:
            _current_context.cache_clear()

    @classmethod
    def system(cls) -> "LocaleContext":
        """Locale-neutral context (empty identifier, en_US data)."""
        with cls._cache_lock:
            return _system_context()

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def identifier(self) -> str:
        return self.locale_id.identifier

    @property
    def components(self) -> dict[ComponentKey, str]:
        return self.locale_id.components

    @property
    def babel_locale(self) -> Locale:
        """Babel Locale backing the property lookups."""
        return self._babel_locale

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, LocaleContext):
            return False
        return self.identifier == other.identifier

    def __hash__(self) -> int:
        return hash(self.identifier)

    def __reduce__(self) -> tuple[Callable[..., "LocaleContext"], tuple[str, ...]]:
        # Only the identifier is serialized; data is re-resolved on load
        if not self.identifier and not self.is_fallback:
            return (LocaleContext.system, ())
        return (LocaleContext.create, (self.identifier,))

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def territory(self) -> str | None:
        """Explicit country, else the likely territory for the language.

        Example:
            >>> LocaleContext.create('en').territory
            'US'
        """
        country = self.locale_id.country_code
        if country is not None:
            return country
        language = self.locale_id.language_code
        if language is None:
            return None
        likely = get_global("likely_subtags").get(language)
        if likely is None:
            return None
        return parse_components(likely).get(ComponentKey.COUNTRY_CODE)

    @property
    def currency_code(self) -> str | None:
        explicit = self.locale_id.currency_code
        if explicit is not None:
            return explicit
        territory = self.territory
        return get_territory_currency(territory) if territory else None

    @property
    def measurement_system(self) -> str:
        return MEASUREMENT_SYSTEMS.get(self.territory or "", MEASUREMENT_METRIC)

    @property
    def quotation_delimiters(self) -> tuple[str, str, str, str]:
        """(begin, end, alternate begin, alternate end) quotation marks."""
        language = self.locale_id.language_code or ""
        return QUOTATION_DELIMITERS.get(language, DEFAULT_QUOTATION_DELIMITERS)

    @property
    def character_direction(self) -> LanguageDirection:
        return character_direction(self.identifier)

    @property
    def line_direction(self) -> LanguageDirection:
        return line_direction(self.identifier)

    @property
    def currency_symbol(self) -> str | None:
        code = self.currency_code
        if code is None:
            return None
        return str(babel_numbers.get_currency_symbol(code, locale=self._babel_locale))

    def object_for_key(self, key: ComponentKey | str) -> PropertyValue:
        """Look up a locale property by key.

        Args:
            key: ComponentKey or its string value

        Returns:
            Property value, or None when the locale has no value for the key
            (absent subtag, unknown key).

        Examples:
            >>> ctx = LocaleContext.create('de_DE')
            >>> ctx.object_for_key(ComponentKey.GROUPING_SEPARATOR)
            '.'
            >>> ctx.object_for_key("usesMetricSystem")
            True
            >>> ctx.object_for_key(ComponentKey.CALENDAR_IDENTIFIER)
            'gregorian'
        """
        try:
            key = ComponentKey(key)
        except ValueError:
            logger.debug("Unknown locale property key '%s'", key)
            return None

        if key.is_subtag:
            return self.locale_id.get(key)
        lookup = _PROPERTY_LOOKUPS.get(key)
        if lookup is None:
            return self.locale_id.get(key)
        return lookup(self)

    def display_name(self, key: ComponentKey | str, value: str) -> str | None:
        """Localized display name of a component value in this locale.

        Args:
            key: IDENTIFIER, LANGUAGE_CODE, SCRIPT_CODE, COUNTRY_CODE,
                VARIANT_CODE or CURRENCY_CODE
            value: Component value to name (e.g., "fr", "Hans", "CA")

        Returns:
            Display name, or None when CLDR has no name for the value.

        Examples:
            >>> ctx = LocaleContext.create('en_US')
            >>> ctx.display_name(ComponentKey.COUNTRY_CODE, 'DE')
            'Germany'
            >>> ctx.display_name(ComponentKey.IDENTIFIER, 'fr_CA')
            'French (Canada)'
        """
        try:
            key = ComponentKey(key)
        except ValueError:
            return None

        locale = self._babel_locale
        tables: dict[ComponentKey, Callable[[], Any]] = {
            ComponentKey.LANGUAGE_CODE: lambda: locale.languages.get(value.lower()),
            ComponentKey.SCRIPT_CODE: lambda: locale.scripts.get(value.capitalize()),
            ComponentKey.COUNTRY_CODE: lambda: locale.territories.get(value.upper()),
            ComponentKey.VARIANT_CODE: lambda: locale.variants.get(value.upper()),
            ComponentKey.CURRENCY_CODE: lambda: locale.currencies.get(value.upper()),
            ComponentKey.IDENTIFIER: lambda: get_babel_locale(value).get_display_name(locale),
        }
        lookup = tables.get(key)
        if lookup is None:
            return None
        try:
            name = lookup()
        except (UnknownLocaleError, ValueError, LookupError, AttributeError) as e:
            logger.debug("No display name for %s '%s': %s", key, value, e)
            return None
        return str(name) if name else None


_PROPERTY_LOOKUPS: dict[ComponentKey, Callable[[LocaleContext], PropertyValue]] = {
    ComponentKey.IDENTIFIER: lambda ctx: ctx.identifier,
    ComponentKey.COLLATOR_IDENTIFIER: lambda ctx: ctx.identifier,
    ComponentKey.CALENDAR_IDENTIFIER: (
        lambda ctx: ctx.locale_id.calendar_identifier or DEFAULT_CALENDAR
    ),
    ComponentKey.CURRENCY_CODE: lambda ctx: ctx.currency_code,
    ComponentKey.CURRENCY_SYMBOL: lambda ctx: ctx.currency_symbol,
    ComponentKey.MEASUREMENT_SYSTEM: lambda ctx: ctx.measurement_system,
    ComponentKey.USES_METRIC_SYSTEM: lambda ctx: ctx.measurement_system != MEASUREMENT_US,
    ComponentKey.DECIMAL_SEPARATOR: (
        lambda ctx: str(babel_numbers.get_decimal_symbol(ctx.babel_locale))
    ),
    ComponentKey.GROUPING_SEPARATOR: (
        lambda ctx: str(babel_numbers.get_group_symbol(ctx.babel_locale))
    ),
    ComponentKey.QUOTATION_BEGIN_DELIMITER: lambda ctx: ctx.quotation_delimiters[0],
    ComponentKey.QUOTATION_END_DELIMITER: lambda ctx: ctx.quotation_delimiters[1],
    ComponentKey.ALTERNATE_QUOTATION_BEGIN_DELIMITER: lambda ctx: ctx.quotation_delimiters[2],
    ComponentKey.ALTERNATE_QUOTATION_END_DELIMITER: lambda ctx: ctx.quotation_delimiters[3],
}


@lru_cache(maxsize=1)
def _current_context() -> LocaleContext:
    return LocaleContext.create(get_system_locale())


@lru_cache(maxsize=1)
def _system_context() -> LocaleContext:
    return LocaleContext(
        locale_id=LocaleIdentifier(""),
        _babel_locale=get_babel_locale(DEFAULT_LOCALE),
    )
