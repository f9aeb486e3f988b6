"""Locale identifier model: parsing, composition and canonicalization.

Identifiers are decomposed into a mapping of ComponentKey to string and
composed back deterministically. Every function here is total over str:
malformed segments are skipped, never reported as errors, so callers in
display and enumeration paths can rely on a result for any input.

Grammar (one left-to-right pass, no backtracking):

    subtags     language [sep script] [sep country] [sep variant...]
    sep         "_" | "-"
    extensions  "@" key "=" value (";" key "=" value)*

The CLDR root locale name "root" is accepted as a language even though it
has four letters.

Hyphenated input may also carry a BCP 47 Unicode extension
(en-US-u-ca-hebrew), which is folded into the same keyword components.

Alias data (iw -> he, eng -> en, DD -> DE) comes from Babel's CLDR tables,
the same ones Babel consults in Locale.parse().

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from functools import lru_cache
from typing import Any

from localekit.constants import (
    BCP47_SEPARATOR,
    ENCODING_SEPARATOR,
    EXTENSION_ASSIGN,
    EXTENSION_PREFIX,
    EXTENSION_SEPARATOR,
    MAX_ALIAS_DEPTH,
    ROOT_LOCALE,
    SUBTAG_SEPARATOR,
    UNICODE_CALENDAR_ALIASES,
    UNICODE_EXTENSION_KEYS,
    UNICODE_EXTENSION_SINGLETON,
)
from localekit.enums import EXTENSION_KEYS, SUBTAG_KEYS, ComponentKey

__all__ = [
    "LocaleIdentifier",
    "canonicalize",
    "canonicalize_language_tag",
    "compose_identifier",
    "parse_components",
    "subtag_identifier",
]

logger = logging.getLogger(__name__)

type Components = dict[ComponentKey, str]

# Scan slots, in order
_LANGUAGE, _SCRIPT, _COUNTRY, _VARIANT = range(4)


# ============================================================================
# SUBTAG SHAPES
# ============================================================================


def _is_alpha(token: str) -> bool:
    return token.isascii() and token.isalpha()


def _is_alnum(token: str) -> bool:
    return token.isascii() and token.isalnum()


def _is_language(token: str) -> bool:
    return _is_alpha(token) and (2 <= len(token) <= 3 or 5 <= len(token) <= 8)


def _is_script(token: str) -> bool:
    return _is_alpha(token) and len(token) == 4


def _is_country(token: str) -> bool:
    if len(token) == 2:
        return _is_alpha(token)
    return len(token) == 3 and token.isascii() and token.isdigit()


def _is_variant(token: str, slot: int) -> bool:
    if not _is_alnum(token):
        return False
    if slot == _VARIANT:
        return True
    # Before the country slot a variant must not look like any other subtag
    return 5 <= len(token) <= 8 or (len(token) == 4 and token[0].isdigit())


def _normalize_extension_value(key: ComponentKey, value: str) -> str:
    value = value.strip()
    if key is ComponentKey.CURRENCY_CODE:
        return value.upper()
    return value.lower()


# ============================================================================
# PARSING
# ============================================================================


def _scan_unicode_extension(tokens: list[str], components: Components) -> None:
    """Fold BCP 47 -u- keyword pairs into extension components."""
    keyword: str | None = None
    values: list[str] = []

    def flush() -> None:
        key = ComponentKey.from_keyword(keyword) if keyword else None
        if key is None or not values:
            return
        value = BCP47_SEPARATOR.join(values).lower()
        if key is ComponentKey.CALENDAR_IDENTIFIER:
            value = UNICODE_CALENDAR_ALIASES.get(value, value)
        components[key] = _normalize_extension_value(key, value)

    for token in tokens:
        if len(token) == 1:
            # Next singleton ends this extension
            break
        if len(token) == 2 and _is_alnum(token):
            flush()
            keyword = UNICODE_EXTENSION_KEYS.get(token.lower())
            values = []
        elif 3 <= len(token) <= 8 and _is_alnum(token) and keyword is not None:
            values.append(token)
    flush()


def _scan_subtags(main: str, components: Components) -> None:
    bcp47 = BCP47_SEPARATOR in main
    tokens = main.replace(BCP47_SEPARATOR, SUBTAG_SEPARATOR).split(SUBTAG_SEPARATOR)
    slot = _LANGUAGE
    variants: list[str] = []

    for index, token in enumerate(tokens):
        if not token:
            # Empty subtag: the current optional slot is absent
            slot = _SCRIPT if slot == _LANGUAGE else _VARIANT
            continue
        if bcp47 and len(token) == 1:
            if token.lower() == UNICODE_EXTENSION_SINGLETON:
                _scan_unicode_extension(tokens[index + 1 :], components)
            break
        if slot == _LANGUAGE and (_is_language(token) or token.lower() == ROOT_LOCALE):
            components[ComponentKey.LANGUAGE_CODE] = token.lower()
            slot = _SCRIPT
        elif slot <= _SCRIPT and _is_script(token):
            components[ComponentKey.SCRIPT_CODE] = token.capitalize()
            slot = _COUNTRY
        elif slot <= _COUNTRY and _is_country(token):
            components[ComponentKey.COUNTRY_CODE] = token.upper()
            slot = _VARIANT
        elif _is_variant(token, slot):
            variants.append(token.upper())
            slot = _VARIANT
        else:
            logger.debug("Ignoring subtag '%s' in '%s'", token, main)

    if variants:
        components[ComponentKey.VARIANT_CODE] = SUBTAG_SEPARATOR.join(variants)


def _scan_extensions(extensions: str, components: Components) -> None:
    for segment in extensions.split(EXTENSION_SEPARATOR):
        keyword, assign, value = segment.partition(EXTENSION_ASSIGN)
        key = ComponentKey.from_keyword(keyword)
        if not assign or key is None or not value.strip():
            if segment.strip():
                logger.debug("Ignoring extension segment '%s'", segment)
            continue
        components[key] = _normalize_extension_value(key, value)


def parse_components(identifier: str) -> Components:
    """Split a locale identifier into its components.

    Best effort: segments that fit no slot of the grammar are skipped, so the
    result may be partial or empty but the call never fails.

    Args:
        identifier: Locale identifier in ICU, POSIX or BCP 47 form

    Returns:
        New dict of ComponentKey to normalized value. Language is lowercase,
        script title-case, country and variant uppercase, extension values
        lowercase (currency codes uppercase).

    Example:
        >>> parse_components("zh_Hans_CN") == {
        ...     ComponentKey.LANGUAGE_CODE: "zh",
        ...     ComponentKey.SCRIPT_CODE: "Hans",
        ...     ComponentKey.COUNTRY_CODE: "CN",
        ... }
        True
        >>> parse_components("en-US-u-ca-gregory")[ComponentKey.CALENDAR_IDENTIFIER]
        'gregorian'
    """
    components: Components = {}
    main, _, extensions = identifier.strip().partition(EXTENSION_PREFIX)
    main = main.split(ENCODING_SEPARATOR, 1)[0]

    _scan_subtags(main, components)
    if extensions:
        _scan_extensions(extensions, components)
    return components


# ============================================================================
# COMPOSITION
# ============================================================================


def _coerce_key(key: ComponentKey | str) -> ComponentKey | None:
    if isinstance(key, ComponentKey):
        return key
    try:
        return ComponentKey(key)
    except ValueError:
        return None


def compose_identifier(components: Mapping[ComponentKey | str, str]) -> str:
    """Compose components into an identifier string.

    Output order is language, script, country, variant, then extensions
    sorted by keyword, independent of the mapping's iteration order. Keys
    that are not identifier components are ignored.

    Example:
        >>> compose_identifier({ComponentKey.COUNTRY_CODE: "CA",
        ...                     ComponentKey.LANGUAGE_CODE: "fr"})
        'fr_CA'
        >>> compose_identifier({"languageCode": "es", "variantCode": "TRADITIONAL"})
        'es__TRADITIONAL'
    """
    values: Components = {}
    for raw_key, value in components.items():
        key = _coerce_key(raw_key)
        if key is not None and value:
            values[key] = value

    language, script, country, variant = (values.get(key) for key in SUBTAG_KEYS)
    parts = [language or ""]
    if script:
        parts.append(script)
    if country or variant:
        parts.append(country or "")
    if variant:
        parts.append(variant)
    identifier = SUBTAG_SEPARATOR.join(parts)

    pairs = [
        f"{key.keyword}{EXTENSION_ASSIGN}{values[key]}"
        for key in EXTENSION_KEYS
        if key in values
    ]
    if pairs:
        identifier += EXTENSION_PREFIX + EXTENSION_SEPARATOR.join(pairs)
    return identifier


def subtag_identifier(identifier: str) -> str:
    """Identifier with extensions and codeset stripped (en_US@currency=EUR -> en_US)."""
    components = parse_components(identifier)
    return compose_identifier({key: components[key] for key in SUBTAG_KEYS if key in components})


# ============================================================================
# CANONICALIZATION
# ============================================================================


@lru_cache(maxsize=1)
def _alias_tables() -> tuple[Mapping[str, Any], Mapping[str, Any], Mapping[str, Any]]:
    """Babel's CLDR language, script and territory alias tables (loaded once)."""
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel.core import get_global  # noqa: PLC0415

    return (
        get_global("language_aliases"),
        get_global("script_aliases"),
        get_global("territory_aliases"),
    )


def _resolve_aliases_once(components: Components) -> Components:
    language_aliases, script_aliases, territory_aliases = _alias_tables()
    resolved = dict(components)

    language = resolved.get(ComponentKey.LANGUAGE_CODE)
    if language is not None and language in language_aliases:
        replacement = parse_components(language_aliases[language])
        if ComponentKey.LANGUAGE_CODE in replacement:
            resolved[ComponentKey.LANGUAGE_CODE] = replacement[ComponentKey.LANGUAGE_CODE]
            # Replacement script/country only fill empty slots (sh -> sr_Latn)
            for key in (ComponentKey.SCRIPT_CODE, ComponentKey.COUNTRY_CODE):
                if key in replacement and key not in resolved:
                    resolved[key] = replacement[key]

    script = resolved.get(ComponentKey.SCRIPT_CODE)
    if script is not None:
        replacement_script = script_aliases.get(script)
        if replacement_script and _is_script(replacement_script):
            resolved[ComponentKey.SCRIPT_CODE] = replacement_script.capitalize()

    country = resolved.get(ComponentKey.COUNTRY_CODE)
    if country is not None:
        # Split territories map to several successors; CLDR lists the main one first
        successors = territory_aliases.get(country) or ()
        if successors and _is_country(successors[0]):
            resolved[ComponentKey.COUNTRY_CODE] = successors[0].upper()

    return resolved


def _resolve_aliases(components: Components) -> Components:
    for _ in range(MAX_ALIAS_DEPTH):
        resolved = _resolve_aliases_once(components)
        if resolved == components:
            return resolved
        logger.debug("Resolved aliases %s -> %s", components, resolved)
        components = resolved
    return components


def canonicalize(identifier: str) -> str:
    """Canonicalize casing and legacy aliases of a locale identifier.

    Identifiers with no recognizable component are returned unchanged.
    Idempotent: canonicalize(canonicalize(s)) == canonicalize(s).

    Args:
        identifier: Locale identifier in ICU, POSIX or BCP 47 form

    Returns:
        Canonical ICU-style identifier

    Example:
        >>> canonicalize("EN-us")
        'en_US'
        >>> canonicalize("iw_IL")
        'he_IL'
        >>> canonicalize("!!!")
        '!!!'
    """
    components = parse_components(identifier)
    if not components:
        return identifier
    return compose_identifier(_resolve_aliases(components))


def canonicalize_language_tag(identifier: str) -> str:
    """Canonicalize an identifier as a language tag (language[-Script]).

    Country, variant and extensions are dropped; the result is hyphen-joined
    like a BCP 47 language tag. Input without a language is returned unchanged.

    Example:
        >>> canonicalize_language_tag("zh_hans_CN")
        'zh-Hans'
        >>> canonicalize_language_tag("iw")
        'he'
    """
    components = parse_components(identifier)
    if ComponentKey.LANGUAGE_CODE not in components:
        return identifier
    language_only = {
        key: value
        for key, value in components.items()
        if key in (ComponentKey.LANGUAGE_CODE, ComponentKey.SCRIPT_CODE)
    }
    resolved = _resolve_aliases(language_only)
    parts = [resolved[ComponentKey.LANGUAGE_CODE]]
    if ComponentKey.SCRIPT_CODE in resolved:
        parts.append(resolved[ComponentKey.SCRIPT_CODE])
    return BCP47_SEPARATOR.join(parts)


# ============================================================================
# VALUE TYPE
# ============================================================================


@dataclass(frozen=True, slots=True)
class LocaleIdentifier:
    """Immutable canonical locale identifier.

    Compared and hashed by the canonical string. Components are derived on
    demand; re-parsing the canonical string always yields the same mapping.

    Use LocaleIdentifier.parse() or LocaleIdentifier.from_components();
    direct construction skips canonicalization.

    Example:
        >>> loc = LocaleIdentifier.parse("en-us")
        >>> str(loc), loc.country_code
        ('en_US', 'US')
        >>> loc == LocaleIdentifier.from_components({"languageCode": "en",
        ...                                          "countryCode": "US"})
        True
    """

    identifier: str

    @classmethod
    def parse(cls, raw: str) -> LocaleIdentifier:
        return cls(canonicalize(raw))

    @classmethod
    def from_components(cls, components: Mapping[ComponentKey | str, str]) -> LocaleIdentifier:
        return cls(canonicalize(compose_identifier(components)))

    def __str__(self) -> str:
        return self.identifier

    @property
    def components(self) -> Components:
        """Component mapping of the identifier (a new dict on every call)."""
        return parse_components(self.identifier)

    def get(self, key: ComponentKey) -> str | None:
        return self.components.get(key)

    @property
    def language_code(self) -> str | None:
        return self.get(ComponentKey.LANGUAGE_CODE)

    @property
    def script_code(self) -> str | None:
        return self.get(ComponentKey.SCRIPT_CODE)

    @property
    def country_code(self) -> str | None:
        return self.get(ComponentKey.COUNTRY_CODE)

    @property
    def variant_code(self) -> str | None:
        return self.get(ComponentKey.VARIANT_CODE)

    @property
    def calendar_identifier(self) -> str | None:
        return self.get(ComponentKey.CALENDAR_IDENTIFIER)

    @property
    def collation_identifier(self) -> str | None:
        return self.get(ComponentKey.COLLATION_IDENTIFIER)

    @property
    def currency_code(self) -> str | None:
        return self.get(ComponentKey.CURRENCY_CODE)

    @property
    def numbering_system(self) -> str | None:
        return self.get(ComponentKey.NUMBERING_SYSTEM)
