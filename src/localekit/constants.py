"""Shared constants for localekit.

This module provides centralized configuration constants used across
the identifier model, the introspection layer and the runtime locale
context. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Identifier grammar: Delimiters and the extension keyword convention
- Limits: Cache sizes and alias resolution depth
- Defaults: Fallback locale and calendar
- Locale tables: Measurement systems and quotation delimiters

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Identifier grammar
    "SUBTAG_SEPARATOR",
    "BCP47_SEPARATOR",
    "EXTENSION_PREFIX",
    "EXTENSION_SEPARATOR",
    "EXTENSION_ASSIGN",
    "ENCODING_SEPARATOR",
    "UNICODE_EXTENSION_SINGLETON",
    "UNICODE_EXTENSION_KEYS",
    "UNICODE_CALENDAR_ALIASES",
    # Limits
    "MAX_LOCALE_CACHE_SIZE",
    "MAX_ALIAS_DEPTH",
    # Defaults
    "DEFAULT_LOCALE",
    "DEFAULT_CALENDAR",
    "ROOT_LOCALE",
    "PSEUDO_LOCALES",
    # Locale tables
    "MEASUREMENT_METRIC",
    "MEASUREMENT_US",
    "MEASUREMENT_UK",
    "MEASUREMENT_SYSTEMS",
    "DEFAULT_QUOTATION_DELIMITERS",
    "QUOTATION_DELIMITERS",
]

# ============================================================================
# IDENTIFIER GRAMMAR
# ============================================================================
#
# Identifiers follow the ICU/POSIX shape:
#
#     language[_Script][_COUNTRY][_VARIANT][@keyword=value;keyword=value]
#
# BCP 47 hyphens are accepted on input and rewritten to underscores.
# Extension pairs are always separated by semicolons; that is the only
# convention produced and the only one parsed.
#
# ============================================================================

SUBTAG_SEPARATOR: str = "_"
BCP47_SEPARATOR: str = "-"
EXTENSION_PREFIX: str = "@"
EXTENSION_SEPARATOR: str = ";"
EXTENSION_ASSIGN: str = "="

# POSIX locale names carry a codeset suffix (de_DE.UTF-8)
ENCODING_SEPARATOR: str = "."

# BCP 47 Unicode locale extension: en-US-u-ca-hebrew
UNICODE_EXTENSION_SINGLETON: str = "u"

# BCP 47 two-letter keys -> ICU keyword names
UNICODE_EXTENSION_KEYS: dict[str, str] = {
    "ca": "calendar",
    "co": "collation",
    "cu": "currency",
    "nu": "numbers",
}

# BCP 47 calendar types whose ICU keyword value differs
UNICODE_CALENDAR_ALIASES: dict[str, str] = {
    "gregory": "gregorian",
    "ethioaa": "ethiopic-amete-alem",
}

# ============================================================================
# LIMITS
# ============================================================================

# Maximum cached LocaleContext instances and Babel Locale objects.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128

# Alias replacement is repeated until nothing changes. CLDR alias chains are
# at most two hops; anything deeper is a data cycle and is cut off here.
MAX_ALIAS_DEPTH: int = 8

# ============================================================================
# DEFAULTS
# ============================================================================

# Locale whose CLDR data backs unknown identifiers and the system locale.
DEFAULT_LOCALE: str = "en_US"

# Calendar reported when an identifier carries no calendar keyword.
DEFAULT_CALENDAR: str = "gregorian"

# CLDR root locale: language-neutral base data
ROOT_LOCALE: str = "root"

# Environment values that name no real locale.
PSEUDO_LOCALES: frozenset[str] = frozenset({"", "C", "POSIX"})

# ============================================================================
# LOCALE TABLES
# ============================================================================

# CLDR measurementData: every territory is metric except these.
MEASUREMENT_METRIC: str = "Metric"
MEASUREMENT_US: str = "U.S."
MEASUREMENT_UK: str = "U.K."

MEASUREMENT_SYSTEMS: dict[str, str] = {
    "US": MEASUREMENT_US,
    "LR": MEASUREMENT_US,
    "MM": MEASUREMENT_US,
    "GB": MEASUREMENT_UK,
}

# CLDR root delimiters: (begin, end, alternate begin, alternate end)
DEFAULT_QUOTATION_DELIMITERS: tuple[str, str, str, str] = ("“", "”", "‘", "’")

# Languages whose CLDR delimiters differ from root.
QUOTATION_DELIMITERS: dict[str, tuple[str, str, str, str]] = {
    "cs": ("„", "“", "‚", "‘"),
    "de": ("„", "“", "‚", "‘"),
    "es": ("«", "»", "“", "”"),
    "fr": ("«", "»", "“", "”"),
    "it": ("«", "»", "“", "”"),
    "ja": ("「", "」", "『", "』"),
    "pl": ("„", "”", "«", "»"),
    "ru": ("«", "»", "„", "“"),
    "sv": ("”", "”", "’", "’"),
    "uk": ("«", "»", "„", "“"),
}
