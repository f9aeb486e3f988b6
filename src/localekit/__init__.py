"""localekit - Locale identifier model with CLDR-backed locale objects.

Parses locale identifiers into named components, composes components back
into canonical identifiers, resolves legacy aliases and answers writing
direction queries. LocaleContext layers object-style property lookups,
equality and serialization on top, using Babel for CLDR data.

Public API:
    parse_components - Split an identifier into ComponentKey -> value
    compose_identifier - Inverse of parse_components
    canonicalize - Normalize casing and aliases of an identifier
    canonicalize_language_tag - Same, restricted to language[-Script]
    character_direction / line_direction - Writing direction by language
    LocaleIdentifier - Immutable canonical identifier value
    LocaleContext - Locale object with CLDR property lookups
    ComponentKey, LanguageDirection - Enumerations

Exceptions:
    LocaleKitError - Base exception class
    UnknownLocaleIdentifierError - Strict lookup of an unknown locale

Submodules:
    localekit.introspection - ISO code tables, available identifiers, LCIDs
    localekit.runtime.locale_context - Thread-safe LocaleContext
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .direction import character_direction, line_direction
from .enums import ComponentKey, LanguageDirection
from .errors import LocaleKitError, UnknownLocaleIdentifierError
from .identifiers import (
    LocaleIdentifier,
    canonicalize,
    canonicalize_language_tag,
    compose_identifier,
    parse_components,
)
from .runtime import LocaleContext

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("localekit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ComponentKey",
    "LanguageDirection",
    "LocaleContext",
    "LocaleIdentifier",
    "LocaleKitError",
    "UnknownLocaleIdentifierError",
    "__version__",
    "canonicalize",
    "canonicalize_language_tag",
    "character_direction",
    "compose_identifier",
    "line_direction",
    "parse_components",
]
