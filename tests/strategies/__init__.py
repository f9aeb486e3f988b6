"""Hypothesis strategies for localekit property-based testing.

Strategies are organized by domain:

- identifiers: Component values, component mappings and identifier strings

Usage:
    from tests.strategies import component_mappings, identifier_strings
    from tests.strategies.identifiers import language_codes, script_codes

Event-Emitting Strategies:
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - component_mappings, identifier_strings
"""

from .identifiers import (
    component_mappings,
    country_codes,
    extension_values,
    identifier_strings,
    language_codes,
    script_codes,
    variant_codes,
)

__all__ = [
    "component_mappings",
    "country_codes",
    "extension_values",
    "identifier_strings",
    "language_codes",
    "script_codes",
    "variant_codes",
]
