"""Runtime locale objects backed by Babel CLDR data.

Exports:
    LocaleContext: Immutable locale value with property lookups

Python 3.13+.
"""

from .locale_context import LocaleContext

__all__ = ["LocaleContext"]
