"""Enumerations for localekit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so a ComponentKey compares equal to
its plain string value and hashes the same way.

Python 3.13+.
"""

from __future__ import annotations

from enum import IntEnum, StrEnum

__all__ = [
    "EXTENSION_KEYS",
    "SUBTAG_KEYS",
    "ComponentKey",
    "LanguageDirection",
]


class ComponentKey(StrEnum):
    """Well-known locale component and property keys.

    Subtag and extension keys name the components of an identifier; the
    remaining keys name derived locale properties looked up through
    LocaleContext.object_for_key().

    StrEnum provides automatic string conversion:
    str(ComponentKey.LANGUAGE_CODE) == "languageCode"
    """

    IDENTIFIER = "identifier"
    """Canonical identifier string: en_US@calendar=hebrew"""

    LANGUAGE_CODE = "languageCode"
    """Primary language subtag: en"""

    SCRIPT_CODE = "scriptCode"
    """Script subtag: Hans"""

    COUNTRY_CODE = "countryCode"
    """Region subtag: US, 419"""

    VARIANT_CODE = "variantCode"
    """Variant subtag: POSIX"""

    CALENDAR_IDENTIFIER = "calendarIdentifier"
    """Calendar keyword: @calendar=hebrew"""

    COLLATION_IDENTIFIER = "collationIdentifier"
    """Collation keyword: @collation=phonebook"""

    CURRENCY_CODE = "currencyCode"
    """Currency keyword: @currency=EUR"""

    NUMBERING_SYSTEM = "numberingSystem"
    """Numbering system keyword: @numbers=arab"""

    COLLATOR_IDENTIFIER = "collatorIdentifier"
    QUOTATION_BEGIN_DELIMITER = "quotationBeginDelimiter"
    QUOTATION_END_DELIMITER = "quotationEndDelimiter"
    ALTERNATE_QUOTATION_BEGIN_DELIMITER = "alternateQuotationBeginDelimiter"
    ALTERNATE_QUOTATION_END_DELIMITER = "alternateQuotationEndDelimiter"
    USES_METRIC_SYSTEM = "usesMetricSystem"
    MEASUREMENT_SYSTEM = "measurementSystem"
    DECIMAL_SEPARATOR = "decimalSeparator"
    GROUPING_SEPARATOR = "groupingSeparator"
    CURRENCY_SYMBOL = "currencySymbol"

    @property
    def keyword(self) -> str | None:
        """Keyword used for this key inside an @-extension, or None."""
        return _EXTENSION_KEYWORDS.get(self)

    @property
    def is_subtag(self) -> bool:
        return self in SUBTAG_KEYS

    @property
    def is_extension(self) -> bool:
        return self in _EXTENSION_KEYWORDS

    @classmethod
    def from_keyword(cls, keyword: str) -> ComponentKey | None:
        """Map an extension keyword (case-insensitive) back to its key.

        Example:
            >>> ComponentKey.from_keyword("Calendar")
            <ComponentKey.CALENDAR_IDENTIFIER: 'calendarIdentifier'>
            >>> ComponentKey.from_keyword("colcaselevel") is None
            True
        """
        return _KEYWORD_TO_KEY.get(keyword.strip().lower())


class LanguageDirection(IntEnum):
    """Writing direction of characters within a line, or lines within a block."""

    UNKNOWN = 0
    LEFT_TO_RIGHT = 1
    RIGHT_TO_LEFT = 2
    TOP_TO_BOTTOM = 3
    BOTTOM_TO_TOP = 4


# Positional subtags in composition order
SUBTAG_KEYS: tuple[ComponentKey, ...] = (
    ComponentKey.LANGUAGE_CODE,
    ComponentKey.SCRIPT_CODE,
    ComponentKey.COUNTRY_CODE,
    ComponentKey.VARIANT_CODE,
)

_EXTENSION_KEYWORDS: dict[ComponentKey, str] = {
    ComponentKey.CALENDAR_IDENTIFIER: "calendar",
    ComponentKey.COLLATION_IDENTIFIER: "collation",
    ComponentKey.CURRENCY_CODE: "currency",
    ComponentKey.NUMBERING_SYSTEM: "numbers",
}

_KEYWORD_TO_KEY: dict[str, ComponentKey] = {
    keyword: key for key, keyword in _EXTENSION_KEYWORDS.items()
}

# Extension keys in composition order (sorted by keyword)
EXTENSION_KEYS: tuple[ComponentKey, ...] = tuple(
    sorted(_EXTENSION_KEYWORDS, key=_EXTENSION_KEYWORDS.__getitem__)
)
