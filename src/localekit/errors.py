"""localekit exception hierarchy.

The identifier model and direction lookups are total and never raise.
Errors exist only for callers that opt into strict validation.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["LocaleKitError", "UnknownLocaleIdentifierError"]


class LocaleKitError(Exception):
    """Base exception for all localekit errors."""


class UnknownLocaleIdentifierError(LocaleKitError, ValueError):
    """Identifier has no CLDR locale data.

    Raised by LocaleContext.create_or_raise(). Subclasses ValueError so
    callers that already guard Babel's Locale.parse() keep working.

    Attributes:
        identifier: The identifier as given by the caller
    """

    def __init__(self, identifier: str, reason: str | None = None) -> None:
        """Initialize UnknownLocaleIdentifierError.

        Args:
            identifier: The identifier that failed to resolve
            reason: Optional detail from the underlying lookup
        """
        message = f"Unknown locale identifier '{identifier}'"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.identifier = identifier
