"""Tests for the localekit exception hierarchy.

Python 3.13+.
"""

import pytest

from localekit.errors import LocaleKitError, UnknownLocaleIdentifierError


class TestUnknownLocaleIdentifierError:
    def test_message_and_identifier(self) -> None:
        error = UnknownLocaleIdentifierError("xx_YY")
        assert str(error) == "Unknown locale identifier 'xx_YY'"
        assert error.identifier == "xx_YY"

    def test_reason_appended(self) -> None:
        error = UnknownLocaleIdentifierError("xx", "no CLDR data")
        assert str(error) == "Unknown locale identifier 'xx': no CLDR data"

    def test_catchable_as_value_error(self) -> None:
        with pytest.raises(ValueError, match="xx"):
            raise UnknownLocaleIdentifierError("xx")

    def test_catchable_as_base(self) -> None:
        with pytest.raises(LocaleKitError):
            raise UnknownLocaleIdentifierError("xx")
