"""Tests for locale_utils.py.

Covers normalize_locale, get_babel_locale, clear_locale_cache and
get_system_locale. Includes property-based tests for normalization.

Python 3.13+.
"""

import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from localekit.locale_utils import (
    clear_locale_cache,
    get_babel_locale,
    get_system_locale,
    normalize_locale,
)


class TestNormalizeLocale:
    """Test normalize_locale function.

    normalize_locale returns the canonical ICU form, so "en-US", "EN-US"
    and "en_us" share one cache key.
    """

    def test_bcp47_to_icu(self) -> None:
        assert normalize_locale("en-US") == "en_US"

    def test_uppercase_input(self) -> None:
        assert normalize_locale("EN-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("en_US") == "en_US"

    def test_simple_locale(self) -> None:
        assert normalize_locale("en") == "en"

    def test_script_title_case(self) -> None:
        assert normalize_locale("zh-hans-cn") == "zh_Hans_CN"

    def test_legacy_alias_resolved(self) -> None:
        assert normalize_locale("iw") == "he"


class TestClearLocaleCache:
    """Test clear_locale_cache function."""

    def test_clear_locale_cache(self) -> None:
        get_babel_locale("en_us")
        get_babel_locale("de_de")
        assert get_babel_locale.cache_info().currsize > 0

        clear_locale_cache()

        assert get_babel_locale.cache_info().currsize == 0

    def test_clear_locale_cache_idempotent(self) -> None:
        clear_locale_cache()
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0


class TestGetBabelLocale:
    """Test get_babel_locale function with caching."""

    def test_bcp47_format(self) -> None:
        locale = get_babel_locale("en-US")
        assert isinstance(locale, Locale)
        assert locale.language == "en"
        assert locale.territory == "US"

    def test_posix_format(self) -> None:
        locale = get_babel_locale("de_DE")
        assert locale.language == "de"
        assert locale.territory == "DE"

    def test_simple_locale(self) -> None:
        locale = get_babel_locale("fr")
        assert locale.language == "fr"
        assert locale.territory is None

    def test_extensions_stripped(self) -> None:
        """Keyword extensions are not part of Babel's locale data."""
        locale = get_babel_locale("ja_JP@calendar=japanese")
        assert str(locale) == "ja_JP"

    def test_codeset_stripped(self) -> None:
        assert str(get_babel_locale("de_DE.UTF-8")) == "de_DE"

    def test_alias_resolved_before_lookup(self) -> None:
        assert get_babel_locale("iw_IL").language == "he"

    def test_caching(self) -> None:
        """Repeated calls return cached Locale object."""
        assert get_babel_locale("pt-BR") is get_babel_locale("pt-BR")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("zz_ZZ")


class TestGetSystemLocale:
    """Test get_system_locale function with environment and OS detection.

    All locale output is canonicalized via normalize_locale.
    """

    def test_getlocale_success(self) -> None:
        with patch("locale.getlocale", return_value=("en_US", "UTF-8")):
            assert get_system_locale() == "en_US"

    def test_getlocale_with_encoding(self) -> None:
        with patch("locale.getlocale", return_value=("de_DE.UTF-8", "UTF-8")):
            assert get_system_locale() == "de_DE"

    def test_getlocale_c_filtered(self) -> None:
        with patch("locale.getlocale", return_value=("C", None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "fr_FR"}, clear=True):
                assert get_system_locale() == "fr_FR"

    def test_getlocale_posix_filtered(self) -> None:
        with patch("locale.getlocale", return_value=("POSIX", None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "it_IT"}, clear=True):
                assert get_system_locale() == "it_IT"

    def test_getlocale_none_fallback(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "es_ES"}, clear=True):
                assert get_system_locale() == "es_ES"

    def test_getlocale_valueerror_fallback(self) -> None:
        with patch("locale.getlocale", side_effect=ValueError("mock error")):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "pt_BR"}, clear=True):
                assert get_system_locale() == "pt_BR"

    def test_getlocale_c_with_codeset_filtered(self) -> None:
        with patch("locale.getlocale", return_value=("C.UTF-8", "UTF-8")):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "nl_NL.UTF-8"}, clear=True):
                assert get_system_locale() == "nl_NL"

    def test_env_var_posix_with_codeset_filtered(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": "POSIX.UTF-8", "LANG": "sv_SE"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "sv_SE"

    def test_only_pseudo_locales_gives_default(self) -> None:
        with patch("locale.getlocale", return_value=("C.UTF-8", "UTF-8")):  # noqa: SIM117
            with patch.dict(os.environ, {"LANG": "C.UTF-8"}, clear=True):
                assert get_system_locale() == "en_US"

    def test_lc_all_priority(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": "de_DE", "LC_MESSAGES": "fr_FR", "LANG": "en_US"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "de_DE"

    def test_lc_messages_fallback(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_MESSAGES": "fr_FR", "LANG": "en_US"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "fr_FR"

    def test_env_var_with_encoding(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            with patch.dict(os.environ, {"LANG": "zh_CN.UTF-8"}, clear=True):
                assert get_system_locale() == "zh_CN"

    def test_env_var_pseudo_locales_filtered(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            env = {"LC_ALL": "C", "LC_MESSAGES": "POSIX", "LANG": "ko_KR"}
            with patch.dict(os.environ, env, clear=True):
                assert get_system_locale() == "ko_KR"

    def test_env_var_legacy_alias(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):
            with patch.dict(os.environ, {"LANG": "iw_IL.UTF-8"}, clear=True):
                assert get_system_locale() == "he_IL"

    def test_no_locale_default_fallback(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {}, clear=True):
                assert get_system_locale() == "en_US"

    def test_no_locale_raise_on_failure(self) -> None:
        with patch("locale.getlocale", return_value=(None, None)):  # noqa: SIM117
            with patch.dict(os.environ, {}, clear=True):
                with pytest.raises(RuntimeError, match="Could not determine system locale"):
                    get_system_locale(raise_on_failure=True)


# Hypothesis property-based tests


@given(locale_code=st.from_regex(r"[a-zA-Z]{2}([-_][a-zA-Z]{2})?", fullmatch=True))
def test_property_normalize_locale_idempotent(locale_code: str) -> None:
    """Property: normalize_locale is idempotent."""
    event(f"separator={'-' if '-' in locale_code else '_'}")
    normalized_once = normalize_locale(locale_code)
    assert normalize_locale(normalized_once) == normalized_once


@given(
    lang=st.from_regex(r"[a-z]{2}", fullmatch=True),
    region=st.from_regex(r"[A-Z]{2}", fullmatch=True),
)
def test_property_normalize_locale_separator_independent(lang: str, region: str) -> None:
    """Property: hyphen and underscore spellings normalize identically."""
    event("outcome=converted")
    assert normalize_locale(f"{lang}-{region}") == normalize_locale(f"{lang}_{region}")
