"""Hypothesis strategies for locale identifier testing.

Provides strategies for generating canonical component values, component
mappings and raw identifier strings (well-formed, mis-cased and garbage).

Usage:
    from hypothesis import given
    from tests.strategies.identifiers import component_mappings

    @given(components=component_mappings())
    def test_round_trip(components):
        ...
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from hypothesis import event
from hypothesis import strategies as st
from hypothesis.strategies import composite

from localekit.enums import ComponentKey

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy

# ============================================================================
# CANONICAL COMPONENT VALUES
# ============================================================================

language_codes: SearchStrategy[str] = st.from_regex(
    r"[a-z]{2,3}|[a-z]{5,8}", fullmatch=True
)

script_codes: SearchStrategy[str] = st.from_regex(r"[A-Z][a-z]{3}", fullmatch=True)

country_codes: SearchStrategy[str] = st.from_regex(r"[A-Z]{2}|[0-9]{3}", fullmatch=True)

variant_codes: SearchStrategy[str] = st.from_regex(r"[A-Z0-9]{1,8}", fullmatch=True)

extension_values: SearchStrategy[str] = st.from_regex(
    r"[a-z0-9]{3,8}(-[a-z0-9]{3,8})?", fullmatch=True
)

currency_values: SearchStrategy[str] = st.from_regex(r"[A-Z]{3}", fullmatch=True)

_COMPONENT_STRATEGIES: dict[ComponentKey, SearchStrategy[str]] = {
    ComponentKey.LANGUAGE_CODE: language_codes,
    ComponentKey.SCRIPT_CODE: script_codes,
    ComponentKey.COUNTRY_CODE: country_codes,
    ComponentKey.VARIANT_CODE: variant_codes,
    ComponentKey.CALENDAR_IDENTIFIER: extension_values,
    ComponentKey.COLLATION_IDENTIFIER: extension_values,
    ComponentKey.CURRENCY_CODE: currency_values,
    ComponentKey.NUMBERING_SYSTEM: extension_values,
}


@composite
def component_mappings(draw: st.DrawFn) -> dict[ComponentKey, str]:
    """Generate a mapping of recognized component keys to canonical values.

    Every subset of keys is possible, including the empty mapping and
    mappings without a language.

    Events emitted:
    - component_count={n}: Number of components in the mapping
    - component_language={present|absent}
    """
    keys = draw(st.sets(st.sampled_from(list(_COMPONENT_STRATEGIES))))
    components = {key: draw(_COMPONENT_STRATEGIES[key]) for key in keys}
    event(f"component_count={len(components)}")
    present = "present" if ComponentKey.LANGUAGE_CODE in components else "absent"
    event(f"component_language={present}")
    return components


# ============================================================================
# RAW IDENTIFIER STRINGS
# ============================================================================

_SAMPLE_IDENTIFIERS = [
    "en", "en_US", "en-us", "EN_us", "zh_Hans_CN", "zh-hant-TW", "sr_Latn_RS",
    "es_419", "de_DE@collation=phonebook", "ja_JP@calendar=japanese",
    "en_US_POSIX", "es__TRADITIONAL", "iw_IL", "in", "eng", "de_DD",
    "en-US-u-ca-gregory-cu-eur", "de_DE.UTF-8", "C", "POSIX", "", "_US",
    "x-klingon", "@calendar=hebrew", "ar_EG@numbers=arab;currency=egp",
]


@composite
def identifier_strings(draw: st.DrawFn) -> str:
    """Generate raw identifier strings across the whole input domain.

    Events emitted:
    - identifier_kind={sample|assembled|text}
    """
    kind = draw(st.sampled_from(["sample", "assembled", "text"]))
    event(f"identifier_kind={kind}")

    match kind:
        case "sample":
            return draw(st.sampled_from(_SAMPLE_IDENTIFIERS))
        case "assembled":
            tokens = draw(
                st.lists(
                    st.from_regex(r"[A-Za-z0-9]{0,9}", fullmatch=True),
                    min_size=1,
                    max_size=6,
                )
            )
            separator = draw(st.sampled_from(["_", "-"]))
            identifier = separator.join(tokens)
            if draw(st.booleans()):
                pairs = draw(
                    st.lists(
                        st.tuples(
                            st.sampled_from(["calendar", "Currency", "numbers", "colstrength"]),
                            st.text(max_size=6),
                        ),
                        max_size=3,
                    )
                )
                identifier += "@" + ";".join(f"{key}={value}" for key, value in pairs)
            return identifier
        case _:
            return draw(st.text(max_size=30))
