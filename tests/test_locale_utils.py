"""Tests for locale normalization and recognition.

Validates comparison keys, tag well-formedness, CLDR-backed locale
recognition of path tokens, and lookups against a configuration.
"""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from localeroute.locale_utils import (
    clear_locale_cache,
    find_locale,
    is_configured,
    is_well_formed_locale,
    looks_like_locale,
    normalize_locale,
)
from localeroute.routing.config import LocaleConfig
from tests.strategies.routing import LOCALE_POOL, locale_spellings


class TestNormalizeLocale:
    """Test normalize_locale comparison keys."""

    def test_lowercases(self) -> None:
        """Uppercase codes fold to lowercase."""
        assert normalize_locale("PT") == "pt"

    def test_underscore_becomes_hyphen(self) -> None:
        """POSIX separators fold to BCP-47 separators."""
        assert normalize_locale("pt_BR") == "pt-br"
        assert normalize_locale("en-AU") == normalize_locale("en_AU")

    def test_already_normalized_is_unchanged(self) -> None:
        """Normalized keys are fixed points."""
        assert normalize_locale("zh-hant") == "zh-hant"

    @given(code=st.sampled_from(LOCALE_POOL), data=st.data())
    def test_spelling_variants_share_a_key(self, code: str, data: st.DataObject) -> None:
        """Every case/separator variant of a code normalizes identically."""
        variant = data.draw(locale_spellings(code))
        assert normalize_locale(variant) == normalize_locale(code)

    @given(code=st.text(max_size=20))
    def test_idempotent(self, code: str) -> None:
        """Normalizing twice equals normalizing once."""
        assert normalize_locale(normalize_locale(code)) == normalize_locale(code)


class TestIsWellFormedLocale:
    """Test language tag syntax validation."""

    def test_accepts_common_codes(self) -> None:
        """Language, territory and script forms are accepted in both separator styles."""
        for code in ("en", "pt_BR", "pt-BR", "zh-Hant", "es_US"):
            assert is_well_formed_locale(code), code

    def test_rejects_empty(self) -> None:
        """Empty string is not a tag."""
        assert not is_well_formed_locale("")

    def test_rejects_encoding_and_modifier_suffixes(self) -> None:
        """POSIX locale suffixes are not part of a language tag."""
        assert not is_well_formed_locale("en_US.UTF-8")
        assert not is_well_formed_locale("de_DE@euro")

    def test_rejects_non_ascii(self) -> None:
        """Non-ASCII letters never form a tag."""
        assert not is_well_formed_locale("español")

    def test_rejects_non_letter_language(self) -> None:
        """The language subtag must be letters only."""
        assert not is_well_formed_locale("123")
        assert not is_well_formed_locale("e!n")


class TestLooksLikeLocale:
    """Test CLDR-backed recognition of locale-like path segments."""

    def test_known_languages(self) -> None:
        """Languages in Babel's CLDR data are recognized, with or without region."""
        assert looks_like_locale("fr")
        assert looks_like_locale("fr-AU")
        assert looks_like_locale("pt_BR")

    def test_route_segments_are_not_locales(self) -> None:
        """Ordinary route names are not mistaken for locales."""
        for token in ("start", "blog", "about", "getting-started", "test.json"):
            assert not looks_like_locale(token), token

    def test_root_is_not_a_language(self) -> None:
        """CLDR's 'root' locale is not a language segment."""
        assert not looks_like_locale("root")

    def test_cache_can_be_cleared(self) -> None:
        """clear_locale_cache empties the recognition cache."""
        looks_like_locale("fr")
        assert looks_like_locale.cache_info().currsize >= 1
        clear_locale_cache()
        assert looks_like_locale.cache_info().currsize == 0


class TestFindLocale:
    """Test lookups against the configured locale set."""

    def test_matches_configured_spelling_case_insensitively(self) -> None:
        """PT and pt match identically; output keeps configured spelling."""
        config = LocaleConfig(default_locale="en", locales=["en", "pt", "it"])
        upper = find_locale("PT", config)
        lower = find_locale("pt", config)
        assert upper is lower
        assert upper is not None
        assert upper.path == "pt"

    def test_separator_variants_match(self) -> None:
        """en_AU and en-AU name the same configured locale."""
        config = LocaleConfig(default_locale="en_AU", locales=["en_AU", "pt_BR", "es_US"])
        entry = find_locale("en-au", config)
        assert entry is not None
        assert entry.path == "en_AU"

    def test_matches_alias_codes(self) -> None:
        """Any code of a {path, codes} record finds the record."""
        config = LocaleConfig.from_mapping(
            {
                "defaultLocale": "en",
                "locales": ["en", {"path": "spanish", "codes": ["es", "es-CR"]}],
            }
        )
        entry = find_locale("es_cr", config)
        assert entry is not None
        assert entry.path == "spanish"

    def test_unconfigured_is_none(self) -> None:
        """Codes outside the configuration are not found."""
        config = LocaleConfig(default_locale="en", locales=["en", "pt"])
        assert find_locale("fr", config) is None
        assert not is_configured("fr", config)
        assert is_configured("EN", config)
