"""Tests for base stripping, locale segment matching and path helpers."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from localeroute.enums import SegmentKind, TrailingSlash
from localeroute.routing.config import LocaleConfig
from localeroute.routing.path_matcher import (
    apply_trailing_slash,
    has_trailing_slash,
    join_path,
    match_path,
    strip_base,
)
from tests.strategies.routing import LOCALE_POOL, locale_spellings, page_paths


@pytest.fixture
def config() -> LocaleConfig:
    """en/pt/it under /new-site."""
    return LocaleConfig(default_locale="en", locales=["en", "pt", "it"], base="/new-site")


class TestStripBase:
    """Test strip_base."""

    def test_no_base(self) -> None:
        """Without a base the path is unchanged."""
        assert strip_base("/pt/start", "") == "/pt/start"

    def test_base_removed(self) -> None:
        """The base prefix is removed."""
        assert strip_base("/new-site/pt/start", "/new-site") == "/pt/start"

    def test_base_itself_is_root(self) -> None:
        """The base with or without trailing slash is the site root."""
        assert strip_base("/new-site", "/new-site") == "/"
        assert strip_base("/new-site/", "/new-site") == "/"

    def test_outside_base(self) -> None:
        """Paths merely sharing a prefix are outside the site."""
        assert strip_base("/new-sitemap", "/new-site") is None
        assert strip_base("/pt/start", "/new-site") is None


class TestJoinAndSlash:
    """Test join_path and trailing-slash helpers."""

    def test_join_collapses_slashes(self) -> None:
        """Fragments join with single slashes and no trailing slash."""
        assert join_path("/new-site", "pt", "/about/") == "/new-site/pt/about"
        assert join_path("", "", "") == "/"

    def test_has_trailing_slash(self) -> None:
        """The root does not count as having a trailing slash."""
        assert has_trailing_slash("/start/")
        assert not has_trailing_slash("/start")
        assert not has_trailing_slash("/")

    @pytest.mark.parametrize(
        ("policy", "like", "expected"),
        [
            (TrailingSlash.ALWAYS, None, "/en/"),
            (TrailingSlash.NEVER, "/x/", "/en"),
            (TrailingSlash.IGNORE, None, "/en"),
            (TrailingSlash.IGNORE, "/it/start/", "/en/"),
            (TrailingSlash.IGNORE, "/it/start", "/en"),
        ],
    )
    def test_apply_policy(self, policy: TrailingSlash, like: str | None, expected: str) -> None:
        """Policies shape generated paths; IGNORE copies the reference path."""
        assert apply_trailing_slash("/en", policy, like=like) == expected

    @pytest.mark.parametrize("policy", list(TrailingSlash))
    def test_root_is_always_slash(self, policy: TrailingSlash) -> None:
        """The root is '/' under every policy."""
        assert apply_trailing_slash("/", policy, like="/x/") == "/"


class TestMatchPath:
    """Test match_path."""

    def test_configured_segment(self, config: LocaleConfig) -> None:
        """A configured locale segment is split off."""
        match = match_path("/new-site/pt/start", config)
        assert match is not None
        assert match.locale is not None
        assert match.locale.path == "pt"
        assert match.remainder == "/start"
        assert match.site_path == "/pt/start"
        assert match.segment_kind(config) is SegmentKind.OTHER

    def test_default_segment(self, config: LocaleConfig) -> None:
        """The default locale segment is classified separately."""
        match = match_path("/new-site/en/start", config)
        assert match is not None
        assert match.segment_kind(config) is SegmentKind.DEFAULT

    def test_locale_segment_only(self, config: LocaleConfig) -> None:
        """A bare locale segment leaves the root remainder."""
        match = match_path("/new-site/it", config)
        assert match is not None
        assert match.remainder == "/"

    def test_no_segment(self, config: LocaleConfig) -> None:
        """Ordinary routes carry no locale."""
        match = match_path("/new-site/start", config)
        assert match is not None
        assert match.locale is None
        assert match.remainder == "/start"
        assert match.segment_kind(config) is SegmentKind.NONE

    def test_root(self, config: LocaleConfig) -> None:
        """The base alone is the root."""
        match = match_path("/new-site/", config)
        assert match is not None
        assert match.is_root
        assert match.segment_kind(config) is SegmentKind.NONE

    def test_unconfigured_locale(self, config: LocaleConfig) -> None:
        """A locale the site does not configure is reported, not served."""
        match = match_path("/new-site/fr/start", config)
        assert match is not None
        assert match.unconfigured_segment == "fr"
        assert match.segment_kind(config) is SegmentKind.UNCONFIGURED

    def test_alias_code_is_not_a_url_segment(self) -> None:
        """Only a record's path appears in URLs; its codes do not."""
        config = LocaleConfig.from_mapping(
            {
                "defaultLocale": "en",
                "locales": ["en", {"path": "spanish", "codes": ["es", "es-CR"]}],
            }
        )
        spanish = match_path("/spanish/start", config)
        assert spanish is not None
        assert spanish.locale is not None
        alias = match_path("/es/start", config)
        assert alias is not None
        assert alias.segment_kind(config) is SegmentKind.UNCONFIGURED

    @pytest.mark.parametrize("word", ["my", "id", "no"])
    def test_words_resembling_locales(self, config: LocaleConfig, word: str) -> None:
        """Common words that are CLDR languages read as unconfigured locales."""
        match = match_path(f"/new-site/{word}/account", config)
        assert match is not None
        assert match.segment_kind(config) is SegmentKind.UNCONFIGURED

    def test_route_segments_are_ordinary_routes(self) -> None:
        """Declared route segments are never taken for locales."""
        config = LocaleConfig(
            default_locale="en", locales=["en", "pt"], route_segments=frozenset({"My", "id"})
        )
        match = match_path("/my/account", config)
        assert match is not None
        assert match.segment_kind(config) is SegmentKind.NONE
        assert match.remainder == "/my/account"
        other = match_path("/no/account", config)
        assert other is not None
        assert other.segment_kind(config) is SegmentKind.UNCONFIGURED

    def test_outside_base(self, config: LocaleConfig) -> None:
        """Paths outside the base do not match."""
        assert match_path("/other/pt/start", config) is None

    @given(code=st.sampled_from(LOCALE_POOL), path=page_paths(), data=st.data())
    def test_spelling_variants_match_identically(
        self, code: str, path: str, data: st.DataObject
    ) -> None:
        """Case and separator variants of a segment match the same locale."""
        others = [c for c in ("en", "pt", "it") if c != code]
        config = LocaleConfig(default_locale=others[0], locales=[*others, code])
        variant = data.draw(locale_spellings(code))
        original = match_path(f"/{code}{path}", config)
        varied = match_path(f"/{variant}{path}", config)
        assert original is not None
        assert varied is not None
        assert varied.locale == original.locale
        assert varied.remainder == original.remainder

    @given(path=page_paths())
    def test_pure(self, path: str) -> None:
        """Matching the same path twice gives the same result."""
        config = LocaleConfig(default_locale="en", locales=["en", "pt"])
        assert match_path(path, config) == match_path(path, config)
