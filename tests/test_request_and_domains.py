"""Tests for the effective request context and domain matching.

Header precedence: X-Forwarded-Host over Host, X-Forwarded-Proto over the
request scheme. Ports and header source never affect the domain match.
"""

from __future__ import annotations

import pytest

from localeroute.constants import HEADER_HOST, HEADER_X_FORWARDED_HOST
from localeroute.enums import MissReason
from localeroute.routing.config import LocaleConfig
from localeroute.routing.content import RouteTable
from localeroute.routing.decision import NotFound
from localeroute.routing.domain_matcher import match_domain, origin_host
from localeroute.routing.engine import resolve_request
from localeroute.routing.request import RequestContext, get_header, split_host_port


@pytest.fixture
def config() -> LocaleConfig:
    """Domain strategy with three hosts under /new-site."""
    return LocaleConfig(
        default_locale="en",
        locales=["en", "pt", "it"],
        routing_strategy="domains",
        base="/new-site",
        domains={
            "en": "https://example.com",
            "pt": "https://example.pt",
            "it": "https://it.example.com",
        },
    )


class TestHeaders:
    """Test header helpers."""

    def test_case_insensitive_lookup(self) -> None:
        """Header names match in any casing."""
        assert get_header({"x-forwarded-host": "example.pt"}, "X-Forwarded-Host") == "example.pt"

    def test_blank_is_absent(self) -> None:
        """Blank header values count as missing."""
        assert get_header({"Host": "  "}, "Host") is None

    @pytest.mark.parametrize(
        ("authority", "expected"),
        [
            ("example.pt", ("example.pt", None)),
            ("Example.PT:8080", ("example.pt", 8080)),
            ("[::1]:3000", ("[::1]", 3000)),
            ("[::1]", ("[::1]", None)),
        ],
    )
    def test_split_host_port(self, authority: str, expected: tuple[str, int | None]) -> None:
        """Ports are split off, IPv6 literals kept whole."""
        assert split_host_port(authority) == expected

    @pytest.mark.parametrize(
        "authority",
        ["example.pt:²", "example.pt:٣", "[::1]:²", "example.pt:99999", "[::1]:70000"],
    )
    def test_unusable_port_keeps_authority_whole(self, authority: str) -> None:
        """Non-ASCII or out-of-range ports leave the authority unsplit."""
        assert split_host_port(authority) == (authority, None)

    def test_highest_port_accepted(self) -> None:
        """65535 is still a valid port."""
        assert split_host_port("example.pt:65535") == ("example.pt", 65535)


class TestRequestContext:
    """Test RequestContext derivation."""

    def test_host_header(self) -> None:
        """Host supplies host and port."""
        ctx = RequestContext.from_headers("/new-site/start", {"Host": "example.pt:8080"})
        assert (ctx.host, ctx.port, ctx.protocol) == ("example.pt", 8080, "http")

    def test_forwarded_host_wins(self) -> None:
        """X-Forwarded-Host overrides Host; first listed value wins."""
        ctx = RequestContext.from_headers(
            "/", {"Host": "internal:9000", "X-Forwarded-Host": "example.pt, proxy.local"}
        )
        assert ctx.host == "example.pt"
        assert ctx.port is None

    def test_forwarded_proto_wins(self) -> None:
        """X-Forwarded-Proto overrides the request scheme."""
        ctx = RequestContext.from_headers("/", {"Host": "example.pt", "X-Forwarded-Proto": "HTTPS"})
        assert ctx.protocol == "https"
        assert ctx.origin == "https://example.pt"

    def test_query_and_fragment_dropped(self) -> None:
        """Only the path is kept."""
        assert RequestContext.from_headers("/pt/start?x=1#top").path == "/pt/start"
        assert RequestContext.from_headers("pt/start").path == "/pt/start"

    def test_accept_language_captured(self) -> None:
        """Accept-Language is carried for page facts."""
        ctx = RequestContext.from_headers("/", {"accept-language": "pt;q=0.9"})
        assert ctx.accept_language == "pt;q=0.9"

    def test_from_url(self) -> None:
        """An absolute URL supplies scheme and host."""
        ctx = RequestContext.from_url("https://it.example.com/new-site/start?x=1")
        assert (ctx.protocol, ctx.host, ctx.path) == ("https", "it.example.com", "/new-site/start")

    def test_no_host(self) -> None:
        """Without host headers the origin is unknown."""
        assert RequestContext.from_headers("/").origin is None


class TestMatchDomain:
    """Test match_domain."""

    def test_origin_host(self) -> None:
        """Configured origins reduce to their hostname."""
        assert origin_host("https://example.pt:8443") == "example.pt"

    def test_host_selects_locale(self, config: LocaleConfig) -> None:
        """The effective host picks the locale."""
        match = match_domain(RequestContext.from_headers("/", {"Host": "it.example.com"}), config)
        assert match is not None
        assert match.locale.path == "it"
        assert match.origin == "https://it.example.com"

    def test_port_and_header_source_do_not_matter(self, config: LocaleConfig) -> None:
        """Host with port and X-Forwarded-Host resolve to the same locale."""
        via_host = RequestContext.from_headers(
            "/new-site/start", {"Host": "example.pt:8080", "X-Forwarded-Proto": "https"}
        )
        via_forwarded = RequestContext.from_headers(
            "/new-site/start", {"X-Forwarded-Host": "example.pt", "X-Forwarded-Proto": "https"}
        )
        first = match_domain(via_host, config)
        second = match_domain(via_forwarded, config)
        assert first is not None
        assert second is not None
        assert first.locale == second.locale
        assert first.protocol == second.protocol == "https"

    def test_protocol_does_not_gate_matching(self, config: LocaleConfig) -> None:
        """Plain http reaches a locale configured with https."""
        match = match_domain(RequestContext.from_headers("/", {"Host": "example.pt"}), config)
        assert match is not None
        assert match.locale.path == "pt"
        assert match.protocol == "http"

    def test_unknown_host(self, config: LocaleConfig) -> None:
        """Unrecognized or missing hosts do not match."""
        unknown = RequestContext.from_headers("/", {"Host": "example.fr"})
        assert match_domain(unknown, config) is None
        assert match_domain(RequestContext.from_headers("/"), config) is None


class TestMalformedHost:
    """Hosts clients can send but no domain can match."""

    @pytest.mark.parametrize("header", [HEADER_HOST, HEADER_X_FORWARDED_HOST])
    @pytest.mark.parametrize("authority", ["example.pt:²", "[::1]:٣", "example.pt:99999"])
    def test_context_builds(self, header: str, authority: str) -> None:
        """Deriving the context never raises for a bad port."""
        ctx = RequestContext.from_headers("/new-site/start", {header: authority})
        assert ctx.host == authority
        assert ctx.port is None

    @pytest.mark.parametrize("header", [HEADER_HOST, HEADER_X_FORWARDED_HOST])
    def test_bad_port_is_unknown_host(self, config: LocaleConfig, header: str) -> None:
        """A bad port resolves to NotFound instead of an exception."""
        content = RouteTable.from_mapping({"pt": ["/start"]})
        decision = resolve_request(config, content, "/new-site/start", {header: "example.pt:²"})
        assert decision == NotFound(MissReason.UNKNOWN_HOST)
