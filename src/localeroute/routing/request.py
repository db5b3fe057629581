"""Effective request context.

Proxy headers are resolved once per request, before any matching: the
matchers only ever see the effective host and protocol, never raw headers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import urlsplit

from localeroute.constants import (
    HEADER_ACCEPT_LANGUAGE,
    HEADER_HOST,
    HEADER_X_FORWARDED_HOST,
    HEADER_X_FORWARDED_PROTO,
    MAX_PORT,
)
from localeroute.routing.types import Headers, UrlPath

__all__ = ["RequestContext", "get_header", "split_host_port"]


def get_header(headers: Headers, name: str) -> str | None:
    """Case-insensitive header lookup.

    Proxies may append to forwarding headers ("a.example, b.example"); the
    first, client-facing value wins. Empty values count as absent.

    Args:
        headers: Request headers
        name: Header name in any casing

    Returns:
        Stripped header value, or None
    """
    value = headers.get(name)
    if value is None:
        wanted = name.lower()
        value = next((v for k, v in headers.items() if k.lower() == wanted), None)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _first_list_value(value: str | None) -> str | None:
    if value is None:
        return None
    first = value.split(",", 1)[0].strip()
    return first or None


def split_host_port(authority: str) -> tuple[str, int | None]:
    """Split a Host header value into lowercase hostname and port.

    Handles bracketed IPv6 literals ("[::1]:8080"). An authority whose port
    is not an ASCII number in TCP range is returned whole, so it never
    matches a configured domain.

    Example:
        >>> split_host_port("Example.pt:8080")
        ('example.pt', 8080)
        >>> split_host_port("[::1]")
        ('[::1]', None)
        >>> split_host_port("example.pt:99999")
        ('example.pt:99999', None)
    """
    authority = authority.strip().lower()
    if authority.startswith("["):
        end = authority.find("]")
        if end != -1:
            host, rest = authority[: end + 1], authority[end + 1 :]
            if rest in ("", ":"):
                return host, None
            port = _parse_port(rest[1:]) if rest.startswith(":") else None
            return (host, port) if port is not None else (authority, None)
    host, sep, raw_port = authority.rpartition(":")
    if not sep or ":" in host:
        return authority, None
    if not raw_port:
        return host, None
    port = _parse_port(raw_port)
    return (host, port) if port is not None else (authority, None)


def _parse_port(raw: str) -> int | None:
    # str.isdigit() accepts digits int() rejects ("²", "٣")
    if not (raw.isascii() and raw.isdigit()):
        return None
    port = int(raw)
    return port if port <= MAX_PORT else None


@dataclass(frozen=True, slots=True)
class RequestContext:
    """Everything the resolver reads from a request.

    Attributes:
        path: Request path without query or fragment
        host: Effective hostname, lowercase, without port (None if unknown)
        port: Effective port if the host header carried one
        protocol: Effective scheme ("http", "https")
        accept_language: Raw Accept-Language header value, if any

    Example:
        >>> ctx = RequestContext.from_headers(
        ...     "/new-site/start",
        ...     {"Host": "example.pt:8080", "X-Forwarded-Proto": "https"},
        ... )
        >>> (ctx.host, ctx.port, ctx.protocol)
        ('example.pt', 8080, 'https')
    """

    path: UrlPath
    host: str | None = None
    port: int | None = None
    protocol: str = "http"
    accept_language: str | None = None

    @classmethod
    def from_headers(
        cls,
        path: UrlPath,
        headers: Headers | None = None,
        *,
        scheme: str = "http",
    ) -> RequestContext:
        """Derive the effective context from a path and request headers.

        Effective host is X-Forwarded-Host if present, else Host. Effective
        protocol is X-Forwarded-Proto if present, else the request scheme.

        Args:
            path: Request path (query and fragment are dropped)
            headers: Request headers
            scheme: Scheme the request arrived with

        Returns:
            RequestContext for this request
        """
        headers = headers or {}
        authority = _first_list_value(get_header(headers, HEADER_X_FORWARDED_HOST))
        if authority is None:
            authority = get_header(headers, HEADER_HOST)
        host, port = split_host_port(authority) if authority else (None, None)
        protocol = _first_list_value(get_header(headers, HEADER_X_FORWARDED_PROTO)) or scheme
        return cls(
            path=_clean_path(path),
            host=host,
            port=port,
            protocol=protocol.lower(),
            accept_language=get_header(headers, HEADER_ACCEPT_LANGUAGE),
        )

    @classmethod
    def from_url(cls, url: str, headers: Headers | None = None) -> RequestContext:
        """Derive the context from an absolute request URL.

        The URL's authority stands in for a missing Host header, matching
        what HTTP servers do for absolute-form request targets.

        Example:
            >>> RequestContext.from_url("https://example.pt/new-site/start").protocol
            'https'
        """
        parts = urlsplit(url)
        merged: dict[str, str] = dict(headers or {})
        if parts.netloc and get_header(merged, HEADER_HOST) is None:
            merged[HEADER_HOST] = parts.netloc
        return cls.from_headers(parts.path, merged, scheme=parts.scheme or "http")

    @property
    def origin(self) -> str | None:
        """Effective origin ("https://example.pt:8080"), if the host is known."""
        if self.host is None:
            return None
        authority = self.host if self.port is None else f"{self.host}:{self.port}"
        return f"{self.protocol}://{authority}"


def _clean_path(path: str) -> UrlPath:
    path = path.split("?", 1)[0].split("#", 1)[0]
    if not path.startswith("/"):
        path = "/" + path
    return path

