"""Enumerations for localeroute type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, so configuration values such as
"prefix-always" compare equal to their members without lookups.

Python 3.13+.
"""

from enum import StrEnum


class RoutingStrategy(StrEnum):
    """How locale codes appear in URLs.

    StrEnum provides automatic string conversion:
    str(RoutingStrategy.PREFIX_ALWAYS) == "prefix-always"
    """

    PREFIX_OTHER_LOCALES = "prefix-other-locales"
    """Default locale unprefixed, every other locale prefixed: /about, /pt/about"""

    PREFIX_ALWAYS = "prefix-always"
    """Every locale prefixed; the bare root redirects to the default locale"""

    PREFIX_ALWAYS_NO_REDIRECT = "prefix-always-no-redirect"
    """Every locale prefixed; the bare root is not found"""

    DOMAINS = "domains"
    """Locale chosen by request host; paths carry no locale segment"""


class FallbackType(StrEnum):
    """How a fallback locale is delivered."""

    REDIRECT = "redirect"
    """302 to the fallback locale's URL"""

    REWRITE = "rewrite"
    """Serve fallback content at the requested URL"""


class TrailingSlash(StrEnum):
    """Trailing-slash policy for canonical paths and generated URLs."""

    ALWAYS = "always"
    NEVER = "never"
    IGNORE = "ignore"


class SegmentKind(StrEnum):
    """Classification of the first path segment against the configuration.

    Second axis of the routing decision table (the first is RoutingStrategy).
    """

    NONE = "none"
    """No locale-like segment: /start, /blog/1, /"""

    DEFAULT = "default"
    """Segment names the default locale: /en/start"""

    OTHER = "other"
    """Segment names another configured locale: /pt/start"""

    UNCONFIGURED = "unconfigured"
    """Segment looks like a locale the site does not configure: /fr/start"""


class RedirectReason(StrEnum):
    """Why the engine emitted a redirect."""

    TRAILING_SLASH = "trailing-slash"
    DEFAULT_LOCALE = "default-locale"
    FALLBACK = "fallback"


class MissReason(StrEnum):
    """Why the engine answered NotFound.

    Diagnostic only: every reason surfaces to the HTTP layer as a 404.
    """

    OUTSIDE_BASE = "outside-base"
    UNCONFIGURED_LOCALE = "unconfigured-locale"
    DEFAULT_LOCALE_PREFIXED = "default-locale-prefixed"
    MISSING_LOCALE_PREFIX = "missing-locale-prefix"
    ROOT_NOT_REDIRECTED = "root-not-redirected"
    UNKNOWN_HOST = "unknown-host"
    FALLBACK_EXHAUSTED = "fallback-exhausted"


__all__ = [
    "FallbackType",
    "MissReason",
    "RedirectReason",
    "RoutingStrategy",
    "SegmentKind",
    "TrailingSlash",
]
