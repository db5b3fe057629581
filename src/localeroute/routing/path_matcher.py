"""Path matching: base stripping and locale segment detection.

The matcher only reports what the path contains. Whether a locale segment is
allowed, required or forbidden is the decision engine's business, and so is
the trailing-slash policy; the helpers for the latter live here because the
URL builders need them too.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localeroute.enums import SegmentKind, TrailingSlash
from localeroute.locale_utils import find_locale, looks_like_locale, normalize_locale
from localeroute.routing.types import UrlPath

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig, LocaleEntry

__all__ = [
    "PathMatch",
    "apply_trailing_slash",
    "has_trailing_slash",
    "join_path",
    "match_path",
    "strip_base",
]


def strip_base(path: UrlPath, base: str) -> UrlPath | None:
    """Remove the site's base path.

    Args:
        path: Request path
        base: Normalized base ("" or "/segment")

    Returns:
        Path below the base, "/" for the base itself, or None if the path is
        outside the site

    Example:
        >>> strip_base("/new-site/pt/start", "/new-site")
        '/pt/start'
        >>> strip_base("/new-site", "/new-site")
        '/'
        >>> strip_base("/new-sitemap", "/new-site") is None
        True
    """
    if not base:
        return path or "/"
    if path in (base, base + "/"):
        return path[len(base):] or "/"
    if path.startswith(base + "/"):
        return path[len(base):]
    return None


def join_path(*parts: str) -> UrlPath:
    """Join URL path fragments with single slashes.

    Empty fragments are skipped. The result always starts with "/" and never
    ends with one unless it is the root; use apply_trailing_slash() for that.

    Example:
        >>> join_path("/new-site", "pt", "/about/")
        '/new-site/pt/about'
        >>> join_path("", "")
        '/'
    """
    segments = [segment for part in parts for segment in part.split("/") if segment]
    return "/" + "/".join(segments)


def has_trailing_slash(path: UrlPath) -> bool:
    """Check for a trailing slash on a non-root path."""
    return path != "/" and path.endswith("/")


def apply_trailing_slash(
    path: UrlPath, policy: TrailingSlash, *, like: UrlPath | None = None
) -> UrlPath:
    """Shape a generated path according to the trailing-slash policy.

    Args:
        path: Path as produced by join_path()
        policy: Trailing-slash policy
        like: Under IGNORE, copy the trailing slash of this path (usually the
            request path) so that redirects keep the visitor's spelling

    Returns:
        Path with the policy applied; the root is always "/"

    Example:
        >>> apply_trailing_slash("/new-site/en", TrailingSlash.ALWAYS)
        '/new-site/en/'
        >>> apply_trailing_slash("/start/", TrailingSlash.NEVER)
        '/start'
    """
    bare = path.rstrip("/") or "/"
    if bare == "/":
        return bare
    match policy:
        case TrailingSlash.ALWAYS:
            return bare + "/"
        case TrailingSlash.NEVER:
            return bare
        case TrailingSlash.IGNORE:
            return bare + "/" if like is not None and has_trailing_slash(like) else bare


@dataclass(frozen=True, slots=True)
class PathMatch:
    """Result of matching a path against the configured locales.

    Attributes:
        site_path: Path below the base ("/" for the site root)
        remainder: site_path without the locale segment ("/" if nothing is left)
        locale: Configured locale named by the first segment, if any
        unconfigured_segment: First segment when it looks like a locale the
            site does not configure ("fr" in "/fr/start")
    """

    site_path: UrlPath
    remainder: UrlPath
    locale: LocaleEntry | None = None
    unconfigured_segment: str | None = None

    def segment_kind(self, config: LocaleConfig) -> SegmentKind:
        """Classify the first segment for the decision table."""
        if self.locale is not None:
            return SegmentKind.DEFAULT if config.is_default(self.locale) else SegmentKind.OTHER
        if self.unconfigured_segment is not None:
            return SegmentKind.UNCONFIGURED
        return SegmentKind.NONE

    @property
    def is_root(self) -> bool:
        """True for the bare site root (base path alone)."""
        return self.site_path == "/"


def match_path(path: UrlPath, config: LocaleConfig) -> PathMatch | None:
    """Inspect the leading segment of a request path.

    The first segment below the base is compared with the configured locale
    paths case-insensitively, with '_' and '-' treated alike. A segment that
    is not configured but resembles a locale is reported separately so that
    it is never mistaken for an ordinary route. Any CLDR language code
    resembles a locale, including common words such as "my", "id", "is",
    "no" and "to"; list those in LocaleConfig.route_segments when the site
    uses them as routes.

    Pure function: the same path and configuration always give the same
    match.

    Args:
        path: Request path (no query string)
        config: Routing configuration

    Returns:
        PathMatch, or None if the path is outside the configured base

    Example:
        >>> match = match_path("/new-site/PT/start", config)
        >>> (match.locale.path, match.remainder)
        ('pt', '/start')
    """
    site_path = strip_base(path, config.base)
    if site_path is None:
        return None

    first, _, rest = site_path[1:].partition("/")
    if not first:
        return PathMatch(site_path=site_path, remainder=site_path)

    remainder = "/" + rest if rest else "/"
    entry = find_locale(first, config)
    if entry is not None and normalize_locale(entry.path) == normalize_locale(first):
        return PathMatch(site_path=site_path, remainder=remainder, locale=entry)
    if entry is None and normalize_locale(first) in config.route_segments:
        return PathMatch(site_path=site_path, remainder=site_path)
    if entry is not None or looks_like_locale(first):
        # An alias code ("es" for path "spanish") is not a URL for the locale
        return PathMatch(site_path=site_path, remainder=site_path, unconfigured_segment=first)
    return PathMatch(site_path=site_path, remainder=site_path)
