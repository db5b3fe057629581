"""Routing decision engine.

Turns an effective request context into exactly one RoutingDecision. The
path strategies are a lookup table keyed by (strategy, kind of first path
segment); the domains strategy takes its locale from the host instead.

Order of evaluation for every request:

    1. Strip the base path (outside the base -> NotFound)
    2. Match the locale (path segment or host)
    3. Trailing-slash normalization (301), before any locale redirect
    4. Decision table
    5. Content check and one-hop fallback

Misses found in step 4 are not short-circuited: under trailing_slash
"always", "/fr/start" first gets the 301 to "/fr/start/" and only that
request gets NotFound.

Only step 5 touches the outside world, through the ContentIndex, which may be
asynchronous (resolve_async).

Python 3.13+.
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from localeroute.constants import STATUS_FOUND, STATUS_MOVED_PERMANENTLY
from localeroute.enums import (
    FallbackType,
    MissReason,
    RedirectReason,
    RoutingStrategy,
    SegmentKind,
    TrailingSlash,
)
from localeroute.routing.decision import NotFound, Redirect, RoutingDecision, Serve
from localeroute.routing.domain_matcher import match_domain
from localeroute.routing.fallback import (
    Exhausted,
    FallbackInfo,
    Same,
    Substitute,
    resolve_fallback,
)
from localeroute.routing.path_matcher import has_trailing_slash, match_path, strip_base
from localeroute.routing.request import RequestContext
from localeroute.routing.urls import get_absolute_locale_url, get_relative_locale_url

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig
    from localeroute.routing.content import AsyncContentIndex, ContentIndex
    from localeroute.routing.path_matcher import PathMatch
    from localeroute.routing.types import Headers, LocaleCode, UrlPath

__all__ = ["RoutingEngine", "resolve_request"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _ContentCheck:
    """Pending Serve: the decision depends on whether content exists."""

    locale: LocaleCode
    remainder: UrlPath
    like: UrlPath


_Step: TypeAlias = RoutingDecision | _ContentCheck
_Handler: TypeAlias = "Callable[[PathMatch, LocaleConfig], _Step]"


def _serve_default(match: PathMatch, config: LocaleConfig) -> _Step:
    return _ContentCheck(config.default_locale, match.remainder, match.site_path)


def _serve_segment(match: PathMatch, config: LocaleConfig) -> _Step:
    assert match.locale is not None  # Type narrowing: OTHER and DEFAULT carry a locale
    return _ContentCheck(match.locale.path, match.remainder, match.site_path)


def _redirect_root(match: PathMatch, config: LocaleConfig) -> _Step:
    if not match.is_root:
        return NotFound(MissReason.MISSING_LOCALE_PREFIX)
    location = get_relative_locale_url(config, config.default_locale)
    return Redirect(location, STATUS_FOUND, RedirectReason.DEFAULT_LOCALE)


def _no_root_redirect(match: PathMatch, config: LocaleConfig) -> _Step:
    if match.is_root:
        return NotFound(MissReason.ROOT_NOT_REDIRECTED)
    return NotFound(MissReason.MISSING_LOCALE_PREFIX)


def _miss(reason: MissReason) -> _Handler:
    def handler(match: PathMatch, config: LocaleConfig) -> _Step:
        return NotFound(reason)

    return handler


_POL = RoutingStrategy.PREFIX_OTHER_LOCALES
_PA = RoutingStrategy.PREFIX_ALWAYS
_PANR = RoutingStrategy.PREFIX_ALWAYS_NO_REDIRECT

_DECISION_TABLE: dict[tuple[RoutingStrategy, SegmentKind], _Handler] = {
    (_POL, SegmentKind.NONE): _serve_default,
    (_POL, SegmentKind.DEFAULT): _miss(MissReason.DEFAULT_LOCALE_PREFIXED),
    (_POL, SegmentKind.OTHER): _serve_segment,
    (_POL, SegmentKind.UNCONFIGURED): _miss(MissReason.UNCONFIGURED_LOCALE),
    (_PA, SegmentKind.NONE): _redirect_root,
    (_PA, SegmentKind.DEFAULT): _serve_segment,
    (_PA, SegmentKind.OTHER): _serve_segment,
    (_PA, SegmentKind.UNCONFIGURED): _miss(MissReason.UNCONFIGURED_LOCALE),
    (_PANR, SegmentKind.NONE): _no_root_redirect,
    (_PANR, SegmentKind.DEFAULT): _serve_segment,
    (_PANR, SegmentKind.OTHER): _serve_segment,
    (_PANR, SegmentKind.UNCONFIGURED): _miss(MissReason.UNCONFIGURED_LOCALE),
}


class RoutingEngine:
    """Resolve requests against one routing configuration.

    The engine holds no per-request state; one instance serves any number of
    concurrent requests or build workers.

    Example:
        >>> config = LocaleConfig(
        ...     default_locale="en",
        ...     locales=["en", "pt", "it"],
        ...     fallback={"it": "en"},
        ...     base="/new-site",
        ... )
        >>> content = RouteTable.from_mapping({"en": ["/start"], "pt": ["/start"]})
        >>> engine = RoutingEngine(config, content)
        >>> engine.resolve("/new-site/it/start").headers
        {'Location': '/new-site/start'}
        >>> engine.resolve("/new-site/fr/start")
        NotFound(reason=<MissReason.UNCONFIGURED_LOCALE: 'unconfigured-locale'>)
    """

    __slots__ = ("_config", "_content", "_on_fallback")

    def __init__(
        self,
        config: LocaleConfig,
        content: ContentIndex | AsyncContentIndex,
        *,
        on_fallback: Callable[[FallbackInfo], None] | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            config: Validated routing configuration
            content: Content index consulted before serving a page
            on_fallback: Optional callback invoked when another locale's
                content answers a request
        """
        self._config = config
        self._content = content
        self._on_fallback = on_fallback

    @property
    def config(self) -> LocaleConfig:
        """Routing configuration."""
        return self._config

    def resolve(self, request: RequestContext | UrlPath) -> RoutingDecision:
        """Resolve a request using a synchronous content index.

        Args:
            request: Effective request context, or a bare path

        Returns:
            Serve, Redirect or NotFound

        Raises:
            TypeError: If the content index is asynchronous
        """
        context = _as_context(request)
        step = self._plan(context)
        if not isinstance(step, _ContentCheck):
            return _logged(context, step)
        found = self._content.has_content(step.locale, step.remainder)
        if inspect.isawaitable(found):
            if inspect.iscoroutine(found):
                found.close()
            msg = "Content index is asynchronous; use resolve_async()"
            raise TypeError(msg)
        return _logged(context, self._finish(step, bool(found), context))

    async def resolve_async(self, request: RequestContext | UrlPath) -> RoutingDecision:
        """Resolve a request, awaiting the content check if it is asynchronous.

        Synchronous content indexes work here too.
        """
        context = _as_context(request)
        step = self._plan(context)
        if not isinstance(step, _ContentCheck):
            return _logged(context, step)
        found = self._content.has_content(step.locale, step.remainder)
        if inspect.isawaitable(found):
            found = await found
        return _logged(context, self._finish(step, bool(found), context))

    def _plan(self, context: RequestContext) -> _Step:
        config = self._config
        if config.routing_strategy is RoutingStrategy.DOMAINS:
            return self._plan_domains(context)

        match = match_path(context.path, config)
        if match is None:
            return NotFound(MissReason.OUTSIDE_BASE)
        redirect = self._slash_redirect(match.site_path, "")
        if redirect is not None:
            return redirect
        handler = _DECISION_TABLE[(config.routing_strategy, match.segment_kind(config))]
        return handler(match, config)

    def _plan_domains(self, context: RequestContext) -> _Step:
        site_path = strip_base(context.path, self._config.base)
        if site_path is None:
            return NotFound(MissReason.OUTSIDE_BASE)
        domain = match_domain(context, self._config)
        if domain is None:
            return NotFound(MissReason.UNKNOWN_HOST)
        redirect = self._slash_redirect(site_path, context.origin or domain.origin)
        if redirect is not None:
            return redirect
        return _ContentCheck(domain.locale.path, site_path, site_path)

    def _slash_redirect(self, site_path: UrlPath, origin: str) -> Redirect | None:
        if site_path == "/":
            return None
        match self._config.trailing_slash:
            case TrailingSlash.ALWAYS if not site_path.endswith("/"):
                target = site_path + "/"
            case TrailingSlash.NEVER if has_trailing_slash(site_path):
                target = site_path.rstrip("/")
            case _:
                return None
        location = origin + self._config.base + target
        return Redirect(location, STATUS_MOVED_PERMANENTLY, RedirectReason.TRAILING_SLASH)

    def _finish(
        self, check: _ContentCheck, has_content: bool, context: RequestContext
    ) -> RoutingDecision:
        match resolve_fallback(check.locale, has_content, self._config):
            case Same():
                return Serve(check.locale, check.remainder)
            case Substitute(locale=target, fallback_type=fallback_type):
                self._notify(check, target, fallback_type, context)
                if fallback_type is FallbackType.REWRITE:
                    return Serve(target, check.remainder, fallback_from=check.locale)
                return Redirect(
                    self._url_for(target, check), STATUS_FOUND, RedirectReason.FALLBACK
                )
            case Exhausted():
                return NotFound(MissReason.FALLBACK_EXHAUSTED)

    def _url_for(self, locale: LocaleCode, check: _ContentCheck) -> str:
        if self._config.routing_strategy is RoutingStrategy.DOMAINS:
            return get_absolute_locale_url(self._config, locale, check.remainder, like=check.like)
        return get_relative_locale_url(self._config, locale, check.remainder, like=check.like)

    def _notify(
        self,
        check: _ContentCheck,
        target: LocaleCode,
        fallback_type: FallbackType,
        context: RequestContext,
    ) -> None:
        logger.info(
            "Locale fallback for %s: %s -> %s (%s)",
            context.path,
            check.locale,
            target,
            fallback_type,
        )
        if self._on_fallback is not None:
            self._on_fallback(
                FallbackInfo(
                    requested_locale=check.locale,
                    resolved_locale=target,
                    path=check.remainder,
                    fallback_type=fallback_type,
                )
            )


def _as_context(request: RequestContext | UrlPath) -> RequestContext:
    if isinstance(request, RequestContext):
        return request
    return RequestContext.from_headers(request)


def _logged(context: RequestContext, decision: RoutingDecision) -> RoutingDecision:
    logger.debug("Routing %s (host=%s): %s", context.path, context.host, decision)
    return decision


def resolve_request(
    config: LocaleConfig,
    content: ContentIndex,
    path: UrlPath,
    headers: Headers | None = None,
    *,
    scheme: str = "http",
) -> RoutingDecision:
    """Resolve one live request.

    Convenience wrapper that derives the effective request context from the
    headers and runs a throwaway engine.

    Example:
        >>> resolve_request(config, content, "/new-site/", {"Host": "example.com"})
        Serve(locale='en', rewritten_path='/', fallback_from=None)
    """
    context = RequestContext.from_headers(path, headers, scheme=scheme)
    return RoutingEngine(config, content).resolve(context)
