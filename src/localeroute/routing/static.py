"""Static build planning.

A static build cannot answer requests, so it asks the engine in advance:
every URL the site could emit is resolved once, pages become files and
redirects become meta-refresh documents. Not-found URLs produce no output.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localeroute.enums import RoutingStrategy
from localeroute.routing.decision import NotFound, Redirect, Serve
from localeroute.routing.engine import RoutingEngine
from localeroute.routing.path_matcher import apply_trailing_slash, join_path, strip_base
from localeroute.routing.request import RequestContext
from localeroute.routing.urls import get_relative_locale_url

if TYPE_CHECKING:
    from collections.abc import Iterable

    from localeroute.routing.config import LocaleConfig
    from localeroute.routing.content import ContentIndex
    from localeroute.routing.types import Origin, UrlPath

__all__ = ["StaticPage", "plan_static_pages"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StaticPage:
    """One file of the static output.

    Attributes:
        url: Site-relative URL of the file
        decision: Serve for a rendered page, Redirect for a meta-refresh document
        origin: Domain the file belongs to under the domains strategy
        base: Base path the site is served under; not part of the output tree
    """

    url: UrlPath
    decision: Serve | Redirect
    origin: Origin | None = None
    base: str = ""

    @property
    def output_file(self) -> str:
        """Output file path in directory format, relative to the output root.

        The base path is dropped: "/new-site/pt/start" writes
        "pt/start/index.html".
        """
        site_path = strip_base(self.url, self.base) or self.url
        stripped = site_path.strip("/")
        return f"{stripped}/index.html" if stripped else "index.html"

    @property
    def is_redirect(self) -> bool:
        """True when the file is a meta-refresh document."""
        return isinstance(self.decision, Redirect)

    def redirect_html(self) -> str | None:
        """Meta-refresh document for redirects, None for rendered pages."""
        if isinstance(self.decision, Redirect):
            return self.decision.to_html()
        return None


def _root_url(config: LocaleConfig) -> UrlPath:
    return apply_trailing_slash(join_path(config.base), config.trailing_slash)


def _candidates(
    config: LocaleConfig, routes: Iterable[UrlPath]
) -> list[tuple[Origin | None, UrlPath]]:
    routes = tuple(routes)
    candidates: list[tuple[Origin | None, UrlPath]] = []
    if config.routing_strategy is RoutingStrategy.DOMAINS:
        for entry in config.locales:
            origin = config.domains[entry.path]
            candidates.append((origin, _root_url(config)))
            candidates.extend(
                (origin, get_relative_locale_url(config, entry.path, route)) for route in routes
            )
    else:
        candidates.append((None, _root_url(config)))
        for entry in config.locales:
            candidates.extend(
                (None, get_relative_locale_url(config, entry.path, route)) for route in routes
            )
    return list(dict.fromkeys(candidates))


def plan_static_pages(
    config: LocaleConfig, routes: Iterable[UrlPath], content: ContentIndex
) -> tuple[StaticPage, ...]:
    """Resolve every URL a static build would emit.

    Each route is expanded to one URL per configured locale, and the site
    root is added. Every URL goes through the same engine as live requests,
    so static output and live responses agree.

    Args:
        config: Routing configuration
        routes: Page paths below the locale ("/", "/start", ...)
        content: Content index of the build

    Returns:
        Pages and redirect documents in emission order; not-found URLs omitted

    Example:
        >>> pages = plan_static_pages(config, ["/start"], content)
        >>> [p.output_file for p in pages if p.is_redirect]
        ['it/start/index.html']
    """
    engine = RoutingEngine(config, content)
    pages: list[StaticPage] = []
    for origin, url in _candidates(config, routes):
        context = (
            RequestContext.from_url(origin + url)
            if origin is not None
            else RequestContext.from_headers(url)
        )
        decision = engine.resolve(context)
        match decision:
            case NotFound(reason=reason):
                logger.debug("No static output for %s: %s", url, reason)
            case Serve() | Redirect():
                pages.append(
                    StaticPage(url=url, decision=decision, origin=origin, base=config.base)
                )
    logger.info("Planned %d static pages", len(pages))
    return tuple(pages)
