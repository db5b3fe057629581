"""Locale routing package.

Provides the full routing stack: validated configuration, effective request
context, path and domain matching, the decision engine, and the helpers page
code and static builds use on top of it.

Submodules:
    types        - PEP 695 type aliases (LocaleCode, UrlPath, Origin, Headers)
    config       - LocaleConfig, LocaleEntry
    request      - RequestContext (effective host, protocol, Accept-Language)
    path_matcher - match_path, strip_base, join_path, apply_trailing_slash
    domain_matcher - match_domain
    fallback     - resolve_fallback, FallbackInfo
    decision     - Serve, Redirect, NotFound
    content      - ContentIndex protocol, RouteTable, PathContentIndex
    engine       - RoutingEngine, resolve_request
    urls         - get_relative_locale_url and friends
    page         - PageLocales
    static       - plan_static_pages, StaticPage

Python 3.13+.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability

from localeroute.routing.config import LocaleConfig, LocaleEntry
from localeroute.routing.content import (
    AsyncContentIndex,
    ContentIndex,
    PathContentIndex,
    RouteTable,
)
from localeroute.routing.decision import NotFound, Redirect, RoutingDecision, Serve
from localeroute.routing.domain_matcher import DomainMatch, match_domain
from localeroute.routing.engine import RoutingEngine, resolve_request
from localeroute.routing.fallback import (
    Exhausted,
    FallbackInfo,
    FallbackOutcome,
    Same,
    Substitute,
    resolve_fallback,
)
from localeroute.routing.page import PageLocales
from localeroute.routing.path_matcher import (
    PathMatch,
    apply_trailing_slash,
    join_path,
    match_path,
    strip_base,
)
from localeroute.routing.request import RequestContext
from localeroute.routing.static import StaticPage, plan_static_pages
from localeroute.routing.types import Headers, LocaleCode, Origin, UrlPath
from localeroute.routing.urls import (
    get_absolute_locale_url,
    get_absolute_locale_url_list,
    get_locale_by_path,
    get_path_by_locale,
    get_relative_locale_url,
    get_relative_locale_url_list,
)

__all__ = [
    # Configuration
    "LocaleConfig",
    "LocaleEntry",
    # Request
    "RequestContext",
    # Engine and decisions
    "RoutingEngine",
    "resolve_request",
    "RoutingDecision",
    "Serve",
    "Redirect",
    "NotFound",
    # Matching
    "PathMatch",
    "match_path",
    "strip_base",
    "join_path",
    "apply_trailing_slash",
    "DomainMatch",
    "match_domain",
    # Fallback
    "resolve_fallback",
    "FallbackOutcome",
    "Same",
    "Substitute",
    "Exhausted",
    "FallbackInfo",
    # Content
    "ContentIndex",
    "AsyncContentIndex",
    "RouteTable",
    "PathContentIndex",
    # URL helpers
    "get_relative_locale_url",
    "get_absolute_locale_url",
    "get_relative_locale_url_list",
    "get_absolute_locale_url_list",
    "get_path_by_locale",
    "get_locale_by_path",
    # Page and build facts
    "PageLocales",
    "StaticPage",
    "plan_static_pages",
    # Type aliases
    "Headers",
    "LocaleCode",
    "Origin",
    "UrlPath",
]
