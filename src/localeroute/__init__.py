"""localeroute - Locale-aware request routing with Babel-backed locale recognition.

Decides, for every request or pre-rendered path, which locale's content is
served, where the visitor is redirected, or that nothing exists. Supports
prefix-based and domain-based strategies, a base path, trailing-slash
policies and one-hop locale fallback, plus Accept-Language preferences.

Public API:
    LocaleConfig - Validated, immutable routing configuration
    RoutingEngine - Resolves requests into Serve / Redirect / NotFound
    RequestContext - Effective host, protocol and path of one request
    RouteTable - In-memory content index
    get_preferred_locales - Accept-Language preferences for a configuration

Exceptions:
    RoutingError - Base exception class
    RoutingConfigError - Invalid configuration (raised at construction)

Submodules:
    localeroute.routing - Matching, decisions, URL helpers, static planning
    localeroute.parsing - Accept-Language parsing
    localeroute.diagnostics - Diagnostic codes, templates and formatter
"""

# Essential Public API - Minimal exports for clean namespace
from .diagnostics import RoutingConfigError, RoutingError
from .enums import FallbackType, RoutingStrategy, TrailingSlash
from .parsing import get_preferred_locales, parse_accept_language
from .routing import (
    LocaleConfig,
    NotFound,
    Redirect,
    RequestContext,
    RouteTable,
    RoutingDecision,
    RoutingEngine,
    Serve,
    resolve_request,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localeroute")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "FallbackType",
    "LocaleConfig",
    "NotFound",
    "Redirect",
    "RequestContext",
    "RouteTable",
    "RoutingConfigError",
    "RoutingDecision",
    "RoutingEngine",
    "RoutingError",
    "RoutingStrategy",
    "Serve",
    "TrailingSlash",
    "__version__",
    "get_preferred_locales",
    "parse_accept_language",
    "resolve_request",
]
