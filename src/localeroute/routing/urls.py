"""Locale-aware URL builders for page code and redirect targets.

These are the helpers templates use to link between locales. The decision
engine builds its redirect targets with the same functions, so a link on a
page and the redirect a visitor receives can never disagree.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from localeroute.enums import RoutingStrategy
from localeroute.locale_utils import normalize_locale
from localeroute.routing.path_matcher import apply_trailing_slash, join_path

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig, LocaleEntry
    from localeroute.routing.types import LocaleCode, UrlPath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Single locale
    "get_relative_locale_url",
    "get_absolute_locale_url",
    # All locales
    "get_relative_locale_url_list",
    "get_absolute_locale_url_list",
    # Lookups
    "get_path_by_locale",
    "get_locale_by_path",
    "locale_prefix",
]


def locale_prefix(config: LocaleConfig, entry: LocaleEntry) -> str:
    """URL segment naming a locale, "" when the locale is unprefixed.

    The default locale is unprefixed under prefix-other-locales; every
    locale is unprefixed under domains, where the host names the locale.
    """
    match config.routing_strategy:
        case RoutingStrategy.DOMAINS:
            return ""
        case RoutingStrategy.PREFIX_OTHER_LOCALES if config.is_default(entry):
            return ""
        case _:
            return entry.path


def get_relative_locale_url(
    config: LocaleConfig,
    locale: LocaleCode,
    path: UrlPath = "",
    *,
    like: UrlPath | None = None,
) -> UrlPath:
    """Build the site-relative URL of a page in a locale.

    Base path, locale prefix and trailing-slash policy are applied. Under
    the "ignore" policy the trailing slash of ``like`` (default: ``path``)
    is kept.

    Args:
        config: Routing configuration
        locale: Any configured spelling of the locale ("pt_BR", "pt-br")
        path: Page path below the locale
        like: Path whose trailing slash is copied under "ignore"

    Returns:
        URL path starting with "/"

    Raises:
        ValueError: If the locale is not configured

    Example:
        >>> get_relative_locale_url(config, "pt", "about")
        '/pt/about'
        >>> get_relative_locale_url(config, "en", "about")
        '/about'
    """
    entry = config.entry_for(locale)
    url = join_path(config.base, locale_prefix(config, entry), path)
    return apply_trailing_slash(url, config.trailing_slash, like=path if like is None else like)


def get_absolute_locale_url(
    config: LocaleConfig,
    locale: LocaleCode,
    path: UrlPath = "",
    *,
    like: UrlPath | None = None,
) -> str:
    """Build the absolute URL of a page in a locale.

    Under the domains strategy the locale's own origin is used; otherwise
    the configured site origin.

    Raises:
        ValueError: If the locale is not configured, or no origin is known

    Example:
        >>> get_absolute_locale_url(domain_config, "it", "about")
        'https://it.example.com/about'
    """
    entry = config.entry_for(locale)
    if config.routing_strategy is RoutingStrategy.DOMAINS:
        origin = config.domains[entry.path]
    elif config.site is not None:
        origin = config.site
    else:
        msg = f"Cannot build an absolute URL for '{locale}' without 'site' configured"
        raise ValueError(msg)
    return origin + get_relative_locale_url(config, entry.path, path, like=like)


def get_relative_locale_url_list(config: LocaleConfig, path: UrlPath = "") -> tuple[UrlPath, ...]:
    """Relative URLs of a page in every configured locale, in configuration order."""
    return tuple(get_relative_locale_url(config, entry.path, path) for entry in config.locales)


def get_absolute_locale_url_list(config: LocaleConfig, path: UrlPath = "") -> tuple[str, ...]:
    """Absolute URLs of a page in every configured locale, in configuration order."""
    return tuple(get_absolute_locale_url(config, entry.path, path) for entry in config.locales)


def get_path_by_locale(config: LocaleConfig, code: LocaleCode) -> str:
    """URL path segment configured for a locale code.

    Example:
        >>> get_path_by_locale(config, "es-CR")
        'spanish'
    """
    return config.entry_for(code).path


def get_locale_by_path(config: LocaleConfig, path: str) -> LocaleCode:
    """First locale code served under a URL path segment.

    Raises:
        ValueError: If no locale uses the segment

    Example:
        >>> get_locale_by_path(config, "spanish")
        'es'
    """
    wanted = normalize_locale(path.strip("/"))
    for entry in config.locales:
        if normalize_locale(entry.path) == wanted:
            return entry.codes[0]
    msg = f"No locale is served under path '{path}'"
    raise ValueError(msg)
