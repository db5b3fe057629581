"""Domain matching for the domains routing strategy.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from urllib.parse import urlsplit

from localeroute.routing.request import split_host_port

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig, LocaleEntry
    from localeroute.routing.request import RequestContext
    from localeroute.routing.types import Origin

__all__ = ["DomainMatch", "match_domain", "origin_host"]


@dataclass(frozen=True, slots=True)
class DomainMatch:
    """Locale selected by the request host.

    Attributes:
        locale: Configured locale mapped to the host
        origin: Configured origin of that locale
        protocol: Effective request protocol, for building absolute targets
    """

    locale: LocaleEntry
    origin: Origin
    protocol: str


def origin_host(origin: Origin) -> str:
    """Hostname of a configured origin, lowercase and without port."""
    return split_host_port(urlsplit(origin).netloc)[0]


def match_domain(context: RequestContext, config: LocaleConfig) -> DomainMatch | None:
    """Map the effective request host to a configured locale.

    The port is never part of the comparison, and neither is the protocol:
    "example.pt:8080" over http matches a locale configured as
    "https://example.pt". First configured match wins.

    Args:
        context: Effective request context
        config: Routing configuration

    Returns:
        DomainMatch, or None if the host is unknown or missing
    """
    if context.host is None:
        return None
    for locale, origin in config.domains.items():
        if origin_host(origin) == context.host:
            return DomainMatch(
                locale=config.entry_for(locale),
                origin=origin,
                protocol=context.protocol,
            )
    return None
