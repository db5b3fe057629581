"""Runtime facts exposed to page code.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localeroute.enums import RoutingStrategy
from localeroute.parsing.accept_language import get_preferred_locales
from localeroute.routing.decision import Serve
from localeroute.routing.domain_matcher import match_domain
from localeroute.routing.path_matcher import match_path

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig
    from localeroute.routing.decision import RoutingDecision
    from localeroute.routing.request import RequestContext
    from localeroute.routing.types import LocaleCode

__all__ = ["PageLocales"]


@dataclass(frozen=True, slots=True)
class PageLocales:
    """Locale facts for the page being rendered.

    Attributes:
        current_locale: Locale whose content is rendered
        locales: Every configured locale path, in configuration order
        preferred_locale: Best configured locale from Accept-Language, or None
        preferred_locale_list: Configured locales the client accepts, best first
    """

    current_locale: LocaleCode
    locales: tuple[LocaleCode, ...]
    preferred_locale: LocaleCode | None
    preferred_locale_list: tuple[LocaleCode, ...]

    @classmethod
    def for_request(
        cls,
        config: LocaleConfig,
        context: RequestContext,
        decision: RoutingDecision | None = None,
    ) -> PageLocales:
        """Collect the facts for one request.

        The current locale is the served locale when the decision is a Serve.
        Otherwise (error pages, redirects) it is the locale named by the URL
        or host, falling back to the default locale.

        Example:
            >>> facts = PageLocales.for_request(config, RequestContext.from_headers(
            ...     "/pt/start", {"Accept-Language": "it;q=0.5,pt"}))
            >>> facts.current_locale, facts.preferred_locale_list
            ('pt', ('pt', 'it'))
        """
        preferred = get_preferred_locales(context.accept_language, config)
        return cls(
            current_locale=_current_locale(config, context, decision),
            locales=config.locale_paths,
            preferred_locale=preferred.primary,
            preferred_locale_list=preferred.locales,
        )


def _current_locale(
    config: LocaleConfig, context: RequestContext, decision: RoutingDecision | None
) -> LocaleCode:
    if isinstance(decision, Serve):
        return decision.locale
    if config.routing_strategy is RoutingStrategy.DOMAINS:
        domain = match_domain(context, config)
        return domain.locale.path if domain is not None else config.default_locale
    match = match_path(context.path, config)
    if match is not None and match.locale is not None:
        return match.locale.path
    return config.default_locale
