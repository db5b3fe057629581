"""Routing decisions: the resolver's only output.

A decision is built fresh for every request or pre-rendered path and consumed
immediately by the rendering or build layer. Live servers read status and
headers; static builds write Redirect.to_html() in place of the page.

Python 3.13+.
"""

from __future__ import annotations

import html
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from localeroute.constants import HEADER_LOCATION, META_REFRESH_TEMPLATE
from localeroute.enums import MissReason, RedirectReason

if TYPE_CHECKING:
    from localeroute.routing.types import LocaleCode, UrlPath

__all__ = ["NotFound", "Redirect", "RoutingDecision", "Serve"]


@dataclass(frozen=True, slots=True)
class Serve:
    """Render a page.

    Attributes:
        locale: Locale whose content is rendered
        rewritten_path: Page path with base and locale segment removed
        fallback_from: Requested locale when the content comes from a
            rewrite fallback (URL unchanged for the visitor)
    """

    locale: LocaleCode
    rewritten_path: UrlPath
    fallback_from: LocaleCode | None = None

    @property
    def status(self) -> int:
        """HTTP status for live responses."""
        return 200


@dataclass(frozen=True, slots=True)
class Redirect:
    """Send the visitor elsewhere.

    Attributes:
        location: Target URL (path, or absolute URL under the domains strategy)
        status: HTTP status for live responses
        reason: Why the redirect was emitted
    """

    location: str
    status: int
    reason: RedirectReason

    @property
    def headers(self) -> dict[str, str]:
        """Response headers for live responses."""
        return {HEADER_LOCATION: self.location}

    def to_html(self) -> str:
        """Meta-refresh document for static output.

        Example:
            >>> Redirect("/new-site/en", 302, RedirectReason.DEFAULT_LOCALE).to_html()
            '<!doctype html><title>Redirecting to: /new-site/en</title><meta http-equiv=...'
        """
        return META_REFRESH_TEMPLATE.format(url=html.escape(self.location, quote=True))


@dataclass(frozen=True, slots=True)
class NotFound:
    """No page for this request.

    Attributes:
        reason: Diagnostic reason; every reason is a 404 to the visitor
    """

    reason: MissReason

    @property
    def status(self) -> int:
        """HTTP status for live responses."""
        return 404


RoutingDecision: TypeAlias = Serve | Redirect | NotFound
