"""One-hop locale fallback.

LocaleConfig guarantees that a fallback target never has a fallback of its
own, so exactly one hop is followed and the target's content is not
re-checked.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from localeroute.enums import FallbackType

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig
    from localeroute.routing.types import LocaleCode, UrlPath

__all__ = [
    "Exhausted",
    "FallbackInfo",
    "FallbackOutcome",
    "Same",
    "Substitute",
    "resolve_fallback",
]


@dataclass(frozen=True, slots=True)
class Same:
    """Content exists for the requested locale."""


@dataclass(frozen=True, slots=True)
class Substitute:
    """Use another locale's content.

    Attributes:
        locale: Fallback locale path
        fallback_type: Deliver as redirect or rewrite
    """

    locale: LocaleCode
    fallback_type: FallbackType


@dataclass(frozen=True, slots=True)
class Exhausted:
    """No content and no fallback: the request is not found."""


FallbackOutcome: TypeAlias = Same | Substitute | Exhausted


@dataclass(frozen=True, slots=True)
class FallbackInfo:
    """Information about a locale fallback event.

    Provided to the on_fallback callback of RoutingEngine whenever a request
    is answered with another locale's content.

    Attributes:
        requested_locale: Locale named by the request
        resolved_locale: Locale whose content is delivered
        path: Remainder path that lacked content
        fallback_type: How the substitution was delivered

    Example:
        >>> def log_fallback(info: FallbackInfo) -> None:
        ...     print(f"{info.path}: {info.requested_locale} -> {info.resolved_locale}")
        >>> engine = RoutingEngine(config, content, on_fallback=log_fallback)
    """

    requested_locale: LocaleCode
    resolved_locale: LocaleCode
    path: UrlPath
    fallback_type: FallbackType


def resolve_fallback(
    locale: LocaleCode, has_content: bool, config: LocaleConfig
) -> FallbackOutcome:
    """Decide which locale's content answers a request.

    Args:
        locale: Requested locale path
        has_content: Whether the requested locale has content for the path
        config: Routing configuration

    Returns:
        Same, Substitute(target, fallback_type) or Exhausted

    Example:
        >>> resolve_fallback("it", False, config)
        Substitute(locale='en', fallback_type=<FallbackType.REDIRECT: 'redirect'>)
    """
    if has_content:
        return Same()
    target = config.fallback.get(locale)
    if target is None:
        return Exhausted()
    return Substitute(target, config.fallback_type)
