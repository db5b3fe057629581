"""Accept-Language parsing and preferred-locale selection.

- parse_accept_language() returns tuple[tuple[LanguageRange, ...], tuple[Diagnostic, ...]]
- Malformed entries are skipped individually and reported in the diagnostics
- Never raises on header content

The header is untrusted client input: its length and number of entries are
bounded before parsing (see MAX_ACCEPT_LANGUAGE_LENGTH and
MAX_ACCEPT_LANGUAGE_ENTRIES).

Thread-safe. Uses Babel for language tag validation.

Python 3.13+.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import TYPE_CHECKING

from localeroute.constants import (
    DEFAULT_QUALITY,
    MAX_ACCEPT_LANGUAGE_ENTRIES,
    MAX_ACCEPT_LANGUAGE_LENGTH,
)
from localeroute.diagnostics import Diagnostic, ErrorTemplate
from localeroute.locale_utils import find_locale, is_well_formed_locale

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig
    from localeroute.routing.types import LocaleCode

__all__ = [
    "LanguageRange",
    "PreferredLocales",
    "get_preferred_locales",
    "parse_accept_language",
]

logger = logging.getLogger(__name__)

WILDCARD = "*"


@dataclass(frozen=True, slots=True)
class LanguageRange:
    """One weighted entry of an Accept-Language header.

    Attributes:
        tag: Language tag as sent by the client, or "*"
        quality: Weight in [0, 1]
    """

    tag: str
    quality: float = DEFAULT_QUALITY

    @property
    def is_wildcard(self) -> bool:
        """True for the "*" range."""
        return self.tag == WILDCARD

    @property
    def is_acceptable(self) -> bool:
        """False for q=0, which marks a language as not acceptable."""
        return self.quality > 0


@dataclass(frozen=True, slots=True)
class PreferredLocales:
    """Configured locales the client prefers, best first.

    Attributes:
        primary: Best configured locale, or None
        locales: Every matching configured locale in preference order
        diagnostics: Warnings for skipped header entries
    """

    primary: LocaleCode | None
    locales: tuple[LocaleCode, ...]
    diagnostics: tuple[Diagnostic, ...] = ()

    def describe_primary(self) -> str:
        """Reportable form of the primary locale ("none" when absent)."""
        return self.primary if self.primary is not None else "none"

    def describe_list(self) -> str:
        """Reportable form of the list ("empty" when nothing matched)."""
        return ", ".join(self.locales) if self.locales else "empty"


def _parse_quality(params: list[str]) -> float | None:
    quality = DEFAULT_QUALITY
    for param in params:
        name, sep, value = param.partition("=")
        if name.strip().lower() != "q":
            continue
        if not sep:
            return None
        try:
            quality = float(value.strip())
        except ValueError:
            return None
        if math.isnan(quality) or not 0.0 <= quality <= 1.0:
            return None
    return quality


def parse_accept_language(
    header: str | None,
) -> tuple[tuple[LanguageRange, ...], tuple[Diagnostic, ...]]:
    """Parse an Accept-Language header into weighted language ranges.

    Entries are "tag" or "tag;q=value". The quality defaults to 1.0 and must
    be a number in [0, 1]. The result is sorted by quality, highest first;
    entries of equal quality keep header order. Wildcard and q=0 ranges are
    returned as parsed; get_preferred_locales() discards them.

    Args:
        header: Raw header value, or None when the header is absent

    Returns:
        Tuple of (ranges, diagnostics):
        - ranges: Valid ranges, best first
        - diagnostics: One warning per skipped entry, plus one if the header
          was truncated

    Examples:
        >>> ranges, diagnostics = parse_accept_language("fr;q=0.1,fr-AU;q=0.9")
        >>> [(r.tag, r.quality) for r in ranges]
        [('fr-AU', 0.9), ('fr', 0.1)]

        >>> ranges, diagnostics = parse_accept_language("en;q=2")
        >>> ranges, diagnostics[0].code.name
        ((), 'ACCEPT_LANGUAGE_QUALITY_INVALID')
    """
    if header is None or not header.strip():
        return (), ()

    diagnostics: list[Diagnostic] = []
    if len(header) > MAX_ACCEPT_LANGUAGE_LENGTH:
        header = header[:MAX_ACCEPT_LANGUAGE_LENGTH]
        diagnostics.append(ErrorTemplate.accept_language_truncated(MAX_ACCEPT_LANGUAGE_LENGTH))

    entries = [entry.strip() for entry in header.split(",") if entry.strip()]
    if len(entries) > MAX_ACCEPT_LANGUAGE_ENTRIES:
        entries = entries[:MAX_ACCEPT_LANGUAGE_ENTRIES]
        diagnostics.append(ErrorTemplate.accept_language_truncated(MAX_ACCEPT_LANGUAGE_ENTRIES))

    ranges: list[LanguageRange] = []
    for entry in entries:
        tag, *params = entry.split(";")
        tag = tag.strip()
        if tag != WILDCARD and not is_well_formed_locale(tag):
            logger.debug("Skipping Accept-Language entry with malformed tag: %r", entry)
            diagnostics.append(ErrorTemplate.accept_language_tag_invalid(entry))
            continue
        quality = _parse_quality(params)
        if quality is None:
            logger.debug("Skipping Accept-Language entry with invalid quality: %r", entry)
            diagnostics.append(ErrorTemplate.accept_language_quality_invalid(entry))
            continue
        ranges.append(LanguageRange(tag, quality))

    ranges.sort(key=lambda r: r.quality, reverse=True)
    return tuple(ranges), tuple(diagnostics)


def get_preferred_locales(header: str | None, config: LocaleConfig) -> PreferredLocales:
    """Intersect the client's language preferences with the configured locales.

    Tags are matched against every configured locale path and code,
    case-insensitively and with '_' and '-' treated alike. The configured
    spelling of the locale path is returned. A locale requested several times
    keeps its best position.

    Args:
        header: Raw Accept-Language value, or None
        config: Routing configuration

    Returns:
        PreferredLocales; primary is None and locales is empty when nothing
        matches (including for "*" alone)

    Example:
        >>> config = LocaleConfig(default_locale="en_AU", locales=["en_AU", "pt_BR", "es_US"])
        >>> preferred = get_preferred_locales("en-AU;q=0.1,pt-BR;q=0.9", config)
        >>> preferred.primary, preferred.describe_list()
        ('pt_BR', 'pt_BR, en_AU')
    """
    ranges, diagnostics = parse_accept_language(header)
    matched: dict[LocaleCode, None] = {}
    for language_range in ranges:
        if language_range.is_wildcard or not language_range.is_acceptable:
            continue
        entry = find_locale(language_range.tag, config)
        if entry is not None:
            matched.setdefault(entry.path, None)
    locales = tuple(matched)
    return PreferredLocales(
        primary=locales[0] if locales else None,
        locales=locales,
        diagnostics=diagnostics,
    )
