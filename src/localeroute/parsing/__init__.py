"""Parsing of client-supplied locale preferences.

- Functions NEVER raise on header content - problems are returned in a tuple
- Consistent with the "structured outcomes, not exceptions" routing design

Public API:
    parse_accept_language - Returns tuple[tuple[LanguageRange, ...], tuple[Diagnostic, ...]]
    get_preferred_locales - Returns PreferredLocales (primary + ordered list)

Example:
    >>> from localeroute.parsing import get_preferred_locales
    >>> get_preferred_locales("pt", config).primary
    'pt'

Python 3.13+. Uses Babel for language tag validation.
"""

from .accept_language import (
    LanguageRange,
    PreferredLocales,
    get_preferred_locales,
    parse_accept_language,
)

__all__ = [
    "LanguageRange",
    "PreferredLocales",
    "get_preferred_locales",
    "parse_accept_language",
]
