"""Locale utilities for comparison keys and locale recognition.

Centralizes locale normalization used throughout the codebase. Configured
codes keep their spelling for output (redirect targets, rendered text);
every comparison goes through normalize_locale() so that "pt_BR", "pt-BR"
and "PT-br" name the same locale.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from localeroute.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from localeroute.routing.config import LocaleConfig, LocaleEntry

__all__ = [
    "clear_locale_cache",
    "find_locale",
    "is_configured",
    "is_well_formed_locale",
    "looks_like_locale",
    "normalize_locale",
]

# CLDR ships a "root" locale; as a URL segment it is never a language.
_NON_LANGUAGE_IDENTIFIERS = frozenset({"root"})


def normalize_locale(locale_code: str) -> str:
    """Return the comparison key for a locale code.

    Lowercases the code and maps POSIX underscores to BCP-47 hyphens.
    The key is only used for comparison; it is never shown to users.

    Args:
        locale_code: Locale code in any casing, with '-' or '_' separators

    Returns:
        Comparison key (e.g., "pt-br")

    Example:
        >>> normalize_locale("pt_BR")
        'pt-br'
        >>> normalize_locale("EN-au")
        'en-au'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.lower().replace("_", "-")


def is_well_formed_locale(locale_code: str) -> bool:
    """Check that a code is a syntactically valid language tag.

    Accepts language[-script][-territory][-variant] in either separator
    style. Babel's parser is the authority on the tag grammar; characters it
    would silently discard (encoding and modifier suffixes) are rejected
    up front.

    Args:
        locale_code: Candidate locale code

    Returns:
        True if Babel can parse the code as a locale identifier
    """
    if not locale_code or not locale_code.isascii() or any(c in locale_code for c in ".@"):
        return False

    # Lazy import: Babel loads CLDR metadata at import time; defer until needed
    from babel.core import parse_locale  # noqa: PLC0415

    try:
        parse_locale(locale_code.replace("_", "-"), sep="-")
    except ValueError:
        return False
    return True


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def looks_like_locale(token: str) -> bool:
    """Check whether a path token resembles a locale identifier.

    A token resembles a locale when it is a well-formed tag whose language
    subtag is a language CLDR knows about ("fr", "fr-AU", "zh_Hant").
    Route segments such as "start", "blog" or "test.json" do not.

    Thread-safe via lru_cache internal locking.

    Args:
        token: First segment of a request path

    Returns:
        True if the token should be treated as a locale code
    """
    if not is_well_formed_locale(token):
        return False

    from babel import localedata  # noqa: PLC0415
    from babel.core import parse_locale  # noqa: PLC0415

    language = parse_locale(token.replace("_", "-"), sep="-")[0]
    if language in _NON_LANGUAGE_IDENTIFIERS:
        return False
    return localedata.exists(language)


def clear_locale_cache() -> None:
    """Clear the locale recognition cache.

    Useful in tests and after swapping Babel's locale data.
    """
    looks_like_locale.cache_clear()


def find_locale(locale_code: str, config: LocaleConfig) -> LocaleEntry | None:
    """Find the configured locale matching a code.

    Matches an entry's output path or any of its equivalent codes,
    case-insensitively and with '_' and '-' treated alike.

    Args:
        locale_code: Code as received (path segment, header tag, argument)
        config: Routing configuration

    Returns:
        Configured LocaleEntry, or None if the code is not configured

    Example:
        >>> config = LocaleConfig.from_mapping(
        ...     {"defaultLocale": "en_AU", "locales": ["en_AU", "pt_BR"]}
        ... )
        >>> find_locale("PT-br", config).path
        'pt_BR'
    """
    return config.locale_index.get(normalize_locale(locale_code))


def is_configured(locale_code: str, config: LocaleConfig) -> bool:
    """Check membership in the configured locale set.

    Args:
        locale_code: Code as received
        config: Routing configuration

    Returns:
        True if the code names a configured locale
    """
    return find_locale(locale_code, config) is not None
