"""Type aliases for the routing domain.

Provides semantic type aliases used throughout the routing package and by
user code when annotating resolver call sites.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from typing import TypeAlias

__all__ = [
    "Headers",
    "LocaleCode",
    "Origin",
    "UrlPath",
]

LocaleCode: TypeAlias = str
"""Locale code as configured (e.g., 'en', 'pt_BR', 'zh-Hant')."""

UrlPath: TypeAlias = str
"""URL path starting with '/' (e.g., '/new-site/pt/start')."""

Origin: TypeAlias = str
"""Scheme and authority without a path (e.g., 'https://example.pt')."""

Headers: TypeAlias = Mapping[str, str]
"""Request headers; lookups are case-insensitive."""
