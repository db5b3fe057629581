"""Content existence checks consulted by the decision engine.

The engine never looks at files or route tables itself; the build or render
layer hands it a ContentIndex. Two implementations are provided:

    RouteTable - In-memory set of (locale, path) pairs, with "/prefix/*" patterns
    PathContentIndex - Disk-based lookup with path-traversal prevention

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from localeroute.routing.types import LocaleCode, UrlPath

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocols
    "ContentIndex",
    "AsyncContentIndex",
    # Implementations
    "RouteTable",
    "PathContentIndex",
]

logger = logging.getLogger(__name__)


def _page_key(path: UrlPath) -> UrlPath:
    return "/" + path.strip("/")


class ContentIndex(Protocol):
    """Protocol for answering "does this locale have this page".

    This is a Protocol (structural typing) rather than ABC so that route
    tables, file systems and CMS clients can all be plugged in.

    Example:
        >>> class Pages:
        ...     def has_content(self, locale: str, path: str) -> bool:
        ...         return (locale, path) in {("en", "/start"), ("pt", "/start")}
        >>> engine = RoutingEngine(config, Pages())
    """

    def has_content(self, locale: LocaleCode, path: UrlPath) -> bool:
        """Check whether a page exists.

        Args:
            locale: Configured locale path (e.g., 'en', 'pt_BR')
            path: Page path below the locale, starting with '/'

        Returns:
            True if the locale has content at path
        """
        ...


class AsyncContentIndex(Protocol):
    """Asynchronous variant of ContentIndex, for RoutingEngine.resolve_async()."""

    def has_content(self, locale: LocaleCode, path: UrlPath) -> Awaitable[bool]:
        """Check whether a page exists, without blocking the event loop."""
        ...


@dataclass(frozen=True, slots=True)
class RouteTable:
    """In-memory content index.

    Paths are compared without trailing slashes. A path ending in "/*" claims
    every page below it, which covers dynamic routes ("/blog/*").

    Example:
        >>> table = RouteTable.from_mapping({"en": ["/start", "/blog/*"], "pt": ["/start"]})
        >>> table.has_content("en", "/blog/1")
        True
        >>> table.has_content("pt", "/blog/1")
        False

    Attributes:
        pages: Exact (locale, path) pairs
        prefixes: (locale, path prefix) pairs from "/*" patterns
    """

    pages: frozenset[tuple[LocaleCode, UrlPath]] = frozenset()
    prefixes: frozenset[tuple[LocaleCode, UrlPath]] = frozenset()

    @classmethod
    def from_mapping(cls, routes: Mapping[LocaleCode, Iterable[UrlPath]]) -> RouteTable:
        """Build a table from locale -> page paths."""
        pages: set[tuple[LocaleCode, UrlPath]] = set()
        prefixes: set[tuple[LocaleCode, UrlPath]] = set()
        for locale, paths in routes.items():
            for path in paths:
                if path.endswith("/*"):
                    prefixes.add((locale, _page_key(path[:-2])))
                else:
                    pages.add((locale, _page_key(path)))
        return cls(frozenset(pages), frozenset(prefixes))

    def has_content(self, locale: LocaleCode, path: UrlPath) -> bool:
        """Check whether a page exists."""
        key = _page_key(path)
        if (locale, key) in self.pages:
            return True
        return any(
            owner == locale and (prefix == "/" or key.startswith(prefix + "/"))
            for owner, prefix in self.prefixes
        )

    def paths_for(self, locale: LocaleCode) -> tuple[UrlPath, ...]:
        """Exact page paths of one locale, sorted."""
        return tuple(sorted(path for owner, path in self.pages if owner == locale))


@dataclass(frozen=True, slots=True)
class PathContentIndex:
    """File system content index using path templates.

    Uses a {locale} placeholder in the path template for locale substitution.
    A page "/blog/1" exists when one of "blog/1", "blog/1.html" or
    "blog/1/index.html" is a file below the locale directory.

    Security:
        Request paths are untrusted. Locale codes containing path separators
        or "..", and page paths escaping the root directory, are answered with
        "no content" (and logged) rather than touching the file system.

    Example:
        >>> index = PathContentIndex("dist/{locale}")
        >>> index.has_content("en", "/start")
        # Checks: dist/en/start, dist/en/start.html, dist/en/start/index.html

    Attributes:
        base_path: Path template with {locale} placeholder
        root_dir: Fixed root directory for path traversal validation.
                  Defaults to the static prefix of base_path.
    """

    base_path: str
    root_dir: str | None = None
    _resolved_root: Path = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Cache resolved root directory and validate template at initialization.

        Raises:
            ValueError: If base_path does not contain {locale} placeholder
        """
        if "{locale}" not in self.base_path:
            msg = (
                f"base_path must contain '{{locale}}' placeholder for locale substitution, "
                f"got: '{self.base_path}'"
            )
            raise ValueError(msg)

        if self.root_dir is not None:
            resolved = Path(self.root_dir).resolve()
        else:
            static_prefix = self.base_path.split("{locale}")[0].rstrip("/\\")
            resolved = Path(static_prefix).resolve() if static_prefix else Path.cwd().resolve()
        object.__setattr__(self, "_resolved_root", resolved)

    def _candidates(self, locale: LocaleCode, path: UrlPath) -> tuple[Path, ...] | None:
        if not locale or ".." in locale or "/" in locale or "\\" in locale:
            return None
        relative = path.strip("/")
        if "\\" in relative or any(part in ("..", ".") for part in relative.split("/")):
            return None

        locale_dir = Path(self.base_path.replace("{locale}", locale)).resolve()
        if not relative:
            return (locale_dir / "index.html",)
        page = locale_dir / relative
        return (page, page.with_name(page.name + ".html"), page / "index.html")

    def has_content(self, locale: LocaleCode, path: UrlPath) -> bool:
        """Check whether a page file exists.

        Args:
            locale: Locale code to substitute in path template
            path: Page path below the locale

        Returns:
            True if one of the candidate files exists inside the root directory
        """
        candidates = self._candidates(locale, path)
        if candidates is None:
            logger.warning("Rejected unsafe content lookup: locale=%r path=%r", locale, path)
            return False
        for candidate in candidates:
            resolved = candidate.resolve()
            if not resolved.is_relative_to(self._resolved_root):
                logger.warning("Rejected content lookup outside root: %s", resolved)
                return False
            if resolved.is_file():
                return True
        return False
