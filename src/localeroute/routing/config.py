"""Validated, immutable routing configuration.

LocaleConfig is built once per server or build lifetime and shared by every
request afterwards. All invariants are checked at construction so that a
broken configuration aborts startup instead of producing wrong routing
decisions later:

- at least one locale, every code a well-formed language tag
- no two locales collide after normalization
- the default locale is configured
- every fallback key and target is configured, no locale falls back to
  itself, the fallback graph has no cycle and is one hop deep
- domains are only used with the domains strategy, which requires them

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, TypeVar, cast
from urllib.parse import urlsplit

from localeroute.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, RoutingConfigError
from localeroute.enums import FallbackType, RoutingStrategy, TrailingSlash
from localeroute.locale_utils import is_well_formed_locale, normalize_locale
from localeroute.routing.types import LocaleCode, Origin

__all__ = ["LocaleConfig", "LocaleEntry"]

logger = logging.getLogger(__name__)

_EMPTY_MAPPING: Mapping[str, str] = MappingProxyType({})


def _fail(diagnostic: Diagnostic) -> RoutingConfigError:
    logger.error("Invalid routing configuration: %s", diagnostic.message)
    return RoutingConfigError(diagnostic)


@dataclass(frozen=True, slots=True)
class LocaleEntry:
    """One configured locale.

    A bare code "pt_BR" becomes LocaleEntry("pt_BR", ("pt_BR",)). A record
    such as {"path": "spanish", "codes": ["es", "es-CR"]} serves every code
    under the single URL segment "spanish".

    Attributes:
        path: Output path segment, also the locale's identity in decisions
        codes: Equivalent codes matched against Accept-Language tags
    """

    path: LocaleCode
    codes: tuple[LocaleCode, ...]

    @classmethod
    def of(cls, code: LocaleCode) -> LocaleEntry:
        """Build the entry for a bare locale code."""
        return cls(code, (code,))

    @property
    def keys(self) -> tuple[str, ...]:
        """Comparison keys of the path and every code, without duplicates."""
        return tuple(dict.fromkeys(normalize_locale(c) for c in (self.path, *self.codes)))


E = TypeVar("E", bound=StrEnum)


def _coerce_option(
    enum_cls: type[E], value: object, code: DiagnosticCode, config_key: str
) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        allowed = [member.value for member in enum_cls]
        raise _fail(ErrorTemplate.option_invalid(code, config_key, value, allowed)) from None


def _coerce_entry(raw: object) -> LocaleEntry:
    match raw:
        case LocaleEntry():
            entry = raw
        case str():
            entry = LocaleEntry.of(raw)
        case {"path": str(path), "codes": [*codes]} if codes and all(
            isinstance(c, str) for c in codes
        ):
            entry = LocaleEntry(path, tuple(cast(list[str], codes)))
        case _:
            raise _fail(ErrorTemplate.locale_entry_invalid(raw))

    for code in (entry.path, *entry.codes):
        if not is_well_formed_locale(code):
            raise _fail(ErrorTemplate.locale_code_invalid(code))
    return entry


def _normalize_base(base: object) -> str:
    if not isinstance(base, str):
        raise _fail(ErrorTemplate.base_path_invalid(base))
    stripped = base.strip("/")
    if not stripped:
        return ""
    segments = stripped.split("/")
    if (
        any(segment in ("", ".", "..") for segment in segments)
        or any(c in stripped for c in "?#\\")
        or any(c.isspace() for c in stripped)
    ):
        raise _fail(ErrorTemplate.base_path_invalid(base))
    return "/" + stripped


def _parse_origin(value: object) -> Origin | None:
    """Return the canonical origin for an http(s) URL without a path."""
    if not isinstance(value, str):
        return None
    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError:
        return None
    if parts.scheme.lower() not in ("http", "https") or not parts.hostname:
        return None
    if parts.path not in ("", "/") or parts.query or parts.fragment:
        return None
    host = parts.hostname.lower()
    if ":" in host:
        host = f"[{host}]"
    authority = host if port is None else f"{host}:{port}"
    return f"{parts.scheme.lower()}://{authority}"


@dataclass(frozen=True, slots=True)
class LocaleConfig:
    """Routing configuration shared by all requests.

    Construction validates and canonicalizes every field: locale strings
    become LocaleEntry records, option strings become enum members, fallback
    and domain keys are rewritten to the configured spelling of the locale,
    and base becomes "" or "/segment".

    Example:
        >>> config = LocaleConfig(
        ...     default_locale="en",
        ...     locales=["en", "pt", "it"],
        ...     fallback={"it": "en"},
        ...     base="/new-site",
        ... )
        >>> config.locale_paths
        ('en', 'pt', 'it')
        >>> config.routing_strategy
        <RoutingStrategy.PREFIX_OTHER_LOCALES: 'prefix-other-locales'>

    Attributes:
        default_locale: Path of the default locale
        locales: Configured locales in display order
        routing_strategy: How locales appear in URLs
        fallback: Locale path -> fallback locale path (one hop)
        fallback_type: Redirect to or rewrite with the fallback locale
        base: Mount prefix, "" for the site root
        trailing_slash: Trailing-slash policy
        domains: Locale path -> origin (domains strategy only)
        site: Public origin used for absolute URLs (optional)
        route_segments: First path segments that are ordinary routes even though
            they resemble a locale ("my" in "/my/account")

    Raises:
        RoutingConfigError: If any invariant is violated
    """

    default_locale: LocaleCode
    locales: tuple[LocaleEntry, ...]
    routing_strategy: RoutingStrategy = RoutingStrategy.PREFIX_OTHER_LOCALES
    fallback: Mapping[LocaleCode, LocaleCode] = field(default_factory=lambda: _EMPTY_MAPPING)
    fallback_type: FallbackType = FallbackType.REDIRECT
    base: str = ""
    trailing_slash: TrailingSlash = TrailingSlash.IGNORE
    domains: Mapping[LocaleCode, Origin] = field(default_factory=lambda: _EMPTY_MAPPING)
    site: Origin | None = None
    route_segments: frozenset[str] = frozenset()
    locale_index: Mapping[str, LocaleEntry] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate and canonicalize all fields.

        Raises:
            RoutingConfigError: If any invariant is violated
        """
        entries = tuple(_coerce_entry(raw) for raw in cast(Iterable[object], self.locales))
        if not entries:
            raise _fail(ErrorTemplate.locales_empty())

        index: dict[str, LocaleEntry] = {}
        for entry in entries:
            for key in entry.keys:
                if key in index:
                    raise _fail(ErrorTemplate.locale_duplicate(key, index[key].path))
                index[key] = entry
        object.__setattr__(self, "locales", entries)
        object.__setattr__(self, "locale_index", MappingProxyType(index))

        default_entry = index.get(normalize_locale(self.default_locale))
        if default_entry is None:
            raise _fail(
                ErrorTemplate.default_locale_not_configured(
                    self.default_locale, self.locale_paths
                )
            )
        object.__setattr__(self, "default_locale", default_entry.path)

        object.__setattr__(
            self,
            "routing_strategy",
            _coerce_option(
                RoutingStrategy,
                self.routing_strategy,
                DiagnosticCode.ROUTING_STRATEGY_INVALID,
                "routingStrategy",
            ),
        )
        object.__setattr__(
            self,
            "fallback_type",
            _coerce_option(
                FallbackType, self.fallback_type, DiagnosticCode.FALLBACK_TYPE_INVALID,
                "fallbackType",
            ),
        )
        object.__setattr__(
            self,
            "trailing_slash",
            _coerce_option(
                TrailingSlash, self.trailing_slash, DiagnosticCode.TRAILING_SLASH_INVALID,
                "trailingSlash",
            ),
        )
        object.__setattr__(self, "base", _normalize_base(self.base))

        if self.site is not None:
            site = _parse_origin(self.site)
            if site is None:
                raise _fail(ErrorTemplate.site_origin_invalid(self.site))
            object.__setattr__(self, "site", site)

        object.__setattr__(self, "route_segments", self._validated_route_segments())
        object.__setattr__(self, "fallback", MappingProxyType(self._validated_fallback()))
        object.__setattr__(self, "domains", MappingProxyType(self._validated_domains()))

        logger.info(
            "Routing configured: strategy=%s default=%s locales=%s base=%r",
            self.routing_strategy,
            self.default_locale,
            ", ".join(self.locale_paths),
            self.base,
        )

    def _validated_route_segments(self) -> frozenset[str]:
        raw = self.route_segments
        segments = frozenset(
            normalize_locale(segment) for segment in ((raw,) if isinstance(raw, str) else raw)
        )
        for segment in sorted(segments):
            entry = self.locale_index.get(segment)
            if entry is not None:
                raise _fail(ErrorTemplate.route_segment_is_locale(segment, entry.path))
        return segments

    def _validated_fallback(self) -> dict[LocaleCode, LocaleCode]:
        fallback: dict[LocaleCode, LocaleCode] = {}
        for raw_source, raw_target in self.fallback.items():
            source = self.locale_index.get(normalize_locale(raw_source))
            if source is None:
                raise _fail(ErrorTemplate.fallback_source_not_configured(raw_source))
            target = self.locale_index.get(normalize_locale(raw_target))
            if target is None:
                raise _fail(ErrorTemplate.fallback_target_not_configured(raw_source, raw_target))
            if source is target:
                raise _fail(ErrorTemplate.fallback_self_reference(source.path))
            fallback[source.path] = target.path

        for source in fallback:
            chain = [source]
            current = source
            while current in fallback:
                current = fallback[current]
                if current in chain:
                    cycle = chain[chain.index(current):]
                    raise _fail(ErrorTemplate.fallback_cycle([*cycle, current]))
                chain.append(current)

        for source, target in fallback.items():
            if target in fallback:
                raise _fail(
                    ErrorTemplate.fallback_chain_too_deep(source, target, fallback[target])
                )
        return fallback

    def _validated_domains(self) -> dict[LocaleCode, Origin]:
        if self.domains and self.routing_strategy is not RoutingStrategy.DOMAINS:
            raise _fail(ErrorTemplate.domains_require_domain_strategy(self.routing_strategy))
        if not self.domains and self.routing_strategy is RoutingStrategy.DOMAINS:
            raise _fail(ErrorTemplate.domain_strategy_requires_domains())

        domains: dict[LocaleCode, Origin] = {}
        for raw_locale, raw_origin in self.domains.items():
            entry = self.locale_index.get(normalize_locale(raw_locale))
            if entry is None:
                raise _fail(ErrorTemplate.domain_locale_not_configured(raw_locale))
            origin = _parse_origin(raw_origin)
            if origin is None:
                raise _fail(ErrorTemplate.domain_origin_invalid(raw_locale, raw_origin))
            domains[entry.path] = origin
        for entry in self.locales:
            if self.domains and entry.path not in domains:
                raise _fail(ErrorTemplate.domain_missing(entry.path))
        return domains

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> LocaleConfig:
        """Build a configuration from the framework's camelCase structure.

        Args:
            raw: Mapping with defaultLocale, locales and optional
                routingStrategy, fallback, fallbackType, base, trailingSlash,
                domains, site and routeSegments keys

        Returns:
            Validated LocaleConfig

        Raises:
            RoutingConfigError: If any invariant is violated

        Example:
            >>> LocaleConfig.from_mapping({
            ...     "defaultLocale": "en",
            ...     "locales": ["en", {"path": "spanish", "codes": ["es", "es-CR"]}],
            ...     "routingStrategy": "prefix-always",
            ... }).locale_paths
            ('en', 'spanish')
        """
        locales = raw.get("locales") or ()
        if isinstance(locales, str) or not isinstance(locales, Iterable):
            raise _fail(ErrorTemplate.locale_entry_invalid(locales))
        default_locale = raw.get("defaultLocale")
        if not isinstance(default_locale, str):
            paths = [e if isinstance(e, str) else repr(e) for e in locales]
            raise _fail(ErrorTemplate.default_locale_not_configured(repr(default_locale), paths))
        return cls(
            default_locale=default_locale,
            locales=tuple(locales),
            routing_strategy=raw.get("routingStrategy", RoutingStrategy.PREFIX_OTHER_LOCALES),
            fallback=dict(raw.get("fallback") or {}),
            fallback_type=raw.get("fallbackType", FallbackType.REDIRECT),
            base=raw.get("base", ""),
            trailing_slash=raw.get("trailingSlash", TrailingSlash.IGNORE),
            domains=dict(raw.get("domains") or {}),
            site=raw.get("site"),
            route_segments=raw.get("routeSegments") or frozenset(),
        )

    @property
    def locale_paths(self) -> tuple[LocaleCode, ...]:
        """Configured locale paths in display order."""
        return tuple(entry.path for entry in self.locales)

    @property
    def default_entry(self) -> LocaleEntry:
        """Entry of the default locale."""
        return self.locale_index[normalize_locale(self.default_locale)]

    def is_default(self, entry: LocaleEntry) -> bool:
        """Check whether an entry is the default locale."""
        return entry.path == self.default_locale

    def entry_for(self, locale: LocaleCode) -> LocaleEntry:
        """Return the configured entry for a locale.

        Raises:
            ValueError: If the locale is not configured
        """
        entry = self.locale_index.get(normalize_locale(locale))
        if entry is None:
            msg = f"Locale '{locale}' is not configured (expected one of {self.locale_paths})"
            raise ValueError(msg)
        return entry
