"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable

from .codes import Diagnostic, DiagnosticCode


def _quoted(values: Iterable[str]) -> str:
    return ", ".join(f"'{value}'" for value in values)


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This keeps every message testable and documents every error case in one place.
    """

    @staticmethod
    def locales_empty() -> Diagnostic:
        """No locale configured.

        Returns:
            Diagnostic for LOCALES_EMPTY
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALES_EMPTY,
            message="At least one locale is required",
            hint="Add the default locale to 'locales'",
            config_key="locales",
        )

    @staticmethod
    def locale_code_invalid(code: object) -> Diagnostic:
        """Locale code is not a well-formed language tag.

        Args:
            code: The offending value

        Returns:
            Diagnostic for LOCALE_CODE_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_CODE_INVALID,
            message=f"Locale code {code!r} is not a well-formed language tag",
            hint="Use codes like 'en', 'pt-BR' or 'pt_BR'",
            config_key="locales",
            received=repr(code),
        )

    @staticmethod
    def locale_duplicate(code: str, first: str) -> Diagnostic:
        """Two locale entries collide after normalization.

        Args:
            code: The repeated code
            first: The configured locale that already claims it

        Returns:
            Diagnostic for LOCALE_DUPLICATE
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DUPLICATE,
            message=f"Locale code '{code}' is already configured by '{first}'",
            hint="Codes are compared case-insensitively with '_' and '-' treated alike",
            config_key="locales",
            received=code,
        )

    @staticmethod
    def locale_entry_invalid(entry: object) -> Diagnostic:
        """Locale entry is neither a code nor a {path, codes} record.

        Args:
            entry: The offending entry

        Returns:
            Diagnostic for LOCALE_ENTRY_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.LOCALE_ENTRY_INVALID,
            message=f"Locale entry {entry!r} must be a string or a {{path, codes}} record",
            hint="Records need a 'path' string and a non-empty 'codes' list",
            config_key="locales",
            received=repr(entry),
        )

    @staticmethod
    def default_locale_not_configured(default_locale: str, locales: Iterable[str]) -> Diagnostic:
        """Default locale missing from locales.

        Args:
            default_locale: Configured default locale
            locales: Configured locale paths

        Returns:
            Diagnostic for DEFAULT_LOCALE_NOT_CONFIGURED
        """
        return Diagnostic(
            code=DiagnosticCode.DEFAULT_LOCALE_NOT_CONFIGURED,
            message=(
                f"Default locale '{default_locale}' is not one of the configured "
                f"locales ({_quoted(locales)})"
            ),
            hint="Add the default locale to 'locales'",
            config_key="defaultLocale",
            received=default_locale,
        )

    @staticmethod
    def fallback_source_not_configured(source: str) -> Diagnostic:
        """Fallback key is not a configured locale.

        Args:
            source: The fallback key

        Returns:
            Diagnostic for FALLBACK_SOURCE_NOT_CONFIGURED
        """
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_SOURCE_NOT_CONFIGURED,
            message=f"Fallback is defined for '{source}', which is not a configured locale",
            hint="Fallback keys must be configured locales",
            config_key="fallback",
            received=source,
        )

    @staticmethod
    def fallback_target_not_configured(source: str, target: str) -> Diagnostic:
        """Fallback value is not a configured locale.

        Args:
            source: The fallback key
            target: The fallback value

        Returns:
            Diagnostic for FALLBACK_TARGET_NOT_CONFIGURED
        """
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_TARGET_NOT_CONFIGURED,
            message=f"Locale '{source}' falls back to '{target}', which is not configured",
            hint="Fallback targets must be configured locales",
            config_key="fallback",
            received=target,
        )

    @staticmethod
    def fallback_self_reference(source: str) -> Diagnostic:
        """Locale falls back to itself.

        Args:
            source: The locale

        Returns:
            Diagnostic for FALLBACK_SELF_REFERENCE
        """
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_SELF_REFERENCE,
            message=f"Locale '{source}' falls back to itself",
            hint="Remove the entry or point it at another locale",
            config_key="fallback",
            received=source,
        )

    @staticmethod
    def fallback_cycle(chain: Iterable[str]) -> Diagnostic:
        """Fallback graph contains a cycle.

        Args:
            chain: Locales along the cycle, first locale repeated at the end

        Returns:
            Diagnostic for FALLBACK_CYCLE
        """
        path = " -> ".join(f"'{code}'" for code in chain)
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_CYCLE,
            message=f"Fallback chain {path} is a cycle",
            hint="Point every fallback at a locale that has no fallback itself",
            config_key="fallback",
            received=path,
        )

    @staticmethod
    def fallback_chain_too_deep(source: str, target: str, next_target: str) -> Diagnostic:
        """Fallback target has a fallback of its own.

        Args:
            source: The fallback key
            target: Its fallback target
            next_target: The target's own fallback

        Returns:
            Diagnostic for FALLBACK_CHAIN_TOO_DEEP
        """
        return Diagnostic(
            code=DiagnosticCode.FALLBACK_CHAIN_TOO_DEEP,
            message=(
                f"Locale '{source}' falls back to '{target}', which falls back to "
                f"'{next_target}'; only one fallback hop is followed"
            ),
            hint=f"Point '{source}' directly at '{next_target}'",
            config_key="fallback",
            received=source,
        )

    @staticmethod
    def option_invalid(
        code: DiagnosticCode, config_key: str, value: object, allowed: Iterable[str]
    ) -> Diagnostic:
        """Enumerated option has an unknown value.

        Args:
            code: ROUTING_STRATEGY_INVALID, FALLBACK_TYPE_INVALID or TRAILING_SLASH_INVALID
            config_key: Configuration key
            value: Received value
            allowed: Accepted values

        Returns:
            Diagnostic for the given code
        """
        return Diagnostic(
            code=code,
            message=f"Invalid {config_key} {value!r}",
            hint=f"Expected one of {_quoted(allowed)}",
            config_key=config_key,
            received=repr(value),
        )

    @staticmethod
    def base_path_invalid(base: object) -> Diagnostic:
        """Base path cannot be used as a URL prefix.

        Args:
            base: Configured base

        Returns:
            Diagnostic for BASE_PATH_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.BASE_PATH_INVALID,
            message=f"Base path {base!r} is not a plain URL path",
            hint="Use a path like '/new-site' without '..', query or fragment",
            config_key="base",
            received=repr(base),
        )

    @staticmethod
    def route_segment_is_locale(segment: str, locale: str) -> Diagnostic:
        """Declared route segment names a configured locale.

        Args:
            segment: Declared route segment
            locale: Path of the locale it names

        Returns:
            Diagnostic for ROUTE_SEGMENT_IS_LOCALE
        """
        return Diagnostic(
            code=DiagnosticCode.ROUTE_SEGMENT_IS_LOCALE,
            message=f"Route segment '{segment}' names configured locale '{locale}'",
            hint="Route segments are for words that only resemble locales, like 'my' or 'id'",
            config_key="routeSegments",
            received=segment,
        )

    @staticmethod
    def site_origin_invalid(site: object) -> Diagnostic:
        """Site is not an http(s) origin.

        Args:
            site: Configured site

        Returns:
            Diagnostic for SITE_ORIGIN_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.SITE_ORIGIN_INVALID,
            message=f"Site {site!r} is not an http(s) URL",
            hint="Use an origin like 'https://example.com'",
            config_key="site",
            received=repr(site),
        )

    @staticmethod
    def domain_locale_not_configured(locale: str) -> Diagnostic:
        """Domain mapped for an unconfigured locale.

        Args:
            locale: Domain key

        Returns:
            Diagnostic for DOMAIN_LOCALE_NOT_CONFIGURED
        """
        return Diagnostic(
            code=DiagnosticCode.DOMAIN_LOCALE_NOT_CONFIGURED,
            message=f"Domain is mapped for '{locale}', which is not a configured locale",
            hint="Domain keys must be configured locales",
            config_key="domains",
            received=locale,
        )

    @staticmethod
    def domain_origin_invalid(locale: str, origin: object) -> Diagnostic:
        """Domain value is not a bare http(s) origin.

        Args:
            locale: Domain key
            origin: Domain value

        Returns:
            Diagnostic for DOMAIN_ORIGIN_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.DOMAIN_ORIGIN_INVALID,
            message=f"Domain for '{locale}' must be an http(s) origin, got {origin!r}",
            hint="Use an origin like 'https://example.pt' without a path",
            config_key="domains",
            received=repr(origin),
        )

    @staticmethod
    def domains_require_domain_strategy(strategy: str) -> Diagnostic:
        """Domains configured for a path-based strategy.

        Args:
            strategy: Configured routing strategy

        Returns:
            Diagnostic for DOMAINS_REQUIRE_DOMAIN_STRATEGY
        """
        return Diagnostic(
            code=DiagnosticCode.DOMAINS_REQUIRE_DOMAIN_STRATEGY,
            message=f"'domains' cannot be used with routing strategy '{strategy}'",
            hint="Set routingStrategy to 'domains' or remove 'domains'",
            config_key="domains",
            received=strategy,
        )

    @staticmethod
    def domain_strategy_requires_domains() -> Diagnostic:
        """Domains strategy without any domain.

        Returns:
            Diagnostic for DOMAIN_STRATEGY_REQUIRES_DOMAINS
        """
        return Diagnostic(
            code=DiagnosticCode.DOMAIN_STRATEGY_REQUIRES_DOMAINS,
            message="Routing strategy 'domains' needs at least one domain",
            hint="Map locales to origins in 'domains'",
            config_key="routingStrategy",
            received="domains",
        )

    @staticmethod
    def accept_language_quality_invalid(entry: str) -> Diagnostic:
        """Accept-Language entry has an unusable q parameter.

        Args:
            entry: The raw header entry

        Returns:
            Diagnostic for ACCEPT_LANGUAGE_QUALITY_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.ACCEPT_LANGUAGE_QUALITY_INVALID,
            message=f"Skipped Accept-Language entry {entry!r}: quality must be 0..1",
            received=entry,
            severity="warning",
        )

    @staticmethod
    def accept_language_tag_invalid(entry: str) -> Diagnostic:
        """Accept-Language entry has a malformed language tag.

        Args:
            entry: The raw header entry

        Returns:
            Diagnostic for ACCEPT_LANGUAGE_TAG_INVALID
        """
        return Diagnostic(
            code=DiagnosticCode.ACCEPT_LANGUAGE_TAG_INVALID,
            message=f"Skipped Accept-Language entry {entry!r}: malformed language tag",
            received=entry,
            severity="warning",
        )

    @staticmethod
    def accept_language_truncated(limit: int) -> Diagnostic:
        """Accept-Language header exceeded the parse limits.

        Args:
            limit: The limit that was hit

        Returns:
            Diagnostic for ACCEPT_LANGUAGE_TRUNCATED
        """
        return Diagnostic(
            code=DiagnosticCode.ACCEPT_LANGUAGE_TRUNCATED,
            message=f"Accept-Language header truncated at {limit}",
            severity="warning",
        )

    @staticmethod
    def domain_missing(locale: str) -> Diagnostic:
        """Locale has no domain under the domains strategy.

        Args:
            locale: Configured locale path

        Returns:
            Diagnostic for DOMAIN_MISSING
        """
        return Diagnostic(
            code=DiagnosticCode.DOMAIN_MISSING,
            message=f"Locale '{locale}' has no domain; it would be unreachable",
            hint="Under routing strategy 'domains' every locale needs an origin in 'domains'",
            config_key="domains",
            received=locale,
        )
