"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for configuration validation and
header parsing.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1099: Locale list errors (empty, malformed, duplicate)
        1100-1199: Fallback graph errors
        1200-1299: Enumerated option errors (strategy, fallback type, slash policy)
        1300-1399: Base path and origin errors
        1400-1499: Domain mapping errors
        2000-2099: Accept-Language header warnings (entry skipped)
    """

    # Locale list errors (1000-1099)
    LOCALES_EMPTY = 1001
    LOCALE_CODE_INVALID = 1002
    LOCALE_DUPLICATE = 1003
    LOCALE_ENTRY_INVALID = 1004
    DEFAULT_LOCALE_NOT_CONFIGURED = 1005

    # Fallback graph errors (1100-1199)
    FALLBACK_SOURCE_NOT_CONFIGURED = 1101
    FALLBACK_TARGET_NOT_CONFIGURED = 1102
    FALLBACK_SELF_REFERENCE = 1103
    FALLBACK_CYCLE = 1104
    FALLBACK_CHAIN_TOO_DEEP = 1105

    # Enumerated option errors (1200-1299)
    ROUTING_STRATEGY_INVALID = 1201
    FALLBACK_TYPE_INVALID = 1202
    TRAILING_SLASH_INVALID = 1203

    # Base path and origin errors (1300-1399)
    BASE_PATH_INVALID = 1301
    SITE_ORIGIN_INVALID = 1302
    ROUTE_SEGMENT_IS_LOCALE = 1303

    # Domain mapping errors (1400-1499)
    DOMAIN_LOCALE_NOT_CONFIGURED = 1401
    DOMAIN_ORIGIN_INVALID = 1402
    DOMAINS_REQUIRE_DOMAIN_STRATEGY = 1403
    DOMAIN_STRATEGY_REQUIRES_DOMAINS = 1404
    DOMAIN_MISSING = 1405

    # Accept-Language warnings (2000-2099)
    ACCEPT_LANGUAGE_QUALITY_INVALID = 2001
    ACCEPT_LANGUAGE_TAG_INVALID = 2002
    ACCEPT_LANGUAGE_TRUNCATED = 2003


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        config_key: Configuration key the error refers to (config errors)
        received: Offending value as received (config and header errors)
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    config_key: str | None = None
    received: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[FALLBACK_CYCLE]: Fallback chain 'it' -> 'pt' -> 'it' is a cycle
              --> fallback
              = received: 'it' -> 'pt' -> 'it'
              = help: Point every fallback at a locale that has no fallback itself

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
