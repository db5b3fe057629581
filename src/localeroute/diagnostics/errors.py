"""Routing exception hierarchy with structured diagnostics.

Only configuration problems raise. Routing misses are reported as
NotFound decisions and malformed header entries as diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class RoutingError(Exception):
    """Base exception for all localeroute errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RoutingError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class RoutingConfigError(RoutingError):
    """Invalid routing configuration.

    Raised once, while building a LocaleConfig, so that a broken
    configuration aborts server startup or the build instead of
    surfacing as wrong routing decisions later.

    Examples:
    - defaultLocale missing from locales
    - fallback pointing at an unconfigured locale
    - fallback cycle (it -> pt -> it)
    """
