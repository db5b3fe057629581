"""Diagnostic system for routing configuration and header parsing.

Provides structured error diagnostics with codes, hints and the offending
configuration key. Inspired by Rust compiler diagnostics.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import RoutingConfigError, RoutingError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "RoutingConfigError",
    "RoutingError",
]
