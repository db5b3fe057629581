"""Tests for diagnostics: templates, formatter output and exceptions."""

from __future__ import annotations

import json

from localeroute.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    RoutingConfigError,
    RoutingError,
)


class TestDiagnosticFormatter:
    """Test DiagnosticFormatter output formats."""

    def test_rust_format(self) -> None:
        """Rust style lists key, received value and hint."""
        text = DiagnosticFormatter().format(ErrorTemplate.fallback_self_reference("it"))
        assert text.splitlines() == [
            "error[FALLBACK_SELF_REFERENCE]: Locale 'it' falls back to itself",
            "  --> fallback",
            "  = received: it",
            "  = help: Remove the entry or point it at another locale",
        ]

    def test_warning_severity(self) -> None:
        """Header warnings render as warnings."""
        text = DiagnosticFormatter().format(ErrorTemplate.accept_language_tag_invalid("e!n"))
        assert text.startswith("warning[ACCEPT_LANGUAGE_TAG_INVALID]")

    def test_color(self) -> None:
        """Color mode wraps the severity in ANSI codes."""
        text = DiagnosticFormatter(color=True).format(ErrorTemplate.locales_empty())
        assert text.startswith("\033[1;31merror\033[0m")

    def test_simple_format(self) -> None:
        """Simple format is one line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        assert formatter.format(ErrorTemplate.locales_empty()) == (
            "LOCALES_EMPTY: At least one locale is required"
        )

    def test_json_format(self) -> None:
        """JSON format carries code name and value."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.JSON)
        data = json.loads(formatter.format(ErrorTemplate.domain_missing("pt")))
        assert data["code"] == "DOMAIN_MISSING"
        assert data["code_value"] == DiagnosticCode.DOMAIN_MISSING.value
        assert data["config_key"] == "domains"
        assert data["received"] == "pt"

    def test_control_characters_escaped(self) -> None:
        """Untrusted values cannot forge extra output lines."""
        diagnostic = ErrorTemplate.accept_language_quality_invalid("en;q=2\nerror[FAKE]: x")
        text = DiagnosticFormatter().format(diagnostic)
        assert "\nerror[FAKE]" not in text
        assert "\\n" in text

    def test_sanitize_truncates(self) -> None:
        """Sanitizing truncates long content."""
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )
        diagnostic = Diagnostic(code=DiagnosticCode.LOCALES_EMPTY, message="x" * 50)
        assert formatter.format(diagnostic) == "LOCALES_EMPTY: " + "x" * 10 + "..."

    def test_format_all(self) -> None:
        """Multiple diagnostics are separated by blank lines."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        text = formatter.format_all(
            [ErrorTemplate.locales_empty(), ErrorTemplate.domain_strategy_requires_domains()]
        )
        assert text.count("\n\n") == 1


class TestErrors:
    """Test the exception hierarchy."""

    def test_config_error_carries_diagnostic(self) -> None:
        """The formatted diagnostic becomes the exception message."""
        diagnostic = ErrorTemplate.fallback_cycle(["it", "pt", "it"])
        error = RoutingConfigError(diagnostic)
        assert isinstance(error, RoutingError)
        assert error.diagnostic is diagnostic
        assert str(error) == diagnostic.format_error()
        assert "'it' -> 'pt' -> 'it'" in str(error)

    def test_plain_message(self) -> None:
        """A plain message leaves the diagnostic empty."""
        error = RoutingError("boom")
        assert error.diagnostic is None
        assert str(error) == "boom"

    def test_diagnostic_str_is_message(self) -> None:
        """str(diagnostic) is the bare message."""
        assert str(ErrorTemplate.locales_empty()) == "At least one locale is required"
