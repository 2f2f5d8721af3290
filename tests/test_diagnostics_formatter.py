"""Tests for DiagnosticFormatter output styles."""

from __future__ import annotations

import json

import pytest

from urnkit.diagnostics import (
    Diagnostic,
    DiagnosticCode,
    DiagnosticFormatter,
    ErrorTemplate,
    OutputFormat,
    URNSyntaxError,
)
from urnkit.syntax import URNParser


def _error(source: str) -> URNSyntaxError:
    with pytest.raises(URNSyntaxError) as exc_info:
        URNParser(locale="en").parse(source)
    return exc_info.value


class TestFormat:
    """Test formatting a single diagnostic."""

    def test_rust_style(self) -> None:
        """RUST output has the header, location, help and note lines."""
        diagnostic = ErrorTemplate.nid_too_short("urn::x", 4, locale="en")

        assert DiagnosticFormatter().format(diagnostic) == (
            "error[NID_TOO_SHORT]: The namespace identifier is empty\n"
            "  --> offset 4\n"
            "  = help: Put at least one letter or digit between the first and second ':'\n"
            "  = note: see https://www.rfc-editor.org/rfc/rfc2141"
        )

    def test_rust_style_without_span(self) -> None:
        """No location line when the offset is unknown."""
        diagnostic = ErrorTemplate.invalid_prefix("uri:a:b", locale="en")
        lines = DiagnosticFormatter().format(diagnostic).split("\n")

        assert lines[0] == "error[INVALID_PREFIX]: URN 'uri:a:b' does not start with 'urn:'"
        assert not any("-->" in line for line in lines)

    def test_simple(self) -> None:
        """SIMPLE output is one line."""
        diagnostic = ErrorTemplate.nid_too_short("urn::x", 4, locale="en")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format(diagnostic) == "NID_TOO_SHORT: The namespace identifier is empty"

    def test_json(self) -> None:
        """JSON output carries code, value, span and hint."""
        diagnostic = ErrorTemplate.malformed_escape("urn:a:%zz", 6, locale="en")
        data = json.loads(DiagnosticFormatter(output_format=OutputFormat.JSON).format(diagnostic))

        assert data["code"] == "MALFORMED_ESCAPE"
        assert data["code_value"] == DiagnosticCode.MALFORMED_ESCAPE.value
        assert data["start"] == 6
        assert data["end"] == 7
        assert data["severity"] == "error"
        assert "hint" in data

    def test_color(self) -> None:
        """color=True wraps the severity in ANSI codes."""
        diagnostic = Diagnostic(code=DiagnosticCode.NOT_URN, message="x")

        assert DiagnosticFormatter(color=True).format(diagnostic).startswith("\033[1;31merror")

    def test_color_template_diagnostics_are_errors(self) -> None:
        """Every template builds an error, rendered in red."""
        diagnostic = ErrorTemplate.nss_too_short("urn:a:", 6, locale="en")
        text = DiagnosticFormatter(color=True).format(diagnostic)

        assert diagnostic.severity == "error"
        assert text.startswith("\033[1;31merror\033[0m[NSS_TOO_SHORT]")
        assert "\033[1;33m" not in text

    def test_sanitize_truncates(self) -> None:
        """sanitize=True truncates long messages."""
        diagnostic = Diagnostic(code=DiagnosticCode.NOT_URN, message="m" * 50)
        formatter = DiagnosticFormatter(
            output_format=OutputFormat.SIMPLE, sanitize=True, max_content_length=10
        )

        assert formatter.format(diagnostic) == "NOT_URN: " + "m" * 10 + "..."

    def test_control_characters_escaped(self) -> None:
        """Control characters in messages cannot break lines."""
        diagnostic = Diagnostic(code=DiagnosticCode.NOT_URN, message="a\nb")

        assert DiagnosticFormatter().format(diagnostic) == "error[NOT_URN]: a\\x0ab"

    def test_format_all(self) -> None:
        """format_all separates diagnostics by a blank line."""
        first = Diagnostic(code=DiagnosticCode.NOT_URN, message="one")
        second = Diagnostic(code=DiagnosticCode.NID_TOO_SHORT, message="two")
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format_all([first, second]) == "NOT_URN: one\n\nNID_TOO_SHORT: two"


class TestFormatError:
    """Test formatting a syntax error with a caret under the offset."""

    def test_caret_under_offset(self) -> None:
        """The caret sits under the offending character."""
        text = DiagnosticFormatter().format_error(_error("urn:nid:bad{syntax"))

        assert text == (
            "error[ILLEGAL_CHARACTER]: Illegal character '{' in namespace specific string\n"
            "  --> offset 11\n"
            "   |\n"
            "   | urn:nid:bad{syntax\n"
            "   |            ^\n"
            "  = help: Percent-encode characters outside the allowed set as %XX\n"
            "  = note: see https://www.rfc-editor.org/rfc/rfc2141"
        )

    def test_no_caret_when_offset_unknown(self) -> None:
        """Unknown offsets echo the input without a caret."""
        lines = DiagnosticFormatter().format_error(_error("uri:a:b")).split("\n")

        assert lines[1:3] == ["   |", "   | uri:a:b"]
        assert not any(line.strip().endswith("^") for line in lines)

    def test_caret_accounts_for_escaped_controls(self) -> None:
        """Escaped control characters widen the echo; the caret follows."""
        lines = DiagnosticFormatter().format_error(_error("urn:a\tb:c")).split("\n")

        assert lines[3] == "   | urn:a\\x09b:c"
        assert lines[4] == "   |      ^"

    def test_plain_reason_error(self) -> None:
        """An error without a diagnostic formats as one line."""
        error = URNSyntaxError("x", "bad input")

        assert DiagnosticFormatter().format_error(error) == "x: bad input"

    def test_non_rust_formats_ignore_excerpt(self) -> None:
        """SIMPLE format_error is the plain SIMPLE line."""
        formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)

        assert formatter.format_error(_error("urn::x")) == (
            "NID_TOO_SHORT: The namespace identifier is empty"
        )
