"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from .errors import URNSyntaxError

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


# C0 controls and DEL would let rejected input rewrite terminal or log lines.
_CONTROL_ESCAPES = {code: f"\\x{code:02x}" for code in (*range(0x20), 0x7F)}


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Centralizes formatting of Diagnostic objects into human-readable
    or machine-readable output. Supports multiple output formats and
    sanitization options.

    Attributes:
        output_format: Output style (rust, simple, json)
        sanitize: Truncate content to prevent information leakage
        color: Enable ANSI color codes (for terminal output)
        max_content_length: Maximum content length when sanitizing

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.nid_too_short("urn::x", 4, locale="en")
        >>> print(formatter.format(diagnostic))
        error[NID_TOO_SHORT]: The namespace identifier is empty
          --> offset 4
          = help: Put at least one letter or digit between the first and second ':'
          = note: see https://www.rfc-editor.org/rfc/rfc2141

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        NID_TOO_SHORT: The namespace identifier is empty
    """

    output_format: OutputFormat = OutputFormat.RUST
    sanitize: bool = False
    color: bool = False
    max_content_length: int = 100

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics.

        Args:
            diagnostics: Iterable of diagnostics to format

        Returns:
            Formatted string with all diagnostics separated by blank lines
        """
        return "\n\n".join(self.format(d) for d in diagnostics)

    def format_error(self, error: "URNSyntaxError") -> str:
        """Format a syntax error with the offending input and a caret.

        Errors without a diagnostic (plain reason strings) fall back to a
        single line. In RUST format the input is echoed with control
        characters escaped, and a caret marks the error offset when known.

        Example output:
            error[ILLEGAL_CHARACTER]: Illegal character '{' in namespace specific string
              --> offset 11
               |
               | urn:nid:bad{syntax
               |            ^
              = help: Percent-encode characters outside the allowed set as %XX
              = note: see https://www.rfc-editor.org/rfc/rfc2141

        Args:
            error: The syntax error to format

        Returns:
            Formatted error string
        """
        diagnostic = error.diagnostic
        if diagnostic is None:
            return f"{self._escape(error.input)}: {self._maybe_sanitize(error.reason)}"
        if self.output_format is not OutputFormat.RUST:
            return self.format(diagnostic)

        lines = self._format_rust(diagnostic).split("\n")
        excerpt = ["   |", f"   | {self._escape(error.input)}"]
        if error.offset >= 0:
            # Escaped characters widen the echoed line; align the caret with them.
            column = len(self._escape(error.input[: error.offset]))
            excerpt.append("   | " + " " * column + "^")
        insert_at = 2 if diagnostic.span is not None else 1
        lines[insert_at:insert_at] = excerpt
        return "\n".join(lines)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in Rust compiler style.

        Example output:
            error[NID_TOO_LONG]: The namespace identifier of URN '...' is longer than 32 characters
              = help: Shorten the namespace identifier
              = note: see https://www.rfc-editor.org/rfc/rfc2141
        """
        severity = diagnostic.severity
        severity_str = f"\033[1;31m{severity}\033[0m" if self.color else severity  # Bold red

        message = self._maybe_sanitize(self._escape(diagnostic.message))
        parts = [f"{severity_str}[{diagnostic.code.name}]: {message}"]

        if diagnostic.span:
            parts.append(f"  --> offset {diagnostic.span.start}")

        if diagnostic.hint:
            hint = self._maybe_sanitize(diagnostic.hint)
            parts.append(f"  = help: {hint}")

        if diagnostic.help_url:
            parts.append(f"  = note: see {diagnostic.help_url}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic in single-line format.

        Example output:
            NID_TOO_SHORT: The namespace identifier is empty
        """
        message = self._maybe_sanitize(self._escape(diagnostic.message))
        return f"{diagnostic.code.name}: {message}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        """Format diagnostic as JSON.

        Example output:
            {"code": "NID_TOO_SHORT", "code_value": 3105, "message": "...", "severity": "error"}
        """
        import json  # noqa: PLC0415

        data: dict[str, str | int | None] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "message": self._maybe_sanitize(diagnostic.message),
            "severity": diagnostic.severity,
        }

        if diagnostic.span:
            data["start"] = diagnostic.span.start
            data["end"] = diagnostic.span.end

        if diagnostic.hint:
            data["hint"] = self._maybe_sanitize(diagnostic.hint)

        if diagnostic.help_url:
            data["help_url"] = diagnostic.help_url

        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _escape(text: str) -> str:
        """Escape control characters so one diagnostic stays on its own lines."""
        return text.translate(_CONTROL_ESCAPES)

    def _maybe_sanitize(self, text: str) -> str:
        """Truncate text if sanitization is enabled.

        Args:
            text: Text to possibly truncate

        Returns:
            Original or truncated text
        """
        if self.sanitize and len(text) > self.max_content_length:
            return text[: self.max_content_length] + "..."
        return text
