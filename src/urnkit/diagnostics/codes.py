"""Diagnostic codes and data structures.

Defines error codes, source spans, and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "SourceSpan",
]


class DiagnosticCode(Enum):
    """URN syntax error codes with unique identifiers.

    Codes occupy the 3100-3199 block (syntax errors, URN grammar). Each code
    has a catalog mnemonic, ``URN_<NAME>``, under which its message and a
    ``_HINT`` companion are stored.
    """

    NOT_URN = 3101
    MISSING_PREFIX = 3102
    INVALID_PREFIX = 3103
    NID_ILLEGAL = 3104
    NID_TOO_SHORT = 3105
    NID_TOO_LONG = 3106
    ILLEGAL_CHARACTER = 3107
    MALFORMED_ESCAPE = 3108
    NSS_TOO_SHORT = 3109

    @property
    def mnemonic(self) -> str:
        """Catalog key of this code's message, e.g. "URN_NID_TOO_LONG"."""
        return f"URN_{self.name}"


@dataclass(frozen=True, slots=True)
class SourceSpan:
    """Location of a syntax error within the input text.

    Note:
        Python strings measure positions in characters (Unicode code points),
        not bytes.

    Attributes:
        start: Starting character offset (0-indexed)
        end: Ending character offset (exclusive); equals start for a
            zero-width position such as end of input
    """

    start: int
    end: int

    def __post_init__(self) -> None:
        """Validate SourceSpan invariants.

        Raises:
            ValueError: If start is negative or end precedes start.
        """
        if self.start < 0:
            msg = f"SourceSpan.start must be >= 0, got {self.start}"
            raise ValueError(msg)
        if self.end < self.start:
            msg = f"SourceSpan.end ({self.end}) must be >= start ({self.start})"
            raise ValueError(msg)


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description (localized)
        span: Location in the input (None when the offset is unknown)
        hint: Suggestion for fixing the error (localized)
        help_url: Documentation URL for this error
        severity: Always "error"; there is no warning mode
    """

    code: DiagnosticCode
    message: str
    span: SourceSpan | None = None
    hint: str | None = None
    help_url: str | None = None
    severity: Literal["error"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output with
        control-character escaping.

        Example output:
            error[NID_TOO_SHORT]: The namespace identifier is empty
              --> offset 4
              = help: Put at least one letter or digit between the first and second ':'
              = note: see https://www.rfc-editor.org/rfc/rfc2141

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
