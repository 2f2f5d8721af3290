"""Diagnostic system for URN errors.

Provides structured error diagnostics with codes, spans, hints, and help URLs.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+.
"""

from .codes import Diagnostic, DiagnosticCode, SourceSpan
from .errors import URNError, URNSyntaxError
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "OutputFormat",
    "SourceSpan",
    "URNError",
    "URNSyntaxError",
]
