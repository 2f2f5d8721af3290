"""urnkit exception hierarchy with structured diagnostics.

All exceptions can carry a Diagnostic object for rich error information.

Python 3.13+. Zero external dependencies.
"""

from urnkit.constants import UNKNOWN_OFFSET

from .codes import Diagnostic, DiagnosticCode

__all__ = ["URNError", "URNSyntaxError"]


class URNError(Exception):
    """Base exception for all urnkit errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize URNError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class URNSyntaxError(URNError):
    """Input text could not be parsed as a URN.

    Raised (or returned, see :func:`urnkit.parse_urn`) for every grammar
    violation. There is exactly one error per failed parse; parsing never
    recovers or guesses.

    Attributes:
        input: The text that failed to parse, unchanged
        reason: Human-readable explanation (localized)
        offset: Offset of the offending character, or -1 if not known
        code: DiagnosticCode, or None when built from a plain reason string

    Example:
        >>> try:
        ...     URN.parse("urn::x")
        ... except URNSyntaxError as e:
        ...     print(e.code.name, e.offset)
        NID_TOO_SHORT 4
    """

    def __init__(
        self,
        input: str,  # noqa: A002 - mirrors the attribute name
        reason: str | Diagnostic,
        offset: int = UNKNOWN_OFFSET,
    ) -> None:
        """Initialize URNSyntaxError.

        Args:
            input: The text that failed to parse
            reason: Explanation string OR Diagnostic object
            offset: Offset of the error, or -1 if not known

        Raises:
            ValueError: If offset is less than -1
        """
        if offset < UNKNOWN_OFFSET:
            msg = f"URNSyntaxError offset must be >= {UNKNOWN_OFFSET}, got {offset}"
            raise ValueError(msg)
        super().__init__(reason)
        self.input = input
        self.offset = offset

    @property
    def reason(self) -> str:
        """Human-readable explanation of the failure."""
        return str(self.args[0])

    @property
    def code(self) -> DiagnosticCode | None:
        """Error code, when the error was built from a Diagnostic."""
        return self.diagnostic.code if self.diagnostic is not None else None

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(input={self.input!r}, "
            f"reason={self.reason!r}, offset={self.offset})"
        )
