"""Immutable cursor infrastructure for the URN grammar.

Implements the immutable cursor pattern: parse state is a (source, pos)
value threaded through free functions, never a mutable field on a parser.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - Failures are values (ParseError), raised only at the public boundary

Pattern Reference:
    - Rust nom parser combinator library
    - Haskell Parsec
"""

from dataclasses import dataclass

from urnkit.constants import UNKNOWN_OFFSET
from urnkit.diagnostics import DiagnosticCode
from urnkit.enums import URNComponent

__all__ = ["Cursor", "ParseError", "ParseResult"]


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable source position tracker.

    Example:
        >>> cursor = Cursor("urn:a:b", 0)
        >>> cursor.current
        'u'
        >>> cursor.advance(4).current
        'a'
        >>> cursor.current  # Original unchanged
        'u'
        >>> Cursor("urn", 3).is_eof
        True
    """

    source: str
    pos: int

    @property
    def is_eof(self) -> bool:
        """Check if at end of input."""
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Raises:
            EOFError: If at end of input
        """
        if self.is_eof:
            msg = f"Unexpected EOF at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions, clamped to EOF.

        Example:
            >>> cursor = Cursor("urn", 0)
            >>> cursor.advance().pos
            1
            >>> cursor.advance(10).pos
            3
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def slice_to(self, end_pos: int) -> str:
        """Extract source slice from current position to end_pos (exclusive).

        Example:
            >>> start = Cursor("urn:isbn:0451450523", 4)
            >>> start.slice_to(8)
            'isbn'
        """
        return self.source[self.pos : end_pos]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Every grammar rule has the signature:
        def parse_foo(cursor: Cursor) -> ParseResult[Foo] | ParseError

    Example:
        >>> result = ParseResult("urn", Cursor("urn:a:b", 4))
        >>> result.value
        'urn'
        >>> result.cursor.current
        'a'
    """

    value: T
    cursor: Cursor


@dataclass(frozen=True, slots=True)
class ParseError:
    """Grammar failure with its code and location.

    Attributes:
        code: What went wrong
        cursor: Where the failing scan stopped
        component: Grammar component, for ILLEGAL_CHARACTER
        located: False when the failure cannot be pinned to one character;
            the cursor then only records where the rule gave up

    Example:
        >>> error = ParseError(DiagnosticCode.NID_TOO_SHORT, Cursor("urn::x", 4))
        >>> error.offset
        4
        >>> ParseError(DiagnosticCode.INVALID_PREFIX, Cursor("x:a:b", 1), located=False).offset
        -1
    """

    code: DiagnosticCode
    cursor: Cursor
    component: URNComponent | None = None
    located: bool = True

    @property
    def source(self) -> str:
        """The text being parsed."""
        return self.cursor.source

    @property
    def offset(self) -> int:
        """Offset of the offending character, or -1 if unknown."""
        return self.cursor.pos if self.located else UNKNOWN_OFFSET
