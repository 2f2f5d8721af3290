"""Cursor-level scanning over mask-pair character classes.

Stateless free functions: each takes a cursor and an explicit end offset and
returns a new cursor (or a ParseError). Nothing here knows about prefixes,
NIDs or NSSs; the grammar lives in :mod:`urnkit.syntax.parser`.

Python 3.13+. Zero external dependencies.
"""

from urnkit.diagnostics import DiagnosticCode

from .charclass import HEX, L_ESCAPED, match
from .cursor import Cursor, ParseError

__all__ = ["peek_is", "scan_escape", "scan_masked", "scan_until_any"]

_ESCAPE_LENGTH: int = 3


def scan_escape(cursor: Cursor, end: int, c: str) -> Cursor | ParseError:
    """Consume one %HH escape triple.

    Args:
        cursor: Position of c
        end: Exclusive end of the region being scanned
        c: The character at cursor

    Returns:
        cursor unchanged if c is not '%'; the cursor past the triple when
        both following characters are hex digits; otherwise a
        MALFORMED_ESCAPE error at the '%'

    Example:
        >>> scan_escape(Cursor("%2F", 0), 3, "%").pos
        3
        >>> scan_escape(Cursor("%2z", 0), 3, "%").code.name
        'MALFORMED_ESCAPE'
    """
    if c != "%":
        return cursor
    if cursor.pos + _ESCAPE_LENGTH > end:
        return ParseError(DiagnosticCode.MALFORMED_ESCAPE, cursor)
    hi = cursor.source[cursor.pos + 1]
    lo = cursor.source[cursor.pos + 2]
    if hi in HEX and lo in HEX:
        return cursor.advance(_ESCAPE_LENGTH)
    return ParseError(DiagnosticCode.MALFORMED_ESCAPE, cursor)


def scan_masked(cursor: Cursor, end: int, low: int, high: int) -> Cursor | ParseError:
    """Advance while the current character matches the mask pair.

    When the pair carries the ESCAPED flag, a '%' is handed to
    :func:`scan_escape`; a malformed escape is returned as the error rather
    than ending the run.

    Returns:
        Cursor at the first non-matching position (may equal the start)

    Example:
        >>> from urnkit.syntax.charclass import ALPHANUM
        >>> scan_masked(Cursor("ab-c", 0), 4, ALPHANUM.low, ALPHANUM.high).pos
        2
    """
    escapes = bool(low & L_ESCAPED)
    while cursor.pos < end:
        c = cursor.source[cursor.pos]
        if match(c, low, high):
            cursor = cursor.advance()
        elif escapes and c == "%":
            result = scan_escape(cursor, end, c)
            if isinstance(result, ParseError):
                return result
            cursor = result
        else:
            break
    return cursor


def scan_until_any(cursor: Cursor, end: int, error_chars: str, stop_chars: str) -> Cursor:
    """Advance until a character from either set, or end.

    The caller inspects the character at the returned position to tell an
    error stop from a regular one.

    Example:
        >>> scan_until_any(Cursor("urn,x:y", 0), 7, ",", ":").pos
        3
    """
    pos = cursor.pos
    source = cursor.source
    while pos < end:
        c = source[pos]
        if c in error_chars or c in stop_chars:
            break
        pos += 1
    return Cursor(source, pos)


def peek_is(cursor: Cursor, end: int, ch: str) -> bool:
    """Bounds-safe test that the character at cursor is ch."""
    return cursor.pos < end and cursor.source[cursor.pos] == ch
