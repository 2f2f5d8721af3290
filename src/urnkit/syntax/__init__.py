"""URN syntax package.

Provides the bitmask character classes, the immutable cursor, the scanner
primitives and the grammar driver. Separate from :mod:`urnkit.urn` so the
grammar can be exercised without building URN values.

Python 3.13+.
"""

from .cursor import Cursor, ParseError, ParseResult
from .parser import URNComponents, URNParser

__all__ = [
    "Cursor",
    "ParseError",
    "ParseResult",
    "URNComponents",
    "URNParser",
    "parse",
]


def parse(source: str) -> URNComponents:
    """Parse URN text into its validated components.

    Convenience function for URNParser().parse().

    Example:
        >>> from urnkit.syntax import parse
        >>> parse("urn:ietf:rfc:2141").nss
        'rfc:2141'
    """
    parser = URNParser()
    return parser.parse(source)
