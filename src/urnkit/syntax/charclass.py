"""Bitmask character classes for the RFC 2141 grammar.

Every ASCII character class is a pair of 64-bit masks: the low word has one
bit per code point 0-63, the high word one bit per code point 64-127.
Membership is a shift and an AND, with no per-character branching on the
class contents. Code points 128 and above belong to no class.

Classes (RFC 2141 section 2 and 2.2):
    digit     = 0-9
    upalpha   = A-Z
    lowalpha  = a-z
    alpha     = upalpha | lowalpha
    alphanum  = alpha | digit
    hex       = digit | A-F | a-f
    other     = ( ) + , - . : = @ ; $ _ ! * '
    reserved  = % / ? #
    trans     = alphanum | other | reserved

Bit 0 of the low word doubles as the ESCAPED flag: a mask pair carrying it
tells :func:`urnkit.syntax.scanner.scan_masked` that percent-escapes are
permitted in the run being scanned.

All constants are module-level ints computed once at import and never
written afterwards, so they are safe to read from any thread.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Mask construction
    "low_mask",
    "high_mask",
    "low_mask_range",
    "high_mask_range",
    "match",
    "MaskPair",
    "OTHER_CHARS",
    "RESERVED_CHARS",
    # Primitive classes
    "L_DIGIT",
    "H_DIGIT",
    "L_UPALPHA",
    "H_UPALPHA",
    "L_LOWALPHA",
    "H_LOWALPHA",
    "L_ALPHA",
    "H_ALPHA",
    "L_ALPHANUM",
    "H_ALPHANUM",
    "L_HYPHEN",
    "H_HYPHEN",
    "L_ALPHANUM_HYPHEN",
    "H_ALPHANUM_HYPHEN",
    "L_HEX",
    "H_HEX",
    "L_ESCAPED",
    "H_ESCAPED",
    "L_OTHER",
    "H_OTHER",
    "L_RESERVED",
    "H_RESERVED",
    "L_TRANS",
    "H_TRANS",
    # Named pairs
    "ALPHANUM",
    "ALPHANUM_HYPHEN",
    "HEX",
    "NSS_ESCAPED",
    "TRANS",
]

_HALF: int = 64
_ASCII_LIMIT: int = 128

OTHER_CHARS: str = "()+,-.:=@;$_!*'"
RESERVED_CHARS: str = "%/?#"


def low_mask(chars: str) -> int:
    """Mask of the characters in chars whose code point is below 64."""
    m = 0
    for c in chars:
        cp = ord(c)
        if cp < _HALF:
            m |= 1 << cp
    return m


def high_mask(chars: str) -> int:
    """Mask of the characters in chars whose code point is in [64, 128)."""
    m = 0
    for c in chars:
        cp = ord(c)
        if _HALF <= cp < _ASCII_LIMIT:
            m |= 1 << (cp - _HALF)
    return m


def _range_mask(first: str, last: str, lo: int, hi: int) -> int:
    """Bits for first..last (inclusive) clamped into [lo, hi], relative to lo.

    A range that does not intersect [lo, hi] at all gives 0; clamping alone
    would otherwise pin it to the nearest edge bit.
    """
    start, stop = ord(first), ord(last)
    if stop < lo or start > hi:
        return 0
    start = max(min(start, hi), lo) - lo
    stop = max(min(stop, hi), lo) - lo
    m = 0
    for i in range(start, stop + 1):
        m |= 1 << i
    return m


def low_mask_range(first: str, last: str) -> int:
    """Low-word mask for the code points first..last, inclusive.

    Example:
        >>> low_mask_range("0", "9") == 0x3FF << 48
        True
        >>> low_mask_range("A", "Z")
        0
    """
    return _range_mask(first, last, 0, _HALF - 1)


def high_mask_range(first: str, last: str) -> int:
    """High-word mask for the code points first..last, inclusive.

    Example:
        >>> high_mask_range("A", "C")
        14
        >>> high_mask_range("0", "9")
        0
    """
    return _range_mask(first, last, _HALF, _ASCII_LIMIT - 1)


def match(c: str, low: int, high: int) -> bool:
    """Tell whether the character c is permitted by the given mask pair.

    Args:
        c: A single character
        low: Mask for code points 0-63
        high: Mask for code points 64-127

    Returns:
        True if c's bit is set in the applicable mask; always False for
        code points 128 and above
    """
    cp = ord(c)
    if cp < _HALF:
        return bool((1 << cp) & low)
    if cp < _ASCII_LIMIT:
        return bool((1 << (cp - _HALF)) & high)
    return False


@dataclass(frozen=True, slots=True)
class MaskPair:
    """A named (low, high) mask pair.

    Supports ``ch in pair`` membership and ``pair | other`` union.

    Example:
        >>> "7" in ALPHANUM
        True
        >>> "-" in ALPHANUM
        False
        >>> "-" in ALPHANUM | MaskPair(L_HYPHEN, H_HYPHEN)
        True
    """

    low: int
    high: int

    def __contains__(self, c: str) -> bool:
        return match(c, self.low, self.high)

    def __or__(self, other: "MaskPair") -> "MaskPair":
        return MaskPair(self.low | other.low, self.high | other.high)


# digit    = "0" | "1" | ... | "9"
L_DIGIT: int = low_mask_range("0", "9")
H_DIGIT: int = high_mask_range("0", "9")

# upalpha  = "A" | "B" | ... | "Z"
L_UPALPHA: int = low_mask_range("A", "Z")
H_UPALPHA: int = high_mask_range("A", "Z")

# lowalpha = "a" | "b" | ... | "z"
L_LOWALPHA: int = low_mask_range("a", "z")
H_LOWALPHA: int = high_mask_range("a", "z")

# alpha    = lowalpha | upalpha
L_ALPHA: int = L_LOWALPHA | L_UPALPHA
H_ALPHA: int = H_LOWALPHA | H_UPALPHA

# alphanum = alpha | digit
L_ALPHANUM: int = L_DIGIT | L_ALPHA
H_ALPHANUM: int = H_DIGIT | H_ALPHA

# Hyphen, for use in namespace identifiers
L_HYPHEN: int = low_mask("-")
H_HYPHEN: int = high_mask("-")

L_ALPHANUM_HYPHEN: int = L_ALPHANUM | L_HYPHEN
H_ALPHANUM_HYPHEN: int = H_ALPHANUM | H_HYPHEN

# hex      = digit | "A" | ... | "F" | "a" | ... | "f"
L_HEX: int = L_DIGIT
H_HEX: int = high_mask_range("A", "F") | high_mask_range("a", "f")

# Flag bit, not a character: escape triples are allowed in this scan.
L_ESCAPED: int = 1
H_ESCAPED: int = 0

L_OTHER: int = low_mask(OTHER_CHARS)
H_OTHER: int = high_mask(OTHER_CHARS)

L_RESERVED: int = low_mask(RESERVED_CHARS)
H_RESERVED: int = high_mask(RESERVED_CHARS)

L_TRANS: int = L_ALPHANUM | L_OTHER | L_RESERVED
H_TRANS: int = H_ALPHANUM | H_OTHER | H_RESERVED

ALPHANUM = MaskPair(L_ALPHANUM, H_ALPHANUM)
ALPHANUM_HYPHEN = MaskPair(L_ALPHANUM_HYPHEN, H_ALPHANUM_HYPHEN)
HEX = MaskPair(L_HEX, H_HEX)
NSS_ESCAPED = MaskPair(L_ALPHANUM | L_OTHER | L_ESCAPED, H_ALPHANUM | H_OTHER | H_ESCAPED)
TRANS = MaskPair(L_TRANS, H_TRANS)
