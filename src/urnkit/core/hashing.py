"""Java-compatible 32-bit string hashing.

Implements the ``h = 31*h + unit`` left-fold string hash over UTF-16 code
units, wrapped to a signed 32-bit integer. ``hash_string(0, s)`` equals
Java's ``String.hashCode()`` for every string, so hashes computed here agree
with identifiers hashed by JVM services.

The fold is seedable, which makes hashing a sequence of strings identical to
hashing their concatenation:

    hash_strings(s0, s1) == hash_string(hash_string(0, s0), s1)
                         == hash_string(0, s0 + s1)

Thread Safety:
    Pure functions, no shared state.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Iterator

__all__ = ["hash_string", "hash_strings"]

_INT32_MASK: int = 0xFFFFFFFF
_INT32_SIGN_BIT: int = 0x80000000
_HASH_MULTIPLIER: int = 31


def _to_int32(value: int) -> int:
    """Wrap an arbitrary Python int to a signed 32-bit value."""
    value &= _INT32_MASK
    return value - (1 << 32) if value & _INT32_SIGN_BIT else value


def _utf16_code_units(s: str) -> Iterator[int]:
    """Yield the UTF-16 code units of s (astral characters become surrogate pairs)."""
    if s.isascii():
        yield from map(ord, s)
        return
    data = s.encode("utf-16-be", "surrogatepass")
    for i in range(0, len(data), 2):
        yield (data[i] << 8) | data[i + 1]


def hash_string(seed: int, s: str) -> int:
    """Hash s, continuing from seed.

    Args:
        seed: Hash of everything that precedes s (0 to start fresh)
        s: String to fold into the hash

    Returns:
        Signed 32-bit hash

    Example:
        >>> hash_string(0, "hello")
        99162322
        >>> hash_string(0, "")
        0
        >>> hash_string(hash_string(0, "jack"), "jill") == hash_string(0, "jackjill")
        True
    """
    h = seed
    for unit in _utf16_code_units(s):
        h = (_HASH_MULTIPLIER * h + unit) & _INT32_MASK
    return _to_int32(h)


def hash_strings(*strings: str) -> int:
    """Hash several strings as though they were concatenated.

    Args:
        *strings: Strings to hash, in order

    Returns:
        Signed 32-bit hash, equal to hash_string(0, "".join(strings))

    Example:
        >>> hash_strings("jack", "jill") == hash_string(0, "jackjill")
        True
        >>> hash_strings()
        0
    """
    h = 0
    for s in strings:
        h = hash_string(h, s)
    return h
