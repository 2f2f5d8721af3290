"""The URN value type and its parse entry points.

A :class:`URN` is immutable and always valid: it is produced by the grammar
in :mod:`urnkit.syntax.parser`, or by direct construction, which runs the
same grammar over the joined components.

Comparison Semantics:
    Equality, ordering and hashing all fold ASCII case in every component,
    so ``URN.parse("urn:silly:session")`` equals
    ``URN.parse("uRn:silly:seSsion")``. Components are still stored with
    their original case (the prefix is always stored lower-cased).

Hashing:
    :meth:`URN.hash_code` is the Java-compatible 32-bit fold of the
    case-folded components, memoized on first use. ``0`` marks "not yet
    computed", so a URN whose hash really is ``0`` recomputes it on each
    call; the value returned is the same every time.

Python 3.13+.
"""

import string
from dataclasses import dataclass, field
from typing import Self

from urnkit.constants import URN_PREFIX
from urnkit.core.hashing import hash_strings
from urnkit.diagnostics import ErrorTemplate, URNSyntaxError
from urnkit.syntax.cursor import ParseError
from urnkit.syntax.parser import URNComponents, URNParser

__all__ = ["URN", "parse_urn"]

_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SEPARATOR: str = ":"


def _compare_ignoring_case(a: str, b: str) -> int:
    """Ordinal comparison with ASCII case folded; shorter string first on a tie."""
    for x, y in zip(a.translate(_ASCII_LOWER), b.translate(_ASCII_LOWER), strict=False):
        if x != y:
            return ord(x) - ord(y)
    return len(a) - len(b)


@dataclass(frozen=True, slots=True, eq=False)
class URN:
    """A syntactically valid RFC 2141 Uniform Resource Name.

    Attributes:
        prefix: Always "urn"
        nid: Namespace identifier, original case
        nss: Namespace specific string, original case, escapes undecoded

    Raises:
        URNSyntaxError: On direct construction from components that do not
            form a valid URN

    Example:
        >>> urn = URN.parse("URN:ISBN:0451450523")
        >>> urn.nid, urn.nss
        ('ISBN', '0451450523')
        >>> str(urn)
        'urn:ISBN:0451450523'
        >>> urn == URN("urn", "isbn", "0451450523")
        True
    """

    prefix: str
    nid: str
    nss: str
    _hash: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        text = _SEPARATOR.join((self.prefix, self.nid, self.nss))
        parser = URNParser()
        result = parser.parse_components(text)
        if isinstance(result, ParseError):
            raise parser.to_syntax_error(result)

        # A ':' inside the prefix or NID moves the split point.
        components = result.value
        if components.prefix != self.prefix.lower():
            raise URNSyntaxError(text, ErrorTemplate.invalid_prefix(text))
        if components.nid != self.nid:
            offset = len(components.prefix) + 1 + len(components.nid)
            raise URNSyntaxError(text, ErrorTemplate.nid_illegal(text, offset), offset)
        object.__setattr__(self, "prefix", components.prefix)

    @classmethod
    def _from_components(cls, components: URNComponents) -> Self:
        """Build a URN from components the grammar has already accepted."""
        urn = object.__new__(cls)
        object.__setattr__(urn, "prefix", components.prefix)
        object.__setattr__(urn, "nid", components.nid)
        object.__setattr__(urn, "nss", components.nss)
        object.__setattr__(urn, "_hash", 0)
        return urn

    @classmethod
    def parse(cls, text: str, *, locale: str | None = None) -> Self:
        """Parse text as a URN.

        Args:
            text: Candidate URN, e.g. "urn:isbn:0451450523"
            locale: Locale for the error reason (None: system locale)

        Returns:
            The parsed URN

        Raises:
            URNSyntaxError: If text is not a valid URN
            TypeError: If text is not a str
        """
        return cls._from_components(URNParser(locale=locale).parse(text))

    @property
    def canonical(self) -> str:
        """``prefix:nid:nss`` rebuilt from the stored components."""
        return f"{self.prefix}{_SEPARATOR}{self.nid}{_SEPARATOR}{self.nss}"

    def to_canonical_string(self) -> str:
        """Return the canonical text form (same as :attr:`canonical`)."""
        return self.canonical

    def _folded(self) -> tuple[str, str, str]:
        return (
            self.prefix.translate(_ASCII_LOWER),
            self.nid.translate(_ASCII_LOWER),
            self.nss.translate(_ASCII_LOWER),
        )

    def compare_to(self, other: "URN") -> int:
        """Three-way comparison over (prefix, nid, nss), ASCII case folded.

        Returns:
            Negative, zero or positive as self sorts before, equal to or
            after other

        Example:
            >>> URN.parse("urn:bar:foo").compare_to(URN.parse("urn:bat:foo")) < 0
            True
        """
        for mine, theirs in (
            (self.prefix, other.prefix),
            (self.nid, other.nid),
            (self.nss, other.nss),
        ):
            diff = _compare_ignoring_case(mine, theirs)
            if diff != 0:
                return diff
        return 0

    def hash_code(self) -> int:
        """Signed 32-bit composite hash of the case-folded components."""
        h = self._hash
        if h == 0:
            h = hash_strings(*self._folded())
            # Racing threads store the same value.
            object.__setattr__(self, "_hash", h)
        return h

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URN):
            return NotImplemented
        return self._folded() == other._folded()

    def __hash__(self) -> int:
        return self.hash_code()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, URN):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, URN):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, URN):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, URN):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __str__(self) -> str:
        return self.canonical

    def __repr__(self) -> str:
        return f"URN({self.canonical!r})"


def parse_urn(
    text: str, *, locale: str | None = None
) -> tuple[URN | None, tuple[URNSyntaxError, ...]]:
    """Parse text as a URN without raising on syntax errors.

    Args:
        text: Candidate URN
        locale: Locale for the error reason (None: system locale)

    Returns:
        (urn, ()) on success, (None, (error,)) on failure. There is never
        more than one error.

    Raises:
        TypeError: If text is not a str

    Example:
        >>> urn, errors = parse_urn("urn:isbn:0451450523")
        >>> urn.nid, errors
        ('isbn', ())
        >>> urn, errors = parse_urn("urn::x", locale="en")
        >>> urn, errors[0].code.name, errors[0].offset
        (None, 'NID_TOO_SHORT', 4)
    """
    parser = URNParser(locale=locale)
    result = parser.parse_components(text)
    if isinstance(result, ParseError):
        return None, (parser.to_syntax_error(result),)
    return URN._from_components(result.value), ()
