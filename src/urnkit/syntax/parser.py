"""RFC 2141 URN grammar driver.

Grammar (RFC 2141 section 2):
    <URN> ::= "urn:" <NID> ":" <NSS>
    <NID> ::= <let-num> [ 1,31<let-num-hyp> ]
    <NSS> ::= 1*<URN chars>

Architecture:
    Each grammar rule is a free function taking a
    :class:`~urnkit.syntax.cursor.Cursor` and returning either a
    :class:`~urnkit.syntax.cursor.ParseResult` or a
    :class:`~urnkit.syntax.cursor.ParseError`. The driver moves through
    :class:`~urnkit.enums.ParserState` in strict forward order
    (PREFIX -> NID -> NSS -> DONE) and stops at the first error; there is no
    backtracking and no recovery.

    :class:`URNParser` is the configured entry point. It turns a ParseError
    into a :class:`~urnkit.diagnostics.URNSyntaxError` whose reason is
    rendered from the message catalog in the parser's locale.

Python 3.13+.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from urnkit.constants import MAX_NID_LENGTH, URN_PREFIX
from urnkit.diagnostics import Diagnostic, DiagnosticCode, ErrorTemplate, URNSyntaxError
from urnkit.enums import ParserState, URNComponent

from .charclass import ALPHANUM, ALPHANUM_HYPHEN, NSS_ESCAPED, TRANS
from .cursor import Cursor, ParseError, ParseResult
from .scanner import peek_is, scan_escape, scan_masked, scan_until_any

__all__ = [
    "URNComponents",
    "URNParser",
    "parse_nid",
    "parse_nss",
    "parse_prefix",
    "step",
]

logger = logging.getLogger(__name__)

# Delimiter scan for prefix and NID: ',' can never precede the ':' of a URN.
_DELIMITER_ERROR_CHARS: str = ","
_DELIMITER_STOP_CHARS: str = ":"


@dataclass(frozen=True, slots=True)
class URNComponents:
    """The three validated components of a URN, prefix lower-cased."""

    prefix: str
    nid: str
    nss: str


def parse_prefix(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse the "urn" prefix and its colon.

    Returns:
        ParseResult with the lower-cased prefix, cursor past the colon

    Example:
        >>> parse_prefix(Cursor("URN:isbn:1", 0)).value
        'urn'
        >>> parse_prefix(Cursor(":isbn:1", 0)).code.name
        'MISSING_PREFIX'
    """
    end = len(cursor.source)
    stop = scan_until_any(cursor, end, _DELIMITER_ERROR_CHARS, _DELIMITER_STOP_CHARS)
    if not peek_is(stop, end, ":"):
        return ParseError(DiagnosticCode.NOT_URN, stop)
    if stop.pos == cursor.pos:
        return ParseError(DiagnosticCode.MISSING_PREFIX, stop)

    prefix = cursor.slice_to(stop.pos).lower()
    if prefix != URN_PREFIX:
        return ParseError(DiagnosticCode.INVALID_PREFIX, cursor, located=False)
    return ParseResult(prefix, stop.advance())


def _nid_mismatch(cursor: Cursor, end: int) -> ParseError:
    """Error for the NID character at cursor that failed the class check.

    A '%' that does not start a well-formed escape is reported as such;
    anything else (including a well-formed escape) is an illegal character.
    """
    escape = scan_escape(cursor, end, cursor.current)
    if isinstance(escape, ParseError):
        return escape
    return ParseError(DiagnosticCode.ILLEGAL_CHARACTER, cursor, URNComponent.NAMESPACE_IDENTIFIER)


def parse_nid(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse the namespace identifier and its trailing colon.

    Checks run in a fixed order: delimiter, emptiness, length, first
    character, remaining characters. An over-long NID is therefore reported
    as too long even when it also holds illegal characters.

    Example:
        >>> result = parse_nid(Cursor("urn:isbn:0451450523", 4))
        >>> result.value, result.cursor.pos
        ('isbn', 9)
    """
    end = len(cursor.source)
    stop = scan_until_any(cursor, end, _DELIMITER_ERROR_CHARS, _DELIMITER_STOP_CHARS)
    if not peek_is(stop, end, ":"):
        return ParseError(DiagnosticCode.NID_ILLEGAL, stop)

    length = stop.pos - cursor.pos
    if length == 0:
        return ParseError(DiagnosticCode.NID_TOO_SHORT, cursor)
    if length > MAX_NID_LENGTH:
        return ParseError(DiagnosticCode.NID_TOO_LONG, cursor, located=False)

    if cursor.current not in ALPHANUM:
        return _nid_mismatch(cursor, stop.pos)
    checked = scan_masked(cursor, stop.pos, ALPHANUM_HYPHEN.low, ALPHANUM_HYPHEN.high)
    if isinstance(checked, ParseError):
        return checked
    if checked.pos < stop.pos:
        return _nid_mismatch(checked, stop.pos)

    return ParseResult(cursor.slice_to(stop.pos), stop.advance())


def parse_nss(cursor: Cursor) -> ParseResult[str] | ParseError:
    """Parse the namespace specific string, which runs to end of input.

    The first pass accepts alphanumerics, "other" punctuation and %HH
    escapes, and is the only place a malformed escape is detected. A second
    pass with the full transport set (which adds the reserved characters
    ``%/?#`` as plain characters) then decides whether the whole remainder
    is legal.

    Example:
        >>> parse_nss(Cursor("urn:nid:a%2Fb", 8)).value
        'a%2Fb'
        >>> parse_nss(Cursor("urn:nid:bad{syntax", 8)).offset
        11
    """
    end = len(cursor.source)
    scanned = scan_masked(cursor, end, NSS_ESCAPED.low, NSS_ESCAPED.high)
    if isinstance(scanned, ParseError):
        return scanned
    if cursor.pos == end:
        return ParseError(DiagnosticCode.NSS_TOO_SHORT, cursor)

    # Bit 0 of the first pass is the escape flag and also matches U+0000.
    trans = scan_masked(cursor, end, TRANS.low, TRANS.high)
    if isinstance(trans, ParseError):
        return trans
    if trans.pos < end:
        return ParseError(
            DiagnosticCode.ILLEGAL_CHARACTER, trans, URNComponent.NAMESPACE_SPECIFIC_STRING
        )

    return ParseResult(cursor.slice_to(end), cursor.advance(end - cursor.pos))


type _Rule = Callable[[Cursor], ParseResult[str] | ParseError]

_RULES: dict[ParserState, tuple[_Rule, ParserState]] = {
    ParserState.PREFIX: (parse_prefix, ParserState.NID),
    ParserState.NID: (parse_nid, ParserState.NSS),
    ParserState.NSS: (parse_nss, ParserState.DONE),
}


def step(
    state: ParserState, cursor: Cursor
) -> tuple[ParserState, ParseResult[str] | ParseError]:
    """Run the grammar rule for state and return the next state.

    Args:
        state: A non-terminal state (PREFIX, NID or NSS)
        cursor: Where the rule starts

    Returns:
        (next state, rule result); the next state is FAILED when the rule
        returned a ParseError

    Raises:
        ValueError: If state is DONE or FAILED

    Example:
        >>> state, result = step(ParserState.PREFIX, Cursor("urn:a:b", 0))
        >>> state, result.cursor.pos
        (<ParserState.NID: 'nid'>, 4)
    """
    transition = _RULES.get(state)
    if transition is None:
        msg = f"No grammar rule runs from terminal state {state.name}"
        raise ValueError(msg)
    rule, next_state = transition
    result = rule(cursor)
    if isinstance(result, ParseError):
        return ParserState.FAILED, result
    return next_state, result


class URNParser:
    """RFC 2141 URN parser using the immutable cursor pattern.

    Design:
    - Every grammar rule takes a Cursor and returns ParseResult | ParseError
    - The first error ends the parse; there is no partial result
    - Reasons are rendered from the message catalog only when an error
      leaves the parser

    Attributes:
        locale: Locale used to render error reasons (None: system locale)

    Example:
        >>> parser = URNParser(locale="en")
        >>> parser.parse("URN:isbn:0451450523")
        URNComponents(prefix='urn', nid='isbn', nss='0451450523')
    """

    __slots__ = ("_locale",)

    def __init__(self, *, locale: str | None = None) -> None:
        """Initialize parser.

        Args:
            locale: Locale for error reasons, BCP-47 or POSIX. None selects
                the locale detected from the environment.
        """
        self._locale = locale

    @property
    def locale(self) -> str | None:
        """Locale used to render error reasons."""
        return self._locale

    def parse_components(self, source: str) -> ParseResult[URNComponents] | ParseError:
        """Run the grammar over source without raising on syntax errors.

        Args:
            source: Candidate URN text

        Returns:
            ParseResult holding the components, or the ParseError that ended
            the parse

        Raises:
            TypeError: If source is not a str
        """
        if not isinstance(source, str):
            msg = f"URN source must be str, got {type(source).__name__}"
            raise TypeError(msg)

        values: list[str] = []
        cursor = Cursor(source, 0)
        state = ParserState.PREFIX
        while state is not ParserState.DONE:
            state, result = step(state, cursor)
            if isinstance(result, ParseError):
                logger.debug(
                    "Rejected URN %r: %s at offset %d",
                    source,
                    result.code.name,
                    result.offset,
                )
                return result
            values.append(result.value)
            cursor = result.cursor

        prefix, nid, nss = values
        return ParseResult(URNComponents(prefix=prefix, nid=nid, nss=nss), cursor)

    def parse(self, source: str) -> URNComponents:
        """Parse source into its validated components.

        Raises:
            URNSyntaxError: If source is not a syntactically valid URN
            TypeError: If source is not a str
        """
        result = self.parse_components(source)
        if isinstance(result, ParseError):
            raise self.to_syntax_error(result)
        return result.value

    def to_syntax_error(self, error: ParseError) -> URNSyntaxError:
        """Convert a grammar failure into the public exception type."""
        return URNSyntaxError(error.source, self._diagnostic(error), error.offset)

    def _diagnostic(self, error: ParseError) -> Diagnostic:
        source = error.source
        offset = error.cursor.pos
        locale = self._locale
        match error.code:
            case DiagnosticCode.NOT_URN:
                return ErrorTemplate.not_urn(source, offset, locale)
            case DiagnosticCode.MISSING_PREFIX:
                return ErrorTemplate.missing_prefix(source, locale)
            case DiagnosticCode.INVALID_PREFIX:
                return ErrorTemplate.invalid_prefix(source, locale)
            case DiagnosticCode.NID_ILLEGAL:
                return ErrorTemplate.nid_illegal(source, offset, locale)
            case DiagnosticCode.NID_TOO_SHORT:
                return ErrorTemplate.nid_too_short(source, offset, locale)
            case DiagnosticCode.NID_TOO_LONG:
                return ErrorTemplate.nid_too_long(source, locale)
            case DiagnosticCode.ILLEGAL_CHARACTER:
                component = error.component or URNComponent.NAMESPACE_SPECIFIC_STRING
                return ErrorTemplate.illegal_character(source, offset, component, locale)
            case DiagnosticCode.MALFORMED_ESCAPE:
                return ErrorTemplate.malformed_escape(source, offset, locale)
            case DiagnosticCode.NSS_TOO_SHORT:
                return ErrorTemplate.nss_too_short(source, offset, locale)
