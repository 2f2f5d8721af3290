"""Error message templates.

Centralized error message construction for testable, consistent error messages.
Text comes from the message catalog, so every template takes the locale to
render in (None selects the system locale).

Python 3.13+.
"""

from urnkit.constants import MAX_NID_LENGTH, RFC_2141_URL, URN_MESSAGE_CONTEXT
from urnkit.enums import URNComponent
from urnkit.i18n import format_message

from .codes import Diagnostic, DiagnosticCode, SourceSpan

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Localized text from one catalog
        - Documentation of all error cases
    """

    @staticmethod
    def _build(
        code: DiagnosticCode,
        arguments: tuple[object, ...],
        source: str,
        offset: int | None,
        locale: str | None,
    ) -> Diagnostic:
        message = format_message(URN_MESSAGE_CONTEXT, code.mnemonic, arguments, locale=locale)
        hint = format_message(URN_MESSAGE_CONTEXT, f"{code.mnemonic}_HINT", locale=locale)
        span = None
        if offset is not None:
            span = SourceSpan(start=offset, end=min(offset + 1, len(source)))
        return Diagnostic(code=code, message=message, span=span, hint=hint, help_url=RFC_2141_URL)

    @staticmethod
    def not_urn(source: str, offset: int, locale: str | None = None) -> Diagnostic:
        """Prefix scan stopped on ',' or ran off the end without a ':'.

        Args:
            source: The rejected input
            offset: Where the prefix scan stopped
            locale: Locale to render the message in

        Returns:
            Diagnostic for NOT_URN
        """
        return ErrorTemplate._build(DiagnosticCode.NOT_URN, (source,), source, offset, locale)

    @staticmethod
    def missing_prefix(source: str, locale: str | None = None) -> Diagnostic:
        """Input starts with ':' (always offset 0).

        Returns:
            Diagnostic for MISSING_PREFIX
        """
        return ErrorTemplate._build(DiagnosticCode.MISSING_PREFIX, (source,), source, 0, locale)

    @staticmethod
    def invalid_prefix(source: str, locale: str | None = None) -> Diagnostic:
        """Prefix present but not "urn" (offset unknown).

        Returns:
            Diagnostic for INVALID_PREFIX
        """
        return ErrorTemplate._build(DiagnosticCode.INVALID_PREFIX, (source,), source, None, locale)

    @staticmethod
    def nid_illegal(source: str, offset: int, locale: str | None = None) -> Diagnostic:
        """NID scan stopped on ',' or ran off the end without a ':'.

        Returns:
            Diagnostic for NID_ILLEGAL
        """
        return ErrorTemplate._build(DiagnosticCode.NID_ILLEGAL, (source,), source, offset, locale)

    @staticmethod
    def nid_too_short(source: str, offset: int, locale: str | None = None) -> Diagnostic:
        """Empty NID ("urn::...").

        Returns:
            Diagnostic for NID_TOO_SHORT
        """
        return ErrorTemplate._build(DiagnosticCode.NID_TOO_SHORT, (), source, offset, locale)

    @staticmethod
    def nid_too_long(source: str, locale: str | None = None) -> Diagnostic:
        """NID exceeds MAX_NID_LENGTH characters (offset unknown).

        Returns:
            Diagnostic for NID_TOO_LONG
        """
        return ErrorTemplate._build(
            DiagnosticCode.NID_TOO_LONG, (source, MAX_NID_LENGTH), source, None, locale
        )

    @staticmethod
    def illegal_character(
        source: str, offset: int, component: URNComponent, locale: str | None = None
    ) -> Diagnostic:
        """Character outside the class allowed for the component.

        Args:
            source: The rejected input
            offset: Offset of the offending character
            component: Grammar component being checked
            locale: Locale to render the message in

        Returns:
            Diagnostic for ILLEGAL_CHARACTER
        """
        component_name = format_message(URN_MESSAGE_CONTEXT, component.mnemonic, locale=locale)
        return ErrorTemplate._build(
            DiagnosticCode.ILLEGAL_CHARACTER,
            (component_name, source[offset]),
            source,
            offset,
            locale,
        )

    @staticmethod
    def malformed_escape(source: str, offset: int, locale: str | None = None) -> Diagnostic:
        """'%' not followed by two hex digits.

        Returns:
            Diagnostic for MALFORMED_ESCAPE
        """
        return ErrorTemplate._build(DiagnosticCode.MALFORMED_ESCAPE, (), source, offset, locale)

    @staticmethod
    def nss_too_short(source: str, offset: int, locale: str | None = None) -> Diagnostic:
        """Nothing after the second ':'.

        Returns:
            Diagnostic for NSS_TOO_SHORT
        """
        return ErrorTemplate._build(DiagnosticCode.NSS_TOO_SHORT, (source,), source, offset, locale)
