"""Tests for message catalog lookup and formatting.

Exercises the bundled English and German catalogs, locale fallback,
argument rendering, and the handling of mnemonics no catalog defines.
"""

from __future__ import annotations

import logging

import pytest

import urnkit.urn
from urnkit import URN
from urnkit.constants import URN_MESSAGE_CONTEXT
from urnkit.diagnostics import DiagnosticCode
from urnkit.enums import URNComponent
from urnkit.i18n import format_message, load_catalog

BUNDLED_LOCALES = ("en", "de")


class TestLoadCatalog:
    """Test loading bundled catalogs."""

    @pytest.mark.parametrize("locale_code", BUNDLED_LOCALES)
    def test_bundled_catalog_loads(self, locale_code: str) -> None:
        """Each bundled locale has a catalog."""
        catalog = load_catalog(locale_code)

        assert catalog is not None
        assert catalog.get("URN_NID_TOO_SHORT", context=URN_MESSAGE_CONTEXT) is not None

    def test_missing_catalog_is_none(self) -> None:
        """A locale without a bundled catalog gives None."""
        assert load_catalog("fr") is None

    def test_catalog_is_cached(self, fresh_catalogs: None) -> None:
        """Loading twice returns the same object."""
        assert load_catalog("en") is load_catalog("en")

    @pytest.mark.parametrize("locale_code", BUNDLED_LOCALES)
    @pytest.mark.parametrize("code", list(DiagnosticCode))
    def test_every_code_has_message_and_hint(self, locale_code: str, code: DiagnosticCode) -> None:
        """Every diagnostic code has a message and a hint in every catalog."""
        catalog = load_catalog(locale_code)
        assert catalog is not None

        for mnemonic in (code.mnemonic, f"{code.mnemonic}_HINT"):
            message = catalog.get(mnemonic, context=URN_MESSAGE_CONTEXT)
            assert message is not None, mnemonic
            assert message.string, mnemonic

    @pytest.mark.parametrize("locale_code", BUNDLED_LOCALES)
    @pytest.mark.parametrize("component", list(URNComponent))
    def test_every_component_has_a_name(self, locale_code: str, component: URNComponent) -> None:
        """Every grammar component has a display name in every catalog."""
        catalog = load_catalog(locale_code)
        assert catalog is not None

        assert catalog.get(component.mnemonic, context=URN_MESSAGE_CONTEXT) is not None


class TestFormatMessage:
    """Test format_message."""

    def test_plain_message(self) -> None:
        """A message without placeholders is returned as written."""
        assert format_message(URN_MESSAGE_CONTEXT, "URN_COMPONENT_NID", locale="en") == (
            "namespace identifier"
        )

    def test_positional_substitution(self) -> None:
        """{0} is replaced by the first argument."""
        text = format_message(
            URN_MESSAGE_CONTEXT, "URN_NSS_TOO_SHORT", ("urn:x:",), locale="en"
        )

        assert text == "URN 'urn:x:' has an empty namespace specific string"

    def test_german(self) -> None:
        """The de catalog renders German text."""
        text = format_message(URN_MESSAGE_CONTEXT, "URN_NID_TOO_SHORT", locale="de")

        assert text == "Die Namensraumkennung ist leer"

    def test_regional_locale_uses_language_catalog(self) -> None:
        """de-AT falls back to the de catalog."""
        text = format_message(URN_MESSAGE_CONTEXT, "URN_NID_TOO_SHORT", locale="de-AT")

        assert text == "Die Namensraumkennung ist leer"

    def test_locale_without_catalog_falls_back_to_english(self) -> None:
        """A known locale with no catalog uses the default locale's text."""
        text = format_message(URN_MESSAGE_CONTEXT, "URN_NID_TOO_SHORT", locale="fr")

        assert text == "The namespace identifier is empty"

    def test_unknown_locale_falls_back_to_english(
        self, caplog: pytest.LogCaptureFixture, fresh_catalogs: None
    ) -> None:
        """An unknown locale logs a warning and uses English."""
        with caplog.at_level(logging.WARNING, logger="urnkit.i18n"):
            text = format_message(URN_MESSAGE_CONTEXT, "URN_NID_TOO_SHORT", locale="xx-QQ")

        assert text == "The namespace identifier is empty"
        assert "Unknown locale" in caplog.text

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [("en", "1,234"), ("de", "1.234")],
    )
    def test_integers_use_locale_grouping(self, locale_code: str, expected: str) -> None:
        """Integer arguments are formatted with the catalog locale's grouping."""
        text = format_message(
            URN_MESSAGE_CONTEXT, "URN_NID_TOO_LONG", ("urn:x:y", 1234), locale=locale_code
        )

        assert expected in text

    def test_bool_is_not_formatted_as_number(self) -> None:
        """bool arguments are rendered with str()."""
        text = format_message(URN_MESSAGE_CONTEXT, "URN_NSS_TOO_SHORT", (True,), locale="en")

        assert "'True'" in text

    def test_class_and_module_contexts(self) -> None:
        """A class or module context resolves to its module path."""
        by_name = format_message(URN_MESSAGE_CONTEXT, "URN_COMPONENT_NSS", locale="en")

        assert format_message(URN, "URN_COMPONENT_NSS", locale="en") == by_name
        assert format_message(urnkit.urn, "URN_COMPONENT_NSS", locale="en") == by_name

    def test_missing_mnemonic_returns_mnemonic(self, caplog: pytest.LogCaptureFixture) -> None:
        """A mnemonic no catalog defines is returned unchanged and logged."""
        with caplog.at_level(logging.ERROR, logger="urnkit.i18n.catalog"):
            text = format_message(URN_MESSAGE_CONTEXT, "URN_NO_SUCH_MESSAGE", locale="en")

        assert text == "URN_NO_SUCH_MESSAGE"
        assert "Missing message 'URN_NO_SUCH_MESSAGE' in context 'urnkit.urn'" in caplog.text

    def test_missing_mnemonic_logged_in_requested_locale(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """The missing-message log line itself comes from the catalog."""
        with caplog.at_level(logging.ERROR, logger="urnkit.i18n.catalog"):
            format_message(URN_MESSAGE_CONTEXT, "URN_NO_SUCH_MESSAGE", locale="de")

        assert "Fehlende Meldung 'URN_NO_SUCH_MESSAGE'" in caplog.text

    def test_wrong_context_is_missing(self) -> None:
        """Mnemonics are scoped by context."""
        assert format_message("urnkit.other", "URN_COMPONENT_NID", locale="en") == (
            "URN_COMPONENT_NID"
        )

    def test_too_few_arguments_raises(self) -> None:
        """A pattern referencing more arguments than supplied is an error."""
        with pytest.raises(IndexError):
            format_message(URN_MESSAGE_CONTEXT, "URN_NID_TOO_LONG", ("urn:x:y",), locale="en")
