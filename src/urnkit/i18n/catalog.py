"""Message catalog lookup and formatting.

Human-readable text is never written inline at the point of failure.
Callers name a message by its mnemonic (``URN_NID_TOO_LONG``) inside a
message context (the dotted path of the module that owns it) and pass
positional arguments; this module finds the pattern in the bundled PO
catalog for the best matching locale and substitutes the arguments.

Catalog Layout:
    Catalogs ship as package data in ``urnkit/i18n/locales/<locale>.po``.
    Each entry uses ``msgctxt`` for the message context, ``msgid`` for the
    mnemonic and ``msgstr`` for the pattern. Patterns use positional
    placeholders: ``"URN '{0}' is missing its prefix"``.

Lookup:
    The locale fallback chain (see :func:`locale_fallback_chain`) is walked
    in order; the first catalog holding a non-empty, non-fuzzy translation
    wins. A mnemonic that no catalog defines is logged at ERROR level and
    the mnemonic itself is returned, so a missing translation never turns
    into a second failure on an error path.

Argument Formatting:
    Integers are rendered with Babel's locale-aware decimal formatting
    (``32`` stays ``32``; ``1234`` becomes ``1,234`` in English and
    ``1.234`` in German). Everything else is converted with ``str()``.

Thread Safety:
    Catalog loads are memoized with ``functools.lru_cache``; loaded
    catalogs are only read afterwards.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Sequence
from importlib.resources import files
from types import ModuleType
from typing import TYPE_CHECKING

from urnkit.constants import CATALOG_MESSAGE_CONTEXT, MAX_CATALOG_CACHE_SIZE, MESSAGE_DOMAIN

from .locale_utils import locale_fallback_chain

if TYPE_CHECKING:
    from babel.messages.catalog import Catalog

__all__ = [
    "MessageContext",
    "clear_catalog_cache",
    "format_message",
    "load_catalog",
]

logger = logging.getLogger(__name__)

type MessageContext = str | type | ModuleType
"""A dotted module path, or a class/module whose module path is used."""

_CATALOG_PACKAGE = "urnkit.i18n"
_CATALOG_DIRECTORY = "locales"


@functools.lru_cache(maxsize=MAX_CATALOG_CACHE_SIZE)
def load_catalog(locale_code: str) -> Catalog | None:
    """Load the bundled catalog for exactly locale_code.

    No fallback happens here; see :func:`format_message` for that.

    Args:
        locale_code: POSIX locale code naming the catalog file (e.g. "de")

    Returns:
        Parsed Babel catalog, or None if no catalog is bundled for the locale

    Raises:
        babel.messages.pofile.PoFileError: If a bundled catalog is malformed
    """
    from babel.messages.pofile import read_po  # noqa: PLC0415

    resource = files(_CATALOG_PACKAGE).joinpath(_CATALOG_DIRECTORY, f"{locale_code}.po")
    if not resource.is_file():
        logger.debug("No message catalog bundled for locale '%s'", locale_code)
        return None

    with resource.open("rb") as fh:
        catalog = read_po(fh, locale=locale_code, domain=MESSAGE_DOMAIN, abort_invalid=True)
    logger.debug("Loaded message catalog '%s' (%d messages)", locale_code, len(catalog))
    return catalog


def clear_catalog_cache() -> None:
    """Drop all memoized catalogs and locale chains (for tests and reloads)."""
    load_catalog.cache_clear()
    locale_fallback_chain.cache_clear()


def _context_name(context: MessageContext) -> str:
    """Resolve a message context to its dotted module path."""
    if isinstance(context, str):
        return context
    if isinstance(context, ModuleType):
        return context.__name__
    return context.__module__


def _lookup(context_name: str, mnemonic: str, locale_code: str | None) -> tuple[str, str] | None:
    """Find the pattern for mnemonic, walking the locale fallback chain.

    Returns:
        (pattern, locale of the catalog it came from), or None if no catalog
        in the chain defines it
    """
    chain = locale_fallback_chain(locale_code)
    for candidate in chain:
        catalog = load_catalog(candidate)
        if catalog is None:
            continue
        message = catalog.get(mnemonic, context=context_name)
        if message is None or message.fuzzy or not message.string:
            continue
        if candidate != chain[0]:
            logger.debug(
                "Message '%s' resolved from fallback locale '%s' (requested '%s')",
                mnemonic,
                candidate,
                chain[0],
            )
        return str(message.string), candidate
    return None


def _render_argument(argument: object, locale_code: str) -> str:
    """Render one substitution argument for the given locale."""
    if isinstance(argument, int) and not isinstance(argument, bool):
        from babel.numbers import format_decimal  # noqa: PLC0415

        return format_decimal(argument, locale=locale_code)
    return str(argument)


def _apply(pattern: str, arguments: Sequence[object], locale_code: str) -> str:
    rendered = [_render_argument(argument, locale_code) for argument in arguments]
    return pattern.format(*rendered)


def format_message(
    context: MessageContext,
    mnemonic: str,
    arguments: Sequence[object] = (),
    *,
    locale: str | None = None,
) -> str:
    """Format a catalog message identified by context and mnemonic.

    Args:
        context: Message context; a dotted module path, or a class/module
            whose module path is used
        mnemonic: Message key within the context (e.g. "URN_NID_TOO_LONG")
        arguments: Positional substitution arguments for {0}, {1}, ...
        locale: Requested locale (BCP-47 or POSIX); None uses the system locale

    Returns:
        Formatted message, or mnemonic unchanged if no catalog defines it

    Raises:
        IndexError: If the pattern references more arguments than supplied

    Example:
        >>> format_message("urnkit.urn", "URN_COMPONENT_NID", locale="en")
        'namespace identifier'
        >>> format_message("urnkit.urn", "NO_SUCH_MESSAGE", locale="en")
        'NO_SUCH_MESSAGE'
    """
    context_name = _context_name(context)
    found = _lookup(context_name, mnemonic, locale)
    if found is None:
        _report_missing(context_name, mnemonic, locale)
        return mnemonic
    pattern, locale_code = found
    return _apply(pattern, arguments, locale_code)


def _report_missing(context_name: str, mnemonic: str, locale_code: str | None) -> None:
    """Log a missing mnemonic, using the catalog's own wording when available."""
    found = _lookup(CATALOG_MESSAGE_CONTEXT, "MISSING_RESOURCE", locale_code)
    if found is None:
        logger.error("Missing message '%s' in context '%s'", mnemonic, context_name)
        return
    pattern, catalog_locale = found
    logger.error("%s", _apply(pattern, (mnemonic, context_name), catalog_locale))
