"""Message catalogs and locale handling.

Renders the human-readable text of diagnostics from bundled, per-locale PO
catalogs. Babel reads the catalogs and supplies CLDR locale data for locale
parsing and number formatting.

Public API:
    format_message - Look up a mnemonic in a context and format it
    load_catalog - Load one bundled catalog (memoized)
    clear_catalog_cache - Drop memoized catalogs and locale chains
    locale_fallback_chain - Ordered catalog locales for a requested locale
    normalize_locale, get_babel_locale, get_system_locale - Locale helpers

Python 3.13+.
"""

from .catalog import MessageContext, clear_catalog_cache, format_message, load_catalog
from .locale_utils import (
    get_babel_locale,
    get_system_locale,
    locale_fallback_chain,
    normalize_locale,
)

__all__ = [
    "MessageContext",
    "clear_catalog_cache",
    "format_message",
    "get_babel_locale",
    "get_system_locale",
    "load_catalog",
    "locale_fallback_chain",
    "normalize_locale",
]
