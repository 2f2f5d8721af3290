"""Shared constants for urnkit.

This module provides centralized configuration constants used across the
syntax, diagnostics, and i18n packages. Placing constants here avoids
circular imports and provides a single source of truth.

Constants are grouped by domain:
- Grammar limits: RFC 2141 structural constraints
- Error reporting: Offsets and message catalog contexts
- Locale defaults: Fallback locale and cache sizes

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Grammar limits
    "URN_PREFIX",
    "MAX_NID_LENGTH",
    # Error reporting
    "UNKNOWN_OFFSET",
    "URN_MESSAGE_CONTEXT",
    "CATALOG_MESSAGE_CONTEXT",
    "RFC_2141_URL",
    # Locale defaults
    "DEFAULT_LOCALE",
    "MESSAGE_DOMAIN",
    "MAX_CATALOG_CACHE_SIZE",
]

# ============================================================================
# GRAMMAR LIMITS
# ============================================================================

# The only prefix RFC 2141 allows. Compared case-insensitively, stored lower-cased.
URN_PREFIX: str = "urn"

# RFC 2141: <NID> ::= <let-num> [ 1,31<let-num-hyp> ]
MAX_NID_LENGTH: int = 32

# ============================================================================
# ERROR REPORTING
# ============================================================================

# Error offset used when the failing position cannot be pinned to one character.
# Distinct from 0, which is a real offset.
UNKNOWN_OFFSET: int = -1

# Message catalog contexts (PO msgctxt). Each is the dotted path of the module
# whose messages live under it.
URN_MESSAGE_CONTEXT: str = "urnkit.urn"
CATALOG_MESSAGE_CONTEXT: str = "urnkit.i18n.catalog"

RFC_2141_URL: str = "https://www.rfc-editor.org/rfc/rfc2141"

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Last entry of every locale fallback chain.
DEFAULT_LOCALE: str = "en_US"

# Gettext domain recorded on loaded catalogs.
MESSAGE_DOMAIN: str = "urnkit"

# Catalogs are small; one slot per bundled locale plus misses is plenty.
MAX_CATALOG_CACHE_SIZE: int = 32
