"""urnkit - RFC 2141 URN parsing with position-accurate diagnostics.

Validates text against the URN grammar ``urn:<NID>:<NSS>`` using bitmask
character classes, reports the first syntax error with its exact offset and
a localized reason, and provides an immutable, case-insensitively comparable
URN value type.

Public API:
    URN - Immutable parsed URN (URN.parse raises on invalid input)
    parse_urn - Non-raising parse returning (urn, errors)
    URNParser - Parser with an explicit error-message locale

Exceptions:
    URNError - Base exception class
    URNSyntaxError - Input is not a valid URN (input, reason, offset, code)

Submodules:
    urnkit.syntax - Character classes, cursor, scanner, grammar driver
    urnkit.diagnostics - Diagnostic codes, templates, and formatting
    urnkit.i18n - Message catalogs and locale utilities
    urnkit.core.hashing - Java-compatible 32-bit string hashing
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import URNError, URNSyntaxError
from .syntax import URNParser
from .urn import URN, parse_urn

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("urnkit")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__rfc_url__ = "https://www.rfc-editor.org/rfc/rfc2141"

__all__ = [
    "URN",
    "URNError",
    "URNParser",
    "URNSyntaxError",
    "__rfc_url__",
    "__version__",
    "parse_urn",
]
