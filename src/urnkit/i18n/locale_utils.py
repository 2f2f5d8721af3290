"""Locale utilities for BCP-47 to POSIX conversion and fallback chains.

Centralizes locale format normalization used by the message catalog.
Provides canonical locale handling to ensure consistent cache keys and lookups.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from urnkit.constants import DEFAULT_LOCALE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "get_babel_locale",
    "get_system_locale",
    "locale_fallback_chain",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Any encoding suffix (".UTF-8") is dropped.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "pt_BR.UTF-8")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    return locale_code.split(".")[0].replace("-", "_")


@functools.lru_cache(maxsize=128)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("de-AT")
        >>> locale.language
        'de'
        >>> locale.territory
        'AT'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def get_system_locale() -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Filters out "C" and "POSIX" pseudo-locales.

    Returns:
        Detected locale code in POSIX format, or DEFAULT_LOCALE when
        nothing usable is configured.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", ""):
            return normalize_locale(value)

    return DEFAULT_LOCALE


@functools.lru_cache(maxsize=128)
def locale_fallback_chain(locale_code: str | None = None) -> tuple[str, ...]:
    """Build the ordered list of catalog locales to try for locale_code.

    The chain is the canonical Babel form of the locale, its bare language,
    then DEFAULT_LOCALE and its language. Duplicates are removed keeping the
    first occurrence. Unknown or malformed locales are logged and skipped,
    so the chain always ends in the default locale.

    Args:
        locale_code: Requested locale, or None for the system locale

    Returns:
        Tuple of POSIX locale codes, most specific first

    Example:
        >>> locale_fallback_chain("de-AT")
        ('de_AT', 'de', 'en_US', 'en')
        >>> locale_fallback_chain("en")
        ('en', 'en_US')
    """
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    code = locale_code if locale_code else get_system_locale()
    candidates: list[str] = []
    try:
        babel_locale = get_babel_locale(code)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown locale '%s': %s. Falling back to %s", code, e, DEFAULT_LOCALE)
    else:
        candidates.append(str(babel_locale))
        candidates.append(babel_locale.language)

    default_language = DEFAULT_LOCALE.split("_", maxsplit=1)[0]
    candidates.extend((DEFAULT_LOCALE, default_language))
    return tuple(dict.fromkeys(candidates))
