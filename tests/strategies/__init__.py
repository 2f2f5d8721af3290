"""Hypothesis strategies for urnkit property-based testing.

Usage:
    from tests.strategies import urn_texts, nids, nss_strings
    from tests.strategies.urn import invalid_urn_texts

Event-Emitting Strategies (HypoFuzz-Optimized):
    These strategies emit hypothesis.event() calls for coverage-guided fuzzing:
    - nids, nss_strings, prefixes, invalid_urn_texts
"""

from .urn import (
    HEX_CHARS,
    NID_FIRST_CHARS,
    NID_REST_CHARS,
    NSS_PLAIN_CHARS,
    NSS_RESERVED_CHARS,
    case_variants,
    escapes,
    invalid_urn_texts,
    nids,
    nss_strings,
    prefixes,
    urn_texts,
)

__all__ = [
    "HEX_CHARS",
    "NID_FIRST_CHARS",
    "NID_REST_CHARS",
    "NSS_PLAIN_CHARS",
    "NSS_RESERVED_CHARS",
    "case_variants",
    "escapes",
    "invalid_urn_texts",
    "nids",
    "nss_strings",
    "prefixes",
    "urn_texts",
]
