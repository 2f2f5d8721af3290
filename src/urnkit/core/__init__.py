"""Core utilities shared across the syntax and value layers.

This package provides foundational helpers that both the grammar
(:mod:`urnkit.syntax`) and the URN value type depend on:

    core <- syntax <- urn

Exports:
    hash_string: Seeded Java-compatible 32-bit string hash
    hash_strings: Hash of several strings as though concatenated

Python 3.13+.
"""

from .hashing import hash_string, hash_strings

__all__ = ["hash_string", "hash_strings"]
