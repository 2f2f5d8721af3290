"""Enumerations for urnkit type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class URNComponent(StrEnum):
    """Grammar component of a URN in which a character-class check failed.

    StrEnum provides automatic string conversion:
    str(URNComponent.NAMESPACE_IDENTIFIER) == "nid"
    """

    NAMESPACE_IDENTIFIER = "nid"
    """The NID: urn:<here>:nss"""

    NAMESPACE_SPECIFIC_STRING = "nss"
    """The NSS: urn:nid:<here>"""

    @property
    def mnemonic(self) -> str:
        """Catalog mnemonic holding the human-readable component name."""
        return f"URN_COMPONENT_{self.value.upper()}"


class ParserState(StrEnum):
    """States of the URN grammar driver, in strict forward order.

    PREFIX -> NID -> NSS -> DONE on success; any state may move to FAILED.
    """

    PREFIX = "prefix"
    NID = "nid"
    NSS = "nss"
    DONE = "done"
    FAILED = "failed"


__all__ = [
    "ParserState",
    "URNComponent",
]
