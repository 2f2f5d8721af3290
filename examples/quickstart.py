"""Quickstart - Parsing, comparing and reporting on URNs.

Demonstrates:

1. Parse a URN and read its components
2. Case-insensitive equality, ordering and set membership
3. Non-raising parsing with parse_urn
4. Localized error reasons and caret diagnostics
5. Java-compatible hash codes

Python 3.13+.
"""

from __future__ import annotations


def example_1_parsing() -> None:
    """Parse a URN and inspect it."""
    from urnkit import URN

    print("=" * 60)
    print("Example 1: Parsing")
    print("=" * 60)

    urn = URN.parse("URN:ISBN:0451450523")
    print(f"prefix={urn.prefix!r} nid={urn.nid!r} nss={urn.nss!r}")
    print(f"canonical: {urn.to_canonical_string()}")
    print()


def example_2_comparison() -> None:
    """Equality and ordering ignore letter case."""
    from urnkit import URN

    print("=" * 60)
    print("Example 2: Comparison")
    print("=" * 60)

    a = URN.parse("urn:silly:session")
    b = URN.parse("uRn:SILLY:seSsion")
    print(f"{a} == {b}: {a == b}")
    print(f"same hash: {hash(a) == hash(b)}")
    print(f"b in {{a}}: {b in {a}}")

    ordered = sorted(URN.parse(t) for t in ("urn:bat:foo", "urn:bar:fot", "urn:bar:foo"))
    print("sorted:", ", ".join(str(u) for u in ordered))
    print()


def example_3_parse_urn() -> None:
    """Validate without exceptions."""
    from urnkit import parse_urn

    print("=" * 60)
    print("Example 3: parse_urn")
    print("=" * 60)

    for text in ("urn:ietf:rfc:2141", "urn::x", "urn,test:x", "urn:test:%25%0%32"):
        urn, errors = parse_urn(text, locale="en")
        if urn is not None:
            print(f"{text!r:24} ok     {urn}")
        else:
            error = errors[0]
            code = error.code.name if error.code else "?"
            print(f"{text!r:24} {code:<18} offset={error.offset}")
    print()


def example_4_diagnostics() -> None:
    """Render errors in English and German with a caret."""
    from urnkit import URN, URNSyntaxError
    from urnkit.diagnostics import DiagnosticFormatter

    print("=" * 60)
    print("Example 4: Diagnostics")
    print("=" * 60)

    formatter = DiagnosticFormatter()
    for locale in ("en", "de"):
        try:
            URN.parse("urn:nid:bad{syntax", locale=locale)
        except URNSyntaxError as e:
            print(formatter.format_error(e))
            print()


def example_5_hash_codes() -> None:
    """hash_code matches Java's String.hashCode of the lower-cased text."""
    from urnkit import URN
    from urnkit.core import hash_string

    print("=" * 60)
    print("Example 5: Hash codes")
    print("=" * 60)

    urn = URN.parse("urn:ISBN:0451450523")
    print(f"hash_code: {urn.hash_code()}")
    print(f"String.hashCode(\"urnisbn0451450523\"): {hash_string(0, 'urnisbn0451450523')}")
    print()


def main() -> None:
    """Run all quickstart examples."""
    print()
    print("urnkit Quickstart")
    print()

    example_1_parsing()
    example_2_comparison()
    example_3_parse_urn()
    example_4_diagnostics()
    example_5_hash_codes()

    print("=" * 60)
    print("All examples completed successfully!")
    print("=" * 60)


if __name__ == "__main__":
    main()
