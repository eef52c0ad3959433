"""
Query Parser Test Suite

This module contains tests for the reference tokenizer that turns raw query
text into the structures the resolver consumes.
"""

from quickchar.text_processing.query_parser import QueryParser
from quickchar.types import (
    PREFIX_CODEPOINT,
    PREFIX_NAME_LOOKUP,
    PREFIX_UTF8,
    ByteSequence,
    IntegerLiteral,
    PrefixedForm,
    SeparatedList,
)

PREFIX_CASES = [
    ("U+1F352", (PREFIX_CODEPOINT, "1F352", True)),
    ("u+41", (PREFIX_CODEPOINT, "41", True)),
    ("\\U0001F352", (PREFIX_CODEPOINT, "0001F352", True)),
    ("\\u00e9", (PREFIX_CODEPOINT, "00e9", True)),
    ("U+XYZ", (PREFIX_CODEPOINT, "XYZ", False)),
    ("utf8 пример", (PREFIX_UTF8, "пример", False)),
    ("UTF-8 abc", (PREFIX_UTF8, "abc", True)),
    ("unicode cherries", (PREFIX_NAME_LOOKUP, "cherries", False)),
    ("char cherries", (PREFIX_NAME_LOOKUP, "cherries", False)),
]


def test_prefixes():
    parser = QueryParser()

    passed = 0
    failed = 0

    for query, (kind, remainder, has_integer) in PREFIX_CASES:
        prefix = parser.parse(query).try_get_structure(PrefixedForm)
        actual = (prefix.kind, prefix.remainder, prefix.remainder_integer is not None) if prefix else None
        if actual == (kind, remainder, has_integer):
            passed += 1
        else:
            failed += 1
            print(f"FAILED: '{query}': expected {(kind, remainder, has_integer)}, got {actual}")

    assert failed == 0, f"Prefix tests: {failed} failures out of {len(PREFIX_CASES)} tests"
    print(f"Prefix tests: {passed} passed, {failed} failed")


def test_no_prefix():
    request = QueryParser().parse("cherries")
    assert request.try_get_structure(PrefixedForm) is None
    assert request.structures == ()


def test_original_input_is_trimmed():
    request = QueryParser().parse("  A \n")
    assert request.original_input == "A"
    assert not request.is_help


def test_byte_sequence():
    request = QueryParser().parse("F0 9F 8D 92")
    assert request.try_get_structure(ByteSequence) == ByteSequence(b"\xf0\x9f\x8d\x92")


def test_single_hex_pair_is_not_a_byte_sequence():
    assert QueryParser().parse("F0").try_get_structure(ByteSequence) is None
    assert QueryParser().parse("F0 9G").try_get_structure(ByteSequence) is None


def test_separated_list():
    request = QueryParser().parse("U+1F347, U+1F352;foo")
    separated = request.try_get_structure(SeparatedList)
    assert separated is not None
    prefixes = separated.structures_of_type(PrefixedForm)
    assert [p.remainder for p in prefixes] == ["1F347", "1F352"]
    assert separated.items[2] == "foo"


def test_force_hexadecimal_value():
    assert IntegerLiteral("0041").force_hexadecimal_value() == 0x41
    assert IntegerLiteral("1f352").force_hexadecimal_value() == 0x1F352
    assert IntegerLiteral("0x1F").force_hexadecimal_value() == 0x1F
    assert IntegerLiteral("zz").force_hexadecimal_value() is None
    assert IntegerLiteral("").force_hexadecimal_value() is None
