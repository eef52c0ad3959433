"""
UTF-8 Validation Test Suite

This module contains tests for strict decoding of byte sequences:
- Well-formed text is accepted
- Malformed sequences are rejected
- The replacement character is rejected
- Non-printable content is rejected as binary
"""

import pytest

from quickchar.services import ResolverConfig, Utf8ValidationService

ACCEPTED_CASES = [
    (b"A", "A"),
    ("пример".encode(), "пример"),
    (b"\xf0\x9f\x8d\x92\xf0\x9f\x8d\x87", "\U0001F352\U0001F347"),
    (b"a b", "a b"),
]

REJECTED_CASES = [
    b"\x80",  # lone continuation byte
    b"\xc0\xaf",  # overlong
    b"\xed\xa0\x80",  # encoded surrogate
    b"\xf0\x9f\x8d",  # truncated
    b"\xf4\x90\x80\x80",  # past U+10FFFF
    b"\xef\xbf\xbd",  # U+FFFD itself
    b"ok\xef\xbf\xbd",
    b"\x00",
    b"line\nbreak",
    b"\x7f",
    b"",
]


@pytest.fixture(scope="module")
def validator():
    return Utf8ValidationService(ResolverConfig.create_default())


def test_accepted_sequences(validator):
    for data, expected in ACCEPTED_CASES:
        result = validator.decode(data)
        assert result.success, f"{data!r}: {result.error_message}"
        assert result.result == expected


def test_rejected_sequences(validator):
    passed = 0
    failed = 0

    for data in REJECTED_CASES:
        result = validator.decode(data)
        if not result.success and result.result == "":
            passed += 1
        else:
            failed += 1
            print(f"FAILED: {data!r}: expected rejection, got {result.result!r}")

    assert failed == 0, f"UTF-8 rejection tests: {failed} failures out of {len(REJECTED_CASES)} tests"
    print(f"UTF-8 rejection tests: {passed} passed, {failed} failed")


def test_failure_reasons(validator):
    assert "malformed" in validator.decode(b"\x80").error_message
    assert "replacement" in validator.decode(b"\xef\xbf\xbd").error_message
    assert "non-printable" in validator.decode(b"\x01").error_message
