"""
Codepoint helpers shared by the resolver services.

Python strings are sequences of codepoints, but text that came from a
UTF-16 source can still carry surrogate halves as separate characters.
These helpers treat such pairs as the single codepoint they encode.
"""

from collections.abc import Iterator

MAX_CODEPOINT = 0x10FFFF
SURROGATE_START = 0xD800
SURROGATE_END = 0xDFFF
HIGH_SURROGATE_END = 0xDBFF
LOW_SURROGATE_START = 0xDC00
SUPPLEMENTARY_START = 0x10000


def is_surrogate(codepoint: int) -> bool:
    return SURROGATE_START <= codepoint <= SURROGATE_END


def is_high_surrogate(ch: str) -> bool:
    return SURROGATE_START <= ord(ch) <= HIGH_SURROGATE_END


def is_low_surrogate(ch: str) -> bool:
    return LOW_SURROGATE_START <= ord(ch) <= SURROGATE_END


def is_unicode_codepoint(number: int) -> bool:
    """True for any scalar value that can stand alone as a character."""
    return 0 <= number <= MAX_CODEPOINT and not is_surrogate(number)


def is_surrogate_pair(text: str) -> bool:
    return len(text) == 2 and is_high_surrogate(text[0]) and is_low_surrogate(text[1])


def combine_surrogates(high: str, low: str) -> int:
    return SUPPLEMENTARY_START + ((ord(high) - SURROGATE_START) << 10) + (ord(low) - LOW_SURROGATE_START)


def iter_codepoints(text: str) -> Iterator[int]:
    """Yield logical codepoints, joining any high+low surrogate pair."""
    i = 0
    n = len(text)
    while i < n:
        if i + 1 < n and is_high_surrogate(text[i]) and is_low_surrogate(text[i + 1]):
            yield combine_surrogates(text[i], text[i + 1])
            i += 2
        else:
            yield ord(text[i])
            i += 1


def join_surrogates(text: str) -> str:
    """Rebuild text with every surrogate pair folded into one character."""
    return "".join(chr(cp) for cp in iter_codepoints(text))


def needs_two_utf16_units(codepoint: int) -> bool:
    return codepoint >= SUPPLEMENTARY_START
