"""
Reference query parser.

The host engine owns tokenization; this module is a small stand-in that
recognises the shapes the Unicode resolver consumes, so the package can be
driven from raw text in scripts and tests.

Recognised shapes:
- prefixed forms: "utf8 <text>", "unicode <term>", "char <term>", "U+<hex>",
  "\\U<hex>", "\\u<hex>" (prefixes are case-insensitive)
- byte sequences: two or more space separated two-digit hex tokens
- separated lists: two or more tokens split on whitespace, commas or semicolons
"""

from __future__ import annotations

import re

from quickchar.types import (
    PREFIX_CODEPOINT,
    PREFIX_NAME_LOOKUP,
    PREFIX_UTF8,
    ByteSequence,
    IntegerLiteral,
    PrefixedForm,
    QueryRequest,
    SeparatedList,
)

# Longest literal first so "utf-8 " wins over shorter overlaps
PREFIXES = (
    ("unicode ", PREFIX_NAME_LOOKUP),
    ("utf-8 ", PREFIX_UTF8),
    ("utf8 ", PREFIX_UTF8),
    ("char ", PREFIX_NAME_LOOKUP),
    ("u+", PREFIX_CODEPOINT),
    ("\\u", PREFIX_CODEPOINT),
)

HEX_INTEGER_PATTERN = re.compile(r"(?:0[xX])?[0-9A-Fa-f]+")
HEX_BYTE_PATTERN = re.compile(r"[0-9A-Fa-f]{2}")
LIST_SEPARATOR_PATTERN = re.compile(r"[\s,;]+")


class QueryParser:
    """Turns raw query text into a `QueryRequest` with structural hints."""

    def parse(self, raw: str, is_help: bool = False) -> QueryRequest:
        text = raw.strip()
        structures = []

        prefix = self.parse_prefix(text)
        if prefix is not None:
            structures.append(prefix)

        byte_sequence = self.parse_byte_sequence(text)
        if byte_sequence is not None:
            structures.append(byte_sequence)

        separated_list = self.parse_separated_list(text)
        if separated_list is not None:
            structures.append(separated_list)

        return QueryRequest(original_input=text, is_help=is_help, structures=tuple(structures))

    def parse_prefix(self, text: str) -> PrefixedForm | None:
        lowered = text.lower()
        for literal, kind in PREFIXES:
            if lowered.startswith(literal):
                remainder = text[len(literal):]
                return PrefixedForm(kind=kind, remainder=remainder, remainder_integer=self.parse_integer(remainder))
        return None

    def parse_integer(self, text: str) -> IntegerLiteral | None:
        if HEX_INTEGER_PATTERN.fullmatch(text):
            return IntegerLiteral(text)
        return None

    def parse_byte_sequence(self, text: str) -> ByteSequence | None:
        tokens = text.split()
        if len(tokens) < 2 or not all(HEX_BYTE_PATTERN.fullmatch(token) for token in tokens):
            return None
        return ByteSequence(bytes.fromhex("".join(tokens)))

    def parse_separated_list(self, text: str) -> SeparatedList | None:
        tokens = [token for token in LIST_SEPARATOR_PATTERN.split(text) if token]
        if len(tokens) < 2:
            return None
        return SeparatedList(tuple(self._parse_list_item(token) for token in tokens))

    def _parse_list_item(self, token: str):
        prefix = self.parse_prefix(token)
        if prefix is not None:
            return prefix
        integer = self.parse_integer(token)
        if integer is not None:
            return integer
        return token
