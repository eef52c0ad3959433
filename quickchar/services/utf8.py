"""
UTF-8 validation service.

Decodes byte sequences typed as hex pairs into text, accepting only input
that is well-formed UTF-8 and reads as printable text.
"""
from __future__ import annotations

import unicodedata

from quickchar.types import ResolutionResult, ResolverConfig

REPLACEMENT_CHARACTER = "\ufffd"


class Utf8ValidationService:
    """Strict UTF-8 decoding with a printability check."""

    def __init__(self, config: ResolverConfig):
        self._config = config

    def decode(self, data: bytes) -> ResolutionResult:
        if not data:
            return ResolutionResult.failure("empty byte sequence")

        try:
            text = data.decode("utf-8", errors="strict")
        except UnicodeDecodeError as e:
            return ResolutionResult.failure(f"malformed UTF-8: {e.reason}")

        # An encoded U+FFFD means the bytes were already a lossy decode of something else
        if REPLACEMENT_CHARACTER in text:
            return ResolutionResult.failure("decoded text contains the replacement character")

        if not all(self.is_printable(ch) for ch in text):
            return ResolutionResult.failure("decoded text contains non-printable characters")

        return ResolutionResult.success_with(text)

    def is_printable(self, ch: str) -> bool:
        return unicodedata.category(ch) not in self._config.non_printable_categories
