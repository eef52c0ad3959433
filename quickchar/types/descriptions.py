"""
Description types produced by the character renderer.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CharacterDescription:
    """Everything shown for a single codepoint."""

    codepoint: int
    sample: str | None  # None for a lone surrogate
    name: str | None
    category: str
    category_name: str
    block: str
    escape: str
    utf8: str | None  # only present together with a sample

    @property
    def hex_codepoint(self) -> str:
        return f"{self.codepoint:X}"


@dataclass(frozen=True)
class TextDescription:
    """Everything shown for a run of text."""

    sample: str
    escapes: tuple[str, ...]
    utf8: str
