"""
Request and tokenizer hint shapes.

The resolver only inspects these result shapes; how raw text is tokenized
into them is the tokenizer's business.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class IntegerLiteral:
    """A run of digits recognised as an integer by the tokenizer."""

    text: str

    def force_hexadecimal_value(self) -> int | None:
        """Reinterpret the digits as hexadecimal, whatever base they looked like."""
        digits = self.text.strip()
        if digits[:2].lower() == "0x":
            digits = digits[2:]
        if not digits:
            return None
        try:
            return int(digits, 16)
        except ValueError:
            return None


@dataclass(frozen=True)
class PrefixedForm:
    """A recognised prefix (e.g. "U+" or "utf8 ") followed by a remainder."""

    kind: str
    remainder: str
    remainder_integer: IntegerLiteral | None = None


@dataclass(frozen=True)
class ByteSequence:
    """Raw bytes written out as hex pairs, e.g. "F0 9F 8D 92"."""

    data: bytes


@dataclass(frozen=True)
class SeparatedList:
    """A list of sub-tokens split on a separator."""

    items: tuple[object, ...]

    def structures_of_type(self, structure_type: type) -> list:
        return [item for item in self.items if isinstance(item, structure_type)]


@dataclass(frozen=True)
class QueryRequest:
    """Raw query text plus the structures the tokenizer recognised in it."""

    original_input: str
    is_help: bool = False
    structures: tuple[object, ...] = field(default_factory=tuple)

    def try_get_structure(self, structure_type: type):
        """First hint of the given shape, or None."""
        for structure in self.structures:
            if isinstance(structure, structure_type):
                return structure
        return None
