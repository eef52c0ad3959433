"""
Configuration for the Unicode character resolver.

All tunables live in one immutable object that is injected into the
resolver and its services.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from quickchar.paths import BLOCKS_FILE

# Prefix kinds produced by the query tokenizer
PREFIX_UTF8 = "utf8 "
PREFIX_NAME_LOOKUP = "unicode "
PREFIX_CODEPOINT = "U+"


@dataclass(frozen=True)
class ResolverConfig:
    """Immutable resolver configuration."""

    blocks_path: Path
    max_search_results: int = 60
    search_link_template: str = "?q={query}"
    # General categories that mark decoded bytes as binary rather than text
    non_printable_categories: frozenset[str] = frozenset({"Cc", "Cs", "Cn"})
    utf8_prefix: str = PREFIX_UTF8
    name_lookup_prefix: str = PREFIX_NAME_LOOKUP
    codepoint_prefix: str = PREFIX_CODEPOINT

    @classmethod
    def create_default(cls) -> ResolverConfig:
        return cls(blocks_path=BLOCKS_FILE)
