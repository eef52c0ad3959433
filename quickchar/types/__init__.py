"""
Types package for Unicode character resolution.

Result types, configuration, request shapes and descriptions used
throughout the resolver.
"""

from quickchar.types.config import PREFIX_CODEPOINT, PREFIX_NAME_LOOKUP, PREFIX_UTF8, ResolverConfig
from quickchar.types.descriptions import CharacterDescription, TextDescription
from quickchar.types.results import CatalogInfo, ResolutionResult
from quickchar.types.structures import (
    ByteSequence,
    IntegerLiteral,
    PrefixedForm,
    QueryRequest,
    SeparatedList,
)

__all__ = [
    "PREFIX_CODEPOINT",
    "PREFIX_NAME_LOOKUP",
    "PREFIX_UTF8",
    "ByteSequence",
    "CatalogInfo",
    "CharacterDescription",
    "IntegerLiteral",
    "PrefixedForm",
    "QueryRequest",
    "ResolutionResult",
    "ResolverConfig",
    "SeparatedList",
    "TextDescription",
]
