"""
Quickchar: Unicode Character Resolver

Resolves a fragment of user-typed text to a description of the Unicode
character(s) it denotes: single characters, surrogate pairs, U+ codepoints,
name searches, UTF-8 byte sequences and lists of codepoints.
"""

__version__ = "0.1.0"

__all__ = ["UnicodeResolver"]

def __getattr__(name):
    """Lazy import so the catalog data is only touched when needed."""
    if name == "UnicodeResolver":
        from .resolver import UnicodeResolver
        return UnicodeResolver
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
