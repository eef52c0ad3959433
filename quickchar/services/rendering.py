"""
Character rendering service.

Turns a codepoint or a run of text into the description shown to the user:
sample, catalog name, general category, block, escape notation and UTF-8
bytes. Descriptions are plain data; `HtmlFormattingService` turns them into
markup.
"""
from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from quickchar.types import CharacterDescription, ResolutionResult, TextDescription
from quickchar.utils.codepoints import (
    combine_surrogates,
    is_surrogate,
    is_surrogate_pair,
    iter_codepoints,
    join_surrogates,
    needs_two_utf16_units,
)

if TYPE_CHECKING:
    from quickchar.services.catalog import CodepointCatalog
    from quickchar.services.formatting import HtmlFormattingService


GENERAL_CATEGORY_NAMES = {
    "Lu": "Uppercase Letter",
    "Ll": "Lowercase Letter",
    "Lt": "Titlecase Letter",
    "Lm": "Modifier Letter",
    "Lo": "Other Letter",
    "Mn": "Nonspacing Mark",
    "Mc": "Spacing Mark",
    "Me": "Enclosing Mark",
    "Nd": "Decimal Number",
    "Nl": "Letter Number",
    "No": "Other Number",
    "Pc": "Connector Punctuation",
    "Pd": "Dash Punctuation",
    "Ps": "Open Punctuation",
    "Pe": "Close Punctuation",
    "Pi": "Initial Punctuation",
    "Pf": "Final Punctuation",
    "Po": "Other Punctuation",
    "Sm": "Math Symbol",
    "Sc": "Currency Symbol",
    "Sk": "Modifier Symbol",
    "So": "Other Symbol",
    "Zs": "Space Separator",
    "Zl": "Line Separator",
    "Zp": "Paragraph Separator",
    "Cc": "Control",
    "Cf": "Format",
    "Cs": "Surrogate",
    "Co": "Private Use",
    "Cn": "Unassigned",
}


def escape_notation(codepoint: int) -> str:
    """`\\U0001F352` for codepoints needing two UTF-16 units, `\\u00E9` otherwise."""
    if needs_two_utf16_units(codepoint):
        return f"\\U{codepoint:08X}"
    return f"\\u{codepoint:04X}"


def utf8_listing(text: str) -> str:
    """Space separated uppercase hex bytes, e.g. "F0 9F 8D 92"."""
    return " ".join(f"{b:X}" for b in text.encode("utf-8"))


class CharacterRenderingService:
    """Service for describing codepoints and text."""

    def __init__(self, catalog: CodepointCatalog, formatter: HtmlFormattingService):
        self._catalog = catalog
        self._formatter = formatter

    def describe_codepoint(self, codepoint: int) -> CharacterDescription:
        sample = None if is_surrogate(codepoint) else chr(codepoint)
        category = unicodedata.category(chr(codepoint))
        return CharacterDescription(
            codepoint=codepoint,
            sample=sample,
            name=self._catalog.name_of(codepoint),
            category=category,
            category_name=GENERAL_CATEGORY_NAMES.get(category, category),
            block=self._catalog.blocks.block_of(codepoint),
            escape=escape_notation(codepoint),
            utf8=utf8_listing(sample) if sample is not None else None,
        )

    def describe_text(self, text: str) -> TextDescription:
        """
        Describe a run of text codepoint by codepoint.

        Raises UnicodeEncodeError when the text holds an unpaired surrogate,
        which has no UTF-8 form.
        """
        joined = join_surrogates(text)
        return TextDescription(
            sample=joined,
            escapes=tuple(escape_notation(cp) for cp in iter_codepoints(joined)),
            utf8=utf8_listing(joined),
        )

    def render_codepoint(self, codepoint: int) -> str:
        return self._formatter.format_character(self.describe_codepoint(codepoint))

    def render_text(self, text: str) -> ResolutionResult:
        if not text:
            return ResolutionResult.failure("empty text")

        # One supplementary character is a surrogate pair in UTF-16 terms and is
        # shown with the full codepoint card, whichever way it was spelled.
        if is_surrogate_pair(text):
            return ResolutionResult.success_with(self.render_codepoint(combine_surrogates(text[0], text[1])))
        if len(text) == 1 and needs_two_utf16_units(ord(text)):
            return ResolutionResult.success_with(self.render_codepoint(ord(text)))

        try:
            description = self.describe_text(text)
        except UnicodeEncodeError:
            return ResolutionResult.failure("text contains an unpaired surrogate")
        return ResolutionResult.success_with(self._formatter.format_text(description))
