"""
HTML formatting service for resolver output.

Produces the host's answer-fragment markup from character and text
descriptions. Every piece of user-derived text is escaped here.
"""
from __future__ import annotations

import html
from urllib.parse import quote

from quickchar.types import CharacterDescription, ResolverConfig, TextDescription

HELP_EXAMPLES = (
    ("char cherries", "Lookup a unicode char/emoji"),
    ("\\U0001F352", "Lookup char"),
    ("\\U0001F347 \\U0001F352", "Lookup multiple chars"),
    ("\U0001F352", "Show char info"),
    ("F0 9F 8D 92 F0 9F 8D 87", "Decode from UTF-8 bytes"),
    ("utf8 пример", "Encode in UTF-8"),
)


def div(content: str, css_class: str | None = None) -> str:
    if css_class:
        return f'<div class="{css_class}">{content}</div>'
    return f"<div>{content}</div>"


def td(content: str) -> str:
    return f"<td>{content}</td>"


def tr(*cells: str) -> str:
    return f"<tr>{''.join(cells)}</tr>"


def gray(text: str) -> str:
    return f'<span class="gray">{html.escape(text)}</span>'


class HtmlFormattingService:
    """Service for rendering descriptions as HTML fragments."""

    def __init__(self, config: ResolverConfig):
        self._config = config

    def search_link(self, query: str) -> str:
        href = self._config.search_link_template.format(query=quote(query, safe=""))
        return f'<a href="{html.escape(href)}">{html.escape(query)}</a>'

    def format_character(self, description: CharacterDescription) -> str:
        lines = []
        if description.sample is not None:
            lines.append(div(html.escape(description.sample), "charSample"))
        if description.name:
            lines.append(div(html.escape(description.name)))

        lines.append('<table class="smallTable">')
        lines.append(tr(td(gray("Code point:")), td(f"{description.codepoint} (U+{description.hex_codepoint})")))
        lines.append(tr(td(gray("Category:")), td(f"{description.category_name} ({description.category})")))
        lines.append(tr(td(gray("Block:")), td(html.escape(description.block))))
        lines.append(tr(td(gray("Escape:")), td(div(html.escape(description.escape), "fixed"))))
        if description.utf8 is not None:
            lines.append(tr(td(gray("UTF-8:")), td(div(description.utf8, "fixed"))))
        lines.append("</table>")
        return "\n".join(lines) + "\n"

    def format_text(self, description: TextDescription) -> str:
        links = " ".join(self.search_link(escape) for escape in description.escapes)
        lines = [
            div(html.escape(description.sample), "charSample"),
            div(links, "fixed"),
            div(description.utf8, "fixed"),
        ]
        return "\n".join(lines) + "\n"

    def format_cards(self, cards: list[str]) -> str:
        """Wrap several answers so the host shows them as separate sections."""
        return "".join(div(card, "answerSection") + "\n" for card in cards)

    def format_help(self) -> str:
        lines = ['<table class="helpTable">']
        for example, description in HELP_EXAMPLES:
            lines.append(tr(td(self.search_link(example)), td(html.escape(description))))
        lines.append("</table>")
        return "\n".join(lines) + "\n"
