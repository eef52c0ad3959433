"""
Name search service.

Finds catalog entries whose character name contains a search term. The scan
is a plain linear pass over the catalog in codepoint order, capped at
`max_search_results` matches so even a term matching most names answers
quickly.
"""
from __future__ import annotations

from collections.abc import Iterator
from itertools import islice
from typing import TYPE_CHECKING

from quickchar.types import ResolutionResult, ResolverConfig

if TYPE_CHECKING:
    from quickchar.services.catalog import CodepointCatalog
    from quickchar.services.formatting import HtmlFormattingService
    from quickchar.services.rendering import CharacterRenderingService


class NameSearchService:
    """Bounded, case-insensitive substring search over character names."""

    def __init__(
        self,
        config: ResolverConfig,
        catalog: CodepointCatalog,
        renderer: CharacterRenderingService,
        formatter: HtmlFormattingService,
    ):
        self._config = config
        self._catalog = catalog
        self._renderer = renderer
        self._formatter = formatter

    def iter_matches(self, term: str) -> Iterator[int]:
        """Yield matching codepoints in ascending order, at most the configured limit."""
        needle = term.lower()
        matches = (codepoint for codepoint, name in self._catalog.search_entries if needle in name)
        return islice(matches, self._config.max_search_results)

    def search(self, term: str) -> Iterator[str]:
        """Rendered card for each match, in scan order. Single pass."""
        for codepoint in self.iter_matches(term):
            yield self._renderer.render_codepoint(codepoint)

    def lookup(self, term: str) -> ResolutionResult:
        # Surrounding spaces are part of the term, e.g. " SIGN" for whole words
        if not term.strip():
            return ResolutionResult.failure("empty search term")

        cards = list(self.search(term))
        if not cards:
            return ResolutionResult.failure(f"no character name contains '{term}'")
        if len(cards) == 1:
            return ResolutionResult.success_with(cards[0])
        return ResolutionResult.success_with(self._formatter.format_cards(cards))
