"""
Unicode Character Resolver

This module decides whether a fragment of user-typed text denotes one or more
Unicode characters and, if it does, renders a description of them for the
host's answer panel.

## Overview

The `UnicodeResolver` class is one plugin in a host engine that tries its
plugins in sequence until one answers. A plugin answers with an HTML
fragment, or with `None` meaning "not mine, try the next one".

Notations are tried in a fixed priority order; the first that yields a
result wins:

1. **Single character**: `🍒` describes U+1F352
2. **Surrogate pair**: two UTF-16 halves are combined into one codepoint
3. **Prefixed forms**:
   - `utf8 пример` describes the text and its UTF-8 bytes
   - `unicode cherries` / `char cherries` searches character names
   - `U+1F352` / `\\U0001F352` describes a codepoint given in hex
4. **Byte sequence**: `F0 9F 8D 92` is decoded as strict UTF-8
5. **Codepoint list**: `U+1F347 U+1F352` describes the combined text

## Architecture

- **CatalogInitializationService**: one-time build of the codepoint -> name table
- **UnicodeBlockService**: block ranges from the bundled `Blocks.txt`
- **NameSearchService**: bounded substring search over character names
- **Utf8ValidationService**: strict UTF-8 decoding with printability check
- **CharacterRenderingService**: codepoint and text descriptions
- **HtmlFormattingService**: markup for descriptions and the help table
- **UnicodeResolver**: input classification and dispatch

The tokenizer that turns raw text into structural hints belongs to the host;
`QueryParser` is a small stand-in used by `get_result_for_text`.

## Usage Examples

```python
from quickchar import UnicodeResolver

resolver = UnicodeResolver()
html = resolver.get_result_for_text("U+1F352")
# Card for CHERRIES, UTF-8 "F0 9F 8D 92"

html = resolver.get_result_for_text("F0 9F 8D 92 F0 9F 8D 87")
# Text card for the two decoded characters

resolver.get_result_for_text("hello world")
# None: not a Unicode query

result = resolver.resolve(resolver.parse("C0 AF"))
# ResolutionResult(success=False, error_message="malformed UTF-8: invalid start byte")
```

## Error Handling

Nothing raises across the plugin boundary. Invalid codepoints, malformed or
non-printable byte sequences, unknown names and unparseable hex all collapse
to `None`; the reason is available through `resolve()` and logged at DEBUG.
The one fatal condition is missing Unicode block data when the catalog is
built, which raises `CatalogUnavailableError`.

## Thread Safety

The catalog is built once per process behind a lock and is immutable
afterwards; resolvers can be shared between threads once constructed.
"""

from __future__ import annotations

from quickchar.paths import BLOCKS_FILE, logger
from quickchar.services import (
    CatalogInfo,
    CatalogInitializationService,
    CharacterRenderingService,
    CodepointCatalog,
    HtmlFormattingService,
    NameSearchService,
    ResolutionResult,
    ResolverConfig,
    Utf8ValidationService,
    get_catalog,
)
from quickchar.text_processing.query_parser import QueryParser
from quickchar.types import ByteSequence, PrefixedForm, QueryRequest, SeparatedList
from quickchar.utils.codepoints import combine_surrogates, is_surrogate_pair, is_unicode_codepoint

# ════════════════════════════════════════════════════════════════════════════════
# MAIN UNICODE RESOLVER CLASS
# ════════════════════════════════════════════════════════════════════════════════


class UnicodeResolver:
    """Resolves Unicode character queries into descriptions."""

    def __init__(
        self,
        config: ResolverConfig | None = None,
        catalog: CodepointCatalog | None = None,
        lazy: bool = False,
    ):
        self._config = config or ResolverConfig.create_default()
        self._catalog = catalog
        self._parser = QueryParser()
        self._formatter = HtmlFormattingService(self._config)
        self._validator = Utf8ValidationService(self._config)

        # Catalog-backed services (initialized once the catalog exists)
        self._renderer: CharacterRenderingService | None = None
        self._search_service: NameSearchService | None = None

        if not lazy:
            self._ensure_initialized()

    def _ensure_initialized(self) -> None:
        """Build or fetch the catalog and wire the services that read it."""
        if self._renderer is not None:
            return
        if self._catalog is None:
            if self._config.blocks_path == BLOCKS_FILE:
                self._catalog = get_catalog()
            else:
                # Private block data gets a private catalog
                self._catalog = CatalogInitializationService(self._config).build_catalog()
        self._renderer = CharacterRenderingService(self._catalog, self._formatter)
        self._search_service = NameSearchService(self._config, self._catalog, self._renderer, self._formatter)

    # Public API methods
    def get_catalog_info(self) -> CatalogInfo:
        """Get catalog diagnostics for this resolver."""
        if self._catalog is None:
            return CatalogInfo(catalog_built=False, entry_count=0, block_count=0, blocks_file=self._config.blocks_path)
        return CatalogInfo(
            catalog_built=True,
            entry_count=len(self._catalog),
            block_count=len(self._catalog.blocks),
            blocks_file=self._catalog.blocks_file,
            build_seconds=self._catalog.build_seconds,
        )

    def parse(self, raw: str, is_help: bool = False) -> QueryRequest:
        """Tokenize raw text with the bundled reference parser."""
        return self._parser.parse(raw, is_help=is_help)

    def get_result(self, request: QueryRequest) -> str | None:
        """
        Plugin entry point: HTML fragment for the request, or None when the
        request is not a Unicode query.
        """
        result = self.resolve(request)
        if not result.success:
            logger.debug(f"No Unicode match for {request.original_input!r}: {result.error_message}")
        return result.to_optional()

    def get_result_for_text(self, raw: str, is_help: bool = False) -> str | None:
        return self.get_result(self.parse(raw, is_help=is_help))

    def resolve(self, request: QueryRequest) -> ResolutionResult:
        """Try each notation in priority order; the first success wins."""
        if request.is_help:
            return ResolutionResult.success_with(self._formatter.format_help())

        self._ensure_initialized()
        text = request.original_input

        if len(text) == 1:
            return ResolutionResult.success_with(self._renderer.render_codepoint(ord(text)))

        if is_surrogate_pair(text):
            return ResolutionResult.success_with(self._renderer.render_codepoint(combine_surrogates(text[0], text[1])))

        prefix = request.try_get_structure(PrefixedForm)
        if prefix is not None:
            if prefix.kind == self._config.utf8_prefix:
                return self._renderer.render_text(prefix.remainder)

            if prefix.kind == self._config.name_lookup_prefix:
                lookup = self._search_service.lookup(prefix.remainder)
                if lookup.success:
                    return lookup
                logger.debug(f"Name lookup fell through: {lookup.error_message}")

            if prefix.kind == self._config.codepoint_prefix:
                codepoint = self._prefix_codepoint(prefix)
                if codepoint is not None:
                    return ResolutionResult.success_with(self._renderer.render_codepoint(codepoint))

        byte_sequence = request.try_get_structure(ByteSequence)
        if byte_sequence is not None:
            return self._validator.decode(byte_sequence.data).flat_map(self._renderer.render_text)

        separated_list = request.try_get_structure(SeparatedList)
        if separated_list is not None:
            codepoints = []
            for item in separated_list.structures_of_type(PrefixedForm):
                if item.kind != self._config.codepoint_prefix:
                    continue
                codepoint = self._prefix_codepoint(item)
                # Invalid entries are dropped, the rest still resolve
                if codepoint is not None:
                    codepoints.append(codepoint)
            if codepoints:
                return self._renderer.render_text("".join(chr(cp) for cp in codepoints))
            return ResolutionResult.failure("no valid codepoints in list")

        return ResolutionResult.failure("input is not a Unicode notation")

    def _prefix_codepoint(self, prefix: PrefixedForm) -> int | None:
        """Codepoint named by a "U+" form, or None when the remainder is not one."""
        if prefix.remainder_integer is None:
            return None
        value = prefix.remainder_integer.force_hexadecimal_value()
        if value is None or not is_unicode_codepoint(value):
            return None
        return value
