"""
Codepoint catalog service.

Builds, once per process, the immutable codepoint -> character name table
used for name lookups and substring search. The build walks every Unicode
block in ascending order and keeps only codepoints that have a name in the
interpreter's Unicode character database.
"""
from __future__ import annotations

import threading
import time
import unicodedata
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path
from types import MappingProxyType

from quickchar.paths import logger
from quickchar.services.blocks import UnicodeBlockService
from quickchar.types import CatalogInfo, ResolverConfig
from quickchar.utils.codepoints import is_surrogate


@dataclass(frozen=True)
class CodepointCatalog:
    """Immutable container for the name table and the blocks it was built from."""

    names: Mapping[int, str]
    # (codepoint, lowercased name) in ascending codepoint order, for scanning
    search_entries: tuple[tuple[int, str], ...]
    blocks: UnicodeBlockService
    blocks_file: Path
    build_seconds: float

    def name_of(self, codepoint: int) -> str | None:
        return self.names.get(codepoint)

    def __len__(self) -> int:
        return len(self.names)

    def __iter__(self) -> Iterator[int]:
        return iter(self.names)


class CatalogInitializationService:
    """Service that builds the codepoint catalog from the block table."""

    def __init__(self, config: ResolverConfig):
        self._config = config

    def build_catalog(self) -> CodepointCatalog:
        started = time.perf_counter()
        blocks = UnicodeBlockService.from_file(self._config.blocks_path)

        names = {}
        for block in blocks.iter_blocks():
            for codepoint in block.codepoints():
                if is_surrogate(codepoint):
                    continue
                name = unicodedata.name(chr(codepoint), None)
                if name:
                    names[codepoint] = name

        # Blocks are sorted, but keep the ascending contract independent of the file
        ordered = dict(sorted(names.items()))
        search_entries = tuple((codepoint, name.lower()) for codepoint, name in ordered.items())
        elapsed = time.perf_counter() - started

        logger.info(
            f"Built codepoint catalog: {len(ordered)} names from {len(blocks)} blocks "
            f"(Unicode {unicodedata.unidata_version}) in {elapsed:.2f}s",
        )
        return CodepointCatalog(
            names=MappingProxyType(ordered),
            search_entries=search_entries,
            blocks=blocks,
            blocks_file=self._config.blocks_path,
            build_seconds=elapsed,
        )


_CATALOG: CodepointCatalog | None = None
_CATALOG_LOCK = threading.Lock()


def get_catalog() -> CodepointCatalog:
    """
    Return the process-wide catalog, building it on first use.

    The lock is the initialization barrier: concurrent first callers wait for
    the single build, later callers read the finished catalog without locking.
    It is always built from the bundled block table; callers with their own
    block file build a private catalog with CatalogInitializationService.
    A failed build leaves nothing cached and raises CatalogUnavailableError.
    """
    global _CATALOG
    catalog = _CATALOG
    if catalog is not None:
        return catalog

    with _CATALOG_LOCK:
        if _CATALOG is None:
            _CATALOG = CatalogInitializationService(ResolverConfig.create_default()).build_catalog()
        return _CATALOG


def get_catalog_info() -> CatalogInfo:
    """Diagnostics for the process-wide catalog, without forcing a build."""
    catalog = _CATALOG
    if catalog is None:
        config = ResolverConfig.create_default()
        return CatalogInfo(catalog_built=False, entry_count=0, block_count=0, blocks_file=config.blocks_path)
    return CatalogInfo(
        catalog_built=True,
        entry_count=len(catalog),
        block_count=len(catalog.blocks),
        blocks_file=catalog.blocks_file,
        build_seconds=catalog.build_seconds,
    )
