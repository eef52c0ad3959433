"""
Services package for Unicode character resolution.

This package contains the service classes used by the resolver,
organized by domain responsibility.
"""

from quickchar.services.blocks import NO_BLOCK, CatalogUnavailableError, UnicodeBlock, UnicodeBlockService
from quickchar.services.catalog import CatalogInitializationService, CodepointCatalog, get_catalog, get_catalog_info
from quickchar.services.formatting import HtmlFormattingService
from quickchar.services.rendering import CharacterRenderingService, escape_notation, utf8_listing
from quickchar.services.search import NameSearchService
from quickchar.services.utf8 import Utf8ValidationService
from quickchar.types import CatalogInfo, ResolutionResult, ResolverConfig

__all__ = [
    "NO_BLOCK",
    # Types (re-exported for convenience)
    "CatalogInfo",
    # Catalog
    "CatalogInitializationService",
    "CatalogUnavailableError",
    # Services
    "CharacterRenderingService",
    "CodepointCatalog",
    "HtmlFormattingService",
    "NameSearchService",
    "ResolutionResult",
    "ResolverConfig",
    "UnicodeBlock",
    "UnicodeBlockService",
    "Utf8ValidationService",
    "escape_notation",
    "get_catalog",
    "get_catalog_info",
    "utf8_listing",
]
