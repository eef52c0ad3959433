"""
Result types for Unicode character resolution.

Every branch of the resolver reports through `ResolutionResult`, so a
failed branch always carries a reason and never a partial rendering.
"""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResolutionResult:
    """Result of a resolution step - Either-like structure."""

    success: bool
    result: str
    error_message: str | None = None

    @classmethod
    def success_with(cls, value: str) -> ResolutionResult:
        return cls(success=True, result=value, error_message=None)

    @classmethod
    def failure(cls, error_message: str) -> ResolutionResult:
        return cls(success=False, result="", error_message=error_message)

    def flat_map(self, f) -> ResolutionResult:
        """Chain another resolution step onto a successful result."""
        if self.success:
            return f(self.result)
        return self

    def to_optional(self) -> str | None:
        return self.result if self.success else None


@dataclass(frozen=True)
class CatalogInfo:
    """Immutable catalog diagnostics."""

    catalog_built: bool
    entry_count: int
    block_count: int
    blocks_file: Path
    build_seconds: float | None = None
