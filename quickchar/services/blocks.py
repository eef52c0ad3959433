"""
Unicode block service.

Loads the block ranges from the UCD `Blocks.txt` file shipped in `data/`
and answers "which block holds this codepoint" with a bisect over the
sorted range starts.
"""
from __future__ import annotations

import bisect
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from quickchar.paths import logger

NO_BLOCK = "No_Block"


class CatalogUnavailableError(RuntimeError):
    """The Unicode data needed to build the catalog could not be loaded."""


@dataclass(frozen=True)
class UnicodeBlock:
    start: int
    end: int
    name: str

    def codepoints(self) -> range:
        return range(self.start, self.end + 1)


def parse_blocks(text: str) -> list[UnicodeBlock]:
    """Parse `Start..End; Name` lines, ignoring comments and blank lines."""
    blocks = []
    for line_no, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        parts = line.split(";", 1)
        if len(parts) < 2:
            logger.warning(f"Skipping malformed block line {line_no}: {raw!r}")
            continue
        code_range, name = parts[0].strip(), parts[1].strip()

        try:
            if ".." in code_range:
                a, b = code_range.split("..", 1)
                start, end = int(a, 16), int(b, 16)
            else:
                start = end = int(code_range, 16)
        except ValueError:
            logger.warning(f"Skipping malformed block range on line {line_no}: {raw!r}")
            continue

        blocks.append(UnicodeBlock(start, end, name))

    blocks.sort(key=lambda block: block.start)
    return blocks


class UnicodeBlockService:
    """Immutable, sorted block table with codepoint lookup."""

    def __init__(self, blocks: list[UnicodeBlock]):
        self._blocks = tuple(blocks)
        self._starts = tuple(block.start for block in self._blocks)

    @classmethod
    def from_file(cls, path: Path) -> UnicodeBlockService:
        """Load blocks from a UCD file; a missing or empty file is fatal."""
        try:
            text = Path(path).read_text(encoding="utf-8")
        except OSError as e:
            raise CatalogUnavailableError(f"cannot read Unicode blocks from {path}: {e}") from e

        blocks = parse_blocks(text)
        if not blocks:
            raise CatalogUnavailableError(f"no Unicode blocks found in {path}")
        return cls(blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def iter_blocks(self) -> Iterator[UnicodeBlock]:
        """Blocks in ascending codepoint order."""
        return iter(self._blocks)

    def block_of(self, codepoint: int) -> str:
        i = bisect.bisect_right(self._starts, codepoint) - 1
        if i >= 0 and codepoint <= self._blocks[i].end:
            return self._blocks[i].name
        return NO_BLOCK
