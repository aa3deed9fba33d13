from __future__ import annotations
from dataclasses import dataclass

import structlog


log = structlog.get_logger()


def shift_character(block: str, source: int, target: int) -> str:
    """Remove the character at `source` and insert it at `target` of the shortened block."""
    if not (0 <= source < len(block)):
        raise IndexError(f"Source offset {source} outside [0, {len(block)})")
    if not (0 <= target < len(block)):
        raise IndexError(f"Target offset {target} outside [0, {len(block)})")

    char = block[source]
    remaining = block[:source] + block[source + 1:]
    return remaining[:target] + char + remaining[target:]


@dataclass(frozen=True, slots=True)
class ShiftCorrection:
    """A single symbol the encoder wrote at `source` instead of `target`."""

    source: int
    target: int

    def apply(self, block: str) -> str:
        corrected = shift_character(block, self.source, self.target)
        log.debug("shift corrected", symbol=block[self.source], source=self.source, target=self.target)
        return corrected

    def revert(self, block: str) -> str:
        return shift_character(block, self.target, self.source)
