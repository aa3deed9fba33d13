from __future__ import annotations
from dataclasses import dataclass

from z340_reverser.utils import ConfigurationError


@dataclass(frozen=True, slots=True)
class GridSpec:
    """Geometry of a rectangular block and the diagonal step used to walk it.

    Cell (row, col) lives at linear offset ``row * cols + col``.
    """

    rows: int
    cols: int
    col_step: int = 2
    row_step: int = 1

    def __post_init__(self):
        if self.rows <= 0 or self.cols <= 0:
            raise ConfigurationError(f"Grid dimensions must be positive, got {self.rows}x{self.cols}")
        if self.col_step <= 0 or self.row_step <= 0:
            raise ConfigurationError(
                f"Grid steps must be positive, got col_step={self.col_step} row_step={self.row_step}"
            )

    @property
    def length(self) -> int:
        return self.rows * self.cols

    def offset(self, col: int, row: int) -> int:
        if not (0 <= col < self.cols and 0 <= row < self.rows):
            raise IndexError(f"Cell (col={col}, row={row}) outside {self.rows}x{self.cols} grid")
        return col + row * self.cols

    def coordinate(self, offset: int) -> tuple[int, int]:
        """Inverse of offset(): linear offset to (col, row)."""
        if not (0 <= offset < self.length):
            raise IndexError(f"Offset {offset} outside [0, {self.length})")
        row, col = divmod(offset, self.cols)
        return col, row

    def check_block(self, block: str) -> None:
        if len(block) != self.length:
            raise ConfigurationError(
                f"Block length {len(block)} != {self.rows}x{self.cols} grid ({self.length})"
            )


@dataclass(frozen=True, slots=True)
class ExclusionWindow:
    """Run of cells on one row that was never transposed.

    Columns are ``col_start`` inclusive to ``col_end`` exclusive.
    """

    row: int
    col_start: int
    col_end: int

    def validate(self, spec: GridSpec) -> None:
        if not (0 <= self.row < spec.rows):
            raise ConfigurationError(f"Exclusion row {self.row} outside [0, {spec.rows})")
        if not (0 <= self.col_start < self.col_end <= spec.cols):
            raise ConfigurationError(
                f"Exclusion columns [{self.col_start}, {self.col_end}) outside [0, {spec.cols})"
            )

    def contains(self, col: int, row: int) -> bool:
        return row == self.row and self.col_start <= col < self.col_end

    def offsets(self, spec: GridSpec) -> list[int]:
        """Linear offsets of the window in left-to-right order."""
        return [spec.offset(col, self.row) for col in range(self.col_start, self.col_end)]

    def __len__(self) -> int:
        return self.col_end - self.col_start
