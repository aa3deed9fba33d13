from typing import Iterator, List, Optional

import structlog

from z340_reverser.models.grid import ExclusionWindow, GridSpec
from z340_reverser.utils import ConfigurationError


log = structlog.get_logger()


def walk(spec: GridSpec, count: Optional[int] = None) -> Iterator[tuple[int, int]]:
    """
    Yield (col, row) pairs of the diagonal walk over the grid.
    - starts at (0, 0)
    - after each cell: col += col_step (mod cols), row += row_step (mod rows)
    - stops after `count` cells (default: one per grid cell), no repeat detection
    """
    if count is None:
        count = spec.length

    col = 0
    row = 0
    for _ in range(count):
        yield col, row
        col = (col + spec.col_step) % spec.cols
        row = (row + spec.row_step) % spec.rows


def traversal_offsets(spec: GridSpec) -> List[int]:
    """Linear offsets visited by the walk, in walk order."""
    return [spec.offset(col, row) for col, row in walk(spec)]


def read_out(block: str, spec: GridSpec, exclusion: Optional[ExclusionWindow] = None) -> str:
    """
    Read a block out along the diagonal walk.

    Cells inside `exclusion` are skipped during the walk (the step still counts)
    and appended verbatim, left to right, once the walk is done.
    """
    spec.check_block(block)
    if exclusion is not None:
        exclusion.validate(spec)

    result = []
    skipped = 0
    for col, row in walk(spec):
        if exclusion is not None and exclusion.contains(col, row):
            skipped += 1
            continue
        result.append(block[spec.offset(col, row)])

    if exclusion is not None:
        result.extend(block[offset] for offset in exclusion.offsets(spec))

    log.debug(
        "block read out",
        rows=spec.rows,
        cols=spec.cols,
        length=len(block),
        skipped=skipped,
    )
    return "".join(result)


def write_in(text: str, spec: GridSpec) -> str:
    """Place text back into the grid along the walk; undoes a plain read_out()."""
    spec.check_block(text)
    offsets = traversal_offsets(spec)
    if sorted(offsets) != list(range(spec.length)):
        raise ConfigurationError(
            f"Walk with steps ({spec.col_step}, {spec.row_step}) does not visit every cell "
            f"of a {spec.rows}x{spec.cols} grid exactly once"
        )

    cells = [""] * spec.length
    for char, offset in zip(text, offsets):
        cells[offset] = char
    return "".join(cells)
