from typing import Collection, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from z340_reverser.models.grid import ExclusionWindow, GridSpec
from z340_reverser.traversal import traversal_offsets
from z340_reverser.utils import wrap_rows


COLORS = {
    "symbol": "bright_white",
    "excluded": "bold green",
    "highlight": "bold yellow on black",
    "step": "dim cyan",
    "row_index": "dim",
}


def cell_text(symbol: str, style: str, step: Optional[int] = None) -> Text:
    """Render one grid cell, optionally followed by its step number in the walk."""
    if step is None:
        return Text(symbol, style=style)
    return Text.assemble((symbol, style), (f" {step:>3}", COLORS["step"]))


def render_block(
    block: str,
    spec: GridSpec,
    *,
    title: str = "",
    exclusion: Optional[ExclusionWindow] = None,
    highlight: Collection[int] = (),
    show_order: bool = False,
) -> Table:
    """Render a block as a grid. Excluded cells and highlighted offsets get their own colors."""
    spec.check_block(block)

    step_of: Dict[int, int] = {}
    if show_order:
        for step, offset in enumerate(traversal_offsets(spec)):
            step_of.setdefault(offset, step)

    table = Table(title=title or None, show_header=True, show_lines=False, padding=(0, 1))
    table.add_column("", justify="right", style=COLORS["row_index"], no_wrap=True)
    for col in range(spec.cols):
        table.add_column(str(col), justify="center", no_wrap=True)

    for row in range(spec.rows):
        cells = []
        for col in range(spec.cols):
            offset = spec.offset(col, row)
            if offset in highlight:
                style = COLORS["highlight"]
            elif exclusion is not None and exclusion.contains(col, row):
                style = COLORS["excluded"]
            else:
                style = COLORS["symbol"]
            cells.append(cell_text(block[offset], style, step_of.get(offset)))
        table.add_row(str(row), *cells)

    return table


def render_rows(text: str, title: str, width: int = 17) -> Panel:
    """Render text wrapped to fixed-width rows, the layout substitution solvers expect."""
    body = Text("\n".join(wrap_rows(text, width)), style=COLORS["symbol"])
    return Panel(body, title=title, expand=False, padding=(1, 2))


def get_console() -> Console:
    return Console(highlight=False)
