"""
Column layout: header substitution, column widths and cell alignment.

Widths are measured with ``len()``, i.e. in Unicode code points. Wide
glyphs and escape sequences inside cell content are not measured as
display columns.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from .models import Alignment, Grid, Row

if TYPE_CHECKING:
    from .config import RenderConfig

logger = logging.getLogger(__name__)


def align_text(text: str, width: int, alignment: Alignment = Alignment.LEFT) -> str:
    """
    Pad ``text`` with spaces to ``width`` characters.

    Center alignment puts ``floor(gap / 2)`` spaces on the left and the rest
    on the right. Text already at or beyond ``width`` is returned unchanged.

    Args:
        text: Cell text
        width: Column width, padding included
        alignment: Where the text sits inside the column

    Returns:
        The padded text
    """
    gap = max(width - len(text), 0)
    if alignment is Alignment.RIGHT:
        return " " * gap + text
    if alignment is Alignment.CENTER:
        left = gap // 2
        return " " * left + text + " " * (gap - left)
    return text + " " * gap


def apply_header(grid: Grid, header: Row | None, suppress: bool = False) -> Grid:
    """
    Replace row 0 with an externally supplied header.

    The header is not checked against the column count. With an empty grid
    the header becomes the only row.
    """
    if header is None or suppress:
        return grid
    return (tuple(header),) + grid[1:]


def compute_column_widths(grid: Grid, padding: int = 0) -> tuple[int, ...]:
    """Widest cell per column plus ``padding``; one entry per column of the longest row."""
    column_count = max((len(row) for row in grid), default=0)
    widths = [0] * column_count
    for row in grid:
        for index, cell in enumerate(row):
            widths[index] = max(widths[index], len(cell))
    return tuple(width + padding for width in widths)


@dataclass(frozen=True)
class TableLayout:
    """
    A finalized grid together with its column widths.

    Attributes:
        rows: Grid rows, header (if any) first
        widths: Padded width of every column
        has_header: True if row 0 is rendered as a header
    """

    rows: Grid
    widths: tuple[int, ...]
    has_header: bool = True

    @property
    def column_count(self) -> int:
        return len(self.widths)

    def is_header(self, index: int) -> bool:
        return self.has_header and index == 0

    def alignment_for(self, index: int, config: RenderConfig) -> Alignment:
        return config.header_align if self.is_header(index) else config.body_align

    def cells(self, index: int) -> Row:
        """Row ``index`` extended with empty cells up to the column count."""
        row = self.rows[index]
        return row + ("",) * (self.column_count - len(row))

    def aligned_cells(self, index: int, config: RenderConfig) -> list[str]:
        alignment = self.alignment_for(index, config)
        return [
            align_text(cell, width, alignment)
            for cell, width in zip(self.cells(index), self.widths)
        ]


def build_layout(grid: Grid, config: RenderConfig) -> TableLayout:
    """Substitute the configured header and measure the columns."""
    rows = apply_header(grid, config.header_data, suppress=not config.show_header)
    widths = compute_column_widths(rows, config.padding)
    logger.debug("Layout: %d row(s), column widths %s", len(rows), list(widths))
    return TableLayout(rows=rows, widths=widths, has_header=config.show_header)
