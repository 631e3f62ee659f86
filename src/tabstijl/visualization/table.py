"""
Table renderer with box-drawing borders.

This module provides a TableRenderer class that composes a laid-out grid
into styled, bordered output lines.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .formatters import AnsiPalette

if TYPE_CHECKING:
    from ..config import RenderConfig
    from ..layout import TableLayout
    from ..models import BorderEdge
    from .formatters import BasePalette


class TableRenderer:
    """Render a table layout as a box-drawing table.

    Example output (single border style, padding 2):
        ┌─────┬───┐
        │a    │b  │
        ├─────┼───┤
        │ccc  │d  │
        └─────┴───┘
    """

    def __init__(self, config: RenderConfig, palette: BasePalette | None = None) -> None:
        """Initialize the table renderer.

        Args:
            config: Resolved styling configuration
            palette: Escape-string palette. Defaults to ANSI escapes.
        """
        self._config = config
        self._palette = palette if palette is not None else AnsiPalette()

    def border_line(self, edge: BorderEdge, widths: tuple[int, ...]) -> str:
        """Compose one horizontal border line.

        Args:
            edge: Glyphs for this line (top, separator or bottom)
            widths: Padded column widths

        Returns:
            The line, with ``columns - 1`` junctions and the two corners
        """
        fills = edge.junction.join(edge.fill * width for width in widths)
        color = self._palette.foreground(self._config.table_color)
        return f"{color}{edge.left}{fills}{edge.right}{self._palette.reset}"

    def row_line(self, layout: TableLayout, index: int) -> str:
        """Compose row ``index`` of ``layout`` with its cell styling."""
        config = self._config
        palette = self._palette
        if layout.is_header(index):
            prefix = (
                palette.style(config.header_text_style)
                + palette.background(config.header_bg_color)
                + palette.foreground(config.header_text_color)
            )
        else:
            prefix = (
                palette.style(config.body_text_style)
                + palette.background(config.body_bg_color)
                + palette.foreground(config.body_text_color)
            )

        parts: list[str] = []
        divider = ""
        if config.show_border:
            border_color = palette.foreground(config.table_color)
            vertical = config.border_style.vertical
            parts.append(f"{border_color}{vertical}{palette.reset}")
            divider = f"{border_color}{vertical}"

        for text in layout.aligned_cells(index, config):
            parts.append(f"{prefix}{text}{palette.reset}{divider}")

        return "".join(parts)

    def render(self, layout: TableLayout) -> list[str]:
        """Render every row of ``layout`` plus the enabled border lines.

        Args:
            layout: Finalized grid and column widths

        Returns:
            Output lines, without trailing newlines
        """
        config = self._config
        border = config.border_style
        lines: list[str] = []

        if config.show_border:
            lines.append(self.border_line(border.top, layout.widths))

        for index in range(len(layout.rows)):
            lines.append(self.row_line(layout, index))
            if layout.is_header(index) and config.show_border and config.show_separator:
                lines.append(self.border_line(border.separator, layout.widths))

        if config.show_border:
            lines.append(self.border_line(border.bottom, layout.widths))

        return lines
