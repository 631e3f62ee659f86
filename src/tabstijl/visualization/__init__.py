"""
Visualization module for tabular data.

Renders a tokenized grid as a bordered table in one of two color modes:
- ANSI: colors and text styles as ANSI escape sequences (default)
- PLAIN: no escape sequences at all

Example:
    from tabstijl.config import load_config
    from tabstijl.tokenizer import tokenize
    from tabstijl.visualization import ColorMode, render_table

    config = load_config(["--theme=myth"])
    grid = tokenize("name size\\nfoo 12\\n", config.delimiter)
    for line in render_table(grid, config, color_mode=ColorMode.PLAIN):
        print(line)
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..config import RenderConfig
    from ..models import Grid


class ColorMode(Enum):
    """How colors and styles are written to the output."""

    ANSI = "ansi"
    PLAIN = "plain"


def render_table(
    grid: Grid,
    config: RenderConfig,
    color_mode: ColorMode = ColorMode.ANSI,
) -> list[str]:
    """
    Lay out and render a grid.

    Args:
        grid: Rows produced by the tokenizer
        config: Resolved styling configuration
        color_mode: ANSI escapes or plain text

    Returns:
        Output lines ready for printing, without trailing newlines
    """
    from ..layout import build_layout
    from .factory import get_palette
    from .table import TableRenderer

    layout = build_layout(grid, config)
    return TableRenderer(config, get_palette(color_mode)).render(layout)


__all__ = ["ColorMode", "render_table"]
