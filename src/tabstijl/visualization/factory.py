"""
Palette factory for table rendering.

Provides factory function to create the palette matching the requested
color mode.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from . import ColorMode
from .formatters import AnsiPalette, PlainPalette

if TYPE_CHECKING:
    from .formatters import BasePalette


def get_palette(color_mode: ColorMode) -> BasePalette:
    """
    Get palette instance for the requested color mode.

    Args:
        color_mode: ANSI escapes or plain text

    Returns:
        Palette matching the requested mode

    Raises:
        ValueError: If unknown color mode requested
    """
    if color_mode == ColorMode.ANSI:
        return AnsiPalette()

    if color_mode == ColorMode.PLAIN:
        return PlainPalette()

    raise ValueError(f"Unknown color mode: {color_mode}")
