"""
Palettes that turn color and style enumerations into escape strings.

The renderer only ever sees the strings a palette hands back, so the
choice between ANSI output and plain output is made here.
"""

from __future__ import annotations

from typing import Protocol

from ..models import Color, TextStyle

RESET = "\x1b[0m"

TEXT_STYLE_CODES: dict[TextStyle, str] = {
    TextStyle.BOLD: "\x1b[1m",
    TextStyle.ITALIC: "\x1b[3m",
    TextStyle.UNDERLINE: "\x1b[4m",
    TextStyle.INVERSE: "\x1b[7m",
    TextStyle.STRIKE: "\x1b[9m",
}

# SGR color index; foreground is 30 + index, background is 40 + index
_COLOR_INDEX: dict[Color, int] = {
    Color.BLACK: 0,
    Color.RED: 1,
    Color.GREEN: 2,
    Color.YELLOW: 3,
    Color.BLUE: 4,
    Color.MAGENTA: 5,
    Color.CYAN: 6,
    Color.WHITE: 7,
}


class BasePalette(Protocol):
    """Protocol for escape-string palettes."""

    @property
    def reset(self) -> str:
        """Sequence that clears every color and style."""
        ...

    def foreground(self, color: Color | None) -> str:
        """
        Escape string for a text color.

        Args:
            color: Text color, or None when unset

        Returns:
            The escape string, empty when ``color`` is None
        """
        ...

    def background(self, color: Color | None) -> str: ...

    def style(self, style: TextStyle | None) -> str: ...


class AnsiPalette:
    """Resolve colors and styles to ANSI SGR escape sequences."""

    @property
    def reset(self) -> str:
        return RESET

    def foreground(self, color: Color | None) -> str:
        if color is None:
            return ""
        return f"\x1b[{30 + _COLOR_INDEX[color]}m"

    def background(self, color: Color | None) -> str:
        if color is None:
            return ""
        return f"\x1b[{40 + _COLOR_INDEX[color]}m"

    def style(self, style: TextStyle | None) -> str:
        if style is None:
            return ""
        return TEXT_STYLE_CODES[style]


class PlainPalette:
    """Resolve everything to the empty string (no-color output)."""

    @property
    def reset(self) -> str:
        return ""

    def foreground(self, color: Color | None) -> str:
        return ""

    def background(self, color: Color | None) -> str:
        return ""

    def style(self, style: TextStyle | None) -> str:
        return ""
