"""
Built-in border styles and theme presets.

Border styles are complete glyph sets; themes are bundles of
``RenderConfig`` field updates applied as a single option. Lookup by
name is the only behavior here; unknown names raise ``KeyError`` and are
reported as configuration errors by the caller.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import Alignment, BorderEdge, BorderStyle, Color, Delimiter, TextStyle

SINGLE = BorderStyle(
    name="single",
    top=BorderEdge("┌", "┬", "┐", "─"),
    separator=BorderEdge("├", "┼", "┤", "─"),
    bottom=BorderEdge("└", "┴", "┘", "─"),
    vertical="│",
)

DOUBLE = BorderStyle(
    name="double",
    top=BorderEdge("╔", "╦", "╗", "═"),
    separator=BorderEdge("╠", "╬", "╣", "═"),
    bottom=BorderEdge("╚", "╩", "╝", "═"),
    vertical="║",
)

HEAVY = BorderStyle(
    name="heavy",
    top=BorderEdge("┏", "┳", "┓", "━"),
    separator=BorderEdge("┣", "╋", "┫", "━"),
    bottom=BorderEdge("┗", "┻", "┛", "━"),
    vertical="┃",
)

_STAR_EDGE = BorderEdge("✲", "✲", "✲", "✲")

STAR = BorderStyle(
    name="star",
    top=_STAR_EDGE,
    separator=_STAR_EDGE,
    bottom=_STAR_EDGE,
    vertical="║",
)

DEFAULT_BORDER_STYLE = SINGLE

BORDER_STYLES: dict[str, BorderStyle] = {
    style.name: style for style in (SINGLE, DOUBLE, HEAVY, STAR)
}


@dataclass(frozen=True)
class ThemePreset:
    """
    A named bundle of style, alignment and border settings.

    Attributes:
        name: Theme name as accepted by ``--theme``
        updates: ``RenderConfig`` field names mapped to the values the theme
            sets. Fields not listed keep whatever value they had before the
            theme was applied.
    """

    name: str
    updates: dict[str, Any] = field(default_factory=dict, hash=False)


THEMES: dict[str, ThemePreset] = {
    theme.name: theme
    for theme in (
        ThemePreset(
            "matrix",
            {
                "header_align": Alignment.CENTER,
                "border_style": HEAVY,
                "table_color": Color.GREEN,
                "header_text_style": TextStyle.BOLD,
                "header_text_color": Color.GREEN,
                "body_text_color": Color.GREEN,
                "body_text_style": TextStyle.BOLD,
            },
        ),
        ThemePreset(
            "mecha",
            {
                "header_align": Alignment.CENTER,
                "body_align": Alignment.CENTER,
                "border_style": DOUBLE,
                "header_text_style": TextStyle.BOLD,
                "header_bg_color": Color.CYAN,
                "body_bg_color": Color.MAGENTA,
                "body_text_style": TextStyle.UNDERLINE,
            },
        ),
        ThemePreset(
            "myth",
            {
                "header_align": Alignment.CENTER,
                "body_align": Alignment.CENTER,
                "border_style": DOUBLE,
                "table_color": Color.RED,
                "header_bg_color": Color.RED,
                "header_text_style": TextStyle.BOLD,
                "header_text_color": Color.WHITE,
                "body_text_color": Color.MAGENTA,
                "body_bg_color": Color.BLACK,
            },
        ),
        ThemePreset(
            "retro",
            {
                "header_align": Alignment.CENTER,
                "body_align": Alignment.CENTER,
                "border_style": STAR,
                "header_text_style": TextStyle.BOLD,
                "header_bg_color": Color.RED,
                "body_bg_color": Color.YELLOW,
                "body_text_style": TextStyle.ITALIC,
            },
        ),
        ThemePreset(
            "sticky",
            {
                "header_align": Alignment.CENTER,
                "delimiter": Delimiter.TAB,
                "border_style": DOUBLE,
                "header_text_style": TextStyle.BOLD,
                "header_bg_color": Color.GREEN,
                "body_bg_color": Color.YELLOW,
                "body_text_style": TextStyle.UNDERLINE,
            },
        ),
    )
}


def get_border_style(name: str) -> BorderStyle:
    """
    Look up a border style by name.

    Raises:
        KeyError: If no border style has that name
    """
    return BORDER_STYLES[name]


def get_theme(name: str) -> ThemePreset:
    """
    Look up a theme preset by name.

    Raises:
        KeyError: If no theme has that name
    """
    return THEMES[name]
