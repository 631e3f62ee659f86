"""Tests for the built-in border styles and themes."""

import pytest

from tabstijl.config import RenderConfig
from tabstijl.models import Alignment, Color, TextStyle
from tabstijl.styles import (
    BORDER_STYLES,
    DOUBLE,
    HEAVY,
    SINGLE,
    STAR,
    THEMES,
    get_border_style,
    get_theme,
)


class TestBorderStyles:
    """Tests for the border style catalog."""

    def test_catalog_names(self) -> None:
        """Test that the four presets are registered by name."""
        assert set(BORDER_STYLES) == {"single", "double", "heavy", "star"}

    def test_single_glyphs(self) -> None:
        """Test the default single-line glyphs."""
        assert (SINGLE.top.left, SINGLE.top.junction, SINGLE.top.right) == ("┌", "┬", "┐")
        assert SINGLE.separator.junction == "┼"
        assert (SINGLE.bottom.left, SINGLE.bottom.right) == ("└", "┘")
        assert SINGLE.vertical == "│"

    def test_double_and_heavy_verticals(self) -> None:
        """Test vertical glyphs of the other line styles."""
        assert DOUBLE.vertical == "║"
        assert HEAVY.vertical == "┃"
        assert STAR.vertical == "║"

    def test_lookup(self) -> None:
        """Test get_border_style() by name."""
        assert get_border_style("heavy") is HEAVY

    def test_lookup_unknown(self) -> None:
        """Test that unknown names raise KeyError."""
        with pytest.raises(KeyError):
            get_border_style("dotted")


class TestThemes:
    """Tests for the theme catalog."""

    def test_catalog_names(self) -> None:
        """Test that the five themes are registered by name."""
        assert set(THEMES) == {"matrix", "mecha", "myth", "retro", "sticky"}

    @pytest.mark.parametrize("name", sorted(THEMES))
    def test_updates_are_config_fields(self, name: str) -> None:
        """Test that every theme only sets existing RenderConfig fields."""
        theme = get_theme(name)
        RenderConfig(**theme.updates)

    def test_myth(self) -> None:
        """Test the myth theme bundle."""
        updates = get_theme("myth").updates
        assert updates["border_style"] is DOUBLE
        assert updates["table_color"] is Color.RED
        assert updates["header_text_color"] is Color.WHITE
        assert updates["body_bg_color"] is Color.BLACK
        assert updates["body_align"] is Alignment.CENTER

    def test_retro(self) -> None:
        """Test the retro theme bundle."""
        updates = get_theme("retro").updates
        assert updates["border_style"] is STAR
        assert updates["body_text_style"] is TextStyle.ITALIC

    def test_matrix_leaves_body_alignment(self) -> None:
        """Test that matrix does not touch body alignment."""
        assert "body_align" not in get_theme("matrix").updates

    def test_lookup_unknown(self) -> None:
        """Test that unknown names raise KeyError."""
        with pytest.raises(KeyError):
            get_theme("vaporwave")
