"""Core models for tabstijl."""

from dataclasses import dataclass
from enum import Enum

Cell = str
Row = tuple[Cell, ...]
Grid = tuple[Row, ...]


class Alignment(Enum):
    """Horizontal alignment of cell text within its column."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Color(Enum):
    """The eight named terminal colors, usable as text or background color."""

    BLACK = "black"
    BLUE = "blue"
    CYAN = "cyan"
    GREEN = "green"
    MAGENTA = "magenta"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"


class TextStyle(Enum):
    """Text decoration applied to a header or body cell."""

    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    INVERSE = "inverse"
    STRIKE = "strike"


class Delimiter(Enum):
    """
    Column delimiter policy used by the tokenizer.

    ``WHITESPACE`` splits on any character for which ``str.isspace()`` is
    true; the others split on a single literal character. Newline always
    ends a row, whichever policy is active.
    """

    NEWLINE = "newln"
    SPACE = "space"
    TAB = "tab"
    WHITESPACE = "wspace"

    @property
    def char(self) -> str | None:
        """Literal delimiter character, or None for the whitespace policy."""
        return _DELIMITER_CHARS[self]

    def matches(self, char: str) -> bool:
        """True if ``char`` ends the current token under this policy."""
        if self is Delimiter.WHITESPACE:
            return char.isspace()
        return char == self.char or char == "\n"


_DELIMITER_CHARS: dict[Delimiter, str | None] = {
    Delimiter.NEWLINE: "\n",
    Delimiter.SPACE: " ",
    Delimiter.TAB: "\t",
    Delimiter.WHITESPACE: None,
}


@dataclass(frozen=True)
class BorderEdge:
    """
    Glyphs for one horizontal border line (top, separator or bottom).

    Attributes:
        left: Glyph at the left edge of the line
        junction: Glyph between two adjacent columns
        right: Glyph at the right edge of the line
        fill: Glyph repeated across each column's width
    """

    left: str
    junction: str
    right: str
    fill: str


@dataclass(frozen=True)
class BorderStyle:
    """A complete set of glyphs used to draw a table's borders."""

    name: str
    top: BorderEdge
    separator: BorderEdge
    bottom: BorderEdge
    vertical: str
