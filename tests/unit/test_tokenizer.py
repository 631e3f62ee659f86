"""Tests for the tokenizer."""

import io

import pytest

from tabstijl.models import Cell, Delimiter, Row
from tabstijl.tokenizer import Tokenizer, tokenize


class TestTokenize:
    """Tests for tokenize()."""

    def test_space_delimited_rows(self) -> None:
        """Test splitting on spaces with newline ending rows."""
        assert tokenize("a b\nccc d\n", Delimiter.SPACE) == (("a", "b"), ("ccc", "d"))

    def test_empty_input(self) -> None:
        """Test that empty input produces an empty grid."""
        assert tokenize("") == ()

    def test_whitespace_only_input(self) -> None:
        """Test that delimiters alone never produce cells or rows."""
        assert tokenize("   \n\n  \n", Delimiter.SPACE) == ()

    def test_consecutive_delimiters_collapse(self) -> None:
        """Test that runs of delimiters do not produce empty cells."""
        assert tokenize("a    b\n", Delimiter.SPACE) == (("a", "b"),)

    def test_no_trailing_newline(self) -> None:
        """Test that the pending token and row are flushed at end of stream."""
        assert tokenize("a b\nc d", Delimiter.SPACE) == (("a", "b"), ("c", "d"))

    def test_ragged_rows(self) -> None:
        """Test that rows may have different lengths."""
        grid = tokenize("a\nb c d\ne f\n")
        assert [len(row) for row in grid] == [1, 3, 2]

    def test_blank_lines_skipped(self) -> None:
        """Test that empty lines do not produce rows."""
        assert tokenize("a\n\n\nb\n") == (("a",), ("b",))

    def test_tab_delimiter_keeps_spaces(self) -> None:
        """Test that spaces are cell content under the tab policy."""
        grid = tokenize("first name\tage\nJohn Doe\t42\n", Delimiter.TAB)
        assert grid == (("first name", "age"), ("John Doe", "42"))

    def test_newline_delimiter(self) -> None:
        """Test that each line becomes a single-cell row under the newline policy."""
        grid = tokenize("a b\nc\td\n", Delimiter.NEWLINE)
        assert grid == (("a b",), ("c\td",))

    def test_newline_ends_row_for_any_delimiter(self) -> None:
        """Test that newline terminates rows even when tab is the delimiter."""
        assert tokenize("a\tb\nc\td", Delimiter.TAB) == (("a", "b"), ("c", "d"))

    def test_whitespace_delimiter(self) -> None:
        """Test the generalized whitespace policy."""
        grid = tokenize("a \t b\x0bc\r\nd\fe\n", Delimiter.WHITESPACE)
        assert grid == (("a", "b", "c"), ("d", "e"))

    def test_space_delimiter_keeps_tabs(self) -> None:
        """Test that tabs are cell content under the space policy."""
        assert tokenize("a\tb c\n", Delimiter.SPACE) == (("a\tb", "c"),)

    def test_skip_first_line(self) -> None:
        """Test that the first produced row is discarded."""
        grid = tokenize("NAME SIZE\nfoo 1\nbar 2\n", skip_first_line=True)
        assert grid == (("foo", "1"), ("bar", "2"))

    def test_skip_first_line_ignores_leading_blank_lines(self) -> None:
        """Test that the discarded row is the first non-empty one."""
        grid = tokenize("\n\nNAME SIZE\nfoo 1\n", skip_first_line=True)
        assert grid == (("foo", "1"),)

    def test_skip_first_line_single_row(self) -> None:
        """Test that skipping the only row leaves an empty grid."""
        assert tokenize("only row", skip_first_line=True) == ()

    def test_reads_stream(self) -> None:
        """Test that text streams are read to the end."""
        stream = io.StringIO("x y\n" * 3)
        assert tokenize(stream) == (("x", "y"),) * 3

    def test_reads_stream_across_chunks(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that tokens split across read chunks are joined."""
        monkeypatch.setattr("tabstijl.tokenizer.CHUNK_SIZE", 2)
        stream = io.StringIO("alpha beta\ngamma\n")
        assert tokenize(stream) == (("alpha", "beta"), ("gamma",))

    def test_unicode_content(self) -> None:
        """Test that multi-byte characters are kept as cell content."""
        assert tokenize("ünï cödé\n") == (("ünï", "cödé"),)

    @pytest.mark.parametrize(
        "text",
        ["a b c\nd e\n", "  lead  and   trail  \nx\n", "one\n\n two  three"],
    )
    def test_rejoin_reproduces_logical_content(self, text: str) -> None:
        """Test that rejoining cells gives the input lines with whitespace collapsed."""
        grid = tokenize(text, Delimiter.SPACE)
        rejoined = [" ".join(row) for row in grid]
        expected = [" ".join(line.split()) for line in text.splitlines() if line.split()]
        assert rejoined == expected

    def test_cells_never_empty(self) -> None:
        """Test that no produced cell is the empty string."""
        grid = tokenize(" a  \t b \n\n  c   \n", Delimiter.WHITESPACE)
        assert all(cell for row in grid for cell in row)


class TestTokenizer:
    """Tests for the incremental Tokenizer."""

    def test_feed_in_pieces(self) -> None:
        """Test that feeding in pieces matches tokenizing at once."""
        tokenizer = Tokenizer(Delimiter.SPACE)
        tokenizer.feed("a b\ncc")
        tokenizer.feed("c ")
        tokenizer.feed("d\n")
        assert tokenizer.finish() == (("a", "b"), ("ccc", "d"))

    def test_finish_returns_tuples(self) -> None:
        """Test that the grid is immutable."""
        tokenizer = Tokenizer()
        tokenizer.feed("a b")
        grid = tokenizer.finish()
        assert isinstance(grid, tuple)
        assert isinstance(grid[0], tuple)

    def test_rows_hold_cell_strings(self) -> None:
        """Test that every row is a tuple of Cell strings."""
        grid = tokenize("name size\nfoo 12\n")
        first: Row = grid[0]
        cell: Cell = first[0]
        assert cell == "name"
        assert all(isinstance(c, Cell) for row in grid for c in row)
