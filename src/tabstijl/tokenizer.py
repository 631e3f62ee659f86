"""
Split a raw character stream into a grid of rows and cells.

The scan works one character at a time. Non-delimiter characters collect
in a token buffer; a delimiter flushes the buffer as a cell, and a newline
additionally closes the current row. Consecutive delimiters collapse, so
no cell is ever the empty string and no row is ever empty.
"""

from __future__ import annotations

import logging
from typing import TextIO

from .models import Delimiter, Grid, Row

logger = logging.getLogger(__name__)

# Characters read from the input stream per call
CHUNK_SIZE = 64 * 1024


class Tokenizer:
    """Incremental tokenizer; feed text, then call ``finish()`` for the grid.

    Example:
        tokenizer = Tokenizer(Delimiter.SPACE)
        tokenizer.feed("a b\\nccc ")
        tokenizer.feed("d\\n")
        tokenizer.finish()  # (("a", "b"), ("ccc", "d"))
    """

    def __init__(
        self,
        delimiter: Delimiter = Delimiter.SPACE,
        skip_first_line: bool = False,
    ) -> None:
        """
        Initialize the tokenizer.

        Args:
            delimiter: Column delimiter policy
            skip_first_line: Discard the first row produced by the scan
        """
        self._delimiter = delimiter
        self._skip_pending = skip_first_line
        self._token: list[str] = []
        self._row: list[str] = []
        self._rows: list[Row] = []

    def feed(self, text: str) -> None:
        """Consume a chunk of input."""
        for char in text:
            if not self._delimiter.matches(char):
                self._token.append(char)
                continue
            self._flush_token()
            if char == "\n":
                self._flush_row()

    def finish(self) -> Grid:
        """Flush pending token and row, and return the finished grid."""
        self._flush_token()
        self._flush_row()
        grid = tuple(self._rows)
        logger.debug("Tokenized %d row(s) with %s delimiter", len(grid), self._delimiter.value)
        return grid

    def _flush_token(self) -> None:
        if self._token:
            self._row.append("".join(self._token))
            self._token.clear()

    def _flush_row(self) -> None:
        if not self._row:
            return
        if self._skip_pending:
            # First produced row is dropped, not promoted to header
            self._skip_pending = False
            logger.debug("Skipping first line: %r", self._row)
        else:
            self._rows.append(tuple(self._row))
        self._row = []


def tokenize(
    source: TextIO | str,
    delimiter: Delimiter = Delimiter.SPACE,
    skip_first_line: bool = False,
) -> Grid:
    """
    Tokenize a whole text stream (or string) into a grid.

    The stream is read to end-of-stream in fixed-size chunks; nothing is
    returned until the whole input has been consumed.

    Args:
        source: Readable text stream, or the input text itself
        delimiter: Column delimiter policy
        skip_first_line: Discard the first row produced by the scan

    Returns:
        Tuple of rows, each a tuple of non-empty cell strings
    """
    tokenizer = Tokenizer(delimiter, skip_first_line)
    if isinstance(source, str):
        tokenizer.feed(source)
    else:
        read = source.read
        for chunk in iter(lambda: read(CHUNK_SIZE), ""):
            tokenizer.feed(chunk)
    return tokenizer.finish()
