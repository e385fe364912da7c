"""Terminal-sized paging of output lines."""

import logging
import math
import os
import shutil
from typing import Callable, List

import click
from wcwidth import wcwidth

from ..errors import UserQuit
from ..models.line import Line
from .sink import BufferedSink

logger = logging.getLogger(__name__)

PROMPT = "--More--"
CLEAR_PROMPT = "\r\x1b[K"
QUIT_KEYS = ("q", "Q")
TAB_STOP = 8


def display_width(text: str) -> int:
    """Terminal columns ``text`` occupies before wrapping.

    Wide (East Asian) characters take two columns, tabs advance to the
    next multiple of ``TAB_STOP`` and non-printable characters take none.
    """
    width = 0
    for char in text:
        if char == "\t":
            width += TAB_STOP - width % TAB_STOP
        else:
            width += max(wcwidth(char), 0)
    return width


class Paginator:
    """Group lines into terminal-sized pages and wait for a key between them.

    A page holds ``rows - 1`` terminal rows (the last row is for the
    prompt). Lines wider than the terminal cost one row per wrap, measured
    in display columns rather than characters. The terminal size is read
    again before each page, never in the middle of one.

    Args:
        sink: Where finished pages are written
        terminal_size: Returns an ``os.terminal_size``-like (columns, lines)
        read_key: Blocks until a key is pressed and returns it
    """

    def __init__(
        self,
        sink: BufferedSink,
        terminal_size: Callable[[], os.terminal_size] = shutil.get_terminal_size,
        read_key: Callable[[], str] = click.getchar,
    ):
        self.sink = sink
        self.terminal_size = terminal_size
        self.read_key = read_key
        self.pages = 0
        self._page: List[str] = []
        self._used = 0
        self._rows, self._columns = self._measure()

    def _measure(self) -> tuple[int, int]:
        size = self.terminal_size()
        rows = max(1, size.lines - 1)
        columns = max(1, size.columns)
        logger.debug("Page size: %d rows x %d columns", rows, columns)
        return rows, columns

    def cost(self, text: str) -> int:
        """Terminal rows ``text`` occupies once wrapped."""
        return max(1, math.ceil(display_width(text) / self._columns))

    def write(self, line: Line) -> None:
        cost = self.cost(line.text)
        if self._page and self._used + cost > self._rows:
            self._flush_page()
            self._wait()
            self._rows, self._columns = self._measure()
            cost = self.cost(line.text)
        self._page.append(line.text)
        self._used += cost

    def _flush_page(self) -> None:
        for text in self._page:
            self.sink.write_line(text)
        self.sink.flush()
        self.pages += 1
        self._page = []
        self._used = 0

    def _wait(self) -> None:
        self.sink.write(PROMPT.encode())
        self.sink.flush()
        key = self.read_key()
        self.sink.write(CLEAR_PROMPT.encode())
        if key in QUIT_KEYS:
            self.sink.flush()
            raise UserQuit("quit at pagination prompt")

    def close(self) -> None:
        """Write the last, possibly partial, page without prompting."""
        if self._page:
            self._flush_page()


__all__ = ["CLEAR_PROMPT", "PROMPT", "Paginator", "display_width"]
