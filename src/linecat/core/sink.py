"""Buffered output to standard output."""

import logging
from typing import BinaryIO

from .features import TEXT_ENCODING, TEXT_ERRORS

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 64 * 1024


class BufferedSink:
    """Collect output bytes and hand them to ``stream`` in large blocks.

    Lines are terminated with ``\\n`` here, since sources strip terminators.
    Used as a context manager the sink flushes on exit even when an error
    is propagating, so output produced before a failure is not lost.
    """

    def __init__(
        self,
        stream: BinaryIO,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        line_buffered: bool = False,
    ):
        self.stream = stream
        self.buffer_size = buffer_size
        self.line_buffered = line_buffered
        self.writes = 0
        self._buffer = bytearray()

    def write_line(self, text: str) -> None:
        self._buffer += text.encode(TEXT_ENCODING, TEXT_ERRORS)
        self._buffer += b"\n"
        if self.line_buffered or len(self._buffer) >= self.buffer_size:
            self.flush()

    def write(self, data: bytes) -> None:
        self._buffer += data
        if len(self._buffer) >= self.buffer_size:
            self.flush()

    def flush(self) -> None:
        if self._buffer:
            self.stream.write(bytes(self._buffer))
            self.writes += 1
            self._buffer.clear()
        self.stream.flush()

    def isatty(self) -> bool:
        isatty = getattr(self.stream, "isatty", None)
        return bool(isatty and isatty())

    def close(self) -> None:
        self.flush()

    def __enter__(self) -> "BufferedSink":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is BrokenPipeError:
            # Reader went away; nothing left to deliver to.
            self._buffer.clear()
            return
        self.close()


__all__ = ["BufferedSink", "DEFAULT_BUFFER_SIZE"]
