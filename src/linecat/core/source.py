"""Line sources: files in argument order, or standard input."""

import logging
import mmap
import os
import stat
import sys
from contextlib import contextmanager
from typing import BinaryIO, Iterator, Optional, Sequence

from ..errors import InputError
from ..models.line import Line
from .features import TEXT_ENCODING, TEXT_ERRORS

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


def _strip_terminator(raw: bytes) -> bytes:
    if raw.endswith(b"\n"):
        raw = raw[:-1]
        if raw.endswith(b"\r"):
            raw = raw[:-1]
    return raw


def _decode(raw: bytes) -> str:
    return _strip_terminator(raw).decode(TEXT_ENCODING, TEXT_ERRORS)


def _describe(path: str, error: OSError) -> str:
    return f"{path}: {error.strerror or error}"


@contextmanager
def _open_file(path: str) -> Iterator[tuple[BinaryIO, Optional[mmap.mmap]]]:
    """Open ``path`` for reading, mapping it when it is a non-empty regular file.

    The mapping lives only as long as the context.
    """
    try:
        handle = open(path, "rb")
    except OSError as e:
        raise InputError(_describe(path, e)) from e

    with handle:
        try:
            info = os.fstat(handle.fileno())
        except OSError as e:
            raise InputError(_describe(path, e)) from e

        mapped = None
        if stat.S_ISREG(info.st_mode) and info.st_size > 0:
            try:
                mapped = mmap.mmap(handle.fileno(), 0, access=mmap.ACCESS_READ)
            except (OSError, ValueError) as e:
                logger.debug("Cannot map %s (%s); using buffered I/O", path, e)

        if mapped is None:
            logger.debug("Reading %s with buffered I/O", path)
            yield handle, None
            return

        logger.debug("Mapped %s (%d bytes)", path, info.st_size)
        with mapped:
            yield handle, mapped


class LineSource:
    """Lazy, ordered lines from files or standard input.

    With at least one path, standard input is never read. Files are opened
    one at a time in order; a file that cannot be opened raises
    ``InputError`` after the lines of earlier files have been yielded.
    """

    def __init__(self, paths: Sequence[str] = (), stdin: Optional[BinaryIO] = None):
        self.paths = list(paths)
        self._stdin = stdin

    @property
    def stdin(self) -> BinaryIO:
        if self._stdin is None:
            self._stdin = sys.stdin.buffer
        return self._stdin

    @property
    def interactive(self) -> bool:
        """True when lines come from a terminal."""
        if self.paths:
            return False
        isatty = getattr(self.stdin, "isatty", None)
        return bool(isatty and isatty())

    def __iter__(self) -> Iterator[Line]:
        ordinal = 0
        for raw in self._raw_lines():
            ordinal += 1
            yield Line(_decode(raw), ordinal)

    def _raw_lines(self) -> Iterator[bytes]:
        if not self.paths:
            yield from self._read_stream(self.stdin, "<stdin>")
            return
        for path in self.paths:
            with _open_file(path) as (handle, mapped):
                if mapped is not None:
                    yield from self._read_mapped(mapped)
                else:
                    yield from self._read_stream(handle, path)

    @staticmethod
    def _read_mapped(mapped: mmap.mmap) -> Iterator[bytes]:
        while True:
            raw = mapped.readline()
            if not raw:
                break
            yield raw

    @staticmethod
    def _read_stream(stream: BinaryIO, name: str) -> Iterator[bytes]:
        # readline, not read(n): a terminal must see output after each line
        while True:
            try:
                raw = stream.readline()
            except OSError as e:
                raise InputError(_describe(name, e)) from e
            if not raw:
                break
            yield raw

    def chunks(self) -> Iterator[bytes]:
        """Raw byte blocks in input order, with no line splitting."""
        if not self.paths:
            yield from self._read_chunks(self.stdin, "<stdin>")
            return
        for path in self.paths:
            with _open_file(path) as (handle, mapped):
                if mapped is None:
                    yield from self._read_chunks(handle, path)
                    continue
                for start in range(0, len(mapped), CHUNK_SIZE):
                    yield mapped[start:start + CHUNK_SIZE]

    @staticmethod
    def _read_chunks(stream: BinaryIO, name: str) -> Iterator[bytes]:
        read = getattr(stream, "read1", stream.read)
        while True:
            try:
                data = read(CHUNK_SIZE)
            except OSError as e:
                raise InputError(_describe(name, e)) from e
            if not data:
                break
            yield data


__all__ = ["CHUNK_SIZE", "LineSource"]
