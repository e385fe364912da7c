"""Stream drivers connecting a source, a pipeline and a sink."""

import logging
from typing import Optional

from ..errors import LinecatError, UserQuit
from .paginator import Paginator
from .pipeline import Pipeline
from .sink import BufferedSink
from .source import LineSource

logger = logging.getLogger(__name__)


def stream(
    pipeline: Pipeline,
    source: LineSource,
    sink: BufferedSink,
    paginator: Optional[Paginator] = None,
) -> int:
    """Pull every line through the pipeline and deliver the survivors.

    Lines are written in input order, one at a time; nothing is revisited.

    Args:
        pipeline: Features to apply
        source: Input lines
        sink: Output used when there is no paginator
        paginator: Optional pager writing to the same sink

    Returns:
        Number of lines written
    """
    try:
        for line in pipeline.run(source):
            if paginator is not None:
                paginator.write(line)
            else:
                sink.write_line(line.text)
    except UserQuit:
        raise
    except LinecatError:
        # Lines held in the current page are output already produced.
        if paginator is not None:
            paginator.close()
        raise
    if paginator is not None:
        paginator.close()
    logger.debug("Wrote %d lines", pipeline.state.emitted)
    return pipeline.state.emitted


def copy(source: LineSource, sink: BufferedSink) -> int:
    """Copy input bytes to the sink unchanged.

    Used when no feature is enabled, so output is byte-for-byte the input,
    including a missing final newline.

    Returns:
        Number of bytes copied
    """
    total = 0
    interactive = source.interactive
    for chunk in source.chunks():
        sink.write(chunk)
        total += len(chunk)
        if interactive:
            sink.flush()
    logger.debug("Copied %d bytes", total)
    return total


__all__ = ["copy", "stream"]
