"""CLI helper utilities: logging setup and error reporting."""

import logging
import sys
from typing import NoReturn

import click

from ..errors import LinecatError

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


class ClickEchoHandler(logging.Handler):
    """Send log records to stderr through ``click.echo``.

    The stream is looked up on every record, so output follows whatever
    click considers stderr at the time (including under ``CliRunner``).
    """

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single stderr handler to the ``linecat`` logger.

    Warnings are always shown; ``verbose`` adds debug output.
    """
    logger = logging.getLogger("linecat")
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(isinstance(h, ClickEchoHandler) for h in logger.handlers):
        handler = ClickEchoHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    return logger


def fail(error: LinecatError) -> NoReturn:
    """Report ``error`` on stderr and exit with its status code."""
    click.echo(f"Error: {error}", err=True)
    sys.exit(error.exit_code)
