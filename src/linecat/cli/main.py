"""linecat CLI entry point."""

import logging
import os
import sys

import click

from .. import __version__
from ..config import build_feature_config, load_defaults
from ..context import resolve_config_paths
from ..core import BufferedSink, LineSource, Paginator, Pipeline, copy, stream
from ..errors import ConfigConflictError, LinecatError, UserQuit
from ..models import FeatureConfig, StoredDefaults
from .helpers import configure_logging, fail

logger = logging.getLogger(__name__)


def _feature_config(
    config_dir, no_config, search, text, **flags
) -> FeatureConfig:
    """Resolve persisted defaults and merge them with the command line."""
    if search and text is None:
        raise ConfigConflictError("--search requires --text PATTERN")
    if text is not None and not search:
        raise ConfigConflictError("--text is only valid together with --search")

    if no_config:
        defaults = StoredDefaults()
    else:
        paths = resolve_config_paths(config_dir)
        logger.debug("Defaults file: %s (from %s)", paths.config_file, paths.source)
        defaults = load_defaults(paths.config_file)

    return build_feature_config(defaults, search_text=text, **flags)


@click.command(context_settings=dict(help_option_names=["--help"]))
@click.argument("files", nargs=-1, type=click.Path())
@click.option("-n", "--number", is_flag=True, help="Number output lines")
@click.option("-d", "--dollar", is_flag=True, help="Show $ at the end of each line")
@click.option("-t", "--tabs", is_flag=True, help="Show TAB characters as ^I")
@click.option(
    "-s", "--squeeze-blank", is_flag=True, help="Suppress repeated empty lines"
)
@click.option("--search", is_flag=True, help="Only print lines matching --text")
@click.option(
    "--text",
    metavar="PATTERN",
    help="Text to search for; prefix with 'reg:' for a regular expression",
)
@click.option("-i", "--ignore-case", is_flag=True, help="Case-insensitive search")
@click.option("--encode-base64", is_flag=True, help="Encode each line as base64")
@click.option("--decode-base64", is_flag=True, help="Decode each base64 line")
@click.option("--pages", is_flag=True, help="Page output to the terminal size")
@click.option(
    "--config-dir",
    type=click.Path(file_okay=False),
    help="Directory holding linecat.toml (overrides $LINECAT_CONFIG_DIR)",
)
@click.option("--no-config", is_flag=True, help="Ignore linecat.toml")
@click.option("-v", "--verbose", is_flag=True, help="Log debug details to stderr")
@click.version_option(__version__, prog_name="linecat")
def cli(
    files,
    number,
    dollar,
    tabs,
    squeeze_blank,
    search,
    text,
    ignore_case,
    encode_base64,
    decode_base64,
    pages,
    config_dir,
    no_config,
    verbose,
):
    """Concatenate FILES (or standard input) to standard output.

    Line features can be combined; searching and blank-line squeezing run
    before tab marking, end markers and numbering, so numbers count only
    the lines that are printed.

    Examples:
        linecat notes.txt                     # Plain copy
        linecat -n -s notes.txt               # Numbered, blank runs squeezed
        linecat --search --text "reg:^\\d+" log.txt
        printf 'hi\\n' | linecat --encode-base64
    """
    configure_logging(verbose)

    # Configuration problems surface before any input is opened.
    try:
        config = _feature_config(
            config_dir,
            no_config,
            search,
            text,
            number=number,
            dollar=dollar,
            tabs=tabs,
            squeeze=squeeze_blank,
            pages=pages,
            ignore_case=ignore_case,
            encode_base64=encode_base64,
            decode_base64=decode_base64,
        )
        pipeline = Pipeline.from_config(config)
    except LinecatError as e:
        fail(e)

    source = LineSource(files, stdin=click.get_binary_stream("stdin"))
    stdout = click.get_binary_stream("stdout")

    try:
        with BufferedSink(stdout, line_buffered=source.interactive) as sink:
            paginator = None
            if config.pages:
                if sink.isatty():
                    paginator = Paginator(sink)
                else:
                    logger.info("Output is not a terminal; --pages ignored")

            if pipeline.passthrough and paginator is None:
                copy(source, sink)
            else:
                stream(pipeline, source, sink, paginator)
    except UserQuit:
        return
    except BrokenPipeError:
        # Downstream closed early (e.g. `linecat big.txt | head`); point
        # stdout at devnull so the interpreter does not fail flushing it.
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())
        sys.exit(0)
    except LinecatError as e:
        fail(e)


def main():
    """Entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
