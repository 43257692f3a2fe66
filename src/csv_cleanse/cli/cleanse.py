"""Cleanse command for csv-cleanse CLI."""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path
from typing import Annotated

import typer

from csv_cleanse.config import (
    DEFAULT_LOG_LEVEL,
    LOG_LEVEL_ENVVAR,
    field_size_limit_bytes,
    parse_delimiter,
)
from csv_cleanse.errors import (
    ConfigError,
    RecordParseError,
    SinkOpenError,
    SourceOpenError,
)

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def version_callback(value: bool) -> None:
    """Print version and exit.

    Args:
        value: True if --version flag was provided
    """
    if value:
        from csv_cleanse import __version__

        typer.echo(f"csv-cleanse {__version__}")
        raise typer.Exit()


def configure_logging(level_name: str) -> None:
    """Send log records to stderr at the given level.

    Raises:
        ConfigError: If the level name is unknown
    """
    level = logging.getLevelName(level_name.upper())
    if not isinstance(level, int):
        raise ConfigError(f"Unknown log level: {level_name}")
    logging.basicConfig(level=level, stream=sys.stderr, format=_LOG_FORMAT)
    logging.getLogger("csv_cleanse").setLevel(level)


def _release_stdout() -> None:
    """Point stdout at /dev/null after the consumer went away.

    Keeps the interpreter's final flush of stdout from raising a second
    broken pipe error on exit.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)
    os.close(devnull)


def cleanse(
    input_file: Annotated[
        Path | None,
        typer.Argument(metavar="FILE", help='Input file to read, "-" for stdin (default: stdin)'),
    ] = None,
    delimiter: Annotated[
        str,
        typer.Option("--delimiter", "-d", help="Field delimiter, must be a single byte (default: tab)"),
    ] = "\t",
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help='Output file to write, "-" for stdout (default: stdout)'),
    ] = None,
    max_field_size: Annotated[
        int,
        typer.Option("--max-field-size", help="Max field size in MB (default: 100, 0=unlimited)"),
    ] = 100,
    log_level: Annotated[
        str,
        typer.Option("--log-level", "-l", envvar=LOG_LEVEL_ENVVAR, help="Log level for diagnostics on stderr"),
    ] = DEFAULT_LOG_LEVEL,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    r"""Clean up delimited data.

    For each field in each record:

    \b
    1. Replace the delimiter inside quoted fields with a space
    2. Replace newlines inside quoted fields with a space
    3. Replace invalid UTF-8 with U+FFFD

    One log line is written to stderr for every field that changed.

    \b
    Example:
        csv-cleanse export.tsv -o clean.tsv
        csv-cleanse -d , export.csv > clean.csv
        cat export.csv | csv-cleanse -d , - | head
    """
    from csv_cleanse.pipeline import run, select_input, select_output, set_field_size_limit

    try:
        configure_logging(log_level)
        delim = parse_delimiter(delimiter)
        limit = field_size_limit_bytes(max_field_size)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    source = select_input(input_file)
    sink = select_output(output)
    previous_limit = set_field_size_limit(limit)

    try:
        with source as in_stream, sink as out_stream:
            result = run(in_stream, out_stream, delim)
    except SourceOpenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    except SinkOpenError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    except RecordParseError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.echo(f"Error: I/O error: {e}", err=True)
        raise typer.Exit(1) from None
    finally:
        set_field_size_limit(previous_limit)

    if result.consumer_closed and sink.is_stdout:
        _release_stdout()
