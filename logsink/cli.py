"""
Purpose: CLI for appending timestamped lines to a log file.
Description: Provides a `logsink write` command that logs each message (or each stdin line)
through the same construction policy the library uses, then waits for the file writes.
Key Functions/Classes: Click entrypoints `logsink` and `write`.
"""

from __future__ import annotations

import os
import sys
from typing import Optional, Tuple

import click

from .config import get_default_log_file, get_default_quiet
from .errors import LogSinkError
from .options import normalize_logging_options


@click.group()
def logsink() -> None:
    """Asynchronous log sink utilities."""


@logsink.command()
@click.option("--file", "file_path", default=get_default_log_file, type=click.Path(),
              help="Append log lines to this file (env: LOGSINK_FILE)")
@click.option("--quiet/--no-quiet", default=get_default_quiet, show_default=True,
              help="Suppress console output (env: LOGSINK_QUIET)")
@click.argument("messages", nargs=-1)
def write(file_path: Optional[str], quiet: bool, messages: Tuple[str, ...]) -> None:
    """Log MESSAGES, or stdin lines when none are given."""
    try:
        resolved = normalize_logging_options({"file": file_path, "quiet": quiet})
    except LogSinkError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    lines = messages or tuple(line.rstrip("\n") for line in sys.stdin)
    logger = resolved.logger
    for line in lines:
        logger.log(line)

    if not hasattr(logger, "get_wait_handle"):
        return
    try:
        logger.get_wait_handle().result()
    except Exception as e:
        click.echo(f"Error: failed writing to log file {file_path}: {e}", err=True)
        sys.exit(1)
    finally:
        logger.shutdown()
        if resolved.file is not None:
            os.close(resolved.file)


if __name__ == "__main__":
    logsink()
