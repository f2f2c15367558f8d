"""
Purpose: Public logger façade and construction policy.
Description: `Logger` forwards every call to an optional console sink; `FileLogger` also
            timestamps the message and queues it for the file descriptor, exposing a wait
            handle for the writes. `create_logger` applies the quiet/override rules.
Key Functions/Classes: ConsoleLogger, Logger, FileLogger, create_logger.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from concurrent.futures import Future
from typing import Any, Callable, List, Optional, Protocol

from .formatter import format_buffer, render_message
from .log_utils import get_logger, log_event
from .write_queue import WriteQueue

_LOG = get_logger("logsink.logger")

ConsoleSink = Callable[[Any, List[Any]], Any]


class LoggerLike(Protocol):
    def log(self, message: Any, *params: Any) -> Any:
        ...


class ConsoleLogger:
    """Default console output: one line per call on the current stdout."""

    def log(self, message: Any, params: Optional[List[Any]] = None) -> None:
        sys.stdout.write(render_message(message, params or ()) + "\n")
        sys.stdout.flush()


class Logger:
    """Console-only logger. A missing console sink makes it a no-op."""

    def __init__(self, console: Optional[ConsoleSink] = None):
        self.console = console

    def log(self, message: Any, *params: Any) -> None:
        if self.console is not None:
            self.console(message, list(params))


class FileLogger(Logger):
    """
    Logger that also appends timestamped lines to an already-open descriptor.

    `log()` returns as soon as the write is queued; I/O errors are only visible
    through `get_wait_handle()`. The descriptor is not closed by this class.
    """

    def __init__(self, fd: int, console: Optional[ConsoleSink] = None):
        super().__init__(console)
        self.fd = fd
        self.queue = WriteQueue(fd)

    def log(self, message: Any, *params: Any) -> None:
        # console first: it is synchronous and may raise
        super().log(message, *params)
        self.queue.enqueue(format_buffer(render_message(message, params)))

    def get_wait_handle(self) -> "Future[None]":
        return self.queue.wait_handle()

    async def drain(self) -> None:
        """Await every write queued so far; raises the first write error."""
        await asyncio.wrap_future(self.get_wait_handle())

    def shutdown(self, wait: bool = True) -> None:
        self.queue.shutdown(wait=wait)


def create_logger(file: Optional[int] = None, logger: Optional[LoggerLike] = None,
                  quiet: bool = False) -> Logger:
    """
    Build a logger from resolved options.

    - no `logger`: stdout via `ConsoleLogger`, unless `quiet`
    - custom `logger`: always used, `quiet` only silences the default
    - a `Logger` built here is returned as is so file output is not doubled
    - `file` (an open descriptor) adds asynchronous file output
    """
    if isinstance(logger, Logger):
        if file is not None and file != getattr(logger, "fd", None):
            log_event(_LOG, "file_option_ignored", level=logging.WARNING,
                      details={"file": file, "reason": "logger already built by logsink"})
        return logger

    console: Optional[ConsoleSink]
    if logger is not None:
        console = logger.log
    elif quiet:
        console = None
    else:
        console = ConsoleLogger().log

    if file is None:
        return Logger(console)
    return FileLogger(file, console)
