"""
Purpose: Asynchronous log sink for console and file output.
Description: Fire-and-forget `log()` calls with ordered, timestamped file writes and a wait
handle that settles once pending writes are done.
Key Functions/Classes: `create_logger`, `normalize_logging_options`, `FileLogger`, `WriteQueue`.
"""

from .errors import LogFileOpenError, LoggerConfigError, LogSinkError
from .formatter import format_lines, timestamp
from .logger import ConsoleLogger, FileLogger, Logger, create_logger
from .options import LoggingOptions, normalize_logging_options, open_log_file
from .write_queue import QueueState, WriteQueue

__all__ = [
    "ConsoleLogger",
    "FileLogger",
    "LogFileOpenError",
    "LogSinkError",
    "Logger",
    "LoggerConfigError",
    "LoggingOptions",
    "QueueState",
    "WriteQueue",
    "create_logger",
    "format_lines",
    "normalize_logging_options",
    "open_log_file",
    "timestamp",
]
