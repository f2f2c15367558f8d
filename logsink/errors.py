"""
Purpose: Exception types for the logsink package.
Description: Separates construction-time failures (a log file that cannot be opened,
a logger object that cannot log) from the base error used for queue misuse.
Key Classes: LogSinkError, LogFileOpenError, LoggerConfigError.
"""


class LogSinkError(Exception):
    """Base logsink exception."""


class LogFileOpenError(LogSinkError):
    """Raised when a log file path cannot be opened for appending."""

    def __init__(self, path: object):
        self.path = path
        super().__init__(
            f"Failed to open log file {path}. Please check if the file path is valid "
            "and if the process has write permissions to the directory."
        )


class LoggerConfigError(LogSinkError):
    """Raised when a supplied logger does not expose a callable `log`."""
