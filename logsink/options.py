"""
Purpose: Logging option model and normalization.
Description: Validates `{file, logger, quiet}` with Pydantic, resolves the `file` option
            (descriptor, path, bytes path or file:// URL) to an open descriptor and builds
            the logger. Opening failures raise before any logger exists.
Key Functions/Classes: LoggingOptions, ResolvedLoggingOptions, open_log_file, normalize_logging_options.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from pydantic import BaseModel, ConfigDict, field_validator

from .errors import LogFileOpenError, LoggerConfigError
from .logger import Logger, create_logger

FileOption = Union[int, Path, str, bytes]

# AIDEV-NOTE: Append mode, created if missing; mirrors opening a log with "a".
_OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND
_OPEN_MODE = 0o644


class LoggingOptions(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    file: Optional[FileOption] = None
    logger: Optional[Any] = None
    quiet: bool = False

    @field_validator("logger")
    @classmethod
    def _check_logger(cls, value: Any) -> Any:
        if value is not None and not callable(getattr(value, "log", None)):
            raise LoggerConfigError("logger must expose a callable `log(message, *params)`")
        return value


@dataclass(frozen=True)
class ResolvedLoggingOptions:
    file: Optional[int]
    quiet: bool
    logger: Logger


def _to_path(raw: Union[Path, str, bytes]) -> str:
    if isinstance(raw, bytes):
        raw = os.fsdecode(raw)
    raw = str(raw)
    if raw.startswith("file://"):
        return url2pathname(urlparse(raw).path)
    return raw


def open_log_file(raw: FileOption) -> int:
    """Return a descriptor for `raw`; integers are taken as already-open descriptors."""
    if isinstance(raw, int):
        return raw
    path = _to_path(raw)
    try:
        return os.open(path, _OPEN_FLAGS, _OPEN_MODE)
    except OSError as exc:
        raise LogFileOpenError(path) from exc


def normalize_logging_options(raw: Union[LoggingOptions, Dict[str, Any], None] = None) -> ResolvedLoggingOptions:
    """Validate raw options, open the log file if one is named and build the logger."""
    if raw is None:
        raw = {}
    if isinstance(raw, LoggingOptions):
        opts = raw
    else:
        opts = LoggingOptions.model_validate(raw)

    fd = open_log_file(opts.file) if opts.file is not None else None
    return ResolvedLoggingOptions(
        file=fd,
        quiet=opts.quiet,
        logger=create_logger(file=fd, logger=opts.logger, quiet=opts.quiet),
    )
