"""
Purpose: Self-diagnostics for the logsink package.
Description: Events about the sink itself (a write that failed, a queue that shut down, an
            option that was ignored) go to stderr as one compact JSON object per line, so they
            never mix with the console output a Logger prints on stdout.
Key Functions: get_logger, log_event

AIDEV-NOTE: Never route these events through a logsink Logger; a broken file target
            would then report on itself.
"""

from __future__ import annotations
import json
import logging
import sys
from typing import Any, Dict, Optional

DIAGNOSTICS_LEVEL = logging.WARNING


def get_logger(name: str = "logsink") -> logging.Logger:
    """Return the stdlib logger for `name`, attaching the stderr handler once."""
    logger = logging.getLogger(name)
    if logger.handlers:
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(DIAGNOSTICS_LEVEL)
    logger.propagate = False
    return logger


def log_event(logger: logging.Logger, event: str, *, level: int = logging.INFO,
              details: Optional[Dict[str, Any]] = None) -> None:
    # skip building the payload for DEBUG events in the write path
    if not logger.isEnabledFor(level):
        return
    payload = {"source": logger.name, "event": event, "details": details or {}}
    logger.log(level, json.dumps(payload, default=str, separators=(",", ":"), sort_keys=True))
