"""
Purpose: Tests for internal diagnostics helpers.
Description: Ensures the diagnostics logger is created once per name and events are emitted as compact JSON.
Key Tests: test_get_logger_single_handler, test_log_event_json.
"""

from __future__ import annotations

import io
import json
import logging
import sys

from logsink.log_utils import get_logger, log_event


def test_get_logger_single_handler():
    first = get_logger("logsink.test_factory")
    second = get_logger("logsink.test_factory")
    assert first is second
    assert len(first.handlers) == 1
    assert first.propagate is False
    assert first.handlers[0].stream is sys.stderr


def test_log_event_json():
    logger = get_logger("logsink.test_events")
    buf = io.StringIO()
    logger.handlers[0].setStream(buf)
    log_event(logger, "file_option_ignored", level=logging.WARNING, details={"file": 7})
    log_event(logger, "write_failed", level=logging.DEBUG, details={"seq": 0})
    lines = buf.getvalue().splitlines()
    assert len(lines) == 1
    assert json.loads(lines[0]) == {
        "source": "logsink.test_events",
        "event": "file_option_ignored",
        "details": {"file": 7},
    }
