"""
Purpose: Shared fixtures for logsink tests.
Description: Opens append-mode descriptors on temp files and a descriptor that cannot be
written (a directory opened read-only), closing them after each test.
Key Fixtures: log_path, log_fd, dir_fd.
"""

from __future__ import annotations

import os
import re
from pathlib import Path

import pytest

TIMESTAMP = r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z"
LINE_RE = re.compile(rf"^({TIMESTAMP}) (.*)$")


@pytest.fixture
def log_path(tmp_path: Path) -> Path:
    return tmp_path / "test-file.log"


@pytest.fixture
def log_fd(log_path: Path):
    fd = os.open(log_path, os.O_WRONLY | os.O_CREAT | os.O_APPEND)
    yield fd
    os.close(fd)


@pytest.fixture
def dir_fd(tmp_path: Path):
    fd = os.open(tmp_path, os.O_RDONLY)
    yield fd
    os.close(fd)
