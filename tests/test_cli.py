"""
Purpose: CLI tests for `logsink write`.
Description: Verifies help output, file writes from args and stdin, env defaults and failure exit codes.
Key Tests: test_cli_help, test_write_appends_lines, test_write_fails_for_directory.
"""

from __future__ import annotations

import errno
import os
import subprocess
import sys

from click.testing import CliRunner

from logsink.cli import logsink

from conftest import LINE_RE


def test_cli_help():
    # Just ensure the module is importable and help runs
    proc = subprocess.run([sys.executable, "-m", "logsink.cli", "--help"], capture_output=True, text=True)
    assert proc.returncode == 0
    assert "write" in proc.stdout


def test_write_appends_lines(log_path):
    result = CliRunner().invoke(logsink, ["write", "--file", str(log_path), "--quiet", "hello", "a\nb"])
    assert result.exit_code == 0, result.output
    assert result.output == ""
    lines = log_path.read_text(encoding="utf-8").splitlines()
    assert [LINE_RE.match(line).group(2) for line in lines] == ["hello", "a", "b"]


def test_write_echoes_to_console_unless_quiet(log_path):
    result = CliRunner().invoke(logsink, ["write", "--file", str(log_path), "hello"])
    assert result.exit_code == 0
    assert "hello" in result.output


def test_write_reads_stdin(log_path):
    result = CliRunner().invoke(logsink, ["write", "--file", str(log_path), "--quiet"], input="one\ntwo\n")
    assert result.exit_code == 0
    assert len(log_path.read_text(encoding="utf-8").splitlines()) == 2


def test_write_uses_env_defaults(log_path):
    env = {"LOGSINK_FILE": str(log_path), "LOGSINK_QUIET": "yes"}
    result = CliRunner().invoke(logsink, ["write", "from env"], env=env)
    assert result.exit_code == 0
    assert result.output == ""
    assert log_path.read_text(encoding="utf-8").endswith(" from env\n")


def test_write_fails_for_directory(tmp_path):
    result = CliRunner().invoke(logsink, ["write", "--file", str(tmp_path), "hello"])
    assert result.exit_code == 1
    assert f"Failed to open log file {tmp_path}" in result.output


def test_write_fails_when_descriptor_write_fails(log_path, monkeypatch):
    def failing_write(fd, data):
        raise OSError(errno.ENOSPC, "No space left on device")

    monkeypatch.setattr(os, "write", failing_write)
    result = CliRunner().invoke(logsink, ["write", "--file", str(log_path), "--quiet", "hello"])
    assert result.exit_code == 1
    assert f"failed writing to log file {log_path}" in result.output
    assert "No space left on device" in result.output
