"""
Purpose: Line formatting for file output.
Description: Turns a log message into timestamped lines, one per newline-delimited
            segment. Every segment of a single message shares one timestamp so that
            multi-line messages stay visually grouped in the file.
Key Functions: timestamp, render_message, format_lines, format_buffer
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Iterable, List, Optional


def timestamp(now: Optional[datetime] = None) -> str:
    """Return a fixed-width UTC timestamp such as `2024-01-31T09:15:02.041Z`."""
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def render_message(message: Any, params: Iterable[Any] = ()) -> str:
    """Render a message and its params as the text written to file."""
    parts = [str(message)]
    parts.extend(str(p) for p in params)
    return " ".join(parts)


def format_lines(message: Any, now: Optional[datetime] = None) -> List[str]:
    """
    Split a message on newlines and prefix every segment with the same timestamp.

    `"a\\nb"` yields two lines, `"a\\n"` yields `"a"` and an empty segment; each
    returned line ends with a newline.
    """
    prefix = timestamp(now)
    return [f"{prefix} {segment}\n" for segment in str(message).split("\n")]


def format_buffer(message: Any, now: Optional[datetime] = None) -> bytes:
    return "".join(format_lines(message, now)).encode("utf-8")
