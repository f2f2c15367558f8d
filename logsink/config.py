"""
Purpose: Environment-driven defaults for the logsink CLI.
Description: Loads `.env` if present and exposes the default log file and quiet flag.
Key Functions/Classes: `get_default_log_file`, `get_default_quiet`.
"""

from __future__ import annotations

import os
from typing import Optional

from dotenv import load_dotenv


# AIDEV-NOTE: Load env from .env if present to ease local dev.
load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def get_default_log_file() -> Optional[str]:
    return os.getenv("LOGSINK_FILE") or None


def get_default_quiet() -> bool:
    return os.getenv("LOGSINK_QUIET", "").strip().lower() in _TRUTHY
