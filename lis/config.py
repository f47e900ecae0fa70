from __future__ import annotations
import logging
import os


DEFAULT_PROMPT = "lis> "
DEFAULT_LOG_LEVEL = "WARNING"


def get_prompt() -> str:
    return os.environ.get("LIS_PROMPT", DEFAULT_PROMPT)


def get_log_level() -> int:
    """Logging level from LIS_LOG_LEVEL; unknown names fall back to the default."""
    name = os.environ.get("LIS_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        level = logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level
