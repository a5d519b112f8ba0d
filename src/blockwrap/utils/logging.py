"""Structured logging setup for Blockwrap.

Modules log through `structlog.get_logger()` with snake_case event names and
keyword context; this module only decides where those events go.
"""

import os
from pathlib import Path
from typing import Optional

import structlog

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def log_file_path() -> Path:
    """Location of the JSON log file (~/.cache/blockwrap/logs/blockwrap.log)."""
    return Path.home() / ".cache" / "blockwrap" / "logs" / "blockwrap.log"


def resolve_level(level: Optional[str] = None) -> str:
    """
    Pick the log level: explicit argument, then BLOCKWRAP_LOG_LEVEL, then INFO.

    Unknown level names fall back to INFO.
    """
    name = (level or os.environ.get("BLOCKWRAP_LOG_LEVEL") or "INFO").upper()
    return name if name in LOG_LEVELS else "INFO"


def configure_logging(level: Optional[str] = None) -> Path:
    """
    Send JSON log lines to the log file.

    Levels used across Blockwrap:
    - DEBUG: partition passes, splice offsets, debounce scheduling
    - INFO: user actions, edit commits, reconfiguration
    - WARNING: clipboard failures, rejected capacity input
    - ERROR: unreadable sources and configuration files

    Example:
        BLOCKWRAP_LOG_LEVEL=DEBUG blockwrap tui notes.txt
        tail -f ~/.cache/blockwrap/logs/blockwrap.log | jq .

    Args:
        level: Level name overriding BLOCKWRAP_LOG_LEVEL

    Returns:
        Path of the log file
    """
    log_file = log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(level)),
        context_class=dict,
        logger_factory=structlog.WriteLoggerFactory(file=log_file.open("a")),
        cache_logger_on_first_use=True,
    )
    return log_file
