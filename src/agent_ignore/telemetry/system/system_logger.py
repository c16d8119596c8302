"""System logger for operational events.

Singleton logger for everything that is not a decision record: rule
(re)compilation, dropped un-normalizable entries, configuration problems.

Logging strategy:
- Console (stderr): WARNING and above by default, adjustable via set_console_level()
- File (system.jsonl): WARNING and above, added via configure_system_logger_file()
  once a log_dir is known

Hook processes speak JSON on stdout, so the console handler writes to stderr only.
"""

from __future__ import annotations

__all__ = [
    "ConsoleFormatter",
    "close_system_logger_file",
    "configure_system_logger_file",
    "get_system_logger",
    "set_console_level",
]

import logging
import os
import sys
from pathlib import Path
from typing import TextIO

from agent_ignore.constants import APP_NAME
from agent_ignore.utils.logging.logger_setup import jsonl_file_handler


class _StderrHandler(logging.StreamHandler):
    """StreamHandler writing to the current sys.stderr, looked up per record."""

    def __init__(self) -> None:
        logging.Handler.__init__(self)

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr


class ConsoleFormatter(logging.Formatter):
    """Human-readable formatter for console output.

    Extracts 'message' or 'event' field from dict messages for cleaner stderr output.
    """

    def format(self, record: logging.LogRecord) -> str:
        """Format log record for human-readable console output.

        Args:
            record: The log record to format.

        Returns:
            str: Formatted log message with level prefix.
        """
        if isinstance(record.msg, dict):
            msg = record.msg.get("message") or record.msg.get("event", "")
            return f"{record.levelname}: {msg}"
        return f"{record.levelname}: {record.getMessage()}"


# Module-level singleton logger
_system_logger: logging.Logger | None = None
_console_handler: logging.Handler | None = None
_file_handler: logging.FileHandler | None = None


def get_system_logger() -> logging.Logger:
    """Get the singleton system logger instance.

    Creates the logger on first call with a stderr handler only.

    Returns:
        logging.Logger: Configured system logger instance.

    Example:
        >>> logger = get_system_logger()
        >>> logger.warning({"event": "redaction_entry_invalid", "message": "..."})
    """
    global _system_logger, _console_handler

    if _system_logger is not None:
        return _system_logger

    _system_logger = logging.getLogger(f"{APP_NAME}.system")
    _system_logger.setLevel(logging.DEBUG)
    _system_logger.propagate = False

    for handler in _system_logger.handlers:
        handler.close()
    _system_logger.handlers.clear()

    _console_handler = _StderrHandler()
    _console_handler.setLevel(logging.WARNING)
    _console_handler.setFormatter(ConsoleFormatter())
    _system_logger.addHandler(_console_handler)

    return _system_logger


def set_console_level(level: int | str) -> None:
    """Change the minimum level printed to stderr.

    Args:
        level: Logging level (e.g., logging.INFO or "INFO").
    """
    get_system_logger()
    assert _console_handler is not None
    _console_handler.setLevel(level)


def configure_system_logger_file(log_path: Path, level: int = logging.WARNING) -> None:
    """Add (or replace) the system logger's JSONL file handler.

    Args:
        log_path: Path to the system log file (<log_dir>/system.jsonl).
        level: Minimum level written to the file (default: WARNING).

    Raises:
        PermissionError: If unable to create the log directory.
        OSError: If the log file cannot be opened.
    """
    global _file_handler

    logger = get_system_logger()

    if _file_handler is not None and _file_handler.baseFilename == os.path.abspath(log_path):
        _file_handler.setLevel(level)
        return

    handler = jsonl_file_handler(log_path, level)
    close_system_logger_file()
    _file_handler = handler
    logger.addHandler(handler)


def close_system_logger_file() -> None:
    """Remove and close the system logger's file handler, if any."""
    global _file_handler

    if _file_handler is None:
        return
    get_system_logger().removeHandler(_file_handler)
    _file_handler.close()
    _file_handler = None
