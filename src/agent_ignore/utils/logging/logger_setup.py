"""JSONL logger factories shared by the decision log and the system log.

Both logs are plain stdlib loggers with a FileHandler formatted by
ISO8601Formatter. Event models are dumped to dicts with serialize_event()
before logging; the formatter adds the timestamp.
"""

from __future__ import annotations

__all__ = [
    "ensure_secure_log_directory",
    "jsonl_file_handler",
    "serialize_event",
    "setup_jsonl_logger",
]

import logging
import sys
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from agent_ignore.utils.logging.iso_formatter import ISO8601Formatter


def ensure_secure_log_directory(log_file: Path) -> None:
    """Create the directory of a log file, readable by its owner only.

    Raises:
        PermissionError: If the directory cannot be created.
        OSError: If directory creation fails for other reasons.
    """
    log_dir = log_file.parent
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        raise PermissionError(f"Cannot create log directory {log_dir}: {e}") from e
    except OSError as e:
        raise OSError(f"Failed to create log directory {log_dir}: {e}") from e

    if sys.platform == "win32":
        return
    try:
        log_dir.chmod(0o700)
    except PermissionError:
        # Shared directory owned by someone else: leave its mode alone
        return


def jsonl_file_handler(log_file: Path, level: int) -> logging.FileHandler:
    """Open an append-mode JSONL handler, creating its directory first.

    Raises:
        PermissionError: If the log directory cannot be created.
        OSError: If the log file cannot be opened.
    """
    ensure_secure_log_directory(log_file)
    handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter())
    return handler


def setup_jsonl_logger(
    logger_name: str,
    log_file: Path,
    log_level: int = logging.INFO,
) -> logging.Logger:
    """Point a named logger at a single JSONL file.

    Calling it again for the same name replaces (and closes) the previous
    file handler, so a logger never writes a record twice.

    Args:
        logger_name: Logger name (e.g., "agent-ignore.decisions").
        log_file: JSONL file receiving the records.
        log_level: Minimum level written (default: INFO).

    Returns:
        The configured logger, detached from the root logger.

    Raises:
        PermissionError: If the log directory cannot be created.
        OSError: If the log file cannot be opened.
    """
    handler = jsonl_file_handler(log_file, log_level)

    logger = logging.getLogger(logger_name)
    logger.setLevel(log_level)
    logger.propagate = False

    for previous in list(logger.handlers):
        logger.removeHandler(previous)
        previous.close()
    logger.addHandler(handler)

    return logger


def serialize_event(event: BaseModel) -> dict[str, Any]:
    """Dump an event model for logging, without 'time' and unset fields."""
    return event.model_dump(mode="json", exclude={"time"}, exclude_none=True)
