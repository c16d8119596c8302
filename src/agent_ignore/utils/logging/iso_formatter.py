"""JSONL log formatting with ISO 8601 timestamps."""

from __future__ import annotations

__all__ = ["ISO8601Formatter", "iso_timestamp"]

import json
import logging
from datetime import datetime, timezone


def iso_timestamp(created: float) -> str:
    """UTC timestamp with millisecond precision, e.g. 2026-03-04T10:48:37.123Z."""
    moment = datetime.fromtimestamp(created, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ISO8601Formatter(logging.Formatter):
    """One JSON object per record: time, level, then the message fields.

    Dict messages contribute their keys directly; any other message is
    written under "message". A message cannot override "time" or "level".
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, object] = {
            "time": iso_timestamp(record.created),
            "level": record.levelname,
        }

        fields = record.msg if isinstance(record.msg, dict) else {"message": record.getMessage()}
        for key, value in fields.items():
            entry.setdefault(key, value)

        return json.dumps(entry, default=str)
