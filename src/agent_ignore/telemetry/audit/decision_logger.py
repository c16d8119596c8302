"""Decision logging for ignore-rule enforcement.

Writes one DecisionEvent per pre-execution check and one RedactionEvent per
redacted result to <log_dir>/decisions.jsonl.

Decision logging is opt-in: without a log_dir the enforcer gets a disabled
DecisionEventLogger and nothing is written. A failure to write a decision
record is reported to the system logger and never changes the decision.
"""

from __future__ import annotations

__all__ = [
    "DecisionEventLogger",
    "create_decision_logger",
]

import logging
from pathlib import Path

from pydantic import BaseModel

from agent_ignore.constants import APP_NAME, DECISION_LOG_FILENAME
from agent_ignore.pdp.decision import Decision
from agent_ignore.telemetry.models.events import DecisionEvent, RedactionEvent
from agent_ignore.utils.logging.logger_setup import serialize_event, setup_jsonl_logger


def create_decision_logger(log_dir: Path) -> logging.Logger:
    """Create the JSONL logger for decision events.

    Args:
        log_dir: Directory receiving decisions.jsonl.

    Returns:
        Configured logger instance.

    Raises:
        PermissionError: If unable to create the log directory.
        OSError: If the log file cannot be opened.
    """
    return setup_jsonl_logger(
        f"{APP_NAME}.decisions",
        log_dir / DECISION_LOG_FILENAME,
        log_level=logging.INFO,
    )


class DecisionEventLogger:
    """Logs tool checks and redactions to decisions.jsonl.

    Pass logger=None for a disabled logger (no log_dir configured).
    """

    def __init__(
        self,
        *,
        logger: logging.Logger | None,
        system_logger: logging.Logger,
    ) -> None:
        """Initialize decision event logger.

        Args:
            logger: Logger for decision events, or None to disable.
            system_logger: System logger for reporting write failures.
        """
        self._logger = logger
        self._system_logger = system_logger

    @property
    def enabled(self) -> bool:
        """True if events are written."""
        return self._logger is not None

    def log_decision(
        self,
        *,
        tool_name: str,
        decision: Decision,
        reason: str,
        duration_ms: float,
        path: str | None = None,
        canonical_path: str | None = None,
        kind: str | None = None,
    ) -> None:
        """Log a pre-execution check.

        Args:
            tool_name: Name of the checked tool.
            decision: ALLOW, DENY, SKIP or ERROR.
            reason: Short machine-readable reason (e.g., "matched").
            duration_ms: Time spent in the check.
            path: Path as supplied by the tool.
            canonical_path: Normalized path, if normalization succeeded.
            kind: "file" or "directory".
        """
        if self._logger is None:
            return

        event = DecisionEvent(
            tool_name=tool_name,
            decision=decision.value,
            reason=reason,
            duration_ms=round(max(duration_ms, 0.0), 3),
            path=path,
            canonical_path=canonical_path,
            kind=kind,
        )
        self._emit(event)

    def log_redaction(
        self,
        *,
        tool_name: str,
        shape: str,
        total: int,
        kept: int,
        invalid: int,
        duration_ms: float,
    ) -> None:
        """Log a result redaction summary (counts only).

        Args:
            tool_name: Name of the tool whose result was filtered.
            shape: "glob", "grep" or "opaque".
            total: Entries in the original result.
            kept: Entries in the filtered result.
            invalid: Entries dropped because their path could not be normalized.
            duration_ms: Time spent filtering.
        """
        if self._logger is None:
            return

        event = RedactionEvent(
            tool_name=tool_name,
            shape=shape,
            total=total,
            kept=kept,
            dropped=total - kept,
            invalid=invalid,
            duration_ms=round(max(duration_ms, 0.0), 3),
        )
        self._emit(event)

    def _emit(self, event: BaseModel) -> None:
        assert self._logger is not None
        try:
            self._logger.info(serialize_event(event))
        except OSError as e:
            self._system_logger.error(
                {
                    "event": "decision_log_write_failed",
                    "message": f"Failed to write decision log: {e}",
                    "error_type": type(e).__name__,
                }
            )
