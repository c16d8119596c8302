"""Decision logging for tool checks and result redaction."""

from agent_ignore.telemetry.audit.decision_logger import (
    DecisionEventLogger,
    create_decision_logger,
)

__all__ = [
    "DecisionEventLogger",
    "create_decision_logger",
]
