"""Pydantic models for log events."""

from agent_ignore.telemetry.models.events import DecisionEvent, RedactionEvent

__all__ = [
    "DecisionEvent",
    "RedactionEvent",
]
