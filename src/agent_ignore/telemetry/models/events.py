"""Pydantic models for decision log events (decisions.jsonl).

The 'time' field is Optional[str] = None in every model: instances are
created without timestamps and ISO8601Formatter adds the timestamp during
serialization, so every logged event has a 'time' field in ISO 8601 format
(e.g., "2026-03-04T10:30:45.123Z").
"""

from __future__ import annotations

__all__ = [
    "DecisionEvent",
    "RedactionEvent",
]

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class DecisionEvent(BaseModel):
    """One pre-execution check of a tool call.

    Logged for every tool call the enforcer sees, including skipped ones.
    """

    time: Optional[str] = None
    event: Literal["tool_check"] = "tool_check"

    tool_name: str
    decision: Literal["allow", "deny", "skip", "error"]

    # Path as the tool supplied it, and its normalized form (None when skipped
    # or when normalization failed)
    path: Optional[str] = None
    canonical_path: Optional[str] = None
    kind: Optional[Literal["file", "directory"]] = None

    # Why: "matched", "not_matched", "no_ignore_file", "project_root",
    # "not_path_sensitive", "no_path", or an error type
    reason: str
    duration_ms: float = Field(ge=0.0)

    model_config = ConfigDict(extra="forbid")


class RedactionEvent(BaseModel):
    """Summary of one result redaction.

    Contains counts only. Dropped paths are never written to the log, since
    the log would otherwise disclose the names the redaction hides.
    """

    time: Optional[str] = None
    event: Literal["result_redaction"] = "result_redaction"

    tool_name: str
    shape: Literal["glob", "grep", "opaque"]

    total: int = Field(ge=0)
    kept: int = Field(ge=0)
    dropped: int = Field(ge=0)
    # Subset of dropped: entries whose path could not be normalized
    invalid: int = Field(ge=0)

    duration_ms: float = Field(ge=0.0)

    model_config = ConfigDict(extra="forbid")
