"""Decision values and verdicts for ignore-rule authorization.

A Verdict is the engine's answer for one candidate path. A Decision is what
the enforcement layer did with a tool call, and is what gets logged.
"""

from __future__ import annotations

__all__ = [
    "Decision",
    "Verdict",
]

from dataclasses import dataclass
from enum import Enum

from agent_ignore.context.paths import PathKind


class Decision(str, Enum):
    """Outcome of a pre-execution check.

    Inherits from str for easy serialization and comparison.

    Attributes:
        ALLOW: Tool call proceeds.
        DENY: Tool call is rejected with the access-denied message.
        SKIP: Tool is not path-sensitive or carried no path, nothing checked.
        ERROR: The check itself failed (bad path, broken ignore file).
    """

    ALLOW = "allow"
    DENY = "deny"
    SKIP = "skip"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Verdict:
    """Result of authorizing one candidate path.

    Attributes:
        path: Path as supplied by the caller.
        canonical_path: Normalized root-relative form, or None when no rule
            set exists and normalization was not needed.
        kind: FILE or DIRECTORY.
        blocked: True if the ignore rules exclude the path.
    """

    path: str
    canonical_path: str | None
    kind: PathKind
    blocked: bool

    @property
    def decision(self) -> Decision:
        """ALLOW or DENY for this verdict."""
        return Decision.DENY if self.blocked else Decision.ALLOW
