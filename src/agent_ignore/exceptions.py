"""Custom exceptions for agent-ignore.

This module contains all custom exceptions used throughout the package.
Exceptions are organized into three categories:

Denials (deterministic, never retried with the same arguments):
    - AccessDeniedError: Path matched a blocking rule, agent gets the fixed message

Policy faults (hard failures, never degraded to allow-all):
    - PolicyError: Base for ignore-file failures
    - MalformedPatternError: A line of the ignore file cannot be compiled
    - RuleLoadError: The ignore file exists but cannot be read

Input faults:
    - InvalidPathError: A path cannot be normalized into matcher input
    - ConfigurationError: Filter configuration is invalid

"No ignore file" is not an error: the loader returns None and everything is allowed.

Usage:
    from agent_ignore.exceptions import AccessDeniedError, MalformedPatternError
"""

from __future__ import annotations

__all__ = [
    "AccessDeniedError",
    "AgentIgnoreError",
    "ConfigurationError",
    "InvalidPathError",
    "MalformedPatternError",
    "PolicyError",
    "RuleLoadError",
]

from agent_ignore.constants import ACCESS_DENIED_TEMPLATE


class AgentIgnoreError(Exception):
    """Base class for all agent-ignore errors."""


# =============================================================================
# Denials
# =============================================================================


class AccessDeniedError(AgentIgnoreError):
    """Raised when a tool call targets a path blocked by the ignore file.

    The message is the agent-visible contract: it names the path exactly as
    the tool argument supplied it and tells the agent not to retry.

    Attributes:
        path: Path as supplied by the tool argument (pre-normalization).
        tool_name: Name of the denied tool (if known).
        canonical_path: Normalized root-relative path that matched.
    """

    def __init__(
        self,
        path: str,
        *,
        tool_name: str | None = None,
        canonical_path: str | None = None,
    ) -> None:
        """Initialize AccessDeniedError.

        Args:
            path: Original path from the tool arguments.
            tool_name: Name of the tool that was denied.
            canonical_path: Normalized path that the rule set matched.
        """
        self.path = path
        self.tool_name = tool_name
        self.canonical_path = canonical_path
        self.message = ACCESS_DENIED_TEMPLATE.format(path=path)
        super().__init__(self.message)

    def __repr__(self) -> str:
        """Return detailed representation for debugging."""
        parts = [f"AccessDeniedError({self.path!r}"]
        if self.tool_name is not None:
            parts.append(f", tool_name={self.tool_name!r}")
        if self.canonical_path is not None:
            parts.append(f", canonical_path={self.canonical_path!r}")
        parts.append(")")
        return "".join(parts)

    def __str__(self) -> str:
        """Return the agent-visible denial message."""
        return self.message


# =============================================================================
# Policy faults
# =============================================================================


class PolicyError(AgentIgnoreError):
    """Base for failures of the ignore file itself.

    A broken security policy must never silently become "allow all". These
    errors abort the tool invocation instead.

    Attributes:
        source: Path of the ignore file (None for in-memory rules).
        failure_type: Category string for logging.
    """

    failure_type: str = "policy_failure"

    def __init__(self, message: str, *, source: str | None = None) -> None:
        self.source = source
        super().__init__(message)


class MalformedPatternError(PolicyError):
    """A pattern in the ignore file was rejected by the pattern compiler.

    Attributes:
        line_number: 1-based line number of the rejected pattern.
        pattern: The rejected line, verbatim.
    """

    failure_type = "malformed_pattern"

    def __init__(
        self,
        pattern: str,
        *,
        line_number: int,
        source: str | None = None,
        reason: str | None = None,
    ) -> None:
        self.pattern = pattern
        self.line_number = line_number
        location = f"{source}:{line_number}" if source else f"line {line_number}"
        message = f"Malformed ignore pattern at {location}: {pattern!r}"
        if reason:
            message += f" ({reason})"
        super().__init__(message, source=source)


class RuleLoadError(PolicyError):
    """The ignore file exists but could not be read or decoded."""

    failure_type = "rule_load_failure"


# =============================================================================
# Input faults
# =============================================================================


class InvalidPathError(AgentIgnoreError, ValueError):
    """A supplied path cannot be normalized into valid matcher input.

    Pre-execution checks treat this as a hard error; result redaction treats
    the offending entry as blocked and drops it.

    Attributes:
        raw_path: The path as supplied.
        reason: Why the path was rejected.
    """

    def __init__(self, raw_path: str, reason: str) -> None:
        self.raw_path = raw_path
        self.reason = reason
        super().__init__(f"Invalid path format: {raw_path!r} ({reason})")


class ConfigurationError(AgentIgnoreError):
    """Filter configuration is invalid or incomplete.

    Raised when:
    - Config file contains invalid JSON
    - Config file fails Pydantic validation
    - Project root is missing or not a directory
    """
