"""Result redaction for search tools.

A permitted search (glob or grep over an allowed directory) can still return
entries that live under blocked paths. ResultRedactor removes those entries
after the tool ran, so nothing belonging to a blocked path reaches the agent.

Tool results are classified into a closed set of shapes:

    GlobResult(paths)     glob  -> list or tuple of entries (path strings)
    GrepResult(matches)   grep  -> list or tuple of entries (match mappings)
    OpaqueResult(value)   anything else, passed through untouched

Failure handling is the opposite of the pre-execution check: an entry of the
wrong type (a non-string glob entry, a non-mapping grep entry) or with a path
that cannot be normalized is dropped (fail closed) instead of failing the
whole call. Policy faults still propagate.

Usage:
    from agent_ignore.pep.redactor import ResultRedactor

    redactor = ResultRedactor(engine, decision_logger, system_logger)
    filtered = redactor.redact("glob", ["src/a.py", "secrets.json"])
"""

from __future__ import annotations

__all__ = [
    "GlobResult",
    "GrepResult",
    "OpaqueResult",
    "ResultRedactor",
    "ResultShape",
    "classify_result",
]

import logging
import time
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Union

from agent_ignore.constants import GLOB_TOOL, GREP_TOOL, MATCH_PATH_KEYS
from agent_ignore.context.paths import PathKind
from agent_ignore.exceptions import InvalidPathError
from agent_ignore.pdp.engine import AuthorizationEngine
from agent_ignore.pdp.rules import RuleSet
from agent_ignore.telemetry.audit.decision_logger import DecisionEventLogger


@dataclass(frozen=True, slots=True)
class GlobResult:
    """glob output, in tool order. Entries should be path strings."""

    paths: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class GrepResult:
    """grep output, in tool order. Entries should be match mappings."""

    matches: tuple[Any, ...]


@dataclass(frozen=True, slots=True)
class OpaqueResult:
    """Any result the redactor does not understand. Returned unchanged."""

    value: Any


ResultShape = Union[GlobResult, GrepResult, OpaqueResult]


def classify_result(tool_name: str, result: Any) -> ResultShape:
    """Classify a raw tool result into one of the known shapes.

    Entry types are not checked here: a glob or grep list is always filtered,
    and entries of the wrong type are dropped during filtering.

    Args:
        tool_name: Name of the tool that produced the result.
        result: The tool's raw output.

    Returns:
        GlobResult for a glob list/tuple, GrepResult for a grep list/tuple,
        OpaqueResult otherwise.
    """
    if isinstance(result, (list, tuple)):
        if tool_name == GLOB_TOOL:
            return GlobResult(paths=tuple(result))
        if tool_name == GREP_TOOL:
            return GrepResult(matches=tuple(result))

    return OpaqueResult(value=result)


def _match_paths(match: Mapping[str, Any]) -> list[str]:
    """Collect the path fields of a grep match (empty: match has no path)."""
    return [str(match[key]) for key in MATCH_PATH_KEYS if match.get(key)]


class ResultRedactor:
    """Drops glob/grep entries that belong to blocked paths.

    Never filters in place: a filtered result is always a new list, and the
    tool's original result object is left untouched.
    """

    def __init__(
        self,
        engine: AuthorizationEngine,
        decision_logger: DecisionEventLogger,
        system_logger: logging.Logger,
    ) -> None:
        """Initialize the redactor.

        Args:
            engine: Authorization engine shared with the pre-execution check.
            decision_logger: Logger for redaction summaries (decisions.jsonl).
            system_logger: Logger for dropped invalid entries (system.jsonl).
        """
        self._engine = engine
        self._decision_logger = decision_logger
        self._system_logger = system_logger

    def redact(self, tool_name: str, result: Any) -> Any:
        """Filter a tool result.

        Args:
            tool_name: Name of the tool that produced the result.
            result: The tool's raw output.

        Returns:
            A new list without blocked entries for glob/grep-shaped results;
            the original result unchanged for any other shape, or when the
            project has no ignore file.

        Raises:
            MalformedPatternError: If the ignore file has an invalid pattern.
            RuleLoadError: If the ignore file cannot be read.
        """
        shaped = classify_result(tool_name, result)
        if isinstance(shaped, OpaqueResult):
            return result

        start = time.perf_counter()
        rules = self._engine.load_rules()
        if rules is None:
            return result

        kept: list[Any]
        if isinstance(shaped, GlobResult):
            kept, invalid = self._filter_paths(rules, tool_name, shaped.paths)
            total = len(shaped.paths)
            shape = "glob"
        else:
            kept, invalid = self._filter_matches(rules, tool_name, shaped.matches)
            total = len(shaped.matches)
            shape = "grep"

        self._decision_logger.log_redaction(
            tool_name=tool_name,
            shape=shape,
            total=total,
            kept=len(kept),
            invalid=invalid,
            duration_ms=(time.perf_counter() - start) * 1000,
        )
        return kept

    def _filter_paths(
        self,
        rules: RuleSet,
        tool_name: str,
        paths: Sequence[Any],
    ) -> tuple[list[str], int]:
        kept: list[str] = []
        invalid = 0
        for path in paths:
            if not isinstance(path, str):
                self._log_unrecognized(tool_name, path, expected="path string")
                invalid += 1
                continue
            allowed = self._is_allowed(rules, tool_name, path)
            if allowed is None:
                invalid += 1
            elif allowed:
                kept.append(path)
        return kept, invalid

    def _filter_matches(
        self,
        rules: RuleSet,
        tool_name: str,
        matches: Sequence[Any],
    ) -> tuple[list[Mapping[str, Any]], int]:
        kept: list[Mapping[str, Any]] = []
        invalid = 0
        for match in matches:
            if not isinstance(match, Mapping):
                self._log_unrecognized(tool_name, match, expected="match object")
                invalid += 1
                continue
            # A match may name its file under several keys; every one must pass
            verdicts = [self._is_allowed(rules, tool_name, path) for path in _match_paths(match)]
            if None in verdicts:
                invalid += 1
            elif all(verdicts):
                kept.append(match)
        return kept, invalid

    def _log_unrecognized(self, tool_name: str, entry: Any, *, expected: str) -> None:
        # Entry value is not logged: it may contain a blocked name
        self._system_logger.warning(
            {
                "event": "redaction_entry_unrecognized",
                "message": f"Dropped {tool_name} result entry of type {type(entry).__name__} (expected {expected})",
                "tool_name": tool_name,
                "entry_type": type(entry).__name__,
            }
        )

    def _is_allowed(self, rules: RuleSet, tool_name: str, path: str) -> bool | None:
        """True if allowed, False if blocked, None if the path is invalid (drop)."""
        try:
            return not self._engine.evaluate(rules, path, PathKind.FILE).blocked
        except InvalidPathError as e:
            # Path itself is not logged: it may be a blocked name
            self._system_logger.warning(
                {
                    "event": "redaction_entry_invalid",
                    "message": f"Dropped {tool_name} result entry with invalid path ({e.reason})",
                    "tool_name": tool_name,
                    "reason": e.reason,
                }
            )
            return None
