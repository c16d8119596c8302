"""Enforcement hooks around agent tool calls.

IgnoreEnforcer is what a host agent wires into its tool pipeline:

    before_tool(tool_name, arguments)  runs first; raises AccessDeniedError to
                                       stop the call, returns None to let it run
    after_tool(tool_name, result)      runs on the output; returns the result
                                       with blocked entries removed

Pre-execution flow:
1. Map tool + arguments to a candidate path → none: skip
2. Candidate is the project root → allow
3. Engine verdict → blocked: deny (raise) | otherwise: allow

Every error in the pre-execution check propagates. A call whose path cannot
be judged never runs.

Async hosts use abefore_tool / aafter_tool, which run the checks in a worker
thread (the ignore file is read from disk).
"""

from __future__ import annotations

__all__ = [
    "IgnoreEnforcer",
    "create_enforcer",
]

import asyncio
import logging
import time
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from agent_ignore.config import FilterConfig
from agent_ignore.constants import ROOT_PATH, SYSTEM_LOG_FILENAME
from agent_ignore.context.tool_args import extract_path, is_path_sensitive
from agent_ignore.exceptions import AccessDeniedError, InvalidPathError, PolicyError
from agent_ignore.pdp.cache import RuleCache
from agent_ignore.pdp.decision import Decision, Verdict
from agent_ignore.pdp.engine import AuthorizationEngine
from agent_ignore.pep.redactor import ResultRedactor
from agent_ignore.telemetry.audit.decision_logger import (
    DecisionEventLogger,
    create_decision_logger,
)
from agent_ignore.telemetry.system.system_logger import (
    configure_system_logger_file,
    get_system_logger,
    set_console_level,
)


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000


def _verdict_reason(verdict: Verdict) -> str:
    if verdict.canonical_path is None:
        return "no_ignore_file"
    if verdict.canonical_path == ROOT_PATH:
        return "project_root"
    return "matched" if verdict.blocked else "not_matched"


class IgnoreEnforcer:
    """Pre- and post-execution enforcement of a project's ignore file.

    Both hooks share one AuthorizationEngine, so the check before a call and
    the redaction after it judge paths identically.
    """

    def __init__(
        self,
        engine: AuthorizationEngine,
        decision_logger: DecisionEventLogger | None = None,
        system_logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the enforcer.

        Args:
            engine: Authorization engine for the project.
            decision_logger: Decision log (default: disabled).
            system_logger: System logger (default: singleton system logger).
        """
        self._engine = engine
        self._system_logger = system_logger or get_system_logger()
        self._decision_logger = decision_logger or DecisionEventLogger(
            logger=None, system_logger=self._system_logger
        )
        self._redactor = ResultRedactor(engine, self._decision_logger, self._system_logger)

    @classmethod
    def from_config(cls, config: FilterConfig) -> "IgnoreEnforcer":
        """Build an enforcer (engine, cache and loggers) from configuration.

        Args:
            config: Validated filter configuration.

        Returns:
            Ready-to-use IgnoreEnforcer.

        Raises:
            PermissionError: If the log directory cannot be created.
            OSError: If a log file cannot be opened.
        """
        system_logger = get_system_logger()
        set_console_level(config.log_level)

        decision_logger: logging.Logger | None = None
        if config.log_dir is not None:
            log_dir = Path(config.log_dir)
            configure_system_logger_file(log_dir / SYSTEM_LOG_FILENAME)
            decision_logger = create_decision_logger(log_dir)

        loader = RuleCache(logger=system_logger).load if config.cache_rules else None
        engine = AuthorizationEngine(config.project_root, loader=loader)

        return cls(
            engine,
            DecisionEventLogger(logger=decision_logger, system_logger=system_logger),
            system_logger,
        )

    @property
    def engine(self) -> AuthorizationEngine:
        """The shared authorization engine."""
        return self._engine

    @property
    def project_root(self) -> str:
        """Absolute project root."""
        return self._engine.project_root

    def before_tool(self, tool_name: str, arguments: Mapping[str, Any] | None) -> None:
        """Check a tool call before it runs.

        Args:
            tool_name: Name of the tool about to run.
            arguments: Tool arguments (read only, never modified).

        Raises:
            AccessDeniedError: If the target path is blocked by the ignore file.
            InvalidPathError: If the target path cannot be normalized.
            MalformedPatternError: If the ignore file has an invalid pattern.
            RuleLoadError: If the ignore file cannot be read.
        """
        start = time.perf_counter()

        info = extract_path(tool_name, arguments)
        if info is None:
            self._decision_logger.log_decision(
                tool_name=tool_name,
                decision=Decision.SKIP,
                reason="no_path" if is_path_sensitive(tool_name) else "not_path_sensitive",
                duration_ms=_elapsed_ms(start),
            )
            return

        if info.path == ROOT_PATH:
            self._decision_logger.log_decision(
                tool_name=tool_name,
                decision=Decision.ALLOW,
                reason="project_root",
                duration_ms=_elapsed_ms(start),
                path=info.path,
                canonical_path=ROOT_PATH,
                kind=info.kind.value,
            )
            return

        try:
            verdict = self._engine.check(info.path, info.kind)
        except (InvalidPathError, PolicyError) as e:
            reason = e.failure_type if isinstance(e, PolicyError) else "invalid_path"
            self._decision_logger.log_decision(
                tool_name=tool_name,
                decision=Decision.ERROR,
                reason=reason,
                duration_ms=_elapsed_ms(start),
                path=info.path,
                kind=info.kind.value,
            )
            self._system_logger.error(
                {
                    "event": "tool_check_failed",
                    "message": f"{tool_name}: {e}",
                    "tool_name": tool_name,
                    "error_type": type(e).__name__,
                    "reason": reason,
                }
            )
            raise

        self._decision_logger.log_decision(
            tool_name=tool_name,
            decision=verdict.decision,
            reason=_verdict_reason(verdict),
            duration_ms=_elapsed_ms(start),
            path=verdict.path,
            canonical_path=verdict.canonical_path,
            kind=verdict.kind.value,
        )

        if verdict.blocked:
            self._system_logger.info(
                {
                    "event": "tool_denied",
                    "message": f"Denied {tool_name} on {verdict.canonical_path}",
                    "tool_name": tool_name,
                    "canonical_path": verdict.canonical_path,
                }
            )
            raise AccessDeniedError(
                info.path,
                tool_name=tool_name,
                canonical_path=verdict.canonical_path,
            )

    def after_tool(self, tool_name: str, result: Any) -> Any:
        """Filter a tool result after it ran.

        Args:
            tool_name: Name of the tool that ran.
            result: The tool's raw output (never modified).

        Returns:
            The result without entries belonging to blocked paths.

        Raises:
            MalformedPatternError: If the ignore file has an invalid pattern.
            RuleLoadError: If the ignore file cannot be read.
        """
        return self._redactor.redact(tool_name, result)

    async def abefore_tool(self, tool_name: str, arguments: Mapping[str, Any] | None) -> None:
        """Async form of before_tool (runs in a worker thread)."""
        await asyncio.to_thread(self.before_tool, tool_name, arguments)

    async def aafter_tool(self, tool_name: str, result: Any) -> Any:
        """Async form of after_tool (runs in a worker thread)."""
        return await asyncio.to_thread(self.after_tool, tool_name, result)

    def __repr__(self) -> str:
        return f"IgnoreEnforcer(project_root={self.project_root!r})"


def create_enforcer(
    directory: str | None = None,
    worktree: str | None = None,
    **settings: Any,
) -> IgnoreEnforcer:
    """Create an enforcer for a host agent's context.

    Args:
        directory: Host's working directory.
        worktree: Host's worktree root (preferred over directory).
        **settings: Other FilterConfig fields (cache_rules, log_dir, log_level).

    Returns:
        IgnoreEnforcer bound to the resolved project root.

    Raises:
        ConfigurationError: If no usable project root is given.
    """
    config = FilterConfig.from_host_context(directory=directory, worktree=worktree, **settings)
    return IgnoreEnforcer.from_config(config)
