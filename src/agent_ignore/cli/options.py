"""Shared CLI options and enforcer construction."""

from __future__ import annotations

__all__ = [
    "build_enforcer",
    "root_option",
]

import os
from collections.abc import Callable
from typing import Any, TypeVar

import click

from agent_ignore.constants import LOG_DIR_ENV_VAR
from agent_ignore.pep.hooks import IgnoreEnforcer, create_enforcer

F = TypeVar("F", bound=Callable[..., Any])


def root_option(func: F) -> F:
    """Add the --root/-r option (project root, default: current directory)."""
    return click.option(
        "--root",
        "-r",
        type=click.Path(exists=True, file_okay=False),
        default=None,
        help="Project root holding the .ignore file (default: current directory)",
    )(func)


def build_enforcer(
    root: str | None,
    *,
    directory: str | None = None,
    worktree: str | None = None,
) -> IgnoreEnforcer:
    """Create an enforcer for a CLI invocation.

    An explicit --root wins over host-supplied roots; with neither, the
    current directory is the project root. Decision logging is enabled by
    setting AGENT_IGNORE_LOG_DIR. Each CLI process checks once, so rules are
    not cached.

    Raises:
        ConfigurationError: If the resolved root is not a directory.
    """
    if root is not None:
        directory, worktree = root, None
    elif not (directory or worktree):
        directory = os.getcwd()

    return create_enforcer(
        directory=directory,
        worktree=worktree,
        cache_rules=False,
        log_dir=os.environ.get(LOG_DIR_ENV_VAR) or None,
    )
