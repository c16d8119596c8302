"""Check command for agent-ignore CLI.

Reports whether a single path is blocked by the ignore file.
"""

from __future__ import annotations

__all__ = ["check"]

import sys

import click

from agent_ignore.constants import EXIT_ALLOWED, EXIT_BLOCKED, EXIT_ERROR
from agent_ignore.context.paths import PathKind
from agent_ignore.exceptions import AgentIgnoreError

from ..options import build_enforcer, root_option
from ..styling import style_dim, style_error, style_verdict


@click.command("check")
@click.argument("path")
@click.option("--directory", "-d", "is_directory", is_flag=True, help="Check PATH as a directory")
@root_option
def check(path: str, is_directory: bool, root: str | None) -> None:
    """Check whether PATH is blocked by the ignore file.

    PATH may be absolute or relative to the project root.

    Exit codes:
        0: Allowed
        1: Blocked
        2: Error (invalid path, malformed or unreadable ignore file)
    """
    kind = PathKind.DIRECTORY if is_directory else PathKind.FILE

    try:
        engine = build_enforcer(root).engine
        verdict = engine.check(path, kind)
    except AgentIgnoreError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(EXIT_ERROR)

    shown = verdict.canonical_path or style_dim("(no ignore file)")
    click.echo(f"{style_verdict(verdict.blocked)}  {shown}")
    sys.exit(EXIT_BLOCKED if verdict.blocked else EXIT_ALLOWED)
