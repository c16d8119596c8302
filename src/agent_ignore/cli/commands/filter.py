"""Filter command for agent-ignore CLI.

Reads paths from a file or stdin, one per line, and writes back the ones the
ignore file allows. Useful in shell pipelines:

    git ls-files | agent-ignore filter
"""

from __future__ import annotations

__all__ = ["filter_paths"]

import sys
from typing import TextIO

import click

from agent_ignore.constants import EXIT_ERROR, GLOB_TOOL
from agent_ignore.exceptions import AgentIgnoreError

from ..options import build_enforcer, root_option
from ..styling import style_error


@click.command("filter")
@click.argument("source", type=click.File("r"), default="-")
@root_option
def filter_paths(source: TextIO, root: str | None) -> None:
    """Print the paths from SOURCE (default: stdin) that are not blocked.

    Paths are judged as files. Paths that cannot be normalized (e.g. outside
    the project root) are dropped.

    Exit codes:
        0: Success
        2: Malformed or unreadable ignore file
    """
    paths = [line.rstrip("\r\n") for line in source]
    paths = [path for path in paths if path]

    try:
        kept = build_enforcer(root).after_tool(GLOB_TOOL, paths)
    except AgentIgnoreError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(EXIT_ERROR)

    for path in kept:
        click.echo(path)
