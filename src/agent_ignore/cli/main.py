"""Main CLI entry point for agent-ignore.

Defines the CLI group and registers all subcommands.

Commands:
    check     - Check whether a path is blocked
    filter    - Filter paths from stdin
    hook      - Run as a tool hook (before, after)
    validate  - Validate the ignore file

Subcommand help:
    agent-ignore COMMAND -h         Show help for a specific command
"""

from __future__ import annotations

__all__ = ["cli", "main"]

import sys

import click

from agent_ignore import __version__

from .commands.check import check
from .commands.filter import filter_paths
from .commands.hook import hook
from .commands.validate import validate


class ReorderedGroup(click.Group):
    """Custom group that shows commands before custom help text."""

    def format_epilog(self, ctx: click.Context, formatter: click.HelpFormatter) -> None:
        """Add extra help after commands section."""
        formatter.write(
            """
Examples:
  agent-ignore validate --show             List the effective patterns
  agent-ignore check secrets.json          Exit 1 if blocked
  agent-ignore check -d build              Check a directory
  git ls-files | agent-ignore filter       Drop blocked paths

Hook mode (JSON on stdin):
  echo '{"tool": "read", "args": {"filePath": ".env"}}' | agent-ignore hook before

Decision logging:
  AGENT_IGNORE_LOG_DIR=/path/to/logs       Write decisions.jsonl and system.jsonl
"""
        )


@click.group(
    cls=ReorderedGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.option("--version", "-v", is_flag=True, help="Show version")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """agent-ignore: ignore-file access control for agent filesystem tools."""
    if version:
        click.echo(f"agent-ignore {__version__}")
        sys.exit(0)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Register commands
cli.add_command(check)
cli.add_command(filter_paths)
cli.add_command(hook)
cli.add_command(validate)


def main() -> None:
    """CLI entry point."""
    cli()
