"""Validate command for agent-ignore CLI."""

from __future__ import annotations

__all__ = ["validate"]

import os
import sys

import click

from agent_ignore.exceptions import PolicyError
from agent_ignore.pdp.rules import get_ignore_path, load_rules

from ..options import root_option
from ..styling import style_dim, style_error, style_label, style_success


@click.command("validate")
@click.option("--show", "-s", is_flag=True, help="List the effective patterns")
@root_option
def validate(show: bool, root: str | None) -> None:
    """Validate the project's ignore file.

    Compiles every pattern; a missing ignore file is valid (nothing blocked).

    Exit codes:
        0: Ignore file is valid or absent
        1: Ignore file is malformed or unreadable
    """
    project_root = os.path.abspath(root or os.getcwd())
    ignore_path = get_ignore_path(project_root)

    try:
        rules = load_rules(project_root)
    except PolicyError as e:
        click.echo(style_error(str(e)), err=True)
        sys.exit(1)

    if rules is None:
        click.echo(style_dim(f"No ignore file at {ignore_path}, nothing is blocked."))
        return

    count = rules.rule_count
    click.echo(style_success(f"Ignore file valid: {ignore_path}"))
    click.echo(f"  {count} pattern{'s' if count != 1 else ''} defined")

    if show and count:
        click.echo(style_label("Patterns"))
        for pattern in rules.patterns:
            click.echo(f"  {pattern}")
