"""Hook command group for agent-ignore CLI.

Runs the enforcement hooks as a subprocess for hosts that call external
commands around tool use. The invocation arrives as JSON on stdin:

    hook before   {"tool": "read", "args": {"filePath": "secrets.json"},
                   "worktree": "/repo", "directory": "/repo/src"}
    hook after    {"tool": "glob", "result": ["a.py", "secrets.json"]}

and the response is JSON on stdout:

    before  {"decision": "allow"} | {"decision": "deny", "message": "..."}
    after   {"result": [...]}

A denied or failed "before" check exits with status 2 and writes the message
to stderr, which blocks the tool call in hosts following that convention.
"""

from __future__ import annotations

__all__ = ["hook"]

import json
import sys
from typing import Any, NoReturn

import click

from agent_ignore.constants import EXIT_ERROR
from agent_ignore.exceptions import AccessDeniedError, AgentIgnoreError

from ..options import build_enforcer, root_option


def _fail(decision: str, message: str) -> NoReturn:
    click.echo(json.dumps({"decision": decision, "message": message}))
    click.echo(message, err=True)
    sys.exit(EXIT_ERROR)


def _read_payload() -> dict[str, Any]:
    raw = sys.stdin.read()
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        _fail("error", f"Invalid hook input: {e}")

    if not isinstance(payload, dict) or not isinstance(payload.get("tool"), str):
        _fail("error", 'Invalid hook input: expected an object with a "tool" string')
    return payload


def _optional_str(payload: dict[str, Any], key: str) -> str | None:
    value = payload.get(key)
    return value if isinstance(value, str) and value else None


@click.group()
def hook() -> None:
    """Run as a tool hook (JSON on stdin, JSON on stdout)."""
    pass


@hook.command("before")
@root_option
def hook_before(root: str | None) -> None:
    """Check a tool call before it runs.

    Exit codes:
        0: Allowed (or not path-sensitive)
        2: Denied, or the check failed
    """
    payload = _read_payload()
    args = payload.get("args")
    if args is not None and not isinstance(args, dict):
        _fail("error", 'Invalid hook input: "args" must be an object')

    try:
        enforcer = build_enforcer(
            root,
            directory=_optional_str(payload, "directory"),
            worktree=_optional_str(payload, "worktree"),
        )
        enforcer.before_tool(payload["tool"], args)
    except AccessDeniedError as e:
        _fail("deny", e.message)
    except AgentIgnoreError as e:
        _fail("error", str(e))

    click.echo(json.dumps({"decision": "allow"}))


@hook.command("after")
@root_option
def hook_after(root: str | None) -> None:
    """Redact a tool result after it ran.

    Exit codes:
        0: Result written (possibly filtered)
        2: The ignore file could not be loaded
    """
    payload = _read_payload()

    try:
        enforcer = build_enforcer(
            root,
            directory=_optional_str(payload, "directory"),
            worktree=_optional_str(payload, "worktree"),
        )
        result = enforcer.after_tool(payload["tool"], payload.get("result"))
    except AgentIgnoreError as e:
        _fail("error", str(e))

    click.echo(json.dumps({"result": result}))
