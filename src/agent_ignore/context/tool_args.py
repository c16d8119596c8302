"""Tool argument mapping.

Maps the native agent tools to the argument that carries their target path,
and to the kind of path it is (file or directory). Tools not listed here are
not path-sensitive and are never checked.

    read, write, edit  -> arguments["filePath"], FILE      (absent: skip)
    glob, grep, list   -> arguments["path"],     DIRECTORY (absent: ".")

Search and list tools default to "." rather than being skipped: unscoped, they
operate over the whole project, so the call still goes through the root
short-circuit instead of bypassing the check.
"""

from __future__ import annotations

__all__ = [
    "extract_path",
    "is_path_sensitive",
]

from collections.abc import Mapping
from typing import Any

from agent_ignore.constants import (
    DIRECTORY_PATH_ARGUMENT,
    DIRECTORY_TOOLS,
    FILE_PATH_ARGUMENT,
    FILE_TOOLS,
    ROOT_PATH,
)
from agent_ignore.context.paths import PathInfo, PathKind


def is_path_sensitive(tool_name: str) -> bool:
    """True if the tool's arguments are checked against the ignore rules."""
    return tool_name in FILE_TOOLS or tool_name in DIRECTORY_TOOLS


def extract_path(tool_name: str, arguments: Mapping[str, Any] | None) -> PathInfo | None:
    """Extract the path to authorize from a tool invocation.

    Empty values count as absent. Non-string values are converted with str().
    The arguments mapping is only read, never modified.

    Args:
        tool_name: Name of the tool being invoked.
        arguments: Tool arguments (may be None).

    Returns:
        PathInfo with the original path and its kind, or None if the tool is
        not path-sensitive or a file tool was called without a path.
    """
    args: Mapping[str, Any] = arguments or {}

    if tool_name in FILE_TOOLS:
        value = args.get(FILE_PATH_ARGUMENT)
        if not value:
            return None
        return PathInfo(path=str(value), kind=PathKind.FILE)

    if tool_name in DIRECTORY_TOOLS:
        value = args.get(DIRECTORY_PATH_ARGUMENT)
        return PathInfo(path=str(value) if value else ROOT_PATH, kind=PathKind.DIRECTORY)

    return None
