"""Path normalization for ignore-rule matching.

Tool call sites supply paths in inconsistent shapes: absolute because the
caller resolved them, relative, with a redundant "./" prefix, or with Windows
separators. The rule matcher needs exactly one shape:

- relative to the project root (no leading "/")
- forward slashes only
- no "./" prefix
- trailing "/" for directories, except the root itself (".")

The trailing slash is load-bearing: a pattern "foo" matches both the file and
the directory "foo", while "foo/" matches only the directory.

SECURITY: Symlinks are NOT resolved. The path is judged as the tool supplied
it, which avoids TOCTOU races between the check and the tool's own access.
"""

from __future__ import annotations

__all__ = [
    "PathInfo",
    "PathKind",
    "normalize_path",
]

import os
from dataclasses import dataclass
from enum import Enum

from agent_ignore.constants import ROOT_PATH
from agent_ignore.exceptions import InvalidPathError


class PathKind(str, Enum):
    """Whether a candidate path denotes a file or a directory."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class PathInfo:
    """A path taken from tool arguments, with the kind it is checked as.

    Attributes:
        path: Path exactly as the tool argument supplied it.
        kind: FILE or DIRECTORY.
    """

    path: str
    kind: PathKind

    @property
    def is_directory(self) -> bool:
        """True if the path is checked as a directory."""
        return self.kind is PathKind.DIRECTORY


def normalize_path(raw_path: str, project_root: str, kind: PathKind) -> str:
    """Convert a tool-supplied path into the canonical matcher form.

    Steps, each feeding the next:
    1. Resolve a relative path against the project root.
    2. Make it relative to the project root.
    3. Map the root itself to ".".
    4. Convert backslashes to forward slashes.
    5. Strip a leading "./".
    6. Append "/" for directories (not for ".").
    7. Validate the result.

    Args:
        raw_path: Path to normalize (absolute or relative).
        project_root: Absolute path of the project root.
        kind: Whether the path is checked as a file or a directory.

    Returns:
        Canonical root-relative path (e.g. "src/app.py", "src/", ".").

    Raises:
        InvalidPathError: If the path cannot be expressed as matcher input
            (NUL characters, paths escaping the project root, foreign drives).
    """
    if "\x00" in raw_path:
        raise InvalidPathError(raw_path, "contains NUL character")

    root = os.path.abspath(project_root)
    absolute = raw_path if os.path.isabs(raw_path) else os.path.join(root, raw_path)

    try:
        relative = os.path.relpath(absolute, root)
    except ValueError as e:
        # Windows: path on a different drive than the project root
        raise InvalidPathError(raw_path, str(e)) from e

    if relative in ("", os.curdir):
        relative = ROOT_PATH

    canonical = relative.replace("\\", "/")

    if canonical.startswith("./"):
        canonical = canonical[2:]

    if kind is PathKind.DIRECTORY and canonical != ROOT_PATH and not canonical.endswith("/"):
        canonical += "/"

    _validate_canonical(raw_path, canonical)
    return canonical


def _validate_canonical(raw_path: str, canonical: str) -> None:
    """Reject canonical paths the matcher cannot judge safely.

    Args:
        raw_path: Original path, for the error message.
        canonical: Normalized candidate.

    Raises:
        InvalidPathError: If the candidate is empty, absolute, or escapes
            the project root.
    """
    if not canonical or canonical == "/":
        raise InvalidPathError(raw_path, "normalized to an empty path")

    if canonical.startswith("/"):
        raise InvalidPathError(raw_path, "not relative to the project root")

    if ".." in canonical.rstrip("/").split("/"):
        raise InvalidPathError(raw_path, "escapes the project root")
