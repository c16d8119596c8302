"""Request context for ignore-rule authorization.

Turns a raw tool invocation into the facts the decision engine needs:

- context/ (this module): which path a tool call targets, in canonical form
- pdp/: decides whether that path is blocked
- pep/: enforces the decision around the tool call

Structure:
    paths.py      - PathKind, PathInfo, normalize_path (canonical form)
    tool_args.py  - extract_path (tool name + arguments -> PathInfo)
"""

from agent_ignore.context.paths import PathInfo, PathKind, normalize_path
from agent_ignore.context.tool_args import extract_path, is_path_sensitive

__all__ = [
    # Paths
    "PathInfo",
    "PathKind",
    "normalize_path",
    # Tool arguments
    "extract_path",
    "is_path_sensitive",
]
