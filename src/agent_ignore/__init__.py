"""agent-ignore: ignore-file access control for AI agent filesystem tools.

Blocks agent tool calls (read, write, edit, glob, grep, list) that target
paths excluded by the project's .ignore file, and removes excluded entries
from search results.

Usage:
    from agent_ignore import create_enforcer

    enforcer = create_enforcer(directory=cwd, worktree=repo_root)
    enforcer.before_tool("read", {"filePath": "secrets.json"})  # AccessDeniedError
    files = enforcer.after_tool("glob", ["src/app.py", "secrets.json"])
"""

__version__ = "0.3.0"

from agent_ignore.config import FilterConfig
from agent_ignore.context import PathInfo, PathKind, extract_path, normalize_path
from agent_ignore.exceptions import (
    AccessDeniedError,
    AgentIgnoreError,
    ConfigurationError,
    InvalidPathError,
    MalformedPatternError,
    PolicyError,
    RuleLoadError,
)
from agent_ignore.pdp import AuthorizationEngine, RuleCache, RuleSet, Verdict, is_path_blocked, load_rules
from agent_ignore.pep import IgnoreEnforcer, ResultRedactor, create_enforcer

__all__ = [
    "__version__",
    # Hooks
    "IgnoreEnforcer",
    "create_enforcer",
    "ResultRedactor",
    # Engine
    "AuthorizationEngine",
    "RuleCache",
    "RuleSet",
    "Verdict",
    "is_path_blocked",
    "load_rules",
    # Paths
    "PathInfo",
    "PathKind",
    "extract_path",
    "normalize_path",
    # Config
    "FilterConfig",
    # Errors
    "AccessDeniedError",
    "AgentIgnoreError",
    "ConfigurationError",
    "InvalidPathError",
    "MalformedPatternError",
    "PolicyError",
    "RuleLoadError",
]
