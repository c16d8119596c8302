"""Application-wide constants for agent-ignore.

Constants that define filter behavior.
For per-deployment settings, see config.py.
"""

__all__ = [
    # Application identity
    "APP_NAME",
    # Ignore file
    "IGNORE_FILENAME",
    "ROOT_PATH",
    # Error text contract
    "ACCESS_DENIED_TEMPLATE",
    # Tool argument mapping
    "FILE_TOOLS",
    "DIRECTORY_TOOLS",
    "FILE_PATH_ARGUMENT",
    "DIRECTORY_PATH_ARGUMENT",
    # Result redaction
    "GLOB_TOOL",
    "GREP_TOOL",
    "MATCH_PATH_KEYS",
    # Logging
    "DECISION_LOG_FILENAME",
    "SYSTEM_LOG_FILENAME",
    "LOG_DIR_ENV_VAR",
    # CLI exit codes
    "EXIT_ALLOWED",
    "EXIT_BLOCKED",
    "EXIT_ERROR",
]

APP_NAME = "agent-ignore"

# =============================================================================
# Ignore file
# =============================================================================

# Single canonical ignore filename, looked up in the project root only.
IGNORE_FILENAME = ".ignore"

# Canonical form of the project root itself. Never blocked.
ROOT_PATH = "."

# =============================================================================
# Error text contract (agent-visible)
# =============================================================================

ACCESS_DENIED_TEMPLATE = "Access denied: {path} blocked by ignore file. Do NOT try to read this. Access restricted."

# =============================================================================
# Tool argument mapping
# =============================================================================

# Tools operating on a single file, path taken from arguments["filePath"]
FILE_TOOLS: frozenset[str] = frozenset({"read", "write", "edit"})

# Tools operating on a directory, path taken from arguments["path"] (default ".")
DIRECTORY_TOOLS: frozenset[str] = frozenset({"glob", "grep", "list"})

FILE_PATH_ARGUMENT = "filePath"
DIRECTORY_PATH_ARGUMENT = "path"

# =============================================================================
# Result redaction
# =============================================================================

GLOB_TOOL = "glob"
GREP_TOOL = "grep"

# Keys carrying the file path of a grep match record, checked in order
MATCH_PATH_KEYS: tuple[str, ...] = ("path", "filePath", "file")

# =============================================================================
# Logging
# =============================================================================

DECISION_LOG_FILENAME = "decisions.jsonl"
SYSTEM_LOG_FILENAME = "system.jsonl"
LOG_DIR_ENV_VAR = "AGENT_IGNORE_LOG_DIR"

# =============================================================================
# CLI exit codes
# =============================================================================

EXIT_ALLOWED = 0
EXIT_BLOCKED = 1
EXIT_ERROR = 2
