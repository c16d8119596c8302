"""Policy Enforcement Point (PEP) - enforcement around tool calls.

This module applies the PDP's verdicts to agent tool calls:

- context/: Extracts and normalizes the path a tool call targets
- pdp/: Decides whether that path is blocked
- pep/ (this module): Stops blocked calls and redacts search results

Call flow:
1. before_tool: tool + arguments → verdict → deny (raise) or allow
2. host runs the tool
3. after_tool: result → redacted result

Structure:
    hooks.py     - IgnoreEnforcer (before/after hooks), create_enforcer
    redactor.py  - ResultRedactor and the result shapes it understands

Note: AccessDeniedError is defined in agent_ignore.exceptions
"""

from agent_ignore.exceptions import AccessDeniedError
from agent_ignore.pep.hooks import IgnoreEnforcer, create_enforcer
from agent_ignore.pep.redactor import (
    GlobResult,
    GrepResult,
    OpaqueResult,
    ResultRedactor,
    ResultShape,
    classify_result,
)

__all__ = [
    # Errors
    "AccessDeniedError",
    # Hooks
    "IgnoreEnforcer",
    "create_enforcer",
    # Redaction
    "GlobResult",
    "GrepResult",
    "OpaqueResult",
    "ResultRedactor",
    "ResultShape",
    "classify_result",
]
