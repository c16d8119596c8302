"""Policy Decision Point (PDP) - ignore-rule evaluation.

This module decides whether a canonical path is excluded by the project's
ignore file:

- context/: Extracts and normalizes the path a tool call targets
- pdp/ (this module): Loads rules and produces verdicts
- pep/: Enforces verdicts around the tool call (hooks, redaction)

The PDP performs no enforcement. Its only I/O is reading the ignore file.

Structure:
    decision.py   - Decision enum (ALLOW/DENY/SKIP/ERROR), Verdict
    rules.py      - RuleSet, compile_rules, load_rules (pathspec)
    cache.py      - RuleCache (stat-validated memoization)
    protocol.py   - RuleLoader protocol
    engine.py     - AuthorizationEngine, is_path_blocked
"""

from agent_ignore.pdp.cache import RuleCache
from agent_ignore.pdp.decision import Decision, Verdict
from agent_ignore.pdp.engine import AuthorizationEngine, is_path_blocked
from agent_ignore.pdp.protocol import RuleLoader
from agent_ignore.pdp.rules import RuleSet, compile_rules, get_ignore_path, load_rules

__all__ = [
    # Decision
    "Decision",
    "Verdict",
    # Rules
    "RuleSet",
    "compile_rules",
    "get_ignore_path",
    "load_rules",
    "RuleCache",
    "RuleLoader",
    # Engine
    "AuthorizationEngine",
    "is_path_blocked",
]
