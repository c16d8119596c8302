"""Protocol for rule sources.

The engine takes its rules from any callable mapping a project root to a
compiled RuleSet (or None when the project has no ignore file). Both the
plain loader and RuleCache.load satisfy it through structural subtyping:

    engine = AuthorizationEngine(root)                       # load_rules
    engine = AuthorizationEngine(root, loader=cache.load)    # memoized
"""

from __future__ import annotations

__all__ = [
    "RuleLoader",
]

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from agent_ignore.pdp.rules import RuleSet


@runtime_checkable
class RuleLoader(Protocol):
    """Callable returning the rules for a project root.

    Implementations must raise (MalformedPatternError, RuleLoadError) rather
    than return None for a broken ignore file. None means "no ignore file".
    """

    def __call__(self, project_root: str) -> "RuleSet | None": ...
