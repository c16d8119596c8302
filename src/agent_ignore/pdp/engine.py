"""Authorization engine - decide whether a candidate path is blocked.

Evaluation flow:
1. Load the rule set through the configured loader
2. No rule set → not blocked (no ignore file means no restrictions)
3. Normalize the candidate into canonical root-relative form
4. Canonical root "." → not blocked, whatever the rules say
5. Otherwise → the rule set's match result, unmodified

Design principles:
1. The project root is fixed at construction, never read from the process cwd
2. Policy faults (malformed or unreadable ignore file) propagate
3. Invalid paths propagate as InvalidPathError; callers choose how to fail closed
4. Gitignore precedence belongs to the rule set, the engine adds no rules of its own
"""

from __future__ import annotations

__all__ = [
    "AuthorizationEngine",
    "is_path_blocked",
]

import os

from agent_ignore.constants import ROOT_PATH
from agent_ignore.context.paths import PathKind, normalize_path
from agent_ignore.pdp.decision import Verdict
from agent_ignore.pdp.protocol import RuleLoader
from agent_ignore.pdp.rules import RuleSet, load_rules


class AuthorizationEngine:
    """Path authorization against a project's ignore file.

    One engine is shared by the pre-execution check and the result redactor,
    so both judge paths identically.

    Attributes:
        project_root: Absolute project root all paths are resolved against.
    """

    def __init__(
        self,
        project_root: str,
        loader: RuleLoader | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            project_root: Project root directory.
            loader: Rule source (default: load_rules, uncached). Pass
                RuleCache.load to reuse compiled rules across calls.
        """
        self._project_root = os.path.abspath(project_root)
        self._loader = loader or load_rules

    @property
    def project_root(self) -> str:
        """Absolute project root."""
        return self._project_root

    def load_rules(self) -> RuleSet | None:
        """Load the current rule set.

        Returns:
            Compiled RuleSet, or None if the project has no ignore file.

        Raises:
            MalformedPatternError: If the ignore file has an invalid pattern.
            RuleLoadError: If the ignore file cannot be read.
        """
        return self._loader(self._project_root)

    def has_rules(self) -> bool:
        """Check whether an ignore file is configured for the project."""
        return self.load_rules() is not None

    def check(self, raw_path: str, kind: PathKind) -> Verdict:
        """Authorize a path, loading the rules first.

        Args:
            raw_path: Path as supplied by the tool (absolute or relative).
            kind: FILE or DIRECTORY.

        Returns:
            Verdict for the path.

        Raises:
            InvalidPathError: If the path cannot be normalized.
            MalformedPatternError: If the ignore file has an invalid pattern.
            RuleLoadError: If the ignore file cannot be read.
        """
        return self.evaluate(self.load_rules(), raw_path, kind)

    def evaluate(self, rules: RuleSet | None, raw_path: str, kind: PathKind) -> Verdict:
        """Authorize a path against an already loaded rule set.

        Used for batches (result redaction) so the ignore file is loaded
        once per result rather than once per entry.

        Args:
            rules: Rule set from load_rules() (None: nothing is blocked).
            raw_path: Path as supplied by the tool.
            kind: FILE or DIRECTORY.

        Returns:
            Verdict for the path.

        Raises:
            InvalidPathError: If the path cannot be normalized.
        """
        if rules is None:
            return Verdict(path=raw_path, canonical_path=None, kind=kind, blocked=False)

        canonical = normalize_path(raw_path, self._project_root, kind)

        # Root is never blocked
        if canonical == ROOT_PATH:
            return Verdict(path=raw_path, canonical_path=canonical, kind=kind, blocked=False)

        return Verdict(
            path=raw_path,
            canonical_path=canonical,
            kind=kind,
            blocked=rules.matches(canonical),
        )

    def is_blocked(self, raw_path: str, kind: PathKind) -> bool:
        """Check whether a path is blocked by the ignore file.

        Raises:
            InvalidPathError: If the path cannot be normalized.
            MalformedPatternError: If the ignore file has an invalid pattern.
            RuleLoadError: If the ignore file cannot be read.
        """
        return self.check(raw_path, kind).blocked

    def __repr__(self) -> str:
        return f"AuthorizationEngine(project_root={self._project_root!r})"


def is_path_blocked(raw_path: str, project_root: str, kind: PathKind) -> bool:
    """Stateless form of AuthorizationEngine.is_blocked.

    Loads the ignore file on every call.

    Args:
        raw_path: Path as supplied by the tool.
        project_root: Project root directory.
        kind: FILE or DIRECTORY.

    Returns:
        True if the path is blocked, False otherwise.
    """
    return AuthorizationEngine(project_root).is_blocked(raw_path, kind)
