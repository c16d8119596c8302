"""Memoized rule loading.

Compiling the ignore file on every tool call is wasteful for hosts that run
many calls per session. RuleCache keeps one compiled RuleSet per project root
and revalidates it on every lookup against the ignore file's stat signature,
so edits, creation and deletion are picked up on the next call without an
explicit reload.

Broken ignore files are never cached: the error is raised on every lookup
until the file is fixed.
"""

from __future__ import annotations

__all__ = [
    "RuleCache",
]

import logging
import os
import threading
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from agent_ignore.pdp.rules import RuleSet, get_ignore_path, load_rules

# (st_mtime_ns, st_size), or None when the ignore file does not exist
_Signature = tuple[int, int] | None


@dataclass(frozen=True, slots=True)
class _CacheEntry:
    signature: _Signature
    rules: RuleSet | None


def _stat_signature(path: Path) -> _Signature:
    try:
        st = path.stat()
    except FileNotFoundError:
        return None
    return (st.st_mtime_ns, st.st_size)


class RuleCache:
    """Per-project-root cache of compiled ignore rules.

    Thread-safe: the entry dict is guarded by a lock; RuleSets are immutable.
    Loading itself runs outside the lock, so two threads may compile the
    same file concurrently. Both results are equivalent.
    """

    def __init__(
        self,
        loader: Callable[[str], RuleSet | None] = load_rules,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the cache.

        Args:
            loader: Uncached loader (default: load_rules).
            logger: Optional system logger for reload events.
        """
        self._loader = loader
        self._logger = logger
        self._entries: dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()
        self._load_count = 0

    @property
    def load_count(self) -> int:
        """Number of times the ignore file was actually (re)compiled."""
        return self._load_count

    def load(self, project_root: str) -> RuleSet | None:
        """Get the rules for a project root, recompiling if the file changed.

        Args:
            project_root: Absolute path of the project root.

        Returns:
            Compiled RuleSet, or None if the project has no ignore file.

        Raises:
            MalformedPatternError: If the file contains an invalid pattern.
            RuleLoadError: If the file cannot be read.
        """
        key = os.path.abspath(project_root)
        signature = _stat_signature(get_ignore_path(key))

        with self._lock:
            entry = self._entries.get(key)
        if entry is not None and entry.signature == signature:
            return entry.rules

        rules = self._loader(key)

        with self._lock:
            self._entries[key] = _CacheEntry(signature=signature, rules=rules)
            self._load_count += 1

        if self._logger is not None:
            self._logger.info(
                {
                    "event": "ignore_rules_loaded",
                    "message": f"Compiled ignore rules for {key}",
                    "project_root": key,
                    "rule_count": rules.rule_count if rules is not None else 0,
                    "has_ignore_file": rules is not None,
                }
            )
        return rules

    __call__ = load

    def invalidate(self, project_root: str | None = None) -> None:
        """Drop cached rules for one project root, or for all of them."""
        with self._lock:
            if project_root is None:
                self._entries.clear()
            else:
                self._entries.pop(os.path.abspath(project_root), None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
