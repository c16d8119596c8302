"""Ignore rule loading and compilation.

Reads the single canonical ignore file (".ignore") from a project root and
compiles it with pathspec's GitIgnoreSpec, which owns pattern precedence:
later patterns override earlier ones and "!" re-includes.

GitIgnoreSpec judges the leaf path only. RuleSet adds the gitignore rule that
a path below an excluded directory stays excluded, whatever negations follow:
every ancestor directory ("a/", "a/b/", ...) is checked first.

Loading outcomes:
- No ignore file      -> None (no restrictions configured, not an error)
- Valid ignore file   -> RuleSet
- Unparseable pattern -> MalformedPatternError (never degraded to allow-all)
- Unreadable file     -> RuleLoadError

Directory entries: a pattern ending in "/**" (e.g. "**/bamboo-specs/**")
excludes the contents of a directory, not the directory entry. pathspec
reports the directory itself ("bamboo-specs/") as matched by such a pattern,
so RuleSet compiles a second matcher for directory candidates where "X/**"
becomes "X/*/": every directory below X, but not X.
"""

from __future__ import annotations

__all__ = [
    "RuleSet",
    "compile_rules",
    "get_ignore_path",
    "load_rules",
]

from collections.abc import Iterable, Sequence
from pathlib import Path

import pathspec

from agent_ignore.constants import IGNORE_FILENAME
from agent_ignore.exceptions import MalformedPatternError, RuleLoadError

_CONTENTS_SUFFIX = "/**"


class RuleSet:
    """Compiled, immutable set of ignore rules.

    Attributes:
        patterns: Effective patterns in file order (comments and blank lines removed).
        source: Path of the ignore file, or None for in-memory rules.
    """

    __slots__ = ("_patterns", "_source", "_file_spec", "_dir_spec")

    def __init__(self, lines: Sequence[str], *, source: str | None = None) -> None:
        """Compile rule lines.

        Args:
            lines: Raw ignore-file lines, comments and blank lines included.
            source: Ignore file path for error messages.

        Raises:
            MalformedPatternError: If any line is rejected by the compiler.
        """
        self._source = source
        self._patterns = tuple(line for line in lines if _is_pattern(line))
        self._file_spec = _compile(lines, source)
        self._dir_spec = _compile([_directory_entry_pattern(line) for line in lines], source)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Effective patterns in file order."""
        return self._patterns

    @property
    def rule_count(self) -> int:
        """Number of effective patterns."""
        return len(self._patterns)

    @property
    def source(self) -> str | None:
        """Path of the ignore file these rules were loaded from."""
        return self._source

    def matches(self, canonical_path: str) -> bool:
        """Check whether a canonical path is ignored (blocked).

        Args:
            canonical_path: Output of normalize_path(). A trailing "/" marks
                a directory.

        Returns:
            True if the rules exclude the path or any directory above it,
            False otherwise.
        """
        if any(self._dir_spec.match_file(parent) for parent in _ancestors(canonical_path)):
            return True
        if canonical_path.endswith("/"):
            return self._dir_spec.match_file(canonical_path)
        return self._file_spec.match_file(canonical_path)

    def __repr__(self) -> str:
        return f"RuleSet(rule_count={self.rule_count}, source={self._source!r})"


def get_ignore_path(project_root: str | Path) -> Path:
    """Get the location of the ignore file for a project root."""
    return Path(project_root) / IGNORE_FILENAME


def compile_rules(lines: Iterable[str], *, source: str | None = None) -> RuleSet:
    """Compile ignore patterns held in memory.

    Args:
        lines: Pattern lines in gitignore syntax.
        source: Optional origin for error messages.

    Returns:
        Compiled RuleSet.

    Raises:
        MalformedPatternError: If a line cannot be compiled.
    """
    return RuleSet(list(lines), source=source)


def load_rules(project_root: str | Path) -> RuleSet | None:
    """Load and compile the ignore file of a project root.

    Args:
        project_root: Absolute path of the project root.

    Returns:
        Compiled RuleSet, or None if the project has no ignore file.

    Raises:
        MalformedPatternError: If the file contains an invalid pattern.
        RuleLoadError: If the file exists but cannot be read or decoded.
    """
    ignore_path = get_ignore_path(project_root)
    if not ignore_path.is_file():
        return None

    try:
        text = ignore_path.read_text(encoding="utf-8-sig")
    except FileNotFoundError:
        # Deleted between the check and the read
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise RuleLoadError(
            f"Cannot read ignore file {ignore_path}: {e}",
            source=str(ignore_path),
        ) from e

    return compile_rules(text.splitlines(), source=str(ignore_path))


def _is_pattern(line: str) -> bool:
    """True for lines that carry a pattern (not blank, not a comment)."""
    stripped = line.strip()
    return bool(stripped) and not stripped.startswith("#")


def _ancestors(canonical_path: str) -> list[str]:
    """Directories above a canonical path, outermost first: "a/b/c" -> ["a/", "a/b/"]."""
    parts = canonical_path.rstrip("/").split("/")[:-1]
    return ["/".join(parts[: depth + 1]) + "/" for depth in range(len(parts))]


def _directory_entry_pattern(line: str) -> str:
    """Rewrite a contents-only pattern so it does not match its own directory.

    "X/**" -> "X/*/", "!X/**" -> "!X/*/". Patterns whose prefix is empty or
    "**" ("/**", "**/**") match everything and are left alone, as is every
    pattern not ending in "/**".
    """
    stripped = line.rstrip()
    negated = stripped.startswith("!")
    body = stripped[1:] if negated else stripped

    if not body.endswith(_CONTENTS_SUFFIX):
        return line

    head = body[: -len(_CONTENTS_SUFFIX)]
    if head.strip("/") in ("", "**") or head.endswith("\\"):
        return line

    return ("!" if negated else "") + head + "/*/"


def _compile(lines: Sequence[str], source: str | None) -> pathspec.GitIgnoreSpec:
    """Compile lines with GitIgnoreSpec, pinpointing the first bad line on failure."""
    try:
        return pathspec.GitIgnoreSpec.from_lines(lines)
    except ValueError as e:
        for line_number, line in enumerate(lines, start=1):
            try:
                pathspec.GitIgnoreSpec.from_lines([line])
            except ValueError as line_error:
                raise MalformedPatternError(
                    line,
                    line_number=line_number,
                    source=source,
                    reason=str(line_error),
                ) from e
        raise MalformedPatternError("", line_number=0, source=source, reason=str(e)) from e
