"""Tests for ignore rule loading and compilation.

Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from agent_ignore.exceptions import MalformedPatternError, PolicyError, RuleLoadError
from agent_ignore.pdp.rules import RuleSet, compile_rules, get_ignore_path, load_rules


class TestLoadRules:
    """Tests for load_rules()."""

    def test_missing_file_returns_none(self, empty_root: Path) -> None:
        """Given no .ignore file, returns None (no restrictions)."""
        assert load_rules(empty_root) is None

    def test_directory_named_ignore_returns_none(self, empty_root: Path) -> None:
        """Given a directory called .ignore, treats it as absent."""
        # Arrange
        (empty_root / ".ignore").mkdir()

        # Act / Assert
        assert load_rules(empty_root) is None

    def test_loads_patterns(self, make_project: Callable[..., Path]) -> None:
        """Given an ignore file, compiles its effective patterns in order."""
        # Arrange
        root = make_project(["# comment", "", "secrets.json", "  ", "!keep.json"])

        # Act
        rules = load_rules(root)

        # Assert
        assert rules is not None
        assert rules.patterns == ("secrets.json", "!keep.json")
        assert rules.rule_count == 2
        assert rules.source == str(root / ".ignore")

    def test_only_canonical_filename(self, make_project: Callable[..., Path]) -> None:
        """Given only a .gitignore, returns None."""
        # Arrange
        root = make_project()
        (root / ".gitignore").write_text("secrets.json\n")

        # Act / Assert
        assert load_rules(root) is None

    def test_utf8_bom_ignored(self, make_project: Callable[..., Path]) -> None:
        """Given a UTF-8 BOM, the first pattern still matches."""
        # Arrange
        root = make_project()
        (root / ".ignore").write_bytes(b"\xef\xbb\xbfsecrets.json\n")

        # Act
        rules = load_rules(root)

        # Assert
        assert rules is not None
        assert rules.matches("secrets.json")

    def test_crlf_line_endings(self, make_project: Callable[..., Path]) -> None:
        """Given CRLF line endings, patterns are read without the carriage return."""
        # Arrange
        root = make_project()
        (root / ".ignore").write_bytes(b"secrets.json\r\n*.pem\r\n")

        # Act
        rules = load_rules(root)

        # Assert
        assert rules is not None
        assert rules.patterns == ("secrets.json", "*.pem")
        assert rules.matches("ca.pem")

    def test_undecodable_file_raises(self, make_project: Callable[..., Path]) -> None:
        """Given bytes that are not UTF-8, raises RuleLoadError."""
        # Arrange
        root = make_project()
        (root / ".ignore").write_bytes(b"secrets.json\n\xff\xfe\xfa\n")

        # Act / Assert
        with pytest.raises(RuleLoadError) as exc_info:
            load_rules(root)
        assert exc_info.value.source == str(root / ".ignore")
        assert exc_info.value.failure_type == "rule_load_failure"

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permission bits are not enforced",
    )
    def test_unreadable_file_raises(self, make_project: Callable[..., Path]) -> None:
        """Given an unreadable ignore file, raises RuleLoadError."""
        # Arrange
        root = make_project(["secrets.json"])
        (root / ".ignore").chmod(0o000)

        try:
            # Act / Assert
            with pytest.raises(RuleLoadError):
                load_rules(root)
        finally:
            (root / ".ignore").chmod(0o600)

    def test_malformed_pattern_raises(self, make_project: Callable[..., Path]) -> None:
        """Given an uncompilable pattern, raises MalformedPatternError with its location."""
        # Arrange
        root = make_project(["secrets.json", "# note", "!"])

        # Act
        with pytest.raises(MalformedPatternError) as exc_info:
            load_rules(root)

        # Assert
        err = exc_info.value
        assert err.line_number == 3
        assert err.pattern == "!"
        assert err.source == str(root / ".ignore")
        assert f"{root / '.ignore'}:3" in str(err)
        assert isinstance(err, PolicyError)

    def test_get_ignore_path(self, tmp_path: Path) -> None:
        """The ignore file is .ignore directly in the project root."""
        assert get_ignore_path(tmp_path) == tmp_path / ".ignore"


class TestCompileRules:
    """Tests for compile_rules() and gitignore semantics."""

    def test_empty_rules_match_nothing(self) -> None:
        """Given no patterns, nothing matches."""
        rules = compile_rules([])
        assert rules.rule_count == 0
        assert not rules.matches("anything.txt")

    def test_directory_only_pattern(self) -> None:
        """Given 'foo/', matches the directory but not a file named foo."""
        rules = compile_rules(["foo/"])
        assert not rules.matches("foo")
        assert rules.matches("foo/")
        assert rules.matches("foo/bar.txt")

    def test_bare_pattern_matches_both_kinds(self) -> None:
        """Given 'foo', matches the file and the directory."""
        rules = compile_rules(["foo"])
        assert rules.matches("foo")
        assert rules.matches("foo/")

    def test_negation_precedence(self) -> None:
        """Given '*.json' then '!*.local.json', the later negation wins."""
        rules = compile_rules(["*.json", "!*.local.json"])
        assert rules.matches("secrets.json")
        assert not rules.matches("config.local.json")

    def test_later_pattern_overrides_earlier(self) -> None:
        """Given a negation followed by a re-exclusion, the last match wins."""
        rules = compile_rules(["*.json", "!*.local.json", "secret.local.json"])
        assert rules.matches("secret.local.json")
        assert not rules.matches("config.local.json")

    def test_negation_cannot_reinclude_below_excluded_directory(self) -> None:
        """Given 'docs/' then '!docs/a.md', the file stays blocked with its parent."""
        rules = compile_rules(["docs/", "!docs/a.md"])
        assert rules.matches("docs/a.md")
        assert rules.matches("docs/")

    def test_excluded_ancestor_blocks_nested_paths(self) -> None:
        """Given an excluded directory, everything below it is blocked, directories included."""
        rules = compile_rules(["build/", "!*.md", "!build/keep/"])
        assert rules.matches("build/keep/")
        assert rules.matches("build/keep/notes.md")
        assert rules.matches("src/build/out/app.js")
        assert not rules.matches("src/notes.md")

    def test_anchored_pattern(self) -> None:
        """Given '/to/ignore', matches only at the root, including contents."""
        rules = compile_rules(["/to/ignore"])
        assert rules.matches("to/ignore/")
        assert rules.matches("to/ignore/file.txt")
        assert not rules.matches("other/to/ignore/file.txt")

    def test_contents_pattern_spares_directory_entry(self) -> None:
        """Given '**/bamboo-specs/**', blocks contents but not the directory itself."""
        rules = compile_rules(["**/bamboo-specs/**"])
        assert rules.matches("foo/bamboo-specs/plan.yml")
        assert rules.matches("bamboo-specs/file.txt")
        assert rules.matches("bamboo-specs/nested/")
        assert not rules.matches("bamboo-specs/")
        assert not rules.matches("foo/bamboo-specs/")

    def test_anchored_contents_pattern_with_negated_file(self) -> None:
        """Given '/somedir/toignore/**' and a negated file, only that file is allowed."""
        rules = compile_rules(["/somedir/toignore/**", "!somedir/toignore/file-to-not-ignore.md"])
        assert rules.matches("somedir/toignore/other-file.txt")
        assert not rules.matches("somedir/toignore/file-to-not-ignore.md")
        assert not rules.matches("somedir/toignore/")

    def test_negated_contents_pattern(self) -> None:
        """Given '!X/**' after 'X/**', the directory entries below X are allowed again."""
        rules = compile_rules(["**/target/**", "!**/target/**"])
        assert not rules.matches("target/output.jar")
        assert not rules.matches("target/classes/")

    def test_match_everything_contents_pattern(self) -> None:
        """Given '/**', every path below the root matches, directories included."""
        rules = compile_rules(["/**"])
        assert rules.matches("src/")
        assert rules.matches("src/app.py")

    def test_wildcards(self) -> None:
        """Given prefix and suffix wildcards, matches accordingly."""
        rules = compile_rules(["*-realm.json", "some*.properties"])
        assert rules.matches("dev-realm.json")
        assert rules.matches("some.properties")
        assert rules.matches("something.properties")
        assert not rules.matches("application.properties")

    def test_malformed_in_memory_line_number(self) -> None:
        """Given a malformed in-memory pattern, reports its line number without a source."""
        with pytest.raises(MalformedPatternError) as exc_info:
            compile_rules(["ok.txt", "!"])
        assert exc_info.value.line_number == 2
        assert exc_info.value.source is None
        assert "line 2" in str(exc_info.value)

    def test_repr(self) -> None:
        """repr shows rule count and source."""
        assert repr(compile_rules(["a", "b"], source="x/.ignore")) == "RuleSet(rule_count=2, source='x/.ignore')"

    def test_ruleset_constructor(self) -> None:
        """RuleSet can be built directly from lines."""
        assert RuleSet(["*.key"]).matches("private.key")
