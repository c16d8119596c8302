"""Tests for path normalization.

Tests use the AAA pattern (Arrange-Act-Assert) for clarity.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from agent_ignore.context.paths import PathInfo, PathKind, normalize_path
from agent_ignore.exceptions import InvalidPathError


class TestNormalizePath:
    """Tests for normalize_path()."""

    def test_relative_file(self, tmp_path: Path) -> None:
        """Given a plain relative file path, returns it unchanged."""
        assert normalize_path("src/app.py", str(tmp_path), PathKind.FILE) == "src/app.py"

    def test_dot_slash_prefix_stripped(self, tmp_path: Path) -> None:
        """Given a ./ prefix, strips it."""
        assert normalize_path("./secrets.json", str(tmp_path), PathKind.FILE) == "secrets.json"

    def test_absolute_path_made_relative(self, tmp_path: Path) -> None:
        """Given an absolute path under the root, returns the root-relative form."""
        # Arrange
        absolute = str(tmp_path / "config" / "secrets.json")

        # Act
        canonical = normalize_path(absolute, str(tmp_path), PathKind.FILE)

        # Assert
        assert canonical == "config/secrets.json"

    def test_backslashes_converted(self, tmp_path: Path) -> None:
        """Given backslash separators, converts them to forward slashes."""
        assert normalize_path("config\\secrets.json", str(tmp_path), PathKind.FILE) == "config/secrets.json"

    def test_directory_gets_trailing_slash(self, tmp_path: Path) -> None:
        """Given DIRECTORY kind, appends a trailing slash."""
        assert normalize_path("src", str(tmp_path), PathKind.DIRECTORY) == "src/"

    def test_directory_trailing_slash_not_doubled(self, tmp_path: Path) -> None:
        """Given a directory that already ends with a slash, keeps a single slash."""
        assert normalize_path("src/", str(tmp_path), PathKind.DIRECTORY) == "src/"

    def test_file_has_no_trailing_slash(self, tmp_path: Path) -> None:
        """Given FILE kind, never appends a slash."""
        assert normalize_path("foo", str(tmp_path), PathKind.FILE) == "foo"

    @pytest.mark.parametrize("raw", [".", "", "./"])
    def test_root_forms_map_to_dot(self, tmp_path: Path, raw: str) -> None:
        """Given the root in any form, returns '.' without a trailing slash."""
        assert normalize_path(raw, str(tmp_path), PathKind.DIRECTORY) == "."

    def test_absolute_root_maps_to_dot(self, tmp_path: Path) -> None:
        """Given the absolute project root, returns '.'."""
        assert normalize_path(str(tmp_path), str(tmp_path), PathKind.DIRECTORY) == "."

    def test_redundant_segments_collapsed(self, tmp_path: Path) -> None:
        """Given '.' and '..' segments that stay inside the root, collapses them."""
        assert normalize_path("src/./lib/../app.py", str(tmp_path), PathKind.FILE) == "src/app.py"

    def test_path_form_equivalence(self, tmp_path: Path) -> None:
        """Given p, ./p, root/p and the backslash form, all normalize identically."""
        # Arrange
        forms = [
            "config/secrets.json",
            "./config/secrets.json",
            os.path.join(str(tmp_path), "config", "secrets.json"),
            "config\\secrets.json",
        ]

        # Act
        results = {normalize_path(form, str(tmp_path), PathKind.FILE) for form in forms}

        # Assert
        assert results == {"config/secrets.json"}

    def test_symlinks_not_resolved(self, tmp_path: Path) -> None:
        """Given a symlink, judges the link path, not its target."""
        # Arrange
        (tmp_path / "real").mkdir()
        (tmp_path / "link").symlink_to(tmp_path / "real")

        # Act
        canonical = normalize_path("link/file.txt", str(tmp_path), PathKind.FILE)

        # Assert
        assert canonical == "link/file.txt"


class TestNormalizePathRejects:
    """Tests for inputs normalize_path() refuses."""

    def test_parent_escape_rejected(self, tmp_path: Path) -> None:
        """Given a path escaping the root, raises InvalidPathError."""
        with pytest.raises(InvalidPathError, match="escapes the project root"):
            normalize_path("../outside.txt", str(tmp_path), PathKind.FILE)

    def test_absolute_outside_root_rejected(self, tmp_path: Path) -> None:
        """Given an absolute path outside the root, raises InvalidPathError."""
        # Arrange
        root = tmp_path / "project"
        root.mkdir()

        # Act / Assert
        with pytest.raises(InvalidPathError):
            normalize_path(str(tmp_path / "elsewhere.txt"), str(root), PathKind.FILE)

    def test_nul_character_rejected(self, tmp_path: Path) -> None:
        """Given a NUL character, raises InvalidPathError."""
        with pytest.raises(InvalidPathError, match="NUL"):
            normalize_path("secrets.json\x00.txt", str(tmp_path), PathKind.FILE)

    def test_error_is_value_error(self, tmp_path: Path) -> None:
        """InvalidPathError is also a ValueError and keeps the raw path."""
        # Act
        with pytest.raises(ValueError) as exc_info:
            normalize_path("../x", str(tmp_path), PathKind.FILE)

        # Assert
        assert isinstance(exc_info.value, InvalidPathError)
        assert exc_info.value.raw_path == "../x"


class TestPathInfo:
    """Tests for PathInfo."""

    def test_is_directory(self) -> None:
        """is_directory reflects the kind."""
        assert PathInfo("src", PathKind.DIRECTORY).is_directory
        assert not PathInfo("a.py", PathKind.FILE).is_directory

    def test_frozen(self) -> None:
        """PathInfo cannot be modified."""
        info = PathInfo("a.py", PathKind.FILE)
        with pytest.raises(AttributeError):
            info.path = "b.py"  # type: ignore[misc]

    def test_kind_is_string_enum(self) -> None:
        """PathKind values serialize as plain strings."""
        assert PathKind.FILE == "file"
        assert PathKind.DIRECTORY.value == "directory"
