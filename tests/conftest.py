"""Shared fixtures: a project root with a realistic .ignore file."""

from __future__ import annotations

import itertools
import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from agent_ignore.pdp.engine import AuthorizationEngine
from agent_ignore.pep.hooks import IgnoreEnforcer
from agent_ignore.telemetry.audit.decision_logger import DecisionEventLogger
from agent_ignore.telemetry.system.system_logger import close_system_logger_file

IGNORE_LINES = [
    "# Secrets",
    "secrets.json",
    "credentials.json",
    ".env*",
    "*.env",
    "*.crt",
    "*.pem",
    "*.key",
    "id_rsa",
    "",
    "# Generated and internal",
    "/to/ignore",
    "/somedir/toignore/**",
    "!somedir/toignore/file-to-not-ignore.md",
    "**/bamboo-specs/**",
    "**/keycloak-realm-config/templates/**",
    "*-realm.json",
    "some*.properties",
    "",
    "# Local overrides",
    "!*.local.json",
    "!*.local.jsonc",
    "!*.local.md",
    "!/.local/",
]


def write_ignore(root: Path, lines: list[str]) -> Path:
    """Write an ignore file into root and return its path."""
    ignore_path = root / ".ignore"
    ignore_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return ignore_path


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Project root containing the standard .ignore file."""
    root = tmp_path / "project"
    root.mkdir()
    write_ignore(root, IGNORE_LINES)
    return root


@pytest.fixture
def make_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory for project roots with the given ignore lines (None: no ignore file)."""
    counter = itertools.count()

    def _make(lines: list[str] | None = None) -> Path:
        root = tmp_path / f"project-{next(counter)}"
        root.mkdir()
        if lines is not None:
            write_ignore(root, lines)
        return root

    return _make


@pytest.fixture
def empty_root(tmp_path: Path) -> Path:
    """Project root without an ignore file."""
    root = tmp_path / "no-ignore"
    root.mkdir()
    return root


@pytest.fixture
def engine(project_root: Path) -> AuthorizationEngine:
    """Uncached engine for the standard project."""
    return AuthorizationEngine(str(project_root))


@pytest.fixture
def mock_system_logger() -> MagicMock:
    """System logger double."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def mock_decision_logger() -> MagicMock:
    """Decision logger double."""
    return MagicMock(spec=DecisionEventLogger)


@pytest.fixture
def enforcer(
    engine: AuthorizationEngine,
    mock_decision_logger: MagicMock,
    mock_system_logger: MagicMock,
) -> IgnoreEnforcer:
    """Enforcer for the standard project with mocked loggers."""
    return IgnoreEnforcer(engine, mock_decision_logger, mock_system_logger)


@pytest.fixture(autouse=True)
def _reset_system_log_file() -> Iterator[None]:
    """Detach any system.jsonl handler a test configured."""
    yield
    close_system_logger_file()
