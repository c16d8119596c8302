"""Filter configuration for agent-ignore.

The only required setting is the project root. Everything else has a safe
default: rules are cached with stat revalidation, decision logging is off,
and only warnings reach stderr.

Example usage:
    # From the host's context (worktree preferred over directory)
    config = FilterConfig.from_host_context(directory=cwd, worktree=git_root)

    # From / to a JSON file
    config = FilterConfig.load_from_file(config_path)
    config.save_to_file(config_path)
"""

from __future__ import annotations

__all__ = [
    "FilterConfig",
]

import json
import os
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from agent_ignore.constants import DECISION_LOG_FILENAME, SYSTEM_LOG_FILENAME
from agent_ignore.exceptions import ConfigurationError


def _format_validation_error(e: ValidationError) -> str:
    errors = []
    for error in e.errors():
        loc = ".".join(str(x) for x in error["loc"])
        errors.append(f"{loc}: {error['msg']}" if loc else error["msg"])
    return "; ".join(errors)


class FilterConfig(BaseModel):
    """Configuration for one project's ignore filter.

    Log layout when log_dir is set:
        <log_dir>/
        ├── decisions.jsonl   # one record per tool check / redaction
        └── system.jsonl      # warnings and errors

    Attributes:
        project_root: Directory holding the ignore file. Stored absolute.
        cache_rules: Reuse compiled rules until the ignore file changes.
        log_dir: Directory for JSONL logs, or None to disable file logging.
        log_level: Minimum level of system messages printed to stderr.
    """

    project_root: str = Field(min_length=1)
    cache_rules: bool = True
    log_dir: str | None = None
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    model_config = ConfigDict(extra="forbid")

    @field_validator("project_root")
    @classmethod
    def _validate_project_root(cls, value: str) -> str:
        root = os.path.abspath(os.path.expanduser(value))
        if not os.path.isdir(root):
            raise ValueError(f"project root is not a directory: {root}")
        return root

    @field_validator("log_dir")
    @classmethod
    def _absolute_log_dir(cls, value: str | None) -> str | None:
        if value is None or not value.strip():
            return None
        return os.path.abspath(os.path.expanduser(value))

    @property
    def decision_log_path(self) -> Path | None:
        """Path of decisions.jsonl, or None when file logging is off."""
        if self.log_dir is None:
            return None
        return Path(self.log_dir) / DECISION_LOG_FILENAME

    @property
    def system_log_path(self) -> Path | None:
        """Path of system.jsonl, or None when file logging is off."""
        if self.log_dir is None:
            return None
        return Path(self.log_dir) / SYSTEM_LOG_FILENAME

    @classmethod
    def from_host_context(
        cls,
        directory: str | None = None,
        worktree: str | None = None,
        **settings: Any,
    ) -> "FilterConfig":
        """Build a configuration from the roots a host agent reports.

        The worktree (repository top level) wins over the working directory,
        so rules apply to the whole checkout even when the agent runs in a
        subdirectory.

        Args:
            directory: Host's working directory.
            worktree: Host's worktree root, if any.
            **settings: Other FilterConfig fields.

        Returns:
            Validated FilterConfig.

        Raises:
            ConfigurationError: If neither root is given or validation fails.
        """
        root = worktree or directory
        if not root:
            raise ConfigurationError("No project root: host supplied neither a worktree nor a directory")

        try:
            return cls(project_root=root, **settings)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid filter configuration: {_format_validation_error(e)}") from e

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to a JSON file.

        Creates parent directories if they don't exist.

        Args:
            config_path: Path where the config JSON file should be saved.
        """
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(), f, indent=2)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "FilterConfig":
        """Load configuration from a JSON file.

        Args:
            config_path: Path to the config JSON file.

        Returns:
            FilterConfig instance with loaded configuration.

        Raises:
            ConfigurationError: If the file is missing, not valid JSON, or
                fails validation.
        """
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(f"Config file not found: {config_path}") from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in config file {config_path}: {e}") from e
        except OSError as e:
            raise ConfigurationError(f"Could not read config file {config_path}: {e}") from e

        try:
            return cls.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid config file {config_path}: {_format_validation_error(e)}"
            ) from e
