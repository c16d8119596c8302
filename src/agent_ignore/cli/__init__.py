"""Command-line interface for agent-ignore.

Provides commands for checking paths against a project's ignore file,
validating it, filtering path lists, and running as a tool hook.
"""

from .main import cli, main

__all__ = ["cli", "main"]
