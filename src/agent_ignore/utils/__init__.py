"""Shared utilities (logging setup)."""

__all__: list[str] = []
