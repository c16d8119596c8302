"""CLI output styling.

Verdicts are colored so a blocked path stands out in a long listing; the
plain words "blocked" / "allowed" stay in the output for scripts.
"""

from __future__ import annotations

__all__ = [
    "style_dim",
    "style_error",
    "style_label",
    "style_success",
    "style_verdict",
]

import click


def style_label(label: str) -> str:
    """Bold cyan section label with a colon, e.g. "Patterns:"."""
    return click.style(f"{label}:", fg="cyan", bold=True)


def style_success(message: str) -> str:
    """Green message prefixed with a checkmark."""
    return click.style(f"✓ {message}", fg="green")


def style_error(message: str) -> str:
    """Red message prefixed with a cross, for stderr."""
    return click.style(f"✗ {message}", fg="red")


def style_dim(message: str) -> str:
    """Dim message for neutral or empty states."""
    return click.style(message, dim=True)


def style_verdict(blocked: bool) -> str:
    """Fixed-width verdict word: red "blocked" or green "allowed"."""
    if blocked:
        return click.style("blocked", fg="red", bold=True)
    return click.style("allowed", fg="green")
