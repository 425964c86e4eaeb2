"""Status output shared by the loader and the CLI."""

from __future__ import annotations


def log(message: str) -> None:
    """Print with flush so progress shows up immediately in terminals."""
    print(message, flush=True)
