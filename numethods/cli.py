"""Command-line entry point: the numerical integration calculator."""

from __future__ import annotations

from . import integration

__all__ = ["main"]


def main(argv: list[str] | None = None) -> int:
    """Start the interactive numerical integration calculator."""
    return integration.main(argv)