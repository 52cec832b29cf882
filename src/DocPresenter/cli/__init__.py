"""CLI package for DocPresenter command orchestration."""

from __future__ import annotations

__all__ = ["CommandRunner", "main"]

from DocPresenter.cli.runner import CommandRunner
from DocPresenter.cli.ui import cli


def main() -> None:
    """Run the DocPresenter CLI (console script entry point)."""
    cli()
