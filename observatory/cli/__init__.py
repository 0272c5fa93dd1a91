"""CLI commands for Observatory.

This package provides the command-line interface for Observatory,
including simulation runs, a live watch view, wallet scenarios and
configuration management.
"""

from observatory.cli.main import cli, main

__all__ = ["cli", "main"]
