"""Helpers shared by the CLI commands."""

from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from observatory.config import EngineConfig

console = Console()


def get_config(ctx: click.Context) -> EngineConfig:
    """Load the configuration named on the command line.

    Exits with status 1 when the file cannot be used.
    """
    from observatory.config import load_config
    from observatory.errors import ConfigError

    raw_path: Optional[str] = (ctx.obj or {}).get("config_path")
    try:
        return load_config(Path(raw_path) if raw_path else None)
    except ConfigError as e:
        console.print(Panel(
            f"[red]{e}[/red]\n\n"
            "Run [cyan]observatory config init[/cyan] to write a fresh config file.",
            title="[bold red]Configuration Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)
