"""Configuration commands for Observatory CLI."""

from pathlib import Path

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from observatory.cli.common import get_config

console = Console()


@click.group(name="config")
def config() -> None:
    """Configuration management commands.

    \b
    Commands:
      show  - Print the effective configuration
      init  - Write a config file with default values
    """
    pass


@config.command()
@click.pass_context
def show(ctx: click.Context) -> None:
    """Print the effective configuration."""
    settings = get_config(ctx)

    table = Table(title="Effective Configuration", show_header=True, header_style="bold")
    table.add_column("Section", style="bold")
    table.add_column("Key")
    table.add_column("Value", justify="right")

    for section, values in settings.model_dump().items():
        if not isinstance(values, dict):
            table.add_row("-", section, str(values))
            continue
        for key, value in values.items():
            if isinstance(value, dict):
                for sub_key, sub_value in value.items():
                    table.add_row(section, f"{key}.{sub_key}", str(sub_value))
            else:
                table.add_row(section, key, str(value))

    console.print(table)


@config.command()
@click.option("--force", is_flag=True, help="Overwrite an existing file.")
@click.pass_context
def init(ctx: click.Context, force: bool) -> None:
    """Write a config file holding the default values."""
    from observatory.config import DEFAULT_CONFIG_PATH, write_default_config

    raw_path = (ctx.obj or {}).get("config_path")
    path = Path(raw_path) if raw_path else DEFAULT_CONFIG_PATH

    if path.exists() and not force:
        console.print(Panel(
            f"[yellow]{path} already exists.[/yellow]\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config Exists[/bold yellow]",
            border_style="yellow",
        ))
        raise SystemExit(1)

    written = write_default_config(path)
    console.print(f"[green]Wrote default configuration to {written}[/green]")
