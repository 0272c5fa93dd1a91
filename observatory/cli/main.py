"""Main CLI entry point for Observatory.

This module provides the main click group and lazy loading
for subcommand modules to keep startup fast.
"""

import logging

import click
from rich.console import Console

# Console for rich output
console = Console()


class LazyGroup(click.Group):
    """Command group whose subcommands are imported on first use.

    ``simulate`` and ``watch`` pull in the whole engine, so ``observatory
    --help`` and ``observatory config show`` only import what they run.
    Each entry maps a command name to ``"module:attribute"``; the
    attribute defaults to the command name.
    """

    def __init__(self, *args, lazy_subcommands: dict[str, str] | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        return sorted({*super().list_commands(ctx), *self._lazy_subcommands})

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        command = super().get_command(ctx, cmd_name)
        if command is None and cmd_name in self._lazy_subcommands:
            command = self._import_command(cmd_name)
        return command

    def _import_command(self, cmd_name: str) -> click.Command:
        import importlib

        target = self._lazy_subcommands[cmd_name]
        module_path, _, attr_name = target.partition(":")
        command = getattr(importlib.import_module(module_path), attr_name or cmd_name, None)
        if not isinstance(command, click.Command):
            raise click.ClickException(f"{target} is not a click command")

        self.add_command(command, cmd_name)
        return command


LAZY_SUBCOMMANDS = {
    "simulate": "observatory.cli.simulate",
    "watch": "observatory.cli.watch",
    "wallet": "observatory.cli.wallet",
    "config": "observatory.cli.settings:config",
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def setup_logging(verbose: bool) -> None:
    """Route engine logging through rich."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="observatory")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Path to config.toml (default: ~/.config/observatory/config.toml).",
)
@click.option("-v", "--verbose", is_flag=True, help="Show engine debug logging.")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """Observatory - synthetic ledger and market telemetry engine.

    Fabricates block telemetry, five-minute candles, a transaction
    ledger and faucet drips. Nothing here touches a real network.

    \b
    Quick Start:
      observatory simulate --seconds 60   # Run a minute of virtual time
      observatory watch                   # Live view in real time
      observatory wallet demo             # Wallet and faucet walkthrough
    """
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
