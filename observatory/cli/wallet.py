"""Wallet and faucet commands for Observatory CLI."""

import click
from rich.console import Console
from rich.panel import Panel

from observatory.cli.common import get_config
from observatory.cli.render import faucet_table, ledger_table, log_panel
from observatory.utils import format_amount, short_address

console = Console()


@click.group()
def wallet() -> None:
    """Wallet shell commands.

    State lives for the duration of one command only.

    \b
    Commands:
      demo   - Generate a wallet, send a transfer and claim a drip
      link   - Link an external signing extension address
    """
    pass


def _feedback(ok: bool, message: str) -> None:
    color = "green" if ok else "red"
    console.print(f"[{color}]{message}[/{color}]")


@wallet.command()
@click.option("--recipient", "-r", default="0x59c4b7E7b119c6908E9A6E106D05b98B193cA3Db", show_default=True)
@click.option("--amount", "-a", default="40", show_default=True, help="Transfer amount.")
@click.option("--memo", "-m", default="", help="Optional memo.")
@click.option("--drips", type=int, default=1, show_default=True, help="Faucet requests to issue.")
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.pass_context
def demo(
    ctx: click.Context,
    recipient: str,
    amount: str,
    memo: str,
    drips: int,
    seed: int | None,
) -> None:
    """Walk through wallet generation, a transfer and faucet drips.

    \b
    Examples:
      observatory wallet demo
      observatory wallet demo --amount 1,000 --drips 2
    """
    from observatory.engine.core import Observatory
    from observatory.sim.random_source import RandomSource

    config = get_config(ctx)
    engine = Observatory(config=config, rng=RandomSource(seed=seed))

    try:
        state = engine.generate_wallet()
        _feedback(
            True,
            f"Generated address {short_address(state.address)} with "
            f"{format_amount(state.balance)} XLORE balance.",
        )

        outcome = engine.submit_transfer(recipient, amount, memo)
        _feedback(outcome.accepted, outcome.message)

        for _ in range(drips):
            drip = engine.request_faucet_drip()
            if drip.status == "IGNORED":
                console.print("[dim]Faucet busy, request ignored.[/dim]")
            else:
                _feedback(drip.accepted, drip.message)

        engine.run_for(config.faucet.settlement_delay)
    finally:
        engine.close()

    console.print(Panel(
        f"Address: {engine.wallet.address}\n"
        f"Balance: [green]{format_amount(engine.wallet.balance)} XLORE[/green]",
        title="[bold]Wallet[/bold]",
        border_style="cyan",
    ))
    console.print(ledger_table(engine, address=engine.wallet.address))
    console.print(faucet_table(engine))
    console.print(log_panel(engine))


@wallet.command()
@click.option("--address", default=None, help="Address to link (default: $OBSERVATORY_EXTERNAL_ADDRESS).")
@click.option("--decline", is_flag=True, help="Simulate the operator declining the request.")
@click.pass_context
def link(ctx: click.Context, address: str | None, decline: bool) -> None:
    """Link an address supplied by an external signing extension."""
    from observatory.bridge import EnvBridge, StaticBridge
    from observatory.engine.core import Observatory

    bridge = StaticBridge(address, approve=not decline) if address else EnvBridge(approve=not decline)
    engine = Observatory(config=get_config(ctx))
    try:
        outcome = engine.link_external_wallet(bridge)
    finally:
        engine.close()

    _feedback(outcome.linked, outcome.message)
    if not outcome.linked:
        raise SystemExit(1)
    console.print(f"Balance: [green]{format_amount(engine.wallet.balance)} XLORE[/green]")
