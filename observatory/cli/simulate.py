"""Virtual-time simulation command for Observatory CLI."""

import click
from rich.console import Console

from observatory.cli.common import get_config
from observatory.cli.render import (
    blocks_table,
    candles_table,
    faucet_table,
    ledger_table,
    log_panel,
    stats_panel,
)

console = Console()


@click.command()
@click.option(
    "--seconds",
    "-s",
    type=float,
    default=60.0,
    show_default=True,
    help="Virtual seconds to simulate.",
)
@click.option("--seed", type=int, default=None, help="Random seed for a reproducible run.")
@click.option("--candles", "candle_rows", type=int, default=8, show_default=True, help="Candle rows to show.")
@click.pass_context
def simulate(ctx: click.Context, seconds: float, seed: int | None, candle_rows: int) -> None:
    """Run the engine on a virtual clock and print the resulting state.

    No real time passes: timers fire as the virtual clock advances.

    \b
    Examples:
      observatory simulate
      observatory simulate --seconds 300 --seed 42
    """
    from observatory.engine.core import Observatory
    from observatory.sim.random_source import RandomSource

    if seconds < 0:
        raise click.BadParameter("must be zero or positive", param_hint="--seconds")

    config = get_config(ctx)
    engine = Observatory(config=config, rng=RandomSource(seed=seed))
    engine.start()
    try:
        executed = engine.run_for(seconds)
    finally:
        engine.close()

    console.print(f"[bold cyan]Simulated {seconds:g}s[/bold cyan] [dim]({executed} timer callbacks)[/dim]\n")
    console.print(stats_panel(engine.network_stats(), engine.market_stats()))
    console.print(blocks_table(engine))
    console.print(candles_table(engine, limit=candle_rows))
    console.print(ledger_table(engine))
    if engine.faucet_history:
        console.print(faucet_table(engine))
    console.print(log_panel(engine))
