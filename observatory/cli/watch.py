"""Real-time live view command for Observatory CLI."""

import time

import click
from rich.console import Console, Group
from rich.live import Live

from observatory.cli.common import get_config
from observatory.cli.render import blocks_table, candles_table, log_panel, stats_panel

console = Console()


@click.command()
@click.option(
    "--duration",
    "-d",
    type=float,
    default=None,
    help="Stop after this many seconds (default: run until Ctrl+C).",
)
@click.option(
    "--refresh",
    type=click.FloatRange(min=0.1),
    default=1.0,
    show_default=True,
    help="Screen refresh interval in seconds.",
)
@click.option("--seed", type=int, default=None, help="Random seed.")
@click.pass_context
def watch(ctx: click.Context, duration: float | None, refresh: float, seed: int | None) -> None:
    """Watch blocks, candles and the command log tick in real time.

    \b
    Examples:
      observatory watch
      observatory watch --duration 30
    """
    from observatory.engine.core import Observatory
    from observatory.engine.scheduler import Scheduler
    from observatory.sim.random_source import RandomSource

    config = get_config(ctx)
    engine = Observatory(
        config=config,
        rng=RandomSource(seed=seed),
        scheduler=Scheduler(clock=time.monotonic),
    )

    def render() -> Group:
        return Group(
            stats_panel(engine.network_stats(), engine.market_stats()),
            blocks_table(engine),
            candles_table(engine, limit=6),
            log_panel(engine),
        )

    engine.start()
    started = time.monotonic()
    try:
        with Live(render(), console=console, refresh_per_second=4) as live:
            while duration is None or time.monotonic() - started < duration:
                step = refresh if duration is None else min(refresh, duration - (time.monotonic() - started))
                engine.run_for(max(0.0, step))
                live.update(render())
    except KeyboardInterrupt:
        console.print("[dim]Stopped.[/dim]")
    finally:
        engine.close()
