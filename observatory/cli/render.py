"""Rich renderables for engine state."""

from rich.panel import Panel
from rich.table import Table

from observatory.engine.core import Observatory
from observatory.engine.stats import MarketStats, NetworkStats
from observatory.utils import format_amount, short_address


def _signed(value: float, suffix: str = "", decimals: int = 4) -> str:
    color = "green" if value >= 0 else "red"
    sign = "+" if value >= 0 else ""
    return f"[{color}]{sign}{value:,.{decimals}f}{suffix}[/{color}]"


def blocks_table(engine: Observatory) -> Table:
    table = Table(title="Live Blocks", show_header=True, header_style="bold")
    table.add_column("Height", justify="right", style="bold")
    table.add_column("Producer")
    table.add_column("TPS", justify="right")
    table.add_column("Latency", justify="right")
    table.add_column("Txs", justify="right")
    table.add_column("Hash", style="dim")

    for block in engine.blocks:
        table.add_row(
            f"{block.height:,}",
            block.producer,
            f"{block.throughput:,}",
            f"{block.latency:.2f}s",
            f"{block.transaction_count:,}",
            short_address(block.content_hash),
        )
    return table


def candles_table(engine: Observatory, limit: int = 8) -> Table:
    table = Table(title="XLORE 5m Candles", show_header=True, header_style="bold")
    table.add_column("Time")
    table.add_column("Open", justify="right")
    table.add_column("High", justify="right")
    table.add_column("Low", justify="right")
    table.add_column("Close", justify="right")
    table.add_column("Volume", justify="right")
    table.add_column("Buyers", justify="right")
    table.add_column("Sellers", justify="right")

    for candle in engine.candles[-limit:]:
        color = "green" if candle.close >= candle.open else "red"
        table.add_row(
            candle.timestamp.strftime("%H:%M"),
            f"{candle.open:.4f}",
            f"{candle.high:.4f}",
            f"{candle.low:.4f}",
            f"[{color}]{candle.close:.4f}[/{color}]",
            f"{candle.volume:,.2f}",
            str(candle.buyers),
            str(candle.sellers),
        )
    return table


def ledger_table(engine: Observatory, address: str | None = None, limit: int = 10) -> Table:
    table = Table(title="Ledger", show_header=True, header_style="bold")
    table.add_column("Id", style="dim")
    table.add_column("From")
    table.add_column("To")
    table.add_column("Amount", justify="right")
    table.add_column("Origin", justify="center")
    table.add_column("Memo")

    for entry in engine.ledger_entries(address)[:limit]:
        table.add_row(
            entry.id,
            short_address(entry.sender),
            short_address(entry.recipient),
            f"{format_amount(entry.amount)} XLORE",
            entry.origin,
            entry.memo or "",
        )
    return table


def faucet_table(engine: Observatory) -> Table:
    table = Table(title="Faucet History", show_header=True, header_style="bold")
    table.add_column("Id", style="dim")
    table.add_column("Amount", justify="right")
    table.add_column("To")
    table.add_column("Status", justify="center")

    for record in engine.faucet_history:
        color = "green" if record.status == "completed" else "yellow"
        table.add_row(
            record.id,
            f"{format_amount(record.amount)} XLORE",
            short_address(record.recipient),
            f"[{color}]{record.status}[/{color}]",
        )
    return table


def log_panel(engine: Observatory) -> Panel:
    lines = [f"[cyan]{entry.actor}[/cyan] > {entry.message}" for entry in engine.log]
    return Panel("\n".join(lines) or "[dim]empty[/dim]", title="[bold]/feed/logs[/bold]", border_style="dim")


def stats_panel(network: NetworkStats, market: MarketStats) -> Panel:
    text = (
        f"[bold]Network[/bold]\n\n"
        f"Latest Height:   {network.latest_height:,}\n"
        f"Avg Latency:     {network.avg_latency:.2f}s\n"
        f"Avg Throughput:  {round(network.avg_throughput):,} TPS\n"
        f"Ledger Events:   {network.total_transactions}\n"
        f"Ledger Volume:   {format_amount(network.total_volume)} XLORE\n"
        f"Faucet Drips:    {network.faucet_count}\n"
        f"{'─' * 35}\n"
        f"[bold]Market[/bold]\n\n"
    )
    if market.latest is None:
        text += "[dim]No candles yet.[/dim]"
    else:
        text += (
            f"Last Close:      {market.latest.close:.4f}\n"
            f"Change:          {_signed(market.price_delta)} ({_signed(market.percent_change, '%', 2)})\n"
            f"Session:         {_signed(market.session_delta)} ({_signed(market.session_percent, '%', 2)})\n"
            f"Buyers:          {market.latest.buyers} ({_signed(market.buyers_delta, decimals=0)})\n"
            f"Sellers:         {market.latest.sellers} ({_signed(market.sellers_delta, decimals=0)})\n"
            f"Holders:         {market.latest.holders} ({_signed(market.holders_delta, decimals=0)})\n"
            f"Window Volume:   {market.total_volume:,.2f}"
        )
    return Panel(text, title="[bold]/sys/manifest[/bold]", border_style="cyan")
