"""Formatting helpers shared by log messages and the CLI."""


def short_address(address: str, head: int = 10, tail: int = 6) -> str:
    """Shorten an address or hash for display.

    Args:
        address: Full address or hash.
        head: Characters kept from the start.
        tail: Characters kept from the end.

    Returns:
        Shortened string like ``0x7E6fD420…028C11``.
    """
    if len(address) <= head + tail:
        return address
    return f"{address[:head]}…{address[-tail:]}"


def format_amount(value: float) -> str:
    """Format an amount with thousands separators and 2-4 decimals."""
    text = f"{value:,.4f}"
    whole, _, fraction = text.partition(".")
    fraction = fraction.rstrip("0")
    if len(fraction) < 2:
        fraction = fraction.ljust(2, "0")
    return f"{whole}.{fraction}"
