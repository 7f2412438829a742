"""Decimal money helpers shared by the engine and the CLI."""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_cents(amount: Decimal, rounding: str = ROUND_HALF_UP) -> int:
    """
    Convert Decimal dollars to integer cents.
    Uses ROUND_HALF_UP unless told otherwise.

    Args:
        amount: Dollar amount as Decimal
        rounding: Decimal rounding mode

    Returns:
        Amount in cents (integer)
    """
    cents = amount * 100
    return int(cents.quantize(Decimal("1"), rounding=rounding))


def from_cents(cents: int) -> Decimal:
    """Convert integer cents back to a two-place Decimal dollar amount."""
    return (Decimal(cents) / 100).quantize(CENT)


def round_money(amount: Decimal) -> Decimal:
    """Round a Decimal to whole cents (ROUND_HALF_UP)."""
    return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def format_currency(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount as e.g. "$12.50" (no thousands separator)."""
    rounded = round_money(amount)
    if rounded < 0:
        return f"-{symbol}{abs(rounded)}"
    return f"{symbol}{abs(rounded)}"
