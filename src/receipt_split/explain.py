"""Human-readable derivation text for settlements."""

from collections.abc import Sequence

from .models import LineItem
from .money import format_currency

DEFAULT_EXPLANATION = "Your share of the bill"


def describe_item(item: LineItem, roster_size: int, symbol: str = "$") -> str:
    """
    Describe how one item contributes to a sharer's total.

    Example:
        "Pizza: $24.00 ÷ 3 = $8.00"
        "Beer (×2): $12.00"
    """
    label = item.name
    if item.quantity > 1:
        label = f"{label} (×{item.quantity})"

    count = item.sharing_count(roster_size)
    if count <= 1:
        return f"{label}: {format_currency(item.amount, symbol)}"

    share = item.amount / count
    return (
        f"{label}: {format_currency(item.amount, symbol)} ÷ {count} = "
        f"{format_currency(share, symbol)}"
    )


def explain_participant(
    participant: str,
    items: Sequence[LineItem],
    participants: Sequence[str],
    symbol: str = "$",
) -> str:
    """One line per item the participant shares, joined with newlines."""
    lines = [
        describe_item(item, len(participants), symbol)
        for item in items
        if item.is_assigned_to(participant)
    ]
    if not lines:
        return DEFAULT_EXPLANATION
    return "\n".join(lines)
