"""Core allocation and cent reconciliation logic for receipt splits."""

import logging
from collections.abc import Sequence
from decimal import ROUND_FLOOR, Decimal

from .exceptions import RoundingError
from .models import LineItem
from .money import from_cents, to_cents

logger = logging.getLogger(__name__)

ZERO = Decimal("0")


def allocate_items(
    items: Sequence[LineItem], participants: Sequence[str]
) -> dict[str, Decimal]:
    """
    Distribute each item's cost across the people sharing it.

    Every participant starts at zero. Unassigned items are skipped.
    Shares are exact Decimal quotients; nothing is rounded here.

    Args:
        items: Receipt line items
        participants: Session roster (order is preserved in the result)

    Returns:
        Raw (unrounded) share per participant
    """
    totals = {participant: ZERO for participant in participants}

    for item in items:
        count = item.sharing_count(len(participants))
        if count == 0:
            continue

        share = item.amount / count
        for participant in participants:
            if item.is_assigned_to(participant):
                totals[participant] += share

        logger.debug(f"Allocated '{item.name}' ({item.amount}) as {count} x {share}")

    return totals


def compute_variance_percent(allocated: Decimal, expected: Decimal) -> Decimal:
    """
    Percentage difference between allocated and entered totals.

    A zero entered total has no meaningful ratio: it is 0% if nothing was
    allocated either, otherwise 100%.
    """
    if expected == 0:
        return ZERO if allocated == 0 else Decimal("100")
    return abs(allocated - expected) / expected * 100


def distribute_cents(
    person_totals: dict[str, Decimal],
    participants: Sequence[str],
    entered_total: Decimal,
) -> dict[str, Decimal]:
    """
    Reconcile per-person shares so they sum exactly to the entered total.

    Steps:
    1. Round each person's raw share down to whole cents
    2. Compute residual = entered total cents - sum of rounded shares
    3. Hand out the residual one cent at a time, round-robin over the
       people with a non-zero share sorted by name (add for a positive
       residual, subtract for a negative one)

    With no variance the residual is between 0 and n-1 cents, and a
    participant with nothing allocated stays at zero. The whole roster
    only takes part when nobody has a share.

    Args:
        person_totals: Raw shares from allocate_items
        participants: Session roster
        entered_total: Authoritative bill total

    Returns:
        Two-place Decimal share per participant, in roster order

    Raises:
        RoundingError: If the reconciled shares still don't match
    """
    cents = {
        p: to_cents(person_totals.get(p, ZERO), rounding=ROUND_FLOOR)
        for p in participants
    }
    total_cents = to_cents(entered_total)
    residual = total_cents - sum(cents.values())

    if residual != 0 and participants:
        sharers = [p for p in participants if person_totals.get(p, ZERO) > 0]
        ordered = sorted(sharers or participants)
        step = 1 if residual > 0 else -1
        for i in range(abs(residual)):
            cents[ordered[i % len(ordered)]] += step

        logger.info(
            f"Applied cent adjustment: {residual} cent(s) "
            f"across {min(abs(residual), len(ordered))} participant(s)"
        )

    adjusted = {p: from_cents(c) for p, c in cents.items()}

    # Final verification
    final_cents = sum(to_cents(amount) for amount in adjusted.values())
    if final_cents != total_cents:
        raise RoundingError(
            f"Reconciled shares don't match the entered total:\n"
            f"  Expected: {total_cents} cents (${from_cents(total_cents)})\n"
            f"  Actual:   {final_cents} cents (${from_cents(final_cents)})"
        )

    return adjusted
