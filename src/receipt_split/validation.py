"""Session validation: fatal preconditions and total variance checks."""

import logging
from decimal import Decimal

from .config import Settings
from .exceptions import (
    InvalidPayerError,
    NoItemsError,
    NoParticipantsError,
    TotalsDoNotMatchError,
    UnknownParticipantError,
)
from .models import (
    Session,
    SingleParticipantWarning,
    SplitWarning,
    Subset,
    TotalVarianceWarning,
    UnassignedItemsWarning,
)
from .reconciler import compute_variance_percent

logger = logging.getLogger(__name__)


def validate_session(session: Session) -> tuple[list[SplitWarning], bool]:
    """
    Check a session's structural preconditions.

    Args:
        session: The session to validate

    Returns:
        Tuple of (warnings, proceed). `proceed` is False when there is
        nothing to split (single participant).

    Raises:
        NoParticipantsError: Empty roster
        NoItemsError: No line items
        InvalidPayerError: Payer not in the roster
        UnknownParticipantError: An item names someone outside the roster
    """
    warnings: list[SplitWarning] = []

    if not session.participants:
        raise NoParticipantsError()

    if not session.items:
        raise NoItemsError()

    if session.payer not in session.participants:
        raise InvalidPayerError(session.payer)

    roster = set(session.participants)
    for item in session.items:
        if isinstance(item.assigned_to, Subset):
            unknown = sorted(item.assigned_to.participants - roster)
            if unknown:
                raise UnknownParticipantError(unknown[0], item.name)

    unassigned = session.unassigned_item_count
    if unassigned > 0:
        logger.warning(f"{unassigned} item(s) not assigned to any participant")
        warnings.append(UnassignedItemsWarning(count=unassigned))

    if len(session.participants) == 1:
        warnings.append(SingleParticipantWarning())
        return warnings, False

    return warnings, True


def check_variance(
    allocated: Decimal, expected: Decimal, settings: Settings
) -> TotalVarianceWarning | None:
    """
    Compare the allocated total against the entered total.

    Returns:
        A warning when the variance exceeds the warning threshold,
        None when it is within it

    Raises:
        TotalsDoNotMatchError: If the variance exceeds the error threshold
    """
    variance = compute_variance_percent(allocated, expected)

    if variance > settings.variance_error_percent:
        raise TotalsDoNotMatchError(allocated, expected, variance)

    if variance > settings.variance_warning_percent:
        logger.warning(
            f"Allocated ${allocated:.2f} vs entered ${expected:.2f} "
            f"(variance {variance:.2f}%)"
        )
        return TotalVarianceWarning(
            allocated=allocated, expected=expected, variance_percent=variance
        )

    return None
