"""Bill split engine: validate, allocate, reconcile, explain.

Every participant other than the payer owes the payer their reconciled
share of the entered total. One payer per session is assumed.
"""

import logging
from decimal import Decimal

from .config import Settings, load_settings
from .explain import explain_participant
from .models import Session, Settlement, SplitResult
from .money import round_money
from .reconciler import allocate_items, distribute_cents
from .validation import check_variance, validate_session

logger = logging.getLogger(__name__)


class BillSplitEngine:
    """Computes settlements for receipt sessions."""

    def __init__(self, settings: Settings | None = None):
        """Initialize the engine (settings are loaded from the environment if omitted)."""
        self.settings = settings or load_settings()

    def compute_splits(self, session: Session) -> SplitResult:
        """
        Compute who owes the payer what.

        This is a pure function of the session and settings.

        Args:
            session: The receipt session to split

        Returns:
            Settlements (largest first) with any non-fatal warnings

        Raises:
            ReceiptSplitError: If the session fails validation
        """
        warnings, proceed = validate_session(session)

        if not proceed:
            logger.info("Single participant session, no settlements needed")
            return SplitResult(
                warnings=warnings,
                person_totals={session.payer: round_money(session.entered_total)},
            )

        person_totals = allocate_items(session.items, session.participants)

        allocated = sum(person_totals.values())
        variance_warning = check_variance(
            allocated, session.entered_total, self.settings
        )
        if variance_warning is not None:
            warnings.append(variance_warning)

        adjusted = distribute_cents(
            person_totals, session.participants, session.entered_total
        )

        settlements = self._generate_settlements(session, adjusted)

        logger.info(
            f"Computed {len(settlements)} settlement(s) for "
            f"{len(session.participants)} participants, "
            f"total: ${round_money(session.entered_total)}"
        )

        return SplitResult(
            settlements=settlements, warnings=warnings, person_totals=adjusted
        )

    def _generate_settlements(
        self, session: Session, adjusted: dict[str, Decimal]
    ) -> list[Settlement]:
        settlements = []
        for participant in session.participants:
            if participant == session.payer:
                continue

            owed = adjusted[participant]
            if owed <= self.settings.minimum_settlement_amount:
                logger.debug(f"Skipping insignificant amount for {participant}: {owed}")
                continue

            settlements.append(
                Settlement(
                    from_participant=participant,
                    to_participant=session.payer,
                    amount=round_money(owed),
                    explanation=explain_participant(
                        participant,
                        session.items,
                        session.participants,
                        self.settings.currency_symbol,
                    ),
                )
            )

        # Largest first; sorted() is stable so ties keep roster order
        return sorted(settlements, key=lambda s: s.amount, reverse=True)


def compute_splits(session: Session, settings: Settings | None = None) -> SplitResult:
    """Convenience wrapper around BillSplitEngine.compute_splits."""
    return BillSplitEngine(settings).compute_splits(session)
