"""Custom exceptions for ReceiptSplit."""

from decimal import Decimal


class ReceiptSplitError(Exception):
    """Base exception for all ReceiptSplit errors."""

    pass


class ConfigurationError(ReceiptSplitError):
    """Raised when configuration is invalid or missing."""

    pass


class NoParticipantsError(ReceiptSplitError):
    """Raised when a session has an empty roster."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Cannot calculate splits without participants")


class NoItemsError(ReceiptSplitError):
    """Raised when a session has no line items."""

    def __init__(self, message: str | None = None):
        super().__init__(message or "Cannot calculate splits without items")


class InvalidPayerError(ReceiptSplitError):
    """Raised when the payer is not one of the session's participants."""

    def __init__(self, payer: str, message: str | None = None):
        self.payer = payer
        super().__init__(message or f"Payer '{payer}' is not a participant")


class UnknownParticipantError(ReceiptSplitError):
    """Raised when an item is assigned to someone outside the roster."""

    def __init__(self, participant: str, item_name: str):
        self.participant = participant
        self.item_name = item_name
        super().__init__(
            f"Item '{item_name}' is assigned to '{participant}', "
            f"who is not a participant"
        )


class TotalsDoNotMatchError(ReceiptSplitError):
    """Raised when allocated items diverge too far from the entered total."""

    def __init__(self, allocated: Decimal, expected: Decimal, variance_percent: Decimal):
        self.allocated = allocated
        self.expected = expected
        self.variance_percent = variance_percent
        super().__init__(
            f"Total mismatch: items add up to ${allocated:.2f} "
            f"but the bill total is ${expected:.2f} "
            f"(variance {variance_percent:.2f}%)"
        )


class RoundingError(ReceiptSplitError):
    """Raised when reconciled shares don't add up to the entered total."""

    pass
