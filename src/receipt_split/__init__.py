"""ReceiptSplit - Turn shared receipt items into payer settlements."""

__version__ = "0.1.0"

from .config import Settings, load_settings
from .engine import BillSplitEngine, compute_splits
from .exceptions import (
    ConfigurationError,
    InvalidPayerError,
    NoItemsError,
    NoParticipantsError,
    ReceiptSplitError,
    TotalsDoNotMatchError,
)
from .models import (
    Everyone,
    LineItem,
    Session,
    Settlement,
    SplitResult,
    Subset,
    Unassigned,
)

__all__ = [
    "Settings",
    "load_settings",
    "BillSplitEngine",
    "compute_splits",
    "ConfigurationError",
    "InvalidPayerError",
    "NoItemsError",
    "NoParticipantsError",
    "ReceiptSplitError",
    "TotalsDoNotMatchError",
    "Everyone",
    "LineItem",
    "Session",
    "Settlement",
    "SplitResult",
    "Subset",
    "Unassigned",
]
