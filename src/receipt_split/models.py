"""Pydantic domain models for ReceiptSplit."""

from collections.abc import Iterable
from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from .money import format_currency

# Legacy assignee marker meaning "split across the whole roster"
ALL_PARTICIPANTS = "All"

# ============================================================================
# Item Assignment
# ============================================================================


class Everyone(BaseModel):
    """Item is split equally across every participant in the roster."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["everyone"] = "everyone"


class Subset(BaseModel):
    """Item is split equally across the listed participants only."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["subset"] = "subset"
    participants: frozenset[str] = Field(min_length=1)


class Unassigned(BaseModel):
    """Item has no assignee and contributes nothing to anyone's share."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unassigned"] = "unassigned"


Assignment = Annotated[Everyone | Subset | Unassigned, Field(discriminator="kind")]


def assignment_from_names(names: Iterable[str]) -> Everyone | Subset | Unassigned:
    """
    Build an assignment from a plain list of participant names.

    An empty list means unassigned, and any list containing the "All"
    marker means the whole roster.
    """
    names = list(names)
    if not names:
        return Unassigned()
    if ALL_PARTICIPANTS in names:
        return Everyone()
    return Subset(participants=frozenset(names))


# ============================================================================
# Input Models
# ============================================================================


class LineItem(BaseModel):
    """A single receipt line.

    `amount` is the line total as printed on the receipt, with quantity
    already applied. Quantity is only used for display.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    quantity: int = Field(default=1, ge=1)
    amount: Decimal = Field(ge=0)
    assigned_to: Assignment = Field(default_factory=Unassigned)

    @field_validator("assigned_to", mode="before")
    @classmethod
    def _accept_name_list(cls, value: Any) -> Any:
        if isinstance(value, list | tuple | set | frozenset):
            return assignment_from_names(value)
        return value

    @property
    def unit_price(self) -> Decimal:
        """Price of a single unit (amount / quantity)."""
        return self.amount / self.quantity

    @property
    def is_assigned(self) -> bool:
        return not isinstance(self.assigned_to, Unassigned)

    def is_assigned_to(self, participant: str) -> bool:
        """Whether `participant` shares this item, directly or via Everyone."""
        if isinstance(self.assigned_to, Everyone):
            return True
        if isinstance(self.assigned_to, Subset):
            return participant in self.assigned_to.participants
        return False

    def sharing_count(self, roster_size: int) -> int:
        """Number of people this item's cost is divided among."""
        if isinstance(self.assigned_to, Everyone):
            return roster_size
        if isinstance(self.assigned_to, Subset):
            return len(self.assigned_to.participants)
        return 0


class Session(BaseModel):
    """A finalized receipt ready to be split.

    Emptiness and payer membership are checked by the engine, not here,
    so callers get the typed engine errors for those cases.
    """

    model_config = ConfigDict(frozen=True)

    participants: tuple[str, ...]
    payer: str
    entered_total: Decimal = Field(ge=0)
    items: tuple[LineItem, ...] = ()

    @field_validator("participants")
    @classmethod
    def _unique_participants(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        seen: set[str] = set()
        for name in value:
            if name in seen:
                raise ValueError(f"Duplicate participant '{name}'")
            seen.add(name)
        return value

    @property
    def items_total(self) -> Decimal:
        """Sum of all line amounts, assigned or not."""
        return sum((item.amount for item in self.items), Decimal("0"))

    @property
    def unassigned_item_count(self) -> int:
        return sum(1 for item in self.items if not item.is_assigned)


# ============================================================================
# Output Models
# ============================================================================


class Settlement(BaseModel):
    """A single payment obligation: `from_participant` owes `to_participant`."""

    model_config = ConfigDict(frozen=True)

    from_participant: str
    to_participant: str
    amount: Decimal
    explanation: str

    @property
    def summary(self) -> str:
        """e.g. "Bob → Alice: $10.00"."""
        return (
            f"{self.from_participant} → {self.to_participant}: "
            f"{format_currency(self.amount)}"
        )

    @property
    def detailed_description(self) -> str:
        return f"{self.summary}\n{self.explanation}"


class TotalVarianceWarning(BaseModel):
    """Allocated items differ noticeably (but not fatally) from the entered total."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["total_variance"] = "total_variance"
    allocated: Decimal
    expected: Decimal
    variance_percent: Decimal

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return self.describe()

    def describe(self, symbol: str = "$") -> str:
        return (
            f"Total mismatch: calculated {format_currency(self.allocated, symbol)} "
            f"vs entered {format_currency(self.expected, symbol)} "
            f"(variance: {self.variance_percent:.2f}%). Please verify manually."
        )


class UnassignedItemsWarning(BaseModel):
    """Some items were not assigned to anyone."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["unassigned_items"] = "unassigned_items"
    count: int

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return f"{self.count} item(s) not assigned to any participant"

    def describe(self, symbol: str = "$") -> str:
        return self.message


class SingleParticipantWarning(BaseModel):
    """Only one participant, so there is nobody to settle with."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["single_participant"] = "single_participant"

    @computed_field  # type: ignore[prop-decorator]
    @property
    def message(self) -> str:
        return "Only one participant - no splits necessary"

    def describe(self, symbol: str = "$") -> str:
        return self.message


SplitWarning = Annotated[
    TotalVarianceWarning | UnassignedItemsWarning | SingleParticipantWarning,
    Field(discriminator="kind"),
]


class SplitResult(BaseModel):
    """Settlements plus any non-fatal warnings for one session.

    `person_totals` holds every participant's reconciled share, payer
    included, in roster order.
    """

    settlements: list[Settlement] = Field(default_factory=list)
    warnings: list[SplitWarning] = Field(default_factory=list)
    person_totals: dict[str, Decimal] = Field(default_factory=dict)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)
