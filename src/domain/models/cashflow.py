"""Domain models for recurring money movements."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class CashFlowItem:
    """Recurring or one-time inflow/outflow of a user.

    Attributes:
        id: Opaque item identifier.
        user_id: Identifier of the owning user.
        name: Display name.
        amount: Positive amount per occurrence.
        flow_type: ``inflow`` or ``outflow``.
        frequency: Recurrence code; ``None`` means monthly.
        inflow_category: Category for inflow items.
        outflow_category: Category for outflow items.
        linked_account_id: Optional account the item feeds or drains.
        notes: Free-text notes.
        created_at: Creation timestamp when known.
    """

    id: str
    user_id: str
    name: str
    amount: Decimal
    flow_type: str
    frequency: str | None = "monthly"
    inflow_category: str | None = None
    outflow_category: str | None = None
    linked_account_id: str | None = None
    notes: str | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class CashFlowItemDraft:
    """User-entered cash-flow fields before persistence."""

    name: str
    amount: Decimal
    flow_type: str
    frequency: str | None = "monthly"
    inflow_category: str | None = None
    outflow_category: str | None = None
    linked_account_id: str | None = None
    notes: str | None = None


__all__ = ["CashFlowItem", "CashFlowItemDraft"]
