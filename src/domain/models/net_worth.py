"""Domain models for persisted net worth history."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class NetWorthSnapshot:
    """Net worth recorded for one user and one calendar month."""

    id: str
    user_id: str
    month: int
    year: int
    net_worth: Decimal
    calculated_from_balance_sheet_id: str | None = None
    recorded_at: datetime | None = None

    @property
    def period(self) -> tuple[int, int]:
        """Return the (year, month) period key."""
        return (self.year, self.month)


@dataclass(frozen=True)
class BalanceSheet:
    """Free-form balance sheet kept alongside the accounts.

    Attributes:
        id: Balance sheet identifier.
        user_id: Identifier of the owning user.
        assets: Asset label to raw amount.
        liabilities: Liability label to raw amount.
        notes: Optional notes.
    """

    id: str
    user_id: str
    assets: dict[str, object] = field(default_factory=dict)
    liabilities: dict[str, object] = field(default_factory=dict)
    notes: str | None = None


__all__ = ["NetWorthSnapshot", "BalanceSheet"]
