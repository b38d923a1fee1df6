"""Domain models for balance-sheet accounts."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """Financial holding or obligation owned by one user.

    Attributes:
        id: Opaque account identifier.
        user_id: Identifier of the owning user.
        account_type: Type code from the account taxonomy.
        name: Display name chosen by the user.
        balance: Balance magnitude; the type decides asset or liability.
        savings_amount: Optional recurring savings contribution.
        created_at: Creation timestamp when known.
    """

    id: str
    user_id: str
    account_type: str
    name: str
    balance: Decimal
    savings_amount: Decimal | None = None
    created_at: datetime | None = None


@dataclass(frozen=True)
class AccountDraft:
    """User-entered account fields before persistence."""

    account_type: str
    name: str
    balance: Decimal
    savings_amount: Decimal | None = None


__all__ = ["Account", "AccountDraft"]
