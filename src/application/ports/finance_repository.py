"""Port for reading and writing a user's finance records."""

from typing import Protocol

from src.domain.models import (
    Account,
    AccountDraft,
    BalanceSheet,
    CashFlowItem,
    CashFlowItemDraft,
    NetWorthSnapshot,
)


class RepositoryError(RuntimeError):
    """Raised when the persistence backend cannot be reached or fails."""


class RecordNotFoundError(LookupError):
    """Raised when an update targets a record the user does not own."""


class FinanceRepositoryPort(Protocol):
    """Port exposing per-user accounts, cash flows and net worth history.

    Implementations raise ``RepositoryError`` for backend failures.
    """

    def list_accounts(self, user_id: str) -> list[Account]:
        """Return the accounts of a user, newest first."""

    def list_cash_flow_items(self, user_id: str) -> list[CashFlowItem]:
        """Return the cash-flow items of a user, newest first."""

    def list_net_worth_history(self, user_id: str) -> list[NetWorthSnapshot]:
        """Return net worth snapshots of a user, latest period first."""

    def insert_account(self, user_id: str, draft: AccountDraft) -> Account:
        """Persist a new account and return it."""

    def update_account(
        self,
        user_id: str,
        account_id: str,
        draft: AccountDraft,
    ) -> Account:
        """Replace every editable field of an account and return it."""

    def delete_account(self, user_id: str, account_id: str) -> bool:
        """Delete an account; return whether a row was removed."""

    def insert_cash_flow_item(
        self,
        user_id: str,
        draft: CashFlowItemDraft,
    ) -> CashFlowItem:
        """Persist a new cash-flow item and return it."""

    def update_cash_flow_item(
        self,
        user_id: str,
        item_id: str,
        draft: CashFlowItemDraft,
    ) -> CashFlowItem:
        """Replace every editable field of a cash-flow item and return it."""

    def delete_cash_flow_item(self, user_id: str, item_id: str) -> bool:
        """Delete a cash-flow item; return whether a row was removed."""

    def list_balance_sheets(self) -> list[BalanceSheet]:
        """Return every stored balance sheet."""

    def list_recorded_user_ids(self, month: int, year: int) -> set[str]:
        """Return users that already have a snapshot for the period."""

    def insert_net_worth_snapshots(
        self,
        snapshots: list[NetWorthSnapshot],
    ) -> int:
        """Append net worth snapshots; return the number inserted."""


__all__ = [
    "FinanceRepositoryPort",
    "RecordNotFoundError",
    "RepositoryError",
]
