"""In-memory repository for demos and tests without a database."""

import uuid
from dataclasses import replace
from datetime import datetime
from typing import Callable, Iterable

from src.application.ports.finance_repository import (
    FinanceRepositoryPort,
    RecordNotFoundError,
)
from src.domain.models import (
    Account,
    AccountDraft,
    BalanceSheet,
    CashFlowItem,
    CashFlowItemDraft,
    NetWorthSnapshot,
)
from src.domain.services.classification import classify_account_type


class InMemoryFinanceRepository(FinanceRepositoryPort):
    """Repository keeping finance records in process memory."""

    def __init__(
        self,
        accounts: Iterable[Account] = (),
        cash_flow_items: Iterable[CashFlowItem] = (),
        history: Iterable[NetWorthSnapshot] = (),
        balance_sheets: Iterable[BalanceSheet] = (),
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self._accounts: dict[str, Account] = {
            account.id: account for account in accounts
        }
        self._cash_flow_items: dict[str, CashFlowItem] = {
            item.id: item for item in cash_flow_items
        }
        self._history: list[NetWorthSnapshot] = list(history)
        self._balance_sheets: list[BalanceSheet] = list(balance_sheets)
        self._clock = clock

    def list_accounts(self, user_id: str) -> list[Account]:
        return [
            account
            for account in reversed(list(self._accounts.values()))
            if account.user_id == user_id
        ]

    def list_cash_flow_items(self, user_id: str) -> list[CashFlowItem]:
        return [
            item
            for item in reversed(list(self._cash_flow_items.values()))
            if item.user_id == user_id
        ]

    def list_net_worth_history(self, user_id: str) -> list[NetWorthSnapshot]:
        snapshots = [
            snapshot
            for snapshot in self._history
            if snapshot.user_id == user_id
        ]
        return sorted(
            snapshots,
            key=lambda snapshot: (
                snapshot.year,
                snapshot.month,
                snapshot.recorded_at or datetime.min,
            ),
            reverse=True,
        )

    def insert_account(self, user_id: str, draft: AccountDraft) -> Account:
        classify_account_type(draft.account_type)
        account = Account(
            id=str(uuid.uuid4()),
            user_id=user_id,
            account_type=draft.account_type,
            name=draft.name,
            balance=draft.balance,
            savings_amount=draft.savings_amount,
            created_at=self._clock(),
        )
        self._accounts[account.id] = account
        return account

    def update_account(
        self,
        user_id: str,
        account_id: str,
        draft: AccountDraft,
    ) -> Account:
        current = self._accounts.get(account_id)
        if current is None or current.user_id != user_id:
            raise RecordNotFoundError(
                f"Account {account_id} not found for user {user_id}"
            )
        classify_account_type(draft.account_type)
        updated = replace(
            current,
            account_type=draft.account_type,
            name=draft.name,
            balance=draft.balance,
            savings_amount=draft.savings_amount,
        )
        self._accounts[account_id] = updated
        return updated

    def delete_account(self, user_id: str, account_id: str) -> bool:
        current = self._accounts.get(account_id)
        if current is None or current.user_id != user_id:
            return False
        del self._accounts[account_id]
        for item_id, item in list(self._cash_flow_items.items()):
            if item.linked_account_id == account_id:
                self._cash_flow_items[item_id] = replace(
                    item,
                    linked_account_id=None,
                )
        return True

    def insert_cash_flow_item(
        self,
        user_id: str,
        draft: CashFlowItemDraft,
    ) -> CashFlowItem:
        item = CashFlowItem(
            id=str(uuid.uuid4()),
            user_id=user_id,
            name=draft.name,
            amount=draft.amount,
            flow_type=draft.flow_type,
            frequency=draft.frequency or "monthly",
            inflow_category=draft.inflow_category,
            outflow_category=draft.outflow_category,
            linked_account_id=draft.linked_account_id,
            notes=draft.notes,
            created_at=self._clock(),
        )
        self._cash_flow_items[item.id] = item
        return item

    def update_cash_flow_item(
        self,
        user_id: str,
        item_id: str,
        draft: CashFlowItemDraft,
    ) -> CashFlowItem:
        current = self._cash_flow_items.get(item_id)
        if current is None or current.user_id != user_id:
            raise RecordNotFoundError(
                f"Cash flow item {item_id} not found for user {user_id}"
            )
        updated = replace(
            current,
            name=draft.name,
            amount=draft.amount,
            flow_type=draft.flow_type,
            frequency=draft.frequency or "monthly",
            inflow_category=draft.inflow_category,
            outflow_category=draft.outflow_category,
            linked_account_id=draft.linked_account_id,
            notes=draft.notes,
        )
        self._cash_flow_items[item_id] = updated
        return updated

    def delete_cash_flow_item(self, user_id: str, item_id: str) -> bool:
        current = self._cash_flow_items.get(item_id)
        if current is None or current.user_id != user_id:
            return False
        del self._cash_flow_items[item_id]
        return True

    def list_balance_sheets(self) -> list[BalanceSheet]:
        return sorted(self._balance_sheets, key=lambda sheet: sheet.user_id)

    def list_recorded_user_ids(self, month: int, year: int) -> set[str]:
        return {
            snapshot.user_id
            for snapshot in self._history
            if snapshot.month == month and snapshot.year == year
        }

    def insert_net_worth_snapshots(
        self,
        snapshots: list[NetWorthSnapshot],
    ) -> int:
        now = self._clock()
        self._history.extend(
            snapshot
            if snapshot.recorded_at is not None
            else replace(snapshot, recorded_at=now)
            for snapshot in snapshots
        )
        return len(snapshots)


__all__ = ["InMemoryFinanceRepository"]
