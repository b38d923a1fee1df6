"""SQLAlchemy-backed repository for a user's finance records."""

import json
import uuid
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Callable

from sqlalchemy import JSON, DateTime, Numeric, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import (
    FinanceRepositoryPort,
    RecordNotFoundError,
    RepositoryError,
)
from src.domain.constants import INFLOW, OUTFLOW
from src.domain.errors import InvalidAmountError
from src.domain.models import (
    Account,
    AccountDraft,
    BalanceSheet,
    CashFlowItem,
    CashFlowItemDraft,
    NetWorthSnapshot,
)
from src.domain.services.classification import classify_account_type
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_app_logger

MONEY = Numeric(14, 2, asdecimal=True)

ACCOUNT_COLUMNS = """
    id, user_id, account_type, name, balance, savings_amount, created_at
"""

CASH_FLOW_COLUMNS = """
    id, user_id, name, amount, flow_type, frequency, inflow_category,
    outflow_category, linked_account_id, notes, created_at
"""

SELECT_ACCOUNTS_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS}
    FROM accounts
    WHERE user_id = :user_id
    ORDER BY created_at DESC
    """
).columns(balance=MONEY, savings_amount=MONEY, created_at=DateTime)

SELECT_ACCOUNT_SQL = text(
    f"""
    SELECT {ACCOUNT_COLUMNS}
    FROM accounts
    WHERE id = :id AND user_id = :user_id
    """
).columns(balance=MONEY, savings_amount=MONEY, created_at=DateTime)

INSERT_ACCOUNT_SQL = text(
    """
    INSERT INTO accounts (
        id, user_id, account_type, category, name, balance,
        savings_amount, created_at, updated_at
    )
    VALUES (
        :id, :user_id, :account_type, :category, :name, :balance,
        :savings_amount, :created_at, :updated_at
    )
    """
).bindparams(
    bindparam("balance", type_=MONEY),
    bindparam("savings_amount", type_=MONEY),
    bindparam("created_at", type_=DateTime),
    bindparam("updated_at", type_=DateTime),
)

UPDATE_ACCOUNT_SQL = text(
    """
    UPDATE accounts
    SET account_type = :account_type,
        category = :category,
        name = :name,
        balance = :balance,
        savings_amount = :savings_amount,
        updated_at = :updated_at
    WHERE id = :id AND user_id = :user_id
    """
).bindparams(
    bindparam("balance", type_=MONEY),
    bindparam("savings_amount", type_=MONEY),
    bindparam("updated_at", type_=DateTime),
)

DELETE_ACCOUNT_SQL = text(
    "DELETE FROM accounts WHERE id = :id AND user_id = :user_id"
)

SELECT_CASH_FLOW_ITEMS_SQL = text(
    f"""
    SELECT {CASH_FLOW_COLUMNS}
    FROM cash_flow_items
    WHERE user_id = :user_id
    ORDER BY created_at DESC
    """
).columns(amount=MONEY, created_at=DateTime)

SELECT_CASH_FLOW_ITEM_SQL = text(
    f"""
    SELECT {CASH_FLOW_COLUMNS}
    FROM cash_flow_items
    WHERE id = :id AND user_id = :user_id
    """
).columns(amount=MONEY, created_at=DateTime)

INSERT_CASH_FLOW_ITEM_SQL = text(
    """
    INSERT INTO cash_flow_items (
        id, user_id, name, amount, flow_type, frequency, inflow_category,
        outflow_category, linked_account_id, notes, created_at, updated_at
    )
    VALUES (
        :id, :user_id, :name, :amount, :flow_type, :frequency,
        :inflow_category, :outflow_category, :linked_account_id, :notes,
        :created_at, :updated_at
    )
    """
).bindparams(
    bindparam("amount", type_=MONEY),
    bindparam("created_at", type_=DateTime),
    bindparam("updated_at", type_=DateTime),
)

UPDATE_CASH_FLOW_ITEM_SQL = text(
    """
    UPDATE cash_flow_items
    SET name = :name,
        amount = :amount,
        flow_type = :flow_type,
        frequency = :frequency,
        inflow_category = :inflow_category,
        outflow_category = :outflow_category,
        linked_account_id = :linked_account_id,
        notes = :notes,
        updated_at = :updated_at
    WHERE id = :id AND user_id = :user_id
    """
).bindparams(
    bindparam("amount", type_=MONEY),
    bindparam("updated_at", type_=DateTime),
)

DELETE_CASH_FLOW_ITEM_SQL = text(
    "DELETE FROM cash_flow_items WHERE id = :id AND user_id = :user_id"
)

SELECT_NET_WORTH_HISTORY_SQL = text(
    """
    SELECT id, user_id, month, year, net_worth,
           calculated_from_balance_sheet_id, recorded_at
    FROM net_worth_history
    WHERE user_id = :user_id
    ORDER BY year DESC, month DESC, recorded_at DESC
    """
).columns(net_worth=MONEY, recorded_at=DateTime)

SELECT_RECORDED_USERS_SQL = text(
    """
    SELECT DISTINCT user_id
    FROM net_worth_history
    WHERE month = :month AND year = :year
    """
)

INSERT_NET_WORTH_SQL = text(
    """
    INSERT INTO net_worth_history (
        id, user_id, month, year, net_worth,
        calculated_from_balance_sheet_id, recorded_at
    )
    VALUES (
        :id, :user_id, :month, :year, :net_worth,
        :calculated_from_balance_sheet_id, :recorded_at
    )
    """
).bindparams(
    bindparam("net_worth", type_=MONEY),
    bindparam("recorded_at", type_=DateTime),
)

SELECT_BALANCE_SHEETS_SQL = text(
    """
    SELECT id, user_id, assets, liabilities, notes
    FROM balance_sheets
    ORDER BY user_id
    """
).columns(assets=JSON, liabilities=JSON)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc).replace(tzinfo=None)


class SqlAlchemyFinanceRepository(FinanceRepositoryPort):
    """Repository backed by SQLAlchemy for the finance tables.

    Numeric fields go through ``parse_amount`` on the way out; rows that
    fail it are skipped with a warning.
    """

    def __init__(
        self,
        db_port: DatabaseEnginePort,
        logger=None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the finance engine.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the timestamp stored on writes.
        """
        self._db_port = db_port
        self._logger = logger or get_app_logger()
        self._clock = clock

    def list_accounts(self, user_id: str) -> list[Account]:
        with self._translate_errors("list accounts"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_ACCOUNTS_SQL,
                    {"user_id": user_id},
                ).all()
        return [
            account
            for account in (self._to_account(row) for row in rows)
            if account is not None
        ]

    def list_cash_flow_items(self, user_id: str) -> list[CashFlowItem]:
        with self._translate_errors("list cash flow items"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_CASH_FLOW_ITEMS_SQL,
                    {"user_id": user_id},
                ).all()
        return [
            item
            for item in (self._to_cash_flow_item(row) for row in rows)
            if item is not None
        ]

    def list_net_worth_history(self, user_id: str) -> list[NetWorthSnapshot]:
        with self._translate_errors("list net worth history"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_NET_WORTH_HISTORY_SQL,
                    {"user_id": user_id},
                ).all()
        snapshots = []
        for row in rows:
            try:
                net_worth = parse_amount(
                    row.net_worth,
                    field_name="net_worth",
                    allow_negative=True,
                )
            except InvalidAmountError as exc:
                self._logger.warning(f"Skipping snapshot {row.id}: {exc}")
                continue
            snapshots.append(
                NetWorthSnapshot(
                    id=row.id,
                    user_id=row.user_id,
                    month=int(row.month),
                    year=int(row.year),
                    net_worth=net_worth,
                    calculated_from_balance_sheet_id=(
                        row.calculated_from_balance_sheet_id
                    ),
                    recorded_at=row.recorded_at,
                )
            )
        return snapshots

    def insert_account(self, user_id: str, draft: AccountDraft) -> Account:
        now = self._clock()
        account_id = str(uuid.uuid4())
        params = self._account_params(draft)
        params.update(
            id=account_id,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        with self._translate_errors("insert account"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_ACCOUNT_SQL, params)
        return Account(
            id=account_id,
            user_id=user_id,
            account_type=draft.account_type,
            name=draft.name,
            balance=draft.balance,
            savings_amount=draft.savings_amount,
            created_at=now,
        )

    def update_account(
        self,
        user_id: str,
        account_id: str,
        draft: AccountDraft,
    ) -> Account:
        params = self._account_params(draft)
        params.update(id=account_id, user_id=user_id, updated_at=self._clock())
        with self._translate_errors("update account"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(UPDATE_ACCOUNT_SQL, params)
                if result.rowcount == 0:
                    raise RecordNotFoundError(
                        f"Account {account_id} not found for user {user_id}"
                    )
                row = conn.execute(
                    SELECT_ACCOUNT_SQL,
                    {"id": account_id, "user_id": user_id},
                ).first()
        account = self._to_account(row)
        if account is None:
            raise RepositoryError(f"Account {account_id} could not be read back")
        return account

    def delete_account(self, user_id: str, account_id: str) -> bool:
        with self._translate_errors("delete account"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_ACCOUNT_SQL,
                    {"id": account_id, "user_id": user_id},
                )
                deleted = result.rowcount
        return deleted > 0

    def insert_cash_flow_item(
        self,
        user_id: str,
        draft: CashFlowItemDraft,
    ) -> CashFlowItem:
        now = self._clock()
        item_id = str(uuid.uuid4())
        params = self._cash_flow_params(draft)
        params.update(
            id=item_id,
            user_id=user_id,
            created_at=now,
            updated_at=now,
        )
        with self._translate_errors("insert cash flow item"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_CASH_FLOW_ITEM_SQL, params)
        return CashFlowItem(
            id=item_id,
            user_id=user_id,
            name=draft.name,
            amount=draft.amount,
            flow_type=draft.flow_type,
            frequency=params["frequency"],
            inflow_category=draft.inflow_category,
            outflow_category=draft.outflow_category,
            linked_account_id=draft.linked_account_id,
            notes=draft.notes,
            created_at=now,
        )

    def update_cash_flow_item(
        self,
        user_id: str,
        item_id: str,
        draft: CashFlowItemDraft,
    ) -> CashFlowItem:
        params = self._cash_flow_params(draft)
        params.update(id=item_id, user_id=user_id, updated_at=self._clock())
        with self._translate_errors("update cash flow item"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(UPDATE_CASH_FLOW_ITEM_SQL, params)
                if result.rowcount == 0:
                    raise RecordNotFoundError(
                        f"Cash flow item {item_id} not found for user {user_id}"
                    )
                row = conn.execute(
                    SELECT_CASH_FLOW_ITEM_SQL,
                    {"id": item_id, "user_id": user_id},
                ).first()
        item = self._to_cash_flow_item(row)
        if item is None:
            raise RepositoryError(
                f"Cash flow item {item_id} could not be read back"
            )
        return item

    def delete_cash_flow_item(self, user_id: str, item_id: str) -> bool:
        with self._translate_errors("delete cash flow item"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                result = conn.execute(
                    DELETE_CASH_FLOW_ITEM_SQL,
                    {"id": item_id, "user_id": user_id},
                )
                deleted = result.rowcount
        return deleted > 0

    def list_balance_sheets(self) -> list[BalanceSheet]:
        with self._translate_errors("list balance sheets"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(SELECT_BALANCE_SHEETS_SQL).all()
        return [
            BalanceSheet(
                id=row.id,
                user_id=row.user_id,
                assets=self._load_mapping(row.assets),
                liabilities=self._load_mapping(row.liabilities),
                notes=row.notes,
            )
            for row in rows
        ]

    def list_recorded_user_ids(self, month: int, year: int) -> set[str]:
        with self._translate_errors("list recorded users"):
            engine = self._db_port.get_finance_engine()
            with engine.connect() as conn:
                rows = conn.execute(
                    SELECT_RECORDED_USERS_SQL,
                    {"month": month, "year": year},
                ).all()
        return {row.user_id for row in rows}

    def insert_net_worth_snapshots(
        self,
        snapshots: list[NetWorthSnapshot],
    ) -> int:
        if not snapshots:
            return 0
        payload = [
            {
                "id": snapshot.id,
                "user_id": snapshot.user_id,
                "month": snapshot.month,
                "year": snapshot.year,
                "net_worth": snapshot.net_worth,
                "calculated_from_balance_sheet_id": (
                    snapshot.calculated_from_balance_sheet_id
                ),
                "recorded_at": snapshot.recorded_at or self._clock(),
            }
            for snapshot in snapshots
        ]
        with self._translate_errors("insert net worth snapshots"):
            engine = self._db_port.get_finance_engine()
            with engine.begin() as conn:
                conn.execute(INSERT_NET_WORTH_SQL, payload)
        return len(payload)

    @contextmanager
    def _translate_errors(self, action: str):
        try:
            yield
        except SQLAlchemyError as exc:
            self._logger.error(f"Database error during {action}: {exc}")
            raise RepositoryError(f"Failed to {action}") from exc

    @staticmethod
    def _account_params(draft: AccountDraft) -> dict:
        return {
            "account_type": draft.account_type,
            "category": classify_account_type(draft.account_type),
            "name": draft.name,
            "balance": draft.balance,
            "savings_amount": draft.savings_amount,
        }

    @staticmethod
    def _cash_flow_params(draft: CashFlowItemDraft) -> dict:
        return {
            "name": draft.name,
            "amount": draft.amount,
            "flow_type": draft.flow_type,
            "frequency": draft.frequency or "monthly",
            "inflow_category": draft.inflow_category,
            "outflow_category": draft.outflow_category,
            "linked_account_id": draft.linked_account_id,
            "notes": draft.notes,
        }

    def _to_account(self, row) -> Account | None:
        if row is None:
            return None
        try:
            balance = parse_amount(
                row.balance,
                field_name="balance",
                allow_negative=True,
            )
            savings_amount = (
                parse_amount(row.savings_amount, field_name="savings_amount")
                if row.savings_amount is not None
                else None
            )
        except InvalidAmountError as exc:
            self._logger.warning(f"Skipping account {row.id}: {exc}")
            return None
        return Account(
            id=row.id,
            user_id=row.user_id,
            account_type=row.account_type,
            name=row.name,
            balance=balance,
            savings_amount=savings_amount,
            created_at=row.created_at,
        )

    def _to_cash_flow_item(self, row) -> CashFlowItem | None:
        if row is None:
            return None
        try:
            amount = parse_amount(row.amount)
        except InvalidAmountError as exc:
            self._logger.warning(f"Skipping cash flow item {row.id}: {exc}")
            return None
        inflow_category = row.inflow_category
        outflow_category = row.outflow_category
        if row.flow_type == INFLOW and outflow_category:
            self._logger.warning(
                f"Dropping outflow category {outflow_category!r} "
                f"from inflow item {row.id}"
            )
            outflow_category = None
        if row.flow_type == OUTFLOW and inflow_category:
            self._logger.warning(
                f"Dropping inflow category {inflow_category!r} "
                f"from outflow item {row.id}"
            )
            inflow_category = None
        return CashFlowItem(
            id=row.id,
            user_id=row.user_id,
            name=row.name,
            amount=amount,
            flow_type=row.flow_type,
            frequency=row.frequency,
            inflow_category=inflow_category,
            outflow_category=outflow_category,
            linked_account_id=row.linked_account_id,
            notes=row.notes,
            created_at=row.created_at,
        )

    @staticmethod
    def _load_mapping(value) -> dict[str, object]:
        if value is None:
            return {}
        if isinstance(value, str):
            value = json.loads(value)
        return dict(value) if isinstance(value, dict) else {}


__all__ = ["SqlAlchemyFinanceRepository"]
