"""Tests for the SQLAlchemy finance repository on an in-memory SQLite DB."""

from datetime import datetime
from decimal import Decimal
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool

from src.application.ports.finance_repository import (
    RecordNotFoundError,
    RepositoryError,
)
from src.domain.models import AccountDraft, CashFlowItemDraft, NetWorthSnapshot
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.schema import ensure_schema


class _DbPort:
    def __init__(self, engine) -> None:
        self.engine = engine

    def get_finance_engine(self):
        return self.engine


def _engine(with_schema: bool = True):
    engine = create_engine(
        "sqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    if with_schema:
        ensure_schema(engine)
    return engine


def _repository(engine=None, logger=None) -> SqlAlchemyFinanceRepository:
    return SqlAlchemyFinanceRepository(
        _DbPort(engine or _engine()),
        logger=logger or MagicMock(),
        clock=lambda: datetime(2025, 6, 1, 9, 30),
    )


def test_insert_and_list_accounts_round_trip() -> None:
    repository = _repository()
    created = repository.insert_account(
        "alice",
        AccountDraft(
            "brokerage_account",
            "Brokerage",
            Decimal("1234.56"),
            Decimal("100"),
        ),
    )
    repository.insert_account(
        "bob",
        AccountDraft("mortgage", "Home", Decimal("1000")),
    )

    [account] = repository.list_accounts("alice")

    assert account.id == created.id
    assert account.account_type == "brokerage_account"
    assert account.balance == Decimal("1234.56")
    assert account.savings_amount == Decimal("100")
    assert account.created_at == datetime(2025, 6, 1, 9, 30)


def test_update_and_delete_account() -> None:
    repository = _repository()
    created = repository.insert_account(
        "alice",
        AccountDraft("credit_card", "Card", Decimal("500")),
    )

    updated = repository.update_account(
        "alice",
        created.id,
        AccountDraft("credit_card", "Card", Decimal("250")),
    )

    assert updated.balance == Decimal("250")
    assert repository.delete_account("bob", created.id) is False
    assert repository.delete_account("alice", created.id) is True
    assert repository.list_accounts("alice") == []


def test_update_missing_account_raises() -> None:
    with pytest.raises(RecordNotFoundError):
        _repository().update_account(
            "alice",
            "missing",
            AccountDraft("credit_card", "Card", Decimal("1")),
        )


def test_cash_flow_items_round_trip() -> None:
    repository = _repository()
    created = repository.insert_cash_flow_item(
        "alice",
        CashFlowItemDraft(
            name="Salary",
            amount=Decimal("5000"),
            flow_type="inflow",
            frequency=None,
            inflow_category="salary",
            notes="net pay",
        ),
    )

    [item] = repository.list_cash_flow_items("alice")
    updated = repository.update_cash_flow_item(
        "alice",
        created.id,
        CashFlowItemDraft(
            name="Salary",
            amount=Decimal("5200"),
            flow_type="inflow",
            frequency="bi-weekly",
            inflow_category="salary",
        ),
    )

    assert created.frequency == "monthly"
    assert item.amount == Decimal("5000")
    assert item.inflow_category == "salary"
    assert item.notes == "net pay"
    assert updated.amount == Decimal("5200")
    assert updated.frequency == "bi-weekly"
    assert repository.delete_cash_flow_item("alice", created.id) is True
    assert repository.delete_cash_flow_item("alice", created.id) is False


def test_mismatched_category_is_dropped_on_read() -> None:
    engine = _engine()
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "INSERT INTO cash_flow_items "
            "(id, user_id, name, amount, flow_type, frequency, "
            "inflow_category, outflow_category) "
            "VALUES (?, ?, ?, ?, ?, ?, ?, ?)",
            ("i1", "alice", "Odd", "100", "outflow", "weekly", "salary",
             "expenses"),
        )
    logger = MagicMock()

    [item] = _repository(engine, logger).list_cash_flow_items("alice")

    assert item.inflow_category is None
    assert item.outflow_category == "expenses"
    logger.warning.assert_called_once()


def test_net_worth_history_and_recorded_users() -> None:
    repository = _repository()
    inserted = repository.insert_net_worth_snapshots(
        [
            NetWorthSnapshot("a", "alice", 1, 2025, Decimal("-10.50")),
            NetWorthSnapshot("b", "alice", 3, 2025, Decimal("20")),
            NetWorthSnapshot("c", "bob", 3, 2025, Decimal("30")),
        ]
    )

    history = repository.list_net_worth_history("alice")

    assert inserted == 3
    assert [s.id for s in history] == ["b", "a"]
    assert history[1].net_worth == Decimal("-10.50")
    assert history[0].recorded_at == datetime(2025, 6, 1, 9, 30)
    assert repository.list_recorded_user_ids(3, 2025) == {"alice", "bob"}
    assert repository.insert_net_worth_snapshots([]) == 0


def test_list_balance_sheets_decodes_json() -> None:
    engine = _engine()
    with engine.begin() as conn:
        conn.exec_driver_sql(
            "INSERT INTO balance_sheets (id, user_id, assets, liabilities) "
            "VALUES (?, ?, ?, ?)",
            ("s1", "alice", '{"cash": 1000}', '{"card": 200}'),
        )

    [sheet] = _repository(engine).list_balance_sheets()

    assert sheet.user_id == "alice"
    assert sheet.assets == {"cash": 1000}
    assert sheet.liabilities == {"card": 200}


def test_database_errors_become_repository_errors() -> None:
    """A missing table should surface as RepositoryError and be logged."""
    logger = MagicMock()
    repository = _repository(_engine(with_schema=False), logger)

    with pytest.raises(RepositoryError) as exc_info:
        repository.list_accounts("alice")

    assert isinstance(exc_info.value.__cause__, OperationalError)
    logger.error.assert_called_once()


def test_invalid_stored_amount_skips_row() -> None:
    logger = MagicMock()
    repository = _repository(logger=logger)
    row = SimpleNamespace(
        id="acc-1",
        user_id="alice",
        account_type="checking_account",
        name="Broken",
        balance="NaN",
        savings_amount=None,
        created_at=None,
    )

    assert repository._to_account(row) is None
    assert "acc-1" in logger.warning.call_args[0][0]


def test_load_mapping_accepts_text_and_objects() -> None:
    load = SqlAlchemyFinanceRepository._load_mapping

    assert load('{"a": 1}') == {"a": 1}
    assert load({"b": 2}) == {"b": 2}
    assert load(None) == {}
    assert load("[1, 2]") == {}
