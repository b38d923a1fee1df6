"""Tests for the GetCashflowUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.finance_repository import RepositoryError
from src.application.use_cases.get_cashflow import GetCashflowUseCase
from src.domain.models import Account, CashFlowItem
from src.infrastructure.memory_repository import InMemoryFinanceRepository


def _item(item_id: str, flow_type: str, amount: str, **kwargs) -> CashFlowItem:
    return CashFlowItem(
        id=item_id,
        user_id="user-1",
        name=item_id,
        amount=Decimal(amount),
        flow_type=flow_type,
        **kwargs,
    )


def _repository() -> InMemoryFinanceRepository:
    return InMemoryFinanceRepository(
        accounts=[
            Account(
                id="savings",
                user_id="user-1",
                account_type="savings_account",
                name="Savings",
                balance=Decimal("1000"),
                savings_amount=Decimal("200"),
            )
        ],
        cash_flow_items=[
            _item("salary", "inflow", "5000", inflow_category="salary"),
            _item(
                "rent",
                "outflow",
                "1500",
                outflow_category="expenses",
            ),
            _item(
                "insurance",
                "outflow",
                "1200",
                frequency="annual",
                outflow_category="expenses",
            ),
        ],
    )


def test_execute_returns_annual_totals_and_items() -> None:
    view = GetCashflowUseCase(_repository(), logger=MagicMock()).execute(
        "user-1"
    )

    assert view.summary.total_in == Decimal("60000")
    assert view.summary.total_out == Decimal("19200")
    assert view.summary.difference == Decimal("40800")
    assert [item.id for item in view.incoming] == ["salary"]
    assert {item.id for item in view.outgoing} == {"rent", "insurance"}
    assert view.account_savings_total == Decimal("200")


def test_execute_monthly_basis() -> None:
    view = GetCashflowUseCase(_repository(), logger=MagicMock()).execute(
        "user-1",
        basis="monthly",
    )

    assert view.summary.total_in == Decimal("5000")
    assert view.summary.total_out == Decimal("1600")
    assert view.summary.basis == "monthly"


def test_execute_degrades_failed_fetch_to_empty_view() -> None:
    repository = MagicMock()
    repository.list_cash_flow_items.side_effect = RepositoryError("boom")
    repository.list_accounts.return_value = []
    logger = MagicMock()

    view = GetCashflowUseCase(repository, logger=logger).execute("user-1")

    assert view.summary.total_in == Decimal("0")
    assert view.incoming == []
    assert view.outgoing == []
    assert "Failed to load cash flow data" in logger.error.call_args[0][0]


def test_execute_collects_load_notices() -> None:
    repository = MagicMock()
    repository.list_cash_flow_items.side_effect = RepositoryError("boom")
    repository.list_accounts.return_value = []
    errors: list[str] = []

    GetCashflowUseCase(repository, logger=MagicMock()).execute(
        "user-1",
        errors=errors,
    )

    assert errors == ["Failed to load cash flow data"]
