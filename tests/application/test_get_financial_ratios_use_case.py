"""Tests for the GetFinancialRatiosUseCase."""

from decimal import Decimal
from unittest.mock import MagicMock

from src.application.ports.finance_repository import RepositoryError
from src.application.use_cases.get_financial_ratios import (
    GetFinancialRatiosUseCase,
)
from src.domain.models import CashFlowItem
from src.infrastructure.memory_repository import InMemoryFinanceRepository


def _item(item_id: str, flow_type: str, amount: str, category=None):
    return CashFlowItem(
        id=item_id,
        user_id="user-1",
        name=item_id,
        amount=Decimal(amount),
        flow_type=flow_type,
        outflow_category=category,
    )


def test_execute_computes_savings_ratio_and_burn_rate() -> None:
    repository = InMemoryFinanceRepository(
        cash_flow_items=[
            _item("salary", "inflow", "5000"),
            _item("401k", "outflow", "500", "savings"),
            _item("living", "outflow", "2500", "expenses"),
            _item("loan", "outflow", "500", "debt_payments"),
        ]
    )

    ratios = GetFinancialRatiosUseCase(repository, logger=MagicMock()).execute(
        "user-1"
    )

    assert ratios.savings_ratio == Decimal("10")
    assert ratios.burn_rate == Decimal("40")


def test_execute_returns_zero_ratios_when_fetch_fails() -> None:
    repository = MagicMock()
    repository.list_cash_flow_items.side_effect = RepositoryError("boom")
    logger = MagicMock()

    ratios = GetFinancialRatiosUseCase(repository, logger=logger).execute(
        "user-1"
    )

    assert ratios.savings_ratio == Decimal("0")
    assert ratios.burn_rate == Decimal("0")
    assert (
        "Failed to calculate financial ratios"
        in logger.error.call_args[0][0]
    )


def test_execute_collects_load_notices() -> None:
    repository = MagicMock()
    repository.list_cash_flow_items.side_effect = RepositoryError("boom")
    errors: list[str] = []

    GetFinancialRatiosUseCase(repository, logger=MagicMock()).execute(
        "user-1",
        errors=errors,
    )

    assert errors == ["Failed to calculate financial ratios"]
