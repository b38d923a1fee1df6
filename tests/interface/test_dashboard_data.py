"""Tests for the dashboard presentation data."""

from decimal import Decimal

import pytest

from src.adapters.interface.streamlit.dashboard_data import (
    account_type_label,
    build_account_rows,
    build_allocation_rows,
    build_cash_flow_rows,
    build_history_rows,
    format_category,
    format_currency,
)
from src.domain.models import Account, CashFlowItem, NetWorthSnapshot
from src.domain.services.finance import build_allocation


def test_format_currency() -> None:
    assert format_currency(Decimal("1234.5")) == "$1,234.50"
    assert format_currency(Decimal("-240000")) == "-$240,000.00"
    assert format_currency(Decimal("10"), "EUR") == "EUR 10.00"


def test_labels() -> None:
    assert format_category("debt_payments") == "Debt Payments"
    assert format_category(None) == "-"
    assert account_type_label("traditional_401k") == "401(k)"
    assert account_type_label("crypto_wallet") == "Crypto Wallet"


def test_allocation_rows_follow_visible_segments() -> None:
    allocation = build_allocation(
        Decimal("3000"),
        Decimal("1000"),
        Decimal("2000"),
    )

    rows = build_allocation_rows(allocation)

    assert [row["key"] for row in rows] == ["savings", "expenses"]
    assert [row["order"] for row in rows] == [0, 1]
    assert rows[0]["share_label"] == "33.3%"
    assert rows[1]["value_label"] == "$2,000.00"


def test_allocation_rows_for_shortfall() -> None:
    allocation = build_allocation(
        Decimal("5000"),
        Decimal("500"),
        Decimal("5200"),
    )

    rows = build_allocation_rows(allocation)

    assert rows[-1]["segment"] == "Shortfall"
    assert rows[-1]["share_label"] == "12.3%"
    assert sum(row["percent"] for row in rows) == pytest.approx(100.0)


def test_history_rows_are_sorted_oldest_first() -> None:
    history = [
        NetWorthSnapshot("b", "u", 2, 2025, Decimal("20")),
        NetWorthSnapshot("a", "u", 11, 2024, Decimal("10")),
    ]

    rows = build_history_rows(history)

    assert rows == [
        {"period": "2024-11", "net_worth": 10.0},
        {"period": "2025-02", "net_worth": 20.0},
    ]


def test_account_rows_split_by_category() -> None:
    accounts = [
        Account("1", "u", "checking_account", "Checking", Decimal("10")),
        Account("2", "u", "auto_loan", "Car", Decimal("5")),
        Account("3", "u", "crypto_wallet", "Coins", Decimal("1")),
    ]

    assets = build_account_rows(accounts, "asset")
    liabilities = build_account_rows(accounts, "liability")

    assert assets == [
        {"Name": "Checking", "Type": "Checking Account", "Balance": "$10.00"}
    ]
    assert [row["Type"] for row in liabilities] == ["Auto Loan"]


def test_cash_flow_rows_show_monthly_equivalent() -> None:
    items = [
        CashFlowItem(
            id="1",
            user_id="u",
            name="Insurance",
            amount=Decimal("1200"),
            flow_type="outflow",
            frequency="annual",
            outflow_category="expenses",
        )
    ]

    [row] = build_cash_flow_rows(items)

    assert row["Category"] == "Expenses"
    assert row["Frequency"] == "Annual"
    assert row["Monthly"] == "$100.00"
