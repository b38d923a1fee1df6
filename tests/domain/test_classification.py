"""Tests for account and cash-flow classification."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.domain.constants import (
    ASSET_ACCOUNT_TYPES,
    LIABILITY_ACCOUNT_TYPES,
)
from src.domain.errors import (
    CategoryMismatchError,
    FinanceError,
    UnknownAccountTypeError,
)
from src.domain.models import Account, CashFlowItem
from src.domain.services.classification import (
    DEBT_PAYMENT_BUCKET,
    EXPENSE_BUCKET,
    OTHER_OUTFLOW_BUCKET,
    SAVINGS_BUCKET,
    classify_account_type,
    classify_outflow,
    is_known_account_type,
    split_accounts,
    validate_cash_flow_categories,
)


def _account(account_id: str, account_type: str) -> Account:
    return Account(
        id=account_id,
        user_id="user-1",
        account_type=account_type,
        name=account_id,
        balance=Decimal("100"),
    )


def _outflow(category: str | None) -> CashFlowItem:
    return CashFlowItem(
        id="item",
        user_id="user-1",
        name="Outflow",
        amount=Decimal("10"),
        flow_type="outflow",
        outflow_category=category,
    )


def test_taxonomy_is_disjoint_and_complete() -> None:
    """Asset and liability types should never overlap."""
    assert len(ASSET_ACCOUNT_TYPES) == 11
    assert len(LIABILITY_ACCOUNT_TYPES) == 5
    assert not set(ASSET_ACCOUNT_TYPES) & set(LIABILITY_ACCOUNT_TYPES)


@pytest.mark.parametrize("account_type", ASSET_ACCOUNT_TYPES)
def test_classify_asset_types(account_type: str) -> None:
    assert classify_account_type(account_type) == "asset"


@pytest.mark.parametrize("account_type", LIABILITY_ACCOUNT_TYPES)
def test_classify_liability_types(account_type: str) -> None:
    assert classify_account_type(account_type) == "liability"


def test_classify_unknown_type_raises() -> None:
    with pytest.raises(UnknownAccountTypeError) as exc_info:
        classify_account_type("crypto_wallet")

    assert exc_info.value.account_type == "crypto_wallet"
    assert not is_known_account_type("crypto_wallet")


def test_split_accounts_excludes_unknown_types_with_warning() -> None:
    """Unknown types should be left out of both lists and logged."""
    logger = MagicMock()
    accounts = [
        _account("checking", "checking_account"),
        _account("mystery", "crypto_wallet"),
        _account("card", "credit_card"),
    ]

    assets, liabilities = split_accounts(accounts, logger=logger)

    assert [account.id for account in assets] == ["checking"]
    assert [account.id for account in liabilities] == ["card"]
    logger.warning.assert_called_once()
    assert "crypto_wallet" in logger.warning.call_args[0][0]


def test_split_accounts_strict_mode_raises() -> None:
    with pytest.raises(UnknownAccountTypeError):
        split_accounts([_account("mystery", "crypto_wallet")], strict=True)


@pytest.mark.parametrize(
    ("category", "bucket"),
    [
        ("savings", SAVINGS_BUCKET),
        ("debt_payments", DEBT_PAYMENT_BUCKET),
        ("expenses", EXPENSE_BUCKET),
        ("transfers", OTHER_OUTFLOW_BUCKET),
        (None, OTHER_OUTFLOW_BUCKET),
    ],
)
def test_classify_outflow_buckets(category, bucket) -> None:
    """Only the expenses category lands in the expense bucket."""
    assert classify_outflow(_outflow(category)) == bucket


def test_validate_categories_accepts_matching_sides() -> None:
    validate_cash_flow_categories("inflow", "salary", None)
    validate_cash_flow_categories("outflow", None, "debt_payments")
    validate_cash_flow_categories("outflow", None, None)


def test_validate_categories_rejects_cross_side_category() -> None:
    with pytest.raises(CategoryMismatchError):
        validate_cash_flow_categories("inflow", None, "savings")
    with pytest.raises(CategoryMismatchError):
        validate_cash_flow_categories("outflow", "salary", None)


def test_validate_categories_rejects_unknown_values() -> None:
    with pytest.raises(CategoryMismatchError):
        validate_cash_flow_categories("inflow", "lottery", None)
    with pytest.raises(FinanceError):
        validate_cash_flow_categories("sideways", None, None)
