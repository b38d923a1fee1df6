"""Classification of accounts and cash-flow items into semantic buckets."""

import logging
from collections.abc import Iterable
from logging import Logger

from src.domain.constants import (
    ASSET,
    ASSET_ACCOUNT_TYPES,
    DEBT_PAYMENTS_CATEGORY,
    EXPENSES_CATEGORY,
    FLOW_TYPES,
    INFLOW,
    INFLOW_CATEGORIES,
    LIABILITY,
    LIABILITY_ACCOUNT_TYPES,
    OUTFLOW,
    OUTFLOW_CATEGORIES,
    SAVINGS_CATEGORY,
)
from src.domain.errors import (
    CategoryMismatchError,
    FinanceError,
    UnknownAccountTypeError,
)
from src.domain.models import Account, CashFlowItem

SAVINGS_BUCKET = "savings"
DEBT_PAYMENT_BUCKET = "debt_payment"
EXPENSE_BUCKET = "expense"
OTHER_OUTFLOW_BUCKET = "other"


def classify_account_type(account_type: str) -> str:
    """Return ``asset`` or ``liability`` for an account type.

    Args:
        account_type: Type code from the account taxonomy.

    Returns:
        str: The account category.

    Raises:
        UnknownAccountTypeError: If the type is not part of the taxonomy.
    """
    if account_type in ASSET_ACCOUNT_TYPES:
        return ASSET
    if account_type in LIABILITY_ACCOUNT_TYPES:
        return LIABILITY
    raise UnknownAccountTypeError(account_type)


def is_known_account_type(account_type: str) -> bool:
    return (
        account_type in ASSET_ACCOUNT_TYPES
        or account_type in LIABILITY_ACCOUNT_TYPES
    )


def split_accounts(
    accounts: Iterable[Account],
    *,
    strict: bool = False,
    logger: Logger | None = None,
) -> tuple[list[Account], list[Account]]:
    """Split accounts into assets and liabilities.

    Unknown account types raise in strict mode and are otherwise left out of
    both lists with a warning.

    Args:
        accounts: Accounts of a single user.
        strict: Whether unknown account types are fatal.
        logger: Logger used for warnings.

    Returns:
        tuple: Asset accounts and liability accounts, in input order.
    """
    resolved_logger = logger or logging.getLogger(__name__)
    assets: list[Account] = []
    liabilities: list[Account] = []
    for account in accounts:
        try:
            category = classify_account_type(account.account_type)
        except UnknownAccountTypeError:
            if strict:
                raise
            resolved_logger.warning(
                f"Excluding account {account.id} with unknown "
                f"account_type={account.account_type!r}"
            )
            continue
        if category == ASSET:
            assets.append(account)
        else:
            liabilities.append(account)
    return assets, liabilities


def is_inflow(item: CashFlowItem) -> bool:
    return item.flow_type == INFLOW


def is_outflow(item: CashFlowItem) -> bool:
    return item.flow_type == OUTFLOW


def classify_outflow(item: CashFlowItem) -> str:
    """Return the outflow bucket of a cash-flow item.

    Transfers and outflows without a category land in the ``other`` bucket,
    which only the income allocation counts.
    """
    if item.outflow_category == SAVINGS_CATEGORY:
        return SAVINGS_BUCKET
    if item.outflow_category == DEBT_PAYMENTS_CATEGORY:
        return DEBT_PAYMENT_BUCKET
    if item.outflow_category == EXPENSES_CATEGORY:
        return EXPENSE_BUCKET
    return OTHER_OUTFLOW_BUCKET


def validate_cash_flow_categories(
    flow_type: str,
    inflow_category: str | None,
    outflow_category: str | None,
) -> None:
    """Check that the categories of a cash-flow item match its flow type.

    Raises:
        FinanceError: If the flow type is unknown.
        CategoryMismatchError: If a category belongs to the other flow
            type or is not part of the taxonomy.
    """
    if flow_type not in FLOW_TYPES:
        raise FinanceError(f"Unknown flow type: {flow_type!r}")
    if flow_type == INFLOW:
        if outflow_category:
            raise CategoryMismatchError(
                f"Inflow items cannot carry outflow category "
                f"{outflow_category!r}"
            )
        if inflow_category and inflow_category not in INFLOW_CATEGORIES:
            raise CategoryMismatchError(
                f"{inflow_category!r} is not an inflow category"
            )
        return
    if inflow_category:
        raise CategoryMismatchError(
            f"Outflow items cannot carry inflow category {inflow_category!r}"
        )
    if outflow_category and outflow_category not in OUTFLOW_CATEGORIES:
        raise CategoryMismatchError(
            f"{outflow_category!r} is not an outflow category"
        )


__all__ = [
    "SAVINGS_BUCKET",
    "DEBT_PAYMENT_BUCKET",
    "EXPENSE_BUCKET",
    "OTHER_OUTFLOW_BUCKET",
    "classify_account_type",
    "is_known_account_type",
    "split_accounts",
    "is_inflow",
    "is_outflow",
    "classify_outflow",
    "validate_cash_flow_categories",
]
