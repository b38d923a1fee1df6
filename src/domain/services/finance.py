"""Domain services for finance aggregates."""

import logging
from collections.abc import Iterable, Sequence
from datetime import datetime
from decimal import Decimal
from logging import Logger

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models import (
    Account,
    AllocationSegment,
    BalanceSheet,
    CashFlowItem,
    CashflowAllocation,
    CashflowSummary,
    CashflowView,
    FinancialRatios,
    NetWorthSnapshot,
    NetWorthSummary,
)
from src.domain.models.finance import CashflowBasis
from src.domain.services.classification import (
    DEBT_PAYMENT_BUCKET,
    EXPENSE_BUCKET,
    SAVINGS_BUCKET,
    classify_outflow,
    is_inflow,
    is_outflow,
    split_accounts,
)
from src.domain.services.normalization import annual_total
from src.domain.services.validation import (
    ensure_single_user,
    validate_balance_sign,
)
from src.utils.decimal_utils import coerce_decimal

ZERO = Decimal("0")
HUNDRED = Decimal("100")


def compute_net_worth_summary(
    accounts: Sequence[Account],
    history: Sequence[NetWorthSnapshot] = (),
    *,
    strict: bool = False,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Compute net worth from current accounts, with a history fallback.

    Accounts always win when the user has any. Only a user without
    accounts gets the latest recorded snapshot; without both the net worth
    is zero.

    Args:
        accounts: Accounts of a single user.
        history: Net worth snapshots of the same user, in any order.
        strict: Whether unknown account types are fatal.
        logger: Logger used for warnings.

    Returns:
        NetWorthSummary: Computed asset, liability, and net worth totals.
    """
    resolved_logger = logger or logging.getLogger(__name__)
    owner = ensure_single_user(accounts)
    ensure_single_user(history, owner)

    if not accounts:
        snapshot = latest_snapshot(history)
        if snapshot is None:
            return NetWorthSummary(
                asset_total=ZERO,
                liability_total=ZERO,
                net_worth=ZERO,
                source="none",
            )
        return NetWorthSummary(
            asset_total=ZERO,
            liability_total=ZERO,
            net_worth=coerce_decimal(snapshot.net_worth),
            source="history",
        )

    assets, liabilities = split_accounts(
        accounts,
        strict=strict,
        logger=resolved_logger,
    )
    asset_total = ZERO
    liability_total = ZERO
    for account in assets:
        balance = coerce_decimal(account.balance)
        validate_balance_sign(account.account_type, balance, resolved_logger)
        asset_total += balance
    for account in liabilities:
        balance = coerce_decimal(account.balance)
        validate_balance_sign(account.account_type, balance, resolved_logger)
        liability_total += abs(balance)

    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        source="accounts",
    )


def latest_snapshot(
    history: Iterable[NetWorthSnapshot],
) -> NetWorthSnapshot | None:
    """Return the most recent snapshot by period, then recording time."""
    return max(
        history,
        key=lambda snapshot: (
            snapshot.year,
            snapshot.month,
            snapshot.recorded_at or datetime.min,
        ),
        default=None,
    )


def compute_cashflow_summary(
    items: Sequence[CashFlowItem],
    basis: CashflowBasis = "annual",
) -> CashflowSummary:
    """Compute annualized inflow and outflow totals.

    On the monthly basis each side is divided by twelve before the
    difference is taken.

    Args:
        items: Cash-flow items of a single user.
        basis: ``annual`` or ``monthly``.

    Returns:
        CashflowSummary: Totals on the requested basis.
    """
    ensure_single_user(items)
    total_in = annual_total(item for item in items if is_inflow(item))
    total_out = annual_total(item for item in items if is_outflow(item))
    if basis == "monthly":
        total_in = total_in / MONTHS_PER_YEAR
        total_out = total_out / MONTHS_PER_YEAR
    elif basis != "annual":
        raise ValueError(f"Unsupported cashflow basis: {basis}")
    return CashflowSummary(total_in=total_in, total_out=total_out, basis=basis)


def build_cashflow_view(
    items: Sequence[CashFlowItem],
    accounts: Sequence[Account] = (),
    basis: CashflowBasis = "annual",
) -> CashflowView:
    """Build the cashflow summary with its inflow and outflow items."""
    ensure_single_user(accounts, ensure_single_user(items))
    account_savings_total = sum(
        (coerce_decimal(account.savings_amount) for account in accounts),
        ZERO,
    )
    return CashflowView(
        summary=compute_cashflow_summary(items, basis),
        incoming=[item for item in items if is_inflow(item)],
        outgoing=[item for item in items if is_outflow(item)],
        account_savings_total=account_savings_total,
    )


def compute_savings_ratio(total_savings: Decimal, total_inflow: Decimal) -> Decimal:
    """Return savings as a percentage of inflow, or zero without inflow."""
    if total_inflow == 0:
        return ZERO
    return total_savings / total_inflow * HUNDRED


def compute_burn_rate(
    total_expenses: Decimal,
    total_debt_payments: Decimal,
    total_inflow: Decimal,
) -> Decimal:
    """Return (expenses - debt payments) as a percentage of inflow."""
    if total_inflow == 0:
        return ZERO
    return (total_expenses - total_debt_payments) / total_inflow * HUNDRED


def compute_financial_ratios(items: Sequence[CashFlowItem]) -> FinancialRatios:
    """Compute savings ratio and burn rate from annualized cash flows.

    Args:
        items: Cash-flow items of a single user.

    Returns:
        FinancialRatios: Ratios in percent with their annual totals.
    """
    ensure_single_user(items)
    outflows = [item for item in items if is_outflow(item)]
    total_inflow = annual_total(item for item in items if is_inflow(item))
    total_savings = annual_total(
        item for item in outflows if classify_outflow(item) == SAVINGS_BUCKET
    )
    total_expenses = annual_total(
        item for item in outflows if classify_outflow(item) == EXPENSE_BUCKET
    )
    total_debt_payments = annual_total(
        item
        for item in outflows
        if classify_outflow(item) == DEBT_PAYMENT_BUCKET
    )
    return FinancialRatios(
        total_inflow=total_inflow,
        total_savings=total_savings,
        total_expenses=total_expenses,
        total_debt_payments=total_debt_payments,
        savings_ratio=compute_savings_ratio(total_savings, total_inflow),
        burn_rate=compute_burn_rate(
            total_expenses,
            total_debt_payments,
            total_inflow,
        ),
    )


def build_allocation(
    income: Decimal,
    savings: Decimal,
    expenses: Decimal,
) -> CashflowAllocation:
    """Split monthly income into savings, expenses and the remainder.

    The base is income plus any shortfall. Savings and expenses take their
    income-funded share of the base and the residual takes the rest, so the
    percentages of the three segments always add up to 100. Without income
    there is nothing to allocate and no segments are built.

    Args:
        income: Monthly income.
        savings: Monthly savings outflow.
        expenses: Monthly non-savings outflow.

    Returns:
        CashflowAllocation: Monthly figures and all three segments.
    """
    net = income - savings - expenses
    shortfall = max(ZERO, -net)
    base = income + shortfall
    allocation_kwargs = dict(
        income=income,
        savings=savings,
        expenses=expenses,
        net=net,
    )
    if income <= 0 or base <= 0:
        return CashflowAllocation(**allocation_kwargs, segments=[])

    funded_savings = min(savings, max(income, ZERO))
    funded_expenses = min(expenses, max(income - funded_savings, ZERO))
    residual_value = abs(net)
    is_available = net >= 0
    segments = [
        AllocationSegment(
            key="savings",
            label="Savings",
            value=savings,
            percent=funded_savings / base * HUNDRED,
        ),
        AllocationSegment(
            key="expenses",
            label="Expenses",
            value=expenses,
            percent=funded_expenses / base * HUNDRED,
        ),
        AllocationSegment(
            key="available" if is_available else "shortfall",
            label="Available" if is_available else "Shortfall",
            value=residual_value,
            percent=residual_value / base * HUNDRED,
            residual=True,
        ),
    ]
    return CashflowAllocation(**allocation_kwargs, segments=segments)


def compute_cashflow_allocation(
    items: Sequence[CashFlowItem],
) -> CashflowAllocation:
    """Compute the monthly allocation of income from cash-flow items."""
    ensure_single_user(items)
    outflows = [item for item in items if is_outflow(item)]
    income = annual_total(item for item in items if is_inflow(item))
    savings = annual_total(
        item for item in outflows if classify_outflow(item) == SAVINGS_BUCKET
    )
    expenses = annual_total(
        item for item in outflows if classify_outflow(item) != SAVINGS_BUCKET
    )
    return build_allocation(
        income / MONTHS_PER_YEAR,
        savings / MONTHS_PER_YEAR,
        expenses / MONTHS_PER_YEAR,
    )


def compute_balance_sheet_net_worth(sheet: BalanceSheet) -> Decimal:
    """Return numeric assets minus numeric liabilities of a balance sheet.

    Non-numeric values (text, nested objects, booleans) are ignored.
    """
    return _sum_numeric(sheet.assets) - _sum_numeric(sheet.liabilities)


def _sum_numeric(values: dict[str, object] | None) -> Decimal:
    total = ZERO
    for value in (values or {}).values():
        if isinstance(value, bool) or not isinstance(
            value, (int, float, Decimal)
        ):
            continue
        amount = coerce_decimal(value)
        if amount.is_finite():
            total += amount
    return total


__all__ = [
    "compute_net_worth_summary",
    "latest_snapshot",
    "compute_cashflow_summary",
    "build_cashflow_view",
    "compute_savings_ratio",
    "compute_burn_rate",
    "compute_financial_ratios",
    "build_allocation",
    "compute_cashflow_allocation",
    "compute_balance_sheet_net_worth",
]
