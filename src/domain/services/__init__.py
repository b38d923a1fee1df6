"""Domain services package."""

from .classification import (
    classify_account_type,
    classify_outflow,
    split_accounts,
    validate_cash_flow_categories,
)
from .finance import (
    build_allocation,
    build_cashflow_view,
    compute_balance_sheet_net_worth,
    compute_burn_rate,
    compute_cashflow_allocation,
    compute_cashflow_summary,
    compute_financial_ratios,
    compute_net_worth_summary,
    compute_savings_ratio,
    latest_snapshot,
)
from .normalization import annualize, monthly, normalize_frequency
from .validation import ensure_single_user, parse_amount, validate_balance_sign

__all__ = [
    "classify_account_type",
    "classify_outflow",
    "split_accounts",
    "validate_cash_flow_categories",
    "build_allocation",
    "build_cashflow_view",
    "compute_balance_sheet_net_worth",
    "compute_burn_rate",
    "compute_cashflow_allocation",
    "compute_cashflow_summary",
    "compute_financial_ratios",
    "compute_net_worth_summary",
    "compute_savings_ratio",
    "latest_snapshot",
    "annualize",
    "monthly",
    "normalize_frequency",
    "ensure_single_user",
    "parse_amount",
    "validate_balance_sign",
]
