"""Domain package for business rules and core models."""

from .constants import (
    ASSET_ACCOUNT_TYPES,
    FREQUENCY_MULTIPLIERS,
    LIABILITY_ACCOUNT_TYPES,
)
from .errors import (
    CategoryMismatchError,
    FinanceError,
    InvalidAmountError,
    MixedUserRecordsError,
    UnknownAccountTypeError,
)
from .models import (
    Account,
    CashFlowItem,
    CashflowAllocation,
    CashflowView,
    DashboardMetrics,
    FinancialRatios,
    NetWorthSnapshot,
    NetWorthSummary,
)
from .policies import describe_burn_rate, describe_savings_ratio
from .services import (
    annualize,
    classify_account_type,
    compute_cashflow_allocation,
    compute_financial_ratios,
    compute_net_worth_summary,
    monthly,
)

__all__ = [
    "ASSET_ACCOUNT_TYPES",
    "LIABILITY_ACCOUNT_TYPES",
    "FREQUENCY_MULTIPLIERS",
    "CategoryMismatchError",
    "FinanceError",
    "InvalidAmountError",
    "MixedUserRecordsError",
    "UnknownAccountTypeError",
    "Account",
    "CashFlowItem",
    "CashflowAllocation",
    "CashflowView",
    "DashboardMetrics",
    "FinancialRatios",
    "NetWorthSnapshot",
    "NetWorthSummary",
    "describe_burn_rate",
    "describe_savings_ratio",
    "annualize",
    "classify_account_type",
    "compute_cashflow_allocation",
    "compute_financial_ratios",
    "compute_net_worth_summary",
    "monthly",
]
