"""Application use cases package."""

from .get_net_worth_summary import (
    GetNetWorthSummaryUseCase,
    NetWorthSummary,
)
from .get_cashflow import GetCashflowUseCase
from .get_financial_ratios import GetFinancialRatiosUseCase
from .get_cashflow_allocation import GetCashflowAllocationUseCase
from .get_dashboard_metrics import GetDashboardMetricsUseCase
from .manage_accounts import (
    AddAccountUseCase,
    DeleteAccountUseCase,
    UpdateAccountUseCase,
    build_account_draft,
)
from .manage_cash_flow_items import (
    AddCashFlowItemUseCase,
    DeleteCashFlowItemUseCase,
    UpdateCashFlowItemUseCase,
    build_cash_flow_draft,
)
from .record_monthly_net_worth import (
    RecordMonthlyNetWorthUseCase,
    RecordNetWorthResult,
)

__all__ = [
    "GetNetWorthSummaryUseCase",
    "NetWorthSummary",
    "GetCashflowUseCase",
    "GetFinancialRatiosUseCase",
    "GetCashflowAllocationUseCase",
    "GetDashboardMetricsUseCase",
    "AddAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
    "build_account_draft",
    "AddCashFlowItemUseCase",
    "UpdateCashFlowItemUseCase",
    "DeleteCashFlowItemUseCase",
    "build_cash_flow_draft",
    "RecordMonthlyNetWorthUseCase",
    "RecordNetWorthResult",
]
