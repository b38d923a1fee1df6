"""Domain models package."""

from .accounts import Account, AccountDraft
from .cashflow import CashFlowItem, CashFlowItemDraft
from .finance import (
    AllocationSegment,
    CashflowAllocation,
    CashflowSummary,
    CashflowView,
    DashboardMetrics,
    FinancialRatios,
    NetWorthSummary,
)
from .net_worth import BalanceSheet, NetWorthSnapshot

__all__ = [
    "Account",
    "AccountDraft",
    "CashFlowItem",
    "CashFlowItemDraft",
    "NetWorthSnapshot",
    "BalanceSheet",
    "NetWorthSummary",
    "CashflowSummary",
    "CashflowView",
    "FinancialRatios",
    "AllocationSegment",
    "CashflowAllocation",
    "DashboardMetrics",
]
