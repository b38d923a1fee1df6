"""Domain models for financial aggregates."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Literal

from src.domain.constants import NEGLIGIBLE_SEGMENT_VALUE
from src.domain.models.accounts import Account
from src.domain.models.cashflow import CashFlowItem
from src.domain.models.net_worth import NetWorthSnapshot

NetWorthSource = Literal["accounts", "history", "none"]
CashflowBasis = Literal["annual", "monthly"]


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset balances.
        liability_total: Sum of liability balances.
        net_worth: Assets minus liabilities.
        source: Where the figure came from (current accounts, the latest
            history snapshot, or nothing at all).
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    source: NetWorthSource = "accounts"


@dataclass(frozen=True)
class CashflowSummary:
    """Summary of cashflow totals on a single basis."""

    total_in: Decimal
    total_out: Decimal
    basis: CashflowBasis = "annual"

    @property
    def difference(self) -> Decimal:
        """Return total_in minus total_out."""
        return self.total_in - self.total_out


@dataclass(frozen=True)
class CashflowView:
    """Cashflow summary and details for UI rendering."""

    summary: CashflowSummary
    incoming: list[CashFlowItem]
    outgoing: list[CashFlowItem]
    account_savings_total: Decimal = Decimal("0")


@dataclass(frozen=True)
class FinancialRatios:
    """Savings ratio and burn rate with the annual totals behind them."""

    total_inflow: Decimal
    total_savings: Decimal
    total_expenses: Decimal
    total_debt_payments: Decimal
    savings_ratio: Decimal
    burn_rate: Decimal


@dataclass(frozen=True)
class AllocationSegment:
    """Named share of monthly income for the allocation bar.

    Attributes:
        key: ``savings``, ``expenses``, ``available`` or ``shortfall``.
        label: Display label.
        value: Monthly amount of the segment (always non-negative).
        percent: Share of the allocation base in percent.
        residual: Whether this is the available/shortfall remainder.
    """

    key: str
    label: str
    value: Decimal
    percent: Decimal
    residual: bool = False

    @property
    def is_negative(self) -> bool:
        return self.key == "shortfall"


@dataclass(frozen=True)
class CashflowAllocation:
    """Monthly income split into savings, expenses and the remainder."""

    income: Decimal
    savings: Decimal
    expenses: Decimal
    net: Decimal
    segments: list[AllocationSegment] = field(default_factory=list)

    @property
    def base(self) -> Decimal:
        """Return the denominator the segment percentages refer to."""
        return self.income + max(Decimal("0"), -self.net)

    @property
    def visible_segments(self) -> list[AllocationSegment]:
        """Return segments large enough to draw."""
        return [
            segment
            for segment in self.segments
            if segment.value > NEGLIGIBLE_SEGMENT_VALUE
        ]


@dataclass(frozen=True)
class DashboardMetrics:
    """Everything the dashboard shows for one user after one fetch pass."""

    user_id: str
    net_worth: NetWorthSummary
    cashflow: CashflowView
    ratios: FinancialRatios
    allocation: CashflowAllocation
    net_worth_history: list[NetWorthSnapshot] = field(default_factory=list)
    accounts: list[Account] = field(default_factory=list)
    load_errors: tuple[str, ...] = ()


__all__ = [
    "NetWorthSummary",
    "CashflowSummary",
    "CashflowView",
    "FinancialRatios",
    "AllocationSegment",
    "CashflowAllocation",
    "DashboardMetrics",
]
