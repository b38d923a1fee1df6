"""Presentation data for the dashboard charts and tables.

Pure transformations from domain results to rows the Streamlit and Altair
calls accept. The UI loads the metrics; nothing here performs IO.
"""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import ACCOUNT_TYPE_LABELS
from src.domain.models import (
    Account,
    CashFlowItem,
    CashflowAllocation,
    NetWorthSnapshot,
)
from src.domain.services.classification import (
    classify_account_type,
    is_known_account_type,
)
from src.domain.services.normalization import monthly, normalize_frequency

SEGMENT_COLORS = {
    "savings": "#2e7d32",
    "expenses": "#e76f51",
    "available": "#1b9aaa",
    "shortfall": "#b00020",
}


def format_currency(value: Decimal, currency_code: str = "USD") -> str:
    """Format currency values for display."""
    symbol = "$" if currency_code == "USD" else f"{currency_code} "
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


def format_category(value: str | None) -> str:
    """Turn a snake_case code into a title-cased label."""
    if not value:
        return "-"
    return value.replace("_", " ").title()


def account_type_label(account_type: str) -> str:
    """Return the display label of an account type."""
    return ACCOUNT_TYPE_LABELS.get(account_type, format_category(account_type))


def build_allocation_rows(
    allocation: CashflowAllocation,
    currency_code: str = "USD",
) -> list[dict[str, str | float | int]]:
    """Prepare stacked-bar rows for the visible allocation segments.

    Args:
        allocation: Monthly allocation computed by the domain.
        currency_code: Currency used for the tooltip labels.

    Returns:
        One row per visible segment, ordered as drawn.
    """
    rows: list[dict[str, str | float | int]] = []
    for order, segment in enumerate(allocation.visible_segments):
        rows.append(
            {
                "segment": segment.label,
                "key": segment.key,
                "order": order,
                "percent": float(segment.percent),
                "value": float(segment.value),
                "value_label": format_currency(segment.value, currency_code),
                "share_label": f"{segment.percent:.1f}%",
                "color": SEGMENT_COLORS.get(segment.key, "#6c8ead"),
            }
        )
    return rows


def build_history_rows(
    history: Sequence[NetWorthSnapshot],
) -> list[dict[str, str | float]]:
    """Prepare line-chart rows from net worth snapshots, oldest first."""
    ordered = sorted(history, key=lambda snapshot: snapshot.period)
    return [
        {
            "period": f"{snapshot.year:04d}-{snapshot.month:02d}",
            "net_worth": float(snapshot.net_worth),
        }
        for snapshot in ordered
    ]


def build_account_rows(
    accounts: Sequence[Account],
    category: str,
    currency_code: str = "USD",
) -> list[dict[str, str]]:
    """Return table rows for the accounts of one category.

    Accounts with an unknown type are left out of both tables.
    """
    rows = []
    for account in accounts:
        if not is_known_account_type(account.account_type):
            continue
        if classify_account_type(account.account_type) != category:
            continue
        rows.append(
            {
                "Name": account.name,
                "Type": account_type_label(account.account_type),
                "Balance": format_currency(account.balance, currency_code),
            }
        )
    return rows


def build_cash_flow_rows(
    items: Sequence[CashFlowItem],
    currency_code: str = "USD",
) -> list[dict[str, str]]:
    """Return table rows for a list of cash-flow items."""
    rows = []
    for item in items:
        category = item.inflow_category or item.outflow_category
        rows.append(
            {
                "Name": item.name,
                "Category": format_category(category),
                "Amount": format_currency(item.amount, currency_code),
                "Frequency": format_category(
                    normalize_frequency(item.frequency)
                ),
                "Monthly": format_currency(
                    monthly(item.amount, item.frequency),
                    currency_code,
                ),
            }
        )
    return rows


__all__ = [
    "SEGMENT_COLORS",
    "format_currency",
    "format_category",
    "account_type_label",
    "build_allocation_rows",
    "build_history_rows",
    "build_account_rows",
    "build_cash_flow_rows",
]
