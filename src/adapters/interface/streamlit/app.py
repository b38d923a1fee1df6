"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal

import altair as alt
import streamlit as st

from src.application.ports.finance_repository import RepositoryError
from src.application.use_cases.get_dashboard_metrics import (
    DashboardMetrics,
    GetDashboardMetricsUseCase,
)
from src.application.use_cases.manage_accounts import (
    AddAccountUseCase,
    DeleteAccountUseCase,
    UpdateAccountUseCase,
)
from src.application.use_cases.manage_cash_flow_items import (
    AddCashFlowItemUseCase,
    DeleteCashFlowItemUseCase,
    UpdateCashFlowItemUseCase,
)
from src.adapters.interface.streamlit.dashboard_data import (
    account_type_label,
    build_account_rows,
    build_allocation_rows,
    build_cash_flow_rows,
    build_history_rows,
    format_category,
    format_currency,
)
from src.domain.constants import (
    ASSET,
    ASSET_ACCOUNT_TYPES,
    FREQUENCY_MULTIPLIERS,
    INFLOW,
    INFLOW_CATEGORIES,
    LIABILITY,
    LIABILITY_ACCOUNT_TYPES,
    OUTFLOW,
    OUTFLOW_CATEGORIES,
)
from src.domain.models import Account, CashFlowItem, CashflowAllocation
from src.domain.policies import describe_burn_rate, describe_savings_ratio
from src.infrastructure.container import (
    build_finance_repository,
    build_settings,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import AppSettings

NO_LINKED_ACCOUNT = ""
ACCOUNT_TYPE_OPTIONS = [*ASSET_ACCOUNT_TYPES, *LIABILITY_ACCOUNT_TYPES]


def _fetch_dashboard_metrics(user_id: str) -> DashboardMetrics:
    """Fetch every dashboard metric of a user from the repository."""
    settings = build_settings()
    repository = build_finance_repository(settings=settings)
    use_case = GetDashboardMetricsUseCase(
        repository,
        strict=settings.strict_account_types,
    )
    return use_case.execute(user_id, basis="monthly")


@st.cache_data(show_spinner=False)
def _load_dashboard_metrics(
    user_id: str,
    schema_version: int = 1,
) -> DashboardMetrics:
    """Cached wrapper around _fetch_dashboard_metrics."""
    _ = schema_version
    return _fetch_dashboard_metrics(user_id)


def _get_dashboard_metrics(user_id: str) -> DashboardMetrics:
    """Return cached metrics, keeping partial loads out of the cache."""
    metrics = _load_dashboard_metrics(user_id, schema_version=1)
    if metrics.load_errors:
        _load_dashboard_metrics.clear()
    return metrics


def _invalidate_cache() -> None:
    """Drop cached metrics after a record was changed."""
    st.cache_data.clear()


def _run_action(action, success_message: str, user_id: str) -> bool:
    """Run a write action and report its outcome in the page.

    Args:
        action: Zero-argument callable performing the write.
        success_message: Message shown when the write succeeds.
        user_id: User performing the action, for the usage log.

    Returns:
        bool: True when the action succeeded.
    """
    usage_logger = get_usage_logger()
    try:
        action()
    except (ValueError, LookupError, RepositoryError) as exc:
        usage_logger.warning(f"{user_id}: {success_message} failed: {exc}")
        st.error(str(exc))
        return False
    usage_logger.info(f"{user_id}: {success_message}")
    _invalidate_cache()
    st.success(success_message)
    return True


def _render_net_worth(metrics: DashboardMetrics, currency_code: str) -> None:
    """Render the assets, liabilities and net worth metrics."""
    summary = metrics.net_worth
    assets_col, liabilities_col, net_worth_col = st.columns(3)
    assets_col.metric(
        "Assets",
        format_currency(summary.asset_total, currency_code),
    )
    liabilities_col.metric(
        "Liabilities",
        format_currency(summary.liability_total, currency_code),
    )
    net_worth_col.metric(
        "Net Worth",
        format_currency(summary.net_worth, currency_code),
    )
    if summary.source == "history":
        st.caption("No accounts yet; showing the latest recorded net worth.")


def _render_balance_sheet(
    accounts: Sequence[Account],
    currency_code: str,
) -> None:
    """Render asset and liability tables side by side."""
    assets_col, liabilities_col = st.columns(2)
    for column, category, title in (
        (assets_col, ASSET, "Assets"),
        (liabilities_col, LIABILITY, "Liabilities"),
    ):
        rows = build_account_rows(accounts, category, currency_code)
        with column:
            st.subheader(title)
            if not rows:
                st.info(f"No {title.lower()} recorded yet.")
                continue
            st.dataframe(rows, width="stretch", hide_index=True)


def _render_cash_flow_lists(
    metrics: DashboardMetrics,
    currency_code: str,
) -> None:
    """Render the monthly cash flow summary and item lists."""
    view = metrics.cashflow
    in_col, out_col, net_col = st.columns(3)
    in_col.metric(
        "Monthly Inflow",
        format_currency(view.summary.total_in, currency_code),
    )
    out_col.metric(
        "Monthly Outflow",
        format_currency(view.summary.total_out, currency_code),
    )
    net_col.metric(
        "Net Cash Flow",
        format_currency(view.summary.difference, currency_code),
    )
    if view.account_savings_total:
        st.caption(
            "Recurring savings declared on accounts: "
            f"{format_currency(view.account_savings_total, currency_code)}"
        )

    incoming_col, outgoing_col = st.columns(2)
    for column, items, title in (
        (incoming_col, view.incoming, "Inflows"),
        (outgoing_col, view.outgoing, "Outflows"),
    ):
        with column:
            st.subheader(title)
            if not items:
                st.info(f"No {title.lower()} recorded yet.")
                continue
            st.dataframe(
                build_cash_flow_rows(items, currency_code),
                width="stretch",
                hide_index=True,
            )


def _render_ratios(metrics: DashboardMetrics) -> None:
    """Render the savings ratio and burn rate with guidance."""
    ratios = metrics.ratios
    savings_col, burn_col = st.columns(2)
    with savings_col:
        st.metric("Savings Ratio", f"{ratios.savings_ratio:.1f}%")
        st.caption(describe_savings_ratio(ratios.savings_ratio))
    with burn_col:
        st.metric("Burn Rate", f"{ratios.burn_rate:.1f}%")
        st.caption(describe_burn_rate(ratios.burn_rate))


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Check that the numpy and pandas modules Altair relies on are usable.

    Returns:
        tuple: ``(True, None)`` when charts can be drawn, otherwise
        ``(False, message)`` describing the broken dependency.
    """
    try:
        import numpy
        import pandas
    except ImportError as exc:
        return False, f"Charts are unavailable: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "Charts are unavailable: numpy is missing ndarray."
    if not hasattr(pandas, "Timestamp"):
        return False, "Charts are unavailable: pandas is missing Timestamp."
    return True, None


def _render_allocation_chart(
    allocation: CashflowAllocation,
    currency_code: str,
) -> None:
    """Render a single stacked bar of the monthly income allocation."""
    st.subheader("Monthly Cash Flow Allocation")
    data = build_allocation_rows(allocation, currency_code)
    if not data:
        st.info("Add income to see how it is allocated.")
        return
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        st.dataframe(data, width="stretch", hide_index=True)
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar(
        cornerRadius=4,
    ).encode(
        x=alt.X(
            "percent:Q",
            stack="zero",
            title=None,
            scale=alt.Scale(domain=[0, 100]),
        ),
        color=alt.Color(
            "segment:N",
            scale=alt.Scale(
                domain=[row["segment"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None),
        ),
        order=alt.Order("order:Q"),
        tooltip=[
            alt.Tooltip("segment:N"),
            alt.Tooltip("value_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    ).properties(height=80)
    st.altair_chart(chart, width="stretch")


def _render_history_chart(metrics: DashboardMetrics) -> None:
    """Render the recorded net worth over time."""
    data = build_history_rows(metrics.net_worth_history)
    if not data:
        return
    st.subheader("Net Worth History")
    ok, message = _check_altair_dependencies()
    if not ok:
        st.warning(message)
        st.dataframe(data, width="stretch", hide_index=True)
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("period:O", title=None),
        y=alt.Y("net_worth:Q", title="Net worth"),
        tooltip=[alt.Tooltip("period:O"), alt.Tooltip("net_worth:Q")],
    )
    st.altair_chart(chart, width="stretch")


def _render_account_forms(
    user_id: str,
    accounts: Sequence[Account],
) -> None:
    """Render the forms to add, edit and delete accounts."""
    repository = build_finance_repository()
    with st.expander("Add account"):
        with st.form("add_account", clear_on_submit=True):
            account_type = st.selectbox(
                "Type",
                options=ACCOUNT_TYPE_OPTIONS,
                format_func=account_type_label,
            )
            name = st.text_input("Name")
            balance = st.number_input("Balance", min_value=0.0, step=100.0)
            savings_amount = st.number_input(
                "Monthly savings contribution",
                min_value=0.0,
                step=50.0,
            )
            if st.form_submit_button("Add account"):
                _run_action(
                    lambda: AddAccountUseCase(repository).execute(
                        user_id,
                        account_type,
                        name,
                        Decimal(str(balance)),
                        (
                            Decimal(str(savings_amount))
                            if savings_amount
                            else None
                        ),
                    ),
                    f"Account {name} added",
                    user_id,
                )
    if not accounts:
        return
    with st.expander("Edit account"):
        _render_account_edit_form(repository, user_id, accounts)
    with st.expander("Delete account"):
        by_id = {account.id: account for account in accounts}
        account_id = st.selectbox(
            "Account",
            options=list(by_id),
            format_func=lambda value: by_id[value].name,
            key="delete_account_id",
        )
        if st.button("Delete account"):
            _run_action(
                lambda: DeleteAccountUseCase(repository).execute(
                    user_id,
                    account_id,
                ),
                f"Account {by_id[account_id].name} deleted",
                user_id,
            )


def _option_index(options: Sequence[str], value: str | None) -> int:
    return list(options).index(value) if value in options else 0


def _render_account_edit_form(
    repository,
    user_id: str,
    accounts: Sequence[Account],
) -> None:
    by_id = {account.id: account for account in accounts}
    account_id = st.selectbox(
        "Account",
        options=list(by_id),
        format_func=lambda value: by_id[value].name,
        key="edit_account_id",
    )
    current = by_id[account_id]
    with st.form(f"edit_account_{account_id}"):
        account_type = st.selectbox(
            "Type",
            options=ACCOUNT_TYPE_OPTIONS,
            index=_option_index(ACCOUNT_TYPE_OPTIONS, current.account_type),
            format_func=account_type_label,
            key=f"edit_account_type_{account_id}",
        )
        name = st.text_input(
            "Name",
            value=current.name,
            key=f"edit_account_name_{account_id}",
        )
        balance = st.number_input(
            "Balance",
            min_value=0.0,
            value=float(abs(current.balance)),
            step=100.0,
            key=f"edit_account_balance_{account_id}",
        )
        savings_amount = st.number_input(
            "Monthly savings contribution",
            min_value=0.0,
            value=float(current.savings_amount or 0),
            step=50.0,
            key=f"edit_account_savings_{account_id}",
        )
        if st.form_submit_button("Save account"):
            _run_action(
                lambda: UpdateAccountUseCase(repository).execute(
                    user_id,
                    account_id,
                    account_type,
                    name,
                    Decimal(str(balance)),
                    Decimal(str(savings_amount)) if savings_amount else None,
                ),
                f"Account {name} updated",
                user_id,
            )


def _render_cash_flow_edit_form(
    repository,
    user_id: str,
    accounts: Sequence[Account],
    items: Sequence[CashFlowItem],
) -> None:
    by_id = {item.id: item for item in items}
    item_id = st.selectbox(
        "Item",
        options=list(by_id),
        format_func=lambda value: by_id[value].name,
        key="edit_cash_flow_item_id",
    )
    current = by_id[item_id]
    is_inflow = current.flow_type == INFLOW
    categories = list(INFLOW_CATEGORIES if is_inflow else OUTFLOW_CATEGORIES)
    frequencies = list(FREQUENCY_MULTIPLIERS)
    linked_options = [NO_LINKED_ACCOUNT, *[account.id for account in accounts]]
    names = {account.id: account.name for account in accounts}
    with st.form(f"edit_cash_flow_item_{item_id}"):
        name = st.text_input(
            "Name",
            value=current.name,
            key=f"edit_item_name_{item_id}",
        )
        amount = st.number_input(
            "Amount",
            min_value=0.0,
            value=float(current.amount),
            step=50.0,
            key=f"edit_item_amount_{item_id}",
        )
        frequency = st.selectbox(
            "Frequency",
            options=frequencies,
            index=_option_index(frequencies, current.frequency or "monthly"),
            format_func=format_category,
            key=f"edit_item_frequency_{item_id}",
        )
        category = st.selectbox(
            "Category",
            options=categories,
            index=_option_index(
                categories,
                current.inflow_category if is_inflow
                else current.outflow_category,
            ),
            format_func=format_category,
            key=f"edit_item_category_{item_id}",
        )
        linked_account_id = st.selectbox(
            "Linked account",
            options=linked_options,
            index=_option_index(linked_options, current.linked_account_id),
            format_func=lambda value: names.get(value, "None"),
            key=f"edit_item_linked_{item_id}",
        )
        notes = st.text_area(
            "Notes",
            value=current.notes or "",
            key=f"edit_item_notes_{item_id}",
        )
        if st.form_submit_button("Save item"):
            _run_action(
                lambda: UpdateCashFlowItemUseCase(repository).execute(
                    user_id,
                    item_id,
                    name=name,
                    amount=Decimal(str(amount)),
                    flow_type=current.flow_type,
                    frequency=frequency,
                    inflow_category=category if is_inflow else None,
                    outflow_category=None if is_inflow else category,
                    linked_account_id=linked_account_id,
                    notes=notes,
                ),
                f"Cash flow item {name} updated",
                user_id,
            )


def _render_cash_flow_forms(
    user_id: str,
    accounts: Sequence[Account],
    items: Sequence[CashFlowItem],
) -> None:
    """Render the forms to add, edit and delete cash flow items."""
    repository = build_finance_repository()
    with st.expander("Add cash flow item"):
        flow_type = st.radio(
            "Flow",
            options=[INFLOW, OUTFLOW],
            format_func=format_category,
            horizontal=True,
        )
        categories = (
            INFLOW_CATEGORIES if flow_type == INFLOW else OUTFLOW_CATEGORIES
        )
        linked_options = [
            NO_LINKED_ACCOUNT,
            *[account.id for account in accounts],
        ]
        names = {account.id: account.name for account in accounts}
        with st.form("add_cash_flow_item", clear_on_submit=True):
            name = st.text_input("Name")
            amount = st.number_input("Amount", min_value=0.0, step=50.0)
            frequency = st.selectbox(
                "Frequency",
                options=list(FREQUENCY_MULTIPLIERS),
                index=list(FREQUENCY_MULTIPLIERS).index("monthly"),
                format_func=format_category,
            )
            category = st.selectbox(
                "Category",
                options=list(categories),
                format_func=format_category,
            )
            linked_account_id = st.selectbox(
                "Linked account",
                options=linked_options,
                format_func=lambda value: names.get(value, "None"),
            )
            notes = st.text_area("Notes")
            if st.form_submit_button("Add item"):
                _run_action(
                    lambda: AddCashFlowItemUseCase(repository).execute(
                        user_id,
                        name=name,
                        amount=Decimal(str(amount)),
                        flow_type=flow_type,
                        frequency=frequency,
                        inflow_category=(
                            category if flow_type == INFLOW else None
                        ),
                        outflow_category=(
                            category if flow_type == OUTFLOW else None
                        ),
                        linked_account_id=linked_account_id,
                        notes=notes,
                    ),
                    f"Cash flow item {name} added",
                    user_id,
                )
    if not items:
        return
    with st.expander("Edit cash flow item"):
        _render_cash_flow_edit_form(repository, user_id, accounts, items)
    with st.expander("Delete cash flow item"):
        by_id = {item.id: item for item in items}
        item_id = st.selectbox(
            "Item",
            options=list(by_id),
            format_func=lambda value: by_id[value].name,
            key="delete_cash_flow_item_id",
        )
        if st.button("Delete item"):
            _run_action(
                lambda: DeleteCashFlowItemUseCase(repository).execute(
                    user_id,
                    item_id,
                ),
                f"Cash flow item {by_id[item_id].name} deleted",
                user_id,
            )


def _resolve_user_id(settings: AppSettings) -> str:
    """Return the user id entered in the sidebar."""
    return st.sidebar.text_input(
        "User ID",
        value=settings.default_user_id or "",
    ).strip()


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Wealth Dashboard", layout="wide")
    st.title("Wealth Dashboard")

    settings = build_settings()
    user_id = _resolve_user_id(settings)
    if not user_id:
        st.warning("Enter a user id to load the dashboard.")
        return

    page = st.sidebar.selectbox(
        "Page",
        ["Dashboard", "Balance Sheet", "Cash Flow"],
    )
    metrics = _get_dashboard_metrics(user_id)
    currency_code = settings.currency_code
    get_usage_logger().info(f"{user_id}: viewed {page}")

    for notice in metrics.load_errors:
        st.error(notice)

    if page == "Dashboard":
        _render_net_worth(metrics, currency_code)
        _render_ratios(metrics)
        _render_allocation_chart(metrics.allocation, currency_code)
        _render_history_chart(metrics)
    elif page == "Balance Sheet":
        _render_net_worth(metrics, currency_code)
        _render_balance_sheet(metrics.accounts, currency_code)
        _render_account_forms(user_id, metrics.accounts)
    else:
        items = [*metrics.cashflow.incoming, *metrics.cashflow.outgoing]
        _render_cash_flow_lists(metrics, currency_code)
        _render_cash_flow_forms(user_id, metrics.accounts, items)


if __name__ == "__main__":  # pragma: no cover
    main()
