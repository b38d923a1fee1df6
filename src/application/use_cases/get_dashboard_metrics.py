"""Use case to compute every dashboard metric in one fetch pass."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import fetch_or_empty, require_user_id
from src.domain.models import DashboardMetrics
from src.domain.models.finance import CashflowBasis
from src.domain.services.finance import (
    build_cashflow_view,
    compute_cashflow_allocation,
    compute_financial_ratios,
    compute_net_worth_summary,
)
from src.infrastructure.logging.logger import get_app_logger


class GetDashboardMetricsUseCase:
    """Fetch one user's records once and derive all dashboard metrics.

    Each repository read that fails is replaced by an empty collection and
    reported through ``DashboardMetrics.load_errors``; the remaining
    metrics are still computed.
    """

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        strict: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the user's finance records.
            logger: Optional logger compatible with logging.Logger-like API.
            strict: Whether unknown account types raise instead of being
                excluded.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._strict = strict

    def execute(
        self,
        user_id: str,
        basis: CashflowBasis = "monthly",
    ) -> DashboardMetrics:
        """Return the dashboard metrics of a user.

        Args:
            user_id: Identifier of the user.
            basis: Basis of the cashflow summary.

        Returns:
            DashboardMetrics: Net worth, cashflow, ratios, allocation and
            history, plus user-facing load error notices.
        """
        user_id = require_user_id(user_id)
        errors: list[str] = []
        accounts = fetch_or_empty(
            self._repository.list_accounts,
            user_id,
            notice="Failed to load accounts",
            logger=self._logger,
            errors=errors,
        )
        items = fetch_or_empty(
            self._repository.list_cash_flow_items,
            user_id,
            notice="Failed to load cash flow data",
            logger=self._logger,
            errors=errors,
        )
        history = fetch_or_empty(
            self._repository.list_net_worth_history,
            user_id,
            notice="Failed to load net worth history",
            logger=self._logger,
            errors=errors,
        )

        net_worth = compute_net_worth_summary(
            accounts,
            history,
            strict=self._strict,
            logger=self._logger,
        )
        metrics = DashboardMetrics(
            user_id=user_id,
            net_worth=net_worth,
            cashflow=build_cashflow_view(items, accounts, basis),
            ratios=compute_financial_ratios(items),
            allocation=compute_cashflow_allocation(items),
            net_worth_history=sorted(
                history,
                key=lambda snapshot: (snapshot.year, snapshot.month),
            ),
            accounts=accounts,
            load_errors=tuple(errors),
        )
        self._logger.info(
            f"Dashboard metrics computed for {user_id}: "
            f"accounts={len(accounts)}, items={len(items)}, "
            f"net_worth={net_worth.net_worth}, errors={len(errors)}"
        )
        return metrics


__all__ = ["GetDashboardMetricsUseCase", "DashboardMetrics"]
