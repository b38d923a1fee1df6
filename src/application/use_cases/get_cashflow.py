"""Use case to compute cashflow totals and details for a user."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import fetch_or_empty, require_user_id
from src.domain.models import CashflowView
from src.domain.models.finance import CashflowBasis
from src.domain.services.finance import build_cashflow_view
from src.infrastructure.logging.logger import get_app_logger


class GetCashflowUseCase:
    """Compute annualized cashflow summary and item lists."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port providing the user's finance records.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        basis: CashflowBasis = "annual",
        errors: list[str] | None = None,
    ) -> CashflowView:
        """Return cashflow totals and details for a user.

        Args:
            user_id: Identifier of the user.
            basis: ``annual`` or ``monthly`` totals.
            errors: Optional list collecting user-facing load notices.

        Returns:
            CashflowView: Summary totals and inflow/outflow items.
        """
        user_id = require_user_id(user_id)
        items = fetch_or_empty(
            self._repository.list_cash_flow_items,
            user_id,
            notice="Failed to load cash flow data",
            logger=self._logger,
            errors=errors,
        )
        accounts = fetch_or_empty(
            self._repository.list_accounts,
            user_id,
            notice="Failed to load accounts",
            logger=self._logger,
            errors=errors,
        )
        self._logger.info(f"Fetched {len(items)} cash flow items for {user_id}")
        view = build_cashflow_view(items, accounts, basis)
        self._logger.info(
            f"Cashflow totals computed: in={view.summary.total_in}, "
            f"out={view.summary.total_out}, basis={basis}"
        )
        return view


__all__ = ["GetCashflowUseCase", "CashflowView"]
