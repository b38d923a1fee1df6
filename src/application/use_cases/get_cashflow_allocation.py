"""Use case to split a user's monthly income for the allocation bar."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import fetch_or_empty, require_user_id
from src.domain.models import CashflowAllocation
from src.domain.services.finance import compute_cashflow_allocation
from src.infrastructure.logging.logger import get_app_logger


class GetCashflowAllocationUseCase:
    """Compute the monthly allocation of income."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        errors: list[str] | None = None,
    ) -> CashflowAllocation:
        user_id = require_user_id(user_id)
        items = fetch_or_empty(
            self._repository.list_cash_flow_items,
            user_id,
            notice="Failed to load cash flow allocation",
            logger=self._logger,
            errors=errors,
        )
        return compute_cashflow_allocation(items)


__all__ = ["GetCashflowAllocationUseCase", "CashflowAllocation"]
