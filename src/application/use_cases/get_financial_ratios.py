"""Use case to compute the savings ratio and burn rate of a user."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import fetch_or_empty, require_user_id
from src.domain.models import FinancialRatios
from src.domain.services.finance import compute_financial_ratios
from src.infrastructure.logging.logger import get_app_logger


class GetFinancialRatiosUseCase:
    """Compute ratios from a user's annualized cash flows."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        errors: list[str] | None = None,
    ) -> FinancialRatios:
        """Return the savings ratio and burn rate of a user.

        A failed read yields zero ratios; its notice is appended to
        ``errors`` when given.
        """
        user_id = require_user_id(user_id)
        items = fetch_or_empty(
            self._repository.list_cash_flow_items,
            user_id,
            notice="Failed to calculate financial ratios",
            logger=self._logger,
            errors=errors,
        )
        ratios = compute_financial_ratios(items)
        self._logger.info(
            f"Ratios computed for {user_id}: "
            f"savings_ratio={ratios.savings_ratio:.1f}, "
            f"burn_rate={ratios.burn_rate:.1f}"
        )
        return ratios


__all__ = ["GetFinancialRatiosUseCase", "FinancialRatios"]
