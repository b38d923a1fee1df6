"""Use case to compute a user's net worth."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import fetch_or_empty, require_user_id
from src.domain.models import NetWorthSummary
from src.domain.services.finance import compute_net_worth_summary
from src.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth from current accounts or the latest snapshot."""

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
        errors: list[str] | None = None,
    ) -> NetWorthSummary:
        """Return the net worth summary of a user.

        History is only read when the user has no accounts.

        Args:
            user_id: Identifier of the user.
            errors: Optional list collecting user-facing load notices.

        Returns:
            NetWorthSummary: Computed asset, liability, and net worth totals.
        """
        user_id = require_user_id(user_id)
        accounts = fetch_or_empty(
            self._repository.list_accounts,
            user_id,
            notice="Failed to load accounts",
            logger=self._logger,
            errors=errors,
        )
        history = []
        if not accounts:
            history = fetch_or_empty(
                self._repository.list_net_worth_history,
                user_id,
                notice="Failed to load net worth history",
                logger=self._logger,
                errors=errors,
            )
        summary = compute_net_worth_summary(
            accounts,
            history,
            strict=self._strict,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed for {user_id}: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}, source={summary.source}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase", "NetWorthSummary"]
