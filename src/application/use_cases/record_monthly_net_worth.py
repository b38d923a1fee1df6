"""Use case recording one net worth snapshot per user and month.

The job reads every balance sheet, computes its net worth and appends a
``NetWorthSnapshot`` for the current calendar month. Users that already
have a snapshot for that month are skipped, so running the job twice in the
same month writes nothing the second time.
"""

import uuid
from dataclasses import dataclass
from datetime import date
from typing import Callable

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.domain.models import NetWorthSnapshot
from src.domain.services.finance import compute_balance_sheet_net_worth
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class RecordNetWorthResult:
    """Result of a monthly net worth run.

    Attributes:
        month: Calendar month recorded.
        year: Calendar year recorded.
        processed_count: Number of snapshots written.
        skipped_count: Number of balance sheets skipped because their user
            was already recorded for the month.
    """

    month: int
    year: int
    processed_count: int
    skipped_count: int


class RecordMonthlyNetWorthUseCase:
    """Append the monthly net worth snapshot of every user."""

    def __init__(
        self,
        repository: FinanceRepositoryPort,
        logger=None,
        clock: Callable[[], date] = date.today,
    ) -> None:
        """Initialize the use case.

        Args:
            repository: Port reading balance sheets and writing history.
            logger: Optional logger compatible with logging.Logger-like API.
            clock: Callable returning the current date.
        """
        self._repository = repository
        self._logger = logger or get_app_logger()
        self._clock = clock

    def run(self, today: date | None = None) -> RecordNetWorthResult:
        """Execute the snapshot job for the month containing ``today``.

        Args:
            today: Reference date; defaults to the clock's current date.

        Returns:
            RecordNetWorthResult: Summary of written and skipped snapshots.
        """
        today = today or self._clock()
        month, year = today.month, today.year
        sheets = self._repository.list_balance_sheets()
        recorded = set(self._repository.list_recorded_user_ids(month, year))

        snapshots: list[NetWorthSnapshot] = []
        skipped = 0
        for sheet in sheets:
            if sheet.user_id in recorded:
                skipped += 1
                continue
            snapshots.append(
                NetWorthSnapshot(
                    id=str(uuid.uuid4()),
                    user_id=sheet.user_id,
                    month=month,
                    year=year,
                    net_worth=compute_balance_sheet_net_worth(sheet),
                    calculated_from_balance_sheet_id=sheet.id,
                )
            )
            recorded.add(sheet.user_id)

        processed = 0
        if snapshots:
            processed = self._repository.insert_net_worth_snapshots(snapshots)
        self._logger.info(
            f"Net worth snapshots for {year}-{month:02d}: "
            f"processed={processed}, skipped={skipped}"
        )
        return RecordNetWorthResult(
            month=month,
            year=year,
            processed_count=processed,
            skipped_count=skipped,
        )


__all__ = ["RecordNetWorthResult", "RecordMonthlyNetWorthUseCase"]
