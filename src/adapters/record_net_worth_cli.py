"""CLI adapter recording this month's net worth snapshot of every user.

Meant to be scheduled once a month (cron or similar); running it again in
the same month skips users already recorded.
"""

from src.application.use_cases.record_monthly_net_worth import (
    RecordMonthlyNetWorthUseCase,
)
from src.infrastructure.container import build_finance_repository
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run the monthly net worth snapshot use case."""
    logger = get_app_logger()
    repository = build_finance_repository()
    use_case = RecordMonthlyNetWorthUseCase(repository, logger=logger)

    result = use_case.run()

    print(
        f"Recorded {result.processed_count} net worth snapshots for "
        f"{result.year}-{result.month:02d} "
        f"({result.skipped_count} already recorded)."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
