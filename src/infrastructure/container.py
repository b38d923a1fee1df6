"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.finance_repository import FinanceRepositoryPort
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.finance_repository import SqlAlchemyFinanceRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.memory_repository import InMemoryFinanceRepository
from src.infrastructure.settings import AppSettings

_memory_repository: InMemoryFinanceRepository | None = None


def build_settings() -> AppSettings:
    """Return settings sourced from the environment."""
    return AppSettings.from_env()


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_finance_repository(
    db_port: DatabaseEnginePort | None = None,
    settings: AppSettings | None = None,
) -> FinanceRepositoryPort:
    """Return the configured finance repository.

    The memory backend is shared for the whole process so records added in
    one request are visible to the next.
    """
    global _memory_repository
    resolved_settings = settings or build_settings()
    if resolved_settings.backend == "memory":
        if _memory_repository is None:
            _memory_repository = InMemoryFinanceRepository()
        return _memory_repository
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyFinanceRepository(resolved_db, logger=get_app_logger())


__all__ = [
    "build_settings",
    "build_database_adapter",
    "build_finance_repository",
]
