"""SQLAlchemy engine for the finance database.

One pooled engine per process serves the dashboard, the snapshot job and
the schema bootstrap. ``DATABASE_URL`` (read from the environment or a
``.env`` file) selects the database; ``DB_POOL_SIZE`` and
``DB_MAX_OVERFLOW`` tune the connection pool.
"""

import os
from typing import Optional

import dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import QueuePool

from src.application.ports.database import DatabaseEnginePort

DEFAULT_POOL_SIZE = 5
DEFAULT_MAX_OVERFLOW = 5


def _get_env_var(name: str) -> str:
    """Return a required setting after loading ``.env``.

    Raises:
        RuntimeError: If the variable is unset or blank.
    """
    dotenv.load_dotenv()
    value = os.getenv(name)
    if not value:
        raise RuntimeError(f"Missing environment variable: {name}")
    return value


def _pool_setting(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 0:
        raise RuntimeError(f"{name} must not be negative, got {value}")
    return value


def _create_engine(db_url: str) -> Engine:
    """Build the pooled engine used for all finance tables.

    Connections are pinged before checkout so a restarted PostgreSQL server
    does not surface as a failed dashboard load.

    Args:
        db_url: SQLAlchemy URL, e.g. ``postgresql+psycopg://user@host/db``.

    Returns:
        Engine: Engine backed by a ``QueuePool``.
    """
    return create_engine(
        db_url,
        poolclass=QueuePool,
        pool_size=_pool_setting("DB_POOL_SIZE", DEFAULT_POOL_SIZE),
        max_overflow=_pool_setting("DB_MAX_OVERFLOW", DEFAULT_MAX_OVERFLOW),
        pool_pre_ping=True,
    )


def describe_engine_url(url) -> str:
    """Render a database URL for logs with the password masked."""
    return make_url(str(url)).render_as_string(hide_password=True)


_finance_engine: Optional[Engine] = None


def get_finance_engine() -> Engine:
    """Return the process-wide finance engine, creating it on first use."""
    global _finance_engine
    if _finance_engine is None:
        _finance_engine = _create_engine(_get_env_var("DATABASE_URL"))
    return _finance_engine


def dispose_finance_engine() -> None:
    """Close pooled connections and forget the engine.

    The next ``get_finance_engine`` call builds a fresh engine, picking up
    a changed ``DATABASE_URL``.
    """
    global _finance_engine
    if _finance_engine is not None:
        _finance_engine.dispose()
        _finance_engine = None


class SqlAlchemyDatabaseEngineAdapter(DatabaseEnginePort):
    """Database port served by the module-level finance engine."""

    def get_finance_engine(self) -> Engine:
        return get_finance_engine()


__all__ = [
    "describe_engine_url",
    "dispose_finance_engine",
    "get_finance_engine",
    "SqlAlchemyDatabaseEngineAdapter",
]
