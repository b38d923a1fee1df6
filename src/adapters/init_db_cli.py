"""CLI to create the finance tables and validate the database connection.

This adapter is meant for local operations: it instantiates the concrete
database adapter from the infrastructure layer, creates any missing table
and runs a basic health check.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.db import describe_engine_url
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import ensure_schema


def main() -> None:
    """Create missing finance tables and check the connection."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_finance_engine()
    logger.info(f"Finance DB: {describe_engine_url(engine.url)}")

    ensure_schema(engine)
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")

    logger.info("Finance schema is ready and the connection is working.")


if __name__ == "__main__":  # pragma: no cover
    main()
