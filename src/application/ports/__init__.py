"""Application ports package."""

from .database import DatabaseEnginePort
from .finance_repository import (
    FinanceRepositoryPort,
    RecordNotFoundError,
    RepositoryError,
)

__all__ = [
    "DatabaseEnginePort",
    "FinanceRepositoryPort",
    "RecordNotFoundError",
    "RepositoryError",
]
