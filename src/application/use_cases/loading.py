"""Shared helpers for use cases reading one user's records."""

from typing import Callable, TypeVar

from src.application.ports.finance_repository import RepositoryError

T = TypeVar("T")


def require_user_id(user_id: str | None) -> str:
    """Return a stripped user id or raise when it is missing.

    Raises:
        ValueError: If no user id was given.
    """
    cleaned = (user_id or "").strip()
    if not cleaned:
        raise ValueError("A user id is required to compute finance metrics")
    return cleaned


def fetch_or_empty(
    fetch: Callable[[str], list[T]],
    user_id: str,
    *,
    notice: str,
    logger,
    errors: list[str] | None = None,
) -> list[T]:
    """Run a repository read, degrading failures to an empty list.

    Args:
        fetch: Repository method taking a user id.
        user_id: User whose records are read.
        notice: User-facing message recorded on failure.
        logger: Logger used for the failure details.
        errors: Optional list collecting user-facing notices.

    Returns:
        list: The fetched records, or an empty list on failure.
    """
    try:
        return list(fetch(user_id))
    except RepositoryError as exc:
        logger.error(f"{notice} for user {user_id}: {exc}")
        if errors is not None:
            errors.append(notice)
        return []


__all__ = ["require_user_id", "fetch_or_empty"]
