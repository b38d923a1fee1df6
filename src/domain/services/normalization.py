"""Domain normalization helpers for recurring amounts."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_FREQUENCY,
    FREQUENCY_MULTIPLIERS,
    MONTHS_PER_YEAR,
)
from src.domain.models import CashFlowItem
from src.utils.decimal_utils import coerce_decimal


def normalize_frequency(frequency: str | None) -> str:
    """Normalize a frequency code, defaulting to monthly.

    Args:
        frequency: Raw frequency value from a repository or form.

    Returns:
        str: A key of the multiplier table.
    """
    if not frequency:
        return DEFAULT_FREQUENCY
    cleaned = frequency.strip().lower()
    if cleaned in FREQUENCY_MULTIPLIERS:
        return cleaned
    return DEFAULT_FREQUENCY


def annualize(amount, frequency: str | None = None) -> Decimal:
    """Convert an amount paid at ``frequency`` into a yearly figure.

    One-time amounts count once, exactly like annual ones.

    Args:
        amount: Amount per occurrence.
        frequency: Recurrence code; missing or unknown means monthly.

    Returns:
        Decimal: Annualized amount.
    """
    multiplier = FREQUENCY_MULTIPLIERS[normalize_frequency(frequency)]
    return coerce_decimal(amount) * multiplier


def monthly(amount, frequency: str | None = None) -> Decimal:
    """Convert an amount paid at ``frequency`` into a monthly figure."""
    return annualize(amount, frequency) / MONTHS_PER_YEAR


def annual_total(items: Iterable[CashFlowItem]) -> Decimal:
    """Sum the annualized amounts of cash-flow items."""
    return sum(
        (annualize(item.amount, item.frequency) for item in items),
        Decimal("0"),
    )


__all__ = ["normalize_frequency", "annualize", "monthly", "annual_total"]
