"""Decimal helpers shared by the finance computations."""

from decimal import Decimal

ZERO = Decimal("0")


def coerce_decimal(value, default: Decimal = ZERO) -> Decimal:
    """Convert a money value to Decimal without binary float artifacts.

    Floats go through ``str`` so ``0.1`` becomes ``Decimal("0.1")``.

    Args:
        value: int, float, str or Decimal amount.
        default: Value returned when ``value`` is None.

    Returns:
        Decimal: The converted amount.

    Raises:
        decimal.InvalidOperation: If a string is not a number.
    """
    if value is None:
        return default
    if isinstance(value, Decimal):
        return value
    if isinstance(value, int):
        return Decimal(value)
    return Decimal(str(value))


__all__ = ["ZERO", "coerce_decimal"]
