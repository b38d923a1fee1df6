"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal, InvalidOperation
from logging import Logger

from src.domain.errors import InvalidAmountError, MixedUserRecordsError
from src.utils.decimal_utils import coerce_decimal


def parse_amount(
    value,
    *,
    field_name: str = "amount",
    allow_negative: bool = False,
) -> Decimal:
    """Parse a persisted or user-entered amount into a finite Decimal.

    Args:
        value: Raw value (str, int, float, Decimal or None).
        field_name: Field name used in error messages.
        allow_negative: Whether negative values are accepted.

    Returns:
        Decimal: Validated amount. ``None`` and blank strings map to zero.

    Raises:
        InvalidAmountError: If the value is not a finite number, or is
            negative while ``allow_negative`` is false.
    """
    if isinstance(value, bool):
        raise InvalidAmountError(f"{field_name} must be numeric, got {value!r}")
    if isinstance(value, str):
        value = value.strip().replace(",", "")
        if not value:
            return Decimal("0")
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError) as exc:
        raise InvalidAmountError(
            f"{field_name} must be numeric, got {value!r}"
        ) from exc
    if not amount.is_finite():
        raise InvalidAmountError(f"{field_name} must be finite, got {value!r}")
    if amount < 0 and not allow_negative:
        raise InvalidAmountError(
            f"{field_name} must not be negative, got {amount}"
        )
    return amount


def validate_balance_sign(
    account_type: str,
    balance: Decimal,
    logger: Logger,
) -> None:
    """Warn when a stored balance is not a positive magnitude.

    Args:
        account_type: Account type from the repository row.
        balance: Raw balance amount.
        logger: Logger used for warnings.
    """
    if balance < 0:
        logger.warning(
            f"Balance is negative for account_type={account_type}: {balance}"
        )


def ensure_single_user(
    records: Iterable,
    user_id: str | None = None,
) -> str | None:
    """Check that all records belong to the same user.

    Args:
        records: Records exposing a ``user_id`` attribute.
        user_id: Expected owner, if already known.

    Returns:
        str | None: The owner of the records, or ``user_id`` when empty.

    Raises:
        MixedUserRecordsError: If two owners are found.
    """
    owner = user_id
    for record in records:
        if owner is None:
            owner = record.user_id
        elif record.user_id != owner:
            raise MixedUserRecordsError(
                f"Records of users {owner!r} and {record.user_id!r} "
                "cannot be aggregated together"
            )
    return owner


__all__ = ["parse_amount", "validate_balance_sign", "ensure_single_user"]
