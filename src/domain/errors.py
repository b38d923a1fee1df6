"""Domain exceptions for the finance aggregation rules."""


class FinanceError(ValueError):
    """Base class for invalid finance data."""


class UnknownAccountTypeError(FinanceError):
    """Raised when an account type is outside the known taxonomy."""

    def __init__(self, account_type: str) -> None:
        super().__init__(f"Unknown account type: {account_type!r}")
        self.account_type = account_type


class InvalidAmountError(FinanceError):
    """Raised when a monetary field is not a usable number."""


class CategoryMismatchError(FinanceError):
    """Raised when a cash-flow category does not match its flow type."""


class MixedUserRecordsError(FinanceError):
    """Raised when one computation receives records of several users."""


__all__ = [
    "FinanceError",
    "UnknownAccountTypeError",
    "InvalidAmountError",
    "CategoryMismatchError",
    "MixedUserRecordsError",
]
