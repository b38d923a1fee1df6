"""Use cases to create, edit and delete balance-sheet accounts."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import require_user_id
from src.domain.errors import FinanceError
from src.domain.models import Account, AccountDraft
from src.domain.services.classification import classify_account_type
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_app_logger


def build_account_draft(
    account_type: str,
    name: str,
    balance,
    savings_amount=None,
) -> AccountDraft:
    """Validate raw account fields into an ``AccountDraft``.

    Args:
        account_type: Type code from the account taxonomy.
        name: Display name.
        balance: Balance magnitude as entered.
        savings_amount: Optional recurring savings contribution.

    Returns:
        AccountDraft: Validated fields.

    Raises:
        FinanceError: If the name is blank, the type unknown, or an amount
            invalid.
    """
    cleaned_name = (name or "").strip()
    if not cleaned_name:
        raise FinanceError("Account name is required")
    classify_account_type(account_type)
    parsed_savings = None
    if savings_amount is not None and savings_amount != "":
        parsed_savings = parse_amount(
            savings_amount,
            field_name="savings_amount",
        )
    return AccountDraft(
        account_type=account_type,
        name=cleaned_name,
        balance=parse_amount(balance, field_name="balance"),
        savings_amount=parsed_savings,
    )


class AddAccountUseCase:
    """Create an account for a user."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        account_type: str,
        name: str,
        balance,
        savings_amount=None,
    ) -> Account:
        user_id = require_user_id(user_id)
        draft = build_account_draft(account_type, name, balance, savings_amount)
        account = self._repository.insert_account(user_id, draft)
        self._logger.info(
            f"Account {account.id} ({account.account_type}) added for {user_id}"
        )
        return account


class UpdateAccountUseCase:
    """Replace every editable field of an account."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(
        self,
        user_id: str,
        account_id: str,
        account_type: str,
        name: str,
        balance,
        savings_amount=None,
    ) -> Account:
        user_id = require_user_id(user_id)
        draft = build_account_draft(account_type, name, balance, savings_amount)
        account = self._repository.update_account(user_id, account_id, draft)
        self._logger.info(f"Account {account_id} updated for {user_id}")
        return account


class DeleteAccountUseCase:
    """Delete an account of a user."""

    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def execute(self, user_id: str, account_id: str) -> bool:
        """Delete the account; return whether it existed."""
        user_id = require_user_id(user_id)
        deleted = self._repository.delete_account(user_id, account_id)
        if deleted:
            self._logger.info(f"Account {account_id} deleted for {user_id}")
        else:
            self._logger.warning(
                f"Account {account_id} not found for {user_id}; nothing deleted"
            )
        return deleted


__all__ = [
    "build_account_draft",
    "AddAccountUseCase",
    "UpdateAccountUseCase",
    "DeleteAccountUseCase",
]
