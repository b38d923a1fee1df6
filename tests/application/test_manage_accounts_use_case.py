"""Tests for the account management use cases."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.application.ports.finance_repository import RecordNotFoundError
from src.application.use_cases.manage_accounts import (
    AddAccountUseCase,
    DeleteAccountUseCase,
    UpdateAccountUseCase,
    build_account_draft,
)
from src.domain.errors import (
    FinanceError,
    InvalidAmountError,
    UnknownAccountTypeError,
)
from src.infrastructure.memory_repository import InMemoryFinanceRepository


def test_build_account_draft_parses_amounts() -> None:
    draft = build_account_draft("roth_ira", " Retirement ", "1,500.25", "100")

    assert draft.name == "Retirement"
    assert draft.balance == Decimal("1500.25")
    assert draft.savings_amount == Decimal("100")


def test_build_account_draft_treats_blank_savings_as_missing() -> None:
    draft = build_account_draft("checking_account", "Main", "10", "")

    assert draft.savings_amount is None


@pytest.mark.parametrize(
    ("account_type", "name", "balance", "error"),
    [
        ("checking_account", "  ", "10", FinanceError),
        ("crypto_wallet", "Coins", "10", UnknownAccountTypeError),
        ("checking_account", "Main", "NaN", InvalidAmountError),
        ("checking_account", "Main", "-10", InvalidAmountError),
    ],
)
def test_build_account_draft_rejects_invalid_input(
    account_type,
    name,
    balance,
    error,
) -> None:
    with pytest.raises(error):
        build_account_draft(account_type, name, balance)


def test_add_update_and_delete_account() -> None:
    repository = InMemoryFinanceRepository()
    logger = MagicMock()

    account = AddAccountUseCase(repository, logger=logger).execute(
        "user-1",
        "mortgage",
        "Home loan",
        "250000",
    )
    updated = UpdateAccountUseCase(repository, logger=logger).execute(
        "user-1",
        account.id,
        "mortgage",
        "Home loan",
        "249000",
    )
    deleted = DeleteAccountUseCase(repository, logger=logger).execute(
        "user-1",
        account.id,
    )

    assert account.user_id == "user-1"
    assert updated.balance == Decimal("249000")
    assert deleted is True
    assert repository.list_accounts("user-1") == []


def test_update_account_of_another_user_fails() -> None:
    repository = InMemoryFinanceRepository()
    account = AddAccountUseCase(repository, logger=MagicMock()).execute(
        "user-1",
        "business",
        "Shop",
        "10",
    )

    with pytest.raises(RecordNotFoundError):
        UpdateAccountUseCase(repository, logger=MagicMock()).execute(
            "user-2",
            account.id,
            "business",
            "Shop",
            "20",
        )


def test_delete_missing_account_returns_false() -> None:
    logger = MagicMock()

    deleted = DeleteAccountUseCase(
        InMemoryFinanceRepository(),
        logger=logger,
    ).execute("user-1", "missing")

    assert deleted is False
    logger.warning.assert_called_once()
