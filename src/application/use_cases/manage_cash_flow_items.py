"""Use cases to create, edit and delete cash-flow items."""

from src.application.ports.finance_repository import FinanceRepositoryPort
from src.application.use_cases.loading import require_user_id
from src.domain.errors import FinanceError, InvalidAmountError
from src.domain.models import CashFlowItem, CashFlowItemDraft
from src.domain.services.classification import validate_cash_flow_categories
from src.domain.services.normalization import normalize_frequency
from src.domain.services.validation import parse_amount
from src.infrastructure.logging.logger import get_app_logger


def build_cash_flow_draft(
    name: str,
    amount,
    flow_type: str,
    frequency: str | None = None,
    inflow_category: str | None = None,
    outflow_category: str | None = None,
    linked_account_id: str | None = None,
    notes: str | None = None,
) -> CashFlowItemDraft:
    """Validate raw cash-flow fields into a ``CashFlowItemDraft``.

    Unknown frequencies are stored as monthly. Blank optional fields are
    stored as ``None``.

    Raises:
        FinanceError: If the name is blank, the amount is not positive, or
            the categories do not match the flow type.
    """
    cleaned_name = (name or "").strip()
    if not cleaned_name:
        raise FinanceError("Cash flow item name is required")
    parsed_amount = parse_amount(amount)
    if parsed_amount <= 0:
        raise InvalidAmountError(f"amount must be positive, got {parsed_amount}")
    inflow_category = inflow_category or None
    outflow_category = outflow_category or None
    validate_cash_flow_categories(flow_type, inflow_category, outflow_category)
    return CashFlowItemDraft(
        name=cleaned_name,
        amount=parsed_amount,
        flow_type=flow_type,
        frequency=normalize_frequency(frequency),
        inflow_category=inflow_category,
        outflow_category=outflow_category,
        linked_account_id=linked_account_id or None,
        notes=(notes or "").strip() or None,
    )


class _CashFlowItemUseCase:
    def __init__(self, repository: FinanceRepositoryPort, logger=None) -> None:
        self._repository = repository
        self._logger = logger or get_app_logger()

    def _check_linked_account(
        self,
        user_id: str,
        draft: CashFlowItemDraft,
    ) -> None:
        if draft.linked_account_id is None:
            return
        account_ids = {
            account.id for account in self._repository.list_accounts(user_id)
        }
        if draft.linked_account_id not in account_ids:
            raise FinanceError(
                f"Linked account {draft.linked_account_id} does not belong "
                f"to user {user_id}"
            )


class AddCashFlowItemUseCase(_CashFlowItemUseCase):
    """Create a cash-flow item for a user."""

    def execute(self, user_id: str, **fields) -> CashFlowItem:
        """Validate ``fields`` (see ``build_cash_flow_draft``) and insert."""
        user_id = require_user_id(user_id)
        draft = build_cash_flow_draft(**fields)
        self._check_linked_account(user_id, draft)
        item = self._repository.insert_cash_flow_item(user_id, draft)
        self._logger.info(
            f"Cash flow item {item.id} ({item.flow_type}, {item.frequency}) "
            f"added for {user_id}"
        )
        return item


class UpdateCashFlowItemUseCase(_CashFlowItemUseCase):
    """Replace every editable field of a cash-flow item."""

    def execute(self, user_id: str, item_id: str, **fields) -> CashFlowItem:
        user_id = require_user_id(user_id)
        draft = build_cash_flow_draft(**fields)
        self._check_linked_account(user_id, draft)
        item = self._repository.update_cash_flow_item(user_id, item_id, draft)
        self._logger.info(f"Cash flow item {item_id} updated for {user_id}")
        return item


class DeleteCashFlowItemUseCase(_CashFlowItemUseCase):
    """Delete a cash-flow item of a user."""

    def execute(self, user_id: str, item_id: str) -> bool:
        user_id = require_user_id(user_id)
        deleted = self._repository.delete_cash_flow_item(user_id, item_id)
        if deleted:
            self._logger.info(f"Cash flow item {item_id} deleted for {user_id}")
        else:
            self._logger.warning(
                f"Cash flow item {item_id} not found for {user_id}; "
                "nothing deleted"
            )
        return deleted


__all__ = [
    "build_cash_flow_draft",
    "AddCashFlowItemUseCase",
    "UpdateCashFlowItemUseCase",
    "DeleteCashFlowItemUseCase",
]
