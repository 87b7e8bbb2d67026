"""Unit tests for SaveDraft and the customer use cases"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.dtos import DraftCommandDTO, LineItemDTO
from src.app.use_cases.customers.create_customer import CreateCustomer
from src.app.use_cases.customers.dtos import CustomerCommandDTO
from src.app.use_cases.customers.search_customers import SearchCustomers
from src.app.use_cases.customers.update_customer import UpdateCustomer
from src.app.use_cases.drafts.save_draft import SaveDraft
from src.domain.bill import Draft
from src.domain.customer import Customer


def _assign_id(entity_id):
    async def create(entity):
        entity.id = entity_id
        return entity

    return create


@pytest.fixture
def mock_draft_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_assign_id(3))
    repo.update = AsyncMock(side_effect=lambda draft: draft)
    repo.get_by_id = AsyncMock(return_value=None)
    return repo


@pytest.fixture
def mock_draft_line_repo():
    repo = MagicMock()
    repo.replace_for_draft = AsyncMock(return_value=[])
    return repo


@pytest.mark.asyncio
class TestSaveDraft:

    async def test_empty_draft_allowed(self, mock_uow, mock_draft_repo, mock_draft_line_repo):
        use_case = SaveDraft(mock_uow, mock_draft_repo, mock_draft_line_repo)

        result = await use_case.execute(DraftCommandDTO())

        assert result.is_ok()
        assert result.value.id == 3
        assert result.value.total == Decimal("0")
        assert result.value.items == []
        mock_uow.commit.assert_called_once()

    async def test_totals_recomputed(self, mock_uow, mock_draft_repo, mock_draft_line_repo):
        use_case = SaveDraft(mock_uow, mock_draft_repo, mock_draft_line_repo)
        command = DraftCommandDTO(
            items=[LineItemDTO(product_name="Hinge", quantity=Decimal("2"), unit_price=Decimal("100"))],
            discount_percent=Decimal("10"),
            received_amount=Decimal("180"),
        )

        result = await use_case.execute(command)

        assert result.value.discount_amount == Decimal("20")
        assert result.value.total == Decimal("180")
        assert result.value.payment_status == "fully_paid"
        saved_items = mock_draft_line_repo.replace_for_draft.call_args[0][1]
        assert [item.amount for item in saved_items] == [Decimal("200")]

    async def test_overwrite_unknown_draft(self, mock_uow, mock_draft_repo, mock_draft_line_repo):
        use_case = SaveDraft(mock_uow, mock_draft_repo, mock_draft_line_repo)

        result = await use_case.execute(DraftCommandDTO(), draft_id=42)

        assert result.is_err()
        assert result.error.code == "DRAFT_NOT_FOUND"
        mock_uow.commit.assert_not_called()

    async def test_overwrite_existing_draft(self, mock_uow, mock_draft_repo, mock_draft_line_repo):
        mock_draft_repo.get_by_id = AsyncMock(return_value=Draft(id=5, customer_name="Old"))
        use_case = SaveDraft(mock_uow, mock_draft_repo, mock_draft_line_repo)

        result = await use_case.execute(DraftCommandDTO(customer_name="  New  "), draft_id=5)

        assert result.value.customer_name == "New"
        mock_draft_repo.update.assert_called_once()
        mock_draft_repo.create.assert_not_called()

    async def test_repo_failure_rolls_back(self, mock_uow, mock_draft_repo, mock_draft_line_repo):
        mock_draft_line_repo.replace_for_draft = AsyncMock(side_effect=Exception("disk full"))
        use_case = SaveDraft(mock_uow, mock_draft_repo, mock_draft_line_repo)

        result = await use_case.execute(DraftCommandDTO())

        assert result.error.code == "SAVE_DRAFT_FAILED"
        mock_uow.rollback.assert_called_once()


@pytest.fixture
def mock_customer_repo():
    repo = MagicMock()
    repo.create = AsyncMock(side_effect=_assign_id(1))
    repo.update = AsyncMock(side_effect=lambda customer: customer)
    repo.get_by_id = AsyncMock(return_value=None)
    repo.search_by_name = AsyncMock(return_value=[])
    return repo


@pytest.mark.asyncio
class TestCustomers:

    async def test_create_trims_name(self, mock_uow, mock_customer_repo):
        result = await CreateCustomer(mock_uow, mock_customer_repo).execute(
            CustomerCommandDTO(name="  Ramesh Traders ", phone="98000")
        )

        assert result.is_ok()
        assert result.value.name == "Ramesh Traders"
        assert result.value.phone == "98000"

    async def test_create_requires_name(self, mock_uow, mock_customer_repo):
        result = await CreateCustomer(mock_uow, mock_customer_repo).execute(CustomerCommandDTO(name="  "))

        assert result.error.code == "VALIDATION_ERROR"
        mock_customer_repo.create.assert_not_called()

    async def test_update_unknown(self, mock_uow, mock_customer_repo):
        result = await UpdateCustomer(mock_uow, mock_customer_repo).execute(
            9, CustomerCommandDTO(name="Ramesh")
        )

        assert result.error.code == "CUSTOMER_NOT_FOUND"

    async def test_update_replaces_fields(self, mock_uow, mock_customer_repo):
        mock_customer_repo.get_by_id = AsyncMock(return_value=Customer(id=9, name="Ramesh", phone="1"))

        result = await UpdateCustomer(mock_uow, mock_customer_repo).execute(
            9, CustomerCommandDTO(name="Ramesh Traders", address="MG Road")
        )

        assert result.value.name == "Ramesh Traders"
        assert result.value.phone is None
        assert result.value.address == "MG Road"
        mock_uow.commit.assert_called_once()

    async def test_blank_search_skips_repository(self, mock_customer_repo):
        result = await SearchCustomers(mock_customer_repo).execute("   ")

        assert result.value == []
        mock_customer_repo.search_by_name.assert_not_called()

    async def test_search_passes_trimmed_query(self, mock_customer_repo):
        await SearchCustomers(mock_customer_repo).execute(" ram ")

        mock_customer_repo.search_by_name.assert_called_once_with("ram", limit=10)
