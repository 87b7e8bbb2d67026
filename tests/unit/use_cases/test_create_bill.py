"""Unit tests for CreateBill use case

Tests cover:
- Totals recomputed from submitted rows
- Customer name and item validation
- Duplicate invoice number (pre-check and database race)
- Draft superseded in the same transaction
"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError

from src.app.use_cases.billing.create_bill import CreateBill
from src.app.use_cases.billing.dtos import BillCommandDTO, LineItemDTO
from src.domain.bill import Bill, Draft


@pytest.fixture
def mock_bill_repo():
    """Mock bill repository that assigns an id on create"""
    repo = MagicMock()
    repo.exists_active_invoice_number = AsyncMock(return_value=False)

    async def create(bill: Bill) -> Bill:
        bill.id = 1
        bill.created_at = datetime(2024, 3, 15, 10, 0, 0, tzinfo=timezone.utc)
        bill.updated_at = datetime(2024, 3, 15, 10, 0, 0, tzinfo=timezone.utc)
        return bill

    repo.create = AsyncMock(side_effect=create)
    return repo


@pytest.fixture
def mock_bill_line_repo():
    repo = MagicMock()
    repo.replace_for_bill = AsyncMock()
    return repo


@pytest.fixture
def mock_draft_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Draft(id=7, customer_name="Ramesh Traders"))
    repo.delete = AsyncMock()
    return repo


@pytest.fixture
def create_use_case(mock_uow, mock_bill_repo, mock_bill_line_repo, mock_draft_repo):
    return CreateBill(
        uow=mock_uow,
        bill_repo=mock_bill_repo,
        bill_line_repo=mock_bill_line_repo,
        draft_repo=mock_draft_repo,
    )


@pytest.fixture
def sample_command():
    return BillCommandDTO(
        invoice_number=101,
        date=date(2024, 3, 15),
        customer_name="  Ramesh Traders ",
        items=[
            LineItemDTO(product_name="Hinge", quantity=Decimal("2"), unit_price=Decimal("100")),
            LineItemDTO(
                product_name="Handle",
                quantity=Decimal("1"),
                unit_price=Decimal("50"),
                item_percent=Decimal("10"),
            ),
        ],
        discount_amount=Decimal("25"),
        received_amount=Decimal("200"),
    )


@pytest.mark.asyncio
class TestCreateBill:

    async def test_create_bill_success(
        self, create_use_case, sample_command, mock_uow, mock_bill_repo, mock_bill_line_repo
    ):
        result = await create_use_case.execute(sample_command)

        assert result.is_ok()
        bill = result.value
        assert bill.id == 1
        assert bill.customer_name == "Ramesh Traders"
        assert bill.sub_total == Decimal("255")
        assert bill.total == Decimal("230")
        assert bill.balance == Decimal("30")
        assert bill.payment_status == "partially_paid"
        assert [item.amount for item in bill.items] == [Decimal("200"), Decimal("55")]

        bill_id, items = mock_bill_line_repo.replace_for_bill.call_args.args
        assert bill_id == 1
        assert len(items) == 2
        mock_uow.commit.assert_called_once()

    async def test_client_totals_are_ignored(self, create_use_case, sample_command, mock_bill_repo):
        payload = sample_command.model_dump()
        payload["items"][0]["quantity"] = Decimal("3")
        command = BillCommandDTO(**payload)

        result = await create_use_case.execute(command)

        stored = mock_bill_repo.create.call_args.args[0]
        assert stored.sub_total == Decimal("355")
        assert result.value.total == Decimal("330")

    async def test_ply_row_keeps_submitted_quantity(self, create_use_case, sample_command):
        command = sample_command.model_copy(
            update={
                "items": [
                    LineItemDTO(
                        product_name="Plywood (8x4) 5",
                        quantity=Decimal("100"),
                        unit="Sq-Ft",
                        unit_price=Decimal("2"),
                    )
                ],
                "discount_amount": Decimal("0"),
            }
        )

        result = await create_use_case.execute(command)

        item = result.value.items[0]
        assert item.is_ply is True
        assert item.piece_count == 5
        assert item.quantity == Decimal("100")
        assert item.amount == Decimal("200")

    async def test_ply_name_on_piece_row_stays_plain(self, create_use_case, sample_command):
        command = sample_command.model_copy(
            update={
                "items": [
                    LineItemDTO(
                        product_name="Plywood (8x4) 5",
                        quantity=Decimal("1"),
                        unit="Pcs",
                        unit_price=Decimal("900"),
                    )
                ],
                "discount_amount": Decimal("0"),
            }
        )

        result = await create_use_case.execute(command)

        item = result.value.items[0]
        assert item.is_ply is False
        assert item.piece_count is None
        assert item.unit == "Pcs"
        assert item.amount == Decimal("900")

    async def test_blank_customer_name_rejected(self, create_use_case, sample_command, mock_bill_repo):
        command = sample_command.model_copy(update={"customer_name": "   "})

        result = await create_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_bill_repo.create.assert_not_called()

    async def test_no_items_rejected(self, create_use_case, sample_command, mock_uow):
        command = sample_command.model_copy(update={"items": []})

        result = await create_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        mock_uow.commit.assert_not_called()

    async def test_duplicate_invoice_number(self, create_use_case, sample_command, mock_bill_repo, mock_uow):
        mock_bill_repo.exists_active_invoice_number.return_value = True

        result = await create_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "DUPLICATE_INVOICE_NUMBER"
        mock_bill_repo.create.assert_not_called()
        mock_uow.commit.assert_not_called()

    async def test_unique_index_race_maps_to_duplicate(
        self, create_use_case, sample_command, mock_uow
    ):
        mock_uow.commit.side_effect = IntegrityError("INSERT", {}, Exception("UNIQUE constraint failed"))

        result = await create_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "DUPLICATE_INVOICE_NUMBER"
        mock_uow.rollback.assert_called_once()

    async def test_draft_is_deleted_with_bill(
        self, create_use_case, sample_command, mock_draft_repo, mock_uow
    ):
        command = sample_command.model_copy(update={"draft_id": 7})

        result = await create_use_case.execute(command)

        assert result.is_ok()
        deleted = mock_draft_repo.delete.call_args.args[0]
        assert deleted.id == 7
        mock_uow.commit.assert_called_once()

    async def test_missing_draft(self, create_use_case, sample_command, mock_draft_repo, mock_bill_repo):
        mock_draft_repo.get_by_id.return_value = None
        command = sample_command.model_copy(update={"draft_id": 99})

        result = await create_use_case.execute(command)

        assert result.is_err()
        assert result.error.code == "DRAFT_NOT_FOUND"
        mock_bill_repo.create.assert_not_called()

    async def test_repository_failure(self, create_use_case, sample_command, mock_bill_repo, mock_uow):
        mock_bill_repo.create.side_effect = Exception("Database connection failed")

        result = await create_use_case.execute(sample_command)

        assert result.is_err()
        assert result.error.code == "CREATE_BILL_FAILED"
        mock_uow.rollback.assert_called_once()


class TestLineItemDTO:
    """Submitted line numbers are rounded to their stored scale"""

    def test_inputs_rounded_to_column_scale(self):
        item = LineItemDTO(
            product_name="Hinge",
            quantity=Decimal("1.23456789"),
            unit_price=Decimal("0.0000005"),
            item_percent=Decimal("33.33335"),
        )

        assert item.quantity == Decimal("1.234568")
        assert item.unit_price == Decimal("0.000001")
        assert item.item_percent == Decimal("33.3334")

    def test_oversized_quantity_rejected(self):
        with pytest.raises(ValidationError):
            LineItemDTO(product_name="Hinge", quantity=Decimal("1e12"))
