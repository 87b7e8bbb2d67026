"""Unit tests for ComputeBill, DeleteBill and LookupPriceHistory use cases"""

import pytest
from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.billing.compute_bill import ComputeBill
from src.app.use_cases.billing.delete_bill import DeleteBill
from src.app.use_cases.billing.lookup_price_history import LookupPriceHistory
from src.app.use_cases.billing.dtos import ComputeBillCommandDTO, LineItemDTO
from src.domain.bill import Bill, Draft
from src.domain.bill_line import BillLine
from src.domain.customer import Customer


@pytest.fixture
def sample_bill():
    return Bill(
        id=1,
        invoice_number=101,
        date=date(2024, 3, 15),
        customer_name="Ramesh Traders",
        total=Decimal("230"),
        balance=Decimal("30"),
    )


@pytest.mark.asyncio
class TestComputeBill:

    async def test_preview(self):
        command = ComputeBillCommandDTO(
            items=[
                LineItemDTO(quantity=Decimal("2"), unit_price=Decimal("100")),
                LineItemDTO(quantity=Decimal("1"), unit_price=Decimal("50"), item_percent=Decimal("10")),
            ],
            discount_amount=Decimal("25"),
            received_amount=Decimal("200"),
        )

        result = await ComputeBill().execute(command)

        assert result.is_ok()
        preview = result.value
        assert preview.sub_total == Decimal("255")
        assert preview.total == Decimal("230")
        assert preview.balance == Decimal("30")
        assert preview.discount_percent == Decimal("10")
        assert preview.amount_in_words == "Two Hundred and Thirty Rupees"

    async def test_percent_discount(self):
        command = ComputeBillCommandDTO(
            items=[LineItemDTO(quantity=Decimal("1"), unit_price=Decimal("200"))],
            discount_percent=Decimal("10"),
        )

        result = await ComputeBill().execute(command)

        assert result.value.discount_amount == Decimal("20")
        assert result.value.total == Decimal("180")
        assert result.value.payment_status == "unpaid"


@pytest.mark.asyncio
class TestDeleteBill:

    @pytest.fixture
    def mock_bill_repo(self, sample_bill):
        repo = MagicMock()
        repo.get_by_id = AsyncMock(return_value=sample_bill)
        repo.update = AsyncMock(side_effect=lambda bill: bill)
        return repo

    async def test_soft_delete(self, mock_uow, mock_bill_repo):
        result = await DeleteBill(mock_uow, mock_bill_repo).execute(1)

        assert result.is_ok()
        assert result.value.deleted is True
        assert isinstance(result.value.deleted_at, datetime)
        assert result.value.deleted_at.tzinfo is not None
        mock_bill_repo.get_by_id.assert_called_once_with(1, include_deleted=True)
        mock_uow.commit.assert_called_once()

    async def test_already_deleted(self, mock_uow, mock_bill_repo, sample_bill):
        sample_bill.deleted = True
        sample_bill.deleted_at = datetime(2024, 3, 16, tzinfo=timezone.utc)

        result = await DeleteBill(mock_uow, mock_bill_repo).execute(1)

        assert result.is_err()
        assert result.error.code == "BILL_ALREADY_DELETED"
        mock_bill_repo.update.assert_not_called()

    async def test_not_found(self, mock_uow, mock_bill_repo):
        mock_bill_repo.get_by_id.return_value = None

        result = await DeleteBill(mock_uow, mock_bill_repo).execute(42)

        assert result.is_err()
        assert result.error.code == "BILL_NOT_FOUND"
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestLookupPriceHistory:

    def _line(self, bill_id: int, price: str) -> BillLine:
        return BillLine(
            bill_id=bill_id,
            product_name="Hinge",
            quantity=Decimal("1"),
            unit="Pcs",
            unit_price=Decimal(price),
        )

    async def test_suggestions_use_bill_dates(self):
        bills = [
            Bill(id=3, invoice_number=3, date=date(2024, 3, 3), customer_name="A"),
            Bill(id=2, invoice_number=2, date=date(2024, 3, 2), customer_name="B"),
            Bill(id=1, invoice_number=1, date=date(2024, 3, 1), customer_name="C"),
        ]
        bill_repo = MagicMock()
        bill_repo.list_recent_with_product = AsyncMock(return_value=bills)
        line_repo = MagicMock()
        line_repo.get_by_bill_ids = AsyncMock(
            return_value={3: [self._line(3, "12")], 2: [self._line(2, "12")], 1: [self._line(1, "10")]}
        )

        use_case = LookupPriceHistory(bill_repo, line_repo, bill_window=10, cap=5)
        result = await use_case.execute("Hinge")

        assert result.is_ok()
        suggestions = result.value.suggestions
        assert [s.price for s in suggestions] == [Decimal("12"), Decimal("10")]
        assert [s.date for s in suggestions] == [date(2024, 3, 3), date(2024, 3, 1)]
        bill_repo.list_recent_with_product.assert_called_once_with("Hinge", limit=10)

    async def test_empty_name_skips_lookup(self):
        bill_repo = MagicMock()
        bill_repo.list_recent_with_product = AsyncMock()

        result = await LookupPriceHistory(bill_repo, MagicMock()).execute("")

        assert result.is_ok()
        assert result.value.suggestions == []
        bill_repo.list_recent_with_product.assert_not_called()


class TestEntityTimestamps:
    """New entities are stamped with aware UTC datetimes"""

    @pytest.mark.parametrize("entity", [Bill, Draft, Customer])
    def test_default_timestamps_are_utc(self, entity):
        instance = entity()

        assert instance.created_at.tzinfo == timezone.utc
        assert instance.updated_at.tzinfo == timezone.utc
