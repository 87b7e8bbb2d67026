"""Integration tests for bill persistence

Tests cover:
- CreateBill end to end with real repositories
- Partial unique index on live invoice numbers
- Invoice number reuse after soft delete
- Draft superseded by the bill it became
- Price history window over stored bills
"""

import pytest
from datetime import date
from decimal import Decimal

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import sessionmaker
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.domain.bill import Bill, Draft
from src.domain.bill_line import BillLine, DraftLine
from src.app.use_cases.billing.create_bill import CreateBill
from src.app.use_cases.billing.update_bill import UpdateBill
from src.app.use_cases.billing.delete_bill import DeleteBill
from src.app.use_cases.billing.get_bill import GetBill
from src.app.use_cases.billing.get_next_invoice_number import GetNextInvoiceNumber
from src.app.use_cases.billing.lookup_price_history import LookupPriceHistory
from src.app.use_cases.billing.dtos import BillCommandDTO, LineItemDTO
from src.adapter.repositories import (
    SqlAlchemyBillRepository,
    SqlAlchemyBillLineRepository,
    SqlAlchemyDraftRepository,
)
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


def _command(invoice_number: int, price: str = "100", **overrides) -> BillCommandDTO:
    values = dict(
        invoice_number=invoice_number,
        date=date(2024, 3, 15),
        customer_name="Ramesh Traders",
        items=[LineItemDTO(product_name="Hinge", quantity=Decimal("2"), unit_price=Decimal(price))],
    )
    values.update(overrides)
    return BillCommandDTO(**values)


def _create_use_case(session: AsyncSession) -> CreateBill:
    return CreateBill(
        SqlAlchemyUnitOfWork(session),
        SqlAlchemyBillRepository(session),
        SqlAlchemyBillLineRepository(session),
        SqlAlchemyDraftRepository(session),
    )


@pytest.mark.asyncio
class TestBillPersistence:

    async def test_bill_and_lines_stored(self, db_session: AsyncSession):
        command = _command(
            101,
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

        result = await _create_use_case(db_session).execute(command)

        assert result.is_ok()
        bill = await SqlAlchemyBillRepository(db_session).get_by_id(result.value.id)
        assert bill.total == Decimal("230")
        assert bill.balance == Decimal("30")

        lines = await SqlAlchemyBillLineRepository(db_session).get_by_bill_id(bill.id)
        assert [line.product_name for line in lines] == ["Hinge", "Handle"]
        assert [line.position for line in lines] == [0, 1]
        assert lines[1].amount == Decimal("55")

    async def test_duplicate_live_invoice_rejected(self, db_session: AsyncSession):
        use_case = _create_use_case(db_session)
        assert (await use_case.execute(_command(101))).is_ok()

        result = await use_case.execute(_command(101))

        assert result.is_err()
        assert result.error.code == "DUPLICATE_INVOICE_NUMBER"
        count = (await db_session.execute(select(Bill))).scalars().all()
        assert len(count) == 1

    async def test_unique_index_enforced_by_database(self, db_session: AsyncSession):
        db_session.add(Bill(invoice_number=7, date=date(2024, 1, 1), customer_name="A"))
        await db_session.commit()

        db_session.add(Bill(invoice_number=7, date=date(2024, 1, 2), customer_name="B"))
        with pytest.raises(IntegrityError):
            await db_session.flush()
        await db_session.rollback()

    async def test_deleted_invoice_number_reusable(self, db_session: AsyncSession):
        create = _create_use_case(db_session)
        first = (await create.execute(_command(101))).value
        await create.execute(_command(102))

        delete_result = await DeleteBill(
            SqlAlchemyUnitOfWork(db_session), SqlAlchemyBillRepository(db_session)
        ).execute(first.id)
        assert delete_result.is_ok()

        reused = await create.execute(_command(101))
        assert reused.is_ok()

        next_number = await GetNextInvoiceNumber(SqlAlchemyBillRepository(db_session)).execute()
        assert next_number.value.invoice_number == 103

    async def test_next_number_on_empty_table(self, db_session: AsyncSession):
        result = await GetNextInvoiceNumber(SqlAlchemyBillRepository(db_session)).execute()
        assert result.value.invoice_number == 1

    async def test_update_keeps_own_number(self, db_session: AsyncSession):
        created = (await _create_use_case(db_session).execute(_command(101))).value
        update = UpdateBill(
            SqlAlchemyUnitOfWork(db_session),
            SqlAlchemyBillRepository(db_session),
            SqlAlchemyBillLineRepository(db_session),
        )

        result = await update.execute(created.id, _command(101, price="150"))

        assert result.is_ok()
        assert result.value.total == Decimal("300")
        lines = await SqlAlchemyBillLineRepository(db_session).get_by_bill_id(created.id)
        assert len(lines) == 1
        assert lines[0].unit_price == Decimal("150")

    async def test_draft_removed_when_bill_created(self, db_session: AsyncSession):
        draft = Draft(customer_name="Ramesh Traders")
        db_session.add(draft)
        await db_session.flush()
        db_session.add(DraftLine(draft_id=draft.id, product_name="Hinge", quantity=Decimal("1")))
        await db_session.commit()

        result = await _create_use_case(db_session).execute(_command(101, draft_id=draft.id))

        assert result.is_ok()
        assert await SqlAlchemyDraftRepository(db_session).get_by_id(draft.id) is None
        remaining = (await db_session.execute(select(DraftLine))).scalars().all()
        assert remaining == []

    async def test_price_history_ignores_deleted_bills(self, db_session: AsyncSession):
        create = _create_use_case(db_session)
        await create.execute(_command(1, price="10"))
        await create.execute(_command(2, price="20"))
        newest = (await create.execute(_command(3, price="30"))).value
        await DeleteBill(SqlAlchemyUnitOfWork(db_session), SqlAlchemyBillRepository(db_session)).execute(
            newest.id
        )

        use_case = LookupPriceHistory(
            SqlAlchemyBillRepository(db_session), SqlAlchemyBillLineRepository(db_session)
        )
        result = await use_case.execute("Hinge")

        assert [s.price for s in result.value.suggestions] == [Decimal("20"), Decimal("10")]

    async def test_price_history_window(self, db_session: AsyncSession):
        create = _create_use_case(db_session)
        for number in range(1, 5):
            await create.execute(_command(number, price=str(number)))

        use_case = LookupPriceHistory(
            SqlAlchemyBillRepository(db_session),
            SqlAlchemyBillLineRepository(db_session),
            bill_window=2,
        )
        result = await use_case.execute("Hinge")

        assert [s.price for s in result.value.suggestions] == [Decimal("4"), Decimal("3")]

    async def test_lines_grouped_by_bill(self, db_session: AsyncSession):
        create = _create_use_case(db_session)
        a = (await create.execute(_command(1))).value
        b = (await create.execute(_command(2))).value

        grouped = await SqlAlchemyBillLineRepository(db_session).get_by_bill_ids([a.id, b.id])

        assert set(grouped) == {a.id, b.id}
        assert all(isinstance(line, BillLine) for lines in grouped.values() for line in lines)

    async def test_stored_lines_rebuild_the_computed_amounts(self, engine, db_session: AsyncSession):
        command = _command(
            101,
            items=[
                LineItemDTO(
                    product_name="Hinge",
                    quantity=Decimal("1000"),
                    unit_price=Decimal("1000"),
                    item_percent=Decimal("33.33333"),
                ),
                LineItemDTO(product_name="Handle", quantity=Decimal("0.3333333"), unit_price=Decimal("3")),
            ],
        )
        created = (await _create_use_case(db_session).execute(command)).value

        Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)
        async with Session() as fresh:
            read = await GetBill(SqlAlchemyBillRepository(fresh), SqlAlchemyBillLineRepository(fresh)).execute(
                created.id
            )

        bill = read.value
        assert bill.sub_total == created.sub_total
        assert [item.amount for item in bill.items] == [item.amount for item in created.items]
        assert sum(item.amount for item in bill.items) == bill.sub_total
