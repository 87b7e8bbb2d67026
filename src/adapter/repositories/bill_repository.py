"""SQLAlchemy Bill Repository Implementation

Implements bill persistence using SQLAlchemy async session. Soft-deleted
bills stay in the table and are filtered out of every read by default.
"""

from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.bill_repository import BillRepository
from src.domain.base import utc_now
from src.domain.bill import Bill
from src.domain.bill_line import BillLine


class SqlAlchemyBillRepository(BillRepository):
    """
    SQLAlchemy implementation of BillRepository

    Uniqueness of live invoice numbers is backed by the partial unique
    index ux_bills_invoice_number_live; flush surfaces a collision as
    IntegrityError.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, bill: Bill) -> Bill:
        """
        Create a new bill

        Args:
            bill: Bill entity to persist

        Returns:
            Created Bill with generated ID
        """
        self.session.add(bill)
        await self.session.flush()
        await self.session.refresh(bill)
        return bill

    async def get_by_id(self, bill_id: int, include_deleted: bool = False) -> Optional[Bill]:
        statement = select(Bill).where(Bill.id == bill_id)

        if not include_deleted:
            statement = statement.where(Bill.deleted == False)  # noqa: E712

        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_active(self, limit: int = 20, offset: int = 0) -> Tuple[List[Bill], int]:
        """
        Retrieve non-deleted bills, newest first

        Args:
            limit: Page size
            offset: Rows to skip

        Returns:
            Tuple of (bills, total count)
        """
        count_stmt = select(func.count()).select_from(Bill).where(Bill.deleted == False)  # noqa: E712
        total = (await self.session.execute(count_stmt)).scalar_one()

        statement = (
            select(Bill)
            .where(Bill.deleted == False)  # noqa: E712
            .order_by(Bill.created_at.desc(), Bill.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def update(self, bill: Bill) -> Bill:
        """
        Update an existing bill

        Args:
            bill: Bill entity with updated values

        Returns:
            Updated Bill
        """
        bill.updated_at = utc_now()
        self.session.add(bill)
        await self.session.flush()
        await self.session.refresh(bill)
        return bill

    async def exists_active_invoice_number(
        self, invoice_number: int, exclude_bill_id: Optional[int] = None
    ) -> bool:
        statement = (
            select(func.count())
            .select_from(Bill)
            .where(Bill.invoice_number == invoice_number)
            .where(Bill.deleted == False)  # noqa: E712
        )

        if exclude_bill_id is not None:
            statement = statement.where(Bill.id != exclude_bill_id)

        result = await self.session.execute(statement)
        count = result.scalar_one()
        return count > 0

    async def get_max_active_invoice_number(self) -> Optional[int]:
        statement = select(func.max(Bill.invoice_number)).where(Bill.deleted == False)  # noqa: E712
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_recent_with_product(self, product_name: str, limit: int = 10) -> List[Bill]:
        """
        Most recent non-deleted bills that contain at least one line with
        exactly this product name

        Args:
            product_name: Exact product name
            limit: Bill window size

        Returns:
            Bills ordered by created_at DESC
        """
        containing = select(BillLine.bill_id).where(BillLine.product_name == product_name)

        statement = (
            select(Bill)
            .where(Bill.deleted == False)  # noqa: E712
            .where(Bill.id.in_(containing))
            .order_by(Bill.created_at.desc(), Bill.id.desc())
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())
