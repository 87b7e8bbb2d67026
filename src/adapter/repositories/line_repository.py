"""SQLAlchemy Line Repository Implementations

Implements bill line and draft line persistence using SQLAlchemy async
session. Lines are replaced as a whole set on every save.
"""

from typing import Dict, List, Sequence
from sqlmodel import select
from sqlalchemy import delete
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.line_repository import BillLineRepository, DraftLineRepository
from src.domain.bill_line import BillLine, DraftLine, LineFields
from src.domain.line_item import LineItem


class SqlAlchemyBillLineRepository(BillLineRepository):
    """
    SQLAlchemy implementation of BillLineRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def replace_for_bill(self, bill_id: int, items: Sequence[LineItem]) -> List[BillLine]:
        """
        Replace all lines of a bill

        Args:
            bill_id: Bill ID
            items: Line items in display order

        Returns:
            Created BillLine rows
        """
        await self.session.execute(delete(BillLine).where(BillLine.bill_id == bill_id))

        lines = [
            BillLine(bill_id=bill_id, **LineFields.values_from_line_item(item, position))
            for position, item in enumerate(items)
        ]
        self.session.add_all(lines)
        await self.session.flush()
        return lines

    async def get_by_bill_id(self, bill_id: int) -> List[BillLine]:
        statement = (
            select(BillLine)
            .where(BillLine.bill_id == bill_id)
            .order_by(BillLine.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_bill_ids(self, bill_ids: Sequence[int]) -> Dict[int, List[BillLine]]:
        grouped: Dict[int, List[BillLine]] = {bill_id: [] for bill_id in bill_ids}
        if not grouped:
            return grouped

        statement = (
            select(BillLine)
            .where(BillLine.bill_id.in_(list(grouped)))
            .order_by(BillLine.bill_id, BillLine.position)
        )
        result = await self.session.execute(statement)
        for line in result.scalars().all():
            grouped[line.bill_id].append(line)
        return grouped


class SqlAlchemyDraftLineRepository(DraftLineRepository):
    """SQLAlchemy implementation of DraftLineRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def replace_for_draft(self, draft_id: int, items: Sequence[LineItem]) -> List[DraftLine]:
        await self.delete_for_draft(draft_id)

        lines = [
            DraftLine(draft_id=draft_id, **LineFields.values_from_line_item(item, position))
            for position, item in enumerate(items)
        ]
        self.session.add_all(lines)
        await self.session.flush()
        return lines

    async def get_by_draft_id(self, draft_id: int) -> List[DraftLine]:
        statement = (
            select(DraftLine)
            .where(DraftLine.draft_id == draft_id)
            .order_by(DraftLine.position)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def get_by_draft_ids(self, draft_ids: Sequence[int]) -> Dict[int, List[DraftLine]]:
        grouped: Dict[int, List[DraftLine]] = {draft_id: [] for draft_id in draft_ids}
        if not grouped:
            return grouped

        statement = (
            select(DraftLine)
            .where(DraftLine.draft_id.in_(list(grouped)))
            .order_by(DraftLine.draft_id, DraftLine.position)
        )
        result = await self.session.execute(statement)
        for line in result.scalars().all():
            grouped[line.draft_id].append(line)
        return grouped

    async def delete_for_draft(self, draft_id: int) -> None:
        await self.session.execute(delete(DraftLine).where(DraftLine.draft_id == draft_id))
