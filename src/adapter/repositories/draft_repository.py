"""SQLAlchemy Draft Repository Implementation"""

from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlalchemy import delete
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.draft_repository import DraftRepository
from src.domain.base import utc_now
from src.domain.bill import Draft
from src.domain.bill_line import DraftLine


class SqlAlchemyDraftRepository(DraftRepository):
    """
    SQLAlchemy implementation of DraftRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, draft: Draft) -> Draft:
        self.session.add(draft)
        await self.session.flush()
        await self.session.refresh(draft)
        return draft

    async def get_by_id(self, draft_id: int) -> Optional[Draft]:
        statement = select(Draft).where(Draft.id == draft_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def list_all(self, limit: int = 20, offset: int = 0) -> Tuple[List[Draft], int]:
        count_stmt = select(func.count()).select_from(Draft)
        total = (await self.session.execute(count_stmt)).scalar_one()

        statement = (
            select(Draft)
            .order_by(Draft.created_at.desc(), Draft.id.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def update(self, draft: Draft) -> Draft:
        draft.updated_at = utc_now()
        self.session.add(draft)
        await self.session.flush()
        await self.session.refresh(draft)
        return draft

    async def delete(self, draft: Draft) -> None:
        """
        Remove a draft and its lines

        Lines are deleted explicitly; SQLite does not enforce ON DELETE
        CASCADE unless foreign keys are switched on per connection.
        """
        await self.session.execute(delete(DraftLine).where(DraftLine.draft_id == draft.id))
        await self.session.delete(draft)
        await self.session.flush()
