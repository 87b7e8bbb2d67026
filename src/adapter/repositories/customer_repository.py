"""SQLAlchemy Customer Repository Implementation"""

from typing import List, Optional, Tuple
from sqlmodel import select, func
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.customer_repository import CustomerRepository
from src.domain.base import utc_now
from src.domain.customer import Customer


class SqlAlchemyCustomerRepository(CustomerRepository):
    """
    SQLAlchemy implementation of CustomerRepository

    Uses async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, customer: Customer) -> Customer:
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer

    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        statement = select(Customer).where(Customer.id == customer_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def search_by_name(self, query: str, limit: int = 10) -> List[Customer]:
        """
        Case-insensitive substring search on customer name

        Args:
            query: Fragment of the name, matched literally
            limit: Maximum number of matches

        Returns:
            Matching customers sorted by name
        """
        escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        statement = (
            select(Customer)
            .where(func.lower(Customer.name).like(f"%{escaped.lower()}%", escape="\\"))
            .order_by(Customer.name)
            .limit(limit)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_all(self, limit: int = 20, offset: int = 0) -> Tuple[List[Customer], int]:
        count_stmt = select(func.count()).select_from(Customer)
        total = (await self.session.execute(count_stmt)).scalar_one()

        statement = select(Customer).order_by(Customer.name).limit(limit).offset(offset)
        result = await self.session.execute(statement)
        return list(result.scalars().all()), total

    async def update(self, customer: Customer) -> Customer:
        customer.updated_at = utc_now()
        self.session.add(customer)
        await self.session.flush()
        await self.session.refresh(customer)
        return customer
