"""SQLAlchemy Catalog Repository Implementations

Implements Category, Material, Size and Fitting persistence using SQLAlchemy
async session. Bulk deactivation runs as a single UPDATE per tier.
"""

from typing import List, Optional, Sequence
from sqlmodel import select
from sqlalchemy import update
from sqlmodel.ext.asyncio.session import AsyncSession
from src.app.repositories.catalog_repository import (
    CategoryRepository,
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from src.domain.catalog import Category, Material, Size, Fitting


class SqlAlchemyCategoryRepository(CategoryRepository):
    """SQLAlchemy implementation of CategoryRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, category: Category) -> Category:
        self.session.add(category)
        await self.session.flush()
        await self.session.refresh(category)
        return category

    async def get_by_id(self, category_id: int) -> Optional[Category]:
        statement = select(Category).where(Category.id == category_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_active_by_name(self, name: str) -> Optional[Category]:
        statement = (
            select(Category)
            .where(Category.name == name)
            .where(Category.active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list_active(self) -> List[Category]:
        statement = (
            select(Category)
            .where(Category.active == True)  # noqa: E712
            .order_by(Category.name)
        )
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def deactivate(self, category: Category) -> Category:
        category.active = False
        self.session.add(category)
        await self.session.flush()
        return category


class SqlAlchemyMaterialRepository(MaterialRepository):
    """SQLAlchemy implementation of MaterialRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, material: Material) -> Material:
        self.session.add(material)
        await self.session.flush()
        await self.session.refresh(material)
        return material

    async def get_by_id(self, material_id: int) -> Optional[Material]:
        statement = select(Material).where(Material.id == material_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_active_by_name(self, category_id: int, name: str) -> Optional[Material]:
        statement = (
            select(Material)
            .where(Material.category_id == category_id)
            .where(Material.name == name)
            .where(Material.active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list_active(self, category_id: Optional[int] = None) -> List[Material]:
        statement = select(Material).where(Material.active == True)  # noqa: E712

        if category_id is not None:
            statement = statement.where(Material.category_id == category_id)

        statement = statement.order_by(Material.name)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def list_ids_by_category(self, category_id: int) -> List[int]:
        statement = select(Material.id).where(Material.category_id == category_id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def deactivate(self, material: Material) -> Material:
        material.active = False
        self.session.add(material)
        await self.session.flush()
        return material

    async def deactivate_by_category(self, category_id: int) -> int:
        statement = (
            update(Material)
            .where(Material.category_id == category_id)
            .where(Material.active == True)  # noqa: E712
            .values(active=False)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(statement)
        return result.rowcount


class SqlAlchemySizeRepository(SizeRepository):
    """SQLAlchemy implementation of SizeRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, size: Size) -> Size:
        self.session.add(size)
        await self.session.flush()
        await self.session.refresh(size)
        return size

    async def get_by_id(self, size_id: int) -> Optional[Size]:
        statement = select(Size).where(Size.id == size_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_active_by_value(self, material_id: int, value: str) -> Optional[Size]:
        statement = (
            select(Size)
            .where(Size.material_id == material_id)
            .where(Size.value == value)
            .where(Size.active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list_active(self, material_id: Optional[int] = None) -> List[Size]:
        statement = select(Size).where(Size.active == True)  # noqa: E712

        if material_id is not None:
            statement = statement.where(Size.material_id == material_id)

        statement = statement.order_by(Size.id)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def deactivate(self, size: Size) -> Size:
        size.active = False
        self.session.add(size)
        await self.session.flush()
        return size

    async def deactivate_by_materials(self, material_ids: Sequence[int]) -> int:
        if not material_ids:
            return 0

        statement = (
            update(Size)
            .where(Size.material_id.in_(list(material_ids)))
            .where(Size.active == True)  # noqa: E712
            .values(active=False)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(statement)
        return result.rowcount


class SqlAlchemyFittingRepository(FittingRepository):
    """SQLAlchemy implementation of FittingRepository"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, fitting: Fitting) -> Fitting:
        self.session.add(fitting)
        await self.session.flush()
        await self.session.refresh(fitting)
        return fitting

    async def get_by_id(self, fitting_id: int) -> Optional[Fitting]:
        statement = select(Fitting).where(Fitting.id == fitting_id)
        result = await self.session.execute(statement)
        return result.scalar_one_or_none()

    async def find_active_by_name(self, material_id: int, name: str) -> Optional[Fitting]:
        statement = (
            select(Fitting)
            .where(Fitting.material_id == material_id)
            .where(Fitting.name == name)
            .where(Fitting.active == True)  # noqa: E712
        )
        result = await self.session.execute(statement)
        return result.scalars().first()

    async def list_active(self, material_id: Optional[int] = None) -> List[Fitting]:
        statement = select(Fitting).where(Fitting.active == True)  # noqa: E712

        if material_id is not None:
            statement = statement.where(Fitting.material_id == material_id)

        statement = statement.order_by(Fitting.name)
        result = await self.session.execute(statement)
        return list(result.scalars().all())

    async def deactivate(self, fitting: Fitting) -> Fitting:
        fitting.active = False
        self.session.add(fitting)
        await self.session.flush()
        return fitting

    async def deactivate_by_materials(self, material_ids: Sequence[int]) -> int:
        if not material_ids:
            return 0

        statement = (
            update(Fitting)
            .where(Fitting.material_id.in_(list(material_ids)))
            .where(Fitting.active == True)  # noqa: E712
            .values(active=False)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(statement)
        return result.rowcount
