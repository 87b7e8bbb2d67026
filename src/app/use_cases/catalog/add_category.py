"""AddCategory Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import CategoryRepository
from src.domain.catalog import Category
from .dtos import CATALOG_CACHE_KEY, AddCategoryCommandDTO, CategoryDTO

logger = logging.getLogger(__name__)


class AddCategory:
    """
    Use Case: Add a category

    Business Rules:
    1. Name is trimmed and must be non-empty
    2. Name must be unique among active categories
    3. Catalog cache is invalidated after commit
    """

    def __init__(self, uow: UnitOfWork, category_repo: CategoryRepository, cache: CacheService):
        self.uow = uow
        self.category_repo = category_repo
        self.cache = cache

    async def execute(self, command: AddCategoryCommandDTO) -> Result[CategoryDTO]:
        try:
            name = command.name.strip()
            if not name:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message="Category name is required", reason="name is empty")
                )

            if await self.category_repo.find_active_by_name(name):
                return Return.err(
                    Error(
                        code="CATEGORY_ALREADY_EXISTS",
                        message=f"Category '{name}' already exists",
                        reason=f"name={name}",
                    )
                )

            category = await self.category_repo.create(Category(name=name, active=True))
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Category {category.id} '{name}' added")
            return Return.ok(CategoryDTO.from_entity(category))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add category: {e}")
            return Return.err(
                Error(code="ADD_CATEGORY_FAILED", message="Failed to add category", reason=str(e))
            )
