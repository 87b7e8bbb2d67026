"""DeactivateCategory Use Case

Soft-deletes a category and cascades to everything below it.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import (
    CategoryRepository,
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from .dtos import CATALOG_CACHE_KEY, DeactivationResultDTO

logger = logging.getLogger(__name__)


class DeactivateCategory:
    """
    Use Case: Deactivate a category

    Business Rules:
    1. Missing category -> CATEGORY_NOT_FOUND
    2. Its materials are deactivated, then their sizes and fittings
    3. Other categories and their subtrees are untouched
    4. All changes commit together; the catalog cache is invalidated

    Flow:
    1. Load category
    2. Collect material ids
    3. Deactivate category, materials, sizes, fittings
    4. Commit and invalidate cache
    """

    def __init__(
        self,
        uow: UnitOfWork,
        category_repo: CategoryRepository,
        material_repo: MaterialRepository,
        size_repo: SizeRepository,
        fitting_repo: FittingRepository,
        cache: CacheService,
    ):
        self.uow = uow
        self.category_repo = category_repo
        self.material_repo = material_repo
        self.size_repo = size_repo
        self.fitting_repo = fitting_repo
        self.cache = cache

    async def execute(self, category_id: int) -> Result[DeactivationResultDTO]:
        try:
            # Step 1: Load category
            category = await self.category_repo.get_by_id(category_id)
            if not category:
                return Return.err(
                    Error(
                        code="CATEGORY_NOT_FOUND",
                        message=f"Category with ID {category_id} not found",
                        reason=f"category_id={category_id}",
                    )
                )

            # Step 2: Material ids (active or not) for the second level
            material_ids = await self.material_repo.list_ids_by_category(category.id)

            # Step 3: Cascade
            await self.category_repo.deactivate(category)
            materials = await self.material_repo.deactivate_by_category(category.id)
            sizes = await self.size_repo.deactivate_by_materials(material_ids)
            fittings = await self.fitting_repo.deactivate_by_materials(material_ids)

            # Step 4: Commit
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(
                f"Category {category_id} deactivated: materials={materials}, "
                f"sizes={sizes}, fittings={fittings}"
            )
            return Return.ok(
                DeactivationResultDTO(
                    id=category_id,
                    deactivated_materials=materials,
                    deactivated_sizes=sizes,
                    deactivated_fittings=fittings,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to deactivate category {category_id}: {e}")
            return Return.err(
                Error(
                    code="DEACTIVATE_CATEGORY_FAILED",
                    message="Failed to deactivate category",
                    reason=str(e),
                )
            )
