"""DeactivateMaterial Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import (
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from .dtos import CATALOG_CACHE_KEY, DeactivationResultDTO

logger = logging.getLogger(__name__)


class DeactivateMaterial:
    """
    Use Case: Deactivate a material

    Business Rules:
    1. Missing material -> MATERIAL_NOT_FOUND
    2. Its sizes and fittings are deactivated with it
    3. Sibling materials are untouched
    """

    def __init__(
        self,
        uow: UnitOfWork,
        material_repo: MaterialRepository,
        size_repo: SizeRepository,
        fitting_repo: FittingRepository,
        cache: CacheService,
    ):
        self.uow = uow
        self.material_repo = material_repo
        self.size_repo = size_repo
        self.fitting_repo = fitting_repo
        self.cache = cache

    async def execute(self, material_id: int) -> Result[DeactivationResultDTO]:
        try:
            material = await self.material_repo.get_by_id(material_id)
            if not material:
                return Return.err(
                    Error(
                        code="MATERIAL_NOT_FOUND",
                        message=f"Material with ID {material_id} not found",
                        reason=f"material_id={material_id}",
                    )
                )

            was_active = material.active
            await self.material_repo.deactivate(material)
            sizes = await self.size_repo.deactivate_by_materials([material.id])
            fittings = await self.fitting_repo.deactivate_by_materials([material.id])

            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Material {material_id} deactivated: sizes={sizes}, fittings={fittings}")
            return Return.ok(
                DeactivationResultDTO(
                    id=material_id,
                    deactivated_materials=1 if was_active else 0,
                    deactivated_sizes=sizes,
                    deactivated_fittings=fittings,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to deactivate material {material_id}: {e}")
            return Return.err(
                Error(
                    code="DEACTIVATE_MATERIAL_FAILED",
                    message="Failed to deactivate material",
                    reason=str(e),
                )
            )
