"""AddSize Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import MaterialRepository, SizeRepository
from src.domain.catalog import Size
from .dtos import CATALOG_CACHE_KEY, AddSizeCommandDTO, SizeDTO

logger = logging.getLogger(__name__)


class AddSize:
    """
    Use Case: Add a size under a material

    Business Rules:
    1. Value is trimmed and must be non-empty
    2. Material must exist and be active (MATERIAL_NOT_FOUND)
    3. Value must be unique among the material's active sizes
    """

    def __init__(
        self,
        uow: UnitOfWork,
        material_repo: MaterialRepository,
        size_repo: SizeRepository,
        cache: CacheService,
    ):
        self.uow = uow
        self.material_repo = material_repo
        self.size_repo = size_repo
        self.cache = cache

    async def execute(self, command: AddSizeCommandDTO) -> Result[SizeDTO]:
        try:
            value = command.value.strip()
            if not value:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message="Size value is required", reason="value is empty")
                )

            material = await self.material_repo.get_by_id(command.material_id)
            if not material or not material.active:
                return Return.err(
                    Error(
                        code="MATERIAL_NOT_FOUND",
                        message=f"Material with ID {command.material_id} not found",
                        reason=f"material_id={command.material_id}",
                    )
                )

            if await self.size_repo.find_active_by_value(material.id, value):
                return Return.err(
                    Error(
                        code="SIZE_ALREADY_EXISTS",
                        message=f"Size '{value}' already exists for this material",
                        reason=f"material_id={material.id}, value={value}",
                    )
                )

            size = await self.size_repo.create(Size(material_id=material.id, value=value, active=True))
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Size {size.id} '{value}' added to material {material.id}")
            return Return.ok(SizeDTO.from_entity(size))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add size: {e}")
            return Return.err(
                Error(code="ADD_SIZE_FAILED", message="Failed to add size", reason=str(e))
            )
