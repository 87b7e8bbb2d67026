"""AddFitting Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import MaterialRepository, FittingRepository
from src.domain.catalog import Fitting
from .dtos import CATALOG_CACHE_KEY, AddFittingCommandDTO, FittingDTO

logger = logging.getLogger(__name__)


class AddFitting:
    """
    Use Case: Add a fitting under a material

    Same rules as AddSize, keyed on the fitting name.
    """

    def __init__(
        self,
        uow: UnitOfWork,
        material_repo: MaterialRepository,
        fitting_repo: FittingRepository,
        cache: CacheService,
    ):
        self.uow = uow
        self.material_repo = material_repo
        self.fitting_repo = fitting_repo
        self.cache = cache

    async def execute(self, command: AddFittingCommandDTO) -> Result[FittingDTO]:
        try:
            name = command.name.strip()
            if not name:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message="Fitting name is required", reason="name is empty")
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

            if await self.fitting_repo.find_active_by_name(material.id, name):
                return Return.err(
                    Error(
                        code="FITTING_ALREADY_EXISTS",
                        message=f"Fitting '{name}' already exists for this material",
                        reason=f"material_id={material.id}, name={name}",
                    )
                )

            fitting = await self.fitting_repo.create(
                Fitting(material_id=material.id, name=name, active=True)
            )
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Fitting {fitting.id} '{name}' added to material {material.id}")
            return Return.ok(FittingDTO.from_entity(fitting))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add fitting: {e}")
            return Return.err(
                Error(code="ADD_FITTING_FAILED", message="Failed to add fitting", reason=str(e))
            )
