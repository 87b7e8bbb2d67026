"""DeactivateSize and DeactivateFitting Use Cases

Leaf tiers; nothing cascades below them.
"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import SizeRepository, FittingRepository
from .dtos import CATALOG_CACHE_KEY, DeactivationResultDTO

logger = logging.getLogger(__name__)


class DeactivateSize:
    """Use Case: Deactivate a size (SIZE_NOT_FOUND when missing)"""

    def __init__(self, uow: UnitOfWork, size_repo: SizeRepository, cache: CacheService):
        self.uow = uow
        self.size_repo = size_repo
        self.cache = cache

    async def execute(self, size_id: int) -> Result[DeactivationResultDTO]:
        try:
            size = await self.size_repo.get_by_id(size_id)
            if not size:
                return Return.err(
                    Error(
                        code="SIZE_NOT_FOUND",
                        message=f"Size with ID {size_id} not found",
                        reason=f"size_id={size_id}",
                    )
                )

            was_active = size.active
            await self.size_repo.deactivate(size)
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Size {size_id} deactivated")
            return Return.ok(
                DeactivationResultDTO(id=size_id, deactivated_sizes=1 if was_active else 0)
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(code="DEACTIVATE_SIZE_FAILED", message="Failed to deactivate size", reason=str(e))
            )


class DeactivateFitting:
    """Use Case: Deactivate a fitting (FITTING_NOT_FOUND when missing)"""

    def __init__(self, uow: UnitOfWork, fitting_repo: FittingRepository, cache: CacheService):
        self.uow = uow
        self.fitting_repo = fitting_repo
        self.cache = cache

    async def execute(self, fitting_id: int) -> Result[DeactivationResultDTO]:
        try:
            fitting = await self.fitting_repo.get_by_id(fitting_id)
            if not fitting:
                return Return.err(
                    Error(
                        code="FITTING_NOT_FOUND",
                        message=f"Fitting with ID {fitting_id} not found",
                        reason=f"fitting_id={fitting_id}",
                    )
                )

            was_active = fitting.active
            await self.fitting_repo.deactivate(fitting)
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Fitting {fitting_id} deactivated")
            return Return.ok(
                DeactivationResultDTO(id=fitting_id, deactivated_fittings=1 if was_active else 0)
            )

        except Exception as e:
            await self.uow.rollback()
            return Return.err(
                Error(
                    code="DEACTIVATE_FITTING_FAILED",
                    message="Failed to deactivate fitting",
                    reason=str(e),
                )
            )
