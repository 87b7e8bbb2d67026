"""AddMaterial Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.services.cache_service import CacheService
from src.app.repositories.catalog_repository import CategoryRepository, MaterialRepository
from src.domain.catalog import Material
from .dtos import CATALOG_CACHE_KEY, AddMaterialCommandDTO, MaterialDTO

logger = logging.getLogger(__name__)


class AddMaterial:
    """
    Use Case: Add a material under a category

    Business Rules:
    1. Name is trimmed and must be non-empty
    2. Category must exist and be active (CATEGORY_NOT_FOUND)
    3. Name must be unique among the category's active materials
    """

    def __init__(
        self,
        uow: UnitOfWork,
        category_repo: CategoryRepository,
        material_repo: MaterialRepository,
        cache: CacheService,
    ):
        self.uow = uow
        self.category_repo = category_repo
        self.material_repo = material_repo
        self.cache = cache

    async def execute(self, command: AddMaterialCommandDTO) -> Result[MaterialDTO]:
        try:
            name = command.name.strip()
            if not name:
                return Return.err(
                    Error(code="VALIDATION_ERROR", message="Material name is required", reason="name is empty")
                )

            category = await self.category_repo.get_by_id(command.category_id)
            if not category or not category.active:
                return Return.err(
                    Error(
                        code="CATEGORY_NOT_FOUND",
                        message=f"Category with ID {command.category_id} not found",
                        reason=f"category_id={command.category_id}",
                    )
                )

            if await self.material_repo.find_active_by_name(category.id, name):
                return Return.err(
                    Error(
                        code="MATERIAL_ALREADY_EXISTS",
                        message=f"Material '{name}' already exists in this category",
                        reason=f"category_id={category.id}, name={name}",
                    )
                )

            material = await self.material_repo.create(
                Material(category_id=category.id, name=name, active=True)
            )
            await self.uow.commit()
            await self.cache.delete(CATALOG_CACHE_KEY)

            logger.info(f"Material {material.id} '{name}' added to category {category.id}")
            return Return.ok(MaterialDTO.from_entity(material))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to add material: {e}")
            return Return.err(
                Error(code="ADD_MATERIAL_FAILED", message="Failed to add material", reason=str(e))
            )
