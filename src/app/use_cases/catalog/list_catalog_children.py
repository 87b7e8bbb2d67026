"""Catalog child listing use cases

Active materials of a category, and active sizes or fittings of a material.
"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.catalog_repository import (
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from .dtos import MaterialDTO, SizeDTO, FittingDTO


class ListMaterials:
    """Use Case: Active materials of one category"""

    def __init__(self, material_repo: MaterialRepository):
        self.material_repo = material_repo

    async def execute(self, category_id: int) -> Result[List[MaterialDTO]]:
        try:
            materials = await self.material_repo.list_active(category_id=category_id)
            return Return.ok([MaterialDTO.from_entity(m) for m in materials])
        except Exception as e:
            return Return.err(
                Error(code="LIST_MATERIALS_FAILED", message="Failed to list materials", reason=str(e))
            )


class ListSizes:
    """Use Case: Active sizes of one material"""

    def __init__(self, size_repo: SizeRepository):
        self.size_repo = size_repo

    async def execute(self, material_id: int) -> Result[List[SizeDTO]]:
        try:
            sizes = await self.size_repo.list_active(material_id=material_id)
            return Return.ok([SizeDTO.from_entity(s) for s in sizes])
        except Exception as e:
            return Return.err(
                Error(code="LIST_SIZES_FAILED", message="Failed to list sizes", reason=str(e))
            )


class ListFittings:
    """Use Case: Active fittings of one material"""

    def __init__(self, fitting_repo: FittingRepository):
        self.fitting_repo = fitting_repo

    async def execute(self, material_id: int) -> Result[List[FittingDTO]]:
        try:
            fittings = await self.fitting_repo.list_active(material_id=material_id)
            return Return.ok([FittingDTO.from_entity(f) for f in fittings])
        except Exception as e:
            return Return.err(
                Error(code="LIST_FITTINGS_FAILED", message="Failed to list fittings", reason=str(e))
            )
