"""BuildProductName Use Case

Resolves catalog ids and joins them into a product name.
"""

from libs.result import Result, Return, Error
from src.app.repositories.catalog_repository import (
    MaterialRepository,
    SizeRepository,
    FittingRepository,
)
from src.domain.bill_computer import detect_ply_pattern
from src.domain.line_item import Unit
from src.domain.product_name import build_name
from .dtos import ProductNameCommandDTO, ProductNameDTO


class BuildProductName:
    """
    Use Case: Build a product name from a catalog selection

    Business Rules:
    1. "<material> <size> <fitting>" with absent parts skipped
    2. Size and fitting must belong to the chosen material
    3. Unknown or inactive ids -> *_NOT_FOUND
    4. A ply size yields the derived square-feet quantity
    """

    def __init__(
        self,
        material_repo: MaterialRepository,
        size_repo: SizeRepository,
        fitting_repo: FittingRepository,
    ):
        self.material_repo = material_repo
        self.size_repo = size_repo
        self.fitting_repo = fitting_repo

    async def execute(self, command: ProductNameCommandDTO) -> Result[ProductNameDTO]:
        try:
            material = size = fitting = None

            if command.material_id is not None:
                material = await self.material_repo.get_by_id(command.material_id)
                if not material or not material.active:
                    return Return.err(self._not_found("MATERIAL", command.material_id))

            if command.size_id is not None:
                size = await self.size_repo.get_by_id(command.size_id)
                if not size or not size.active or (material and size.material_id != material.id):
                    return Return.err(self._not_found("SIZE", command.size_id))

            if command.fitting_id is not None:
                fitting = await self.fitting_repo.get_by_id(command.fitting_id)
                if not fitting or not fitting.active or (material and fitting.material_id != material.id):
                    return Return.err(self._not_found("FITTING", command.fitting_id))

            name = build_name(material, size, fitting)
            dimensions = detect_ply_pattern(name)
            if dimensions is None:
                return Return.ok(ProductNameDTO(product_name=name))

            return Return.ok(
                ProductNameDTO(
                    product_name=name,
                    is_ply=True,
                    quantity=dimensions.square_feet,
                    unit=Unit.SQ_FT.value,
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="BUILD_PRODUCT_NAME_FAILED",
                    message="Failed to build product name",
                    reason=str(e),
                )
            )

    @staticmethod
    def _not_found(tier: str, entity_id: int) -> Error:
        return Error(
            code=f"{tier}_NOT_FOUND",
            message=f"{tier.capitalize()} with ID {entity_id} not found",
            reason=f"{tier.lower()}_id={entity_id}",
        )
