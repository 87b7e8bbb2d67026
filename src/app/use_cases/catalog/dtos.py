"""Data Transfer Objects for Catalog Use Cases"""

from decimal import Decimal
from typing import List, Optional
from pydantic import BaseModel, Field

from src.domain.catalog import Category, Material, Size, Fitting

CATALOG_CACHE_KEY = "catalog:tree"


class CategoryDTO(BaseModel):
    id: int
    name: str
    active: bool = True

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryDTO":
        return cls(id=category.id, name=category.name, active=category.active)


class MaterialDTO(BaseModel):
    id: int
    category_id: int
    name: str
    active: bool = True

    @classmethod
    def from_entity(cls, material: Material) -> "MaterialDTO":
        return cls(
            id=material.id,
            category_id=material.category_id,
            name=material.name,
            active=material.active,
        )


class SizeDTO(BaseModel):
    id: int
    material_id: int
    value: str
    active: bool = True

    @classmethod
    def from_entity(cls, size: Size) -> "SizeDTO":
        return cls(id=size.id, material_id=size.material_id, value=size.value, active=size.active)


class FittingDTO(BaseModel):
    id: int
    material_id: int
    name: str
    active: bool = True

    @classmethod
    def from_entity(cls, fitting: Fitting) -> "FittingDTO":
        return cls(
            id=fitting.id,
            material_id=fitting.material_id,
            name=fitting.name,
            active=fitting.active,
        )


class MaterialNodeDTO(MaterialDTO):
    sizes: List[SizeDTO] = Field(default_factory=list)
    fittings: List[FittingDTO] = Field(default_factory=list)


class CategoryNodeDTO(CategoryDTO):
    materials: List[MaterialNodeDTO] = Field(default_factory=list)


class CatalogTreeDTO(BaseModel):
    """Active catalog as Category -> Material -> {sizes, fittings}"""

    categories: List[CategoryNodeDTO] = Field(default_factory=list)


class AddCategoryCommandDTO(BaseModel):
    name: str = Field(..., max_length=100)


class AddMaterialCommandDTO(BaseModel):
    category_id: int
    name: str = Field(..., max_length=100)


class AddSizeCommandDTO(BaseModel):
    material_id: int
    value: str = Field(..., max_length=100)


class AddFittingCommandDTO(BaseModel):
    material_id: int
    name: str = Field(..., max_length=100)


class DeactivationResultDTO(BaseModel):
    """Outcome of a deactivation, including what the cascade touched"""

    id: int
    deactivated_materials: int = 0
    deactivated_sizes: int = 0
    deactivated_fittings: int = 0


class ProductNameCommandDTO(BaseModel):
    material_id: Optional[int] = None
    size_id: Optional[int] = None
    fitting_id: Optional[int] = None


class ProductNameDTO(BaseModel):
    """
    Built product name

    For ply names the derived quantity (square feet) and unit are included
    so a client can pre-fill the row.
    """

    product_name: str
    is_ply: bool = False
    quantity: Optional[Decimal] = None
    unit: Optional[str] = None
