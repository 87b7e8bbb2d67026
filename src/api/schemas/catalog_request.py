"""Request schemas for Catalog API"""

from pydantic import BaseModel, Field


class CategoryRequestSchema(BaseModel):
    """Used for POST /catalog/categories"""

    name: str = Field(..., max_length=100, description="Category name (trimmed, non-empty)")


class MaterialRequestSchema(BaseModel):
    """Used for POST /catalog/materials"""

    category_id: int = Field(..., description="Parent category")
    name: str = Field(..., max_length=100, description="Material name (trimmed, non-empty)")


class SizeRequestSchema(BaseModel):
    """Used for POST /catalog/sizes"""

    material_id: int = Field(..., description="Parent material")
    value: str = Field(..., max_length=100, description="Size value, e.g. '(8x4) 1'")


class FittingRequestSchema(BaseModel):
    """Used for POST /catalog/fittings"""

    material_id: int = Field(..., description="Parent material")
    name: str = Field(..., max_length=100, description="Fitting name")
