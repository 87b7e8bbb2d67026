"""Catalog Domain Entities

Category -> Material -> {Size, Fitting} hierarchy used to compose product
names. Children reference their parent by id only; deactivation cascades
downward and is performed by the parent tier's use case.
"""

from typing import Optional
from sqlmodel import Field, Column, Index
from sqlalchemy import ForeignKey, String, Boolean
from src.domain.base import BaseModel, BigIntPrimaryKey


class Category(BaseModel, table=True):
    """
    Category - top of the catalog chain

    Domain Rules:
    - Name is unique among active categories (enforced at use case layer)
    - Deactivating a category deactivates its materials
    """

    __tablename__ = "categories"
    __table_args__ = (
        Index('ix_categories_active', 'active'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique category identifier (auto-increment)"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Category display name"
    )

    active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Soft-delete flag"
    )


class Material(BaseModel, table=True):
    """
    Material - belongs to a Category

    Domain Rules:
    - Name is unique among active materials of the same category
    - Deactivating a material deactivates its sizes and fittings
    """

    __tablename__ = "materials"
    __table_args__ = (
        Index('ix_materials_category_active', 'category_id', 'active'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique material identifier (auto-increment)"
    )

    category_id: int = Field(
        sa_column=Column(BigIntPrimaryKey, ForeignKey("categories.id"), nullable=False),
        description="Owning category"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Material display name (first part of a product name)"
    )

    active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Soft-delete flag"
    )


class Size(BaseModel, table=True):
    """Size - belongs to a Material"""

    __tablename__ = "sizes"
    __table_args__ = (
        Index('ix_sizes_material_active', 'material_id', 'active'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique size identifier (auto-increment)"
    )

    material_id: int = Field(
        sa_column=Column(BigIntPrimaryKey, ForeignKey("materials.id"), nullable=False),
        description="Owning material"
    )

    value: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Size display value, e.g. '(8x4) 1' or '18mm'"
    )

    active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Soft-delete flag"
    )


class Fitting(BaseModel, table=True):
    """Fitting - belongs to a Material"""

    __tablename__ = "fittings"
    __table_args__ = (
        Index('ix_fittings_material_active', 'material_id', 'active'),
    )

    id: Optional[int] = Field(
        default=None,
        sa_column=Column(BigIntPrimaryKey, primary_key=True, autoincrement=True),
        description="Unique fitting identifier (auto-increment)"
    )

    material_id: int = Field(
        sa_column=Column(BigIntPrimaryKey, ForeignKey("materials.id"), nullable=False),
        description="Owning material"
    )

    name: str = Field(
        sa_column=Column(String(100), nullable=False),
        description="Fitting display name"
    )

    active: bool = Field(
        default=True,
        sa_column=Column(Boolean, nullable=False, default=True),
        description="Soft-delete flag"
    )
