"""Catalog use cases"""
from .get_catalog import GetCatalog
from .list_catalog_children import ListMaterials, ListSizes, ListFittings
from .add_category import AddCategory
from .add_material import AddMaterial
from .add_size import AddSize
from .add_fitting import AddFitting
from .deactivate_category import DeactivateCategory
from .deactivate_material import DeactivateMaterial
from .deactivate_leaf import DeactivateSize, DeactivateFitting
from .build_product_name import BuildProductName

__all__ = [
    "GetCatalog",
    "ListMaterials",
    "ListSizes",
    "ListFittings",
    "AddCategory",
    "AddMaterial",
    "AddSize",
    "AddFitting",
    "DeactivateCategory",
    "DeactivateMaterial",
    "DeactivateSize",
    "DeactivateFitting",
    "BuildProductName",
]
