"""Product Name Builder

Composes a product name from the selected catalog chain and tracks the
selection with its prefix-reset rule.
"""

from typing import Optional
from pydantic import BaseModel, ConfigDict
from src.domain.catalog import Material, Size, Fitting


def build_name(
    material: Optional[Material] = None,
    size: Optional[Size] = None,
    fitting: Optional[Fitting] = None,
) -> str:
    """
    Join material name, size value and fitting name with single spaces

    Absent parts are skipped; an empty selection yields "".
    """
    parts = []
    if material is not None and material.name:
        parts.append(material.name)
    if size is not None and size.value:
        parts.append(size.value)
    if fitting is not None and fitting.name:
        parts.append(fitting.name)
    return " ".join(parts)


class CatalogSelection(BaseModel):
    """
    Current pick along Category -> Material -> {Size, Fitting}

    Selecting a node clears everything below it; Size and Fitting are
    siblings and never clear each other.
    """

    model_config = ConfigDict(frozen=True)

    category_id: Optional[int] = None
    material_id: Optional[int] = None
    size_id: Optional[int] = None
    fitting_id: Optional[int] = None

    def select_category(self, category_id: Optional[int]) -> "CatalogSelection":
        return CatalogSelection(category_id=category_id)

    def select_material(self, material_id: Optional[int]) -> "CatalogSelection":
        return CatalogSelection(category_id=self.category_id, material_id=material_id)

    def select_size(self, size_id: Optional[int]) -> "CatalogSelection":
        return self.model_copy(update={"size_id": size_id})

    def select_fitting(self, fitting_id: Optional[int]) -> "CatalogSelection":
        return self.model_copy(update={"fitting_id": fitting_id})
