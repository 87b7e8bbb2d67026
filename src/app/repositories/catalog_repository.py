"""Catalog Repository Interfaces

Defines the contract for Category, Material, Size and Fitting persistence.
Bulk deactivation methods back the explicit cascade performed by the
catalog use cases.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from src.domain.catalog import Category, Material, Size, Fitting


class CategoryRepository(ABC):
    """Repository interface for Category persistence"""

    @abstractmethod
    async def create(self, category: Category) -> Category:
        pass

    @abstractmethod
    async def get_by_id(self, category_id: int) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_active_by_name(self, name: str) -> Optional[Category]:
        pass

    @abstractmethod
    async def list_active(self) -> List[Category]:
        pass

    @abstractmethod
    async def deactivate(self, category: Category) -> Category:
        pass


class MaterialRepository(ABC):
    """Repository interface for Material persistence"""

    @abstractmethod
    async def create(self, material: Material) -> Material:
        pass

    @abstractmethod
    async def get_by_id(self, material_id: int) -> Optional[Material]:
        pass

    @abstractmethod
    async def find_active_by_name(self, category_id: int, name: str) -> Optional[Material]:
        pass

    @abstractmethod
    async def list_active(self, category_id: Optional[int] = None) -> List[Material]:
        """Active materials, optionally restricted to one category"""
        pass

    @abstractmethod
    async def list_ids_by_category(self, category_id: int) -> List[int]:
        """IDs of all materials of a category, active or not"""
        pass

    @abstractmethod
    async def deactivate(self, material: Material) -> Material:
        pass

    @abstractmethod
    async def deactivate_by_category(self, category_id: int) -> int:
        """
        Deactivate every active material of a category

        Returns:
            Number of materials deactivated
        """
        pass


class SizeRepository(ABC):
    """Repository interface for Size persistence"""

    @abstractmethod
    async def create(self, size: Size) -> Size:
        pass

    @abstractmethod
    async def get_by_id(self, size_id: int) -> Optional[Size]:
        pass

    @abstractmethod
    async def find_active_by_value(self, material_id: int, value: str) -> Optional[Size]:
        pass

    @abstractmethod
    async def list_active(self, material_id: Optional[int] = None) -> List[Size]:
        pass

    @abstractmethod
    async def deactivate(self, size: Size) -> Size:
        pass

    @abstractmethod
    async def deactivate_by_materials(self, material_ids: Sequence[int]) -> int:
        """
        Deactivate every active size of the given materials

        Returns:
            Number of sizes deactivated
        """
        pass


class FittingRepository(ABC):
    """Repository interface for Fitting persistence"""

    @abstractmethod
    async def create(self, fitting: Fitting) -> Fitting:
        pass

    @abstractmethod
    async def get_by_id(self, fitting_id: int) -> Optional[Fitting]:
        pass

    @abstractmethod
    async def find_active_by_name(self, material_id: int, name: str) -> Optional[Fitting]:
        pass

    @abstractmethod
    async def list_active(self, material_id: Optional[int] = None) -> List[Fitting]:
        pass

    @abstractmethod
    async def deactivate(self, fitting: Fitting) -> Fitting:
        pass

    @abstractmethod
    async def deactivate_by_materials(self, material_ids: Sequence[int]) -> int:
        """
        Deactivate every active fitting of the given materials

        Returns:
            Number of fittings deactivated
        """
        pass
