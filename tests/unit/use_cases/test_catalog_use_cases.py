"""Unit tests for catalog use cases

Tests cover:
- Cascading deactivation counts and cache invalidation
- Catalog tree assembly and caching
- Add with parent and duplicate checks
- Product name building from ids
"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock

from src.app.use_cases.catalog.deactivate_category import DeactivateCategory
from src.app.use_cases.catalog.get_catalog import GetCatalog
from src.app.use_cases.catalog.add_material import AddMaterial
from src.app.use_cases.catalog.build_product_name import BuildProductName
from src.app.use_cases.catalog.dtos import (
    CATALOG_CACHE_KEY,
    AddMaterialCommandDTO,
    ProductNameCommandDTO,
)
from src.domain.catalog import Category, Material, Size, Fitting


def _with_id(entity):
    entity.id = 11
    return entity


@pytest.fixture
def category_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Category(id=1, name="Boards"))
    repo.deactivate = AsyncMock()
    repo.list_active = AsyncMock(return_value=[Category(id=1, name="Boards")])
    return repo


@pytest.fixture
def material_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Material(id=10, category_id=1, name="Plywood"))
    repo.find_active_by_name = AsyncMock(return_value=None)
    repo.create = AsyncMock(side_effect=_with_id)
    repo.list_ids_by_category = AsyncMock(return_value=[10, 12])
    repo.deactivate_by_category = AsyncMock(return_value=2)
    repo.list_active = AsyncMock(return_value=[Material(id=10, category_id=1, name="Plywood")])
    return repo


@pytest.fixture
def size_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Size(id=100, material_id=10, value="(8x4) 5"))
    repo.deactivate_by_materials = AsyncMock(return_value=3)
    repo.list_active = AsyncMock(return_value=[Size(id=100, material_id=10, value="(8x4) 5")])
    return repo


@pytest.fixture
def fitting_repo():
    repo = MagicMock()
    repo.get_by_id = AsyncMock(return_value=Fitting(id=200, material_id=10, name="BWR"))
    repo.deactivate_by_materials = AsyncMock(return_value=1)
    repo.list_active = AsyncMock(return_value=[Fitting(id=200, material_id=10, name="BWR")])
    return repo


@pytest.mark.asyncio
class TestDeactivateCategory:

    async def test_cascade(self, mock_uow, mock_cache, category_repo, material_repo, size_repo, fitting_repo):
        use_case = DeactivateCategory(
            mock_uow, category_repo, material_repo, size_repo, fitting_repo, mock_cache
        )

        result = await use_case.execute(1)

        assert result.is_ok()
        assert result.value.deactivated_materials == 2
        assert result.value.deactivated_sizes == 3
        assert result.value.deactivated_fittings == 1
        size_repo.deactivate_by_materials.assert_called_once_with([10, 12])
        fitting_repo.deactivate_by_materials.assert_called_once_with([10, 12])
        mock_uow.commit.assert_called_once()
        mock_cache.delete.assert_called_once_with(CATALOG_CACHE_KEY)

    async def test_not_found(self, mock_uow, mock_cache, category_repo, material_repo, size_repo, fitting_repo):
        category_repo.get_by_id.return_value = None
        use_case = DeactivateCategory(
            mock_uow, category_repo, material_repo, size_repo, fitting_repo, mock_cache
        )

        result = await use_case.execute(5)

        assert result.is_err()
        assert result.error.code == "CATEGORY_NOT_FOUND"
        mock_cache.delete.assert_not_called()

    async def test_failure_rolls_back(
        self, mock_uow, mock_cache, category_repo, material_repo, size_repo, fitting_repo
    ):
        size_repo.deactivate_by_materials.side_effect = Exception("disk full")
        use_case = DeactivateCategory(
            mock_uow, category_repo, material_repo, size_repo, fitting_repo, mock_cache
        )

        result = await use_case.execute(1)

        assert result.is_err()
        assert result.error.code == "DEACTIVATE_CATEGORY_FAILED"
        mock_uow.rollback.assert_called_once()
        mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
class TestGetCatalog:

    async def test_builds_and_caches_tree(self, mock_cache, category_repo, material_repo, size_repo, fitting_repo):
        use_case = GetCatalog(category_repo, material_repo, size_repo, fitting_repo, mock_cache, ttl_seconds=60)

        result = await use_case.execute()

        assert result.is_ok()
        category = result.value.categories[0]
        assert category.name == "Boards"
        assert category.materials[0].sizes[0].value == "(8x4) 5"
        assert category.materials[0].fittings[0].name == "BWR"
        key, value, ttl = mock_cache.set.call_args.args
        assert key == CATALOG_CACHE_KEY
        assert ttl == 60
        assert value["categories"][0]["id"] == 1

    async def test_cache_hit_skips_repositories(
        self, mock_cache, category_repo, material_repo, size_repo, fitting_repo
    ):
        mock_cache.get.return_value = {"categories": [{"id": 9, "name": "Cached", "materials": []}]}
        use_case = GetCatalog(category_repo, material_repo, size_repo, fitting_repo, mock_cache)

        result = await use_case.execute()

        assert result.value.categories[0].name == "Cached"
        category_repo.list_active.assert_not_called()


@pytest.mark.asyncio
class TestAddMaterial:

    async def test_trimmed_name_created(self, mock_uow, mock_cache, category_repo, material_repo):
        use_case = AddMaterial(mock_uow, category_repo, material_repo, mock_cache)

        result = await use_case.execute(AddMaterialCommandDTO(category_id=1, name="  MDF  "))

        assert result.is_ok()
        assert result.value.name == "MDF"
        mock_cache.delete.assert_called_once_with(CATALOG_CACHE_KEY)

    async def test_duplicate(self, mock_uow, mock_cache, category_repo, material_repo):
        material_repo.find_active_by_name.return_value = Material(id=10, category_id=1, name="MDF")
        use_case = AddMaterial(mock_uow, category_repo, material_repo, mock_cache)

        result = await use_case.execute(AddMaterialCommandDTO(category_id=1, name="MDF"))

        assert result.is_err()
        assert result.error.code == "MATERIAL_ALREADY_EXISTS"

    async def test_inactive_parent(self, mock_uow, mock_cache, category_repo, material_repo):
        category_repo.get_by_id.return_value = Category(id=1, name="Boards", active=False)
        use_case = AddMaterial(mock_uow, category_repo, material_repo, mock_cache)

        result = await use_case.execute(AddMaterialCommandDTO(category_id=1, name="MDF"))

        assert result.is_err()
        assert result.error.code == "CATEGORY_NOT_FOUND"

    async def test_blank_name(self, mock_uow, mock_cache, category_repo, material_repo):
        use_case = AddMaterial(mock_uow, category_repo, material_repo, mock_cache)

        result = await use_case.execute(AddMaterialCommandDTO(category_id=1, name="   "))

        assert result.is_err()
        assert result.error.code == "VALIDATION_ERROR"
        material_repo.create.assert_not_called()


@pytest.mark.asyncio
class TestBuildProductName:

    async def test_ply_name_includes_quantity(self, material_repo, size_repo, fitting_repo):
        use_case = BuildProductName(material_repo, size_repo, fitting_repo)

        result = await use_case.execute(ProductNameCommandDTO(material_id=10, size_id=100, fitting_id=200))

        assert result.is_ok()
        assert result.value.product_name == "Plywood (8x4) 5 BWR"
        assert result.value.is_ply is True
        assert result.value.quantity == Decimal("160")
        assert result.value.unit == "Sq-Ft"

    async def test_size_from_other_material(self, material_repo, size_repo, fitting_repo):
        size_repo.get_by_id.return_value = Size(id=101, material_id=99, value="18mm")
        use_case = BuildProductName(material_repo, size_repo, fitting_repo)

        result = await use_case.execute(ProductNameCommandDTO(material_id=10, size_id=101))

        assert result.is_err()
        assert result.error.code == "SIZE_NOT_FOUND"

    async def test_empty_selection(self, material_repo, size_repo, fitting_repo):
        use_case = BuildProductName(material_repo, size_repo, fitting_repo)

        result = await use_case.execute(ProductNameCommandDTO())

        assert result.value.product_name == ""
        assert result.value.is_ply is False
