"""Unit tests for product name building and catalog selection"""

from src.domain.catalog import Material, Size, Fitting
from src.domain.product_name import build_name, CatalogSelection


class TestBuildName:

    def test_full_chain(self):
        name = build_name(
            Material(id=1, category_id=1, name="Plywood"),
            Size(id=1, material_id=1, value="(8x4) 5"),
            Fitting(id=1, material_id=1, name="BWR"),
        )
        assert name == "Plywood (8x4) 5 BWR"

    def test_missing_parts_are_skipped(self):
        material = Material(id=1, category_id=1, name="Hinge")
        fitting = Fitting(id=2, material_id=1, name="Brass")

        assert build_name(material) == "Hinge"
        assert build_name(material, fitting=fitting) == "Hinge Brass"

    def test_empty_selection(self):
        assert build_name() == ""


class TestCatalogSelection:

    def test_selecting_category_clears_everything_below(self):
        selection = CatalogSelection(category_id=1, material_id=2, size_id=3, fitting_id=4)

        selection = selection.select_category(5)

        assert selection == CatalogSelection(category_id=5)

    def test_selecting_material_keeps_category(self):
        selection = CatalogSelection(category_id=1, material_id=2, size_id=3, fitting_id=4)

        selection = selection.select_material(7)

        assert selection.category_id == 1
        assert selection.material_id == 7
        assert selection.size_id is None
        assert selection.fitting_id is None

    def test_size_and_fitting_are_siblings(self):
        selection = CatalogSelection(category_id=1, material_id=2).select_size(3).select_fitting(4)
        selection = selection.select_size(9)

        assert selection.size_id == 9
        assert selection.fitting_id == 4
