"""Unit tests for the bill computation functions"""

import pytest
from decimal import Decimal
from pydantic import ValidationError

from src.domain.bill_computer import (
    derive_line_amount,
    detect_ply_pattern,
    apply_bill_discount_from_percent,
    apply_bill_discount_from_amount,
    compute_bill_totals,
    apply_uniform_percent_to_all_items,
)
from src.domain.line_item import LineItem, Unit


class TestDeriveLineAmount:
    """Row amount = quantity * unit_price adjusted by item_percent"""

    def test_markup_is_added(self):
        assert derive_line_amount(Decimal("10"), Decimal("50"), Decimal("10")) == Decimal("550")

    def test_discount_is_subtracted(self):
        assert derive_line_amount(Decimal("2"), Decimal("100"), Decimal("-20")) == Decimal("160")

    def test_zero_percent_is_plain_product(self):
        assert derive_line_amount(Decimal("3"), Decimal("12.5"), Decimal("0")) == Decimal("37.50")

    def test_full_discount_gives_zero(self):
        assert derive_line_amount(Decimal("4"), Decimal("25"), Decimal("-100")) == Decimal("0")

    def test_rounds_half_up_to_cents(self):
        # 1 * 0.125 = 0.125 -> 0.13
        assert derive_line_amount(Decimal("1"), Decimal("0.125"), Decimal("0")) == Decimal("0.13")

    def test_quantity_is_not_rounded(self):
        item = LineItem(quantity=Decimal("1.3333"), unit_price=Decimal("3"))
        assert item.quantity == Decimal("1.3333")
        assert item.amount == Decimal("4.00")


class TestDetectPlyPattern:
    """Parsing "(H x W) N" out of product names"""

    def test_plywood_name(self):
        dimensions = detect_ply_pattern("Plywood (8x4) 5")

        assert dimensions.height == Decimal("8")
        assert dimensions.width == Decimal("4")
        assert dimensions.piece_count == 5
        assert dimensions.square_feet == Decimal("160")

    def test_detection_is_idempotent(self):
        assert detect_ply_pattern("Plywood (8x4) 5") == detect_ply_pattern("Plywood (8x4) 5")

    @pytest.mark.parametrize("name", ["Board (8 X 4) 2", "Board (8 × 4) 2", "Board (8x4)2"])
    def test_separator_and_spacing_variants(self, name):
        dimensions = detect_ply_pattern(name)
        assert dimensions is not None
        assert dimensions.square_feet == Decimal("64")

    def test_fractional_dimensions(self):
        dimensions = detect_ply_pattern("Laminate (7.5x3) 2")
        assert dimensions.square_feet == Decimal("45.0")

    @pytest.mark.parametrize("name", ["", "Hinge", "Sheet 8x4", "Board (8x4)", "Board (x4) 2"])
    def test_no_pattern(self, name):
        assert detect_ply_pattern(name) is None

    def test_none_is_treated_as_empty(self):
        assert detect_ply_pattern(None) is None


class TestBillDiscountLinkage:
    """Percent and amount halves of the bill discount"""

    def test_amount_from_percent(self):
        assert apply_bill_discount_from_percent(Decimal("255"), Decimal("10")) == Decimal("25.50")

    def test_percent_from_amount_is_whole_number(self):
        # 25 / 255 = 9.8% -> 10
        assert apply_bill_discount_from_amount(Decimal("255"), Decimal("25")) == Decimal("10")

    def test_percent_from_amount_on_zero_subtotal(self):
        assert apply_bill_discount_from_amount(Decimal("0"), Decimal("25")) == Decimal("0")

    @pytest.mark.parametrize("sub_total", ["1", "3", "7.50", "99.99", "255", "123456.78"])
    @pytest.mark.parametrize("percent", ["0", "0.5", "9.8", "12.5", "33.3", "99.5", "100"])
    def test_percent_survives_amount_round_trip(self, sub_total, percent):
        sub_total, percent = Decimal(sub_total), Decimal(percent)

        amount = apply_bill_discount_from_percent(sub_total, percent)
        recovered = apply_bill_discount_from_amount(sub_total, amount)

        assert abs(recovered - percent) <= 1


class TestComputeBillTotals:
    """Subtotal, total and balance roll-up"""

    def test_end_to_end_example(self):
        items = [
            LineItem(quantity=Decimal("2"), unit_price=Decimal("100")),
            LineItem(quantity=Decimal("1"), unit_price=Decimal("50"), item_percent=Decimal("10")),
        ]

        totals = compute_bill_totals(items, Decimal("25"), Decimal("200"))

        assert totals.sub_total == Decimal("255")
        assert totals.total == Decimal("230")
        assert totals.balance == Decimal("30")

    def test_total_never_negative(self):
        items = [LineItem(quantity=Decimal("1"), unit_price=Decimal("10"))]
        totals = compute_bill_totals(items, Decimal("50"), Decimal("0"))
        assert totals.total == Decimal("0")

    def test_overpayment_leaves_zero_balance(self):
        items = [LineItem(quantity=Decimal("1"), unit_price=Decimal("10"))]
        totals = compute_bill_totals(items, Decimal("0"), Decimal("100"))
        assert totals.balance == Decimal("0")

    def test_empty_bill(self):
        totals = compute_bill_totals([], Decimal("0"), Decimal("0"))
        assert totals.sub_total == Decimal("0")
        assert totals.total == Decimal("0")
        assert totals.balance == Decimal("0")


class TestApplyUniformPercent:
    """Bulk markup baked into unit prices"""

    def test_applied_twice_compounds_on_price_only(self):
        items = [LineItem(quantity=Decimal("1"), unit_price=Decimal("100"), item_percent=Decimal("5"))]

        once = apply_uniform_percent_to_all_items(items, Decimal("10"))
        twice = apply_uniform_percent_to_all_items(once, Decimal("10"))

        assert once[0].unit_price == Decimal("110")
        assert once[0].item_percent == Decimal("0")
        assert twice[0].unit_price == Decimal("121")
        assert twice[0].item_percent == Decimal("0")
        assert twice[0].amount == Decimal("121")

    def test_zero_priced_items_are_untouched(self):
        free = LineItem(product_name="Sample", quantity=Decimal("1"), item_percent=Decimal("5"))
        priced = LineItem(product_name="Hinge", quantity=Decimal("1"), unit_price=Decimal("40"))

        result = apply_uniform_percent_to_all_items([free, priced], Decimal("-25"))

        assert result[0] == free
        assert result[1].unit_price == Decimal("30")
        assert [item.product_name for item in result] == ["Sample", "Hinge"]


class TestLineItem:
    """LineItem value object"""

    def test_ply_name_sets_quantity_and_unit(self):
        item = LineItem(quantity=Decimal("1")).with_product_name("Plywood (8x4) 5")

        assert item.quantity == Decimal("160")
        assert item.unit == Unit.SQ_FT
        assert item.is_ply is True
        assert item.piece_count == 5

    def test_plain_name_clears_ply_metadata(self):
        ply = LineItem().with_product_name("Plywood (8x4) 5")
        plain = ply.with_product_name("Hinge")

        assert plain.is_ply is False
        assert plain.height is None
        assert plain.quantity == Decimal("160")

    @pytest.mark.parametrize("percent", ["-100.01", "1000.01"])
    def test_item_percent_outside_range_rejected(self, percent):
        with pytest.raises(ValidationError):
            LineItem(item_percent=Decimal(percent))

    def test_negative_quantity_rejected(self):
        with pytest.raises(ValidationError):
            LineItem(quantity=Decimal("-1"))
