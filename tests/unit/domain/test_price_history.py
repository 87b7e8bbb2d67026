"""Unit tests for price history suggestions"""

from datetime import date
from decimal import Decimal

from src.domain.line_item import LineItem, Unit
from src.domain.price_history import PricedBill, lookup_price_history


def _bill(day: int, *items: LineItem) -> PricedBill:
    return PricedBill(date=date(2024, 3, day), items=list(items))


def _item(name: str, price: str, unit: Unit = Unit.PCS) -> LineItem:
    return LineItem(product_name=name, quantity=Decimal("1"), unit_price=Decimal(price), unit=unit)


def test_distinct_prices_newest_first():
    bills = [
        _bill(6, _item("Hinge", "10")),
        _bill(5, _item("Hinge", "10")),
        _bill(4, _item("Hinge", "20")),
        _bill(3, _item("Hinge", "30")),
        _bill(2, _item("Hinge", "40")),
        _bill(1, _item("Hinge", "50")),
    ]

    suggestions = lookup_price_history("Hinge", bills, cap=5)

    assert [s.price for s in suggestions] == [Decimal(p) for p in ["10", "20", "30", "40", "50"]]
    assert suggestions[0].date == date(2024, 3, 6)


def test_cap_truncates():
    bills = [_bill(day, _item("Hinge", str(day))) for day in range(9, 0, -1)]

    suggestions = lookup_price_history("Hinge", bills, cap=3)

    assert [s.price for s in suggestions] == [Decimal("9"), Decimal("8"), Decimal("7")]


def test_match_is_exact_and_case_sensitive():
    bills = [_bill(1, _item("hinge", "10"), _item("Hinge ", "11"), _item("Hinge", "12"))]

    suggestions = lookup_price_history("Hinge", bills)

    assert [s.price for s in suggestions] == [Decimal("12")]


def test_suggestion_carries_unit():
    bills = [_bill(1, _item("Plywood (8x4) 1", "1.5", unit=Unit.SQ_FT))]

    suggestions = lookup_price_history("Plywood (8x4) 1", bills)

    assert suggestions[0].unit == "Sq-Ft"


def test_no_history():
    assert lookup_price_history("Hinge", []) == []
    assert lookup_price_history("Hinge", [_bill(1, _item("Handle", "5"))]) == []
