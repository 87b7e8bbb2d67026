"""Unit tests for ReportLabPdfService"""

from datetime import date
from decimal import Decimal

from src.adapter.services.pdf_service import ReportLabPdfService, _format_quantity, _shown_unit_price
from src.domain.bill import Bill
from src.domain.line_item import LineItem, Unit


def _bill() -> Bill:
    return Bill(
        id=1,
        invoice_number=101,
        date=date(2024, 3, 15),
        customer_name="Ramesh Traders",
        sub_total=Decimal("255"),
        discount_amount=Decimal("25"),
        discount_percent=Decimal("9.80"),
        total=Decimal("230"),
        received_amount=Decimal("200"),
        balance=Decimal("30"),
    )


class TestReportLabPdfService:

    def test_renders_pdf_document(self):
        items = [
            LineItem(product_name="Hinge", quantity=Decimal("2"), unit_price=Decimal("100")),
            LineItem(
                product_name="Plywood (8x4) 5",
                quantity=Decimal("160"),
                unit=Unit.SQ_FT,
                unit_price=Decimal("1.5"),
                item_percent=Decimal("10"),
            ),
        ]

        content = ReportLabPdfService().generate_bill_estimate(
            bill=_bill(),
            items=items,
            company_name="Sharma Plywood",
            company_phone="0120-000000",
        )

        assert content.startswith(b"%PDF")
        assert len(content) > 1000

    def test_renders_without_items(self):
        content = ReportLabPdfService().generate_bill_estimate(
            bill=_bill(), items=[], company_name="Sharma Plywood"
        )

        assert content.startswith(b"%PDF")

    def test_shown_price_includes_row_percent(self):
        item = LineItem(product_name="Handle", quantity=Decimal("2"), unit_price=Decimal("50"), item_percent=Decimal("10"))

        assert _shown_unit_price(item) == Decimal("55.00")

    def test_zero_quantity_shows_plain_price(self):
        item = LineItem(product_name="Handle", quantity=Decimal("0"), unit_price=Decimal("50"))

        assert _shown_unit_price(item) == Decimal("50")

    def test_quantity_formatting(self):
        assert _format_quantity(Decimal("160")) == "160"
        assert _format_quantity(Decimal("2.5")) == "2.5"
        assert _format_quantity(Decimal("1200")) == "1,200"
