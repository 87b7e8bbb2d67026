"""ReportLab PDF Generation Service Implementation

Renders the printable estimate for a bill using ReportLab.
"""

from io import BytesIO
from typing import List
from decimal import Decimal

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet, ParagraphStyle
from reportlab.lib.units import mm
from reportlab.platypus import (
    SimpleDocTemplate,
    Table,
    TableStyle,
    Paragraph,
    Spacer,
)

from src.app.services.pdf_service import PdfService
from src.domain.amount_words import amount_in_words
from src.domain.bill import Bill
from src.domain.bill_computer import to_money, ZERO
from src.domain.line_item import LineItem

COLUMN_WIDTHS = [12 * mm, 68 * mm, 22 * mm, 18 * mm, 25 * mm, 25 * mm]


def _format_quantity(quantity: Decimal) -> str:
    return f"{quantity:,.6f}".rstrip("0").rstrip(".")


def _shown_unit_price(item: LineItem) -> Decimal:
    """Per-unit price with the row percentage folded in (amount / quantity)"""
    if item.quantity == ZERO:
        return item.unit_price
    return to_money(item.amount / item.quantity)


class ReportLabPdfService(PdfService):
    """
    ReportLab implementation of PdfService

    Layout: company header, bill header, item table, totals block and the
    total in words.
    """

    def generate_bill_estimate(
        self,
        bill: Bill,
        items: List[LineItem],
        company_name: str,
        company_phone: str = "",
        currency_label: str = "Rs.",
    ) -> bytes:
        """
        Generate an estimate PDF for a bill

        Args:
            bill: Bill entity with header and stored totals
            items: Line items in display order
            company_name: Company name to display in the header
            company_phone: Company phone to display in the header
            currency_label: Prefix used for money values

        Returns:
            PDF document as bytes
        """
        buffer = BytesIO()
        doc = SimpleDocTemplate(
            buffer,
            pagesize=A4,
            rightMargin=15 * mm,
            leftMargin=15 * mm,
            topMargin=15 * mm,
            bottomMargin=15 * mm,
            title=f"Estimate {bill.invoice_number}",
        )

        styles = getSampleStyleSheet()
        elements = []

        title_style = ParagraphStyle(
            "TitleStyle",
            parent=styles["Heading1"],
            fontSize=22,
            alignment=1,
            spaceAfter=4,
            textColor=colors.HexColor("#2C3E50"),
        )
        subtitle_style = ParagraphStyle(
            "SubtitleStyle",
            parent=styles["Heading2"],
            fontSize=13,
            alignment=1,
            textColor=colors.HexColor("#7F8C8D"),
            spaceAfter=12,
        )
        normal_style = ParagraphStyle(
            "NormalStyle",
            parent=styles["Normal"],
            fontSize=10,
        )

        def money(value: Decimal) -> str:
            return f"{currency_label} {value:,.2f}"

        # Header
        elements.append(Paragraph(company_name, title_style))
        if company_phone:
            elements.append(Paragraph(f"Phone: {company_phone}", subtitle_style))
        elements.append(Paragraph("ESTIMATE", subtitle_style))

        header_info = [
            ["Estimate No:", str(bill.invoice_number), "Date:", bill.date.strftime("%d-%m-%Y")],
            ["Customer:", bill.customer_name, "Phone:", bill.customer_phone or "-"],
        ]
        header_table = Table(header_info, colWidths=[28 * mm, 72 * mm, 20 * mm, 50 * mm])
        header_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (0, 0), (0, -1), "Helvetica-Bold"),
                    ("FONTNAME", (2, 0), (2, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("VALIGN", (0, 0), (-1, -1), "TOP"),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(header_table)
        elements.append(Spacer(1, 6 * mm))

        # Items
        line_data = [["S.No", "Product", "Qty", "Unit", "Price", "Amount"]]
        for index, item in enumerate(items, start=1):
            line_data.append(
                [
                    str(index),
                    item.product_name,
                    _format_quantity(item.quantity),
                    item.unit.value,
                    f"{_shown_unit_price(item):,.2f}",
                    f"{item.amount:,.2f}",
                ]
            )

        line_table = Table(line_data, colWidths=COLUMN_WIDTHS, repeatRows=1)
        line_table.setStyle(
            TableStyle(
                [
                    ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#2C3E50")),
                    ("TEXTCOLOR", (0, 0), (-1, 0), colors.white),
                    ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, 0), 10),
                    ("ALIGN", (0, 0), (-1, 0), "CENTER"),
                    ("FONTSIZE", (0, 1), (-1, -1), 9),
                    ("ALIGN", (2, 1), (2, -1), "RIGHT"),
                    ("ALIGN", (4, 1), (-1, -1), "RIGHT"),
                    ("GRID", (0, 0), (-1, -1), 0.5, colors.HexColor("#BDC3C7")),
                    ("BOTTOMPADDING", (0, 0), (-1, -1), 5),
                    ("TOPPADDING", (0, 0), (-1, -1), 5),
                    (
                        "ROWBACKGROUNDS",
                        (0, 1),
                        (-1, -1),
                        [colors.white, colors.HexColor("#F8F9F9")],
                    ),
                ]
            )
        )
        elements.append(line_table)
        elements.append(Spacer(1, 4 * mm))

        # Totals
        total_rows = [["Sub Total:", money(bill.sub_total)]]
        if bill.discount_amount > ZERO:
            total_rows.append(
                [f"Discount ({bill.discount_percent.normalize():f}%):", f"- {money(bill.discount_amount)}"]
            )
        total_rows.append(["Total:", money(bill.total)])
        if bill.received_amount > ZERO:
            total_rows.append(["Received:", money(bill.received_amount)])
            total_rows.append(["Balance:", money(bill.balance)])

        totals_table = Table(
            [["", "", label, value] for label, value in total_rows],
            colWidths=[60 * mm, 35 * mm, 40 * mm, 35 * mm],
        )
        totals_table.setStyle(
            TableStyle(
                [
                    ("FONTNAME", (2, 0), (-1, -1), "Helvetica-Bold"),
                    ("FONTSIZE", (0, 0), (-1, -1), 10),
                    ("ALIGN", (2, 0), (-1, -1), "RIGHT"),
                    ("LINEABOVE", (2, 0), (-1, 0), 1.5, colors.HexColor("#2C3E50")),
                    ("TOPPADDING", (0, 0), (-1, -1), 4),
                ]
            )
        )
        elements.append(totals_table)
        elements.append(Spacer(1, 6 * mm))

        elements.append(
            Paragraph(f"<b>Amount in words:</b> {amount_in_words(bill.total)} only", normal_style)
        )
        elements.append(Spacer(1, 12 * mm))

        elements.append(
            Paragraph(
                "<i>This is an estimate, not a tax invoice.</i>",
                ParagraphStyle(
                    "FooterNote",
                    parent=styles["Normal"],
                    fontSize=9,
                    textColor=colors.HexColor("#95A5A6"),
                ),
            )
        )

        doc.build(elements)
        pdf_bytes = buffer.getvalue()
        buffer.close()

        return pdf_bytes
