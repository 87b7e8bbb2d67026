"""
Generate Bill PDF Use Case

Renders the printable estimate of a stored bill.
"""

import logging
from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.line_repository import BillLineRepository
from src.app.services.pdf_service import PdfService
from .dtos import BillPdfDTO

logger = logging.getLogger(__name__)


class GenerateBillPdf:
    """
    Use case: Generate the estimate PDF for a bill

    The PDF shows the stored totals; each row's displayed unit price is
    amount / quantity so the item percent is folded in.
    """

    def __init__(
        self,
        bill_repo: BillRepository,
        bill_line_repo: BillLineRepository,
        pdf_service: PdfService,
        company_name: str,
        company_phone: str = "",
        currency_label: str = "Rs.",
    ):
        self.bill_repo = bill_repo
        self.bill_line_repo = bill_line_repo
        self.pdf_service = pdf_service
        self.company_name = company_name
        self.company_phone = company_phone
        self.currency_label = currency_label

    async def execute(self, bill_id: int) -> Result[BillPdfDTO]:
        """
        Generate the PDF

        Args:
            bill_id: ID of a live bill

        Returns:
            Result with BillPdfDTO containing the PDF bytes
        """
        try:
            # Step 1: Load bill
            bill = await self.bill_repo.get_by_id(bill_id)
            if not bill:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message=f"Bill with ID {bill_id} not found",
                        reason=f"bill_id={bill_id}",
                    )
                )

            # Step 2: Load lines
            lines = await self.bill_line_repo.get_by_bill_id(bill.id)

            # Step 3: Render
            pdf_bytes = self.pdf_service.generate_bill_estimate(
                bill=bill,
                items=[line.to_line_item() for line in lines],
                company_name=self.company_name,
                company_phone=self.company_phone,
                currency_label=self.currency_label,
            )

            return Return.ok(
                BillPdfDTO(
                    bill_id=bill.id,
                    invoice_number=bill.invoice_number,
                    filename=f"estimate_{bill.invoice_number}.pdf",
                    content=pdf_bytes,
                )
            )

        except Exception as e:
            logger.error(f"Failed to generate PDF for bill {bill_id}: {e}")
            return Return.err(
                Error(
                    code="GENERATE_BILL_PDF_FAILED",
                    message="Failed to generate bill PDF",
                    reason=str(e),
                )
            )
