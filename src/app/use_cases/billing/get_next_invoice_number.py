"""GetNextInvoiceNumber Use Case

Suggests the invoice number for a new bill.
"""

from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from .dtos import NextInvoiceNumberDTO


class GetNextInvoiceNumber:
    """
    Use Case: Suggest the next invoice number

    Business Rules:
    - max(invoice_number) over non-deleted bills + 1, or 1 when there are none
    - The number is a suggestion only; uniqueness is enforced on save
    """

    def __init__(self, bill_repo: BillRepository):
        self.bill_repo = bill_repo

    async def execute(self) -> Result[NextInvoiceNumberDTO]:
        try:
            current_max = await self.bill_repo.get_max_active_invoice_number()
            return Return.ok(NextInvoiceNumberDTO(invoice_number=(current_max or 0) + 1))

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_NEXT_INVOICE_NUMBER_FAILED",
                    message="Failed to compute next invoice number",
                    reason=str(e),
                )
            )
