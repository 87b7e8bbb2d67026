"""DeleteBill Use Case

Soft-deletes a bill. The row and its lines are kept; the invoice number
becomes available again.
"""

import logging
from libs.result import Result, Return, Error
from src.domain.base import utc_now
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from .dtos import DeleteBillResponseDTO

logger = logging.getLogger(__name__)


class DeleteBill:
    """
    Use Case: Soft-delete a bill

    Business Rules:
    1. Missing bill -> BILL_NOT_FOUND
    2. Already deleted bill -> BILL_ALREADY_DELETED (deleted is terminal)
    3. Sets deleted and deleted_at; nothing else changes
    """

    def __init__(self, uow: UnitOfWork, bill_repo: BillRepository):
        self.uow = uow
        self.bill_repo = bill_repo

    async def execute(self, bill_id: int) -> Result[DeleteBillResponseDTO]:
        try:
            bill = await self.bill_repo.get_by_id(bill_id, include_deleted=True)
            if not bill:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message=f"Bill with ID {bill_id} not found",
                        reason=f"bill_id={bill_id}",
                    )
                )

            if bill.deleted:
                return Return.err(
                    Error(
                        code="BILL_ALREADY_DELETED",
                        message=f"Bill with ID {bill_id} is already deleted",
                        reason=f"deleted_at={bill.deleted_at}",
                    )
                )

            bill.deleted = True
            bill.deleted_at = utc_now()
            deleted_bill = await self.bill_repo.update(bill)
            await self.uow.commit()

            logger.info(f"Bill {bill_id} (invoice {deleted_bill.invoice_number}) soft-deleted")
            return Return.ok(
                DeleteBillResponseDTO(
                    id=deleted_bill.id,
                    invoice_number=deleted_bill.invoice_number,
                    deleted=True,
                    deleted_at=deleted_bill.deleted_at,
                )
            )

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete bill {bill_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_BILL_FAILED",
                    message="Failed to delete bill",
                    reason=str(e),
                )
            )
