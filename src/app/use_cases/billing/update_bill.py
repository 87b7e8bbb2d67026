"""UpdateBill Use Case

Replaces the header, lines and totals of an existing live bill.
"""

import logging
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.line_repository import BillLineRepository
from src.domain.bill_state import build_bill_state
from .dtos import BillCommandDTO, BillResponseDTO
from .validation import validate_bill_header, duplicate_invoice_error

logger = logging.getLogger(__name__)


class UpdateBill:
    """
    Use Case: Update a bill

    Business Rules:
    1. Same validation as CreateBill
    2. Deleted bills cannot be updated (BILL_NOT_FOUND)
    3. Uniqueness check ignores the bill being updated
    4. Lines are replaced wholesale and totals recomputed
    """

    def __init__(
        self,
        uow: UnitOfWork,
        bill_repo: BillRepository,
        bill_line_repo: BillLineRepository,
    ):
        self.uow = uow
        self.bill_repo = bill_repo
        self.bill_line_repo = bill_line_repo

    async def execute(self, bill_id: int, command: BillCommandDTO) -> Result[BillResponseDTO]:
        """
        Execute bill update

        Args:
            bill_id: Bill to update
            command: New header, items and amounts

        Returns:
            Result[BillResponseDTO]: Updated bill or error
        """
        try:
            items = command.line_items()
            validation_error = validate_bill_header(command.customer_name, items)
            if validation_error:
                return Return.err(validation_error)

            bill = await self.bill_repo.get_by_id(bill_id)
            if not bill:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message=f"Bill with ID {bill_id} not found",
                        reason=f"bill_id={bill_id}",
                    )
                )

            if await self.bill_repo.exists_active_invoice_number(
                command.invoice_number, exclude_bill_id=bill_id
            ):
                return Return.err(duplicate_invoice_error(command.invoice_number))

            state = build_bill_state(
                items,
                discount_amount=command.discount_amount,
                discount_percent=command.discount_percent,
                received_amount=command.received_amount,
            )

            bill.invoice_number = command.invoice_number
            bill.date = command.date
            bill.customer_name = command.customer_name.strip()
            bill.customer_phone = command.customer_phone
            bill.apply_totals(state)

            updated_bill = await self.bill_repo.update(bill)
            await self.bill_line_repo.replace_for_bill(updated_bill.id, state.items)
            await self.uow.commit()

            logger.info(
                f"Bill {updated_bill.id} updated: invoice={updated_bill.invoice_number}, "
                f"total={updated_bill.total}"
            )
            return Return.ok(BillResponseDTO.from_entity(updated_bill, state.items))

        except IntegrityError as e:
            await self.uow.rollback()
            return Return.err(duplicate_invoice_error(command.invoice_number, reason=str(e.orig)))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to update bill {bill_id}: {e}")
            return Return.err(
                Error(
                    code="UPDATE_BILL_FAILED",
                    message="Failed to update bill",
                    reason=str(e),
                )
            )
