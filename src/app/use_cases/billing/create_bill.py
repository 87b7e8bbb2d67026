"""CreateBill Use Case

Finalizes a bill: validates it, recomputes its totals and persists it with
its lines. Optionally supersedes a draft in the same transaction.
"""

import logging
from typing import Optional
from sqlalchemy.exc import IntegrityError
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.line_repository import BillLineRepository
from src.app.repositories.draft_repository import DraftRepository
from src.domain.bill import Bill
from src.domain.bill_state import build_bill_state
from .dtos import BillCommandDTO, BillResponseDTO
from .validation import validate_bill_header, duplicate_invoice_error

logger = logging.getLogger(__name__)


class CreateBill:
    """
    Use Case: Create (finalize) a bill

    Business Rules:
    1. Customer name must be non-empty and at least one item is required
    2. Invoice number must be unique among non-deleted bills
    3. Stored totals always come from BillState, never from the client
    4. A concurrent save of the same number loses with DUPLICATE_INVOICE_NUMBER (no retry)
    5. When draft_id is given the draft is deleted in the same transaction

    Flow:
    1. Validate header and items
    2. Load the superseded draft (if any)
    3. Check invoice number uniqueness
    4. Compute state and persist bill + lines
    5. Delete draft, commit
    """

    def __init__(
        self,
        uow: UnitOfWork,
        bill_repo: BillRepository,
        bill_line_repo: BillLineRepository,
        draft_repo: Optional[DraftRepository] = None,
    ):
        self.uow = uow
        self.bill_repo = bill_repo
        self.bill_line_repo = bill_line_repo
        self.draft_repo = draft_repo

    async def execute(self, command: BillCommandDTO) -> Result[BillResponseDTO]:
        """
        Execute bill creation

        Args:
            command: BillCommandDTO with header, items, discount and received amount

        Returns:
            Result[BillResponseDTO]: Created bill or error
        """
        try:
            # Step 1: Validate
            items = command.line_items()
            validation_error = validate_bill_header(command.customer_name, items)
            if validation_error:
                return Return.err(validation_error)

            # Step 2: Superseded draft
            draft = None
            if command.draft_id is not None:
                if self.draft_repo is None:
                    raise RuntimeError("draft_id given but no draft repository configured")
                draft = await self.draft_repo.get_by_id(command.draft_id)
                if not draft:
                    return Return.err(
                        Error(
                            code="DRAFT_NOT_FOUND",
                            message=f"Draft with ID {command.draft_id} not found",
                            reason=f"draft_id={command.draft_id}",
                        )
                    )

            # Step 3: Uniqueness pre-check
            if await self.bill_repo.exists_active_invoice_number(command.invoice_number):
                return Return.err(duplicate_invoice_error(command.invoice_number))

            # Step 4: Compute and persist
            state = build_bill_state(
                items,
                discount_amount=command.discount_amount,
                discount_percent=command.discount_percent,
                received_amount=command.received_amount,
            )

            bill = Bill(
                invoice_number=command.invoice_number,
                date=command.date,
                customer_name=command.customer_name.strip(),
                customer_phone=command.customer_phone,
            )
            bill.apply_totals(state)
            created_bill = await self.bill_repo.create(bill)
            await self.bill_line_repo.replace_for_bill(created_bill.id, state.items)

            # Step 5: Supersede draft and commit
            if draft is not None:
                await self.draft_repo.delete(draft)

            await self.uow.commit()

            logger.info(
                f"Bill {created_bill.id} created: invoice={created_bill.invoice_number}, "
                f"total={created_bill.total}, items={len(state.items)}"
            )
            return Return.ok(BillResponseDTO.from_entity(created_bill, state.items))

        except IntegrityError as e:
            # Lost the race on ux_bills_invoice_number_live
            await self.uow.rollback()
            logger.warning(f"Duplicate invoice number {command.invoice_number} rejected by database")
            return Return.err(duplicate_invoice_error(command.invoice_number, reason=str(e.orig)))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to create bill {command.invoice_number}: {e}")
            return Return.err(
                Error(
                    code="CREATE_BILL_FAILED",
                    message="Failed to create bill",
                    reason=str(e),
                )
            )
