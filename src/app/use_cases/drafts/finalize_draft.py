"""FinalizeDraft Use Case

Promotes a draft to a bill. The draft is deleted in the same transaction
by CreateBill.
"""

from datetime import date
from libs.result import Result, Return, Error
from src.app.repositories.draft_repository import DraftRepository
from src.app.repositories.line_repository import DraftLineRepository
from src.app.use_cases.billing.create_bill import CreateBill
from src.app.use_cases.billing.dtos import BillCommandDTO, BillResponseDTO, LineItemDTO


class FinalizeDraft:
    """
    Use Case: Finalize a draft into a bill

    Business Rules:
    1. Missing draft -> DRAFT_NOT_FOUND
    2. The draft must carry an invoice number (VALIDATION_ERROR otherwise)
    3. A draft without a date is billed today
    4. All CreateBill rules apply; on failure the draft is left untouched

    Flow:
    1. Load draft and its lines
    2. Build a BillCommandDTO carrying draft_id
    3. Delegate to CreateBill
    """

    def __init__(
        self,
        draft_repo: DraftRepository,
        draft_line_repo: DraftLineRepository,
        create_bill: CreateBill,
    ):
        self.draft_repo = draft_repo
        self.draft_line_repo = draft_line_repo
        self.create_bill = create_bill

    async def execute(self, draft_id: int) -> Result[BillResponseDTO]:
        try:
            draft = await self.draft_repo.get_by_id(draft_id)
            if not draft:
                return Return.err(
                    Error(
                        code="DRAFT_NOT_FOUND",
                        message=f"Draft with ID {draft_id} not found",
                        reason=f"draft_id={draft_id}",
                    )
                )

            if draft.invoice_number is None:
                return Return.err(
                    Error(
                        code="VALIDATION_ERROR",
                        message="Invoice number is required",
                        reason=f"draft {draft_id} has no invoice_number",
                    )
                )

            lines = await self.draft_line_repo.get_by_draft_id(draft.id)
            command = BillCommandDTO(
                invoice_number=draft.invoice_number,
                date=draft.date or date.today(),
                customer_name=draft.customer_name,
                customer_phone=draft.customer_phone,
                items=[
                    LineItemDTO(
                        product_name=line.product_name,
                        quantity=line.quantity,
                        unit=line.unit,
                        unit_price=line.unit_price,
                        item_percent=line.item_percent,
                    )
                    for line in lines
                ],
                discount_amount=draft.discount_amount,
                received_amount=draft.received_amount,
                draft_id=draft.id,
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="FINALIZE_DRAFT_FAILED",
                    message="Failed to finalize draft",
                    reason=str(e),
                )
            )

        return await self.create_bill.execute(command)
