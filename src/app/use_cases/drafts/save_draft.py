"""SaveDraft Use Case

Creates a draft, or updates an existing one in place.
"""

import logging
from typing import Optional
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.draft_repository import DraftRepository
from src.app.repositories.line_repository import DraftLineRepository
from src.app.use_cases.billing.dtos import DraftCommandDTO, DraftResponseDTO
from src.domain.bill import Draft
from src.domain.bill_state import build_bill_state

logger = logging.getLogger(__name__)


class SaveDraft:
    """
    Use Case: Save a draft

    Business Rules:
    1. No required fields, zero lines allowed
    2. No invoice number uniqueness
    3. Totals recomputed through BillState like a bill
    """

    def __init__(
        self,
        uow: UnitOfWork,
        draft_repo: DraftRepository,
        draft_line_repo: DraftLineRepository,
    ):
        self.uow = uow
        self.draft_repo = draft_repo
        self.draft_line_repo = draft_line_repo

    async def execute(
        self, command: DraftCommandDTO, draft_id: Optional[int] = None
    ) -> Result[DraftResponseDTO]:
        """
        Execute draft save

        Args:
            command: Draft contents
            draft_id: Existing draft to overwrite, None to create

        Returns:
            Result[DraftResponseDTO]: Saved draft or error
        """
        try:
            if draft_id is not None:
                draft = await self.draft_repo.get_by_id(draft_id)
                if not draft:
                    return Return.err(
                        Error(
                            code="DRAFT_NOT_FOUND",
                            message=f"Draft with ID {draft_id} not found",
                            reason=f"draft_id={draft_id}",
                        )
                    )
            else:
                draft = Draft()

            state = build_bill_state(
                command.line_items(),
                discount_amount=command.discount_amount,
                discount_percent=command.discount_percent,
                received_amount=command.received_amount,
            )

            draft.invoice_number = command.invoice_number
            draft.date = command.date
            draft.customer_name = command.customer_name.strip()
            draft.customer_phone = command.customer_phone
            draft.apply_totals(state)

            if draft_id is None:
                saved = await self.draft_repo.create(draft)
            else:
                saved = await self.draft_repo.update(draft)
            await self.draft_line_repo.replace_for_draft(saved.id, state.items)
            await self.uow.commit()

            logger.info(f"Draft {saved.id} saved with {len(state.items)} items")
            return Return.ok(DraftResponseDTO.from_entity(saved, state.items))

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to save draft: {e}")
            return Return.err(
                Error(
                    code="SAVE_DRAFT_FAILED",
                    message="Failed to save draft",
                    reason=str(e),
                )
            )
