"""DeleteDraft Use Case"""

import logging
from libs.result import Result, Return, Error
from src.app.services.unit_of_work import UnitOfWork
from src.app.repositories.draft_repository import DraftRepository

logger = logging.getLogger(__name__)


class DeleteDraft:
    """
    Use Case: Hard-delete a draft and its lines

    Missing draft -> DRAFT_NOT_FOUND.
    """

    def __init__(self, uow: UnitOfWork, draft_repo: DraftRepository):
        self.uow = uow
        self.draft_repo = draft_repo

    async def execute(self, draft_id: int) -> Result[None]:
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

            await self.draft_repo.delete(draft)
            await self.uow.commit()

            logger.info(f"Draft {draft_id} deleted")
            return Return.ok()

        except Exception as e:
            await self.uow.rollback()
            logger.error(f"Failed to delete draft {draft_id}: {e}")
            return Return.err(
                Error(
                    code="DELETE_DRAFT_FAILED",
                    message="Failed to delete draft",
                    reason=str(e),
                )
            )
