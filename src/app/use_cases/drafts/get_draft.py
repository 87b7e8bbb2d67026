"""GetDraft Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.draft_repository import DraftRepository
from src.app.repositories.line_repository import DraftLineRepository
from src.app.use_cases.billing.dtos import DraftResponseDTO


class GetDraft:
    """Use Case: Retrieve one draft with its lines"""

    def __init__(self, draft_repo: DraftRepository, draft_line_repo: DraftLineRepository):
        self.draft_repo = draft_repo
        self.draft_line_repo = draft_line_repo

    async def execute(self, draft_id: int) -> Result[DraftResponseDTO]:
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

            lines = await self.draft_line_repo.get_by_draft_id(draft.id)
            return Return.ok(
                DraftResponseDTO.from_entity(draft, [line.to_line_item() for line in lines])
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_DRAFT_FAILED",
                    message="Failed to retrieve draft",
                    reason=str(e),
                )
            )
