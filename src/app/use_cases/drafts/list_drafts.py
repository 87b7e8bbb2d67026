"""
List Drafts Use Case

Retrieves drafts with pagination, newest first.
"""
from libs.result import Result, Return, Error
from src.app.repositories.draft_repository import DraftRepository
from src.app.repositories.line_repository import DraftLineRepository
from src.app.use_cases.billing.dtos import DraftResponseDTO
from src.app.use_cases.pagination import PageDTO, page_offset


class ListDrafts:
    """Use case: List drafts ordered by created_at DESC"""

    def __init__(self, draft_repo: DraftRepository, draft_line_repo: DraftLineRepository):
        self.draft_repo = draft_repo
        self.draft_line_repo = draft_line_repo

    async def execute(self, page: int = 1, limit: int = 20) -> Result[PageDTO[DraftResponseDTO]]:
        try:
            drafts, total = await self.draft_repo.list_all(
                limit=limit,
                offset=page_offset(page, limit),
            )
            lines_by_draft = await self.draft_line_repo.get_by_draft_ids(
                [draft.id for draft in drafts]
            )

            items = [
                DraftResponseDTO.from_entity(
                    draft, [line.to_line_item() for line in lines_by_draft.get(draft.id, [])]
                )
                for draft in drafts
            ]
            return Return.ok(PageDTO[DraftResponseDTO].build(items, total, page, limit))

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_DRAFTS_FAILED",
                    message="Failed to list drafts",
                    reason=str(e),
                )
            )
