"""
List Bills Use Case

Retrieves non-deleted bills with pagination, newest first.
"""
from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.line_repository import BillLineRepository
from src.app.use_cases.pagination import PageDTO, page_offset
from .dtos import BillResponseDTO


class ListBills:
    """
    Use case: List bills

    Bills are ordered by created_at DESC. Lines of the whole page are
    loaded with one query.
    """

    def __init__(self, bill_repo: BillRepository, bill_line_repo: BillLineRepository):
        self.bill_repo = bill_repo
        self.bill_line_repo = bill_line_repo

    async def execute(self, page: int = 1, limit: int = 20) -> Result[PageDTO[BillResponseDTO]]:
        """
        List bills with pagination.

        Args:
            page: 1-based page number
            limit: Page size

        Returns:
            Result[PageDTO[BillResponseDTO]]: Paginated bill list
        """
        try:
            bills, total = await self.bill_repo.list_active(
                limit=limit,
                offset=page_offset(page, limit),
            )
            lines_by_bill = await self.bill_line_repo.get_by_bill_ids([bill.id for bill in bills])

            items = [
                BillResponseDTO.from_entity(
                    bill, [line.to_line_item() for line in lines_by_bill.get(bill.id, [])]
                )
                for bill in bills
            ]
            return Return.ok(PageDTO[BillResponseDTO].build(items, total, page, limit))

        except Exception as e:
            return Return.err(
                Error(
                    code="LIST_BILLS_FAILED",
                    message="Failed to list bills",
                    reason=str(e),
                )
            )
