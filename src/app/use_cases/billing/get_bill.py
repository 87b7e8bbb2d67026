"""GetBill Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.line_repository import BillLineRepository
from .dtos import BillResponseDTO


class GetBill:
    """
    Use Case: Retrieve one live bill with its lines

    Deleted bills are reported as BILL_NOT_FOUND.
    """

    def __init__(self, bill_repo: BillRepository, bill_line_repo: BillLineRepository):
        self.bill_repo = bill_repo
        self.bill_line_repo = bill_line_repo

    async def execute(self, bill_id: int) -> Result[BillResponseDTO]:
        try:
            bill = await self.bill_repo.get_by_id(bill_id)
            if not bill:
                return Return.err(
                    Error(
                        code="BILL_NOT_FOUND",
                        message=f"Bill with ID {bill_id} not found",
                        reason=f"bill_id={bill_id}",
                    )
                )

            lines = await self.bill_line_repo.get_by_bill_id(bill.id)
            return Return.ok(
                BillResponseDTO.from_entity(bill, [line.to_line_item() for line in lines])
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="GET_BILL_FAILED",
                    message="Failed to retrieve bill",
                    reason=str(e),
                )
            )
