"""GetRecentBills Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.report_repository import ReportRepository
from src.app.use_cases.pagination import PageDTO, page_offset
from src.domain.payment_status import classify_payment_status
from .dtos import ReportQueryDTO, RecentBillDTO, money


class GetRecentBills:
    """Use Case: Bills by date (newest first) with their item counts, paginated"""

    def __init__(self, report_repo: ReportRepository):
        self.report_repo = report_repo

    async def execute(
        self, query: ReportQueryDTO, page: int = 1, limit: int = 20
    ) -> Result[PageDTO[RecentBillDTO]]:
        try:
            rows, total = await self.report_repo.recent_bills(
                limit=limit,
                offset=page_offset(page, limit),
                date_from=query.date_from,
                date_to=query.date_to,
            )
            items = [
                RecentBillDTO(
                    id=bill.id,
                    invoice_number=bill.invoice_number,
                    date=bill.date,
                    customer_name=bill.customer_name,
                    total=money(bill.total),
                    balance=money(bill.balance),
                    payment_status=classify_payment_status(bill.total, bill.balance).value,
                    item_count=int(item_count),
                )
                for bill, item_count in rows
            ]
            return Return.ok(PageDTO[RecentBillDTO].build(items, total, page, limit))

        except Exception as e:
            return Return.err(
                Error(code="GET_RECENT_BILLS_FAILED", message="Failed to list recent bills", reason=str(e))
            )
