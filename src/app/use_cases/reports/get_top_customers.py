"""GetTopCustomers Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.report_repository import ReportRepository
from src.domain.bill_computer import ZERO
from .dtos import ReportQueryDTO, CustomerStatDTO, money

DEFAULT_TOP_LIMIT = 10


class GetTopCustomers:
    """
    Use Case: Customers ranked by revenue

    Customers are grouped by the name stored on the bill.
    """

    def __init__(self, report_repo: ReportRepository):
        self.report_repo = report_repo

    async def execute(
        self, query: ReportQueryDTO, limit: int = DEFAULT_TOP_LIMIT
    ) -> Result[List[CustomerStatDTO]]:
        try:
            rows = await self.report_repo.top_customers(limit, query.date_from, query.date_to)

            stats = []
            for row in rows:
                bill_count = int(row["bill_count"])
                revenue = money(row["total_revenue"])
                stats.append(
                    CustomerStatDTO(
                        customer_name=row["customer_name"],
                        total_revenue=revenue,
                        bill_count=bill_count,
                        pending_balance=money(row["pending_balance"]),
                        avg_bill=money(revenue / bill_count) if bill_count else ZERO,
                    )
                )
            return Return.ok(stats)

        except Exception as e:
            return Return.err(
                Error(code="GET_TOP_CUSTOMERS_FAILED", message="Failed to rank customers", reason=str(e))
            )
