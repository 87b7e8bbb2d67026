"""GetReportSummary Use Case"""

from libs.result import Result, Return, Error
from src.app.repositories.report_repository import ReportRepository
from src.domain.bill_computer import ZERO
from .dtos import ReportQueryDTO, ReportSummaryDTO, money


class GetReportSummary:
    """
    Use Case: Headline figures over non-deleted bills

    avg_bill is revenue / bill count, 0 when there are no bills.
    """

    def __init__(self, report_repo: ReportRepository):
        self.report_repo = report_repo

    async def execute(self, query: ReportQueryDTO) -> Result[ReportSummaryDTO]:
        try:
            row = await self.report_repo.summary(query.date_from, query.date_to)

            total_bills = int(row["total_bills"] or 0)
            revenue = money(row["total_revenue"])
            avg_bill = money(revenue / total_bills) if total_bills else ZERO

            return Return.ok(
                ReportSummaryDTO(
                    total_bills=total_bills,
                    total_revenue=revenue,
                    total_discount=money(row["total_discount"]),
                    total_balance=money(row["total_balance"]),
                    avg_bill=avg_bill,
                    unique_customers=int(row["unique_customers"] or 0),
                )
            )

        except Exception as e:
            return Return.err(
                Error(code="GET_REPORT_SUMMARY_FAILED", message="Failed to build report summary", reason=str(e))
            )
