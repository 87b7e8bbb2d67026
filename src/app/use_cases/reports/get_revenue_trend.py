"""GetRevenueTrend Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.report_repository import ReportRepository
from .dtos import ReportQueryDTO, RevenuePointDTO, money


class GetRevenueTrend:
    """Use Case: Revenue and bill count per bill date, oldest first"""

    def __init__(self, report_repo: ReportRepository):
        self.report_repo = report_repo

    async def execute(self, query: ReportQueryDTO) -> Result[List[RevenuePointDTO]]:
        try:
            rows = await self.report_repo.revenue_by_date(query.date_from, query.date_to)
            return Return.ok(
                [
                    RevenuePointDTO(
                        date=row["date"],
                        revenue=money(row["revenue"]),
                        bill_count=int(row["bill_count"]),
                    )
                    for row in rows
                ]
            )

        except Exception as e:
            return Return.err(
                Error(code="GET_REVENUE_TREND_FAILED", message="Failed to build revenue trend", reason=str(e))
            )
