"""GetTopProducts Use Case"""

from decimal import Decimal
from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.report_repository import ReportRepository
from .dtos import ReportQueryDTO, ProductStatDTO, money

DEFAULT_TOP_LIMIT = 10


class GetTopProducts:
    """Use Case: Products ranked by billed amount (exact product name)"""

    def __init__(self, report_repo: ReportRepository):
        self.report_repo = report_repo

    async def execute(
        self, query: ReportQueryDTO, limit: int = DEFAULT_TOP_LIMIT
    ) -> Result[List[ProductStatDTO]]:
        try:
            rows = await self.report_repo.top_products(limit, query.date_from, query.date_to)
            return Return.ok(
                [
                    ProductStatDTO(
                        product_name=row["product_name"],
                        total_quantity=Decimal(str(row["total_quantity"] or 0)),
                        total_amount=money(row["total_amount"]),
                        occurrences=int(row["occurrences"]),
                    )
                    for row in rows
                ]
            )

        except Exception as e:
            return Return.err(
                Error(code="GET_TOP_PRODUCTS_FAILED", message="Failed to rank products", reason=str(e))
            )
