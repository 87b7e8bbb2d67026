"""LookupPriceHistory Use Case

Suggests recently charged prices for a product.
"""

from libs.result import Result, Return, Error
from src.app.repositories.bill_repository import BillRepository
from src.app.repositories.line_repository import BillLineRepository
from src.domain.price_history import PricedBill, lookup_price_history, DEFAULT_PRICE_HISTORY_LIMIT
from .dtos import PriceHistoryResponseDTO, PriceSuggestionDTO

DEFAULT_BILL_WINDOW = 10


class LookupPriceHistory:
    """
    Use Case: Price suggestions for a product name

    Business Rules:
    1. Only the most recent bill_window non-deleted bills containing the product are scanned
    2. Exact, case-sensitive product name match
    3. Distinct prices only, newest first, at most cap suggestions
    4. Each suggestion is dated with its bill's date
    """

    def __init__(
        self,
        bill_repo: BillRepository,
        bill_line_repo: BillLineRepository,
        bill_window: int = DEFAULT_BILL_WINDOW,
        cap: int = DEFAULT_PRICE_HISTORY_LIMIT,
    ):
        self.bill_repo = bill_repo
        self.bill_line_repo = bill_line_repo
        self.bill_window = bill_window
        self.cap = cap

    async def execute(self, product_name: str) -> Result[PriceHistoryResponseDTO]:
        """
        Execute price lookup

        Args:
            product_name: Exact product name

        Returns:
            Result[PriceHistoryResponseDTO]: Suggestions (possibly empty)
        """
        try:
            if not product_name:
                return Return.ok(PriceHistoryResponseDTO(product_name=product_name, suggestions=[]))

            bills = await self.bill_repo.list_recent_with_product(product_name, limit=self.bill_window)
            lines_by_bill = await self.bill_line_repo.get_by_bill_ids([bill.id for bill in bills])

            priced_bills = [
                PricedBill(
                    date=bill.date,
                    items=[line.to_line_item() for line in lines_by_bill.get(bill.id, [])],
                )
                for bill in bills
            ]
            suggestions = lookup_price_history(product_name, priced_bills, cap=self.cap)

            return Return.ok(
                PriceHistoryResponseDTO(
                    product_name=product_name,
                    suggestions=[
                        PriceSuggestionDTO(price=s.price, unit=s.unit, date=s.date)
                        for s in suggestions
                    ],
                )
            )

        except Exception as e:
            return Return.err(
                Error(
                    code="LOOKUP_PRICE_HISTORY_FAILED",
                    message="Failed to look up price history",
                    reason=str(e),
                )
            )
