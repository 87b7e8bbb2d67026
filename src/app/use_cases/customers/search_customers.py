"""SearchCustomers Use Case"""

from typing import List
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from .dtos import CustomerResponseDTO

SEARCH_LIMIT = 10


class SearchCustomers:
    """
    Use Case: Customer autocomplete

    Case-insensitive substring match on name, at most 10 results sorted by
    name. A blank query returns nothing.
    """

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, query: str) -> Result[List[CustomerResponseDTO]]:
        try:
            query = query.strip()
            if not query:
                return Return.ok([])

            customers = await self.customer_repo.search_by_name(query, limit=SEARCH_LIMIT)
            return Return.ok([CustomerResponseDTO.from_entity(c) for c in customers])

        except Exception as e:
            return Return.err(
                Error(code="SEARCH_CUSTOMERS_FAILED", message="Failed to search customers", reason=str(e))
            )
