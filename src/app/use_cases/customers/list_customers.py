"""
List Customers Use Case
"""
from libs.result import Result, Return, Error
from src.app.repositories.customer_repository import CustomerRepository
from src.app.use_cases.pagination import PageDTO, page_offset
from .dtos import CustomerResponseDTO


class ListCustomers:
    """Use case: List customers sorted by name, paginated"""

    def __init__(self, customer_repo: CustomerRepository):
        self.customer_repo = customer_repo

    async def execute(self, page: int = 1, limit: int = 20) -> Result[PageDTO[CustomerResponseDTO]]:
        try:
            customers, total = await self.customer_repo.list_all(
                limit=limit,
                offset=page_offset(page, limit),
            )
            items = [CustomerResponseDTO.from_entity(c) for c in customers]
            return Return.ok(PageDTO[CustomerResponseDTO].build(items, total, page, limit))

        except Exception as e:
            return Return.err(
                Error(code="LIST_CUSTOMERS_FAILED", message="Failed to list customers", reason=str(e))
            )
