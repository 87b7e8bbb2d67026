"""Customer Repository Interface

Defines the contract for customer persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.customer import Customer


class CustomerRepository(ABC):
    """Repository interface for Customer persistence"""

    @abstractmethod
    async def create(self, customer: Customer) -> Customer:
        pass

    @abstractmethod
    async def get_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    async def search_by_name(self, query: str, limit: int = 10) -> List[Customer]:
        """
        Case-insensitive substring search on customer name

        Args:
            query: Fragment of the name
            limit: Maximum number of matches

        Returns:
            Matching customers sorted by name
        """
        pass

    @abstractmethod
    async def list_all(self, limit: int = 20, offset: int = 0) -> Tuple[List[Customer], int]:
        """
        Retrieve customers sorted by name

        Returns:
            Tuple of (page of customers, total count)
        """
        pass

    @abstractmethod
    async def update(self, customer: Customer) -> Customer:
        pass
