"""Bill Repository Interface

Defines the contract for bill persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.bill import Bill


class BillRepository(ABC):
    """
    Repository interface for Bill persistence

    Deleted bills are kept in storage but excluded from every query unless
    include_deleted is requested explicitly.
    """

    @abstractmethod
    async def create(self, bill: Bill) -> Bill:
        """
        Create a new bill

        Args:
            bill: Bill entity to persist

        Returns:
            Created Bill with generated ID

        Raises:
            IntegrityError: If a live bill already uses the invoice number
        """
        pass

    @abstractmethod
    async def get_by_id(self, bill_id: int, include_deleted: bool = False) -> Optional[Bill]:
        """
        Retrieve bill by ID

        Args:
            bill_id: Bill ID
            include_deleted: Also return soft-deleted bills

        Returns:
            Bill if found, None otherwise
        """
        pass

    @abstractmethod
    async def list_active(self, limit: int = 20, offset: int = 0) -> Tuple[List[Bill], int]:
        """
        Retrieve non-deleted bills, newest first

        Returns:
            Tuple of (page of bills, total non-deleted count)
        """
        pass

    @abstractmethod
    async def update(self, bill: Bill) -> Bill:
        """
        Update an existing bill

        Raises:
            IntegrityError: If the new invoice number collides with a live bill
        """
        pass

    @abstractmethod
    async def exists_active_invoice_number(
        self, invoice_number: int, exclude_bill_id: Optional[int] = None
    ) -> bool:
        """
        Check whether a live bill already uses an invoice number

        Args:
            invoice_number: Invoice number to check
            exclude_bill_id: Bill to ignore (the one being updated)

        Returns:
            True if another non-deleted bill has this number
        """
        pass

    @abstractmethod
    async def get_max_active_invoice_number(self) -> Optional[int]:
        """Highest invoice number among non-deleted bills, None when there are none"""
        pass

    @abstractmethod
    async def list_recent_with_product(self, product_name: str, limit: int = 10) -> List[Bill]:
        """
        Most recent non-deleted bills containing a product, newest first

        Args:
            product_name: Exact product name
            limit: Bill window size

        Returns:
            List of bills ordered by created_at DESC
        """
        pass
