"""Report Repository Interface

Read-only aggregate queries over non-deleted bills. Every method accepts an
optional inclusive date range on the bill date.
"""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple
from src.domain.bill import Bill


class ReportRepository(ABC):
    """
    Repository interface for reporting aggregates

    Rows are returned as plain dicts; the report use cases shape them into
    DTOs and round money values.
    """

    @abstractmethod
    async def summary(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> Dict[str, Any]:
        """
        Overall figures

        Returns:
            Dict with keys total_bills, total_revenue, total_discount,
            total_balance, unique_customers
        """
        pass

    @abstractmethod
    async def revenue_by_date(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> List[Dict[str, Any]]:
        """
        Revenue grouped by bill date, oldest first

        Returns:
            Rows with keys date, revenue, bill_count
        """
        pass

    @abstractmethod
    async def top_customers(
        self,
        limit: int = 10,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        """
        Customers ranked by revenue

        Returns:
            Rows with keys customer_name, total_revenue, bill_count, pending_balance
        """
        pass

    @abstractmethod
    async def top_products(
        self,
        limit: int = 10,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        """
        Products ranked by line amount

        Returns:
            Rows with keys product_name, total_quantity, total_amount, occurrences
        """
        pass

    @abstractmethod
    async def bill_totals(
        self, date_from: Optional[date] = None, date_to: Optional[date] = None
    ) -> List[Tuple[Decimal, Decimal]]:
        """(total, balance) pairs of every matching bill"""
        pass

    @abstractmethod
    async def recent_bills(
        self,
        limit: int = 20,
        offset: int = 0,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> Tuple[List[Tuple[Bill, int]], int]:
        """
        Bills newest first, each with its line count

        Returns:
            Tuple of (page of (bill, item_count), total count)
        """
        pass
