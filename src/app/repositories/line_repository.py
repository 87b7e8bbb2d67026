"""Line Repository Interfaces

Defines the contract for bill line and draft line persistence.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Sequence
from src.domain.bill_line import BillLine, DraftLine
from src.domain.line_item import LineItem


class BillLineRepository(ABC):
    """
    Repository interface for BillLine persistence

    Lines are always written as a full ordered set for one bill.
    """

    @abstractmethod
    async def replace_for_bill(self, bill_id: int, items: Sequence[LineItem]) -> List[BillLine]:
        """
        Replace all lines of a bill

        Args:
            bill_id: Bill ID
            items: Line items in display order

        Returns:
            Created BillLine rows ordered by position
        """
        pass

    @abstractmethod
    async def get_by_bill_id(self, bill_id: int) -> List[BillLine]:
        """Lines of one bill ordered by position"""
        pass

    @abstractmethod
    async def get_by_bill_ids(self, bill_ids: Sequence[int]) -> Dict[int, List[BillLine]]:
        """Lines of several bills keyed by bill ID, each list ordered by position"""
        pass


class DraftLineRepository(ABC):
    """Repository interface for DraftLine persistence"""

    @abstractmethod
    async def replace_for_draft(self, draft_id: int, items: Sequence[LineItem]) -> List[DraftLine]:
        pass

    @abstractmethod
    async def get_by_draft_id(self, draft_id: int) -> List[DraftLine]:
        pass

    @abstractmethod
    async def get_by_draft_ids(self, draft_ids: Sequence[int]) -> Dict[int, List[DraftLine]]:
        pass

    @abstractmethod
    async def delete_for_draft(self, draft_id: int) -> None:
        pass
