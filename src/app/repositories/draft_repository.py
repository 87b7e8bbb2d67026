"""Draft Repository Interface

Defines the contract for draft persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple
from src.domain.bill import Draft


class DraftRepository(ABC):
    """
    Repository interface for Draft persistence

    Drafts are hard-deleted; there is no soft-delete state for them.
    """

    @abstractmethod
    async def create(self, draft: Draft) -> Draft:
        pass

    @abstractmethod
    async def get_by_id(self, draft_id: int) -> Optional[Draft]:
        pass

    @abstractmethod
    async def list_all(self, limit: int = 20, offset: int = 0) -> Tuple[List[Draft], int]:
        """
        Retrieve drafts, newest first

        Returns:
            Tuple of (page of drafts, total count)
        """
        pass

    @abstractmethod
    async def update(self, draft: Draft) -> Draft:
        pass

    @abstractmethod
    async def delete(self, draft: Draft) -> None:
        """Remove a draft and its lines"""
        pass
