"""Pagination envelope shared by every list use case"""

from math import ceil
from typing import Generic, List, TypeVar
from pydantic import BaseModel, Field

T = TypeVar("T")


class PageDTO(BaseModel, Generic[T]):
    """
    One page of a list

    ``pages`` is 0 when the list is empty.
    """

    items: List[T] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 20
    pages: int = 0

    @classmethod
    def build(cls, items: List[T], total: int, page: int, limit: int) -> "PageDTO[T]":
        return cls(
            items=items,
            total=total,
            page=page,
            limit=limit,
            pages=ceil(total / limit) if limit > 0 else 0,
        )

    @classmethod
    def single(cls, items: List[T]) -> "PageDTO[T]":
        """Wrap an unpaginated list as its only page"""
        return cls(
            items=items,
            total=len(items),
            page=1,
            limit=len(items),
            pages=1 if items else 0,
        )


def page_offset(page: int, limit: int) -> int:
    """Rows to skip for a 1-based page number"""
    return max(page - 1, 0) * limit
