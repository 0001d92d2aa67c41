"""
List-query pagination contracts.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Generic, List, Optional, Sequence, TypeVar

from pydantic import Field

from tapprint_shared.contracts.base import ContractModel

T = TypeVar("T")


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class PaginationParams(ContractModel):
    """Query parameters of a list endpoint."""

    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    sort_by: Optional[str] = None
    sort_order: Optional[SortOrder] = None
    search: Optional[str] = None

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class PaginationMeta(ContractModel):
    """Pagination block of a list reply."""

    page: int = Field(..., ge=0)
    limit: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
    pages: int = Field(..., ge=0)

    @staticmethod
    def expected_pages(total: int, limit: int) -> int:
        """ceil(total / limit), or 0 when limit is 0."""
        if limit <= 0:
            return 0
        return math.ceil(total / limit)

    @classmethod
    def from_counts(cls, page: int, limit: int, total: int) -> "PaginationMeta":
        return cls(page=page, limit=limit, total=total, pages=cls.expected_pages(total, limit))

    @property
    def is_consistent(self) -> bool:
        return self.limit == 0 or self.pages == self.expected_pages(self.total, self.limit)

    @property
    def has_next(self) -> bool:
        return self.page < self.pages


class PaginatedResponse(ContractModel, Generic[T]):
    """A page of items plus its pagination metadata."""

    data: List[T]
    pagination: PaginationMeta

    @classmethod
    def build(
        cls, items: Sequence, params: PaginationParams, total: int
    ) -> "PaginatedResponse":
        return cls(
            data=list(items),
            pagination=PaginationMeta.from_counts(params.page, params.limit, total),
        )
