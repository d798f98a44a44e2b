"""
Pagination schemas for page-based listings.
"""

from __future__ import annotations

import math

from pydantic import Field, computed_field

from hostelmate.config.settings import settings
from hostelmate.core.constants import DEFAULT_PAGE
from hostelmate.schemas.common.base import BaseSchema

__all__ = [
    "PaginationParams",
    "total_pages_for",
]


def total_pages_for(total_items: int, page_size: int) -> int:
    """Number of pages needed for ``total_items``; zero when empty."""
    return math.ceil(total_items / page_size) if page_size > 0 else 0


class PaginationParams(BaseSchema):
    """Pagination query parameters."""

    page: int = Field(
        default=DEFAULT_PAGE,
        ge=1,
        description="Page number (1-indexed)",
    )
    limit: int = Field(
        default=settings.DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MAX_PAGE_SIZE,
        description="Items per page",
    )

    @computed_field  # type: ignore[misc]
    @property
    def offset(self) -> int:
        """Calculate offset for database queries."""
        return (self.page - 1) * self.limit
