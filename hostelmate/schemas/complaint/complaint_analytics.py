"""
Complaint analytics schemas for the admin dashboard.
"""

from typing import List

from pydantic import Field

from hostelmate.models.base.enums import ComplaintCategory
from hostelmate.schemas.common.base import BaseSchema

__all__ = [
    "CategoryStat",
    "ComplaintStats",
]


class CategoryStat(BaseSchema):
    """Totals for one category."""

    category: ComplaintCategory
    count: int = Field(..., ge=0)
    resolved_count: int = Field(..., ge=0)


class ComplaintStats(BaseSchema):
    """
    Overall complaint counts.

    ``open + in_progress + resolved == total``, and the category counts
    sum to ``total`` as well.
    """

    total: int = Field(..., ge=0)
    open: int = Field(..., ge=0)
    in_progress: int = Field(..., ge=0)
    resolved: int = Field(..., ge=0)
    category_stats: List[CategoryStat] = Field(
        default_factory=list,
        description="Per-category counts, busiest first",
    )
