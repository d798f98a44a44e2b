"""
Complaint filtering schemas for the admin listing and the resident view.
"""

import enum
from typing import Any, Optional, Type, Union

from pydantic import Field, field_validator

from hostelmate.models.base.enums import ComplaintCategory, ComplaintStatus
from hostelmate.schemas.common.base import BaseSchema

__all__ = [
    "ComplaintFilterParams",
    "OwnComplaintFilter",
    "ALL_FILTER",
]

ALL_FILTER = "all"


def _lookup(enum_cls: Type[enum.Enum], value: Optional[str]):
    if value is None:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        return None


class ComplaintFilterParams(BaseSchema):
    """
    Admin listing filters.

    ``"all"`` (or nothing) disables the category or status filter. Any other
    value is an exact match, so one outside the fixed set matches nothing
    rather than being rejected. Search is a literal substring; a search of
    only whitespace counts as no search.
    """

    category: Union[str, None] = Field(
        default=None,
        description="Exact category filter",
    )
    status: Union[str, None] = Field(
        default=None,
        description="Exact status filter",
    )
    search: Union[str, None] = Field(
        default=None,
        max_length=255,
        description="Search in title, description and room number",
    )

    @field_validator("category", "status", mode="before")
    @classmethod
    def normalize_exact_filter(cls, v: Any) -> Union[str, None]:
        if isinstance(v, enum.Enum):
            v = v.value
        if v is None or v == "" or v == ALL_FILTER:
            return None
        return v

    @field_validator("search")
    @classmethod
    def normalize_search(cls, v: Union[str, None]) -> Union[str, None]:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v

    @property
    def category_enum(self) -> Optional[ComplaintCategory]:
        return _lookup(ComplaintCategory, self.category)

    @property
    def status_enum(self) -> Optional[ComplaintStatus]:
        return _lookup(ComplaintStatus, self.status)

    @property
    def matches_nothing(self) -> bool:
        """True when a category or status filter names no known value."""
        return (self.category is not None and self.category_enum is None) or (
            self.status is not None and self.status_enum is None
        )


class OwnComplaintFilter:
    """Status groups a resident can narrow their own complaints to."""

    ACTIVE = "active"
    RESOLVED = "resolved"

    @classmethod
    def statuses_for(cls, status_filter: Union[str, None]):
        """
        Statuses matching ``status_filter``; ``None`` means every status.

        Unrecognised values behave like no filter.
        """
        if status_filter == cls.ACTIVE:
            return ComplaintStatus.active()
        if status_filter == cls.RESOLVED:
            return (ComplaintStatus.RESOLVED,)
        return None
