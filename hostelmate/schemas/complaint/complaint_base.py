"""
Core complaint schemas with validation of the category table and field limits.

Only columns with a bounded width carry a maximum length; description and
admin notes are unbounded text.

Validation messages are phrased for direct display next to the offending
form field.
"""

from typing import Any, Union

from pydantic import Field, ValidationInfo, field_validator

from hostelmate.core.constants import (
    DESCRIPTION_MIN_LENGTH,
    TITLE_MIN_LENGTH,
    allowed_subcategories,
)
from hostelmate.models.base.enums import ComplaintCategory, ComplaintStatus, Priority
from hostelmate.schemas.common.base import BaseCreateSchema, BaseUpdateSchema

__all__ = [
    "ComplaintCreate",
    "ComplaintStatusUpdate",
]


def _coerce_enum(enum_cls, value: Any, message: str):
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(value)
    except ValueError:
        raise ValueError(message) from None


class ComplaintCreate(BaseCreateSchema):
    """
    Schema for raising a new complaint.

    The raiser and their room number are taken from the authenticated
    user, never from the payload.
    """

    title: str = Field(
        ...,
        max_length=255,
        description="Brief complaint title/summary",
    )
    description: str = Field(
        ...,
        description="Detailed complaint description",
    )
    category: ComplaintCategory = Field(
        ...,
        description="Primary complaint category",
    )
    subcategory: str = Field(
        ...,
        max_length=100,
        description="Subcategory allowed for the chosen category",
    )
    priority: Priority = Field(
        default=Priority.MEDIUM,
        description="Complaint priority level (defaults to Medium)",
    )

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        v = v.strip()
        if len(v) < TITLE_MIN_LENGTH:
            raise ValueError(f"Title must be at least {TITLE_MIN_LENGTH} characters long")
        return v

    @field_validator("description")
    @classmethod
    def validate_description(cls, v: str) -> str:
        v = v.strip()
        if len(v) < DESCRIPTION_MIN_LENGTH:
            raise ValueError(
                f"Description must be at least {DESCRIPTION_MIN_LENGTH} characters long"
            )
        return v

    @field_validator("category", mode="before")
    @classmethod
    def validate_category(cls, v: Any) -> ComplaintCategory:
        return _coerce_enum(ComplaintCategory, v, "Invalid category")

    @field_validator("priority", mode="before")
    @classmethod
    def validate_priority(cls, v: Any) -> Priority:
        if v is None or v == "":
            return Priority.MEDIUM
        return _coerce_enum(Priority, v, "Invalid priority")

    @field_validator("subcategory")
    @classmethod
    def validate_subcategory(cls, v: str, info: ValidationInfo) -> str:
        """
        Subcategory must belong to the selected category.

        When the category itself is invalid the subcategory is reported as
        well, since it cannot be checked against anything.
        """
        v = v.strip()
        category = info.data.get("category")
        if category is None or v not in allowed_subcategories(category.value):
            raise ValueError("Invalid subcategory for selected category")
        return v


class ComplaintStatusUpdate(BaseUpdateSchema):
    """
    Schema for an admin changing a complaint's status.

    Empty resolver name or notes leave the stored values untouched.
    """

    status: ComplaintStatus = Field(
        ...,
        description="New complaint status",
    )
    resolver_name: Union[str, None] = Field(
        default=None,
        max_length=255,
        description="Name of the person who handled the complaint",
    )
    admin_notes: Union[str, None] = Field(
        default=None,
        description="Internal notes from the administrator",
    )

    @field_validator("status", mode="before")
    @classmethod
    def validate_status(cls, v: Any) -> ComplaintStatus:
        return _coerce_enum(ComplaintStatus, v, "Invalid status")

    @field_validator("resolver_name", "admin_notes")
    @classmethod
    def normalize_optional_text(cls, v: Union[str, None]) -> Union[str, None]:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v
