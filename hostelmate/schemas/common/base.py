"""
Pydantic bases shared by request and response schemas.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

__all__ = [
    "BaseSchema",
    "TimestampMixin",
    "BaseCreateSchema",
    "BaseUpdateSchema",
    "BaseResponseSchema",
]


class BaseSchema(BaseModel):
    """
    snake_case attributes, camelCase JSON.

    Either spelling is accepted on input, strings are stripped, and
    instances can be built straight from ORM rows. Naive datetimes are
    taken to be UTC.
    """

    model_config = ConfigDict(
        from_attributes=True,
        populate_by_name=True,
        alias_generator=to_camel,
        use_enum_values=False,
        str_strip_whitespace=True,
        validate_assignment=True,
    )

    @field_validator("*", mode="after")
    @classmethod
    def assume_utc(cls, v: Any) -> Any:
        # SQLite hands back naive datetimes for timezone-aware columns
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=timezone.utc)
        return v


class TimestampMixin(BaseModel):
    created_at: datetime = Field(..., description="When the record was created")
    updated_at: datetime = Field(..., description="When the record last changed")


class BaseCreateSchema(BaseSchema):
    """Payload that creates a record."""


class BaseUpdateSchema(BaseSchema):
    """Payload that changes an existing record."""


class BaseResponseSchema(BaseSchema, TimestampMixin):
    id: str = Field(..., description="Record UUID")
