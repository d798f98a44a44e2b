from hostelmate.schemas.common.base import (
    BaseCreateSchema,
    BaseResponseSchema,
    BaseSchema,
    BaseUpdateSchema,
    TimestampMixin,
)
from hostelmate.schemas.common.pagination import PaginationParams, total_pages_for

__all__ = [
    "BaseCreateSchema",
    "BaseResponseSchema",
    "BaseSchema",
    "BaseUpdateSchema",
    "TimestampMixin",
    "PaginationParams",
    "total_pages_for",
]
