"""
Base models package.

Provides the declarative base, mixins and enums for all database models.
"""

from hostelmate.models.base.base_model import Base, BaseModel
from hostelmate.models.base.mixins import TimestampMixin, utcnow
from hostelmate.models.base.enums import (
    ComplaintCategory,
    ComplaintStatus,
    Priority,
    UserRole,
    enum_values,
)

__all__ = [
    "Base",
    "BaseModel",
    "TimestampMixin",
    "utcnow",
    "ComplaintCategory",
    "ComplaintStatus",
    "Priority",
    "UserRole",
    "enum_values",
]
