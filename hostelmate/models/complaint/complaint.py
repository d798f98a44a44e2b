"""
The complaints table.

A complaint is raised by a resident, triaged by administrators and,
once resolved, rated by the resident who raised it.
"""

from datetime import datetime
from typing import TYPE_CHECKING, Optional

from sqlalchemy import (
    CheckConstraint,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from hostelmate.models.base.base_model import BaseModel
from hostelmate.models.base.enums import (
    ComplaintCategory,
    ComplaintStatus,
    Priority,
    enum_values,
)
from hostelmate.models.base.mixins import TimestampMixin

if TYPE_CHECKING:
    from hostelmate.models.user.user import User

__all__ = ["Complaint"]


class Complaint(BaseModel, TimestampMixin):
    """
    A maintenance issue reported by a resident.

    ``user_id`` and ``room_number`` are fixed at creation. Status changes
    record the acting admin in ``assigned_admin_id``; ``rating`` and
    ``feedback`` are only written once the complaint is Resolved, and
    ``resolved_at`` marks the first time it got there.
    """

    __tablename__ = "complaints"
    __table_args__ = (
        Index("ix_complaints_user_status", "user_id", "status"),
        Index("ix_complaints_category_status", "category", "status"),
        CheckConstraint(
            "rating IS NULL OR (rating >= 1 AND rating <= 5)",
            name="ck_complaints_rating_1_5",
        ),
        {"comment": "Hostel maintenance complaints"},
    )

    # What was reported
    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Short summary",
    )

    description: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Full description",
    )

    # Classification
    category: Mapped[ComplaintCategory] = mapped_column(
        Enum(
            ComplaintCategory,
            name="complaint_category_enum",
            native_enum=False,
            values_callable=enum_values,
            length=50,
        ),
        nullable=False,
        index=True,
        comment="Top-level category",
    )

    subcategory: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Subcategory within the category",
    )

    # Lifecycle
    status: Mapped[ComplaintStatus] = mapped_column(
        Enum(
            ComplaintStatus,
            name="complaint_status_enum",
            native_enum=False,
            values_callable=enum_values,
            length=20,
        ),
        nullable=False,
        default=ComplaintStatus.OPEN,
        index=True,
        comment="Open, In Progress or Resolved",
    )

    priority: Mapped[Priority] = mapped_column(
        Enum(
            Priority,
            name="priority_enum",
            native_enum=False,
            values_callable=enum_values,
            length=20,
        ),
        nullable=False,
        default=Priority.MEDIUM,
        comment="Low, Medium, High or Urgent",
    )

    # People
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
        comment="User who raised the complaint",
    )

    assigned_admin_id: Mapped[Optional[str]] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
        comment="Admin who last updated the status",
    )

    resolver_name: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True,
        comment="Person who resolved the issue",
    )

    admin_notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True,
        comment="Admin notes",
    )

    room_number: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True,
        comment="Room of the raiser when the complaint was created",
    )

    # Rating after resolution
    rating: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True,
        comment="Resident rating (1-5)",
    )

    feedback: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True,
        comment="Resident feedback text",
    )

    resolved_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="First resolution timestamp",
    )

    # Relationships
    user: Mapped["User"] = relationship(
        "User",
        foreign_keys=[user_id],
        lazy="selectin",
    )
    assigned_admin: Mapped[Optional["User"]] = relationship(
        "User",
        foreign_keys=[assigned_admin_id],
        lazy="selectin",
    )

    def __repr__(self) -> str:
        status = self.status.value if self.status else None
        return f"<Complaint {self.id} {status!r} room={self.room_number}>"
