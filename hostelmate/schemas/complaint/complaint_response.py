"""
Complaint response schemas for API outputs.

Provides the complaint representation shared by every endpoint plus the
envelopes for the grouped resident view and the paginated admin view.
"""

from __future__ import annotations

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import Field

from hostelmate.models.base.enums import ComplaintCategory, ComplaintStatus, Priority
from hostelmate.schemas.common.base import BaseResponseSchema, BaseSchema

__all__ = [
    "UserSummary",
    "AdminSummary",
    "ComplaintResponse",
    "ComplaintEnvelope",
    "ComplaintGroupedResponse",
    "ComplaintPage",
]


class UserSummary(BaseSchema):
    """Contact details of the resident who raised a complaint."""

    id: str
    name: str
    email: str
    room_number: Optional[str] = None
    phone_number: Optional[str] = None


class AdminSummary(BaseSchema):
    """Administrator who last changed a complaint's status."""

    id: str
    name: str
    email: str


class ComplaintResponse(BaseResponseSchema):
    """
    Standard complaint response.

    Used for list views and single complaint payloads alike.
    """

    title: str = Field(..., description="Complaint title")
    description: str = Field(..., description="Detailed description")
    category: ComplaintCategory = Field(..., description="Complaint category")
    subcategory: str = Field(..., description="Subcategory within the category")
    status: ComplaintStatus = Field(..., description="Current status")
    priority: Priority = Field(..., description="Priority level")

    room_number: str = Field(..., description="Raiser's room when the complaint was created")
    user: Optional[UserSummary] = Field(default=None, description="Raiser")
    assigned_admin: Optional[AdminSummary] = Field(
        default=None,
        description="Admin who last updated the status",
    )
    resolver_name: Optional[str] = None
    admin_notes: Optional[str] = None

    rating: Optional[int] = Field(default=None, description="Resident rating (1-5)")
    feedback: Optional[str] = Field(default=None, description="Resident feedback")
    resolved_at: Optional[datetime] = Field(
        default=None,
        description="First time the complaint was resolved",
    )


class ComplaintEnvelope(BaseSchema):
    """Acknowledgement plus the affected complaint."""

    message: str
    complaint: ComplaintResponse


class ComplaintGroupedResponse(BaseSchema):
    """A resident's complaints keyed by category, newest first within each."""

    complaints: Dict[str, List[ComplaintResponse]] = Field(default_factory=dict)
    total: int = Field(..., ge=0)


class ComplaintPage(BaseSchema):
    """One page of the admin complaint listing."""

    complaints: List[ComplaintResponse] = Field(default_factory=list)
    current_page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    total: int = Field(..., ge=0)
