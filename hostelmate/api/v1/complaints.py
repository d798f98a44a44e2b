"""
Complaint endpoints.

Static paths are declared before ``/{complaint_id}`` ones.
"""

from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, Query, status

from hostelmate.api.deps import (
    get_analytics_service,
    get_complaint_service,
    get_current_principal,
    get_feedback_service,
)
from hostelmate.core.constants import DEFAULT_PAGE
from hostelmate.config.settings import settings
from hostelmate.schemas.complaint import (
    ComplaintCreate,
    ComplaintEnvelope,
    ComplaintGroupedResponse,
    ComplaintPage,
    ComplaintStats,
    FeedbackRequest,
)
from hostelmate.services.common import Principal
from hostelmate.services.complaint import (
    ComplaintAnalyticsService,
    ComplaintFeedbackService,
    ComplaintService,
)

router = APIRouter(prefix="/complaints", tags=["Complaints"])


@router.get("/categories", response_model=Dict[str, List[str]])
def get_categories(
    principal: Principal = Depends(get_current_principal),
    service: ComplaintService = Depends(get_complaint_service),
):
    """Category to subcategories lookup table."""
    return {category: list(subs) for category, subs in service.categories().items()}


@router.post(
    "",
    response_model=ComplaintEnvelope,
    status_code=status.HTTP_201_CREATED,
)
def create_complaint(
    payload: ComplaintCreate,
    principal: Principal = Depends(get_current_principal),
    service: ComplaintService = Depends(get_complaint_service),
):
    """Raise a complaint for the caller's room."""
    complaint = service.create(principal, payload)
    return ComplaintEnvelope(message="Complaint created successfully", complaint=complaint)


@router.get("/my", response_model=ComplaintGroupedResponse)
def get_my_complaints(
    status_filter: Optional[str] = Query(
        default=None,
        alias="status",
        description="'active' (Open or In Progress) or 'resolved'",
    ),
    principal: Principal = Depends(get_current_principal),
    service: ComplaintService = Depends(get_complaint_service),
):
    """The caller's complaints grouped by category."""
    return service.list_own(principal, status_filter)


@router.get("/all", response_model=ComplaintPage)
def get_all_complaints(
    category: Optional[str] = Query(default=None, description="Category or 'all'"),
    status_filter: Optional[str] = Query(
        default=None,
        alias="status",
        description="Status or 'all'",
    ),
    search: Optional[str] = Query(default=None, description="Title, description or room"),
    page: int = Query(default=DEFAULT_PAGE),
    limit: int = Query(default=settings.DEFAULT_PAGE_SIZE),
    principal: Principal = Depends(get_current_principal),
    service: ComplaintService = Depends(get_complaint_service),
):
    """Every complaint, filtered and paginated (admin only)."""
    return service.list_all(
        principal,
        filters={"category": category, "status": status_filter, "search": search},
        pagination={"page": page, "limit": limit},
    )


@router.get("/stats", response_model=ComplaintStats)
def get_complaint_stats(
    principal: Principal = Depends(get_current_principal),
    service: ComplaintAnalyticsService = Depends(get_analytics_service),
):
    """Complaint counts per status and category (admin only)."""
    return service.get_stats(principal)


@router.put("/{complaint_id}/status", response_model=ComplaintEnvelope)
def update_complaint_status(
    complaint_id: str,
    payload: Any = Body(
        ...,
        examples=[{"status": "Resolved", "resolverName": "Ravi", "adminNotes": "Replaced fan"}],
    ),
    principal: Principal = Depends(get_current_principal),
    service: ComplaintService = Depends(get_complaint_service),
):
    """
    Change a complaint's status (admin only).

    Any JSON body is accepted here; it is validated inside the service,
    after the role check.
    """
    complaint = service.update_status(principal, complaint_id, payload)
    return ComplaintEnvelope(message="Complaint status updated successfully", complaint=complaint)


@router.put("/{complaint_id}/feedback", response_model=ComplaintEnvelope)
def add_complaint_feedback(
    complaint_id: str,
    payload: FeedbackRequest,
    principal: Principal = Depends(get_current_principal),
    service: ComplaintFeedbackService = Depends(get_feedback_service),
):
    """Rate a resolved complaint the caller raised."""
    complaint = service.add_feedback(principal, complaint_id, payload)
    return ComplaintEnvelope(message="Feedback added successfully", complaint=complaint)
