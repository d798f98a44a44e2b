from hostelmate.schemas.complaint.complaint_analytics import CategoryStat, ComplaintStats
from hostelmate.schemas.complaint.complaint_base import ComplaintCreate, ComplaintStatusUpdate
from hostelmate.schemas.complaint.complaint_feedback import FeedbackRequest
from hostelmate.schemas.complaint.complaint_filters import (
    ALL_FILTER,
    ComplaintFilterParams,
    OwnComplaintFilter,
)
from hostelmate.schemas.complaint.complaint_response import (
    AdminSummary,
    ComplaintEnvelope,
    ComplaintGroupedResponse,
    ComplaintPage,
    ComplaintResponse,
    UserSummary,
)

__all__ = [
    "CategoryStat",
    "ComplaintStats",
    "ComplaintCreate",
    "ComplaintStatusUpdate",
    "FeedbackRequest",
    "ALL_FILTER",
    "ComplaintFilterParams",
    "OwnComplaintFilter",
    "AdminSummary",
    "ComplaintEnvelope",
    "ComplaintGroupedResponse",
    "ComplaintPage",
    "ComplaintResponse",
    "UserSummary",
]
