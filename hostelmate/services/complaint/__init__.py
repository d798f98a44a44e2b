from hostelmate.services.complaint.complaint_analytics_service import ComplaintAnalyticsService
from hostelmate.services.complaint.complaint_feedback_service import ComplaintFeedbackService
from hostelmate.services.complaint.complaint_service import ComplaintService

__all__ = [
    "ComplaintAnalyticsService",
    "ComplaintFeedbackService",
    "ComplaintService",
]
