"""
Complaint feedback service.

Residents rate their own complaints once they are resolved.
"""

import logging
from typing import Any, Mapping, Union

from hostelmate.core.exceptions import ResourceNotFoundError
from hostelmate.repositories.complaint.complaint_repository import ComplaintRepository
from hostelmate.schemas.complaint.complaint_feedback import FeedbackRequest
from hostelmate.schemas.complaint.complaint_response import ComplaintResponse
from hostelmate.services.base import BaseService
from hostelmate.services.common.permissions import Principal
from hostelmate.services.common.validation import parse_schema

logger = logging.getLogger(__name__)


class ComplaintFeedbackService(BaseService[ComplaintRepository]):
    """Records resident ratings and comments on resolved complaints."""

    def add_feedback(
        self,
        principal: Principal,
        complaint_id: str,
        request: Union[FeedbackRequest, Mapping[str, Any]],
    ) -> ComplaintResponse:
        """
        Rate a resolved complaint owned by the caller.

        A repeat submission overwrites the earlier rating. Feedback text
        is only replaced when non-empty.

        Raises:
            ValidationError: rating outside 1-5 or feedback too long
            ResourceNotFoundError: complaint missing, not the caller's, or
                not resolved
        """
        data = parse_schema(FeedbackRequest, request)

        complaint = self.repository.find_resolved_for_user(complaint_id, principal.user_id)
        if complaint is None:
            raise ResourceNotFoundError(
                "Complaint",
                complaint_id,
                message="Resolved complaint not found or not accessible",
            )

        complaint = self.repository.set_feedback(complaint, data.rating, data.feedback)

        logger.info(f"Feedback recorded on complaint {complaint.id}: rating {data.rating}")
        return ComplaintResponse.model_validate(complaint)
