"""
Core complaint service: creation, status changes and listings.

This service handles the primary complaint lifecycle operations. Every
operation receives the caller as a ``Principal`` and checks the caller's
role before touching the store.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from sqlalchemy.orm import Session

from hostelmate.core.constants import CATEGORY_SUBCATEGORIES
from hostelmate.core.exceptions import (
    AuthenticationError,
    ResourceNotFoundError,
    ValidationError,
)
from hostelmate.models.complaint.complaint import Complaint as ComplaintModel
from hostelmate.repositories.complaint.complaint_repository import ComplaintRepository
from hostelmate.repositories.user.user_repository import UserRepository
from hostelmate.schemas.common.pagination import PaginationParams, total_pages_for
from hostelmate.schemas.complaint.complaint_base import (
    ComplaintCreate,
    ComplaintStatusUpdate,
)
from hostelmate.schemas.complaint.complaint_filters import (
    ComplaintFilterParams,
    OwnComplaintFilter,
)
from hostelmate.schemas.complaint.complaint_response import (
    ComplaintGroupedResponse,
    ComplaintPage,
    ComplaintResponse,
)
from hostelmate.services.base import BaseService
from hostelmate.services.common.permissions import Principal, require_admin
from hostelmate.services.common.validation import parse_schema


class ComplaintService(BaseService[ComplaintRepository]):
    """
    High-level complaint operations service.

    Provides complaint creation, the resident and admin listings, and
    status transitions.
    """

    def __init__(
        self,
        repository: ComplaintRepository,
        db_session: Session,
        user_repository: Optional[UserRepository] = None,
    ):
        """
        Initialize complaint service.

        Args:
            repository: Complaint repository instance
            db_session: Active database session
            user_repository: Source of the caller's room number
        """
        super().__init__(repository, db_session)
        self.user_repository = user_repository or UserRepository(db_session)

    # -------------------------------------------------------------------------
    # Create & Update Operations
    # -------------------------------------------------------------------------

    def create(
        self,
        principal: Principal,
        request: Union[ComplaintCreate, Mapping[str, Any]],
    ) -> ComplaintResponse:
        """
        Raise a new complaint owned by the caller.

        The caller's current room number is copied onto the complaint.

        Raises:
            ValidationError: on any invalid field, or if the caller has no
                room number on record
            AuthenticationError: if the caller's account no longer exists
        """
        data = parse_schema(ComplaintCreate, request)

        user = self.user_repository.find_by_id(principal.user_id)
        if user is None:
            raise AuthenticationError("User account not found")
        if not user.room_number:
            raise ValidationError(
                field_errors={"roomNumber": ["A room number is required to raise a complaint"]}
            )

        complaint = self.repository.create_complaint(
            user_id=user.id,
            room_number=user.room_number,
            title=data.title,
            description=data.description,
            category=data.category,
            subcategory=data.subcategory,
            priority=data.priority,
        )

        self._logger.info(
            f"Complaint created: {complaint.id} by user {user.id} "
            f"({data.category.value}/{data.subcategory})"
        )
        return ComplaintResponse.model_validate(complaint)

    def update_status(
        self,
        principal: Principal,
        complaint_id: str,
        request: Union[ComplaintStatusUpdate, Mapping[str, Any]],
    ) -> ComplaintResponse:
        """
        Change a complaint's status (admin only).

        The caller becomes the assigned admin. Resolver name and notes are
        only overwritten by non-empty values. Any status may follow any
        other; ``resolved_at`` keeps the first resolution time.

        Raises:
            AuthorizationError: caller is not an admin
            ValidationError: invalid status
            ResourceNotFoundError: unknown complaint id
        """
        require_admin(principal)
        data = parse_schema(ComplaintStatusUpdate, request)

        complaint = self.repository.find_by_id(complaint_id)
        if complaint is None:
            raise ResourceNotFoundError(
                "Complaint",
                complaint_id,
                message="Complaint not found",
            )

        previous_status = complaint.status
        complaint = self.repository.update_status(
            complaint,
            new_status=data.status,
            admin_id=principal.user_id,
            resolver_name=data.resolver_name,
            admin_notes=data.admin_notes,
        )

        self._logger.info(
            f"Complaint {complaint.id} status {previous_status.value} -> "
            f"{complaint.status.value} by admin {principal.user_id}"
        )
        return ComplaintResponse.model_validate(complaint)

    # -------------------------------------------------------------------------
    # Query Operations
    # -------------------------------------------------------------------------

    def list_own(
        self,
        principal: Principal,
        status_filter: Optional[str] = None,
    ) -> ComplaintGroupedResponse:
        """
        The caller's complaints grouped by category, newest first.

        ``status_filter`` is ``"active"`` (Open or In Progress),
        ``"resolved"``, or anything else for every complaint.
        """
        complaints = self.repository.find_by_user(
            principal.user_id,
            statuses=OwnComplaintFilter.statuses_for(status_filter),
        )

        return ComplaintGroupedResponse(
            complaints=self._group_by_category(complaints),
            total=len(complaints),
        )

    def list_all(
        self,
        principal: Principal,
        filters: Union[ComplaintFilterParams, Mapping[str, Any], None] = None,
        pagination: Union[PaginationParams, Mapping[str, Any], None] = None,
    ) -> ComplaintPage:
        """
        Filtered, paginated listing of every complaint (admin only).

        A category or status outside the fixed sets yields an empty page.

        Raises:
            AuthorizationError: caller is not an admin
            ValidationError: bad page or page size
        """
        require_admin(principal)
        filters = parse_schema(ComplaintFilterParams, filters or {})
        pagination = parse_schema(PaginationParams, pagination or {})

        if filters.matches_nothing:
            return ComplaintPage(
                complaints=[],
                current_page=pagination.page,
                total_pages=0,
                total=0,
            )

        complaints, total = self.repository.search_complaints(
            category=filters.category_enum,
            status=filters.status_enum,
            search_term=filters.search,
            skip=pagination.offset,
            limit=pagination.limit,
        )

        return ComplaintPage(
            complaints=[ComplaintResponse.model_validate(c) for c in complaints],
            current_page=pagination.page,
            total_pages=total_pages_for(total, pagination.limit),
            total=total,
        )

    def categories(self) -> Mapping[str, Sequence[str]]:
        """The fixed category to subcategories table."""
        return CATEGORY_SUBCATEGORIES

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    @staticmethod
    def _group_by_category(
        complaints: List[ComplaintModel],
    ) -> Dict[str, List[ComplaintResponse]]:
        grouped: Dict[str, List[ComplaintResponse]] = {}
        for complaint in complaints:
            grouped.setdefault(complaint.category.value, []).append(
                ComplaintResponse.model_validate(complaint)
            )
        return grouped
