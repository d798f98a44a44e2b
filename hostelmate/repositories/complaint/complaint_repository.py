"""
Complaint persistence: inserts, per-resident and admin listings,
status and feedback writes, and the dashboard aggregates.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Tuple

from sqlalchemy import case, desc, func, or_, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from hostelmate.models.base.enums import ComplaintCategory, ComplaintStatus, Priority
from hostelmate.models.complaint.complaint import Complaint
from hostelmate.repositories.base.base_repository import BaseRepository


def escape_like(term: str, escape_char: str = "\\") -> str:
    """Escape LIKE wildcards so ``term`` matches literally."""
    return (
        term.replace(escape_char, escape_char * 2)
        .replace("%", f"{escape_char}%")
        .replace("_", f"{escape_char}_")
    )


class ComplaintRepository(BaseRepository[Complaint]):
    """Queries and writes against the ``complaints`` table."""

    def __init__(self, session: Session):
        super().__init__(Complaint, session)

    # -- inserts --

    def create_complaint(
        self,
        user_id: str,
        room_number: str,
        title: str,
        description: str,
        category: ComplaintCategory,
        subcategory: str,
        priority: Priority = Priority.MEDIUM,
    ) -> Complaint:
        """
        Insert a complaint in the Open state.

        ``room_number`` is copied from the raiser at creation and does not
        follow later changes to their account.
        """
        complaint = Complaint(
            user_id=user_id,
            room_number=room_number,
            title=title,
            description=description,
            category=category,
            subcategory=subcategory,
            priority=priority,
            status=ComplaintStatus.OPEN,
        )

        return self.create(complaint)

    # -- listings --

    def _newest_first(self, query: Select) -> Select:
        return query.order_by(desc(Complaint.created_at), desc(Complaint.id))

    def find_by_user(
        self,
        user_id: str,
        statuses: Optional[Iterable[ComplaintStatus]] = None,
    ) -> List[Complaint]:
        """
        Find complaints raised by a user, newest first.

        Args:
            user_id: Raiser's user id
            statuses: Restrict to these statuses (all when None)
        """
        query = select(Complaint).where(Complaint.user_id == user_id)

        if statuses is not None:
            query = query.where(Complaint.status.in_(list(statuses)))

        return self.find_all(self._newest_first(query))

    def find_resolved_for_user(self, complaint_id: str, user_id: str) -> Optional[Complaint]:
        """
        Find a complaint only if it belongs to ``user_id`` and is resolved.

        A single lookup, so callers cannot tell which condition failed.
        """
        query = select(Complaint).where(
            Complaint.id == complaint_id,
            Complaint.user_id == user_id,
            Complaint.status == ComplaintStatus.RESOLVED,
        )
        return self.db.execute(query).scalars().first()

    def search_complaints(
        self,
        category: Optional[ComplaintCategory] = None,
        status: Optional[ComplaintStatus] = None,
        search_term: Optional[str] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> Tuple[List[Complaint], int]:
        """
        One page of the admin listing plus the total before paging.

        ``search_term`` is a case-insensitive substring matched against
        title, description and room number; filters combine with AND.
        """
        query = select(Complaint)

        if category:
            query = query.where(Complaint.category == category)

        if status:
            query = query.where(Complaint.status == status)

        if search_term:
            pattern = f"%{escape_like(search_term)}%"
            query = query.where(
                or_(
                    Complaint.title.ilike(pattern, escape="\\"),
                    Complaint.description.ilike(pattern, escape="\\"),
                    Complaint.room_number.ilike(pattern, escape="\\"),
                )
            )

        total_count = self.count(query)

        query = self._newest_first(query).offset(skip).limit(limit)
        complaints = self.find_all(query)

        return complaints, total_count

    # -- lifecycle --

    def update_status(
        self,
        complaint: Complaint,
        new_status: ComplaintStatus,
        admin_id: str,
        resolver_name: Optional[str] = None,
        admin_notes: Optional[str] = None,
    ) -> Complaint:
        """
        Record a status change made by an admin.

        ``resolver_name`` and ``admin_notes`` only overwrite the stored
        values when non-empty.
        """
        update_data: Dict[str, Any] = {
            "status": new_status,
            "assigned_admin_id": admin_id,
        }
        if resolver_name:
            update_data["resolver_name"] = resolver_name
        if admin_notes:
            update_data["admin_notes"] = admin_notes

        self._stamp_resolution(complaint, new_status)

        return self.update(complaint, update_data)

    def set_feedback(
        self,
        complaint: Complaint,
        rating: int,
        feedback: Optional[str] = None,
    ) -> Complaint:
        """Store the resident's rating, and feedback text when non-empty."""
        update_data: Dict[str, Any] = {"rating": rating}
        if feedback:
            update_data["feedback"] = feedback
        return self.update(complaint, update_data)

    # -- aggregates --

    def get_status_counts(self) -> Dict[ComplaintStatus, int]:
        """Number of complaints per status; missing statuses count zero."""
        query = (
            select(
                Complaint.status,
                func.count(Complaint.id),
            )
            .group_by(Complaint.status)
        )

        counts = {status: 0 for status in ComplaintStatus}
        for status, count in self.db.execute(query):
            counts[status] = count
        return counts

    def get_category_stats(self) -> List[Dict[str, Any]]:
        """
        Per-category totals and resolved counts, busiest category first.
        """
        resolved_count = func.sum(
            case((Complaint.status == ComplaintStatus.RESOLVED, 1), else_=0)
        )
        total_count = func.count(Complaint.id)
        query = (
            select(
                Complaint.category,
                total_count.label("count"),
                resolved_count.label("resolved_count"),
            )
            .group_by(Complaint.category)
            .order_by(desc(total_count), Complaint.category)
        )

        return [
            {
                "category": category,
                "count": count,
                "resolved_count": int(resolved or 0),
            }
            for category, count, resolved in self.db.execute(query)
        ]

    def _stamp_resolution(
        self,
        complaint: Complaint,
        new_status: ComplaintStatus,
    ) -> None:
        """
        ``resolved_at`` is stamped on the first transition into Resolved and
        never touched again.
        """
        if new_status == ComplaintStatus.RESOLVED and complaint.resolved_at is None:
            complaint.resolved_at = datetime.now(timezone.utc)
