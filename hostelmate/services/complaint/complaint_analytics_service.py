"""
Complaint analytics service for the admin dashboard.
"""

from hostelmate.models.base.enums import ComplaintStatus
from hostelmate.repositories.complaint.complaint_repository import ComplaintRepository
from hostelmate.schemas.complaint.complaint_analytics import CategoryStat, ComplaintStats
from hostelmate.services.base import BaseService
from hostelmate.services.common.permissions import Principal, require_admin


class ComplaintAnalyticsService(BaseService[ComplaintRepository]):
    """Aggregate counts over all complaints."""

    def get_stats(self, principal: Principal) -> ComplaintStats:
        """
        Totals per status and per category (admin only).

        Raises:
            AuthorizationError: caller is not an admin
        """
        require_admin(principal)

        status_counts = self.repository.get_status_counts()
        category_stats = [
            CategoryStat(**row) for row in self.repository.get_category_stats()
        ]

        stats = ComplaintStats(
            total=sum(status_counts.values()),
            open=status_counts[ComplaintStatus.OPEN],
            in_progress=status_counts[ComplaintStatus.IN_PROGRESS],
            resolved=status_counts[ComplaintStatus.RESOLVED],
            category_stats=category_stats,
        )
        self._logger.debug(f"Computed complaint stats: total={stats.total}")
        return stats
