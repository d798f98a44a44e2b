from hostelmate.repositories.complaint.complaint_repository import ComplaintRepository

__all__ = ["ComplaintRepository"]
