from hostelmate.models.complaint.complaint import Complaint

__all__ = ["Complaint"]
