"""
Database models.

Importing this package registers every table on ``Base.metadata``.
"""

from hostelmate.models.base import Base, BaseModel
from hostelmate.models.user.user import User
from hostelmate.models.complaint.complaint import Complaint

__all__ = ["Base", "BaseModel", "User", "Complaint"]
