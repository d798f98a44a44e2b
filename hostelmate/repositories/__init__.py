"""
Repository layer: SQLAlchemy data access for users and complaints.
"""

from hostelmate.repositories.base import BaseRepository
from hostelmate.repositories.complaint import ComplaintRepository
from hostelmate.repositories.user import UserRepository

__all__ = ["BaseRepository", "ComplaintRepository", "UserRepository"]
