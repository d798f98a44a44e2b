"""
User repository: identity lookups and account creation.
"""

from typing import Optional

from sqlalchemy.orm import Session

from hostelmate.models.base.enums import UserRole
from hostelmate.models.user.user import User
from hostelmate.repositories.base.base_repository import BaseRepository


class UserRepository(BaseRepository[User]):
    """Data access for residents and administrators."""

    def __init__(self, session: Session):
        super().__init__(User, session)

    def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by email (case-insensitive, stored lower-cased)."""
        return self.find_one(email=email.strip().lower())

    def email_exists(self, email: str) -> bool:
        return self.find_by_email(email) is not None

    def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.USER,
        room_number: Optional[str] = None,
        phone_number: Optional[str] = None,
    ) -> User:
        """Create a new user account."""
        user = User(
            name=name,
            email=email.strip().lower(),
            password_hash=password_hash,
            role=role,
            room_number=room_number,
            phone_number=phone_number,
        )
        return self.create(user)
