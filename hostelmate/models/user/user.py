"""
User model configuration.
"""
from sqlalchemy import Column, Enum, String

from hostelmate.models.base.base_model import BaseModel
from hostelmate.models.base.enums import UserRole, enum_values
from hostelmate.models.base.mixins import TimestampMixin


class User(BaseModel, TimestampMixin):
    """
    Core User entity.

    Holds login credentials and the resident profile (room, phone)
    that complaints snapshot at creation time.
    """
    __tablename__ = "users"
    __table_args__ = (
        {"comment": "Residents and administrators"}
    )

    name = Column(
        String(255),
        nullable=False,
        comment="Full name of the user"
    )
    email = Column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="Unique email address (normalized to lowercase)"
    )
    password_hash = Column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )
    role = Column(
        Enum(
            UserRole,
            name="user_role_enum",
            native_enum=False,
            values_callable=enum_values,
            length=20,
        ),
        nullable=False,
        default=UserRole.USER,
        index=True,
        comment="Role used for access control"
    )
    room_number = Column(
        String(20),
        nullable=True,
        comment="Room number; required for residents"
    )
    phone_number = Column(
        String(20),
        nullable=True,
        comment="Contact phone number"
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email}, role={self.role})>"
