"""
Token and profile response schemas.
"""

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from hostelmate.models.base.enums import UserRole
from hostelmate.schemas.common.base import BaseSchema

__all__ = [
    "UserResponse",
    "AuthResponse",
]


class UserResponse(BaseSchema):
    """Public profile of a user; never includes the password hash."""

    id: str
    name: str
    email: str
    role: UserRole
    room_number: Optional[str] = None
    phone_number: Optional[str] = None
    created_at: datetime


class AuthResponse(BaseSchema):
    """Issued bearer token with the profile it belongs to."""

    token: str = Field(..., description="JWT access token")
    token_type: str = Field(
        default="bearer",
        description="Token type (always 'bearer')",
    )
    expires_in: int = Field(
        ...,
        gt=0,
        description="Access token lifetime in seconds",
    )
    user: UserResponse
