"""
Registration and login request schemas.
"""

from __future__ import annotations

from typing import Optional

from pydantic import EmailStr, Field, field_validator

from hostelmate.core.security.password_hasher import BCRYPT_MAX_BYTES
from hostelmate.schemas.common.base import BaseCreateSchema

__all__ = [
    "SignupRequest",
    "LoginRequest",
]


class SignupRequest(BaseCreateSchema):
    """
    Resident self-registration.

    Accounts created here always get the ``user`` role.
    """

    name: str = Field(
        ...,
        min_length=2,
        max_length=255,
        description="Full name",
        examples=["John Doe"],
    )
    email: EmailStr = Field(
        ...,
        description="Email address (must be unique)",
        examples=["john@example.com"],
    )
    password: str = Field(
        ...,
        min_length=6,
        max_length=72,
        description="Password (6-72 characters)",
    )
    room_number: str = Field(
        ...,
        min_length=1,
        max_length=20,
        description="Hostel room number",
        examples=["A101"],
    )
    phone_number: Optional[str] = Field(
        default=None,
        max_length=20,
        description="Contact phone number",
    )

    @field_validator("email", mode="after")
    @classmethod
    def normalize_email(cls, v: EmailStr) -> str:
        """Normalize email to lowercase."""
        return str(v).lower().strip()

    @field_validator("password")
    @classmethod
    def validate_password_bytes(cls, v: str) -> str:
        if len(v.encode("utf-8")) > BCRYPT_MAX_BYTES:
            raise ValueError(f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes")
        return v

    @field_validator("room_number")
    @classmethod
    def normalize_room_number(cls, v: str) -> str:
        return v.upper()

    @field_validator("phone_number")
    @classmethod
    def normalize_phone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            return None
        return v


class LoginRequest(BaseCreateSchema):
    """Email and password login."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(..., min_length=1, max_length=72, description="Account password")

    @field_validator("email", mode="after")
    @classmethod
    def normalize_email(cls, v: EmailStr) -> str:
        return str(v).lower().strip()
