"""
Complaint feedback schemas.

Residents rate the handling of their own resolved complaints.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import Field, field_validator

from hostelmate.core.constants import FEEDBACK_MAX_LENGTH, MAX_RATING, MIN_RATING
from hostelmate.schemas.common.base import BaseCreateSchema

__all__ = [
    "FeedbackRequest",
]


class FeedbackRequest(BaseCreateSchema):
    """Submit a rating, and optionally comments, for a resolved complaint."""

    rating: int = Field(
        ...,
        description="Overall rating (1-5 stars)",
    )
    feedback: Optional[str] = Field(
        default=None,
        description="Detailed feedback comments",
    )

    @field_validator("rating", mode="before")
    @classmethod
    def validate_rating(cls, v: Any) -> int:
        if isinstance(v, bool):
            raise ValueError("Rating must be a whole number")
        if isinstance(v, str) and v.strip().lstrip("-").isdigit():
            v = int(v.strip())
        if isinstance(v, float) and v.is_integer():
            v = int(v)
        if not isinstance(v, int):
            raise ValueError("Rating must be a whole number")
        if not MIN_RATING <= v <= MAX_RATING:
            raise ValueError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
        return v

    @field_validator("feedback")
    @classmethod
    def validate_feedback(cls, v: Optional[str]) -> Optional[str]:
        """Normalize feedback text if provided."""
        if v is not None:
            v = v.strip()
            if not v:
                return None
            if len(v) > FEEDBACK_MAX_LENGTH:
                raise ValueError(
                    f"Feedback cannot exceed {FEEDBACK_MAX_LENGTH} characters"
                )
        return v
