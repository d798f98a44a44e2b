"""
FastAPI dependencies: database session, caller resolution and services.

Routes only authenticate here; role checks happen inside the services.
"""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from hostelmate.core.exceptions import AuthenticationError
from hostelmate.db.session import get_db
from hostelmate.repositories.complaint import ComplaintRepository
from hostelmate.repositories.user import UserRepository
from hostelmate.services.auth import AuthService
from hostelmate.services.common import Principal
from hostelmate.services.complaint import (
    ComplaintAnalyticsService,
    ComplaintFeedbackService,
    ComplaintService,
)

bearer_scheme = HTTPBearer(auto_error=False)


# ------------------------------------------------------------------ #
# Services
# ------------------------------------------------------------------ #
def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserRepository(db), db)


def get_complaint_service(db: Session = Depends(get_db)) -> ComplaintService:
    return ComplaintService(ComplaintRepository(db), db, UserRepository(db))


def get_feedback_service(db: Session = Depends(get_db)) -> ComplaintFeedbackService:
    return ComplaintFeedbackService(ComplaintRepository(db), db)


def get_analytics_service(db: Session = Depends(get_db)) -> ComplaintAnalyticsService:
    return ComplaintAnalyticsService(ComplaintRepository(db), db)


# ------------------------------------------------------------------ #
# Current user
# ------------------------------------------------------------------ #
def get_current_principal(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> Principal:
    """
    Resolve the ``Authorization: Bearer`` header into a Principal.

    Raises 401 when the header is missing, the token is invalid or
    expired, or the account no longer exists.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("No token, authorization denied")
    return auth_service.resolve_principal(credentials.credentials)


__all__ = [
    "bearer_scheme",
    "get_db",
    "get_auth_service",
    "get_complaint_service",
    "get_feedback_service",
    "get_analytics_service",
    "get_current_principal",
]
