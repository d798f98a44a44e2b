"""
Authentication endpoints.
"""

from fastapi import APIRouter, Depends, status

from hostelmate.api.deps import get_auth_service, get_current_principal
from hostelmate.schemas.auth import AuthResponse, LoginRequest, SignupRequest, UserResponse
from hostelmate.services.auth import AuthService
from hostelmate.services.common import Principal

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(
    payload: SignupRequest,
    service: AuthService = Depends(get_auth_service),
):
    """Register a resident account."""
    return service.signup(payload)


@router.post("/login", response_model=AuthResponse)
def login(
    payload: LoginRequest,
    service: AuthService = Depends(get_auth_service),
):
    return service.login(payload)


@router.get("/me", response_model=UserResponse)
def read_me(
    principal: Principal = Depends(get_current_principal),
    service: AuthService = Depends(get_auth_service),
):
    """Profile of the authenticated user."""
    return service.me(principal)
