from hostelmate.schemas.auth.register import LoginRequest, SignupRequest
from hostelmate.schemas.auth.token import AuthResponse, UserResponse

__all__ = [
    "LoginRequest",
    "SignupRequest",
    "AuthResponse",
    "UserResponse",
]
