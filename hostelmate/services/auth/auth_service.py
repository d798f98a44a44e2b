"""
Authentication service: signup, login and bearer token resolution.
"""

import logging
from typing import Any, Mapping, Optional, Union

from sqlalchemy.orm import Session

from hostelmate.core.exceptions import AuthenticationError, ConflictError
from hostelmate.core.security import (
    JWTManager,
    PasswordHasher,
    get_jwt_manager,
    get_password_hasher,
)
from hostelmate.models.base.enums import UserRole
from hostelmate.models.user.user import User
from hostelmate.repositories.user.user_repository import UserRepository
from hostelmate.schemas.auth.register import LoginRequest, SignupRequest
from hostelmate.schemas.auth.token import AuthResponse, UserResponse
from hostelmate.services.base import BaseService
from hostelmate.services.common.permissions import Principal
from hostelmate.services.common.validation import parse_schema

logger = logging.getLogger(__name__)


class AuthService(BaseService[UserRepository]):
    """
    Service for authenticating residents and administrators.

    Issues HS256 access tokens carrying the user id and role, and turns
    incoming tokens back into a ``Principal``.
    """

    INVALID_CREDENTIALS = "Invalid email or password"

    def __init__(
        self,
        user_repository: UserRepository,
        db_session: Session,
        password_hasher: Optional[PasswordHasher] = None,
        jwt_manager: Optional[JWTManager] = None,
    ):
        super().__init__(user_repository, db_session)
        self.password_hasher = password_hasher or get_password_hasher()
        self.jwt = jwt_manager or get_jwt_manager()

    # -------------------------------------------------------------------------
    # Registration & Login
    # -------------------------------------------------------------------------

    def signup(self, request: Union[SignupRequest, Mapping[str, Any]]) -> AuthResponse:
        """
        Register a resident account and log it in.

        Raises:
            ValidationError: invalid name, email, password or room number
            ConflictError: email already registered
        """
        data = parse_schema(SignupRequest, request)

        if self.repository.email_exists(data.email):
            raise ConflictError("User already exists with this email", field="email")

        user = self.repository.create_user(
            name=data.name,
            email=data.email,
            password_hash=self.password_hasher.hash(data.password),
            role=UserRole.USER,
            room_number=data.room_number,
            phone_number=data.phone_number,
        )

        logger.info(f"User registered: {user.id}")
        return self._issue(user)

    def login(self, request: Union[LoginRequest, Mapping[str, Any]]) -> AuthResponse:
        """
        Exchange email and password for an access token.

        Unknown email and wrong password fail identically.
        """
        data = parse_schema(LoginRequest, request)

        user = self.repository.find_by_email(data.email)
        if user is None or not self.password_hasher.verify(data.password, user.password_hash):
            logger.warning("Failed login attempt")
            raise AuthenticationError(self.INVALID_CREDENTIALS)

        logger.info(f"User logged in: {user.id}")
        return self._issue(user)

    def me(self, principal: Principal) -> UserResponse:
        """Profile of the authenticated caller."""
        return UserResponse.model_validate(self._load_user(principal.user_id))

    # -------------------------------------------------------------------------
    # Token Resolution
    # -------------------------------------------------------------------------

    def resolve_principal(self, token: str) -> Principal:
        """
        Verify a bearer token and load the caller it names.

        The role comes from the stored account, so a role change takes
        effect on the next request.

        Raises:
            TokenExpiredError, InvalidTokenError: bad token
            AuthenticationError: account no longer exists
        """
        payload = self.jwt.verify_token(token)
        user = self._load_user(payload["sub"])
        return Principal(user_id=user.id, role=user.role)

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _load_user(self, user_id: str) -> User:
        user = self.repository.find_by_id(user_id)
        if user is None:
            raise AuthenticationError("User account not found")
        return user

    def _issue(self, user: User) -> AuthResponse:
        token = self.jwt.create_access_token(
            user.id,
            additional_claims={"role": user.role.value},
        )
        return AuthResponse(
            token=token,
            expires_in=self.jwt.access_token_expire_minutes * 60,
            user=UserResponse.model_validate(user),
        )
