"""
Bearer token issuing and checking.

Tokens are short JWTs: ``sub`` is the user id, ``role`` a copy of the
account role at issue time, ``jti`` a random identifier.
"""

import logging
import secrets
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from hostelmate.core.exceptions import InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)

ACCESS_TOKEN_TYPE = "access"


class JWTManager:
    """Signs and verifies access tokens with a shared secret."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: str = "HS256",
        access_token_expire_minutes: int = 60,
    ):
        """
        Args:
            secret_key: Signing secret; a random one is generated when omitted,
                which invalidates tokens on every restart
            algorithm: HMAC algorithm understood by PyJWT
            access_token_expire_minutes: Token lifetime
        """
        self.secret_key = secret_key or secrets.token_urlsafe(32)
        self.algorithm = algorithm
        self.access_token_expire_minutes = access_token_expire_minutes

    @property
    def lifetime(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)

    def create_access_token(
        self,
        user_id: str,
        additional_claims: Optional[Dict[str, Any]] = None,
        expires_delta: Optional[timedelta] = None,
    ) -> str:
        """Encode a signed access token for ``user_id``."""
        issued_at = datetime.now(timezone.utc)
        claims: Dict[str, Any] = dict(additional_claims or {})
        claims.update(
            sub=str(user_id),
            token_type=ACCESS_TOKEN_TYPE,
            iat=issued_at,
            exp=issued_at + (expires_delta if expires_delta is not None else self.lifetime),
            jti=secrets.token_hex(16),
        )
        return jwt.encode(claims, self.secret_key, algorithm=self.algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Decode ``token`` and check its signature, expiry and type.

        Raises:
            TokenExpiredError: ``exp`` is in the past
            InvalidTokenError: bad signature, malformed token, wrong type
                or no subject
        """
        try:
            claims = jwt.decode(token, self.secret_key, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            logger.info("Rejected expired access token")
            raise TokenExpiredError()
        except jwt.InvalidTokenError as e:
            logger.warning(f"Rejected access token: {e}")
            raise InvalidTokenError()

        if claims.get("token_type") != ACCESS_TOKEN_TYPE or not claims.get("sub"):
            raise InvalidTokenError("Invalid token payload")
        return claims
