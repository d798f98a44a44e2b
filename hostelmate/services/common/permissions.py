"""
Caller identity and role checks for the service layer.

Routes resolve the bearer token into a ``Principal`` and pass it
explicitly; each service checks the role itself before touching data.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from hostelmate.core.exceptions import AuthorizationError
from hostelmate.models.base.enums import UserRole

ADMIN_REQUIRED = "Access denied. Admin privileges required."


@dataclass(frozen=True)
class Principal:
    """The authenticated account behind a request, with its current role."""

    user_id: str
    role: UserRole

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN

    def has_any_role(self, roles: Iterable[UserRole]) -> bool:
        return self.role in set(roles)


def require_role(
    principal: Principal,
    allowed_roles: Iterable[UserRole],
    *,
    error_message: Optional[str] = None,
) -> None:
    """
    Raise ``AuthorizationError`` (403) unless ``principal`` holds one of
    ``allowed_roles``.
    """
    allowed = list(allowed_roles)
    if principal.has_any_role(allowed):
        return
    raise AuthorizationError(
        error_message or ADMIN_REQUIRED,
        required_role=", ".join(role.value for role in allowed),
    )


def require_admin(principal: Principal) -> None:
    require_role(principal, [UserRole.ADMIN])
