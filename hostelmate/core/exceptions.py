"""
Application exceptions.

Services and repositories raise these; each one knows the HTTP status it
maps to and renders itself as ``{"error": {...}}`` for the API layer.
"""

from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorCode(str, Enum):
    """Machine-readable codes returned in ``error.code``"""
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Caller identity
    AUTHENTICATION_FAILED = "AUTHENTICATION_FAILED"
    AUTHORIZATION_FAILED = "AUTHORIZATION_FAILED"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    TOKEN_INVALID = "TOKEN_INVALID"

    # Input
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Storage
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"


class BaseAppException(Exception):
    """
    Root of the application's exception hierarchy.

    Attributes:
        message: Human readable description, safe to show to clients
        error_code: Stable code for programmatic handling
        details: Extra structured context (field errors, ids)
        status_code: HTTP status the API layer responds with
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code

    def to_dict(self) -> Dict[str, Any]:
        """JSON body for the error response"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": type(self).__name__,
            }
        }

    def __str__(self) -> str:
        return f"[{self.status_code} {self.error_code.value}] {self.message}"


class ValidationError(BaseAppException):
    """
    Input failed validation.

    ``field_errors`` maps each offending field (camelCase, as sent by the
    client) to its messages.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field_errors: Optional[Dict[str, List[str]]] = None,
    ):
        self.field_errors = field_errors or {}
        details = {"field_errors": self.field_errors} if self.field_errors else {}
        super().__init__(message, ErrorCode.VALIDATION_ERROR, details, 400)


class ResourceNotFoundError(BaseAppException):
    """No record matched the lookup"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None,
    ):
        super().__init__(
            message or f"{resource_type} not found",
            ErrorCode.RESOURCE_NOT_FOUND,
            {"resource_type": resource_type, "resource_id": resource_id},
            404,
        )


class AuthenticationError(BaseAppException):
    """The caller could not be identified"""

    def __init__(
        self,
        message: str = "Authentication failed",
        error_code: ErrorCode = ErrorCode.AUTHENTICATION_FAILED,
    ):
        super().__init__(message, error_code, status_code=401)


class TokenExpiredError(AuthenticationError):
    def __init__(self, message: str = "Token has expired"):
        super().__init__(message, ErrorCode.TOKEN_EXPIRED)


class InvalidTokenError(AuthenticationError):
    def __init__(self, message: str = "Token is not valid"):
        super().__init__(message, ErrorCode.TOKEN_INVALID)


class AuthorizationError(BaseAppException):
    """The caller is known but their role does not allow the operation"""

    def __init__(
        self,
        message: str = "You do not have permission to perform this action",
        required_role: Optional[str] = None,
    ):
        details = {"required_role": required_role} if required_role else {}
        super().__init__(message, ErrorCode.AUTHORIZATION_FAILED, details, 403)


class ConflictError(BaseAppException):
    """A unique value (such as an email address) is already taken"""

    def __init__(self, message: str = "Resource already exists", field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, ErrorCode.DUPLICATE_ENTRY, details, 409)


class DatabaseError(BaseAppException):
    """The store failed in a way the caller cannot fix"""

    def __init__(self, message: str = "Database operation failed", operation: Optional[str] = None):
        details = {"operation": operation} if operation else {}
        super().__init__(message, ErrorCode.DATABASE_ERROR, details, 500)


_LOCATION_PREFIXES = ("body", "query", "path")
_VALUE_ERROR_PREFIX = "Value error, "


def field_errors_from_pydantic(errors: List[Dict[str, Any]]) -> Dict[str, List[str]]:
    """
    Collapse pydantic error entries into ``{field: [messages]}``.

    The ``body``/``query``/``path`` prefix FastAPI adds to locations is
    dropped so request errors and service errors share one shape.
    """
    field_errors: Dict[str, List[str]] = {}
    for error in errors:
        loc = [str(part) for part in error.get("loc", ()) if part not in _LOCATION_PREFIXES]
        message = error.get("msg", "Invalid value")
        if message.startswith(_VALUE_ERROR_PREFIX):
            message = message[len(_VALUE_ERROR_PREFIX):]
        field_errors.setdefault(".".join(loc) or "__root__", []).append(message)
    return field_errors
