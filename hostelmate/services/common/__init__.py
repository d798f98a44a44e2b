from hostelmate.services.common.permissions import Principal, require_admin, require_role
from hostelmate.services.common.validation import parse_schema

__all__ = [
    "Principal",
    "require_admin",
    "require_role",
    "parse_schema",
]
