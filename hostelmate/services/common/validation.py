"""
Input validation helpers shared by services.

Services accept either a ready schema instance (from the API layer) or a
plain mapping (from scripts and tests); both end up validated the same way.
"""

from typing import Any, Mapping, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from hostelmate.core.exceptions import ValidationError, field_errors_from_pydantic

TSchema = TypeVar("TSchema", bound=BaseModel)


def parse_schema(
    schema_cls: Type[TSchema],
    data: Any,
) -> TSchema:
    """
    Validate ``data`` against ``schema_cls``.

    Anything that is not a mapping (a JSON list or scalar body) fails as a
    whole with a single ``__root__`` error.

    Raises:
        ValidationError: listing every failing field
    """
    if isinstance(data, schema_cls):
        return data
    try:
        if isinstance(data, Mapping):
            data = dict(data)
        return schema_cls.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(
            field_errors=field_errors_from_pydantic(exc.errors())
        ) from exc
