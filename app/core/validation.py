"""
Payload validation helpers.

Rule sets are the pydantic schemas in ``app.schemas``; these helpers turn
pydantic's error output into the flat ``{field, message}`` list returned to
API callers, both for explicit validation and for FastAPI body validation.
"""

from typing import Any, Dict, Iterable, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import ValidationFailedError

SchemaType = TypeVar("SchemaType", bound=BaseModel)

# Leading location segments FastAPI adds that are not field names
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def format_errors(errors: Iterable[Mapping[str, Any]]) -> List[Dict[str, str]]:
    """
    Flatten pydantic error dicts into ``{"field": ..., "message": ...}`` pairs.
    """
    formatted = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        formatted.append({"field": field, "message": error.get("msg", "Invalid value")})
    return formatted


def validate(payload: Any, schema: Type[BaseModel]) -> List[Dict[str, str]]:
    """
    Check a payload against a schema and return the field errors, if any.
    """
    try:
        schema.model_validate(payload)
    except ValidationError as e:
        return format_errors(e.errors())
    return []


def validate_payload(payload: Any, schema: Type[SchemaType]) -> SchemaType:
    """
    Parse a payload, raising ValidationFailedError when any rule fails.
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as e:
        raise ValidationFailedError(format_errors(e.errors())) from e
