"""
Schema validation for request payloads and query filters.

validate() checks a raw payload against one of the declarative schemas in
jobly.schemas and reports every violation, not just the first.
"""
from dataclasses import dataclass, field
from typing import Any, Generic, Iterable, List, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from jobly.errors import ValidationError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

# Location prefixes FastAPI adds to request errors
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


@dataclass
class ValidationResult(Generic[SchemaT]):
    valid: bool
    value: Optional[SchemaT] = None
    errors: List[str] = field(default_factory=list)


def format_errors(errors: Iterable[Mapping[str, Any]]) -> List[str]:
    """Turn pydantic error dicts into "<field>: <message>" strings, keeping order."""
    messages = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        msg = error.get("msg", "Invalid value")
        messages.append(f"{'.'.join(loc)}: {msg}" if loc else msg)
    return messages


def validate(payload: Any, schema: Type[SchemaT]) -> ValidationResult[SchemaT]:
    """
    Validate payload against schema.

    Returns a result with valid=True and the parsed model, or valid=False and
    one message per violated constraint in schema-declaration order.
    """
    try:
        value = schema.model_validate(payload)
    except PydanticValidationError as exc:
        return ValidationResult(valid=False, errors=format_errors(exc.errors()))
    return ValidationResult(valid=True, value=value)


def validate_or_raise(payload: Any, schema: Type[SchemaT]) -> SchemaT:
    """Validate payload, raising ValidationError with the full error list on failure."""
    result = validate(payload, schema)
    if not result.valid:
        raise ValidationError(result.errors)
    return result.value
