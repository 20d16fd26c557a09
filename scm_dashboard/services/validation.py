"""
Synchronous, rendering-free validation of candidate records.

Forms call `validate` before anything is sent anywhere; the result maps each
offending field to the message shown next to it.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Generic, Mapping, Optional, Type, TypeVar

from pydantic import BaseModel, ValidationError

SchemaType = TypeVar("SchemaType", bound=BaseModel)

MISSING_MESSAGE = "This field is required"
_VALUE_ERROR_PREFIX = "Value error, "


@dataclass
class ValidationResult(Generic[SchemaType]):
    errors: Dict[str, str] = field(default_factory=dict)
    data: Optional[SchemaType] = None

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.data is not None

    def message_for(self, field_name: str) -> Optional[str]:
        return self.errors.get(field_name)


def field_path(loc) -> str:
    """('items', 0, 'quantity') -> 'items.0.quantity'"""
    return ".".join(str(part) for part in loc) or "__root__"


def error_message(error: Mapping[str, Any]) -> str:
    if error.get("type") == "missing":
        return MISSING_MESSAGE
    message = error.get("msg", "Invalid value")
    if message.startswith(_VALUE_ERROR_PREFIX):
        message = message[len(_VALUE_ERROR_PREFIX):]
    return message


def errors_from_exception(exc: ValidationError) -> Dict[str, str]:
    errors: Dict[str, str] = {}
    for error in exc.errors():
        # first message per field wins
        errors.setdefault(field_path(error["loc"]), error_message(error))
    return errors


def validate(schema: Type[SchemaType], values: Mapping[str, Any]) -> ValidationResult[SchemaType]:
    """Validate `values` against `schema` without raising."""
    try:
        data = schema.model_validate(dict(values))
    except ValidationError as exc:
        return ValidationResult(errors=errors_from_exception(exc))
    return ValidationResult(data=data)
