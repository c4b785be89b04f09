"""Shared validation helpers for the insert/update schemas.

Every create endpoint funnels its raw body through a Pydantic model; a failure
is reported field by field and nothing is written.
"""
from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar

from pydantic import AfterValidator, BaseModel, BeforeValidator, HttpUrl, TypeAdapter, ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

SLUG_PATTERN = r"^[a-z0-9]+(?:-[a-z0-9]+)*$"

_url_adapter = TypeAdapter(HttpUrl)


class FieldValidationError(Exception):
    """Raised when raw input does not satisfy an insert/update shape."""

    def __init__(self, errors: List[Dict[str, str]], entity: str = "request"):
        self.errors = errors
        self.entity = entity
        super().__init__(f"Invalid {entity} data")

    @property
    def fields(self) -> List[str]:
        return [e["field"] for e in self.errors]


def format_errors(errors, strip_prefix: Optional[str] = None) -> List[Dict[str, str]]:
    """Turn pydantic error dicts into [{"field", "message"}]."""
    out = []
    for err in errors:
        loc = [str(p) for p in err.get("loc", ())]
        if strip_prefix and loc and loc[0] == strip_prefix:
            loc = loc[1:]
        message = err.get("msg", "Invalid value")
        if message.startswith("Value error, "):
            message = message[len("Value error, "):]
        out.append({"field": ".".join(loc) or "__root__", "message": message})
    return out


def parse_insert(schema: Type[ModelT], raw: Any, entity: Optional[str] = None) -> ModelT:
    try:
        return schema.model_validate(raw)
    except ValidationError as exc:
        raise FieldValidationError(format_errors(exc.errors()), entity or schema.__name__) from exc


def empty_to_none(value):
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def check_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return value
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Please enter a valid URL")
    return value


# "" means absent, both on the way in and on the way out
OptionalStr = Annotated[Optional[str], BeforeValidator(empty_to_none)]
Url = Annotated[str, AfterValidator(check_url)]
OptionalUrl = Annotated[Optional[str], BeforeValidator(empty_to_none), AfterValidator(check_url)]


def reject_null(value):
    """For partial updates: a field may be omitted, but not cleared if its column is NOT NULL."""
    if value is None:
        raise ValueError("This field cannot be empty")
    return value
