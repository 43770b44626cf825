"""Base schemas and wire-format helpers shared by the GraphQL and REST layers."""

from datetime import datetime, timezone
from typing import Any, Optional

import strawberry
from pydantic import BaseModel, ConfigDict, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from app.exceptions.task import InvalidDateError
from app.shared.updates import CLEAR, KEEP, FieldUpdate, Set

_datetime_adapter = TypeAdapter(datetime)


class BaseSchema(BaseModel):
    """Base schema class with common configuration."""
    model_config = ConfigDict(from_attributes=True)


class ErrorResponse(BaseSchema):
    """Error body returned by the REST endpoints."""
    error: str


def to_update(value: Any) -> FieldUpdate:
    """Translate a GraphQL input field: omitted keeps, null clears, a value sets."""
    if value is strawberry.UNSET:
        return KEEP
    if value is None:
        return CLEAR
    return Set(value)


def parse_datetime(value: str) -> datetime:
    """
    Parse an RFC 3339 timestamp.

    Naive values are taken to be UTC; offsets are converted to UTC.

    Raises:
        InvalidDateError: If the string is not a valid timestamp
    """
    try:
        parsed = _datetime_adapter.validate_python(value)
    except PydanticValidationError as e:
        raise InvalidDateError(e.errors()[0]["msg"]) from e
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    # Columns are stored without an offset, so normalize before they reach the database
    return parsed.astimezone(timezone.utc)


def parse_datetime_update(value: Optional[str]) -> FieldUpdate:
    update = to_update(value)
    if isinstance(update, Set):
        return Set(parse_datetime(update.value))
    return update


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    if value.tzinfo is None:
        # SQLite hands back naive values; everything is stored as UTC
        value = value.replace(tzinfo=timezone.utc)
    return value.isoformat()
