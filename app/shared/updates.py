"""Per-field update intents.

An update for a single column is one of three things:

* ``KEEP``: the caller did not mention the field, leave it alone.
* ``CLEAR``: the caller explicitly asked for ``null``.
* ``Set(value)``: the caller supplied a new value.

Repositories apply these uniformly, so any nullable column can be cleared
through an update and any omitted column is never touched.
"""

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from app.exceptions.base import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Keep:
    def resolve(self, current: Any) -> Any:
        return current


@dataclass(frozen=True)
class Clear:
    def resolve(self, current: Any) -> Any:
        return None


@dataclass(frozen=True)
class Set(Generic[T]):
    value: T

    def resolve(self, current: Any) -> T:
        return self.value


FieldUpdate = Union[Keep, Clear, Set]

KEEP = Keep()
CLEAR = Clear()


def is_keep(update: FieldUpdate) -> bool:
    return isinstance(update, Keep)


def apply_update(instance: Any, field: str, update: FieldUpdate, nullable: bool = True) -> bool:
    """
    Apply one update intent to an ORM instance.

    Args:
        instance: ORM object to modify
        field: Attribute name
        update: The intent for this attribute
        nullable: Whether the column accepts NULL

    Returns:
        bool: True if the attribute was written

    Raises:
        ValidationError: If a non-nullable column is cleared
    """
    if isinstance(update, Keep):
        return False
    if isinstance(update, Clear) and not nullable:
        raise ValidationError(f"{field} cannot be null", details={"field": field})
    setattr(instance, field, update.resolve(getattr(instance, field)))
    return True
