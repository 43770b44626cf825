"""Where a task lives: on the calendar, in a someday list, or nowhere yet.

The ``tasks`` table stores this as three nullable columns (``date``,
``list_id``, ``position``). Everything above the repository works with the
tagged values below instead, so the "date xor list" rule is checked in one
place.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Union

from app.exceptions.task import InvalidTaskContextError
from app.shared.updates import KEEP, FieldUpdate, Set, is_keep


@dataclass(frozen=True)
class CalendarContext:
    date: datetime


@dataclass(frozen=True)
class SomedayContext:
    # list_id is None once the owning list has been deleted
    list_id: int | None
    position: int | None


@dataclass(frozen=True)
class UnscheduledContext:
    pass


TaskContext = Union[CalendarContext, SomedayContext, UnscheduledContext]

UNSCHEDULED = UnscheduledContext()


def build_context(
    date: datetime | None = None,
    list_id: int | None = None,
    position: int | None = None,
) -> TaskContext:
    """
    Build a context from raw field values.

    Raises:
        InvalidTaskContextError: If a date is combined with list fields
    """
    has_someday = list_id is not None or position is not None
    if date is not None and has_someday:
        raise InvalidTaskContextError()
    if date is not None:
        return CalendarContext(date=date)
    if has_someday:
        return SomedayContext(list_id=list_id, position=position)
    return UNSCHEDULED


def context_of(task) -> TaskContext:
    """Read the context of a persisted task row."""
    if task.date is not None:
        return CalendarContext(date=task.date)
    if task.list_id is not None or task.position is not None:
        return SomedayContext(list_id=task.list_id, position=task.position)
    return UNSCHEDULED


def context_columns(context: TaskContext) -> dict:
    """Flatten a context into the ``tasks`` column values."""
    if isinstance(context, CalendarContext):
        return {"date": context.date, "list_id": None, "position": None}
    if isinstance(context, SomedayContext):
        return {"date": None, "list_id": context.list_id, "position": context.position}
    return {"date": None, "list_id": None, "position": None}


def apply_context_changes(
    current: TaskContext,
    date: FieldUpdate = KEEP,
    list_id: FieldUpdate = KEEP,
    position: FieldUpdate = KEEP,
) -> TaskContext:
    """
    Work out the new context after an update.

    Setting a date moves the task to the calendar. Setting a list or position
    moves it into a someday list. Clearing a field that belongs to the other
    context is a no-op.

    Raises:
        InvalidTaskContextError: If the update sets both a date and list fields
    """
    sets_someday = isinstance(list_id, Set) or isinstance(position, Set)
    if isinstance(date, Set) and sets_someday:
        raise InvalidTaskContextError()

    if isinstance(date, Set):
        return CalendarContext(date=date.value)

    touches_someday = sets_someday or (
        isinstance(current, SomedayContext) and not (is_keep(list_id) and is_keep(position))
    )
    if touches_someday:
        base = current if isinstance(current, SomedayContext) else SomedayContext(None, None)
        return build_context(
            list_id=list_id.resolve(base.list_id),
            position=position.resolve(base.position),
        )

    if not is_keep(date) and isinstance(current, CalendarContext):
        return UNSCHEDULED

    return current
