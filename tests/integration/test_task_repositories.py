"""
Integration tests for the task repositories.

Every test runs against a freshly migrated SQLite database.
"""

import asyncio
from datetime import datetime, timezone

import pytest
from factories import CalendarTaskFactory, SomedayListFactory, SomedayTaskFactory

from app.domains.someday_lists.repository import SomedayListChanges
from app.domains.someday_tasks.repository import SomedayTaskChanges
from app.domains.tasks.context import CalendarContext, SomedayContext
from app.domains.tasks.repository import TaskChanges
from app.exceptions.base import NotFoundError, ValidationError
from app.exceptions.task import InvalidTaskContextError, TaskNotFoundError
from app.shared.updates import CLEAR, Set

DAY = datetime(2026, 3, 1, 9, 0, tzinfo=timezone.utc)


def as_utc(value: datetime) -> datetime:
    return value if value.tzinfo else value.replace(tzinfo=timezone.utc)


class TestTaskRepository:
    @pytest.mark.asyncio
    async def test_create_and_find_roundtrip(self, app_context):
        created = await app_context.tasks.create(
            "Buy milk", context=CalendarContext(date=DAY), notes="2%", color="blue"
        )

        found = await app_context.tasks.find_by_id(created.id)

        assert found.title == "Buy milk"
        assert found.completed is False
        assert as_utc(found.date) == DAY
        assert found.list_id is None
        assert found.notes == "2%"
        assert found.color == "blue"

    @pytest.mark.asyncio
    async def test_update_refreshes_updated_at(self, app_context):
        task = await app_context.tasks.create("Stretch")
        await asyncio.sleep(0.01)

        updated = await app_context.tasks.update(task.id, TaskChanges(completed=Set(True)))

        assert updated.completed is True
        assert as_utc(updated.updated_at) > as_utc(task.updated_at)
        assert as_utc(updated.created_at) == as_utc(task.created_at)

    @pytest.mark.asyncio
    async def test_title_update_leaves_other_fields(self, app_context):
        task = await app_context.tasks.create(
            "Draft", context=CalendarContext(date=DAY), notes="n", color="red"
        )
        await asyncio.sleep(0.01)

        updated = await app_context.tasks.update(task.id, TaskChanges(title=Set("X")))

        assert updated.title == "X"
        assert (updated.notes, updated.color, updated.completed) == ("n", "red", False)
        assert as_utc(updated.date) == DAY
        assert as_utc(updated.updated_at) > as_utc(task.updated_at)

    @pytest.mark.asyncio
    async def test_update_clears_nullable_fields(self, app_context):
        task = await app_context.tasks.create("Paint", notes="blue wall", color="blue")

        updated = await app_context.tasks.update(task.id, TaskChanges(color=CLEAR))

        assert updated.color is None
        assert updated.notes == "blue wall"

    @pytest.mark.asyncio
    async def test_update_rejects_clearing_title(self, app_context):
        task = await app_context.tasks.create("Keep me")
        with pytest.raises(ValidationError):
            await app_context.tasks.update(task.id, TaskChanges(title=CLEAR))
        assert (await app_context.tasks.find_by_id(task.id)).title == "Keep me"

    @pytest.mark.asyncio
    async def test_update_moves_between_contexts(self, app_context, save):
        someday_list = await save(SomedayListFactory.build())
        task = await app_context.tasks.create("Plan trip", context=CalendarContext(date=DAY))

        moved = await app_context.tasks.update(
            task.id, TaskChanges(list_id=Set(someday_list.id), position=Set(0))
        )

        assert moved.date is None
        assert moved.list_id == someday_list.id
        assert moved.position == 0

    @pytest.mark.asyncio
    async def test_update_rejects_date_and_list(self, app_context):
        task = await app_context.tasks.create("Confused")
        with pytest.raises(InvalidTaskContextError):
            await app_context.tasks.update(
                task.id, TaskChanges(date=Set(DAY), list_id=Set(1))
            )

    @pytest.mark.asyncio
    async def test_update_missing_task(self, app_context):
        with pytest.raises(TaskNotFoundError):
            await app_context.tasks.update(999, TaskChanges(title=Set("x")))

    @pytest.mark.asyncio
    async def test_delete_missing_returns_zero(self, app_context):
        assert await app_context.tasks.delete(999) == 0

    @pytest.mark.asyncio
    async def test_delete_existing_returns_one(self, app_context):
        task = await app_context.tasks.create("Gone soon")
        assert await app_context.tasks.delete(task.id) == 1
        assert await app_context.tasks.find_by_id(task.id) is None

    @pytest.mark.asyncio
    async def test_find_incomplete(self, app_context, save):
        done, open_task = await save(
            CalendarTaskFactory.build(title="Done", completed=True),
            CalendarTaskFactory.build(title="Open"),
        )

        incomplete = await app_context.tasks.find_incomplete()

        assert [task.id for task in incomplete] == [open_task.id]

    @pytest.mark.asyncio
    async def test_someday_context_on_create(self, app_context, save):
        someday_list = await save(SomedayListFactory.build())
        task = await app_context.tasks.create(
            "Read book", context=SomedayContext(list_id=someday_list.id, position=4)
        )
        assert task.date is None
        assert task.list_id == someday_list.id
        assert task.position == 4


class TestSomedayRepositories:
    @pytest.mark.asyncio
    async def test_deleting_list_detaches_tasks(self, app_context, save):
        someday_list = await save(SomedayListFactory.build())
        task = await save(SomedayTaskFactory.build(list_id=someday_list.id))

        assert await app_context.someday_lists.delete(someday_list.id) == 1

        survivor = await app_context.tasks.find_by_id(task.id)
        assert survivor is not None
        assert survivor.list_id is None

    @pytest.mark.asyncio
    async def test_lists_ordered_by_position(self, app_context):
        await app_context.someday_lists.create("Later", 2)
        await app_context.someday_lists.create("Soon", 1)

        names = [item.name for item in await app_context.someday_lists.find_all()]

        assert names == ["Soon", "Later"]

    @pytest.mark.asyncio
    async def test_rename_list(self, app_context):
        someday_list = await app_context.someday_lists.create("Books", 0)
        renamed = await app_context.someday_lists.update(
            someday_list.id, SomedayListChanges(name=Set("Novels"))
        )
        assert renamed.name == "Novels"
        assert renamed.position == 0

    @pytest.mark.asyncio
    async def test_someday_task_description_is_notes(self, app_context, save):
        someday_list = await save(SomedayListFactory.build())

        task = await app_context.someday_tasks.create(someday_list.id, "Learn Go", "someday", 0)

        assert task.notes == "someday"
        assert [t.id for t in await app_context.someday_tasks.find_by_list(someday_list.id)] == [
            task.id
        ]

    @pytest.mark.asyncio
    async def test_someday_task_toggle(self, app_context, save):
        someday_list = await save(SomedayListFactory.build())
        task = await save(SomedayTaskFactory.build(list_id=someday_list.id))

        toggled = await app_context.someday_tasks.toggle_completed(task.id)
        assert toggled.completed is True
        toggled = await app_context.someday_tasks.toggle_completed(task.id)
        assert toggled.completed is False

    @pytest.mark.asyncio
    async def test_move_between_lists(self, app_context, save):
        first, second = await save(SomedayListFactory.build(), SomedayListFactory.build())
        task = await save(SomedayTaskFactory.build(list_id=first.id, position=2))

        moved = await app_context.someday_tasks.update(
            task.id, SomedayTaskChanges(list_id=Set(second.id), position=Set(0))
        )

        assert moved.date is None
        assert (moved.list_id, moved.position) == (second.id, 0)

    @pytest.mark.asyncio
    async def test_update_ignores_calendar_tasks(self, app_context, save):
        task = await save(CalendarTaskFactory.build(date=DAY))

        with pytest.raises(NotFoundError):
            await app_context.someday_tasks.update(task.id, SomedayTaskChanges(position=Set(3)))

        untouched = await app_context.tasks.find_by_id(task.id)
        assert as_utc(untouched.date) == DAY
        assert untouched.position is None

    @pytest.mark.asyncio
    async def test_toggle_ignores_calendar_tasks(self, app_context, save):
        task = await save(CalendarTaskFactory.build(completed=False))

        with pytest.raises(NotFoundError):
            await app_context.someday_tasks.toggle_completed(task.id)

        assert (await app_context.tasks.find_by_id(task.id)).completed is False

    @pytest.mark.asyncio
    async def test_delete_ignores_calendar_tasks(self, app_context, save):
        task = await save(CalendarTaskFactory.build())

        assert await app_context.someday_tasks.delete(task.id) == 0
        assert await app_context.tasks.find_by_id(task.id) is not None

    @pytest.mark.asyncio
    async def test_calendar_tasks_hidden_from_someday_lookup(self, app_context, save):
        task = await save(CalendarTaskFactory.build())
        assert await app_context.someday_tasks.find_by_id(task.id) is None
