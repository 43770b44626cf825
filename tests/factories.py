"""
Test data factories for generating test objects.

This module provides Factory Boy factories that build unsaved ORM objects
with realistic default values. Persist them with the ``save`` fixture.
"""

from datetime import datetime, timedelta, timezone

import factory

from models import ColorPreset, SomedayList, TagPreset, Task, TaskAttachment, TaskLink, TrashItem


class SomedayListFactory(factory.Factory):
    """Factory for creating SomedayList test instances."""

    class Meta:
        model = SomedayList

    name = factory.Sequence(lambda n: f"Someday list {n}")
    position = factory.Sequence(lambda n: n)


class CalendarTaskFactory(factory.Factory):
    """Factory for tasks scheduled on a calendar day."""

    class Meta:
        model = Task

    title = factory.Faker("sentence", nb_words=4)
    completed = False
    date = factory.LazyFunction(lambda: datetime.now(timezone.utc) + timedelta(days=1))
    notes = None
    color = None


class SomedayTaskFactory(factory.Factory):
    """Factory for tasks placed in a someday list; pass ``list_id``."""

    class Meta:
        model = Task

    title = factory.Faker("sentence", nb_words=4)
    completed = False
    position = factory.Sequence(lambda n: n)
    notes = factory.Faker("text", max_nb_chars=120)


class TaskLinkFactory(factory.Factory):
    class Meta:
        model = TaskLink

    url = factory.Sequence(lambda n: f"https://example.com/{n}")
    title = None
    position = factory.Sequence(lambda n: n)


class TaskAttachmentFactory(factory.Factory):
    class Meta:
        model = TaskAttachment

    file_name = "notes.txt"
    file_size = 11
    mime_type = "text/plain"
    storage_path = factory.Sequence(lambda n: f"tasks/1/{n}_notes.txt")


class TagPresetFactory(factory.Factory):
    class Meta:
        model = TagPreset

    name = factory.Sequence(lambda n: f"tag-{n}")
    usage_count = 0


class ColorPresetFactory(factory.Factory):
    class Meta:
        model = ColorPreset

    name = factory.Iterator(["Red", "Green", "Blue", "Amber"])
    hex_value = factory.Iterator(["#ff0000", "#00ff00", "#0000ff", "#ffbf00"])
    position = factory.Sequence(lambda n: n)


class TrashItemFactory(factory.Factory):
    class Meta:
        model = TrashItem

    task_id = factory.Sequence(lambda n: str(n))
    task_text = factory.Faker("sentence", nb_words=3)
    task_date = factory.LazyFunction(lambda: datetime.now(timezone.utc))
    task_completed = False
    task_type = "calendar"
    deleted_at = factory.LazyFunction(lambda: datetime.now(timezone.utc))
