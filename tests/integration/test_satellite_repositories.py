"""
Integration tests for tags, links, attachments, presets, settings and trash.
"""

from datetime import timedelta

import pytest
from sqlalchemy.exc import IntegrityError
from factories import (
    CalendarTaskFactory,
    ColorPresetFactory,
    TagPresetFactory,
    TaskAttachmentFactory,
    TrashItemFactory,
)

from app.domains.settings.repository import DEFAULT_SETTINGS, SettingsChanges
from app.domains.task_links.repository import TaskLinkChanges
from app.exceptions.base import DatabaseError, StorageError, ValidationError
from app.shared.updates import CLEAR, Set
from models.base import utcnow


class TestTaskTags:
    @pytest.mark.asyncio
    async def test_add_tag_bumps_matching_preset(self, app_context, save):
        task = await save(CalendarTaskFactory.build())
        await save(TagPresetFactory.build(name="errand"))

        await app_context.task_tags.add_tag(task.id, "errand")
        await app_context.task_tags.add_tag(task.id, "urgent")

        assert (await app_context.tag_presets.find_by_name("errand")).usage_count == 1
        tags = await app_context.task_tags.find_by_task(task.id)
        assert [tag.tag_name for tag in tags] == ["errand", "urgent"]

    @pytest.mark.asyncio
    async def test_tag_on_missing_task_fails(self, app_context):
        with pytest.raises(DatabaseError):
            await app_context.task_tags.add_tag(999, "orphan")

    @pytest.mark.asyncio
    async def test_tags_cascade_with_task(self, app_context, save):
        task = await save(CalendarTaskFactory.build())
        await app_context.task_tags.add_tag(task.id, "home")

        await app_context.tasks.delete(task.id)

        assert await app_context.task_tags.find_by_task(task.id) == []

    @pytest.mark.asyncio
    async def test_all_tag_names_distinct(self, app_context, save):
        first, second = await save(CalendarTaskFactory.build(), CalendarTaskFactory.build())
        await app_context.task_tags.add_tag(first.id, "b")
        await app_context.task_tags.add_tag(second.id, "a")
        await app_context.task_tags.add_tag(second.id, "b")

        assert await app_context.task_tags.all_tag_names() == ["a", "b"]


class TestTaskLinks:
    @pytest.mark.asyncio
    async def test_positions_increase_per_task(self, app_context, save):
        task, other = await save(CalendarTaskFactory.build(), CalendarTaskFactory.build())

        first = await app_context.task_links.add_link(task.id, "https://a.test")
        second = await app_context.task_links.add_link(task.id, "https://b.test", "B")
        elsewhere = await app_context.task_links.add_link(other.id, "https://c.test")

        assert (first.position, second.position) == (0, 1)
        assert elsewhere.position == 0

    @pytest.mark.asyncio
    async def test_positions_not_reused_after_delete(self, app_context, save):
        task = await save(CalendarTaskFactory.build())
        await app_context.task_links.add_link(task.id, "https://a.test")
        second = await app_context.task_links.add_link(task.id, "https://b.test")
        await app_context.task_links.delete(second.id)
        await app_context.task_links.add_link(task.id, "https://c.test")

        positions = [link.position for link in await app_context.task_links.find_by_task(task.id)]

        assert positions == [0, 1]

    @pytest.mark.asyncio
    async def test_update_link_title(self, app_context, save):
        task = await save(CalendarTaskFactory.build())
        link = await app_context.task_links.add_link(task.id, "https://a.test", "A")

        updated = await app_context.task_links.update(link.id, TaskLinkChanges(title=CLEAR))

        assert updated.title is None
        assert updated.url == "https://a.test"


class TestTaskAttachments:
    @pytest.mark.asyncio
    async def test_delete_removes_blob_then_row(self, app_context, save, mock_storage):
        task = await save(CalendarTaskFactory.build())
        attachment = await save(TaskAttachmentFactory.build(task_id=task.id))

        assert await app_context.task_attachments.delete(attachment.id) == 1

        mock_storage.delete_file.assert_awaited_once_with(attachment.storage_path)
        assert await app_context.task_attachments.find_by_id(attachment.id) is None

    @pytest.mark.asyncio
    async def test_blob_failure_keeps_row(self, app_context, save, mock_storage):
        task = await save(CalendarTaskFactory.build())
        attachment = await save(TaskAttachmentFactory.build(task_id=task.id))
        mock_storage.delete_file.side_effect = StorageError("connection refused")

        with pytest.raises(StorageError):
            await app_context.task_attachments.delete(attachment.id)

        assert await app_context.task_attachments.find_by_id(attachment.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_attachment(self, app_context, mock_storage):
        assert await app_context.task_attachments.delete(999) == 0
        mock_storage.delete_file.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_delete_by_task(self, app_context, save, mock_storage):
        task = await save(CalendarTaskFactory.build())
        await save(
            TaskAttachmentFactory.build(task_id=task.id),
            TaskAttachmentFactory.build(task_id=task.id),
        )

        assert await app_context.task_attachments.delete_by_task(task.id) == 2
        assert mock_storage.delete_file.await_count == 2


class TestPresets:
    @pytest.mark.asyncio
    async def test_tag_presets_ordered_by_usage(self, app_context, save):
        await save(
            TagPresetFactory.build(name="beta", usage_count=1),
            TagPresetFactory.build(name="alpha", usage_count=1),
            TagPresetFactory.build(name="gamma", usage_count=5),
        )

        names = [preset.name for preset in await app_context.tag_presets.find_all()]

        assert names == ["gamma", "alpha", "beta"]

    @pytest.mark.asyncio
    async def test_increment_usage_only_matches_name(self, app_context):
        await app_context.tag_presets.create("work")

        assert await app_context.tag_presets.increment_usage("work") == 1
        assert await app_context.tag_presets.increment_usage("missing") == 0
        assert (await app_context.tag_presets.find_by_name("work")).usage_count == 1

    @pytest.mark.asyncio
    async def test_duplicate_tag_preset_rejected(self, app_context):
        await app_context.tag_presets.create("work")
        with pytest.raises(DatabaseError):
            await app_context.tag_presets.create("work")

    @pytest.mark.asyncio
    async def test_color_presets_append(self, app_context):
        red = await app_context.color_presets.create("Red", "#ff0000")
        green = await app_context.color_presets.create("Green", "#00ff00")
        assert (red.position, green.position) == (0, 1)

    @pytest.mark.asyncio
    async def test_color_reorder(self, app_context):
        a = await app_context.color_presets.create("A", "#aaaaaa")
        b = await app_context.color_presets.create("B", "#bbbbbb")
        c = await app_context.color_presets.create("C", "#cccccc")

        ordered = await app_context.color_presets.reorder([c.id, a.id, b.id])

        assert [(preset.id, preset.position) for preset in ordered] == [
            (c.id, 0),
            (a.id, 1),
            (b.id, 2),
        ]

    @pytest.mark.asyncio
    async def test_color_position_unique(self, save):
        await save(ColorPresetFactory.build(position=10))
        with pytest.raises(IntegrityError):
            await save(ColorPresetFactory.build(position=10))


class TestSettings:
    @pytest.mark.asyncio
    async def test_first_read_creates_defaults(self, app_context):
        settings = await app_context.settings.get()

        assert settings.column_min_width == DEFAULT_SETTINGS["column_min_width"]
        assert settings.theme == "light"
        assert (await app_context.settings.get()).id == settings.id

    @pytest.mark.asyncio
    async def test_partial_update(self, app_context):
        updated = await app_context.settings.update(
            SettingsChanges(drawer_height=Set(420), theme=Set("dark"))
        )

        assert updated.drawer_height == 420
        assert updated.theme == "dark"
        assert updated.column_min_width == DEFAULT_SETTINGS["column_min_width"]

    @pytest.mark.asyncio
    async def test_clearing_a_setting_rejected(self, app_context):
        with pytest.raises(ValidationError):
            await app_context.settings.update(SettingsChanges(drawer_height=CLEAR))

    @pytest.mark.asyncio
    async def test_reset(self, app_context):
        await app_context.settings.update(SettingsChanges(single_arrow_days=Set(3)))
        reset = await app_context.settings.reset()
        assert reset.single_arrow_days == DEFAULT_SETTINGS["single_arrow_days"]


class TestTrash:
    @pytest.mark.asyncio
    async def test_clean_old_keeps_recent(self, app_context, save):
        now = utcnow()
        await save(
            TrashItemFactory.build(task_text="ancient", deleted_at=now - timedelta(days=8)),
            TrashItemFactory.build(task_text="recent", deleted_at=now - timedelta(days=6)),
        )

        removed = await app_context.trash.clean_old()

        assert removed == 1
        assert [item.task_text for item in await app_context.trash.find_all()] == ["recent"]

    @pytest.mark.asyncio
    async def test_newest_first(self, app_context, save):
        now = utcnow()
        await save(
            TrashItemFactory.build(task_text="older", deleted_at=now - timedelta(hours=2)),
            TrashItemFactory.build(task_text="newer", deleted_at=now),
        )

        assert [item.task_text for item in await app_context.trash.find_all()] == [
            "newer",
            "older",
        ]

    @pytest.mark.asyncio
    async def test_snapshot_outlives_task(self, app_context, save):
        task = await save(CalendarTaskFactory.build())
        item = await app_context.trash.create(
            str(task.id), task.title, task.date, task.completed, "calendar"
        )
        await app_context.tasks.delete(task.id)
        assert (await app_context.trash.find_by_id(item.id)).task_id == str(task.id)
