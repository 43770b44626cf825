"""Application context: the composition root shared by every request."""

from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.domains.color_presets.repository import ColorPresetRepository
from app.domains.settings.repository import SettingsRepository
from app.domains.someday_lists.repository import SomedayListRepository
from app.domains.someday_tasks.repository import SomedayTaskRepository
from app.domains.tag_presets.repository import TagPresetRepository
from app.domains.task_attachments.repository import TaskAttachmentRepository
from app.domains.task_links.repository import TaskLinkRepository
from app.domains.task_tags.repository import TaskTagRepository
from app.domains.tasks.repository import TaskRepository
from app.domains.trash.repository import TrashRepository
from app.services.storage_service import StorageService


@dataclass(frozen=True)
class AppContext:
    """One instance of every repository plus the storage client.

    Built once at startup and shared read-only by all requests.
    """

    tasks: TaskRepository
    someday_lists: SomedayListRepository
    someday_tasks: SomedayTaskRepository
    task_tags: TaskTagRepository
    task_links: TaskLinkRepository
    task_attachments: TaskAttachmentRepository
    tag_presets: TagPresetRepository
    color_presets: ColorPresetRepository
    settings: SettingsRepository
    trash: TrashRepository
    storage: StorageService

    @classmethod
    def build(
        cls, session_factory: async_sessionmaker[AsyncSession], storage: StorageService
    ) -> "AppContext":
        tag_presets = TagPresetRepository(session_factory)
        return cls(
            tasks=TaskRepository(session_factory),
            someday_lists=SomedayListRepository(session_factory),
            someday_tasks=SomedayTaskRepository(session_factory),
            task_tags=TaskTagRepository(session_factory, tag_presets),
            task_links=TaskLinkRepository(session_factory),
            task_attachments=TaskAttachmentRepository(session_factory, storage),
            tag_presets=tag_presets,
            color_presets=ColorPresetRepository(session_factory),
            settings=SettingsRepository(session_factory),
            trash=TrashRepository(session_factory),
            storage=storage,
        )
