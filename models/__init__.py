"""
Models package initialization.
"""

from .base import Base, BaseModel, IdentityModel
from .color_preset import ColorPreset
from .settings import AppSettings
from .someday_list import SomedayList
from .tag_preset import TagPreset
from .task import Task
from .task_attachment import TaskAttachment
from .task_link import TaskLink
from .task_tag import TaskTag
from .trash import TrashItem

__all__ = [
    "Base",
    "BaseModel",
    "IdentityModel",
    "Task",
    "SomedayList",
    "TaskTag",
    "TaskLink",
    "TaskAttachment",
    "TagPreset",
    "ColorPreset",
    "AppSettings",
    "TrashItem",
]
