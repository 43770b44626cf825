"""Task attachment GraphQL types and the upload response schema."""

from typing import Optional

import strawberry

from models import TaskAttachment as TaskAttachmentModel

from .base import BaseSchema, format_datetime


@strawberry.type
class TaskAttachment:
    id: int
    task_id: int
    file_name: str
    file_size: int
    mime_type: str
    uploaded_at: str
    download_url: Optional[str] = None

    @classmethod
    def from_model(
        cls, model: TaskAttachmentModel, download_url: Optional[str] = None
    ) -> "TaskAttachment":
        return cls(
            id=model.id,
            task_id=model.task_id,
            file_name=model.file_name,
            file_size=model.file_size,
            mime_type=model.mime_type,
            uploaded_at=format_datetime(model.uploaded_at),
            download_url=download_url,
        )


@strawberry.input
class CreateTaskAttachmentInput:
    task_id: int
    file_name: str
    file_size: int
    mime_type: str
    storage_path: str


class UploadResponse(BaseSchema):
    """Body returned by a successful multipart upload."""

    id: int
    file_name: str
    file_size: int
    storage_path: str
    message: str = "File uploaded successfully"
