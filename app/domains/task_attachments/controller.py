"""Task attachment GraphQL operations and the multipart upload endpoint."""

import logging
from typing import Optional

import strawberry
from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.datastructures import UploadFile
from strawberry.types import Info

from app.core.config import settings
from app.core.context import AppContext
from app.core.dependencies import get_app_context
from app.exceptions.base import BadRequestError, BaseAppException, PayloadTooLargeError
from app.exceptions.task import AttachmentNotFoundError, TaskNotFoundError
from app.schemas.base import ErrorResponse
from app.schemas.task_attachment import CreateTaskAttachmentInput, TaskAttachment, UploadResponse

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

router = APIRouter(prefix="/api", tags=["attachments"])


async def _with_download_url(app_context: AppContext, attachment) -> TaskAttachment:
    url = await app_context.storage.get_presigned_url(
        attachment.storage_path, expires_in=settings.presigned_url_expiry
    )
    return TaskAttachment.from_model(attachment, download_url=url)


@strawberry.type
class TaskAttachmentQuery:
    @strawberry.field(description="Attachments of a task, each with a one-hour download URL")
    async def task_attachments(self, info: Info, task_id: int) -> list[TaskAttachment]:
        app_context = info.context.app_context
        attachments = await app_context.task_attachments.find_by_task(task_id)
        return [await _with_download_url(app_context, attachment) for attachment in attachments]

    @strawberry.field
    async def task_attachment(self, info: Info, id: int) -> Optional[TaskAttachment]:
        app_context = info.context.app_context
        attachment = await app_context.task_attachments.find_by_id(id)
        if attachment is None:
            return None
        return await _with_download_url(app_context, attachment)


@strawberry.type
class TaskAttachmentMutation:
    @strawberry.mutation(description="Record an attachment whose blob is already stored")
    async def create_task_attachment(
        self, info: Info, input: CreateTaskAttachmentInput
    ) -> TaskAttachment:
        attachment = await info.context.app_context.task_attachments.create(
            task_id=input.task_id,
            file_name=input.file_name,
            file_size=input.file_size,
            mime_type=input.mime_type,
            storage_path=input.storage_path,
        )
        return TaskAttachment.from_model(attachment)

    @strawberry.mutation(description="Delete the blob, then the attachment record")
    async def delete_task_attachment(self, info: Info, id: int) -> bool:
        if not await info.context.app_context.task_attachments.delete(id):
            raise AttachmentNotFoundError()
        return True

    @strawberry.mutation
    async def delete_all_task_attachments(self, info: Info, task_id: int) -> bool:
        await info.context.app_context.task_attachments.delete_by_task(task_id)
        return True


def _parse_task_id(raw) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError) as e:
        raise BadRequestError(f"Invalid task_id: {raw}") from e


async def _store_upload(request: Request, app_context: AppContext) -> UploadResponse:
    """
    Validate a multipart upload, store the blob, then record it.

    Nothing is written to storage until every check has passed.

    Raises:
        BadRequestError: If a field is missing or malformed
        PayloadTooLargeError: If the file exceeds the size ceiling
        TaskNotFoundError: If the task does not exist
        StorageError: If the blob upload fails
        DatabaseError: If the record insert fails (the blob is removed again)
    """
    async with request.form() as form:
        raw_task_id = form.get("task_id")
        upload = form.get("file")

        if not isinstance(raw_task_id, str) or not raw_task_id.strip():
            raise BadRequestError("task_id is required")
        if not isinstance(upload, UploadFile):
            raise BadRequestError("file is required")
        task_id = _parse_task_id(raw_task_id)

        if upload.size is not None and upload.size > settings.max_file_size:
            raise PayloadTooLargeError(
                f"File size exceeds maximum of {settings.max_file_size_mb} MB"
            )
        data = await upload.read()
        if len(data) > settings.max_file_size:
            raise PayloadTooLargeError(
                f"File size exceeds maximum of {settings.max_file_size_mb} MB"
            )

        if await app_context.tasks.find_by_id(task_id) is None:
            raise TaskNotFoundError(task_id)

        file_name = upload.filename or "upload"
        content_type = upload.content_type or DEFAULT_CONTENT_TYPE

    storage_path = await app_context.storage.upload_file(task_id, file_name, data, content_type)
    try:
        attachment = await app_context.task_attachments.create(
            task_id=task_id,
            file_name=file_name,
            file_size=len(data),
            mime_type=content_type,
            storage_path=storage_path,
        )
    except BaseAppException:
        logger.error("Recording %s failed, removing the uploaded blob", storage_path)
        await app_context.storage.delete_file(storage_path)
        raise

    return UploadResponse(
        id=attachment.id,
        file_name=attachment.file_name,
        file_size=attachment.file_size,
        storage_path=attachment.storage_path,
    )


@router.post(
    "/upload",
    response_model=UploadResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 413: {"model": ErrorResponse}},
)
async def upload_attachment(
    request: Request,
    app_context: AppContext = Depends(get_app_context),
):
    """Upload a file for a task (multipart fields ``task_id`` and ``file``)."""
    try:
        return await _store_upload(request, app_context)
    except BaseAppException as e:
        logger.warning("Upload rejected: %s", e.message)
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
