"""Object storage service for task attachments (MinIO / any S3-compatible store)."""

import logging
import re
import uuid

import boto3
from botocore.client import Config
from botocore.exceptions import BotoCoreError, ClientError
from fastapi.concurrency import run_in_threadpool

from app.core.config import Settings, settings
from app.exceptions.base import StorageError

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]")


def sanitize_filename(filename: str) -> str:
    """Replace every character outside ``[A-Za-z0-9._-]`` with an underscore.

    Path separators are replaced too, so a key can never leave its
    ``tasks/<task_id>/`` prefix.
    """
    return _UNSAFE_CHARS.sub("_", filename)


def build_storage_key(task_id: int, filename: str) -> str:
    return f"tasks/{task_id}/{uuid.uuid4()}_{sanitize_filename(filename)}"


class StorageService:
    """Service for storing attachment blobs in one S3 bucket."""

    def __init__(self, config: Settings | None = None, client=None):
        """Initialize the S3 client from MinIO configuration."""
        config = config or settings
        self.bucket = config.minio_bucket
        self.endpoint_url = config.minio_url
        self.client = client or boto3.client(
            "s3",
            endpoint_url=self.endpoint_url,
            aws_access_key_id=config.minio_access_key,
            aws_secret_access_key=config.minio_secret_key,
            region_name=config.minio_region,
            config=Config(signature_version="s3v4", s3={"addressing_style": "path"}),
        )

    async def ensure_bucket(self) -> None:
        """Create the bucket if it does not exist yet."""
        try:
            await run_in_threadpool(self.client.head_bucket, Bucket=self.bucket)
            return
        except ClientError as e:
            if e.response.get("Error", {}).get("Code") not in ("404", "NoSuchBucket"):
                raise StorageError(str(e)) from e
        except BotoCoreError as e:
            raise StorageError(str(e)) from e

        try:
            await run_in_threadpool(self.client.create_bucket, Bucket=self.bucket)
            logger.info("Created storage bucket %s", self.bucket)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(str(e)) from e

    async def upload_file(
        self, task_id: int, filename: str, data: bytes, content_type: str
    ) -> str:
        """Upload a blob for a task.

        Args:
            task_id: Task the file belongs to
            filename: Original file name (sanitized into the key)
            data: File contents
            content_type: MIME type stored with the object

        Returns:
            The storage key of the new object

        Raises:
            StorageError: If the object store rejects the upload
        """
        key = build_storage_key(task_id, filename)
        try:
            await run_in_threadpool(
                self.client.put_object,
                Bucket=self.bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            logger.error("Upload of %s failed: %s", key, e)
            raise StorageError(str(e)) from e

        logger.info("Uploaded %s (%d bytes)", key, len(data))
        return key

    async def get_presigned_url(self, key: str, expires_in: int = 3600) -> str:
        """Generate a time-limited download URL for one object."""
        try:
            return await run_in_threadpool(
                self.client.generate_presigned_url,
                "get_object",
                Params={"Bucket": self.bucket, "Key": key},
                ExpiresIn=expires_in,
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageError(str(e)) from e

    async def delete_file(self, key: str) -> None:
        try:
            await run_in_threadpool(self.client.delete_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            logger.error("Delete of %s failed: %s", key, e)
            raise StorageError(str(e)) from e
        logger.info("Deleted %s", key)

    async def file_exists(self, key: str) -> bool:
        try:
            await run_in_threadpool(self.client.head_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError):
            return False
        return True

    async def get_file_metadata(self, key: str) -> tuple[int, str]:
        """Return ``(size, content_type)`` of a stored object."""
        try:
            head = await run_in_threadpool(self.client.head_object, Bucket=self.bucket, Key=key)
        except (BotoCoreError, ClientError) as e:
            raise StorageError(str(e)) from e
        return head.get("ContentLength", 0), head.get("ContentType", "application/octet-stream")
