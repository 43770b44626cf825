"""Task-related exceptions."""

from .base import BaseAppException, NotFoundError, ValidationError


class TaskNotFoundError(NotFoundError):
    """Raised when a task is not found."""

    def __init__(self, task_id: int):
        super().__init__(message=f"Task {task_id} not found", details={"task_id": task_id})


class InvalidTaskContextError(ValidationError):
    """Raised when a task would be both on the calendar and in a someday list."""

    def __init__(self, message: str = "A task cannot have both a date and a someday list"):
        super().__init__(message=message)


class InvalidDateError(ValidationError):
    """Raised when a date string is not RFC 3339."""

    def __init__(self, reason: str):
        super().__init__(message=f"Invalid date format: {reason}")


class AttachmentNotFoundError(BaseAppException):
    """Raised when an attachment is not found."""

    def __init__(self, message: str = "Attachment not found"):
        super().__init__(message=message, status_code=404, error_code="ATTACHMENT_NOT_FOUND")
