"""
Unit tests for Exception classes.

Checks status codes, error codes and the messages GraphQL clients see.
"""

from fastapi import HTTPException

from app.exceptions.base import (
    BadRequestError,
    BaseAppException,
    DatabaseError,
    NotFoundError,
    PayloadTooLargeError,
    StorageError,
    ValidationError,
)
from app.exceptions.task import (
    AttachmentNotFoundError,
    InvalidDateError,
    InvalidTaskContextError,
    TaskNotFoundError,
)


class TestBaseAppException:
    def test_defaults(self):
        exc = BaseAppException("Test error")

        assert isinstance(exc, HTTPException)
        assert exc.status_code == 500
        assert exc.error_code == "INTERNAL_ERROR"
        assert exc.details == {}
        assert exc.detail["message"] == "Test error"

    def test_str_is_the_message(self):
        assert str(NotFoundError("Gone")) == "Gone"


class TestDerivedExceptions:
    def test_status_codes(self):
        assert NotFoundError().status_code == 404
        assert ValidationError().status_code == 422
        assert BadRequestError().status_code == 400
        assert PayloadTooLargeError().status_code == 413
        assert DatabaseError("x").status_code == 500
        assert StorageError("x").status_code == 502

    def test_prefixed_messages(self):
        assert DatabaseError("locked").message == "Database error: locked"
        assert StorageError("timeout").message == "Storage error: timeout"

    def test_task_not_found(self):
        exc = TaskNotFoundError(12)
        assert exc.message == "Task 12 not found"
        assert exc.details == {"task_id": 12}
        assert exc.status_code == 404

    def test_invalid_date(self):
        exc = InvalidDateError("bad month")
        assert exc.message == "Invalid date format: bad month"
        assert exc.error_code == "VALIDATION_ERROR"

    def test_invalid_context(self):
        assert InvalidTaskContextError().status_code == 422

    def test_attachment_not_found(self):
        exc = AttachmentNotFoundError()
        assert exc.message == "Attachment not found"
        assert exc.error_code == "ATTACHMENT_NOT_FOUND"
