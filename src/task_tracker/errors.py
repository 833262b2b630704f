from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Reasons an add can fail."""

    EMPTY_TITLE = "EmptyTitle"
    INVALID_DATE_FORMAT = "InvalidDateFormat"
    INVALID_PRIORITY = "InvalidPriority"
    DUPLICATE_TASK = "DuplicateTask"
    STORAGE_READ_ERROR = "StorageReadError"
    STORAGE_WRITE_ERROR = "StorageWriteError"


class TaskTrackerError(Exception):
    """Base class for errors raised by task_tracker."""

    code: ErrorCode | None = None


class StorageError(TaskTrackerError):
    """The task file could not be read or written."""


class StorageReadError(StorageError):
    code = ErrorCode.STORAGE_READ_ERROR


class StorageWriteError(StorageError):
    code = ErrorCode.STORAGE_WRITE_ERROR


class StorageLockError(StorageWriteError):
    """Raised when the store lock cannot be acquired within the timeout."""
