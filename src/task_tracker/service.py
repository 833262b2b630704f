from __future__ import annotations

import logging
from dataclasses import dataclass

from task_tracker.duplicates import is_duplicate
from task_tracker.errors import ErrorCode, StorageError
from task_tracker.factory import build_task, next_id
from task_tracker.models import Priority, Task
from task_tracker.storage import TaskStorage
from task_tracker.validation import (
    invalid_date_message,
    is_valid_priority,
    is_valid_title,
    parse_due_date,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class AddTaskResult:
    task: Task | None = None
    error: ErrorCode | None = None
    message: str = ""

    @property
    def ok(self) -> bool:
        return self.task is not None


class TaskService:
    def __init__(self, storage: TaskStorage) -> None:
        self.storage = storage

    def add_task(
        self,
        title: str,
        description: str = "",
        due_date: str = "",
        priority: str = Priority.MEDIUM.value,
    ) -> AddTaskResult:
        if not is_valid_title(title):
            return self._fail(ErrorCode.EMPTY_TITLE, "Error: title must not be empty.")

        if parse_due_date(due_date) is None:
            return AddTaskResult(error=ErrorCode.INVALID_DATE_FORMAT, message=invalid_date_message(due_date))

        if not is_valid_priority(priority):
            labels = ", ".join(Priority.labels())
            return self._fail(
                ErrorCode.INVALID_PRIORITY,
                f"Error: invalid priority '{priority}'. Choose one of: {labels}.",
            )

        try:
            with self.storage.lock():
                tasks = self.storage.load_tasks()
                if is_duplicate(tasks, title, due_date):
                    return self._fail(
                        ErrorCode.DUPLICATE_TASK,
                        f"Error: task '{title}' already exists with the same due date.",
                    )

                task = build_task(next_id(tasks), title, description or "", due_date, priority)
                tasks.append(task)
                self.storage.save_tasks(tasks)
        except StorageError as exc:
            logger.error("%s", exc)
            code = exc.code or ErrorCode.STORAGE_WRITE_ERROR
            return AddTaskResult(error=code, message=str(exc))

        logger.info("Added new task with ID: %s", task.id)
        return AddTaskResult(task=task, message=f"Added new task with ID: {task.id}")

    @staticmethod
    def _fail(code: ErrorCode, message: str) -> AddTaskResult:
        logger.warning("%s", message)
        return AddTaskResult(error=code, message=message)
