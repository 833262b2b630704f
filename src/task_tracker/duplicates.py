from __future__ import annotations

from typing import Iterable

from task_tracker.models import Task


def is_duplicate(tasks: Iterable[Task], title: str, due_date: str) -> bool:
    wanted = title.lower()
    return any(task.title.lower() == wanted and task.due_date == due_date for task in tasks)
