from __future__ import annotations

from datetime import datetime, timezone
from typing import Sequence

from task_tracker.models import Task, TaskStatus


def next_id(tasks: Sequence[Task]) -> int:
    return max((task.id for task in tasks), default=0) + 1


def build_task(
    task_id: int,
    title: str,
    description: str,
    due_date: str,
    priority: str,
    *,
    now: datetime | None = None,
) -> Task:
    stamp = (now or datetime.now(timezone.utc)).isoformat()
    return Task(
        id=task_id,
        title=title,
        description=description,
        due_date=due_date,
        priority=priority,
        status=TaskStatus.INCOMPLETE.value,
        created_at=stamp,
        last_updated_at=stamp,
    )
