from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Priority(str, Enum):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"

    @classmethod
    def labels(cls) -> tuple[str, ...]:
        return tuple(item.value for item in cls)


class TaskStatus(str, Enum):
    INCOMPLETE = "Incomplete"


@dataclass(slots=True)
class Task:
    id: int
    title: str
    description: str
    due_date: str
    priority: str
    status: str
    created_at: str
    last_updated_at: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date,
            "priority": self.priority,
            "status": self.status,
            "created_at": self.created_at,
            "last_updated_at": self.last_updated_at,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Task":
        created_at = str(raw["created_at"])
        return cls(
            id=int(raw["id"]),
            title=str(raw["title"]),
            description=str(raw.get("description") or ""),
            due_date=str(raw["due_date"]),
            priority=str(raw["priority"]),
            status=str(raw.get("status", TaskStatus.INCOMPLETE.value)),
            created_at=created_at,
            last_updated_at=str(raw.get("last_updated_at", created_at)),
        )
