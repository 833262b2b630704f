from __future__ import annotations

import json
import logging
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Sequence

from task_tracker.errors import StorageReadError, StorageWriteError
from task_tracker.locking import file_lock
from task_tracker.models import Task

logger = logging.getLogger(__name__)

DEFAULT_DB_FILE = "tasks_database.json"


class TaskStorage:
    """Reads fail open unless ``strict`` is set."""

    def __init__(self, path: Path, strict: bool = False, lock_timeout: float = 10.0) -> None:
        self.path = path
        self.strict = strict
        self.lock_timeout = lock_timeout

    def load_tasks(self) -> list[Task]:
        if not self.path.exists():
            return []

        try:
            text = self.path.read_text(encoding="utf-8")
            if not text.strip():
                return []
            data = json.loads(text)
            if not isinstance(data, list):
                raise ValueError("storage file must contain JSON list")
            return [Task.from_dict(item) for item in data]
        except (OSError, ValueError, KeyError, TypeError) as exc:
            message = f"Error reading task database {self.path}: {exc}"
            if self.strict:
                raise StorageReadError(message) from exc
            logger.error(message)
            return []

    def save_tasks(self, tasks: Sequence[Task]) -> None:
        payload = [task.to_dict() for task in tasks]
        content = json.dumps(payload, ensure_ascii=False, indent=2)
        tmp: Path | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=str(self.path.parent),
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as fh:
                tmp = Path(fh.name)
                fh.write(content)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp, self.path)
            tmp = None
        except OSError as exc:
            raise StorageWriteError(f"Error writing task database {self.path}: {exc}") from exc
        finally:
            if tmp is not None:
                tmp.unlink(missing_ok=True)

    @contextmanager
    def lock(self) -> Iterator[None]:
        """Serialize a load-modify-save cycle against other writers."""
        try:
            with file_lock(self.path, timeout=self.lock_timeout):
                yield
        except OSError as exc:
            raise StorageWriteError(f"Error locking task database {self.path}: {exc}") from exc
