from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest

from task_tracker.errors import StorageReadError, StorageWriteError
from task_tracker.factory import build_task
from task_tracker.storage import TaskStorage


def test_load_empty_when_file_missing(tmp_path: Path) -> None:
    storage = TaskStorage(tmp_path / "missing.json")
    assert storage.load_tasks() == []


def test_load_empty_when_file_blank(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("  \n", encoding="utf-8")
    assert TaskStorage(path).load_tasks() == []


def test_round_trip_save_and_load(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    storage = TaskStorage(path)
    tasks = [
        build_task(1, "Learn Python", "", "2025-07-20", "High"),
        build_task(2, "Write tests", "pytest", "2025-07-21", "Low"),
    ]

    storage.save_tasks(tasks)
    loaded = storage.load_tasks()

    assert loaded == tasks
    storage.save_tasks(loaded)
    assert storage.load_tasks() == tasks


def test_saved_file_uses_record_keys(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    TaskStorage(path).save_tasks([build_task(1, "Mua sách", "", "2025-07-20", "High")])

    raw = json.loads(path.read_text(encoding="utf-8"))
    assert list(raw[0]) == [
        "id",
        "title",
        "description",
        "due_date",
        "priority",
        "status",
        "created_at",
        "last_updated_at",
    ]
    assert "Mua sách" in path.read_text(encoding="utf-8")


def test_corrupt_file_reads_as_empty(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    path = tmp_path / "tasks.json"
    path.write_text("{not json", encoding="utf-8")

    with caplog.at_level(logging.ERROR):
        assert TaskStorage(path).load_tasks() == []
    assert "Error reading task database" in caplog.text


def test_non_list_file_reads_as_empty(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text('{"id": 1}', encoding="utf-8")
    assert TaskStorage(path).load_tasks() == []


def test_strict_load_raises_on_corrupt_file(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    path.write_text('[{"title": "no id"}]', encoding="utf-8")

    with pytest.raises(StorageReadError):
        TaskStorage(path, strict=True).load_tasks()


def test_save_leaves_no_temp_files(tmp_path: Path) -> None:
    path = tmp_path / "tasks.json"
    storage = TaskStorage(path)
    storage.save_tasks([build_task(1, "A", "", "2025-07-20", "Low")])
    storage.save_tasks([])

    assert sorted(item.name for item in tmp_path.iterdir()) == ["tasks.json"]
    assert storage.load_tasks() == []


def test_save_failure_keeps_previous_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    path = tmp_path / "tasks.json"
    storage = TaskStorage(path)
    storage.save_tasks([build_task(1, "A", "", "2025-07-20", "Low")])
    before = path.read_text(encoding="utf-8")

    def broken_replace(src: object, dst: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("task_tracker.storage.os.replace", broken_replace)

    with pytest.raises(StorageWriteError, match="disk full"):
        storage.save_tasks([])

    assert path.read_text(encoding="utf-8") == before
    assert sorted(item.name for item in tmp_path.iterdir()) == ["tasks.json"]
