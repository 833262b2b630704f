from __future__ import annotations

import argparse
from typing import Sequence

from task_tracker.config import Settings, load_settings
from task_tracker.logging_setup import setup_logging
from task_tracker.models import Priority
from task_tracker.service import TaskService
from task_tracker.storage import TaskStorage

DEMO_STEPS = (
    ("Adding a valid task:", ("Buy books", "Software engineering books.", "2025-07-20", "High")),
    ("Adding another task:", ("Exercise", "One hour at the gym.", "2025-07-21", "Medium")),
    ("Adding a task with an empty title:", ("", "Task without a title.", "2025-07-22", "Low")),
)


def build_service(settings: Settings) -> TaskService:
    storage = TaskStorage(settings.db_path, strict=settings.strict_load, lock_timeout=settings.lock_timeout)
    return TaskService(storage)


def cmd_add(args: argparse.Namespace, settings: Settings) -> int:
    service = build_service(settings)
    result = service.add_task(
        title=args.title,
        description=args.description,
        due_date=args.due,
        priority=args.priority,
    )
    if not result.ok:
        print(result.message)
        return 1
    print(f"created: {result.task.id}")
    return 0


def cmd_demo(_args: argparse.Namespace, settings: Settings) -> int:
    service = build_service(settings)
    for heading, (title, description, due_date, priority) in DEMO_STEPS:
        print(f"\n{heading}")
        result = service.add_task(title, description, due_date, priority)
        print(f"created: {result.task.id}" if result.ok else result.message)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="task-tracker", description="Personal task tracker")
    sub = parser.add_subparsers(dest="command", required=True)

    add = sub.add_parser("add", help="add task")
    add.add_argument("title")
    add.add_argument("-d", "--description", default="")
    add.add_argument("--due", required=True, help="due date, YYYY-MM-DD")
    add.add_argument("-p", "--priority", default=Priority.MEDIUM.value, help="Low, Medium or High")
    add.set_defaults(handler=cmd_add)

    demo = sub.add_parser("demo", help="run the demonstration sequence")
    demo.set_defaults(handler=cmd_demo)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    settings = load_settings()
    setup_logging(settings.log_level)
    handler = args.handler
    return int(handler(args, settings))


if __name__ == "__main__":
    raise SystemExit(main())
