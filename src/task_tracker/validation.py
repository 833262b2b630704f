from __future__ import annotations

import logging
import re
from datetime import date

from task_tracker.models import Priority

logger = logging.getLogger(__name__)

DUE_DATE_FORMAT = "YYYY-MM-DD"
_DUE_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def is_valid_title(title: str | None) -> bool:
    return title is not None and bool(title.strip())


def parse_due_date(value: str | None) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` date.

    Returns ``None`` and logs the reason when the value is not a real calendar
    date in that exact shape ("2025-7-20" and "20250720" are rejected).
    Impossible days such as "2025-02-30" are rejected too, not clamped to the
    last day of the month.
    """
    if value is None or not _DUE_DATE_RE.fullmatch(value):
        logger.warning("%s", invalid_date_message(value))
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning("%s", invalid_date_message(value))
        return None


def is_valid_priority(value: str | None) -> bool:
    return value in Priority.labels()


def invalid_date_message(value: str | None) -> str:
    return f"Error: invalid due date '{value}'. Use the {DUE_DATE_FORMAT} format."
