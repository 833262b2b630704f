from __future__ import annotations

import logging
from datetime import date

import pytest

from task_tracker.validation import is_valid_priority, is_valid_title, parse_due_date


@pytest.mark.parametrize("title", [None, "", "   ", "\t\n"])
def test_blank_titles_are_invalid(title: str | None) -> None:
    assert is_valid_title(title) is False


def test_title_with_text_is_valid() -> None:
    assert is_valid_title("  Buy milk ") is True


def test_parse_due_date() -> None:
    assert parse_due_date("2025-07-20") == date(2025, 7, 20)


@pytest.mark.parametrize("value", ["20-07-2025", "2025-7-20", "20250720", "2025-02-30", "2025-07-20T10:00", "", None])
def test_parse_due_date_rejects_bad_values(value: str | None, caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING):
        assert parse_due_date(value) is None
    assert "YYYY-MM-DD" in caplog.text


def test_priority_labels_are_case_sensitive() -> None:
    assert is_valid_priority("Low")
    assert is_valid_priority("Medium")
    assert is_valid_priority("High")
    assert not is_valid_priority("high")
    assert not is_valid_priority("Urgent")
    assert not is_valid_priority(None)
