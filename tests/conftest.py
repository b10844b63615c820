"""Shared fixtures for taskcadence tests."""

# pylint: disable=redefined-outer-name  # Pytest fixtures shadow names

from __future__ import annotations

from collections.abc import Callable
from datetime import date
from typing import Any
from zoneinfo import ZoneInfo

import pytest

from taskcadence import const
from taskcadence.type_defs import RecurringTaskData


@pytest.fixture
def tokyo_tz() -> ZoneInfo:
    """Return a timezone well ahead of UTC (no DST)."""
    return ZoneInfo("Asia/Tokyo")


@pytest.fixture
def make_task() -> Callable[..., RecurringTaskData]:
    """Return a factory for recurring task records.

    Defaults describe an active weekly task due on Monday 2024-01-01 with no
    completions and no end date; keyword arguments override any field.
    """

    def _make_task(**overrides: Any) -> RecurringTaskData:
        task: dict[str, Any] = {
            const.DATA_TASK_ID: "task-1",
            const.DATA_TASK_TITLE: "File GST return",
            const.DATA_TASK_RECURRENCE_PATTERN: const.FREQUENCY_WEEKLY,
            const.DATA_TASK_START_DATE: date(2024, 1, 1),
            const.DATA_TASK_DUE_DATE: date(2024, 1, 1),
            const.DATA_TASK_NEXT_OCCURRENCE: date(2024, 1, 1),
            const.DATA_TASK_COMPLETION_HISTORY: [],
            const.DATA_TASK_IS_PAUSED: False,
            const.DATA_TASK_STATUS: const.TASK_STATUS_PENDING,
        }
        task.update(overrides)
        return task  # type: ignore[return-value]

    return _make_task
