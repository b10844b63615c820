"""Type definitions for taskcadence data structures.

TypedDict is used for records with keys fixed at design time (recurring
tasks, completion records, calendar entries, report months). Lookups keyed at
runtime (month keys, client ids) use plain ``dict[str, ...]`` aliases.

IMPORTANT: This file must NOT import from engines/ or helpers/ to avoid
circular dependencies. Only import from typing machinery and the standard
library.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import NotRequired, TypedDict

# =============================================================================
# Scalar Aliases
# =============================================================================

TaskId = str
ClientId = str
MonthKey = str  # "YYYY-MM"

# Values accepted where a calendar date is read from an external store
DateLike = date | datetime | str

# Inclusive [start, end] range of calendar dates
DateWindow = tuple[date, date]


# =============================================================================
# Recurring Tasks
# =============================================================================


class CompletionRecord(TypedDict):
    """One completed cycle of a recurring task."""

    date: DateLike
    completed_by: str


class RecurringTaskData(TypedDict):
    """A recurring task as read from the document store.

    Only the fields the recurrence helpers read are described here; the store
    may carry more (priority, contact ids, team id, ...), and they are passed
    through untouched.
    """

    id: TaskId
    title: str
    recurrence_pattern: str  # FREQUENCY_* constant from const.py
    start_date: DateLike
    due_date: DateLike
    next_occurrence: DateLike
    end_date: NotRequired[DateLike | None]
    completion_history: list[CompletionRecord]
    is_paused: bool
    status: str  # TASK_STATUS_* constant from const.py


class CalendarEntry(TypedDict):
    """A single materialised occurrence of a recurring task."""

    id: str  # "<task id>-<iso date>"
    task_id: TaskId
    title: str
    due_date: date
    recurrence_pattern: str
    status: str
    is_completed: bool


# =============================================================================
# Reports
# =============================================================================


class ClientCompletion(TypedDict):
    """Per-client completion flag for one month of a recurring task."""

    client_id: ClientId
    month_key: MonthKey
    is_completed: bool


class ReportMonth(TypedDict):
    """A month column in a completion report."""

    key: MonthKey
    month_name: str  # Abbreviated month name, e.g. "Jan"
    year: int
    first_day: date


# Completion matrix: client id -> month key -> COMPLETION_STATUS_* value
CompletionMatrix = dict[ClientId, dict[MonthKey, str]]


class TaskReport(TypedDict):
    """Data behind a per-task completion report (formatting is the caller's)."""

    task_id: TaskId
    title: str
    recurrence_pattern: str
    recurrence_description: str
    months: list[ReportMonth]
    matrix: CompletionMatrix
    expected_completions: int
    completion_rate: float  # Percent, two decimal places
