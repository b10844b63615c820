"""taskcadence: recurrence occurrences for recurring tasks.

Expands a recurring task's pattern (daily, weekly, monthly, quarterly,
half-yearly, yearly) into calendar occurrences over a bounded window, with
end-of-month clamping for month-based patterns, plus the caller-side helpers
used to render calendars and completion reports from those occurrences.

Every function is pure: reference dates are explicit arguments and no input
is ever mutated.
"""

from .engines.schedule_engine import (
    InvalidRecurrencePatternError,
    RecurrenceEngine,
    all_occurrences,
    describe_pattern,
    is_occurrence_date,
    iter_occurrences,
    next_occurrence,
    next_occurrences,
    occurrence_count,
    occurrences_in_window,
    validate_pattern,
)
from .engines.statistics_engine import StatisticsEngine
from .engines.task_engine import TaskCycleError, TaskEngine

__all__ = [
    "InvalidRecurrencePatternError",
    "RecurrenceEngine",
    "StatisticsEngine",
    "TaskCycleError",
    "TaskEngine",
    "all_occurrences",
    "describe_pattern",
    "is_occurrence_date",
    "iter_occurrences",
    "next_occurrence",
    "next_occurrences",
    "occurrence_count",
    "occurrences_in_window",
    "validate_pattern",
]
