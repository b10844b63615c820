"""Task Engine - Pure logic for recurring task cycle transitions.

This engine provides stateless, pure Python functions for:
- Completing the current cycle of a recurring task and scheduling the next
- Counting elapsed cycles between two dates
- Completion rate calculations

ARCHITECTURE: This is a pure logic engine. All functions are static methods
that operate on passed-in task records and return new records. Reading and
writing the document store belongs to the caller.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING, cast

from .. import const
from ..utils.dt_utils import coerce_date
from ..utils.math_utils import calculate_percentage, clamp
from .schedule_engine import RecurrenceEngine

if TYPE_CHECKING:
    from ..type_defs import CompletionRecord, DateLike, RecurringTaskData


class TaskCycleError(Exception):
    """Raised when a recurring task cannot move to its next cycle.

    Attributes:
        task_id: The task that was being advanced
        reason: Why the transition was refused
    """

    def __init__(self, task_id: str, reason: str) -> None:
        """Initialize TaskCycleError.

        Args:
            task_id: The task that was being advanced
            reason: Why the transition was refused
        """
        self.task_id = task_id
        self.reason = reason
        super().__init__(f"Cannot complete cycle for task {task_id}: {reason}")


class TaskEngine:
    """Pure logic engine for recurring task cycles.

    All methods are static - no instance state.
    """

    @staticmethod
    def complete_cycle(
        task: RecurringTaskData,
        completed_by: str,
        completed_at: DateLike,
    ) -> RecurringTaskData:
        """Record a completed cycle and schedule the next occurrence.

        Args:
            task: The recurring task (not modified).
            completed_by: Who completed the cycle.
            completed_at: When the cycle was completed.

        Returns:
            A new task record with the completion appended. If the advanced
            occurrence falls after the task's end date the task is marked
            completed and `next_occurrence` is left as is; otherwise
            `next_occurrence` moves one step and the status resets to pending.
            A stored datetime stays a datetime with its time of day; the end
            date is compared by calendar day.

        Raises:
            TaskCycleError: The task is already completed, or its
                next occurrence date is missing or unreadable.
            InvalidRecurrencePatternError: The task's pattern is unknown.
        """
        task_id = task.get(const.DATA_TASK_ID, "")
        if task.get(const.DATA_TASK_STATUS) == const.TASK_STATUS_COMPLETED:
            raise TaskCycleError(task_id, "task is already completed")

        pattern = RecurrenceEngine.validate_pattern(
            task.get(const.DATA_TASK_RECURRENCE_PATTERN)
        )
        stored = task.get(const.DATA_TASK_NEXT_OCCURRENCE)
        # Stored date/datetime values keep their type and time of day
        current = stored if isinstance(stored, date) else coerce_date(stored)
        if current is None:
            raise TaskCycleError(task_id, "next occurrence date is missing")

        record: CompletionRecord = {
            "date": completed_at,
            "completed_by": completed_by,
        }
        updated = dict(task)
        updated[const.DATA_TASK_COMPLETION_HISTORY] = [
            *task.get(const.DATA_TASK_COMPLETION_HISTORY, []),
            record,
        ]

        upcoming = RecurrenceEngine.next_occurrence(current, pattern)
        end_date = coerce_date(task.get(const.DATA_TASK_END_DATE))

        if end_date is not None and coerce_date(upcoming) > end_date:
            const.LOGGER.debug(
                "TaskEngine: Task %s finished, next occurrence %s is after end %s",
                task_id,
                upcoming,
                end_date,
            )
            updated[const.DATA_TASK_STATUS] = const.TASK_STATUS_COMPLETED
        else:
            updated[const.DATA_TASK_NEXT_OCCURRENCE] = upcoming
            updated[const.DATA_TASK_STATUS] = const.TASK_STATUS_PENDING

        return cast("RecurringTaskData", updated)

    @staticmethod
    def total_cycles(start: date, current: date, pattern: str) -> int:
        """Count cycle boundaries passed from `start` up to `current`.

        A series started on Jan 15 whose current occurrence is Apr 15 has
        passed three monthly cycles.

        Returns:
            Number of cycles, 0 when `current` is not after `start`.
        """
        count = RecurrenceEngine.occurrence_count(start, current, pattern)
        return max(0, count - 1)

    @staticmethod
    def completion_rate(task: RecurringTaskData) -> float:
        """Return the share of elapsed cycles that were completed, in percent.

        Elapsed cycles run from the task's start date to its next occurrence.

        Returns:
            Percentage rounded to two places, 0.0 when no cycle has elapsed
            and never above 100.0.
        """
        start = coerce_date(task.get(const.DATA_TASK_START_DATE))
        current = coerce_date(task.get(const.DATA_TASK_NEXT_OCCURRENCE))
        if start is None or current is None:
            return 0.0

        cycles = TaskEngine.total_cycles(
            start, current, task.get(const.DATA_TASK_RECURRENCE_PATTERN)
        )
        if cycles == 0:
            return 0.0

        completed = len(task.get(const.DATA_TASK_COMPLETION_HISTORY, []))
        return clamp(
            calculate_percentage(completed, cycles), 0.0, const.PERCENTAGE_MAX
        )
