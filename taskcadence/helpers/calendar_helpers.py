"""Calendar helpers for taskcadence.

Caller-side policy around the recurrence engine: choosing a bounded window,
narrowing it to a task's own lifetime, and materializing calendar entries
marked against each task's completion history.

Window policy lives here, not in the engine. `calendar_window` is one such
policy (whole years around a reference date); callers with other horizons
build their own (start, end) tuple.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .. import const
from ..engines.schedule_engine import InvalidRecurrencePatternError, RecurrenceEngine
from ..utils.dt_utils import clamp_year, coerce_date

if TYPE_CHECKING:
    from collections.abc import Iterable
    from datetime import tzinfo

    from ..type_defs import CalendarEntry, DateWindow, RecurringTaskData


# ==============================================================================
# Windows
# ==============================================================================


def calendar_window(
    reference: date,
    years_back: int = const.DEFAULT_CALENDAR_YEARS_BACK,
    years_forward: int = const.DEFAULT_CALENDAR_YEARS_FORWARD,
) -> DateWindow:
    """Return whole calendar years around `reference`.

    Args:
        reference: The date the calendar is viewed from. Required; the wall
            clock is never consulted.
        years_back: Whole years before the reference year.
        years_forward: Whole years after the reference year.

    Returns:
        (Jan 1 of reference.year - years_back, Dec 31 of reference.year + years_forward),
        with both years kept within the supported calendar (1 to 9999).

    Example:
        calendar_window(date(2025, 6, 15)) → (date(2024, 1, 1), date(2026, 12, 31))
    """
    start = date(
        clamp_year(reference.year - years_back), const.FIRST_MONTH_OF_YEAR, 1
    )
    end = date(
        clamp_year(reference.year + years_forward),
        const.LAST_MONTH_OF_YEAR,
        const.LAST_DAY_OF_DECEMBER,
    )
    return start, end


def effective_window(
    anchor: date, window: DateWindow, task_end: date | None = None
) -> DateWindow | None:
    """Narrow `window` to the part a task can occur in.

    Args:
        anchor: First date the task can occur on.
        window: The caller's (start, end) horizon.
        task_end: Optional last date of the task.

    Returns:
        The overlapping (start, end), or None when the task lies entirely
        outside the window.
    """
    window_start, window_end = window
    start = max(anchor, window_start)
    end = window_end if task_end is None else min(task_end, window_end)
    if start > end:
        return None
    return start, end


# ==============================================================================
# Calendar Entries
# ==============================================================================


def completed_days(
    task: RecurringTaskData, tz: tzinfo | None = None
) -> set[date]:
    """Return the calendar days on which a task has a completion record.

    Records whose date cannot be read are skipped.
    """
    days: set[date] = set()
    for record in task.get(const.DATA_TASK_COMPLETION_HISTORY, []):
        day = coerce_date(record.get(const.DATA_COMPLETION_DATE), tz)
        if day is None:
            const.LOGGER.debug(
                "Skipping unreadable completion date %r on task %s",
                record.get(const.DATA_COMPLETION_DATE),
                task.get(const.DATA_TASK_ID),
            )
            continue
        days.add(day)
    return days


def build_task_entries(
    task: RecurringTaskData, window: DateWindow, tz: tzinfo | None = None
) -> list[CalendarEntry]:
    """Materialize one task's occurrences inside `window`.

    The series stays aligned to the task's due date; the window only decides
    which occurrences are produced.

    Raises:
        InvalidRecurrencePatternError: The task's pattern is unknown.
    """
    task_id = task.get(const.DATA_TASK_ID, "")
    pattern = RecurrenceEngine.validate_pattern(
        task.get(const.DATA_TASK_RECURRENCE_PATTERN)
    )

    anchor = coerce_date(task.get(const.DATA_TASK_DUE_DATE), tz)
    if anchor is None:
        const.LOGGER.warning("Task %s has no readable due date, skipping", task_id)
        return []

    task_end = coerce_date(task.get(const.DATA_TASK_END_DATE), tz)
    bounds = effective_window(anchor, window, task_end)
    if bounds is None:
        const.LOGGER.debug("Task %s is outside the calendar window", task_id)
        return []

    done = completed_days(task, tz)
    status = task.get(const.DATA_TASK_STATUS, const.TASK_STATUS_PENDING)
    entries: list[CalendarEntry] = []
    for occurrence in RecurrenceEngine.occurrences_in_window(anchor, bounds, pattern):
        is_completed = occurrence in done
        entries.append(
            {
                "id": f"{task_id}-{occurrence.isoformat()}",
                "task_id": task_id,
                "title": task.get(const.DATA_TASK_TITLE, ""),
                "due_date": occurrence,
                "recurrence_pattern": pattern,
                "status": const.TASK_STATUS_COMPLETED if is_completed else status,
                "is_completed": is_completed,
            }
        )
    return entries


def build_calendar_entries(
    tasks: Iterable[RecurringTaskData],
    window: DateWindow,
    tz: tzinfo | None = None,
) -> list[CalendarEntry]:
    """Materialize calendar entries for every active recurring task.

    Paused tasks are skipped. A task with an unknown pattern is logged and
    skipped so the rest of the calendar still renders.

    Args:
        tasks: Recurring task records.
        window: Inclusive (start, end) calendar horizon, e.g. from
            `calendar_window`.
        tz: Timezone in which stored datetimes are read as calendar days.

    Returns:
        Entries ordered by task, then by date.
    """
    entries: list[CalendarEntry] = []
    for task in tasks:
        if task.get(const.DATA_TASK_IS_PAUSED):
            continue
        try:
            entries.extend(build_task_entries(task, window, tz))
        except InvalidRecurrencePatternError as err:
            const.LOGGER.warning(
                "Cannot generate occurrences for task %s: %s",
                task.get(const.DATA_TASK_ID),
                err,
            )
    return entries
