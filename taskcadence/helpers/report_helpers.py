"""Reporting helper functions for taskcadence.

This module provides read-only data shaping for recurring task reports:
month columns, the client × month completion matrix, and completion rates.
Rendering the result as CSV, PDF or a spreadsheet is left to the caller.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .. import const
from ..engines.schedule_engine import RecurrenceEngine
from ..engines.statistics_engine import StatisticsEngine
from ..utils.math_utils import calculate_percentage, clamp

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence
    from datetime import date

    from ..type_defs import (
        ClientCompletion,
        ClientId,
        RecurringTaskData,
        ReportMonth,
        TaskReport,
    )


def report_completion_rate(
    months: Sequence[ReportMonth],
    client_ids: Sequence[ClientId],
    completions: Iterable[ClientCompletion],
    reference: date,
) -> float:
    """Return completed cells over completions due by `reference`, in percent.

    A cell is one (client, month) pair, counted once however many completed
    records it has. Only clients in `client_ids` and months in `months` that
    have started count, the same cells the completion matrix marks completed.

    Returns:
        Percentage rounded to two places, 0.0 when nothing is due yet, and
        never above 100.0.
    """
    assigned = set(client_ids)
    expected = StatisticsEngine.expected_completions(months, len(assigned), reference)
    if expected == 0:
        return 0.0

    started_keys = {month["key"] for month in months if month["first_day"] <= reference}
    completed_cells = {
        (completion["client_id"], completion["month_key"])
        for completion in completions
        if completion["is_completed"]
        and completion["client_id"] in assigned
        and completion["month_key"] in started_keys
    }
    return clamp(
        calculate_percentage(len(completed_cells), expected), 0.0, const.PERCENTAGE_MAX
    )


def build_task_report(
    task: RecurringTaskData,
    client_ids: Sequence[ClientId],
    completions: Sequence[ClientCompletion],
    reference: date,
    years_forward: int = const.DEFAULT_REPORT_YEARS_FORWARD,
) -> TaskReport:
    """Assemble the data behind a per-task completion report.

    Args:
        task: The recurring task being reported on.
        client_ids: Clients the task is assigned to, in display order.
        completions: Per-client monthly completion records for this task.
        reference: "Today" for the report; months starting later are future.
        years_forward: Report horizon in whole years after the reference year.

    Raises:
        InvalidRecurrencePatternError: The task's pattern is unknown.
    """
    pattern = RecurrenceEngine.validate_pattern(
        task.get(const.DATA_TASK_RECURRENCE_PATTERN)
    )
    months = StatisticsEngine.report_months(reference, pattern, years_forward)
    const.LOGGER.debug(
        "Building report for task %s: %d clients, %d months",
        task.get(const.DATA_TASK_ID),
        len(client_ids),
        len(months),
    )

    return {
        "task_id": task.get(const.DATA_TASK_ID, ""),
        "title": task.get(const.DATA_TASK_TITLE, ""),
        "recurrence_pattern": pattern,
        "recurrence_description": RecurrenceEngine.describe_pattern(pattern),
        "months": months,
        "matrix": StatisticsEngine.completion_matrix(
            client_ids, months, completions, reference
        ),
        "expected_completions": StatisticsEngine.expected_completions(
            months, len(set(client_ids)), reference
        ),
        "completion_rate": report_completion_rate(
            months, client_ids, completions, reference
        ),
    }
