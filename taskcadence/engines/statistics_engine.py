"""Statistics Engine - Month bucketing and completion matrices for reports.

This engine centralizes the month-based views that reports build on top of
recurring task occurrences:
- Month key generation ("YYYY-MM")
- Bucketing occurrences by month
- Report month columns for a pattern over a forward horizon
- Per-client completion status and completion matrices

Design Principles:
    - Stateless: operates on passed data structures
    - Explicit time: every "is it in the future" decision takes a reference date
    - Formatting-free: produces data; CSV/PDF/Excel rendering is the caller's job
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from .. import const
from ..utils.dt_utils import add_months, clamp_year, start_of_month
from .schedule_engine import RecurrenceEngine

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from ..type_defs import (
        ClientCompletion,
        ClientId,
        CompletionMatrix,
        MonthKey,
        ReportMonth,
    )


class StatisticsEngine:
    """Stateless helpers for month-based report data.

    Example:
        months = StatisticsEngine.report_months(date(2025, 11, 3), "quarterly", 1)
        matrix = StatisticsEngine.completion_matrix(
            ["client-1", "client-2"], months, completions, date(2025, 11, 3)
        )
    """

    # ────────────────────────────────────────────────────────────────
    # Month Keys
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def month_key(value: date) -> MonthKey:
        """Return the "YYYY-MM" key for the month containing `value`."""
        return value.strftime(const.PERIOD_FORMAT_MONTHLY)

    @staticmethod
    def bucket_by_month(occurrences: Iterable[date]) -> dict[MonthKey, list[date]]:
        """Group occurrences by month, keeping first-seen month order.

        Example:
            >>> StatisticsEngine.bucket_by_month([date(2024, 1, 1), date(2024, 1, 8)])
            {"2024-01": [date(2024, 1, 1), date(2024, 1, 8)]}
        """
        buckets: dict[MonthKey, list[date]] = {}
        for occurrence in occurrences:
            buckets.setdefault(StatisticsEngine.month_key(occurrence), []).append(
                occurrence
            )
        return buckets

    # ────────────────────────────────────────────────────────────────
    # Report Months
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def report_months(
        reference: date,
        pattern: str,
        years_forward: int = const.DEFAULT_REPORT_YEARS_FORWARD,
    ) -> list[ReportMonth]:
        """Build report columns from the reference month forward.

        Months run from the month containing `reference` to December of
        `reference.year + years_forward`, keeping every 1st, 3rd, 6th or 12th
        month for monthly, quarterly, half-yearly and yearly patterns. Daily
        and weekly patterns report every month. The horizon never extends
        past December 9999.

        Args:
            reference: Date whose month is the first column.
            pattern: A FREQUENCY_* tag.
            years_forward: Whole calendar years after the reference year.

        Returns:
            Ordered list of ReportMonth records.
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        step = const.FREQUENCY_MONTH_STEPS.get(pattern, 1)

        first = start_of_month(reference)
        last = date(
            clamp_year(reference.year + years_forward),
            const.LAST_MONTH_OF_YEAR,
            const.LAST_DAY_OF_DECEMBER,
        )

        months: list[ReportMonth] = []
        current = first
        while current <= last:
            months.append(
                {
                    "key": StatisticsEngine.month_key(current),
                    "month_name": current.strftime(const.PERIOD_FORMAT_MONTH_NAME),
                    "year": current.year,
                    "first_day": current,
                }
            )
            try:
                current = add_months(current, step)
            except OverflowError:
                # Horizon ends in the last supported year
                break

        return months

    # ────────────────────────────────────────────────────────────────
    # Completion Status
    # ────────────────────────────────────────────────────────────────

    @staticmethod
    def completion_status(
        completions: Iterable[ClientCompletion],
        client_id: ClientId,
        month: ReportMonth,
        reference: date,
    ) -> str:
        """Return the completion status of one client for one month.

        Returns:
            COMPLETION_STATUS_FUTURE when the month starts after `reference`,
            COMPLETION_STATUS_COMPLETED when a completed record matches the
            client and month, COMPLETION_STATUS_INCOMPLETE otherwise.
        """
        if month["first_day"] > reference:
            return const.COMPLETION_STATUS_FUTURE

        for completion in completions:
            if (
                completion["client_id"] == client_id
                and completion["month_key"] == month["key"]
                and completion["is_completed"]
            ):
                return const.COMPLETION_STATUS_COMPLETED

        return const.COMPLETION_STATUS_INCOMPLETE

    @staticmethod
    def completion_matrix(
        client_ids: Iterable[ClientId],
        months: Sequence[ReportMonth],
        completions: Iterable[ClientCompletion],
        reference: date,
    ) -> CompletionMatrix:
        """Build client × month completion statuses.

        Returns:
            Mapping of client id to an ordered mapping of month key to status.
        """
        completed_keys = {
            (completion["client_id"], completion["month_key"])
            for completion in completions
            if completion["is_completed"]
        }

        matrix: CompletionMatrix = {}
        for client_id in client_ids:
            row: dict[MonthKey, str] = {}
            for month in months:
                if month["first_day"] > reference:
                    row[month["key"]] = const.COMPLETION_STATUS_FUTURE
                elif (client_id, month["key"]) in completed_keys:
                    row[month["key"]] = const.COMPLETION_STATUS_COMPLETED
                else:
                    row[month["key"]] = const.COMPLETION_STATUS_INCOMPLETE
            matrix[client_id] = row
        return matrix

    @staticmethod
    def expected_completions(
        months: Iterable[ReportMonth], client_count: int, reference: date
    ) -> int:
        """Return how many completions are due by `reference`.

        Each client is expected to complete every month that has started.
        """
        if client_count <= 0:
            return 0
        started = sum(1 for month in months if month["first_day"] <= reference)
        return client_count * started
