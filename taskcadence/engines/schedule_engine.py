"""Schedule Engine for taskcadence.

Expands a recurring task's pattern into concrete calendar occurrences:
- `timedelta` steps for fixed-length patterns (DAILY, WEEKLY)
- `dateutil.relativedelta` for month-based patterns with clamping
  (Jan 31 + 1 month = Feb 29/28, never rolling into March)

Clamping is applied step by step from the current occurrence, so a series
seeded on the 31st drifts downward and stays there:
Jan 31 → Feb 29 → Mar 29 → Apr 29 ...

ARCHITECTURE: This is a pure logic engine. All functions are static methods
that operate on passed-in values; nothing reads the wall clock and no input
is ever mutated.

IMPORTANT: This module must NOT import from helpers/ to avoid circular imports.
Only import from const.py, type_defs.py, utils/, and standard libraries.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, timedelta
from typing import TYPE_CHECKING, ClassVar

from .. import const
from ..utils.dt_utils import (
    add_months,
    check_date_arguments,
    days_in_month,
    month_distance,
    month_index,
    with_month_index,
)

if TYPE_CHECKING:
    from ..type_defs import DateWindow


class InvalidRecurrencePatternError(ValueError):
    """Raised when a recurrence pattern tag is not recognized.

    Attributes:
        pattern: The rejected value, as supplied by the caller
    """

    def __init__(self, pattern: object) -> None:
        """Initialize InvalidRecurrencePatternError.

        Args:
            pattern: The rejected value, as supplied by the caller
        """
        self.pattern = pattern
        super().__init__(
            f"Invalid recurrence pattern: {pattern!r} "
            f"(expected one of {', '.join(const.FREQUENCY_OPTIONS)})"
        )


class RecurrenceEngine:
    """Pure recurrence calculator for recurring tasks.

    All methods are static - no instance state. Every method accepts either
    `datetime.date` values or `datetime.datetime` values (not a mix); a
    datetime seed keeps its time of day on every occurrence.

    Patterns:
        - daily / weekly: +1 / +7 calendar days
        - monthly / quarterly / half-yearly / yearly: +1 / +3 / +6 / +12
          calendar months, clamped to the last day of the target month
    """

    DAY_STEPS: ClassVar[dict[str, int]] = const.FREQUENCY_DAY_STEPS
    MONTH_STEPS: ClassVar[dict[str, int]] = const.FREQUENCY_MONTH_STEPS

    # =========================================================================
    # Pattern Validation
    # =========================================================================

    @staticmethod
    def validate_pattern(pattern: object) -> str:
        """Return the canonical pattern tag, or fail fast.

        Case, surrounding whitespace, and "_" vs "-" are normalized, so
        "Half_Yearly" is accepted as "half-yearly".

        Raises:
            InvalidRecurrencePatternError: For anything that is not a known tag.
        """
        if not isinstance(pattern, str):
            raise InvalidRecurrencePatternError(pattern)

        normalized = pattern.strip().lower().replace("_", "-")
        if normalized not in const.FREQUENCY_OPTIONS:
            raise InvalidRecurrencePatternError(pattern)
        return normalized

    @staticmethod
    def describe_pattern(pattern: str) -> str:
        """Return a human-readable description, e.g. "Every 3 months"."""
        return const.FREQUENCY_DESCRIPTIONS[RecurrenceEngine.validate_pattern(pattern)]

    # =========================================================================
    # Single-step Advancement
    # =========================================================================

    @staticmethod
    def next_occurrence(current: date, pattern: str) -> date:
        """Advance `current` by exactly one recurrence unit.

        Args:
            current: The current occurrence (never modified).
            pattern: A FREQUENCY_* tag.

        Returns:
            A new value strictly greater than `current`.

        Raises:
            InvalidRecurrencePatternError: Unknown pattern.
            TypeError: `current` is not a date.
            OverflowError: The next occurrence is past `date.max`.

        Examples:
            next_occurrence(date(2024, 1, 31), "monthly") → date(2024, 2, 29)
            next_occurrence(date(2024, 11, 30), "quarterly") → date(2025, 2, 28)
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        check_date_arguments(current)
        return RecurrenceEngine._advance(current, pattern)

    # =========================================================================
    # Window Expansion
    # =========================================================================

    @staticmethod
    def iter_occurrences(start: date, end: date, pattern: str) -> Iterator[date]:
        """Iterate occurrences from `start` up to and including `end`.

        Arguments are validated before the iterator is returned, so a bad call
        fails immediately rather than on first use. The iterator itself is
        single-pass.

        Returns:
            Iterator of strictly increasing dates, empty when start > end.
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        check_date_arguments(start, end)
        return RecurrenceEngine._generate(start, end, pattern)

    @staticmethod
    def all_occurrences(start: date, end: date, pattern: str) -> list[date]:
        """Return every occurrence from `start` up to and including `end`.

        Examples:
            all_occurrences(date(2024, 1, 1), date(2024, 1, 29), "weekly")
            → [Jan 1, Jan 8, Jan 15, Jan 22, Jan 29]
        """
        return list(RecurrenceEngine.iter_occurrences(start, end, pattern))

    @staticmethod
    def next_occurrences(start: date, pattern: str, count: int) -> list[date]:
        """Return the first `count` occurrences beginning at `start`.

        Returns:
            List of `count` dates (`start` included), empty when count <= 0.

        Raises:
            OverflowError: The series runs past `date.max` before `count`.
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        check_date_arguments(start)

        occurrences: list[date] = []
        current = start
        for index in range(count):
            if index:
                current = RecurrenceEngine._advance(current, pattern)
            occurrences.append(current)
        return occurrences

    @staticmethod
    def occurrences_in_window(
        anchor: date, window: DateWindow, pattern: str
    ) -> list[date]:
        """Return the occurrences of the series seeded at `anchor` inside `window`.

        Unlike `all_occurrences`, which starts counting at the window start,
        this keeps the series aligned to `anchor` (same weekday, same clamped
        day of month) however far before the window it lies.

        Args:
            anchor: Date the series is seeded at (e.g. a task's due date).
            window: Inclusive (start, end) range to materialize.
            pattern: A FREQUENCY_* tag.
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        window_start, window_end = window
        check_date_arguments(anchor, window_start, window_end)

        if window_start > window_end or anchor > window_end:
            return []

        try:
            first = RecurrenceEngine._first_on_or_after(anchor, window_start, pattern)
        except OverflowError:
            # Series leaves the calendar before reaching the window
            return []
        return list(RecurrenceEngine._generate(first, window_end, pattern))

    # =========================================================================
    # Closed-form Queries
    # =========================================================================

    @staticmethod
    def occurrence_count(start: date, end: date, pattern: str) -> int:
        """Count occurrences in [start, end] without materializing them.

        Always equal to `len(all_occurrences(start, end, pattern))`.

        Returns:
            Number of occurrences, 0 when start > end.
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        check_date_arguments(start, end)

        if start > end:
            return 0

        if pattern in RecurrenceEngine.DAY_STEPS:
            step = timedelta(days=RecurrenceEngine.DAY_STEPS[pattern])
            return (end - start) // step + 1

        step_months = RecurrenceEngine.MONTH_STEPS[pattern]
        steps, remainder = divmod(month_distance(start, end), step_months)
        if remainder:
            # Last occurrence lands in a month before end's month
            return steps + 1

        last = RecurrenceEngine._occurrence_at(start, steps, step_months)
        return steps + 1 if last <= end else steps

    @staticmethod
    def is_occurrence_date(value: date, anchor: date, pattern: str) -> bool:
        """Return whether `value` belongs to the series seeded at `anchor`.

        Month-based patterns use the same clamping as `next_occurrence`, so
        for a series seeded on Jan 31, Feb 29 and Mar 29 are occurrences but
        Mar 31 is not.
        """
        pattern = RecurrenceEngine.validate_pattern(pattern)
        check_date_arguments(value, anchor)

        if value < anchor:
            return False

        if pattern in RecurrenceEngine.DAY_STEPS:
            step = timedelta(days=RecurrenceEngine.DAY_STEPS[pattern])
            return (value - anchor) % step == timedelta(0)

        step_months = RecurrenceEngine.MONTH_STEPS[pattern]
        steps, remainder = divmod(month_distance(anchor, value), step_months)
        if remainder:
            return False
        return value == RecurrenceEngine._occurrence_at(anchor, steps, step_months)

    # =========================================================================
    # Private helpers
    # =========================================================================

    @staticmethod
    def _advance(current: date, pattern: str) -> date:
        """Advance one unit; `pattern` must already be canonical."""
        if pattern in RecurrenceEngine.DAY_STEPS:
            return current + timedelta(days=RecurrenceEngine.DAY_STEPS[pattern])
        return add_months(current, RecurrenceEngine.MONTH_STEPS[pattern])

    @staticmethod
    def _generate(current: date, end: date, pattern: str) -> Iterator[date]:
        """Yield `current` and its successors while they do not exceed `end`."""
        while current <= end:
            yield current
            try:
                current = RecurrenceEngine._advance(current, pattern)
            except OverflowError:
                # Calendar exhausted before reaching end
                return

    @staticmethod
    def _clamped_day(anchor: date, steps: int, step_months: int) -> int:
        """Day of month of the `steps`-th occurrence after `anchor`.

        Iterated clamping keeps the minimum of the anchor day and the lengths
        of every month visited. Month lengths repeat yearly except February,
        so scanning CLAMP_SCAN_MONTHS worth of steps finds that minimum.
        """
        day = anchor.day
        if day <= const.MIN_DAYS_IN_MONTH:
            return day

        base = month_index(anchor)
        horizon = min(steps, const.CLAMP_SCAN_MONTHS // step_months)
        for step in range(1, horizon + 1):
            year, zero_month = divmod(base + step * step_months, const.MONTHS_PER_YEAR)
            day = min(day, days_in_month(year, zero_month + 1))
            if day <= const.MIN_DAYS_IN_MONTH:
                break
        return day

    @staticmethod
    def _occurrence_at(anchor: date, steps: int, step_months: int) -> date:
        """Return the `steps`-th occurrence of a month-based series."""
        day = RecurrenceEngine._clamped_day(anchor, steps, step_months)
        return with_month_index(anchor, month_index(anchor) + steps * step_months, day)

    @staticmethod
    def _first_on_or_after(anchor: date, value: date, pattern: str) -> date:
        """Return the first occurrence of the series at or after `value`."""
        if value <= anchor:
            return anchor

        if pattern in RecurrenceEngine.DAY_STEPS:
            step = timedelta(days=RecurrenceEngine.DAY_STEPS[pattern])
            steps = -((anchor - value) // step)  # ceiling division
            return anchor + steps * step

        step_months = RecurrenceEngine.MONTH_STEPS[pattern]
        steps = month_distance(anchor, value) // step_months
        candidate = RecurrenceEngine._occurrence_at(anchor, steps, step_months)
        if candidate < value:
            candidate = RecurrenceEngine._occurrence_at(anchor, steps + 1, step_months)
        return candidate


# =============================================================================
# Module-level convenience functions
# =============================================================================

validate_pattern = RecurrenceEngine.validate_pattern
describe_pattern = RecurrenceEngine.describe_pattern
next_occurrence = RecurrenceEngine.next_occurrence
iter_occurrences = RecurrenceEngine.iter_occurrences
all_occurrences = RecurrenceEngine.all_occurrences
next_occurrences = RecurrenceEngine.next_occurrences
occurrences_in_window = RecurrenceEngine.occurrences_in_window
occurrence_count = RecurrenceEngine.occurrence_count
is_occurrence_date = RecurrenceEngine.is_occurrence_date
