# File: utils/dt_utils.py
"""Date utilities for taskcadence.

Pure Python calendar functions with no dependency on the rest of the package.
All functions here can be unit tested in isolation.

⚠️ UTILS PURITY: NO imports from `taskcadence.const`, engines or helpers.
   Uses standard library: datetime, calendar, and dateutil.

Functions:
    - check_date_arguments: Reject non-dates and mixed date/datetime inputs
    - days_in_month: Number of days in a given month
    - month_index: Absolute month number for month arithmetic
    - month_distance: Whole calendar months between two dates
    - add_months: Add months with end-of-month clamping
    - with_month_index: Move a date to another month with a fixed day
    - clamp_year: Keep a year within the supported calendar
    - start_of_month: First day of a date's month
    - dt_parse_date: Parse date strings in common formats
    - coerce_date: Normalize store values (str/date/datetime) to a calendar date
"""

from __future__ import annotations

from calendar import monthrange
from datetime import MAXYEAR, MINYEAR, date, datetime
import logging
from typing import TYPE_CHECKING

# Third-party date utilities
from dateutil.relativedelta import relativedelta

if TYPE_CHECKING:
    from datetime import tzinfo

# Module-level logger
_LOGGER = logging.getLogger(__name__)

# ==============================================================================
# Constants (local copies to avoid circular imports)
# ==============================================================================

MONTHS_PER_YEAR = 12

# Fallback formats tried after ISO 8601
DATE_FORMATS = ("%m/%d/%Y", "%d/%m/%Y", "%Y/%m/%d")


# ==============================================================================
# Argument Checks
# ==============================================================================


def check_date_arguments(*values: object) -> None:
    """Ensure all values are dates of one consistent kind.

    Dates and datetimes cannot be ordered against each other, and naive and
    aware datetimes cannot either. Aware datetimes must share one tzinfo so
    that stepping, subtraction and comparison all use wall-clock time.

    Args:
        *values: Values that must all be `date`, all be naive `datetime`, or
            all be aware `datetime` with the same tzinfo.

    Raises:
        TypeError: If a value is not a date, or the kinds are mixed.
    """
    for value in values:
        if not isinstance(value, date):
            raise TypeError(
                f"Expected datetime.date or datetime.datetime, got {type(value).__name__}"
            )

    kinds = {
        (isinstance(value, datetime), getattr(value, "tzinfo", None))
        for value in values
    }
    if len(kinds) > 1:
        raise TypeError(
            "Cannot mix date, naive datetime, aware datetime or timezone arguments"
        )


# ==============================================================================
# Month Arithmetic
# ==============================================================================


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a month.

    Examples:
        days_in_month(2024, 2) → 29
        days_in_month(2025, 2) → 28
    """
    return monthrange(year, month)[1]


def month_index(value: date) -> int:
    """Return an absolute month number (year * 12 + zero-based month)."""
    return value.year * MONTHS_PER_YEAR + value.month - 1


def month_distance(start: date, end: date) -> int:
    """Return the number of calendar months from `start` to `end`.

    Only year and month are considered; the day of month is ignored.
    Negative when `end` is in an earlier month.

    Examples:
        month_distance(date(2024, 1, 31), date(2024, 3, 1)) → 2
        month_distance(date(2024, 12, 1), date(2024, 11, 30)) → -1
    """
    return month_index(end) - month_index(start)


def add_months(value: date, months: int) -> date:
    """Add whole months, clamping to the last day of the target month.

    Jan 31 + 1 month = Feb 29 (leap year) or Feb 28, never Mar 2/3.
    Time-of-day and tzinfo of datetimes are carried through unchanged.

    Args:
        value: Date or datetime to advance.
        months: Number of months to add (may be negative).

    Returns:
        A new value of the same type; the input is never modified.

    Raises:
        OverflowError: If the result would fall outside the supported
            calendar (year 1 to 9999).
    """
    target_year = (month_index(value) + months) // MONTHS_PER_YEAR
    if not 1 <= target_year <= MAXYEAR:
        raise OverflowError("date value out of range")
    return value + relativedelta(months=months)


def with_month_index(value: date, index: int, day: int) -> date:
    """Return `value` moved to absolute month `index` on day `day`.

    The caller is responsible for `day` being valid in the target month.

    Raises:
        OverflowError: If the target month is outside year 1 to 9999.
    """
    year, zero_month = divmod(index, MONTHS_PER_YEAR)
    if not 1 <= year <= MAXYEAR:
        raise OverflowError("date value out of range")
    return value.replace(year=year, month=zero_month + 1, day=day)


def clamp_year(year: int) -> int:
    """Return `year` limited to the supported calendar (MINYEAR to MAXYEAR)."""
    return max(MINYEAR, min(year, MAXYEAR))


def start_of_month(value: date) -> date:
    """Return the first calendar day of the month containing `value`."""
    return date(value.year, value.month, 1)


# ==============================================================================
# Parsing
# ==============================================================================


def dt_parse_date(date_str: str | None) -> date | None:
    """Safely parse a date string into a `datetime.date`.

    Accepts formats:
    - "2025-04-07" (ISO format)
    - "2025-04-07T09:30:00+02:00" (ISO datetime, date part kept)
    - "04/07/2025" (US format)
    - "07/04/2025" (European format - attempted if US fails)

    Args:
        date_str: Date string to parse, or None

    Returns:
        datetime.date or None if parsing fails.
    """
    if not date_str or not isinstance(date_str, str):
        return None

    text = date_str.strip()

    # Try ISO format first (most common)
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass

    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        pass

    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt).date()
        except ValueError:
            continue

    _LOGGER.debug("Unparseable date string: %s", date_str)
    return None


def coerce_date(
    value: str | date | datetime | None, tz: tzinfo | None = None
) -> date | None:
    """Normalize a value read from a document store to a calendar date.

    Args:
        value: ISO/common-format string, date or datetime, or None.
        tz: Timezone in which aware datetimes are read. When omitted, an aware
            datetime keeps its own offset.

    Returns:
        The calendar date, or None when the value is empty or unparseable.

    Example:
        coerce_date("2024-03-01T23:30:00+00:00", ZoneInfo("Asia/Tokyo"))
        → datetime.date(2024, 3, 2)
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        if tz is not None and value.tzinfo is not None:
            value = value.astimezone(tz)
        return value.date()

    if isinstance(value, date):
        return value

    if isinstance(value, str):
        if tz is not None:
            try:
                parsed = datetime.fromisoformat(value.strip())
            except ValueError:
                pass
            else:
                return coerce_date(parsed, tz)
        return dt_parse_date(value)

    _LOGGER.debug("Unsupported date value type: %s", type(value).__name__)
    return None
