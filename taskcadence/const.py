"""Constants for taskcadence.

This file centralizes recurrence pattern tags, their step sizes and labels,
task and completion status values, period key formats, and the default
horizons used by the calendar and report helpers.
"""

import logging

# Logger
LOGGER = logging.getLogger(__package__)

# ------------------------------------------------------------------------------------------------
# Recurrence Patterns
# ------------------------------------------------------------------------------------------------
FREQUENCY_DAILY = "daily"
FREQUENCY_WEEKLY = "weekly"
FREQUENCY_MONTHLY = "monthly"
FREQUENCY_QUARTERLY = "quarterly"
FREQUENCY_HALF_YEARLY = "half-yearly"
FREQUENCY_YEARLY = "yearly"

FREQUENCY_OPTIONS = (
    FREQUENCY_DAILY,
    FREQUENCY_WEEKLY,
    FREQUENCY_MONTHLY,
    FREQUENCY_QUARTERLY,
    FREQUENCY_HALF_YEARLY,
    FREQUENCY_YEARLY,
)

# Fixed-length patterns advance by whole days
FREQUENCY_DAY_STEPS = {
    FREQUENCY_DAILY: 1,
    FREQUENCY_WEEKLY: 7,
}

# Variable-length patterns advance by whole months (clamped to month end)
FREQUENCY_MONTH_STEPS = {
    FREQUENCY_MONTHLY: 1,
    FREQUENCY_QUARTERLY: 3,
    FREQUENCY_HALF_YEARLY: 6,
    FREQUENCY_YEARLY: 12,
}

FREQUENCY_DESCRIPTIONS = {
    FREQUENCY_DAILY: "Every day",
    FREQUENCY_WEEKLY: "Every week",
    FREQUENCY_MONTHLY: "Every month",
    FREQUENCY_QUARTERLY: "Every 3 months",
    FREQUENCY_HALF_YEARLY: "Every 6 months",
    FREQUENCY_YEARLY: "Every year",
}

# ------------------------------------------------------------------------------------------------
# Calendar Arithmetic
# ------------------------------------------------------------------------------------------------
MONTHS_PER_YEAR = 12
FIRST_MONTH_OF_YEAR = 1
LAST_MONTH_OF_YEAR = 12
LAST_DAY_OF_DECEMBER = 31

# Shortest month length; day-of-month values at or below it never clamp
MIN_DAYS_IN_MONTH = 28

# Month lengths repeat yearly apart from February, and any two consecutive
# Februaries include a 28-day one, so two years of steps see every clamp.
CLAMP_SCAN_MONTHS = 24

# ------------------------------------------------------------------------------------------------
# Recurring Task Fields
# ------------------------------------------------------------------------------------------------
DATA_TASK_ID = "id"
DATA_TASK_TITLE = "title"
DATA_TASK_RECURRENCE_PATTERN = "recurrence_pattern"
DATA_TASK_START_DATE = "start_date"
DATA_TASK_DUE_DATE = "due_date"
DATA_TASK_NEXT_OCCURRENCE = "next_occurrence"
DATA_TASK_END_DATE = "end_date"
DATA_TASK_COMPLETION_HISTORY = "completion_history"
DATA_TASK_IS_PAUSED = "is_paused"
DATA_TASK_STATUS = "status"

DATA_COMPLETION_DATE = "date"

# Task Status
TASK_STATUS_PENDING = "pending"
TASK_STATUS_IN_PROGRESS = "in-progress"
TASK_STATUS_COMPLETED = "completed"

# ------------------------------------------------------------------------------------------------
# Report Completion Matrix
# ------------------------------------------------------------------------------------------------
COMPLETION_STATUS_COMPLETED = "completed"
COMPLETION_STATUS_INCOMPLETE = "incomplete"
COMPLETION_STATUS_FUTURE = "future"

# Period key formats (strftime)
PERIOD_FORMAT_MONTHLY = "%Y-%m"
PERIOD_FORMAT_MONTH_NAME = "%b"

# ------------------------------------------------------------------------------------------------
# Default Horizons
# ------------------------------------------------------------------------------------------------
DEFAULT_CALENDAR_YEARS_BACK = 1
DEFAULT_CALENDAR_YEARS_FORWARD = 1
DEFAULT_REPORT_YEARS_FORWARD = 5

# Upper bound for completion percentages
PERCENTAGE_MAX = 100.0
