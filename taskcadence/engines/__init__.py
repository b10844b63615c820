"""Engine modules for taskcadence.

Contains specialized computation engines:
- schedule_engine: Recurrence calculation (next occurrence, window expansion, counts)
- task_engine: Recurring task cycle transitions and completion rates
- statistics_engine: Month bucketing and report completion matrices
"""

# Use relative imports within package to avoid mypy module resolution issues
from .schedule_engine import InvalidRecurrencePatternError, RecurrenceEngine
from .statistics_engine import StatisticsEngine
from .task_engine import TaskCycleError, TaskEngine

__all__ = [
    "InvalidRecurrencePatternError",
    "RecurrenceEngine",
    "StatisticsEngine",
    "TaskCycleError",
    "TaskEngine",
]
