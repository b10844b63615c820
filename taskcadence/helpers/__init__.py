# File: helpers/__init__.py
"""Caller-side helper functions for taskcadence.

These helpers sit between the pure engines and the application that owns the
recurring task records: window policy, calendar materialization and report
data shaping.

Submodules:
    - calendar_helpers: Calendar windows and entries marked against completion history
    - report_helpers: Per-task completion report data

Usage:
    from . import calendar_helpers
    from .report_helpers import build_task_report
"""

from . import calendar_helpers, report_helpers

__all__ = [
    "calendar_helpers",
    "report_helpers",
]
