# File: utils/__init__.py
"""Pure Python utilities for taskcadence.

⚠️ UTILS PURITY: NO imports from `taskcadence.const`, engines or helpers.

Submodules:
    - dt_utils: Date parsing, month arithmetic with clamping, argument checks
    - math_utils: Percentage and rounding helpers

Usage:
    from . import dt_utils
    from .math_utils import calculate_percentage
"""

from . import dt_utils, math_utils

__all__ = ["dt_utils", "math_utils"]
