"""
Review module.

Heuristic (rule-based) code review producing a markdown report.

Public API:
- review: Render the report for a piece of code
- collect_suggestions, count_lines: Building blocks of the report
- MissingCodeError: Raised for empty or non-text submissions
"""

from .heuristic import review, collect_suggestions, count_lines
from .exceptions import MissingCodeError

__all__ = [
    "review",
    "collect_suggestions",
    "count_lines",
    "MissingCodeError",
]
