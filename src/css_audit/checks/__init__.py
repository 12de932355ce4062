"""Issue checks for CSS rules."""

from ..models import Issue, StyleRule
from .duplicates import check_duplicates
from .important import check_important
from .selectors import check_selectors


def detect_issues(rules: list[StyleRule]) -> list[Issue]:
    """Run all checks, in order: selectors, !important, duplicates."""
    return [
        *check_selectors(rules),
        *check_important(rules),
        *check_duplicates(rules),
    ]


__all__ = [
    "detect_issues",
    "check_selectors",
    "check_important",
    "check_duplicates",
]
