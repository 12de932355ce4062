"""Health score calculation."""

import math

from .models import Issue, IssueKind, Scores, StyleRule, Verdict

DEFAULT_THRESHOLD = 60

WEIGHTS = {
    "specificity": 0.30,
    "duplicates": 0.25,
    "important": 0.25,
    "file_size": 0.20,
}

# (exclusive lower bound in bytes, score), largest first
FILE_SIZE_STEPS = [
    (100_000, 30),
    (50_000, 50),
    (25_000, 70),
    (10_000, 85),
]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def clamp(value: float) -> float:
    return max(0.0, min(100.0, value))


def file_size_score(total_bytes: int) -> int:
    """100 up to 10 KB, then stepping down to 30 past 100 KB."""
    for limit, score in FILE_SIZE_STEPS:
        if total_bytes > limit:
            return score
    return 100


def score(
    rules: list[StyleRule],
    issues: list[Issue],
    total_bytes: int,
    threshold: int = DEFAULT_THRESHOLD,
) -> tuple[Scores, Verdict]:
    """Score a rule set from its issues.

    Args:
        rules: All extracted rules
        issues: Issues detected on those rules
        total_bytes: Combined size of the sources
        threshold: Minimum overall score to pass

    Returns:
        Rounded scores and the pass/fail verdict
    """
    rule_count = max(len(rules), 1)
    decl_count = max(sum(len(r.declarations) for r in rules), 1)

    high_specificity = sum(1 for i in issues if i.kind == IssueKind.SPECIFICITY)
    important = sum(1 for i in issues if i.kind == IssueKind.IMPORTANT)
    # The first occurrence of a declaration is not itself a duplicate
    duplicates = sum(i.occurrences - 1 for i in issues if i.kind == IssueKind.DUPLICATE)

    raw = {
        "specificity": clamp(100 - (high_specificity / rule_count) * 200),
        "duplicates": clamp(100 - (duplicates / decl_count) * 300),
        "important": clamp(100 - (important / decl_count) * 500),
        "file_size": float(file_size_score(total_bytes)),
    }
    overall = round_half_up(sum(raw[name] * weight for name, weight in WEIGHTS.items()))

    scores = Scores(
        overall=overall,
        specificity=round_half_up(raw["specificity"]),
        duplicates=round_half_up(raw["duplicates"]),
        important=round_half_up(raw["important"]),
        file_size=round_half_up(raw["file_size"]),
    )
    return scores, Verdict(overall=overall, threshold=threshold)
