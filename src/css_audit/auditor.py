"""Main auditor that runs all checks."""

from typing import Iterable

from .checks import detect_issues
from .errors import InputNotFoundError
from .models import AuditReport, FileStats, StyleRule, StyleSource, Totals
from .parser import extract_rules
from .scoring import DEFAULT_THRESHOLD, score


def count_selectors(rules: list[StyleRule]) -> int:
    """Count selectors, each comma-separated alternative counting once."""
    return sum(len(r.selector.split(",")) for r in rules)


def audit(
    sources: Iterable[tuple[str, str]],
    threshold: int = DEFAULT_THRESHOLD,
) -> AuditReport:
    """Run a complete CSS audit over named stylesheets.

    Args:
        sources: (name, content) pairs, e.g. StyleSource values
        threshold: Minimum overall score to pass

    Returns:
        AuditReport with statistics, issues, and scores

    Raises:
        InputNotFoundError: if no sources were given
    """
    sources = [StyleSource(*s) for s in sources]
    if not sources:
        raise InputNotFoundError("No CSS files found")

    all_rules: list[StyleRule] = []
    files: list[FileStats] = []

    for name, content in sources:
        rules = extract_rules(content, name)
        all_rules.extend(rules)
        files.append(FileStats(
            name=name,
            size=len(content.encode("utf-8")),
            rules=len(rules),
            selectors=count_selectors(rules),
        ))

    totals = Totals(
        size=sum(f.size for f in files),
        rules=len(all_rules),
        selectors=sum(f.selectors for f in files),
    )

    issues = detect_issues(all_rules)
    scores, verdict = score(all_rules, issues, totals.size, threshold)

    return AuditReport(
        files=tuple(files),
        totals=totals,
        scores=scores,
        verdict=verdict,
        issues=tuple(issues),
    )
