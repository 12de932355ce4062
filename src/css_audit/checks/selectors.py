"""Selector checks: specificity, overqualification, universal, nesting."""

import re
from functools import partial

from ..models import Issue, IssueKind, Severity, StyleRule
from ..specificity import specificity_of

OVERQUALIFIED = re.compile(r"^[a-z]+[.#]", re.IGNORECASE)
UNIVERSAL_OPERAND = re.compile(r"\s\*\s")
COMBINATORS = re.compile(r"[\s>+~]+")

MAX_NESTING = 4


def nesting_depth(selector: str) -> int:
    """Number of compound selectors joined by combinators."""
    return len([p for p in COMBINATORS.split(selector) if p.strip()])


def is_overqualified(selector: str) -> bool:
    """True for a leading type selector fused with a class or id (div.foo).

    Only the first compound selector is inspected: ``ul li.item`` passes.
    """
    return bool(OVERQUALIFIED.match(selector))


def is_universal(selector: str) -> bool:
    return selector.strip() == "*" or bool(UNIVERSAL_OPERAND.search(selector))


def _issue(rule, selector, kind, severity, message, hint=None) -> Issue:
    return Issue(
        kind=kind,
        severity=severity,
        message=message,
        selector=selector,
        source_name=rule.source_name,
        source_line=rule.source_line,
        hint=hint,
    )


def check_selectors(rules: list[StyleRule]) -> list[Issue]:
    """Check every selector alternative of every rule.

    Each alternative of a comma group is checked on its own, and one
    alternative can raise several issues.
    """
    issues: list[Issue] = []

    for rule in rules:
        for sel in rule.selectors:
            issue = partial(_issue, rule, sel)
            ids, classes, _ = specificity_of(sel)

            if ids >= 2:
                issues.append(issue(
                    IssueKind.SPECIFICITY,
                    Severity.ERROR,
                    f"High specificity: {ids} IDs in selector",
                    hint="Replace IDs with classes",
                ))
            elif ids >= 1 and classes >= 2:
                issues.append(issue(
                    IssueKind.SPECIFICITY,
                    Severity.WARNING,
                    f"Moderate specificity: {ids} ID + {classes} classes",
                    hint="Drop the ID or the extra classes",
                ))

            if is_overqualified(sel):
                issues.append(issue(
                    IssueKind.OVERQUALIFIED,
                    Severity.INFO,
                    "Overqualified selector (tag + class/id)",
                    hint="Remove the tag name",
                ))

            if is_universal(sel):
                issues.append(issue(
                    IssueKind.UNIVERSAL,
                    Severity.INFO,
                    "Universal selector (*) can hurt performance",
                ))

            depth = nesting_depth(sel)
            if depth > MAX_NESTING:
                issues.append(issue(
                    IssueKind.SPECIFICITY,
                    Severity.WARNING,
                    f"Deeply nested selector ({depth} levels)",
                    hint=f"Keep selectors to {MAX_NESTING} levels or fewer",
                ))

    return issues
