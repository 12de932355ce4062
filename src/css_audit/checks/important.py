"""Check for !important usage."""

from ..models import Issue, IssueKind, Severity, StyleRule

MESSAGE_WIDTH = 60


def check_important(rules: list[StyleRule]) -> list[Issue]:
    """One warning per declaration that uses !important."""
    issues: list[Issue] = []

    for rule in rules:
        for decl in rule.declarations:
            if "!important" in decl:
                issues.append(Issue(
                    kind=IssueKind.IMPORTANT,
                    severity=Severity.WARNING,
                    message=f"!important used: {decl[:MESSAGE_WIDTH]}",
                    selector=rule.selector,
                    source_name=rule.source_name,
                    source_line=rule.source_line,
                    hint="Fix the cascade instead of forcing it",
                ))

    return issues
