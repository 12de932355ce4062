"""Check for declarations repeated across rules."""

from typing import Optional

from ..models import Issue, IssueKind, Severity, StyleRule

MIN_OCCURRENCES = 3


def declaration_key(decl: str) -> Optional[str]:
    """Normalize a declaration to ``property:value``.

    Splits on the first colon only, so values such as ``url(http://...)``
    survive. Returns None when the property or value is empty.
    """
    prop, _, value = decl.partition(":")
    prop, value = prop.strip(), value.strip()
    if not prop or not value:
        return None
    return f"{prop}:{value}"


def group_declarations(rules: list[StyleRule]) -> dict[str, list[StyleRule]]:
    """Map each declaration key to the rules using it, in first-seen order."""
    groups: dict[str, list[StyleRule]] = {}
    for rule in rules:
        for decl in rule.declarations:
            key = declaration_key(decl)
            if key is not None:
                groups.setdefault(key, []).append(rule)
    return groups


def check_duplicates(rules: list[StyleRule]) -> list[Issue]:
    """One warning per declaration appearing three or more times."""
    issues: list[Issue] = []

    for key, owners in group_declarations(rules).items():
        if len(owners) < MIN_OCCURRENCES:
            continue
        first = owners[0]
        issues.append(Issue(
            kind=IssueKind.DUPLICATE,
            severity=Severity.WARNING,
            message=f'Declaration "{key}" appears {len(owners)} times',
            selector=", ".join(r.selector for r in owners),
            source_name=first.source_name,
            source_line=first.source_line,
            hint="Extract into a shared class or custom property",
            occurrences=len(owners),
        ))

    return issues
