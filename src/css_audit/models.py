"""Data models for CSS audit results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple, Optional


class Severity(Enum):
    """Severity level for audit issues."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class IssueKind(Enum):
    """Category of an audit issue."""
    SPECIFICITY = "specificity"
    DUPLICATE = "duplicate"
    IMPORTANT = "important"
    OVERQUALIFIED = "overqualified"
    UNIVERSAL = "universal"


class StyleSource(NamedTuple):
    """A named CSS text buffer (file, inline <style> block, or URL)."""
    name: str
    content: str


@dataclass(frozen=True)
class StyleRule:
    """A single CSS rule block."""
    selector: str
    declarations: tuple[str, ...]
    source_line: int
    source_name: str

    @property
    def selectors(self) -> list[str]:
        """The comma-separated alternatives of the selector, trimmed."""
        return [s.strip() for s in self.selector.split(",")]


@dataclass(frozen=True)
class Issue:
    """A single audit finding."""
    kind: IssueKind
    severity: Severity
    message: str
    selector: str
    source_name: str
    source_line: int
    hint: Optional[str] = None
    occurrences: int = 1  # group size for duplicates


@dataclass(frozen=True)
class FileStats:
    """Structural statistics for one source."""
    name: str
    size: int  # bytes, UTF-8
    rules: int
    selectors: int


@dataclass(frozen=True)
class Totals:
    """Statistics summed across all sources."""
    size: int
    rules: int
    selectors: int


@dataclass(frozen=True)
class Scores:
    """Health scores, each 0-100 (higher is better)."""
    overall: int
    specificity: int
    duplicates: int
    important: int
    file_size: int


@dataclass(frozen=True)
class Verdict:
    """Overall score compared against the pass threshold."""
    overall: int
    threshold: int

    @property
    def passed(self) -> bool:
        return self.overall >= self.threshold

    @property
    def status(self) -> str:
        return "PASS" if self.passed else "FAIL"

    @property
    def summary(self) -> str:
        return f"{self.status}: Overall score {self.overall}/100 (threshold: {self.threshold})"


@dataclass(frozen=True)
class AuditReport:
    """Complete audit result for a set of stylesheets."""
    files: tuple[FileStats, ...]
    totals: Totals
    scores: Scores
    verdict: Verdict
    issues: tuple[Issue, ...] = field(default_factory=tuple)

    @property
    def passed(self) -> bool:
        return self.verdict.passed

    @property
    def summary(self) -> str:
        return self.verdict.summary

    def count_by_severity(self) -> dict[Severity, int]:
        """Number of issues per severity, in error/warning/info order."""
        counts = {Severity.ERROR: 0, Severity.WARNING: 0, Severity.INFO: 0}
        for issue in self.issues:
            counts[issue.severity] += 1
        return counts

    def to_dict(self) -> dict[str, Any]:
        """Full-fidelity, JSON-serializable form of the report."""
        return {
            "files": [
                {
                    "name": f.name,
                    "size": f.size,
                    "rules": f.rules,
                    "selectors": f.selectors,
                }
                for f in self.files
            ],
            "totalSize": self.totals.size,
            "totalRules": self.totals.rules,
            "totalSelectors": self.totals.selectors,
            "issues": [
                {
                    "type": i.kind.value,
                    "severity": i.severity.value,
                    "message": i.message,
                    "selector": i.selector,
                    "file": i.source_name,
                    "line": i.source_line,
                    "hint": i.hint,
                    "occurrences": i.occurrences,
                }
                for i in self.issues
            ],
            "scores": {
                "overall": self.scores.overall,
                "specificity": self.scores.specificity,
                "duplicates": self.scores.duplicates,
                "important": self.scores.important,
                "fileSize": self.scores.file_size,
            },
            "passed": self.passed,
            "threshold": self.verdict.threshold,
            "summary": self.summary,
        }
