"""Tests for css_audit.auditor."""
from __future__ import annotations

import json

import pytest

from css_audit.auditor import audit, count_selectors
from css_audit.errors import InputNotFoundError
from css_audit.models import IssueKind, Severity, StyleSource
from css_audit.parser import extract_rules

HIGH_ID_RULES = (
    "#a#b { color: red !important; } "
    "#a#b { color: red !important; } "
    "#a#b { color: red !important; }"
)


class TestAudit:
    def test_no_sources_raises(self):
        with pytest.raises(InputNotFoundError):
            audit([])

    def test_accepts_plain_pairs(self):
        report = audit([("a.css", ".a { color: red; }")])
        assert report.files[0].name == "a.css"

    def test_file_stats(self):
        report = audit([
            StyleSource("a.css", "a, a.active { color: red; }"),
            StyleSource("b.css", "b { margin: 0 }\n@media print { c { d: e } }"),
        ])
        assert [(f.name, f.rules, f.selectors) for f in report.files] == [
            ("a.css", 1, 2),
            ("b.css", 1, 1),
        ]
        assert report.totals.rules == 2
        assert report.totals.selectors == 3
        assert report.totals.size == sum(f.size for f in report.files)

    def test_size_is_utf8_bytes(self):
        content = 'a { content: "é"; }'
        report = audit([("u.css", content)])
        assert report.files[0].size == len(content) + 1

    def test_clean_css(self):
        report = audit([("ok.css", "body { margin: 0; }\n.btn { color: blue; }")])
        assert report.issues == ()
        assert report.scores.overall == 100
        assert report.passed
        assert report.summary == "PASS: Overall score 100/100 (threshold: 60)"

    def test_high_id_rules_end_to_end(self):
        report = audit([("f", HIGH_ID_RULES)])

        specificity = [i for i in report.issues if i.kind == IssueKind.SPECIFICITY]
        important = [i for i in report.issues if i.kind == IssueKind.IMPORTANT]
        duplicates = [i for i in report.issues if i.kind == IssueKind.DUPLICATE]

        assert len(specificity) == 3
        assert all(i.severity == Severity.ERROR for i in specificity)
        assert len(important) == 3
        assert len(duplicates) == 1
        assert duplicates[0].occurrences == 3
        assert "appears 3 times" in duplicates[0].message

        assert report.scores.important < 50
        assert report.scores.overall == 20
        assert not report.passed

    def test_threshold_decides_verdict(self):
        assert audit([("f", HIGH_ID_RULES)], threshold=20).passed
        assert not audit([("f", HIGH_ID_RULES)], threshold=41).passed

    def test_file_size_boundary(self):
        assert audit([("big.css", " " * 10_000)]).scores.file_size == 100
        assert audit([("big.css", " " * 10_001)]).scores.file_size == 85

    def test_rules_pooled_across_sources(self):
        report = audit([
            ("a.css", "a { color: red }"),
            ("b.css", "b { color: red }"),
            ("c.css", "c { color: red }"),
        ])
        (issue,) = report.issues
        assert issue.kind == IssueKind.DUPLICATE
        assert issue.source_name == "a.css"
        assert issue.selector == "a, b, c"

    def test_idempotent(self):
        sources = [("a.css", HIGH_ID_RULES), ("b.css", "div.x * span { margin: 0 }")]
        assert audit(sources) == audit(sources)


class TestCountSelectors:
    def test_counts_alternatives(self):
        rules = extract_rules("a, b, c { x: y } d { x: y }", "f")
        assert count_selectors(rules) == 4


class TestReportDict:
    def test_json_serializable(self):
        report = audit([("f", HIGH_ID_RULES)])
        data = json.loads(json.dumps(report.to_dict()))
        assert data["totalRules"] == 3
        assert data["scores"]["fileSize"] == 100
        assert data["issues"][0]["type"] == "specificity"
        assert data["issues"][0]["severity"] == "error"
        assert data["passed"] is False
        assert data["summary"].startswith("FAIL")

    def test_count_by_severity(self):
        report = audit([("f", HIGH_ID_RULES)])
        assert report.count_by_severity() == {
            Severity.ERROR: 3,
            Severity.WARNING: 4,
            Severity.INFO: 0,
        }
