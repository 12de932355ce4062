"""Tests for css_audit.scoring."""
from __future__ import annotations

import pytest

from css_audit.models import Issue, IssueKind, Severity, StyleRule
from css_audit.scoring import DEFAULT_THRESHOLD, file_size_score, round_half_up, score


def _rules(count: int, decls_per_rule: int = 1) -> list[StyleRule]:
    return [
        StyleRule(f".r{n}", tuple(f"p{d}: v" for d in range(decls_per_rule)), n + 1, "t.css")
        for n in range(count)
    ]


def _issue(kind: IssueKind, occurrences: int = 1) -> Issue:
    return Issue(
        kind=kind,
        severity=Severity.WARNING,
        message="m",
        selector=".r0",
        source_name="t.css",
        source_line=1,
        occurrences=occurrences,
    )


class TestFileSizeScore:
    @pytest.mark.parametrize(
        "size, expected",
        [
            (0, 100),
            (10_000, 100),
            (10_001, 85),
            (25_000, 85),
            (25_001, 70),
            (50_000, 70),
            (50_001, 50),
            (100_000, 50),
            (100_001, 30),
        ],
    )
    def test_steps(self, size, expected):
        assert file_size_score(size) == expected


class TestRoundHalfUp:
    def test_halves_round_up(self):
        assert round_half_up(0.5) == 1
        assert round_half_up(2.5) == 3
        assert round_half_up(2.49) == 2


class TestScore:
    def test_perfect_when_no_issues(self):
        scores, verdict = score(_rules(5), [], 1_000)
        assert (scores.overall, scores.specificity, scores.duplicates,
                scores.important, scores.file_size) == (100, 100, 100, 100, 100)
        assert verdict.passed
        assert verdict.threshold == DEFAULT_THRESHOLD

    def test_no_rules_does_not_divide_by_zero(self):
        scores, _ = score([], [], 0)
        assert scores.overall == 100

    def test_specificity_ratio(self):
        scores, _ = score(_rules(10), [_issue(IssueKind.SPECIFICITY)], 0)
        assert scores.specificity == 80
        assert scores.overall == 94

    def test_duplicates_count_all_but_first(self):
        scores, _ = score(_rules(10), [_issue(IssueKind.DUPLICATE, occurrences=3)], 0)
        assert scores.duplicates == 40

    def test_important_ratio(self):
        scores, _ = score(_rules(10), [_issue(IssueKind.IMPORTANT)], 0)
        assert scores.important == 50

    def test_scores_clamped_at_zero(self):
        issues = [_issue(IssueKind.SPECIFICITY)] * 5 + [_issue(IssueKind.IMPORTANT)] * 5
        scores, _ = score(_rules(1), issues, 0)
        assert scores.specificity == 0
        assert scores.important == 0

    def test_info_kinds_do_not_affect_scores(self):
        issues = [_issue(IssueKind.OVERQUALIFIED), _issue(IssueKind.UNIVERSAL)]
        scores, _ = score(_rules(1), issues, 0)
        assert scores.overall == 100

    def test_overall_uses_unrounded_sub_scores(self):
        # specificity = 100 - 1/3 * 200 = 33.33..., overall = 10 + 25 + 25 + 20
        scores, _ = score(_rules(3), [_issue(IssueKind.SPECIFICITY)], 0)
        assert scores.specificity == 33
        assert scores.overall == 80

    def test_file_size_weight(self):
        scores, _ = score(_rules(1), [], 100_001)
        assert scores.file_size == 30
        assert scores.overall == 86


class TestVerdict:
    def test_pass_at_threshold(self):
        _, verdict = score(_rules(10), [_issue(IssueKind.SPECIFICITY)], 0, threshold=94)
        assert verdict.passed
        assert verdict.status == "PASS"

    def test_fail_below_threshold(self):
        _, verdict = score(_rules(10), [_issue(IssueKind.SPECIFICITY)], 0, threshold=95)
        assert not verdict.passed
        assert verdict.summary == "FAIL: Overall score 94/100 (threshold: 95)"
