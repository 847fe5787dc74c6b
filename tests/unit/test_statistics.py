"""Tests for conformity statistics."""

from __future__ import annotations

import pytest

from saat.core.models import (
    ComponentAuditResult,
    RuleStatistics,
    RuleStatus,
    Severity,
    Violation,
)
from saat.core.statistics import (
    build_summary,
    calculate_overall_conformity,
    calculate_rule_statistics,
)


def _component(name: str, *statuses: RuleStatus, violations=()) -> ComponentAuditResult:
    return ComponentAuditResult(
        name=name,
        path=f"src/{name}.vue",
        violations=tuple(violations),
        rule_statuses=statuses,
    )


def _violation(rule_id: str) -> Violation:
    return Violation(
        rule_id=rule_id,
        rule_name=rule_id,
        severity=Severity.ERROR,
        issue="issue",
        recommendation="fix",
    )


class TestRuleStatistics:
    def test_counts(self):
        components = [
            _component("A", RuleStatus.evaluated("1.1.1", 0)),
            _component("B", RuleStatus.evaluated("1.1.1", 2)),
            _component("C", RuleStatus.not_applicable("1.1.1")),
            _component("D", RuleStatus.evaluated("1.1.1", 0)),
        ]
        stats = calculate_rule_statistics(components, "1.1.1", "Non-text Content")

        assert (stats.passed, stats.failed, stats.not_applicable) == (2, 1, 1)
        assert stats.total_applicable == 3
        assert stats.conformity_percent == pytest.approx(200 / 3)

    def test_zero_applicable_is_fully_conformant(self):
        components = [_component("A", RuleStatus.not_applicable("2.4.1"))]
        stats = calculate_rule_statistics(components, "2.4.1", "Bypass Blocks")
        assert stats.total_applicable == 0
        assert stats.conformity_percent == 100

    def test_warnings_still_fail(self):
        status = RuleStatus.evaluated("1.3.2", 1)
        stats = calculate_rule_statistics([_component("A", status)], "1.3.2", "x")
        assert stats.failed == 1


class TestOverallConformity:
    def test_weighted_by_applicable_volume(self):
        rule_a = RuleStatistics(rule_id="A", rule_name="A", passed=1, failed=0)
        rule_b = RuleStatistics(rule_id="B", rule_name="B", passed=1, failed=9)

        overall = calculate_overall_conformity([rule_a, rule_b])

        assert overall == pytest.approx(2 / 11 * 100)
        assert round(overall, 2) == 18.18
        naive_mean = (rule_a.conformity_percent + rule_b.conformity_percent) / 2
        assert naive_mean == pytest.approx(55.0)
        assert overall != pytest.approx(naive_mean)

    def test_nothing_applicable(self):
        stats = [RuleStatistics(rule_id="A", rule_name="A", not_applicable=4)]
        assert calculate_overall_conformity(stats) == 100.0

    def test_no_rules(self):
        assert calculate_overall_conformity([]) == 100.0


class TestBuildSummary:
    def test_summary(self):
        components = [
            _component(
                "A",
                RuleStatus.evaluated("1.1.1", 2),
                RuleStatus.evaluated("2.4.1", 0),
                violations=[_violation("1.1.1"), _violation("1.1.1")],
            ),
            _component(
                "B",
                RuleStatus.evaluated("1.1.1", 0),
                RuleStatus.not_applicable("2.4.1"),
            ),
        ]

        summary = build_summary(components, ["1.1.1", "2.4.1"])

        assert summary.total_components == 2
        assert summary.components_with_violations == 1
        assert summary.total_violations == 2
        assert summary.by_rule == {"1.1.1": 2, "2.4.1": 0}
        assert [s.rule_id for s in summary.rule_statistics] == ["1.1.1", "2.4.1"]
        assert summary.rule_statistics[0].rule_name == "Non-text Content"
        # 2 passed out of 3 applicable checks
        assert summary.overall_conformity_percent == pytest.approx(200 / 3)

    def test_by_rule_zero_filled(self):
        summary = build_summary([], ["3.3.1", "4.1.2"])
        assert summary.by_rule == {"3.3.1": 0, "4.1.2": 0}
        assert summary.overall_conformity_percent == 100.0
