"""Conformity statistics — per-rule counts and the overall percentage.

Overall conformity is weighted by volume: the sum of passed checks over the
sum of applicable checks across every rule, not the mean of per-rule
percentages.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from saat.core.models import (
    AuditSummary,
    ComponentAuditResult,
    RuleState,
    RuleStatistics,
)
from saat.core.rules import rule_name as lookup_rule_name


def calculate_rule_statistics(
    components: Iterable[ComponentAuditResult],
    rule_id: str,
    rule_name: str,
) -> RuleStatistics:
    passed = failed = not_applicable = 0
    for component in components:
        status = component.status_for(rule_id)
        if status is None:
            continue
        if status.status is RuleState.PASSED:
            passed += 1
        elif status.status is RuleState.FAILED:
            failed += 1
        else:
            not_applicable += 1
    return RuleStatistics(
        rule_id=rule_id,
        rule_name=rule_name,
        passed=passed,
        failed=failed,
        not_applicable=not_applicable,
    )


def calculate_overall_conformity(stats: Iterable[RuleStatistics]) -> float:
    """Σpassed / ΣtotalApplicable × 100, or 100 when nothing applies."""
    total_passed = 0
    total_applicable = 0
    for stat in stats:
        total_passed += stat.passed
        total_applicable += stat.total_applicable
    if total_applicable == 0:
        return 100.0
    return total_passed / total_applicable * 100


def build_summary(
    components: Sequence[ComponentAuditResult],
    rules_applied: Sequence[str],
) -> AuditSummary:
    by_rule = dict.fromkeys(rules_applied, 0)
    total_violations = 0
    for component in components:
        for violation in component.violations:
            total_violations += 1
            if violation.rule_id in by_rule:
                by_rule[violation.rule_id] += 1

    rule_statistics = tuple(
        calculate_rule_statistics(components, rule_id, lookup_rule_name(rule_id))
        for rule_id in rules_applied
    )

    return AuditSummary(
        total_components=len(components),
        components_with_violations=sum(1 for c in components if c.has_violations),
        total_violations=total_violations,
        overall_conformity_percent=calculate_overall_conformity(rule_statistics),
        by_rule=by_rule,
        rule_statistics=rule_statistics,
    )
