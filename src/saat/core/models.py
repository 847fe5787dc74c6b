"""Audit data models — components, violations, rule statuses and results."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any


class Severity(enum.Enum):
    """Violation severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class RuleState(enum.Enum):
    """Outcome of one rule on one component."""

    PASSED = "PASSED"
    FAILED = "FAILED"
    NOT_APPLICABLE = "NOT_APPLICABLE"


@dataclass(frozen=True)
class ComponentMetadata:
    """A component file discovered by the scanner."""

    name: str
    path: str


@dataclass(frozen=True)
class NormalizedComponent:
    """Best-effort textual slices of a single-file component."""

    name: str
    path: str
    template: str = ""
    script: str = ""


@dataclass(frozen=True)
class Violation:
    """A single detected non-conformance."""

    rule_id: str
    rule_name: str
    severity: Severity
    issue: str
    recommendation: str
    line: int | None = None
    content: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "ruleId": self.rule_id,
            "ruleName": self.rule_name,
            "severity": self.severity.value,
        }
        if self.line is not None:
            data["line"] = self.line
        if self.content is not None:
            data["content"] = self.content
        data["issue"] = self.issue
        data["recommendation"] = self.recommendation
        return data


@dataclass(frozen=True)
class RuleStatus:
    """Status of one rule on one component. FAILED iff any violation."""

    rule_id: str
    status: RuleState
    violation_count: int = 0

    @classmethod
    def evaluated(cls, rule_id: str, violation_count: int) -> RuleStatus:
        status = RuleState.FAILED if violation_count > 0 else RuleState.PASSED
        return cls(rule_id=rule_id, status=status, violation_count=violation_count)

    @classmethod
    def not_applicable(cls, rule_id: str) -> RuleStatus:
        return cls(rule_id=rule_id, status=RuleState.NOT_APPLICABLE)

    def to_dict(self) -> dict[str, Any]:
        return {
            "ruleId": self.rule_id,
            "status": self.status.value,
            "violationCount": self.violation_count,
        }


@dataclass(frozen=True)
class ComponentAuditResult:
    """Violations and per-rule statuses for one component."""

    name: str
    path: str
    violations: tuple[Violation, ...] = ()
    rule_statuses: tuple[RuleStatus, ...] = ()
    component_type: str = ""

    @property
    def has_violations(self) -> bool:
        return bool(self.violations)

    def status_for(self, rule_id: str) -> RuleStatus | None:
        for status in self.rule_statuses:
            if status.rule_id == rule_id:
                return status
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "path": self.path,
            "componentType": self.component_type,
            "violations": [v.to_dict() for v in self.violations],
            "ruleStatuses": [s.to_dict() for s in self.rule_statuses],
        }


@dataclass(frozen=True)
class RuleStatistics:
    """Pass/fail counts for one rule across all components."""

    rule_id: str
    rule_name: str
    passed: int = 0
    failed: int = 0
    not_applicable: int = 0

    @property
    def total_applicable(self) -> int:
        return self.passed + self.failed

    @property
    def conformity_percent(self) -> float:
        if self.total_applicable == 0:
            return 100.0
        return self.passed / self.total_applicable * 100

    def to_dict(self) -> dict[str, Any]:
        return {
            "ruleId": self.rule_id,
            "ruleName": self.rule_name,
            "passed": self.passed,
            "failed": self.failed,
            "notApplicable": self.not_applicable,
            "totalApplicable": self.total_applicable,
            "conformityPercent": self.conformity_percent,
        }


@dataclass(frozen=True)
class AuditSummary:
    """Totals and conformity figures for a whole run."""

    total_components: int = 0
    components_with_violations: int = 0
    total_violations: int = 0
    overall_conformity_percent: float = 100.0
    by_rule: dict[str, int] = field(default_factory=dict)
    rule_statistics: tuple[RuleStatistics, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "totalComponents": self.total_components,
            "componentsWithViolations": self.components_with_violations,
            "totalViolations": self.total_violations,
            "overallConformityPercent": self.overall_conformity_percent,
            "byRule": dict(self.by_rule),
            "ruleStatistics": [s.to_dict() for s in self.rule_statistics],
        }


@dataclass(frozen=True)
class AuditResult:
    """Complete result of one audit run."""

    start_time: datetime
    end_time: datetime
    components: tuple[ComponentAuditResult, ...]
    rules_applied: tuple[str, ...]
    summary: AuditSummary
    components_failed: int = 0
    timestamp: datetime = field(
        default_factory=lambda: datetime.now(timezone.utc)
    )

    @property
    def duration_ms(self) -> int:
        return int((self.end_time - self.start_time).total_seconds() * 1000)

    @property
    def overall_conformity_percent(self) -> float:
        return self.summary.overall_conformity_percent

    def meets_threshold(self, min_conformity: float) -> bool:
        """True unless overall conformity is strictly below the threshold."""
        return not self.overall_conformity_percent < min_conformity

    def to_dict(self) -> dict[str, Any]:
        return {
            "timestamp": format_timestamp(self.timestamp),
            "audit": {
                "startTime": format_timestamp(self.start_time),
                "endTime": format_timestamp(self.end_time),
                "durationMs": self.duration_ms,
                "scope": {
                    "componentsScanned": len(self.components),
                    "componentsWithViolations": (
                        self.summary.components_with_violations
                    ),
                    "componentsFailed": self.components_failed,
                    "rulesApplied": list(self.rules_applied),
                },
            },
            "components": [c.to_dict() for c in self.components],
            "summary": self.summary.to_dict(),
        }


def format_timestamp(value: datetime) -> str:
    """ISO-8601 UTC with millisecond precision and a trailing Z."""
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")
