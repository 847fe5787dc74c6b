"""WCAG 4.1.3 Status Messages — live regions for dynamic status content."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory, numbered_lines

RULE_ID = "4.1.3"
_violation = ViolationFactory(RULE_ID)

_STATUS_RES = (
    re.compile(
        r"<(?:div|span|p|section)\b[^>]*(?:class|id)\s*=\s*[\"'][^\"']*"
        r"(?:status|message|alert|notification|toast|banner)[^\"']*[\"'][^>]*>",
        re.IGNORECASE,
    ),
    re.compile(
        r"<(?:div|span|p|section)\b[^>]*role\s*=\s*[\"'](?:status|alert)[^\"']*[\"']"
        r"[^>]*>",
        re.IGNORECASE,
    ),
)
_LIVE_RE = re.compile(r"aria-live\s*=\s*[\"'](?!off)[^\"']+[\"']", re.IGNORECASE)
_LIVE_OFF_RE = re.compile(r"aria-live\s*=\s*[\"']off[\"']", re.IGNORECASE)
_REACTIVE_RE = re.compile(r"@input|@change|v-model|v-show|v-if")


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []

    for line_num, line in numbered_lines(component.template):
        content = line.strip()

        is_status = any(regex.search(line) for regex in _STATUS_RES)
        if is_status and not _LIVE_RE.search(line):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Status message element lacks aria-live attribute.",
                    'Add aria-live="polite" or aria-live="assertive" so updates '
                    "are announced",
                    line=line_num,
                    content=content,
                )
            )

        if _LIVE_OFF_RE.search(line) and _REACTIVE_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    'Dynamic element has aria-live="off".',
                    'Remove the attribute or set it to "polite"/"assertive" if '
                    "updates should be announced",
                    line=line_num,
                    content=content,
                )
            )

    return violations
