"""WCAG 1.3.2 Meaningful Sequence — CSS that reorders content visually."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory, numbered_lines

RULE_ID = "1.3.2"
_violation = ViolationFactory(RULE_ID)

_ORDER_RE = re.compile(r"(?<![\w-])order\s*:\s*-?[1-9]\d*", re.IGNORECASE)
_GRID_PLACEMENT_RE = re.compile(r"\bgrid-(?:column|row)(?!-gap)", re.IGNORECASE)
_FLEX_REVERSE_RE = re.compile(
    r"flex-direction\s*:\s*(?:row|column)-reverse|\bflex-(?:row|col)-reverse\b",
    re.IGNORECASE,
)


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []

    for line_num, line in numbered_lines(component.template):
        if _ORDER_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "CSS order property detected. Ensure the visual order "
                    "matches the HTML source order for keyboard navigation "
                    "and screen readers.",
                    "Reorder the markup instead of relying on the CSS order "
                    "property",
                    line=line_num,
                    content=line.strip(),
                )
            )
        if _GRID_PLACEMENT_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "CSS Grid placement detected. Verify that visual order "
                    "matches source order.",
                    "Update the source order to match the visual layout",
                    line=line_num,
                    content=line.strip(),
                )
            )
        if _FLEX_REVERSE_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "CSS flexbox reverse detected. Ensure reading order "
                    "matches visual order.",
                    "Restructure the HTML instead of reversing flex direction",
                    line=line_num,
                    content=line.strip(),
                )
            )

    return violations
