"""WCAG 2.4.3 Focus Order — tabindex misuse and unfocusable custom controls."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ON, ViolationFactory, numbered_lines

RULE_ID = "2.4.3"
_violation = ViolationFactory(RULE_ID)

_NEGATIVE_TABINDEX_RE = re.compile(r"\btabindex\s*=\s*[\"']?-\d+", re.IGNORECASE)
_POSITIVE_TABINDEX_RE = re.compile(
    r"\btabindex\s*=\s*[\"']?[1-9]\d*", re.IGNORECASE
)
_CLICK_RE = re.compile(rf"{ON}click\b")
_CLICKABLE_CONTAINER_RE = re.compile(rf"<(?:div|span)\b[^>]*{ON}click\b")
_FOCUS_ATTR_RE = re.compile(r"tabindex|role\s*=")


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []

    for line_num, line in numbered_lines(component.template):
        content = line.strip()

        if _NEGATIVE_TABINDEX_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Element uses negative tabindex, which hides it from the "
                    "logical tab order.",
                    'Use tabindex="-1" sparingly and only for elements focused '
                    "programmatically",
                    line=line_num,
                    content=content,
                )
            )

        if _POSITIVE_TABINDEX_RE.search(line):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Element uses explicit positive tabindex (> 0), creating "
                    "unpredictable focus order.",
                    'Use tabindex="0" or remove the attribute',
                    line=line_num,
                    content=content,
                )
            )

        if (
            _CLICK_RE.search(line)
            and not _FOCUS_ATTR_RE.search(line)
            and _CLICKABLE_CONTAINER_RE.search(line)
        ):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Custom interactive element (@click) lacks tabindex and role "
                    "attributes.",
                    'Add tabindex="0" and an appropriate role',
                    line=line_num,
                    content=content,
                )
            )

    return violations
