"""WCAG 1.4.1 Use of Color — state or links conveyed by colour alone."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory, numbered_lines

RULE_ID = "1.4.1"
_violation = ViolationFactory(RULE_ID)

_STATE_CLASS_RE = re.compile(
    r"class\s*=\s*[\"'][^\"']*"
    r"(?:success|error|warning|danger|pending|active|inactive|disabled|enabled)",
    re.IGNORECASE,
)
_TEXT_OR_ICON_RE = re.compile(
    r">.*[A-Za-z0-9].*<|svg|icon|<i\s|aria-label", re.IGNORECASE
)
_TITLE_RE = re.compile(r"aria-label|title\s*=")

_LINK_RE = re.compile(r"<a\b[^>]*href", re.IGNORECASE)
_NO_UNDERLINE_RE = re.compile(r"text-decoration\s*:\s*none|no-underline")
_LINK_COLOR_CLASS_RE = re.compile(
    r"class\s*=\s*[\"'][^\"']*(?:primary|secondary|accent|link|blue|red)"
)


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []
    violations.extend(_check_color_only_status(component.template))
    violations.extend(_check_color_only_links(component.template))
    return violations


def _check_color_only_status(template: str) -> list[Violation]:
    violations = []
    for line_num, line in numbered_lines(template):
        if not _STATE_CLASS_RE.search(line):
            continue
        if _TEXT_OR_ICON_RE.search(line) or _TITLE_RE.search(line):
            continue
        if "</" in line:
            continue
        violations.append(
            _violation(
                Severity.WARNING,
                "Element uses a colour state class (success/error/warning) "
                "without text, icon, or aria-label.",
                "Add descriptive text, an icon, or an aria-label alongside "
                "the colour",
                line=line_num,
                content=line.strip(),
            )
        )
    return violations


def _check_color_only_links(template: str) -> list[Violation]:
    violations = []
    for line_num, line in numbered_lines(template):
        if not _LINK_RE.search(line):
            continue
        if _NO_UNDERLINE_RE.search(line) and _LINK_COLOR_CLASS_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Link is distinguished by colour only (no underline or "
                    "text distinction).",
                    "Keep links underlined or add another visual indicator "
                    "beyond colour",
                    line=line_num,
                    content=line.strip(),
                )
            )
    return violations
