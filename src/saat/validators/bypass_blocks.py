"""WCAG 2.4.1 Bypass Blocks — pages need a main landmark or a skip link."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory

RULE_ID = "2.4.1"
_violation = ViolationFactory(RULE_ID)

_MAIN_RE = re.compile(
    r"<main\b[^>]*>|role\s*=\s*[\"']main[\"']", re.IGNORECASE
)
_SKIP_LINK_RE = re.compile(
    r"href\s*=\s*[\"']#(?:main|content|main-content)[\"']", re.IGNORECASE
)
_NAV_RE = re.compile(
    r"<(?:nav|header)\b[^>]*>|role\s*=\s*[\"']navigation[\"']", re.IGNORECASE
)


def validate(component: NormalizedComponent) -> list[Violation]:
    template = component.template
    violations: list[Violation] = []

    if not (_MAIN_RE.search(template) or _SKIP_LINK_RE.search(template)):
        violations.append(
            _violation(
                Severity.ERROR,
                "No main landmark or skip link found",
                "Add a <main> element or a skip to content link at the beginning "
                "of the page",
            )
        )

    if not _NAV_RE.search(template):
        violations.append(
            _violation(
                Severity.WARNING,
                "No navigation landmark found",
                "Mark up navigation areas with <nav> or <header>",
            )
        )

    return violations
