"""WCAG 2.2.1 Timing Adjustable — timers that log out, redirect or dismiss content."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory, numbered_lines

RULE_ID = "2.2.1"
_violation = ViolationFactory(RULE_ID)

# Below this delay a user has no realistic chance to react.
SHORT_TIMEOUT_MS = 500

_TIMER_RE = re.compile(r"setTimeout|setInterval")
_SESSION_END_RES = (
    re.compile(r"logout\s*\(\)|signOut\s*\(\)|destroySession|clearSession", re.I),
    re.compile(r"timeout.*(?:1000|3000|5000|6000|900000|1800000)", re.I),
    re.compile(r"inactivity.*timeout|session.*expir", re.I),
)
_REDIRECT_RE = re.compile(
    r"window\.location|router\.push|router\.replace|window\.href|navigateTo\s*\(",
    re.IGNORECASE,
)
_DISMISS_RE = re.compile(r"closeModal|dismiss|hideToast|closeDialog", re.IGNORECASE)
_SHORT_TIMEOUT_RE = re.compile(r"setTimeout\s*\(\s*[^,]*,\s*([0-9]+)\s*\)")
_SHORT_TIMEOUT_ACTION_RE = re.compile(
    r"redirect|navigate|logout|closeModal|dismiss", re.IGNORECASE
)


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []

    for line_num, line in numbered_lines(component.script):
        if not _TIMER_RE.search(line):
            continue
        content = line.strip()

        if any(regex.search(line) for regex in _SESSION_END_RES):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Potential auto-logout or session timeout detected.",
                    "Warn users before the session ends and let them extend it",
                    line=line_num,
                    content=content,
                )
            )

        if _REDIRECT_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Automatic redirect detected inside a timer.",
                    "Give users enough time to understand the redirect and a way "
                    "to stop it",
                    line=line_num,
                    content=content,
                )
            )
        elif _DISMISS_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Content is dismissed automatically by a timer.",
                    "Let users pause, extend, or dismiss the content themselves",
                    line=line_num,
                    content=content,
                )
            )

        match = _SHORT_TIMEOUT_RE.search(line)
        if match and _SHORT_TIMEOUT_ACTION_RE.search(line):
            delay = int(match.group(1))
            if delay < SHORT_TIMEOUT_MS:
                violations.append(
                    _violation(
                        Severity.WARNING,
                        f"Hardcoded timeout of {delay}ms detected. Short "
                        "timeouts may prevent users from reacting.",
                        "Use user-controlled timing or a longer delay",
                        line=line_num,
                        content=content,
                    )
                )

    return violations
