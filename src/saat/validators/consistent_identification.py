"""WCAG 3.2.4 Consistent Identification — one label and one icon per action.

The first label (and icon) seen for a canonical action is remembered for the
duration of a single ``validate`` call; any later control that performs the
same action with a different label or icon is reported. Nothing is shared
between calls or components.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory, numbered_lines

RULE_ID = "3.2.4"
_violation = ViolationFactory(RULE_ID)

# Normalized control text -> canonical action
ACTION_LABELS: dict[str, str] = {
    "save": "save",
    "save changes": "save",
    "store": "save",
    "delete": "delete",
    "remove": "delete",
    "erase": "delete",
    "trash": "delete",
    "close": "close",
    "dismiss": "close",
    "exit": "close",
    "×": "close",
    "cancel": "cancel",
    "abort": "cancel",
    "submit": "submit",
    "send": "submit",
    "next": "next",
    "continue": "next",
    "forward": "next",
    "proceed": "next",
    "back": "back",
    "go back": "back",
    "previous": "back",
    "prev": "back",
    "return": "back",
    "done": "done",
    "ok": "done",
    "okay": "done",
    "finish": "done",
}

_CONTROL_TEXT_RES = (
    re.compile(r"<button\b[^>]*>([^<]+)</button>", re.IGNORECASE),
    re.compile(r"<a\b[^>]*>([^<]+)</a>", re.IGNORECASE),
)

_ICON_LINE_RE = re.compile(r"<i\b|<svg\b|icon", re.IGNORECASE)
# Checked in order; the first match decides the action.
_ICON_ACTIONS = (
    ("close", re.compile(r"close|dismiss|exit|×|cancel", re.IGNORECASE)),
    ("delete", re.compile(r"delete|remove|trash", re.IGNORECASE)),
    ("edit", re.compile(r"edit|modify|pencil", re.IGNORECASE)),
    ("save", re.compile(r"save|check|confirm", re.IGNORECASE)),
    ("back", re.compile(r"back|previous|arrow-left|chevron-left", re.IGNORECASE)),
    ("next", re.compile(r"next|forward|arrow-right|chevron-right", re.IGNORECASE)),
)
_ICON_ID_RES = (
    re.compile(r"<i\b[^>]*\bclass\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    re.compile(r"<svg\b[^>]*\bclass\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    re.compile(
        r"<[\w-]*icon[\w-]*\b[^>]*\b(?:name|icon)\s*=\s*[\"']([^\"']+)[\"']",
        re.IGNORECASE,
    ),
    re.compile(r"\bicon\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
    re.compile(r"\bclass\s*=\s*[\"']([^\"']+)[\"']", re.IGNORECASE),
)


@dataclass(frozen=True)
class _FirstUse:
    value: str
    line: int


def canonical_action(label: str) -> str | None:
    """Map visible control text to its canonical action, if any."""
    return ACTION_LABELS.get(" ".join(label.lower().split()))


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []
    violations.extend(_check_labels(component.template))
    violations.extend(_check_icons(component.template))
    return violations


def _check_labels(template: str) -> list[Violation]:
    violations = []
    first_labels: dict[str, _FirstUse] = {}

    for line_num, line in numbered_lines(template):
        for regex in _CONTROL_TEXT_RES:
            for match in regex.finditer(line):
                label = match.group(1).strip()
                action = canonical_action(label)
                if action is None:
                    continue
                previous = first_labels.get(action)
                if previous is None:
                    first_labels[action] = _FirstUse(label, line_num)
                    continue
                if label != previous.value:
                    violations.append(
                        _violation(
                            Severity.WARNING,
                            f'Inconsistent label for "{action}" action. '
                            f'Previously used: "{previous.value}" '
                            f'(line {previous.line}), now: "{label}" '
                            f"(line {line_num}).",
                            f'Use the same label ("{previous.value}") for every '
                            f'"{action}" control',
                            line=line_num,
                            content=line.strip(),
                        )
                    )
    return violations


def _check_icons(template: str) -> list[Violation]:
    violations = []
    first_icons: dict[str, _FirstUse] = {}

    for line_num, line in numbered_lines(template):
        if not _ICON_LINE_RE.search(line):
            continue
        action = _icon_action(line)
        icon = _icon_identifier(line)
        if action is None or icon is None:
            continue
        previous = first_icons.get(action)
        if previous is None:
            first_icons[action] = _FirstUse(icon, line_num)
            continue
        if icon != previous.value:
            violations.append(
                _violation(
                    Severity.WARNING,
                    f'Inconsistent icon for "{action}" action. Previously used: '
                    f'"{previous.value}" (line {previous.line}), now: "{icon}" '
                    f"(line {line_num}).",
                    f'Use the same icon ("{previous.value}") for every '
                    f'"{action}" control',
                    line=line_num,
                    content=line.strip(),
                )
            )
    return violations


def _icon_action(line: str) -> str | None:
    for action, regex in _ICON_ACTIONS:
        if regex.search(line):
            return action
    return None


def _icon_identifier(line: str) -> str | None:
    for regex in _ICON_ID_RES:
        match = regex.search(line)
        if match:
            return match.group(1).strip()
    return None
