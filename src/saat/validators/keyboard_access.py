"""WCAG 2.1.1 Keyboard Access — controls that cannot be reached or operated by keyboard."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import (
    KEYBOARD_HANDLER_RE,
    ON,
    ViolationFactory,
    line_of,
    snippet,
)

RULE_ID = "2.1.1"
_violation = ViolationFactory(RULE_ID)

_DISABLED_RE = re.compile(
    r"<(button|input|select|textarea)\b([^>]*\s+)?disabled\b(?!-)"
    r"(?:\s*=\s*[\"']disabled[\"'])?([^>]*)>",
    re.IGNORECASE,
)
_INPUT_RE = re.compile(r"<input\b([^>]*)>", re.IGNORECASE)
_POINTER_EVENTS_NONE_RE = re.compile(r"pointer-events\s*:\s*none", re.IGNORECASE)
_NEGATIVE_TABINDEX_RE = re.compile(r"tabindex\s*=\s*[\"']-1[\"']", re.IGNORECASE)
_READONLY_RE = re.compile(r"readonly|disabled", re.IGNORECASE)
_BUTTON_RE = re.compile(r"<button\b([^>]*)>([^<]*)", re.IGNORECASE)
_MOUSE_HANDLER_RE = re.compile(rf"{ON}(?:click|mousedown|mouseup)\b", re.IGNORECASE)
_NON_BUTTON_ROLE_RE = re.compile(r"role\s*=\s*[\"'](?!button)", re.IGNORECASE)
_POINTER_DIV_RE = re.compile(
    rf"<div\b([^>]*{ON}(?:click|pointerdown|pointerup|mousedown)\b[^>]*)>",
    re.IGNORECASE,
)
_INTERACTIVE_ROLE_RE = re.compile(
    r"role\s*=\s*[\"'](?:button|link|menuitem|tab|option|checkbox|switch)[\"']",
    re.IGNORECASE,
)


def validate(component: NormalizedComponent) -> list[Violation]:
    template = component.template
    violations: list[Violation] = []

    for match in _DISABLED_RE.finditer(template):
        element = match.group(1).lower()
        violations.append(
            _violation(
                Severity.ERROR,
                f"{element.capitalize()} element is disabled and not keyboard "
                "accessible",
                "Remove the disabled attribute or provide a keyboard-accessible "
                "alternative to enable the functionality",
                line=line_of(template, match),
                content=snippet(match.group(0)),
            )
        )

    for match in _INPUT_RE.finditer(template):
        attributes = match.group(1)
        if _POINTER_EVENTS_NONE_RE.search(attributes):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Input element has pointer-events: none, making it not "
                    "keyboard accessible",
                    "Remove pointer-events: none or provide a keyboard-accessible "
                    "alternative",
                    line=line_of(template, match),
                    content=snippet(match.group(0)),
                )
            )
        if _NEGATIVE_TABINDEX_RE.search(attributes) and not _READONLY_RE.search(
            attributes
        ):
            violations.append(
                _violation(
                    Severity.WARNING,
                    'Input has tabindex="-1", removing it from keyboard navigation',
                    'Only use tabindex="-1" for non-interactive elements or '
                    "provide an alternative keyboard path",
                    line=line_of(template, match),
                    content=snippet(match.group(0)),
                )
            )

    for match in _BUTTON_RE.finditer(template):
        attributes = match.group(1)
        if not _MOUSE_HANDLER_RE.search(attributes):
            continue
        if KEYBOARD_HANDLER_RE.search(attributes):
            continue
        # A native button gets keyboard activation for free unless its role
        # has been overridden.
        if _NON_BUTTON_ROLE_RE.search(attributes):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Button with mouse handler but no keyboard handler detected",
                    "Add a @keydown or @keyup handler, or keep the native button "
                    "role",
                    line=line_of(template, match),
                    content=snippet(match.group(0)),
                )
            )

    for match in _POINTER_DIV_RE.finditer(template):
        attributes = match.group(1)
        if KEYBOARD_HANDLER_RE.search(attributes):
            continue
        if _INTERACTIVE_ROLE_RE.search(attributes):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "Interactive div has pointer handlers but no keyboard handlers",
                'Add a @keydown handler or use a native <button>; set role="button" '
                "on custom widgets",
                line=line_of(template, match),
                content=snippet(match.group(0)),
            )
        )

    return violations
