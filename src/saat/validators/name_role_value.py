"""WCAG 4.1.2 Name, Role, Value — accessible names and roles for controls."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import (
    ARIA_LABEL_RE,
    ARIA_LABELLEDBY_RE,
    KEYBOARD_HANDLER_RE,
    ON,
    ViolationFactory,
    element_id,
    has_label_for,
    line_of,
    snippet,
)

RULE_ID = "4.1.2"
_violation = ViolationFactory(RULE_ID)

_BUTTON_RE = re.compile(r"(<button\b[^>]*>)(.*?)</button>", re.IGNORECASE | re.DOTALL)
_TAG_RE = re.compile(r"<[^>]+>")
_BOUND_TEXT_RE = re.compile(r"(?<![\w-])(?:v-text|v-html|title)\s*=", re.IGNORECASE)
_INNER_NAME_RE = re.compile(
    r"<title\b|aria-label\s*=|alt\s*=\s*[\"'][^\"']+[\"']", re.IGNORECASE
)
_SELECT_RE = re.compile(r"<select\b([^>]*)>", re.IGNORECASE)
_SELECT_NAME_RE = re.compile(r"(?<![\w-])name\s*=|aria-label\s*=", re.IGNORECASE)
_CLICKABLE_DIV_RE = re.compile(rf"<div\b[^>]*{ON}click\b[^>]*>", re.IGNORECASE)
_ROLE_RE = re.compile(r"role\s*=", re.IGNORECASE)


def validate(component: NormalizedComponent) -> list[Violation]:
    template = component.template
    violations: list[Violation] = []
    violations.extend(_check_button_names(template))
    violations.extend(_check_select_names(template))
    violations.extend(_check_custom_roles(template))
    return violations


def _check_button_names(template: str) -> list[Violation]:
    violations = []
    for match in _BUTTON_RE.finditer(template):
        opening, body = match.group(1), match.group(2)
        if ARIA_LABEL_RE.search(opening) or ARIA_LABELLEDBY_RE.search(opening):
            continue
        if _BOUND_TEXT_RE.search(opening):
            continue
        if _TAG_RE.sub("", body).strip() or _INNER_NAME_RE.search(body):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "Button has no accessible name",
                "Add visible text content, aria-label, or aria-labelledby to "
                "the button",
                line=line_of(template, match),
                content=snippet(match.group(0), 50),
            )
        )
    return violations


def _check_select_names(template: str) -> list[Violation]:
    violations = []
    for match in _SELECT_RE.finditer(template):
        attributes = match.group(1)
        if _SELECT_NAME_RE.search(attributes):
            continue
        if has_label_for(template, element_id(attributes)):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "Select element has no accessible name",
                "Add a name attribute or associate a label using for/id",
                line=line_of(template, match),
                content=match.group(0),
            )
        )
    return violations


def _check_custom_roles(template: str) -> list[Violation]:
    violations = []
    for match in _CLICKABLE_DIV_RE.finditer(template):
        tag = match.group(0)
        if not _ROLE_RE.search(tag):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Custom interactive element missing role attribute",
                    'Add role="button" or an appropriate role to the div element',
                    line=line_of(template, match),
                    content=snippet(tag, 50),
                )
            )
        if not KEYBOARD_HANDLER_RE.search(tag):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Custom interactive element missing keyboard handlers",
                    "Add a @keydown handler for keyboard accessibility",
                    line=line_of(template, match),
                    content=snippet(tag, 50),
                )
            )
    return violations
