"""WCAG 3.3.2 Labels or Instructions — form controls need labels."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import (
    ARIA_LABEL_RE,
    ARIA_LABELLEDBY_RE,
    ViolationFactory,
    element_id,
    has_label_for,
    line_of,
    snippet,
)

RULE_ID = "3.3.2"
_violation = ViolationFactory(RULE_ID)

_INPUT_RE = re.compile(r"<input\b([^>]*)>", re.IGNORECASE)
_SELECT_RE = re.compile(r"<select\b([^>]*)>", re.IGNORECASE)
_TEXTAREA_RE = re.compile(r"<textarea\b([^>]*)>", re.IGNORECASE)
_FORM_RE = re.compile(r"<form\b([^>]*)>([\s\S]*?)</form>", re.IGNORECASE)
_FIELDSET_RE = re.compile(r"<fieldset", re.IGNORECASE)

_TITLE_RE = re.compile(r"(?<![\w-])title\s*=", re.IGNORECASE)
_NAME_RE = re.compile(r"(?<![\w-])name\s*=", re.IGNORECASE)
_PLACEHOLDER_RE = re.compile(r"placeholder\s*=", re.IGNORECASE)
_SKIPPED_TYPE_RE = re.compile(
    r"type\s*=\s*[\"'](?:hidden|submit|reset|button|image)[\"']", re.IGNORECASE
)

_RECOMMENDATION = (
    'Add a <label for="id"> element or use aria-label/aria-labelledby attributes'
)


def validate(component: NormalizedComponent) -> list[Violation]:
    template = component.template
    violations: list[Violation] = []
    violations.extend(_check_inputs(template))
    violations.extend(_check_unlabelled(template, _SELECT_RE, "Select"))
    violations.extend(_check_unlabelled(template, _TEXTAREA_RE, "Textarea"))
    violations.extend(_check_form_grouping(template))
    return violations


def _has_direct_label(attributes: str, allow_title: bool = False) -> bool:
    if ARIA_LABEL_RE.search(attributes) or ARIA_LABELLEDBY_RE.search(attributes):
        return True
    return allow_title and _TITLE_RE.search(attributes) is not None


def _check_inputs(template: str) -> list[Violation]:
    violations = []
    for match in _INPUT_RE.finditer(template):
        attributes = match.group(1)
        if _SKIPPED_TYPE_RE.search(attributes):
            continue

        labelled = _has_direct_label(attributes, allow_title=True) or has_label_for(
            template, element_id(attributes)
        )
        if labelled:
            continue

        if _NAME_RE.search(attributes):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Input field has no associated label or aria-label",
                    _RECOMMENDATION,
                    line=line_of(template, match),
                    content=snippet(match.group(0)),
                )
            )
        if _PLACEHOLDER_RE.search(attributes):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Placeholder attribute used as substitute for label "
                    "(placeholder disappears on input)",
                    "Add a separate <label> element; use placeholder only as an "
                    "additional hint",
                    line=line_of(template, match),
                    content=snippet(match.group(0)),
                )
            )
    return violations


def _check_unlabelled(
    template: str,
    regex: re.Pattern[str],
    element: str,
) -> list[Violation]:
    violations = []
    for match in regex.finditer(template):
        attributes = match.group(1)
        if _has_direct_label(attributes):
            continue
        if has_label_for(template, element_id(attributes)):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                f"{element} element has no associated label",
                _RECOMMENDATION,
                line=line_of(template, match),
                content=snippet(match.group(0)),
            )
        )
    return violations


def _check_form_grouping(template: str) -> list[Violation]:
    violations = []
    for match in _FORM_RE.finditer(template):
        body = match.group(2)
        inputs = [
            m for m in _INPUT_RE.finditer(body) if not _SKIPPED_TYPE_RE.search(m.group(1))
        ]
        if len(inputs) > 1 and not _FIELDSET_RE.search(body):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Form with multiple inputs lacks fieldset/legend for grouping",
                    "Use <fieldset> with <legend> to group related inputs and "
                    "provide instructions",
                    line=line_of(template, match),
                    content="<form>...</form>",
                )
            )
    return violations
