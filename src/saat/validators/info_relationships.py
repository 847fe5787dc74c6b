"""WCAG 1.3.1 Info and Relationships — labels, list semantics, heading levels."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import (
    ViolationFactory,
    element_id,
    has_label_for,
    line_of,
    snippet,
)

RULE_ID = "1.3.1"
_violation = ViolationFactory(RULE_ID)

_INPUT_RE = re.compile(r"<input\b([^>]*)>", re.IGNORECASE)
_HIDDEN_RE = re.compile(r"type\s*=\s*[\"']hidden[\"']", re.IGNORECASE)
_VFOR_DIV_RE = re.compile(r"<div[^>]*v-for[^>]*>[^<]*</div>")
_HEADING_RE = re.compile(r"<h([1-6])\b[^>]*>", re.IGNORECASE)


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []
    violations.extend(_check_input_labels(component.template))
    violations.extend(_check_list_semantics(component.template))
    violations.extend(_check_heading_hierarchy(component.template))
    return violations


def _check_input_labels(template: str) -> list[Violation]:
    violations = []
    for match in _INPUT_RE.finditer(template):
        attributes = match.group(1)
        if _HIDDEN_RE.search(attributes):
            continue
        input_id = element_id(attributes)
        if not input_id or has_label_for(template, input_id):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                f'Input with id="{input_id}" has no associated label',
                f'Add <label for="{input_id}">Label text</label>',
                line=line_of(template, match),
                content=match.group(0),
            )
        )
    return violations


def _check_list_semantics(template: str) -> list[Violation]:
    # Heuristic: repeated divs that probably render a list.
    return [
        _violation(
            Severity.WARNING,
            "Potential list using div instead of ul/ol/li",
            'Consider using <ul><li v-for="..."> or <ol><li v-for="..."> '
            "for list structures",
            line=line_of(template, match),
            content=snippet(match.group(0), 50) + "...",
        )
        for match in _VFOR_DIV_RE.finditer(template)
    ]


def _check_heading_hierarchy(template: str) -> list[Violation]:
    violations = []
    previous: int | None = None
    for match in _HEADING_RE.finditer(template):
        level = int(match.group(1))
        if previous is not None and level > previous + 1:
            violations.append(
                _violation(
                    Severity.WARNING,
                    f"Heading hierarchy jump from h{previous} to h{level}",
                    f"Use h{previous + 1} instead of h{level} to maintain "
                    "proper hierarchy",
                    line=line_of(template, match),
                    content=f"<h{level}>",
                )
            )
        previous = level
    return violations
