"""WCAG 3.3.1 Error Identification — invalid fields must be described in text."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory

RULE_ID = "3.3.1"
_violation = ViolationFactory(RULE_ID)

# Lines (including the flagged one) searched for an error message.
ERROR_TEXT_WINDOW = 3

_ARIA_INVALID_TRUE_RE = re.compile(r"aria-invalid\s*=\s*[\"']true[\"']")
_ARIA_INVALID_ATTR_RE = re.compile(r"aria-invalid\s*=\s*[\"'][^\"']*[\"']")
_ERROR_TEXT_RE = re.compile(r"error|invalid|required|incorrect", re.IGNORECASE)
_ERROR_CLASS_RE = re.compile(
    r"<(?:input|select|textarea)\b[^>]*class\s*=\s*[\"'][^\"']*"
    r"(?:error|invalid|has-error)",
    re.IGNORECASE,
)
_INVALID_INPUT_RE = re.compile(r"<input\b[^>]*aria-invalid\s*=\s*[\"']true[\"']")
_DESCRIBED_RE = re.compile(r"aria-describedby\s*=|aria-errormessage\s*=")


def validate(component: NormalizedComponent) -> list[Violation]:
    lines = component.template.split("\n")
    violations: list[Violation] = []
    violations.extend(_check_missing_message(lines))
    violations.extend(_check_missing_aria_invalid(lines))
    violations.extend(_check_missing_connection(lines))
    return violations


def _check_missing_message(lines: list[str]) -> list[Violation]:
    violations = []
    for idx, line in enumerate(lines):
        if not _ARIA_INVALID_TRUE_RE.search(line):
            continue
        context = " ".join(lines[idx : idx + ERROR_TEXT_WINDOW])
        # The aria-invalid attribute itself does not count as error text.
        context = _ARIA_INVALID_ATTR_RE.sub("", context)
        if _ERROR_TEXT_RE.search(context):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                'Field marked as invalid (aria-invalid="true") but no error '
                "message found.",
                "Add descriptive error text next to the field",
                line=idx + 1,
                content=line.strip(),
            )
        )
    return violations


def _check_missing_aria_invalid(lines: list[str]) -> list[Violation]:
    violations = []
    for idx, line in enumerate(lines):
        if _ERROR_CLASS_RE.search(line) and "aria-invalid" not in line:
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Form field has error styling but lacks aria-invalid.",
                    'Add aria-invalid="true" for screen reader users',
                    line=idx + 1,
                    content=line.strip(),
                )
            )
    return violations


def _check_missing_connection(lines: list[str]) -> list[Violation]:
    violations = []
    for idx, line in enumerate(lines):
        if _INVALID_INPUT_RE.search(line) and not _DESCRIBED_RE.search(line):
            violations.append(
                _violation(
                    Severity.WARNING,
                    "Input field marked invalid but lacks aria-describedby "
                    "linking to the error message.",
                    'Add aria-describedby="error-id" pointing at the message',
                    line=idx + 1,
                    content=line.strip(),
                )
            )
    return violations
