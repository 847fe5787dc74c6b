"""WCAG 3.1.1 Language of Page — a valid lang attribute on <html>."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.core.parser import extract_elements
from saat.validators.base import ViolationFactory

RULE_ID = "3.1.1"
_violation = ViolationFactory(RULE_ID)

_LANG_CODE_RE = re.compile(r"^[a-z]{2}(?:-[a-z]{2})?$", re.IGNORECASE)


def validate(component: NormalizedComponent) -> list[Violation]:
    html = next(
        (
            element
            for element in extract_elements(component.template, "html")
            if element["attributes"].get("lang") is not None
        ),
        None,
    )

    if html is None:
        return [
            _violation(
                Severity.ERROR,
                "HTML element lacks lang attribute.",
                'Add lang="en" or the appropriate language code to the <html> '
                "element",
            )
        ]

    value = html["attributes"]["lang"].strip()
    if not _LANG_CODE_RE.match(value):
        return [
            _violation(
                Severity.ERROR,
                f'Invalid lang value: "{value}".',
                'Use a code like "fr", "en-US", or "de-CH"',
                line=html["line"],
                content=html["content"],
            )
        ]
    return []
