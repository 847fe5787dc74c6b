"""WCAG 2.4.4 Link Purpose — generic, empty and image-only links."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import ViolationFactory, numbered_lines

RULE_ID = "2.4.4"
_violation = ViolationFactory(RULE_ID)

GENERIC_LINK_TEXTS = frozenset(
    {
        "click here",
        "click",
        "read more",
        "learn more",
        "more",
        "more info",
        "details",
        "link",
        "go",
        "here",
        "next",
        "previous",
        ">>>",
        "<<<",
        ">>",
        "<<",
    }
)
# Phrases that stay generic even inside a longer sentence.
_GENERIC_PHRASES = ("click here", "read more")

_LINK_TEXT_RE = re.compile(r"<a\b[^>]*\bhref[^>]*>([^<]*)</a>", re.IGNORECASE)
_EMPTY_LINK_RE = re.compile(r"<a\b[^>]*\bhref[^>]*>\s*</a>", re.IGNORECASE)
_ACCESSIBLE_NAME_RE = re.compile(r"aria-label|title|aria-labelledby", re.IGNORECASE)
_IMAGE_LINK_RE = re.compile(r"<a\b[^>]*>\s*<img\b[^>]*>\s*</a>", re.IGNORECASE)
_ALT_RE = re.compile(r"alt\s*=\s*[\"'][^\"']+[\"']")
_ARIA_LABEL_VALUE_RE = re.compile(r"aria-label\s*=\s*[\"'][^\"']+[\"']")


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []
    violations.extend(_check_generic_text(component.template))
    violations.extend(_check_empty_links(component.template))
    violations.extend(_check_image_links(component.template))
    return violations


def is_generic_link_text(text: str) -> bool:
    normalized = " ".join(text.lower().split()).strip(" .:!")
    if not normalized:
        return False
    if normalized in GENERIC_LINK_TEXTS:
        return True
    return any(phrase in normalized for phrase in _GENERIC_PHRASES)


def _check_generic_text(template: str) -> list[Violation]:
    violations = []
    for line_num, line in numbered_lines(template):
        for match in _LINK_TEXT_RE.finditer(line):
            text = match.group(1).strip()
            if not is_generic_link_text(text):
                continue
            violations.append(
                _violation(
                    Severity.ERROR,
                    f'Generic link text detected: "{text.lower()}".',
                    "Use descriptive text that explains the link destination",
                    line=line_num,
                    content=line.strip(),
                )
            )
    return violations


def _check_empty_links(template: str) -> list[Violation]:
    violations = []
    for line_num, line in numbered_lines(template):
        if _EMPTY_LINK_RE.search(line) and not _ACCESSIBLE_NAME_RE.search(line):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Empty link with no text or aria-label.",
                    "Add descriptive link text or an aria-label attribute",
                    line=line_num,
                    content=line.strip(),
                )
            )
    return violations


def _check_image_links(template: str) -> list[Violation]:
    violations = []
    for line_num, line in numbered_lines(template):
        if not _IMAGE_LINK_RE.search(line):
            continue
        if _ALT_RE.search(line) or _ARIA_LABEL_VALUE_RE.search(line):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "Link contains only an image without alt text or aria-label.",
                "Add descriptive alt text to the image",
                line=line_num,
                content=line.strip(),
            )
        )
    return violations
