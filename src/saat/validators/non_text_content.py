"""WCAG 1.1.1 Non-text Content — text alternatives for images, SVGs and icons."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import (
    ARIA_LABEL_RE,
    ARIA_LABELLEDBY_RE,
    ViolationFactory,
    line_of,
    snippet,
)

RULE_ID = "1.1.1"
_violation = ViolationFactory(RULE_ID)

_IMG_RE = re.compile(r"<img\b[^>]*>", re.IGNORECASE)
_ALT_RE = re.compile(r"(?<![\w-])alt\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)
_DECORATIVE_RE = re.compile(
    r"role\s*=\s*[\"'](?:presentation|none)[\"']"
    r"|aria-hidden\s*=\s*[\"']true[\"']",
    re.IGNORECASE,
)
_SVG_RE = re.compile(r"(<svg\b[^>]*>)(.*?)</svg>", re.IGNORECASE | re.DOTALL)
_TITLE_RE = re.compile(r"<title[^>]*>", re.IGNORECASE)
_ICON_BUTTON_RE = re.compile(
    r"<button[^>]*>\s*(?:<svg|<i\s|<Icon|<VIcon)[^<]*"
    r"(?:</svg>|</i>|</Icon>|</VIcon>)?\s*</button>",
    re.IGNORECASE,
)
_TITLE_ATTR_RE = re.compile(r"(?<![\w-])title\s*=", re.IGNORECASE)


def validate(component: NormalizedComponent) -> list[Violation]:
    violations: list[Violation] = []
    violations.extend(_check_images(component.template))
    violations.extend(_check_svgs(component.template))
    violations.extend(_check_icon_buttons(component.template))
    return violations


def _check_images(template: str) -> list[Violation]:
    violations = []
    for match in _IMG_RE.finditer(template):
        tag = match.group(0)
        alt = _ALT_RE.search(tag)
        alt_value = alt.group(1).strip() if alt else ""

        if _DECORATIVE_RE.search(tag):
            if alt_value:
                violations.append(
                    _violation(
                        Severity.WARNING,
                        "Decorative image has non-empty alt text",
                        'Use alt="" for purely decorative images',
                        line=line_of(template, match),
                        content=tag,
                    )
                )
            continue

        if not alt and not ARIA_LABEL_RE.search(tag):
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Image missing alt attribute",
                    'Add descriptive alt text: alt="description of image content"',
                    line=line_of(template, match),
                    content=tag,
                )
            )
        elif alt and not alt_value:
            violations.append(
                _violation(
                    Severity.ERROR,
                    "Image has empty alt attribute",
                    "Provide meaningful alt text or mark the image as decorative "
                    'with role="presentation"',
                    line=line_of(template, match),
                    content=tag,
                )
            )
    return violations


def _check_svgs(template: str) -> list[Violation]:
    violations = []
    for match in _SVG_RE.finditer(template):
        opening, body = match.group(1), match.group(2)
        if _DECORATIVE_RE.search(opening):
            continue
        if (
            _TITLE_RE.search(body)
            or ARIA_LABEL_RE.search(opening)
            or ARIA_LABELLEDBY_RE.search(opening)
        ):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "SVG missing accessible name",
                "Add a <title> element inside the SVG or an aria-label attribute",
                line=line_of(template, match),
                content=snippet(match.group(0), 50) + "...",
            )
        )
    return violations


def _check_icon_buttons(template: str) -> list[Violation]:
    violations = []
    for match in _ICON_BUTTON_RE.finditer(template):
        button = match.group(0)
        if ARIA_LABEL_RE.search(button) or ARIA_LABELLEDBY_RE.search(button):
            continue
        if _TITLE_RE.search(button) or _TITLE_ATTR_RE.search(button):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "Icon-only button missing accessible name",
                'Add aria-label="button description" to the button element',
                line=line_of(template, match),
                content=snippet(button, 50),
            )
        )
    return violations
