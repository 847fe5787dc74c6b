"""WCAG 2.5.1 Pointer Gestures — gesture handlers without a keyboard alternative."""

from __future__ import annotations

import re

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.validators.base import (
    KEYBOARD_HANDLER_RE,
    ON,
    ViolationFactory,
    enclosing_tag,
    line_of,
    snippet,
)

RULE_ID = "2.5.1"
_violation = ViolationFactory(RULE_ID)

_POINTER_EVENT_RE = re.compile(
    rf"{ON}(pointerdown|pointerup|pointermove|gesturestart|gesturechange|gestureend)\b",
    re.IGNORECASE,
)
_TOUCH_EVENT_RE = re.compile(
    rf"{ON}(touchstart|touchend|touchmove|swipe|tap)\b", re.IGNORECASE
)
_V_TOUCH_RE = re.compile(r"v-touch[:\s=]", re.IGNORECASE)
_CLICK_OR_KEY_RE = re.compile(rf"{ON}(?:key(?:down|up|press)|click)\b", re.IGNORECASE)
_MULTI_TOUCH_RE = re.compile(
    r"double-tap|long-press|pinch-zoom|two-finger", re.IGNORECASE
)


def validate(component: NormalizedComponent) -> list[Violation]:
    template = component.template
    violations: list[Violation] = []

    for kind, regex in (("Pointer", _POINTER_EVENT_RE), ("Touch", _TOUCH_EVENT_RE)):
        for match in regex.finditer(template):
            tag = enclosing_tag(template, match.start())
            if KEYBOARD_HANDLER_RE.search(tag):
                continue
            event = match.group(1)
            violations.append(
                _violation(
                    Severity.ERROR,
                    f"{kind} event @{event} detected without keyboard handler",
                    f"Add a @keydown or @keyup handler as a keyboard alternative "
                    f"for @{event}",
                    line=line_of(template, match),
                    content=snippet(tag),
                )
            )

    for match in _V_TOUCH_RE.finditer(template):
        tag = enclosing_tag(template, match.start())
        if _CLICK_OR_KEY_RE.search(tag):
            continue
        violations.append(
            _violation(
                Severity.ERROR,
                "v-touch directive detected without keyboard handler",
                "Add a @keydown or @keyup handler as a keyboard alternative for "
                "touch gestures",
                line=line_of(template, match),
                content=snippet(tag),
            )
        )

    for match in _MULTI_TOUCH_RE.finditer(template):
        violations.append(
            _violation(
                Severity.WARNING,
                f"Multi-touch gesture pattern detected ({match.group(0)}), verify "
                "keyboard alternative",
                "Ensure all multi-touch gestures have keyboard-accessible "
                "alternatives",
                line=line_of(template, match),
                content=snippet(enclosing_tag(template, match.start())),
            )
        )

    return violations
