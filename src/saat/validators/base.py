"""Validator contract and shared regex helpers for rule checks."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from saat.core.models import NormalizedComponent, Severity, Violation
from saat.core.parser import line_at
from saat.core.rules import rule_name

# Vue event binding prefix: @click or v-on:click
ON = r"(?:@|v-on:)"

KEYBOARD_HANDLER_RE = re.compile(rf"{ON}key(?:down|up|press)\b", re.IGNORECASE)
ARIA_LABEL_RE = re.compile(r"aria-label\s*=", re.IGNORECASE)
ARIA_LABELLEDBY_RE = re.compile(r"aria-labelledby\s*=", re.IGNORECASE)
ID_RE = re.compile(r"(?<![\w:-])id\s*=\s*[\"']([^\"']*)[\"']", re.IGNORECASE)

CONTENT_LIMIT = 60


@dataclass(frozen=True)
class Validator:
    """A rule id bound to its check function."""

    rule_id: str
    check: Callable[[NormalizedComponent], list[Violation]]

    @property
    def rule_name(self) -> str:
        return rule_name(self.rule_id)

    def validate(self, component: NormalizedComponent) -> list[Violation]:
        return list(self.check(component))


class ViolationFactory:
    """Builds violations stamped with one rule's id and name."""

    def __init__(self, rule_id: str) -> None:
        self.rule_id = rule_id
        self.rule_name = rule_name(rule_id)

    def __call__(
        self,
        severity: Severity,
        issue: str,
        recommendation: str,
        line: int | None = None,
        content: str | None = None,
    ) -> Violation:
        return Violation(
            rule_id=self.rule_id,
            rule_name=self.rule_name,
            severity=severity,
            issue=issue,
            recommendation=recommendation,
            line=line,
            content=content,
        )


def snippet(text: str, limit: int = CONTENT_LIMIT) -> str:
    """Trim a matched fragment for display."""
    return text.strip()[:limit]


def numbered_lines(text: str) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, line) pairs."""
    return enumerate(text.split("\n"), start=1)


def enclosing_tag(template: str, index: int) -> str:
    """The opening tag surrounding a character offset."""
    start = template.rfind("<", 0, index)
    end = template.find(">", index)
    if start == -1:
        start = 0
    end = len(template) if end == -1 else end + 1
    return template[start:end]


def has_label_for(template: str, element_id: str) -> bool:
    """Whether a <label for="..."> points at the given id."""
    if not element_id:
        return False
    pattern = re.compile(
        rf"<label\b[^>]*\bfor\s*=\s*[\"']{re.escape(element_id)}[\"']",
        re.IGNORECASE,
    )
    return pattern.search(template) is not None


def element_id(attributes: str) -> str:
    match = ID_RE.search(attributes)
    return match.group(1) if match else ""


def line_of(text: str, match: re.Match[str]) -> int:
    return line_at(text, match.start())
