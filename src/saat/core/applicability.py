"""Applicability filter — which rules apply to which kind of component."""

from __future__ import annotations

import enum
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import PurePath


class ComponentType(enum.Enum):
    """Coarse component role, inferred from naming conventions."""

    PAGE = "Page"
    SECTION = "Section"
    ITEM = "Item"
    MODAL = "Modal"
    COMPONENT = "Component"


ALL_COMPONENT_TYPES: tuple[ComponentType, ...] = tuple(ComponentType)

# Rules that only make sense for a whole document
PAGE_LEVEL_RULES = frozenset({"2.4.1", "3.1.1"})
_PAGE_LEVEL_TYPES = frozenset({ComponentType.PAGE, ComponentType.SECTION})

# Checked in order against the component name
_NAME_PATTERNS = (
    (re.compile(r"^Page[A-Z0-9_]|Page$"), ComponentType.PAGE),
    (re.compile(r"Section$"), ComponentType.SECTION),
    (re.compile(r"(?:Item|Card)$"), ComponentType.ITEM),
    (re.compile(r"(?:Modal|Dialog)$"), ComponentType.MODAL),
)

_DIRECTORY_TYPES = {
    "pages": ComponentType.PAGE,
    "views": ComponentType.PAGE,
    "sections": ComponentType.SECTION,
    "items": ComponentType.ITEM,
    "modals": ComponentType.MODAL,
}


@dataclass(frozen=True)
class Applicability:
    """Configured rules split into those to run and those to skip."""

    evaluate: tuple[str, ...]
    not_applicable: tuple[str, ...]


def parse_component_type(value: str) -> ComponentType:
    """Case-insensitive lookup by type name. Raises ValueError if unknown."""
    for member in ComponentType:
        if member.value.lower() == value.strip().lower():
            return member
    raise ValueError(f"Unknown component type: {value!r}")


def infer_component_type(name: str, path: str = "") -> ComponentType:
    """Infer a component's type from its name, then its parent directories."""
    for pattern, component_type in _NAME_PATTERNS:
        if pattern.search(name):
            return component_type

    if path:
        # Nearest directory wins
        for part in reversed(PurePath(path).parent.parts):
            component_type = _DIRECTORY_TYPES.get(part.lower())
            if component_type is not None:
                return component_type

    return ComponentType.COMPONENT


def is_rule_applicable(rule_id: str, component_type: ComponentType) -> bool:
    if rule_id in PAGE_LEVEL_RULES:
        return component_type in _PAGE_LEVEL_TYPES
    return True


def resolve_applicability(
    component_type: ComponentType,
    rules: Sequence[str],
    allowed_types: Iterable[ComponentType] = ALL_COMPONENT_TYPES,
) -> Applicability:
    """Split ``rules`` for one component, preserving configured order.

    When ``component_type`` is outside ``allowed_types`` every rule is
    not applicable. No rule is ever dropped.
    """
    if component_type not in set(allowed_types):
        return Applicability(evaluate=(), not_applicable=tuple(rules))

    evaluate = tuple(r for r in rules if is_rule_applicable(r, component_type))
    skipped = tuple(r for r in rules if not is_rule_applicable(r, component_type))
    return Applicability(evaluate=evaluate, not_applicable=skipped)
