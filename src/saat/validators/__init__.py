"""Rule validators, one module per WCAG success criterion."""

from __future__ import annotations

from saat.validators import (
    bypass_blocks,
    consistent_identification,
    error_identification,
    focus_order,
    info_relationships,
    keyboard_access,
    labels_instructions,
    language_of_page,
    link_purpose,
    meaningful_sequence,
    name_role_value,
    non_text_content,
    pointer_gestures,
    status_messages,
    timing,
    use_of_color,
)
from saat.validators.base import Validator

_MODULES = (
    non_text_content,
    info_relationships,
    meaningful_sequence,
    use_of_color,
    keyboard_access,
    timing,
    bypass_blocks,
    focus_order,
    link_purpose,
    pointer_gestures,
    language_of_page,
    consistent_identification,
    error_identification,
    labels_instructions,
    name_role_value,
    status_messages,
)

VALIDATORS: tuple[Validator, ...] = tuple(
    Validator(rule_id=module.RULE_ID, check=module.validate) for module in _MODULES
)

_BY_RULE_ID = {v.rule_id: v for v in VALIDATORS}
assert len(_BY_RULE_ID) == len(VALIDATORS), "duplicate validator rule id"


def get_validator(rule_id: str) -> Validator:
    """Look up the validator for a rule id. Raises KeyError if unknown."""
    return _BY_RULE_ID[rule_id]


__all__ = ["VALIDATORS", "Validator", "get_validator"]
