"""WCAG rule catalog — display and lookup data for the 16 supported rules."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class RuleDefinition:
    """Static description of one WCAG success criterion."""

    code: str
    name: str
    level: str
    description: str
    full_description: str


_DEFINITIONS = (
    RuleDefinition(
        code="1.1.1",
        name="Non-text Content",
        level="A",
        description=(
            "All non-text content that is presented to the user has a text "
            "alternative that serves the equivalent purpose."
        ),
        full_description=(
            "Images, icons, and other non-text content must have text "
            "alternatives. This includes alt text for images, captions for "
            "videos, and descriptions for diagrams. Screen readers rely on "
            "text alternatives to convey the content to users with visual "
            "impairments."
        ),
    ),
    RuleDefinition(
        code="1.3.1",
        name="Info and Relationships",
        level="A",
        description=(
            "Information, structure, and relationships conveyed through "
            "presentation can be programmatically determined."
        ),
        full_description=(
            "The structure and relationships in the content must be clear not "
            "just visually but also in the code. Use proper semantic HTML "
            "(headings, lists, tables) so assistive technologies can "
            "understand the content structure."
        ),
    ),
    RuleDefinition(
        code="1.3.2",
        name="Meaningful Sequence",
        level="A",
        description=(
            "When the sequence in which content is presented affects its "
            "meaning, a correct reading sequence can be programmatically "
            "determined."
        ),
        full_description=(
            "The order in which content is read by screen readers (DOM order) "
            "must match the visual and logical sequence. Use CSS flexbox and "
            "grid carefully, as they can change visual order without changing "
            "DOM order."
        ),
    ),
    RuleDefinition(
        code="1.4.1",
        name="Use of Color",
        level="A",
        description=(
            "Color is not used as the only visual means of conveying "
            "information."
        ),
        full_description=(
            "Never rely on color alone to convey information. Always use "
            "additional visual indicators (patterns, icons, text labels) "
            "alongside color, for example an error icon or message next to "
            "red text."
        ),
    ),
    RuleDefinition(
        code="2.1.1",
        name="Keyboard Access",
        level="A",
        description=(
            "All functionality of the content is operable through a keyboard "
            "interface."
        ),
        full_description=(
            "Every interactive element must be accessible via keyboard. Users "
            "must be able to tab to elements, activate them with Enter/Space, "
            "and navigate menus with arrow keys. Avoid click-only "
            "interactions."
        ),
    ),
    RuleDefinition(
        code="2.2.1",
        name="Timing Adjustable",
        level="A",
        description=(
            "For each time limit, provide a mechanism for the user to turn "
            "off, adjust, or extend it."
        ),
        full_description=(
            "If content has time limits (auto-playing carousels, session "
            "timeouts), users must be able to pause, stop, hide, or extend "
            "the time. Real-time content can be exempt."
        ),
    ),
    RuleDefinition(
        code="2.4.1",
        name="Bypass Blocks",
        level="A",
        description=(
            "A mechanism is available to bypass blocks of content that are "
            "repeated on multiple Web pages."
        ),
        full_description=(
            'Provide a "Skip to main content" link at the top of pages. This '
            "allows keyboard and screen reader users to bypass repetitive "
            "navigation elements."
        ),
    ),
    RuleDefinition(
        code="2.4.3",
        name="Focus Order",
        level="A",
        description=(
            "Focusable components receive focus in an order that preserves "
            "meaning and operability."
        ),
        full_description=(
            "The tab order (DOM order) must be logical and match the visual "
            "layout. Use tabindex sparingly; restructure HTML instead. Never "
            "use tabindex with positive values."
        ),
    ),
    RuleDefinition(
        code="2.4.4",
        name="Link Purpose",
        level="A",
        description=(
            "The purpose of each link can be determined from the link text "
            "alone or from the link text together with its context."
        ),
        full_description=(
            'Link text must be descriptive. Avoid "Click here" or "Read '
            'more". Screen reader users often browse by link text alone, so '
            "each link must be understandable without surrounding context."
        ),
    ),
    RuleDefinition(
        code="2.5.1",
        name="Pointer Gestures",
        level="A",
        description=(
            "All functionality that uses multipoint or path-based gestures "
            "can be operated with a single pointer without a path-based "
            "gesture."
        ),
        full_description=(
            "Complex gestures (pinch, swipe, multi-touch) must have "
            "single-pointer alternatives. Users with motor impairments or "
            "using a keyboard cannot perform complex gestures."
        ),
    ),
    RuleDefinition(
        code="3.1.1",
        name="Language of Page",
        level="A",
        description=(
            "The default human language of each Web page can be "
            "programmatically determined."
        ),
        full_description=(
            "Specify the language using the lang attribute on the <html> "
            'element (e.g. lang="fr" for French). This helps screen readers '
            "pronounce text correctly."
        ),
    ),
    RuleDefinition(
        code="3.2.4",
        name="Consistent Identification",
        level="AA",
        description=(
            "Components that have the same functionality are identified "
            "consistently throughout the set of Web pages."
        ),
        full_description=(
            "If a feature appears in multiple places (search button, menu, "
            "etc.), it should look and work the same way everywhere. Users "
            "rely on consistent patterns."
        ),
    ),
    RuleDefinition(
        code="3.3.1",
        name="Error Identification",
        level="A",
        description=(
            "If an input error is automatically detected, the item that is in "
            "error is identified and the error is described to the user in "
            "text."
        ),
        full_description=(
            "When form validation fails, clearly identify which field has the "
            "error and provide a descriptive error message. Use text, not "
            "just color."
        ),
    ),
    RuleDefinition(
        code="3.3.2",
        name="Labels or Instructions",
        level="A",
        description=(
            "Labels or instructions are provided when content requires user "
            "input."
        ),
        full_description=(
            "Form inputs must have associated labels using <label> elements "
            "or aria-label. Never rely on placeholder text alone. Provide "
            "clear instructions for complex inputs."
        ),
    ),
    RuleDefinition(
        code="4.1.2",
        name="Name, Role, Value",
        level="A",
        description=(
            "For all user interface components, the name, role, and current "
            "value can be programmatically determined."
        ),
        full_description=(
            "All interactive components must have an accessible name (visible "
            "text or aria-label), a role (button, link, etc.), and current "
            "state (checked, expanded). Use semantic HTML or ARIA."
        ),
    ),
    RuleDefinition(
        code="4.1.3",
        name="Status Messages",
        level="AA",
        description=(
            "Status messages can be programmatically determined through role "
            "or properties."
        ),
        full_description=(
            "Dynamic status messages (loading, errors, confirmations) must be "
            "announced to screen readers. Use ARIA live regions (aria-live, "
            'role="alert") to announce updates.'
        ),
    ),
)

WCAG_RULES: MappingProxyType[str, RuleDefinition] = MappingProxyType(
    {d.code: d for d in _DEFINITIONS}
)

ALL_RULE_IDS: tuple[str, ...] = tuple(d.code for d in _DEFINITIONS)


def get_rule(rule_id: str) -> RuleDefinition:
    """Look up a rule definition. Raises KeyError for unknown ids."""
    return WCAG_RULES[rule_id]


def rule_name(rule_id: str) -> str:
    """Display name for a rule id, falling back to the id itself."""
    definition = WCAG_RULES.get(rule_id)
    return definition.name if definition else rule_id
