"""Tests for the per-rule validators."""

from __future__ import annotations

import pytest

from saat.core.models import Severity
from saat.validators import (
    VALIDATORS,
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
from saat.validators.link_purpose import is_generic_link_text

KITCHEN_SINK = """<div class="page">
  <img src="hero.png">
  <svg viewBox="0 0 10 10"><path d="M0 0"/></svg>
  <input id="email" name="email" placeholder="Email">
  <div v-for="item in items" :key="item.id">{{ item }}</div>
  <h1>Title</h1>
  <h4>Sub</h4>
  <div style="order: 2" class="status-error" />
  <div @click="open">Open</div>
  <span tabindex="3">x</span>
  <a href="/more">Read more</a>
  <div @touchstart="swipe">Swipe</div>
  <button @click="save">Save</button>
  <button @click="save">Store</button>
  <input aria-invalid="true" class="has-error">
  <select v-model="country"></select>
  <div class="toast">{{ message }}</div>
</div>"""


class TestNonTextContent:
    def test_image_without_alt(self, make_component):
        violations = non_text_content.validate(make_component('<img src="logo.png">'))
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR
        assert violations[0].rule_id == "1.1.1"
        assert "missing alt" in violations[0].issue
        assert violations[0].line == 1

    def test_decorative_image_with_empty_alt(self, make_component):
        for marker in ('role="presentation"', 'aria-hidden="true"', 'role="none"'):
            component = make_component(f'<img src="divider.png" alt="" {marker}>')
            assert non_text_content.validate(component) == []

    def test_decorative_image_with_alt_text(self, make_component):
        component = make_component('<img src="x.png" alt="Swirl" role="presentation">')
        violations = non_text_content.validate(component)
        assert [v.severity for v in violations] == [Severity.WARNING]

    def test_empty_alt_on_meaningful_image(self, make_component):
        violations = non_text_content.validate(make_component('<img src="x.png" alt="">'))
        assert len(violations) == 1
        assert "empty alt" in violations[0].issue

    def test_aria_label_instead_of_alt(self, make_component):
        component = make_component('<img src="x.png" aria-label="Company logo">')
        assert non_text_content.validate(component) == []

    def test_svg_without_name(self, make_component):
        component = make_component('<svg viewBox="0 0 10 10"><path d="M0 0"/></svg>')
        violations = non_text_content.validate(component)
        assert len(violations) == 1
        assert "SVG" in violations[0].issue

    def test_svg_with_title_or_hidden(self, make_component):
        titled = make_component("<svg><title>Chart</title><path/></svg>")
        hidden = make_component('<svg aria-hidden="true"><path/></svg>')
        assert non_text_content.validate(titled) == []
        assert non_text_content.validate(hidden) == []

    def test_icon_only_button(self, make_component):
        component = make_component('<button @click="close"><i class="icon-close"></i></button>')
        violations = non_text_content.validate(component)
        assert len(violations) == 1
        assert "Icon-only button" in violations[0].issue

    def test_icon_button_with_label(self, make_component):
        component = make_component(
            '<button aria-label="Close"><i class="icon-close"></i></button>'
        )
        assert non_text_content.validate(component) == []


class TestInfoRelationships:
    def test_input_without_label(self, make_component):
        violations = info_relationships.validate(make_component('<input id="email" type="email">'))
        assert len(violations) == 1
        assert 'id="email"' in violations[0].issue

    def test_input_with_label(self, make_component):
        component = make_component(
            '<label for="email">Email</label>\n<input id="email" type="email">'
        )
        assert info_relationships.validate(component) == []

    def test_hidden_input_skipped(self, make_component):
        component = make_component('<input type="hidden" id="token">')
        assert info_relationships.validate(component) == []

    def test_div_list(self, make_component):
        component = make_component('<div v-for="item in items" :key="item.id">{{ item.name }}</div>')
        violations = info_relationships.validate(component)
        assert [v.severity for v in violations] == [Severity.WARNING]

    def test_heading_jump(self, make_component):
        component = make_component("<h1>Title</h1>\n<h3>Sub</h3>")
        violations = info_relationships.validate(component)
        assert len(violations) == 1
        assert "h1 to h3" in violations[0].issue
        assert violations[0].line == 2

    def test_sequential_headings(self, make_component):
        component = make_component("<h1>A</h1><h2>B</h2><h3>C</h3><h2>D</h2>")
        assert info_relationships.validate(component) == []


class TestMeaningfulSequence:
    def test_css_order(self, make_component):
        violations = meaningful_sequence.validate(make_component('<div style="order: 2">x</div>'))
        assert len(violations) == 1
        assert "order" in violations[0].issue

    def test_order_zero_and_border_ignored(self, make_component):
        component = make_component(
            '<div style="order: 0">x</div>\n<div style="border: 1px solid">y</div>'
        )
        assert meaningful_sequence.validate(component) == []

    def test_grid_placement(self, make_component):
        component = make_component('<div style="grid-column: 1 / 3">x</div>')
        assert len(meaningful_sequence.validate(component)) == 1

    def test_grid_gap_ignored(self, make_component):
        component = make_component('<div style="grid-column-gap: 4px">x</div>')
        assert meaningful_sequence.validate(component) == []

    def test_flex_reverse(self, make_component):
        component = make_component('<div class="flex flex-row-reverse">x</div>')
        violations = meaningful_sequence.validate(component)
        assert len(violations) == 1
        assert "reverse" in violations[0].issue


class TestUseOfColor:
    def test_colour_only_state(self, make_component):
        component = make_component('<span class="dot status-success" />')
        violations = use_of_color.validate(component)
        assert [v.severity for v in violations] == [Severity.WARNING]

    def test_state_with_text(self, make_component):
        component = make_component('<span class="status-success">Saved</span>')
        assert use_of_color.validate(component) == []

    def test_state_with_aria_label(self, make_component):
        component = make_component('<span class="status-error" aria-label="Failed" />')
        assert use_of_color.validate(component) == []

    def test_colour_only_link(self, make_component):
        component = make_component(
            '<a href="/docs" class="link-primary" style="text-decoration: none">Docs</a>'
        )
        violations = use_of_color.validate(component)
        assert len(violations) == 1
        assert "Link" in violations[0].issue


class TestKeyboardAccess:
    def test_disabled_button(self, make_component):
        violations = keyboard_access.validate(make_component("<button disabled>Send</button>"))
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR
        assert violations[0].issue.startswith("Button element is disabled")

    def test_pointer_events_none(self, make_component):
        component = make_component('<input type="text" style="pointer-events: none">')
        violations = keyboard_access.validate(component)
        assert len(violations) == 1
        assert "pointer-events" in violations[0].issue

    def test_input_negative_tabindex(self, make_component):
        violations = keyboard_access.validate(make_component('<input type="text" tabindex="-1">'))
        assert [v.severity for v in violations] == [Severity.WARNING]

    def test_readonly_input_negative_tabindex_allowed(self, make_component):
        component = make_component('<input type="text" tabindex="-1" readonly>')
        assert keyboard_access.validate(component) == []

    def test_clickable_div(self, make_component):
        violations = keyboard_access.validate(make_component('<div @click="open">Open</div>'))
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR

    def test_clickable_div_with_keyboard_support(self, make_component):
        component = make_component(
            '<div @click="open" @keydown.enter="open" role="button" tabindex="0">Open</div>'
        )
        assert keyboard_access.validate(component) == []

    def test_native_button_with_click(self, make_component):
        assert keyboard_access.validate(make_component('<button @click="go">Go</button>')) == []

    def test_button_with_overridden_role(self, make_component):
        component = make_component('<button @click="go" role="link">Go</button>')
        violations = keyboard_access.validate(component)
        assert [v.severity for v in violations] == [Severity.WARNING]


class TestTiming:
    def test_auto_logout(self, make_component):
        component = make_component(script="setTimeout(() => logout(), 900000)")
        violations = timing.validate(component)
        assert len(violations) == 1
        assert "auto-logout" in violations[0].issue
        assert violations[0].line == 1

    def test_timed_redirect(self, make_component):
        component = make_component(script="setTimeout(() => router.push('/home'), 2000)")
        violations = timing.validate(component)
        assert len(violations) == 1
        assert "redirect" in violations[0].issue

    def test_short_timeout_before_dismiss(self, make_component):
        component = make_component(script="setTimeout(() => closeModal(), 300)")
        issues = [v.issue for v in timing.validate(component)]
        assert len(issues) == 2
        assert any("dismissed automatically" in i for i in issues)
        assert any("300ms" in i for i in issues)

    def test_only_script_is_inspected(self, make_component):
        component = make_component(template="<p>setTimeout(() => logout(), 1000)</p>")
        assert timing.validate(component) == []

    def test_plain_timer(self, make_component):
        component = make_component(script="setInterval(() => tick(), 250)")
        assert timing.validate(component) == []


class TestBypassBlocks:
    def test_main_landmark(self, make_component):
        component = make_component("<header>Shop</header><main><p>x</p></main>")
        assert bypass_blocks.validate(component) == []
        component = make_component('<nav>Menu</nav><div role="main">x</div>')
        assert bypass_blocks.validate(component) == []

    def test_skip_link(self, make_component):
        component = make_component(
            '<a href="#content">Skip to content</a><div role="navigation">x</div>'
        )
        assert bypass_blocks.validate(component) == []

    def test_missing_landmark(self, make_component):
        violations = bypass_blocks.validate(make_component("<div><nav>x</nav></div>"))
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR
        assert violations[0].line is None

    def test_missing_navigation_is_warning(self, make_component):
        violations = bypass_blocks.validate(make_component("<main><p>x</p></main>"))
        assert [(v.severity, v.issue) for v in violations] == [
            (Severity.WARNING, "No navigation landmark found")
        ]

    def test_missing_both(self, make_component):
        violations = bypass_blocks.validate(make_component("<div>x</div>"))
        assert [v.severity for v in violations] == [Severity.ERROR, Severity.WARNING]


class TestFocusOrder:
    def test_negative_tabindex(self, make_component):
        violations = focus_order.validate(make_component('<div tabindex="-1">x</div>'))
        assert [v.severity for v in violations] == [Severity.WARNING]

    def test_positive_tabindex(self, make_component):
        violations = focus_order.validate(make_component('<button tabindex="3">x</button>'))
        assert [v.severity for v in violations] == [Severity.ERROR]

    def test_zero_tabindex(self, make_component):
        assert focus_order.validate(make_component('<div tabindex="0">x</div>')) == []

    def test_clickable_span(self, make_component):
        violations = focus_order.validate(make_component('<span @click="toggle">More</span>'))
        assert len(violations) == 1
        assert "lacks tabindex" in violations[0].issue

    def test_clickable_span_with_role(self, make_component):
        component = make_component('<span @click="toggle" role="button" tabindex="0">More</span>')
        assert focus_order.validate(component) == []


class TestLinkPurpose:
    @pytest.mark.parametrize(
        "text", ["Click here", "here", "Read more", "Read more about pricing", "More."]
    )
    def test_generic_texts(self, text):
        assert is_generic_link_text(text)

    @pytest.mark.parametrize("text", ["View pricing plans", "Where to buy", "Gothenburg", ""])
    def test_descriptive_texts(self, text):
        assert not is_generic_link_text(text)

    def test_generic_link(self, make_component):
        violations = link_purpose.validate(make_component('<a href="/docs">Click here</a>'))
        assert len(violations) == 1
        assert '"click here"' in violations[0].issue

    def test_descriptive_link(self, make_component):
        component = make_component('<a href="/pricing">View pricing plans</a>')
        assert link_purpose.validate(component) == []

    def test_empty_link(self, make_component):
        violations = link_purpose.validate(make_component('<a href="/home"></a>'))
        assert len(violations) == 1
        assert "Empty link" in violations[0].issue

    def test_empty_link_with_label(self, make_component):
        component = make_component('<a href="/home" aria-label="Home"></a>')
        assert link_purpose.validate(component) == []

    def test_image_only_link(self, make_component):
        violations = link_purpose.validate(make_component('<a href="/"><img src="logo.png"></a>'))
        assert len(violations) == 1
        assert "only an image" in violations[0].issue

    def test_image_link_with_alt(self, make_component):
        component = make_component('<a href="/"><img src="logo.png" alt="Home"></a>')
        assert link_purpose.validate(component) == []


class TestPointerGestures:
    def test_touch_handler_without_keyboard(self, make_component):
        violations = pointer_gestures.validate(make_component('<div @touchstart="onTouch">x</div>'))
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR
        assert "@touchstart" in violations[0].issue

    def test_pointer_handler_with_keyboard(self, make_component):
        component = make_component('<div @pointerdown="drag" @keydown="move">x</div>')
        assert pointer_gestures.validate(component) == []

    def test_v_touch(self, make_component):
        violations = pointer_gestures.validate(make_component('<div v-touch:swipe="next">x</div>'))
        assert len(violations) == 1
        assert "v-touch" in violations[0].issue

    def test_v_touch_with_click(self, make_component):
        component = make_component('<div v-touch:swipe="next" @click="next">x</div>')
        assert pointer_gestures.validate(component) == []

    def test_multi_touch_marker(self, make_component):
        violations = pointer_gestures.validate(make_component('<div class="double-tap-zone">x</div>'))
        assert [v.severity for v in violations] == [Severity.WARNING]


class TestLanguageOfPage:
    def test_valid_lang(self, make_component):
        assert language_of_page.validate(make_component('<html lang="en"><body/></html>')) == []
        assert language_of_page.validate(make_component('<html lang="en-US">')) == []

    def test_missing_lang(self, make_component):
        violations = language_of_page.validate(make_component("<div>content</div>"))
        assert len(violations) == 1
        assert "lacks lang" in violations[0].issue

    def test_invalid_lang(self, make_component):
        violations = language_of_page.validate(make_component('<html lang="english">'))
        assert len(violations) == 1
        assert 'Invalid lang value: "english"' in violations[0].issue
        assert violations[0].line == 1


class TestConsistentIdentification:
    def test_differing_save_labels(self, make_component):
        component = make_component(
            "<div>\n"
            '  <button @click="save">Save</button>\n'
            '  <button @click="save">Save changes</button>\n'
            "</div>"
        )
        violations = consistent_identification.validate(component)
        assert len(violations) == 1
        violation = violations[0]
        assert violation.severity == Severity.WARNING
        assert '"Save"' in violation.issue
        assert '"Save changes"' in violation.issue
        assert "line 2" in violation.issue
        assert "line 3" in violation.issue
        assert violation.line == 3

    def test_same_labels(self, make_component):
        component = make_component("<button>Save</button>\n<button>Save</button>")
        assert consistent_identification.validate(component) == []

    def test_synonyms_map_to_one_action(self, make_component):
        component = make_component('<button>Delete</button>\n<a href="#">Remove</a>')
        violations = consistent_identification.validate(component)
        assert len(violations) == 1
        assert '"delete" action' in violations[0].issue

    def test_unrelated_labels(self, make_component):
        component = make_component("<button>Save</button>\n<button>Delete</button>")
        assert consistent_identification.validate(component) == []

    def test_inconsistent_icons(self, make_component):
        component = make_component(
            '<button><i class="icon-close"></i></button>\n'
            '<button><i class="mdi-cancel"></i></button>'
        )
        violations = consistent_identification.validate(component)
        assert len(violations) == 1
        assert "Inconsistent icon" in violations[0].issue
        assert '"icon-close"' in violations[0].issue

    def test_state_is_per_invocation(self, make_component):
        first = make_component("<button>Save</button>")
        second = make_component("<button>Save changes</button>")
        assert consistent_identification.validate(first) == []
        assert consistent_identification.validate(second) == []

    def test_canonical_action(self):
        assert consistent_identification.canonical_action("  Save   Changes ") == "save"
        assert consistent_identification.canonical_action("Publish") is None


class TestErrorIdentification:
    def test_invalid_without_message(self, make_component):
        component = make_component('<input aria-invalid="true" id="email">')
        violations = error_identification.validate(component)
        assert [v.severity for v in violations] == [Severity.ERROR, Severity.WARNING]
        assert "no error message" in violations[0].issue

    def test_invalid_with_connected_message(self, make_component):
        component = make_component(
            '<input aria-invalid="true" aria-describedby="email-error" id="email">\n'
            '<span id="email-error">Email is required</span>'
        )
        assert error_identification.validate(component) == []

    def test_error_styling_without_aria_invalid(self, make_component):
        component = make_component('<input class="form-control is-invalid">')
        violations = error_identification.validate(component)
        assert len(violations) == 1
        assert "lacks aria-invalid" in violations[0].issue


class TestLabelsInstructions:
    def test_named_input_without_label(self, make_component):
        violations = labels_instructions.validate(make_component('<input name="email" type="email">'))
        assert len(violations) == 1
        assert violations[0].severity == Severity.ERROR

    def test_placeholder_only(self, make_component):
        violations = labels_instructions.validate(make_component('<input placeholder="Search">'))
        assert [v.severity for v in violations] == [Severity.WARNING]

    def test_named_input_with_placeholder(self, make_component):
        violations = labels_instructions.validate(
            make_component('<input name="q" placeholder="Search">')
        )
        assert [v.severity for v in violations] == [Severity.ERROR, Severity.WARNING]

    def test_labelled_inputs(self, make_component):
        component = make_component(
            '<input name="email" aria-label="Email">\n'
            '<label for="pw">Password</label><input id="pw" name="password">'
        )
        assert labels_instructions.validate(component) == []

    def test_submit_input_skipped(self, make_component):
        assert labels_instructions.validate(make_component('<input type="submit" name="go">')) == []

    def test_unlabelled_select_and_textarea(self, make_component):
        component = make_component(
            '<select v-model="country"></select>\n<textarea name="bio"></textarea>'
        )
        issues = [v.issue for v in labels_instructions.validate(component)]
        assert issues == [
            "Select element has no associated label",
            "Textarea element has no associated label",
        ]

    def test_form_without_fieldset(self, make_component):
        component = make_component(
            "<form>\n"
            '  <input id="a" aria-label="First name">\n'
            '  <input id="b" aria-label="Last name">\n'
            '  <button type="submit">Send</button>\n'
            "</form>"
        )
        violations = labels_instructions.validate(component)
        assert len(violations) == 1
        assert "fieldset" in violations[0].issue

    def test_form_with_fieldset(self, make_component):
        component = make_component(
            "<form><fieldset><legend>Name</legend>"
            '<input aria-label="First"><input aria-label="Last">'
            "</fieldset></form>"
        )
        assert labels_instructions.validate(component) == []


class TestNameRoleValue:
    def test_button_without_name(self, make_component):
        violations = name_role_value.validate(make_component('<button @click="close"></button>'))
        assert len(violations) == 1
        assert "no accessible name" in violations[0].issue

    def test_svg_only_button(self, make_component):
        component = make_component('<button><svg><path d="M0 0"/></svg></button>')
        assert len(name_role_value.validate(component)) == 1

    @pytest.mark.parametrize(
        "markup",
        [
            "<button>Save</button>",
            '<button aria-label="Close"><svg/></button>',
            '<button><img src="x.png" alt="Delete"></button>',
            '<button title="Refresh"><i class="icon"></i></button>',
            "<button><span>Next</span></button>",
        ],
    )
    def test_named_buttons(self, make_component, markup):
        assert name_role_value.validate(make_component(markup)) == []

    def test_select_without_name(self, make_component):
        violations = name_role_value.validate(make_component('<select v-model="x"></select>'))
        assert len(violations) == 1
        assert "Select" in violations[0].issue

    def test_select_with_name(self, make_component):
        assert name_role_value.validate(make_component('<select name="country"></select>')) == []

    def test_clickable_div(self, make_component):
        violations = name_role_value.validate(make_component('<div @click="open">Open</div>'))
        assert [v.severity for v in violations] == [Severity.ERROR, Severity.WARNING]

    def test_accessible_custom_control(self, make_component):
        component = make_component(
            '<div @click="open" role="button" @keydown.enter="open">Open</div>'
        )
        assert name_role_value.validate(component) == []


class TestStatusMessages:
    @pytest.mark.parametrize(
        "markup",
        [
            '<div class="alert alert-danger">{{ msg }}</div>',
            '<p class="message-text">{{ msg }}</p>',
            '<div role="status">{{ msg }}</div>',
            '<span id="toast">Saved</span>',
        ],
    )
    def test_status_without_live_region(self, make_component, markup):
        violations = status_messages.validate(make_component(markup))
        assert [v.severity for v in violations] == [Severity.ERROR]

    @pytest.mark.parametrize(
        "markup",
        [
            '<div class="toast" aria-live="polite">{{ msg }}</div>',
            '<div role="alert" aria-live="assertive">{{ msg }}</div>',
            '<div class="card">{{ msg }}</div>',
        ],
    )
    def test_announced_or_unrelated(self, make_component, markup):
        assert status_messages.validate(make_component(markup)) == []

    def test_live_off_on_reactive_element(self, make_component):
        component = make_component('<div aria-live="off" v-if="loading">Loading</div>')
        violations = status_messages.validate(component)
        assert [v.severity for v in violations] == [Severity.WARNING]


class TestValidatorContract:
    @pytest.mark.parametrize("validator", VALIDATORS, ids=lambda v: v.rule_id)
    def test_idempotent(self, make_component, validator):
        component = make_component(KITCHEN_SINK, script="setTimeout(() => logout(), 300)")
        assert validator.validate(component) == validator.validate(component)

    @pytest.mark.parametrize("validator", VALIDATORS, ids=lambda v: v.rule_id)
    def test_violations_carry_own_rule_id(self, make_component, validator):
        component = make_component(KITCHEN_SINK, script="setTimeout(() => logout(), 300)")
        for violation in validator.validate(component):
            assert violation.rule_id == validator.rule_id
            assert violation.rule_name == validator.rule_name

    def test_kitchen_sink_trips_every_rule(self, make_component):
        component = make_component(KITCHEN_SINK, script="setTimeout(() => logout(), 300)")
        failing = {v.rule_id for v in VALIDATORS if v.validate(component)}
        assert failing == {v.rule_id for v in VALIDATORS}
