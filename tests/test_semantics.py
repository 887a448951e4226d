from a11y_compliance.checks.semantics import (
    MISSING_ALT,
    MISSING_LABEL,
    MISSING_ROLE,
    audit_markup,
    validate_element,
)
from a11y_compliance.tree import ElementNode, load_tree


def test_image_needs_alt_text():
    assert validate_element(ElementNode("img")).problems == [MISSING_ALT]
    assert validate_element(ElementNode("img", alt="")).problems == [MISSING_ALT]
    assert validate_element(ElementNode("img", alt="Team photo")).is_valid


def test_form_controls_need_a_label():
    assert validate_element(ElementNode("input")).problems == [MISSING_LABEL]
    assert validate_element(ElementNode("select")).problems == [MISSING_LABEL]
    assert validate_element(ElementNode("input", aria_label="Email")).is_valid
    assert validate_element(ElementNode("textarea", aria_labelledby="notes-heading")).is_valid
    assert validate_element(ElementNode("input", label="Employee ID")).is_valid


def test_hidden_input_is_not_checked():
    report = audit_markup(ElementNode("form", children=[ElementNode("input", input_type="hidden")]))
    assert report.checked == 0
    assert report.passed


def test_click_targets_need_a_role():
    verdict = validate_element(ElementNode("div", "Expand", clickable=True))
    assert verdict.problems == [MISSING_ROLE]
    assert verdict.name == "Expand"
    assert validate_element(ElementNode("div", "Expand", clickable=True, role="button")).is_valid
    assert validate_element(ElementNode("button", "Expand", clickable=True)).is_valid
    assert validate_element(ElementNode("a", "Home", href="/", clickable=True)).is_valid


def test_plain_elements_have_no_problems():
    assert validate_element(ElementNode("p", "Welcome")).is_valid


def test_audit_markup_walks_the_tree():
    root = load_tree({
        "tag": "main",
        "children": [
            {"tag": "img", "alt": "Logo"},
            {"tag": "section", "children": [
                {"tag": "img"},
                {"tag": "span", "text": "More", "clickable": True},
            ]},
            {"tag": "p", "text": "Intro"},
        ],
    })
    report = audit_markup(root)
    assert report.checked == 3
    assert [v.tag for v in report.issues] == ["img", "span"]
    assert not report.passed


def test_verdict_serializes_without_element():
    data = validate_element(ElementNode("img")).model_dump()
    assert "element" not in data
    assert data == {"name": "<img>", "tag": "img", "problems": [MISSING_ALT]}
