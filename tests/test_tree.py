import json

import pytest

from a11y_compliance.tree import ElementNode, load_tree


TREE = {
    "tag": "body",
    "children": [
        {"tag": "button", "text": "Book session", "width": 140, "height": 48},
        {"tag": "div", "role": "dialog", "children": [
            {"tag": "input", "type": "text", "aria_label": "Employee ID", "width": 200, "height": 40},
            {"tag": "a", "text": "Cancel", "href": "/", "width": 60, "height": 24},
        ]},
    ],
}


def test_from_dict_builds_tree():
    root = ElementNode.from_dict(TREE)
    assert root.tag_name == "body"
    button, dialog = root.children()
    assert button.measure().width == 140
    assert button.parent() is root
    field, link = dialog.children()
    assert field.accessible_name() == "Employee ID"
    assert field.is_text_entry()
    assert link.is_focusable()
    assert [n.tag_name for n in root.iter_descendants()] == ["button", "div", "input", "a"]


def test_round_trip_through_dict():
    root = ElementNode.from_dict(TREE)
    assert ElementNode.from_dict(root.to_dict()).to_dict() == root.to_dict()


def test_load_tree_sources(tmp_path):
    assert load_tree(json.dumps(TREE)).tag_name == "body"
    assert load_tree({"root": TREE, "colors": []}).tag_name == "body"
    path = tmp_path / "page.json"
    path.write_text(json.dumps(TREE))
    assert len(list(load_tree(path).iter_descendants())) == 4


def test_missing_tag_is_an_error():
    with pytest.raises(ValueError):
        ElementNode.from_dict({"text": "orphan"})


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ElementNode("button", width=-1, height=10)


def test_attachment_tracking():
    root = ElementNode("body")
    child = root.append(ElementNode("div"))
    grandchild = child.append(ElementNode("button"))
    assert grandchild.is_attached()
    assert root.contains(grandchild)

    root.remove(child)
    assert not child.is_attached()
    assert not grandchild.is_attached()
    assert not root.contains(grandchild)

    root.insert(0, child)
    assert grandchild.is_attached()


def test_append_moves_node():
    first = ElementNode("div")
    second = ElementNode("div")
    button = first.append(ElementNode("button"))
    second.append(button)
    assert first.children() == []
    assert button.parent() is second
    assert button.is_attached()


def test_string_tabindex_is_coerced():
    root = load_tree({"tag": "div", "children": [
        {"tag": "div", "tabindex": "0"},
        {"tag": "button", "text": "Skip", "tabindex": "-1"},
    ]})
    focusable, skipped = root.children()
    assert focusable.tabindex == 0
    assert focusable.is_focusable()
    assert not skipped.is_focusable()


def test_non_numeric_tabindex_is_an_error():
    with pytest.raises(ValueError, match="tabindex"):
        load_tree({"tag": "div", "tabindex": "first"})


def test_markup_attributes_round_trip():
    data = {"tag": "img", "alt": "Logo", "clickable": True, "role": "link", "width": 0, "height": 0}
    node = ElementNode.from_dict(data)
    assert node.attribute("alt") == "Logo"
    assert node.has_click_handler()
    assert node.to_dict() == data
