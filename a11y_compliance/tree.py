"""
Synthetic Element Trees

Concrete ``AccessibleElement`` built from plain dictionaries or JSON.
Applies the HTML rules for focusability, text entry and interactivity so
that audits and focus traps can run without a rendering engine.

Node dictionary keys (all optional except ``tag``):

    tag, text, aria_label, aria_labelledby, label, alt, role, type, href,
    tabindex, clickable, disabled, contenteditable, width, height, children
"""

import json
from pathlib import Path
from typing import Any, Optional, Union

from .element import AccessibleElement
from .models import Size

# Native controls that are focusable unless disabled
NATIVE_CONTROLS = {"button", "input", "select", "textarea"}

# Input types that do not accept free-form text
NON_TEXT_INPUT_TYPES = {
    "button",
    "checkbox",
    "color",
    "file",
    "hidden",
    "image",
    "radio",
    "range",
    "reset",
    "submit",
}

TEXT_ENTRY_ROLES = {"textbox", "searchbox", "combobox"}

# Input types audited as touch targets
TOUCH_INPUT_TYPES = {"button", "submit", "checkbox", "radio", "reset", "image"}


class ElementNode(AccessibleElement):
    """
    In-memory element with fixed geometry and HTML-like attributes.

    Example:
        dialog = ElementNode("div", children=[
            ElementNode("button", text="Cancel", width=80, height=44),
            ElementNode("button", text="Confirm", width=80, height=44),
        ])
    """

    def __init__(
        self,
        tag: str,
        text: str = "",
        *,
        aria_label: Optional[str] = None,
        aria_labelledby: Optional[str] = None,
        label: Optional[str] = None,
        alt: Optional[str] = None,
        role: Optional[str] = None,
        input_type: Optional[str] = None,
        href: Optional[str] = None,
        tabindex: Optional[int] = None,
        clickable: bool = False,
        disabled: bool = False,
        contenteditable: bool = False,
        width: float = 0,
        height: float = 0,
        children: Optional[list["ElementNode"]] = None,
    ):
        self.tag = tag.lower()
        self.text = text
        self.aria_label = aria_label
        self.aria_labelledby = aria_labelledby
        # Text of an associated <label for=...>
        self.label = label
        self.alt = alt
        self.role = role
        self.input_type = (input_type or ("text" if self.tag == "input" else "")).lower()
        self.href = href
        self.tabindex = tabindex
        self.clickable = clickable
        self.disabled = disabled
        self.contenteditable = contenteditable
        self.size = Size(width=width, height=height)
        self._parent: Optional[ElementNode] = None
        self._removed = False
        self._children: list[ElementNode] = []
        for child in children or []:
            self.append(child)

    def __repr__(self) -> str:
        name = self.accessible_name()
        return f"<{self.tag} {name!r}>" if name else f"<{self.tag}>"

    # Tree mutation

    def append(self, child: "ElementNode") -> "ElementNode":
        """Attach ``child`` as the last child, detaching it from any old parent"""
        return self.insert(len(self._children), child)

    def insert(self, index: int, child: "ElementNode") -> "ElementNode":
        if child._parent is not None:
            child._parent.remove(child)
        child._parent = self
        child._removed = False
        self._children.insert(index, child)
        return child

    def remove(self, child: "ElementNode") -> None:
        self._children.remove(child)
        child._parent = None
        child._removed = True

    def detach(self) -> None:
        if self._parent is not None:
            self._parent.remove(self)

    # AccessibleElement interface

    @property
    def tag_name(self) -> str:
        return self.tag

    def measure(self) -> Size:
        return self.size

    def accessible_name(self) -> str:
        return self.text.strip() or (self.aria_label or "")

    def children(self) -> list["ElementNode"]:
        return list(self._children)

    def parent(self) -> Optional["ElementNode"]:
        return self._parent

    def is_attached(self) -> bool:
        """A node is detached once it, or any ancestor, has been removed"""
        node: Optional[ElementNode] = self
        while node is not None:
            if node._removed:
                return False
            node = node._parent
        return True

    def is_focusable(self) -> bool:
        if self.disabled:
            return False
        if self.tabindex is not None:
            return self.tabindex >= 0
        if self.tag in NATIVE_CONTROLS:
            return self.tag != "input" or self.input_type != "hidden"
        if self.tag in ("a", "area"):
            return bool(self.href)
        return False

    def is_text_entry(self) -> bool:
        if self.contenteditable:
            return True
        if self.tag == "textarea":
            return True
        if self.tag == "input":
            return self.input_type not in NON_TEXT_INPUT_TYPES
        return self.role in TEXT_ENTRY_ROLES

    def is_interactive(self) -> bool:
        if self.tag in ("button", "a") or self.role == "button":
            return True
        return self.tag == "input" and self.input_type in TOUCH_INPUT_TYPES

    def attribute(self, name: str) -> Optional[str]:
        return {
            "alt": self.alt,
            "type": self.input_type or None,
            "role": self.role,
            "aria-label": self.aria_label,
            "aria-labelledby": self.aria_labelledby,
        }.get(name)

    def has_click_handler(self) -> bool:
        return self.clickable

    def has_label(self) -> bool:
        return bool(self.label) or super().has_label()

    # Construction helpers

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ElementNode":
        """
        Build a tree from a nested dictionary.

        ``tabindex`` may be given as a string, as in HTML attributes.

        Raises:
            ValueError: If a node has no ``tag`` or a non-numeric ``tabindex``
        """
        if "tag" not in data:
            raise ValueError(f"Element node is missing 'tag': {data!r}")
        tabindex = data.get("tabindex")
        if tabindex is not None:
            try:
                tabindex = int(tabindex)
            except (TypeError, ValueError):
                raise ValueError(f"Invalid tabindex {tabindex!r} on <{data['tag']}>") from None
        return cls(
            data["tag"],
            data.get("text", ""),
            aria_label=data.get("aria_label"),
            aria_labelledby=data.get("aria_labelledby"),
            label=data.get("label"),
            alt=data.get("alt"),
            role=data.get("role"),
            input_type=data.get("type"),
            href=data.get("href"),
            tabindex=tabindex,
            clickable=bool(data.get("clickable", False)),
            disabled=bool(data.get("disabled", False)),
            contenteditable=bool(data.get("contenteditable", False)),
            width=data.get("width", 0),
            height=data.get("height", 0),
            children=[cls.from_dict(child) for child in data.get("children", [])],
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"tag": self.tag}
        if self.text:
            data["text"] = self.text
        for key, value in (
            ("aria_label", self.aria_label),
            ("aria_labelledby", self.aria_labelledby),
            ("label", self.label),
            ("alt", self.alt),
            ("role", self.role),
            ("href", self.href),
            ("tabindex", self.tabindex),
        ):
            if value is not None:
                data[key] = value
        if self.tag == "input":
            data["type"] = self.input_type
        if self.clickable:
            data["clickable"] = True
        if self.disabled:
            data["disabled"] = True
        if self.contenteditable:
            data["contenteditable"] = True
        data["width"] = self.size.width
        data["height"] = self.size.height
        if self._children:
            data["children"] = [child.to_dict() for child in self._children]
        return data


def load_tree(source: Union[Path, str, dict[str, Any]]) -> ElementNode:
    """
    Load an element tree from a JSON file, JSON string or dictionary.

    A JSON document may wrap the tree as ``{"root": {...}}`` alongside
    other keys (e.g. ``colors``); otherwise the document is the root node.
    """
    if isinstance(source, Path):
        data = json.loads(source.read_text(encoding="utf-8"))
    elif isinstance(source, str):
        data = json.loads(source)
    else:
        data = source

    if "root" in data:
        data = data["root"]
    return ElementNode.from_dict(data)
