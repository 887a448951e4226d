"""
Element Capability Interface

Abstract base class describing what the compliance runtime needs to know
about a UI node. Host rendering layers adapt their own node type to this
interface; tests use the synthetic ``tree.ElementNode``.
"""

from abc import ABC, abstractmethod
from typing import Iterator, Optional, Sequence

from .models import Size


class AccessibleElement(ABC):
    """
    Abstract base class for elements inspected by the runtime.

    Subclasses must implement:
    - measure(): Rendered bounding-box size
    - is_focusable(): Whether the element takes part in tab order
    - accessible_name(): Visible text or accessible name
    - children(): Direct children in document order

    The remaining methods have defaults suitable for flat or detached
    nodes and may be overridden.
    """

    @abstractmethod
    def measure(self) -> Size:
        """
        Measure the element's rendered size.

        Returns:
            Size in device-independent pixels; zero when not laid out
        """
        pass

    @abstractmethod
    def is_focusable(self) -> bool:
        """
        Check whether the element is reachable with Tab.

        Native controls, links with a destination and elements with a
        non-negative explicit tab index are focusable.
        """
        pass

    @abstractmethod
    def accessible_name(self) -> str:
        """Human-readable identifier (visible text or aria label)"""
        pass

    @abstractmethod
    def children(self) -> Sequence["AccessibleElement"]:
        """Direct children in document order"""
        pass

    @property
    def tag_name(self) -> str:
        return ""

    def parent(self) -> Optional["AccessibleElement"]:
        return None

    def is_attached(self) -> bool:
        """Whether the element is still part of the live tree"""
        return True

    def is_text_entry(self) -> bool:
        """Whether the element accepts free-form text input"""
        return False

    def is_interactive(self) -> bool:
        """Whether the element is a touch target (buttons, links, toggles)"""
        return self.is_focusable()

    def attribute(self, name: str) -> Optional[str]:
        """Markup attribute value (``alt``, ``role``, ``aria-label``, ...) or None"""
        return None

    def has_click_handler(self) -> bool:
        """Whether a pointer click handler is attached to the element itself"""
        return False

    def has_label(self) -> bool:
        """
        Check whether a form control has an accessible label.

        The default looks at ``aria-label`` and ``aria-labelledby``;
        adapters that know about associated ``<label>`` elements should
        extend it.
        """
        return bool(self.attribute("aria-label") or self.attribute("aria-labelledby"))

    def iter_descendants(self) -> Iterator["AccessibleElement"]:
        """Yield all descendants in pre-order (document order)"""
        stack = list(reversed(self.children()))
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def ancestors(self) -> Iterator["AccessibleElement"]:
        node = self.parent()
        while node is not None:
            yield node
            node = node.parent()

    def contains(self, other: Optional["AccessibleElement"]) -> bool:
        """Whether ``other`` is this element or one of its descendants"""
        if other is None:
            return False
        if other is self:
            return True
        return any(node is self for node in other.ancestors())
