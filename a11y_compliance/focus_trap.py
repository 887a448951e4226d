"""
Focus Trap Controller

Confines Tab / Shift+Tab cycling to a container such as a modal dialog.
The controller never moves focus itself: every operation returns the
element the host should focus next, or None to leave focus alone.
"""

import enum
import logging
from typing import Optional

from .element import AccessibleElement

logger = logging.getLogger(__name__)


class TrapState(enum.Enum):
    INACTIVE = "inactive"
    ACTIVE = "active"


def focusable_elements(container: AccessibleElement) -> list[AccessibleElement]:
    """
    Focusable descendants of ``container`` in document order.

    Always computed fresh: inserting or removing nodes changes the order.
    """
    return [node for node in container.iter_descendants() if node.is_focusable()]


class FocusTrap:
    """
    Single-container focus trap state machine.

    States: INACTIVE -> ACTIVE -> INACTIVE. Traps do not nest; activating
    an active trap moves it to the new container and keeps the original
    restore target.

    Example:
        trap = FocusTrap()
        first = trap.activate(dialog, previously_focused=open_button)
        if first is not None:
            first.focus()
        ...
        target = trap.on_tab_key(document.active_element, shift=event.shift)
        if target is not None:
            event.prevent_default()
            target.focus()
        ...
        restore = trap.deactivate()
    """

    def __init__(self):
        self.state = TrapState.INACTIVE
        self._container: Optional[AccessibleElement] = None
        self._restore_target: Optional[AccessibleElement] = None

    @property
    def active(self) -> bool:
        return self.state is TrapState.ACTIVE

    @property
    def container(self) -> Optional[AccessibleElement]:
        return self._container

    def activate(
        self,
        container: AccessibleElement,
        previously_focused: Optional[AccessibleElement] = None,
    ) -> Optional[AccessibleElement]:
        """
        Install the trap on ``container``.

        A container without focusable elements is left untrapped, since
        trapping it would make it impossible to leave.

        Args:
            container: Element whose descendants receive focus
            previously_focused: Element to restore focus to on deactivate

        Returns:
            First focusable element (initial focus), or None if no trap
            was installed
        """
        elements = focusable_elements(container)
        if not elements:
            logger.debug("Focus trap not installed: container has no focusable elements")
            return None

        if self.active:
            logger.debug("Focus trap moved to a new container")
        else:
            self._restore_target = previously_focused
        self._container = container
        self.state = TrapState.ACTIVE
        return elements[0]

    def on_tab_key(
        self,
        current: Optional[AccessibleElement],
        shift: bool = False,
    ) -> Optional[AccessibleElement]:
        """
        Decide where Tab should go while the trap is active.

        If the container has lost every focusable element since
        activation, the container itself is returned so focus stays
        inside; the host focuses it programmatically.

        Returns:
            Element to focus (the caller should suppress the default Tab
            behaviour), or None to let the default tab order proceed
        """
        if not self.active or self._container is None:
            return None

        elements = focusable_elements(self._container)
        if not elements:
            logger.debug("Focus trap container has no focusable elements; holding focus on it")
            return self._container

        first, last = elements[0], elements[-1]
        if not any(current is element for element in elements):
            # Focus is outside the focusable set; pull it back in
            return last if shift else first

        if shift and current is first:
            return last
        if not shift and current is last:
            return first
        return None

    def deactivate(self) -> Optional[AccessibleElement]:
        """
        Remove the trap.

        Returns:
            The element focused before activation if it is still attached,
            otherwise None (the caller picks a fallback)
        """
        restore = self._restore_target
        self.state = TrapState.INACTIVE
        self._container = None
        self._restore_target = None

        if restore is not None and restore.is_attached():
            return restore
        if restore is not None:
            logger.debug("Focus restore target is detached; leaving focus unset")
        return None
