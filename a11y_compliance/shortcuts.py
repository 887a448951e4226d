"""
Keyboard Shortcut Registry and Dispatcher

Maintains chorded key bindings and maps incoming key events to actions.
Enables:
 - Listing all shortcuts for cheat sheet dialogs (grouped by category)
 - Rejecting conflicting registrations for the same key combination
 - Suppressing shortcuts while the user is typing in a text control

Design Notes:
 - Keys compare case-insensitively; modifiers must match exactly, so a
   binding without Shift never fires while Shift is held
 - Sequences are plain strings ("Ctrl+Shift+S", "Alt+1", "/")
"""

import logging
from typing import Callable, Optional

from pydantic import BaseModel, ConfigDict, Field

from .announcer import StatusAnnouncer, Urgency
from .element import AccessibleElement
from .errors import ShortcutConflictError

logger = logging.getLogger(__name__)

__all__ = [
    "KeyEvent",
    "ShortcutBinding",
    "ShortcutDispatcher",
    "ShortcutRegistry",
    "is_typing_target",
    "keyboard_activation",
    "parse_sequence",
]

MODIFIER_ALIASES = {
    "ctrl": "ctrl",
    "control": "ctrl",
    "alt": "alt",
    "option": "alt",
    "shift": "shift",
}

ChordKey = tuple[str, bool, bool, bool]


def _split_sequence(sequence: str) -> ChordKey:
    text = sequence.strip()
    if text == "+":
        parts, key = [], "+"
    elif text.endswith("++"):
        parts = text[:-2].split("+") if len(text) > 2 else []
        key = "+"
    else:
        *parts, key = text.split("+")
    if not key:
        raise ValueError(f"Shortcut sequence has no key: {sequence!r}")

    modifiers = set()
    for part in parts:
        name = MODIFIER_ALIASES.get(part.strip().lower())
        if name is None:
            raise ValueError(f"Unknown modifier {part!r} in shortcut {sequence!r}")
        modifiers.add(name)

    return key, "ctrl" in modifiers, "alt" in modifiers, "shift" in modifiers


def parse_sequence(sequence: str) -> ChordKey:
    """
    Parse a sequence such as ``"Ctrl+Shift+S"`` into
    ``(key, ctrl, alt, shift)`` with the key lower-cased.

    ``"Ctrl++"`` binds the plus key.

    Raises:
        ValueError: On an empty key or an unknown modifier
    """
    key, ctrl, alt, shift = _split_sequence(sequence)
    return key.lower(), ctrl, alt, shift


def format_sequence(key: str, ctrl: bool = False, alt: bool = False, shift: bool = False) -> str:
    """Display label; single characters are upper-cased, named keys keep their casing"""
    parts = [name for name, held in (("Ctrl", ctrl), ("Alt", alt), ("Shift", shift)) if held]
    parts.append(key.upper() if len(key) == 1 else key)
    return "+".join(parts)


class KeyEvent(BaseModel):
    """
    A key press delivered by the host.

    Attributes:
        key: Key value as reported by the platform ("s", "1", "Escape")
        ctrl, alt, shift: Modifier flags
        target: Element that had focus when the key was pressed
        default_prevented: Set when a shortcut consumed the event
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    key: str
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    target: Optional[AccessibleElement] = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True

    @property
    def chord(self) -> ChordKey:
        return self.key.lower(), self.ctrl, self.alt, self.shift


class ShortcutBinding(BaseModel):
    """
    A key combination bound to an action.

    Absent modifiers mean "must not be held".
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)
    ctrl: bool = False
    alt: bool = False
    shift: bool = False
    description: str
    action: Callable[[], None]
    category: str = "General"
    urgency: Urgency = "polite"

    @classmethod
    def from_sequence(
        cls,
        sequence: str,
        description: str,
        action: Callable[[], None],
        category: str = "General",
        urgency: Urgency = "polite",
    ) -> "ShortcutBinding":
        key, ctrl, alt, shift = _split_sequence(sequence)
        return cls(
            key=key,
            ctrl=ctrl,
            alt=alt,
            shift=shift,
            description=description,
            action=action,
            category=category,
            urgency=urgency,
        )

    @property
    def chord(self) -> ChordKey:
        return self.key.lower(), self.ctrl, self.alt, self.shift

    @property
    def sequence(self) -> str:
        """Display label, e.g. ``"Alt+1"``"""
        return format_sequence(self.key, self.ctrl, self.alt, self.shift)

    def matches(self, event: KeyEvent) -> bool:
        return self.chord == event.chord


class ShortcutRegistry:
    def __init__(self) -> None:
        self._bindings: dict[ChordKey, ShortcutBinding] = {}

    def __len__(self) -> int:
        return len(self._bindings)

    def register(self, binding: ShortcutBinding) -> ShortcutBinding:
        """
        Add a binding.

        Raises:
            ShortcutConflictError: If the key combination is already bound
        """
        existing = self._bindings.get(binding.chord)
        if existing is not None:
            logger.warning(
                "Rejected shortcut %s (%s): already bound to %s",
                binding.sequence,
                binding.description,
                existing.description,
            )
            raise ShortcutConflictError(binding.sequence, existing.description)
        self._bindings[binding.chord] = binding
        return binding

    def add(
        self,
        sequence: str,
        description: str,
        action: Callable[[], None],
        category: str = "General",
    ) -> ShortcutBinding:
        """Shorthand for ``register(ShortcutBinding.from_sequence(...))``"""
        return self.register(ShortcutBinding.from_sequence(sequence, description, action, category))

    def unregister(self, sequence: str) -> bool:
        """Remove a binding. Returns False if nothing was bound."""
        return self._bindings.pop(parse_sequence(sequence), None) is not None

    def get(self, sequence: str) -> Optional[ShortcutBinding]:
        return self._bindings.get(parse_sequence(sequence))

    def match(self, event: KeyEvent) -> Optional[ShortcutBinding]:
        return self._bindings.get(event.chord)

    def bindings(self) -> list[ShortcutBinding]:
        return list(self._bindings.values())

    def by_category(self) -> dict[str, list[ShortcutBinding]]:
        buckets: dict[str, list[ShortcutBinding]] = {}
        for b in self._bindings.values():
            buckets.setdefault(b.category, []).append(b)
        for lst in buckets.values():
            lst.sort(key=lambda x: x.sequence)
        return buckets


ACTIVATION_KEYS = {"enter", " "}


def keyboard_activation(callback: Callable[[], None]) -> Callable[[KeyEvent], bool]:
    """
    Key handler that lets a custom control be activated like a button.

    Enter and Space run ``callback`` and suppress the default action
    (Space would otherwise scroll the page). Other keys pass through
    untouched.

    Example:
        handler = keyboard_activation(open_details)
        if handler(event):
            return

    Returns:
        Handler that returns True when it activated the control
    """
    def handle(event: KeyEvent) -> bool:
        if event.key.lower() not in ACTIVATION_KEYS:
            return False
        event.prevent_default()
        callback()
        return True

    return handle


def is_typing_target(target: Optional[AccessibleElement]) -> bool:
    """Whether ``target`` is, or sits inside, a free-form text control"""
    if target is None:
        return False
    if target.is_text_entry():
        return True
    return any(node.is_text_entry() for node in target.ancestors())


class ShortcutDispatcher:
    """
    Routes key events to registered shortcuts.

    On a match the event's default behaviour is suppressed, the action
    runs, and the binding's description is announced. Unmatched events
    pass through untouched.

    Args:
        registry: Bindings to match against (a fresh registry if omitted)
        announcer: Optional live-region channel for confirmations
        enabled: Dispatch is skipped entirely while False
    """

    def __init__(
        self,
        registry: Optional[ShortcutRegistry] = None,
        announcer: Optional[StatusAnnouncer] = None,
        enabled: bool = True,
    ):
        self.registry = registry if registry is not None else ShortcutRegistry()
        self.announcer = announcer
        self.enabled = enabled

    def register(self, binding: ShortcutBinding) -> ShortcutBinding:
        return self.registry.register(binding)

    def dispatch(self, event: KeyEvent) -> Optional[ShortcutBinding]:
        """
        Handle one key event.

        Returns:
            The binding that fired, or None
        """
        if not self.enabled:
            return None

        if is_typing_target(event.target):
            logger.debug("Shortcut dispatch skipped: focus is in a text control")
            return None

        binding = self.registry.match(event)
        if binding is None:
            return None

        event.prevent_default()
        logger.debug("Dispatching shortcut %s: %s", binding.sequence, binding.description)
        binding.action()
        if self.announcer is not None:
            self.announcer.announce(binding.description, binding.urgency)
        return binding
