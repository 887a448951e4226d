"""
a11y-compliance - Accessibility Compliance Runtime

Algorithms that make an interactive surface usable with assistive
technology, independent of any page or rendering engine:

- Contrast Evaluator: WCAG contrast ratios and AA/AAA levels
- Touch-Target Auditor: minimum target-size checks over element trees
- Focus-Trap Controller: Tab/Shift+Tab cycling inside dialogs
- Status Announcer: single-slot live-region messages
- Keyboard-Shortcut Dispatcher: chorded shortcuts that never steal typing
"""

__version__ = "0.1.0"

from .announcer import StatusAnnouncer
from .auditor import ComplianceAuditor
from .checks import (
    audit_markup,
    audit_targets,
    audit_tree,
    contrast_ratio,
    evaluate,
    validate_element,
    validate_touch_target,
)
from .element import AccessibleElement
from .errors import ComplianceError, InvalidColorFormat, ShortcutConflictError
from .focus_trap import FocusTrap, TrapState, focusable_elements
from .models import (
    ComplianceReport,
    Config,
    ContrastResult,
    MarkupReport,
    MarkupVerdict,
    Size,
    TouchTargetReport,
    TouchTargetVerdict,
)
from .scheduling import AsyncioScheduler, ManualScheduler
from .shortcuts import KeyEvent, ShortcutBinding, ShortcutDispatcher, ShortcutRegistry, keyboard_activation
from .tree import ElementNode, load_tree

__all__ = [
    "AccessibleElement",
    "AsyncioScheduler",
    "ComplianceAuditor",
    "ComplianceError",
    "ComplianceReport",
    "Config",
    "ContrastResult",
    "ElementNode",
    "FocusTrap",
    "InvalidColorFormat",
    "KeyEvent",
    "MarkupReport",
    "MarkupVerdict",
    "ManualScheduler",
    "ShortcutBinding",
    "ShortcutConflictError",
    "ShortcutDispatcher",
    "ShortcutRegistry",
    "Size",
    "StatusAnnouncer",
    "TouchTargetReport",
    "TouchTargetVerdict",
    "TrapState",
    "audit_markup",
    "audit_targets",
    "audit_tree",
    "contrast_ratio",
    "evaluate",
    "focusable_elements",
    "keyboard_activation",
    "load_tree",
    "validate_element",
    "validate_touch_target",
]
