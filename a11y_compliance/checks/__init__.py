"""
Automated Accessibility Checks

Measurable WCAG checks: color contrast, touch-target size and markup
semantics (alt text, labels, roles).
"""

from .contrast import contrast_ratio, evaluate, is_large_text, parse_color, relative_luminance
from .semantics import audit_markup, validate_element
from .sizing import audit_targets, audit_tree, collect_interactive, validate_touch_target

__all__ = [
    "contrast_ratio",
    "evaluate",
    "is_large_text",
    "parse_color",
    "relative_luminance",
    "audit_markup",
    "validate_element",
    "audit_targets",
    "audit_tree",
    "collect_interactive",
    "validate_touch_target",
]
