"""
Touch Target Size Checker

Audits interactive elements against the minimum touch-target size
(WCAG 2.1 AA, 44x44 device-independent pixels by default). Width and
height are evaluated independently so an element can fail on one axis.
"""

import logging
from typing import Iterable

from ..element import AccessibleElement
from ..models import TouchTargetReport, TouchTargetVerdict

logger = logging.getLogger(__name__)

MINIMUM_TARGET_SIZE = 44


def _format_px(value: float) -> str:
    return f"{round(value)}px"


def validate_touch_target(
    element: AccessibleElement,
    min_size: float = MINIMUM_TARGET_SIZE,
) -> TouchTargetVerdict:
    """
    Check one element's measured size against the minimum.

    An element with zero measured area (not yet laid out) is reported as
    non-compliant rather than skipped, whatever the minimum.

    Args:
        element: Element to measure
        min_size: Minimum edge length in pixels

    Returns:
        TouchTargetVerdict with one recommendation per failing axis

    Example:
        verdict = validate_touch_target(button)
        if not verdict.is_valid:
            print(verdict.recommendations)
    """
    size = element.measure()
    name = element.accessible_name() or "No text"
    recommendations = []

    unmeasured = size.is_empty
    if unmeasured:
        logger.warning("Touch target %r has no measured size", name)
        recommendations.append(
            "Element has no rendered size; make sure it is laid out before auditing"
        )

    if size.width < min_size:
        recommendations.append(
            f"Increase width to at least {_format_px(min_size)} "
            f"(current: {_format_px(size.width)})"
        )

    if size.height < min_size:
        recommendations.append(
            f"Increase height to at least {_format_px(min_size)} "
            f"(current: {_format_px(size.height)})"
        )

    return TouchTargetVerdict(
        element=element,
        name=name,
        tag=element.tag_name,
        size=size,
        is_valid=not unmeasured and size.width >= min_size and size.height >= min_size,
        recommendations=recommendations,
        unmeasured=unmeasured,
    )


def collect_interactive(root: AccessibleElement) -> list[AccessibleElement]:
    """
    Collect touch targets under ``root`` in document order.

    ``root`` itself is included when it is interactive.
    """
    found = [root] if root.is_interactive() else []
    found.extend(node for node in root.iter_descendants() if node.is_interactive())
    return found


def audit_targets(
    elements: Iterable[AccessibleElement],
    min_size: float = MINIMUM_TARGET_SIZE,
) -> TouchTargetReport:
    """
    Audit a snapshot of interactive elements.

    Args:
        elements: Elements to check; measured once, not retained
        min_size: Minimum edge length in pixels

    Returns:
        TouchTargetReport with totals and the failing verdicts
    """
    total = 0
    compliant = 0
    issues = []

    for element in elements:
        total += 1
        verdict = validate_touch_target(element, min_size)
        if verdict.is_valid:
            compliant += 1
        else:
            issues.append(verdict)

    logger.debug("Touch-target audit: %d/%d compliant", compliant, total)
    return TouchTargetReport(
        total=total,
        compliant=compliant,
        min_size=min_size,
        issues=issues,
    )


def audit_tree(
    root: AccessibleElement,
    min_size: float = MINIMUM_TARGET_SIZE,
) -> TouchTargetReport:
    """Audit every interactive element under ``root``"""
    return audit_targets(collect_interactive(root), min_size)
