"""
Markup Semantics Checker

Flags elements that assistive technology cannot describe:
images without alt text, form controls without a label, and
click targets that are neither native controls nor carry a role.
"""

import logging

from ..element import AccessibleElement
from ..models import MarkupReport, MarkupVerdict

logger = logging.getLogger(__name__)

MISSING_ALT = "Image missing alt text"
MISSING_ROLE = "Interactive element missing role attribute"
MISSING_LABEL = "Form element missing label"

FORM_CONTROLS = {"input", "select", "textarea"}

# Elements whose click behaviour is announced without a role
NATIVE_CLICK_TAGS = {"button", "a"}


def _applies(element: AccessibleElement) -> bool:
    tag = element.tag_name
    if tag == "img" or element.has_click_handler():
        return True
    return tag in FORM_CONTROLS and element.attribute("type") != "hidden"


def validate_element(element: AccessibleElement) -> MarkupVerdict:
    """
    Check one element's markup.

    An empty ``alt`` counts as missing.

    Returns:
        MarkupVerdict listing each problem found (empty when valid)
    """
    tag = element.tag_name
    problems = []

    if tag == "img" and not element.attribute("alt"):
        problems.append(MISSING_ALT)

    if (
        element.has_click_handler()
        and tag not in NATIVE_CLICK_TAGS
        and not element.attribute("role")
    ):
        problems.append(MISSING_ROLE)

    if tag in FORM_CONTROLS and element.attribute("type") != "hidden" and not element.has_label():
        problems.append(MISSING_LABEL)

    return MarkupVerdict(
        element=element,
        name=element.accessible_name() or f"<{tag}>",
        tag=tag,
        problems=problems,
    )


def audit_markup(root: AccessibleElement) -> MarkupReport:
    """Validate ``root`` and every descendant that a markup rule applies to"""
    checked = 0
    issues = []
    for element in [root, *root.iter_descendants()]:
        if not _applies(element):
            continue
        checked += 1
        verdict = validate_element(element)
        if not verdict.is_valid:
            issues.append(verdict)

    logger.debug("Markup audit: %d/%d elements valid", checked - len(issues), checked)
    return MarkupReport(checked=checked, issues=issues)
