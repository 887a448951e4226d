"""
Compliance Auditor

Orchestration module that runs the touch-target and markup audits over
an element tree and contrast checks over color pairs, then folds the
results into a single scored ComplianceReport.
"""

import logging
from typing import Iterable, Optional

from .checks.contrast import evaluate
from .checks.semantics import MISSING_ALT, MISSING_LABEL, MISSING_ROLE, audit_markup
from .checks.sizing import audit_tree, collect_interactive
from .element import AccessibleElement
from .models import (
    ComplianceReport,
    Config,
    ContrastResult,
    Issue,
    MarkupVerdict,
    TouchTargetReport,
    TouchTargetVerdict,
)
from .palette import ColorPair, recommended_text_color

logger = logging.getLogger(__name__)

# Severity and suggested fix per markup problem
MARKUP_FIXES = {
    MISSING_ALT: ("high", "Add an alt attribute that describes the image"),
    MISSING_LABEL: ("high", "Associate a <label> element or set aria-label on the control"),
    MISSING_ROLE: ("medium", "Use a <button> or <a> element, or add an explicit role such as role=\"button\""),
}


class ComplianceAuditor:
    """
    Produces a compliance report for one snapshot of the UI.

    Coordinates:
    1. Touch-target audit of the interactive elements under a root
    2. Markup checks for alt text, labels and roles
    3. Contrast evaluation of named color pairs
    4. Issue aggregation and scoring

    Example:
        auditor = ComplianceAuditor(load_config())
        report = auditor.audit(root=page, color_pairs=APPLICATION_COLORS)
        print(report.summary())
    """

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize auditor.

        Args:
            config: Supplies the touch-target minimum and recommended sizes
        """
        self.config = config or Config()

    def audit(
        self,
        root: Optional[AccessibleElement] = None,
        color_pairs: Optional[Iterable[ColorPair]] = None,
    ) -> ComplianceReport:
        """
        Run all checks that have input.

        Args:
            root: Element tree to audit for touch targets and markup
            color_pairs: Named foreground/background pairs

        Returns:
            ComplianceReport; checks without input are skipped and do not
            count toward the score

        Raises:
            InvalidColorFormat: If a color pair is malformed
        """
        touch_targets = None
        markup = None
        contrast: dict[str, ContrastResult] = {}
        issues: list[Issue] = []
        recommendations: list[str] = []
        scores: list[float] = []

        if root is not None:
            touch_targets = audit_tree(root, self.config.min_touch_target)
            issues.extend(self._touch_target_issue(v) for v in touch_targets.issues)
            scores.append(self._ratio_score(touch_targets.compliant, touch_targets.total))
            recommendations.extend(self._touch_target_recommendations(root, touch_targets))

            markup = audit_markup(root)
            for verdict in markup.issues:
                issues.extend(self._markup_issue(verdict, problem) for problem in verdict.problems)
            # Only scored when some markup rule applied
            if markup.checked:
                scores.append(self._ratio_score(markup.checked - len(markup.issues), markup.checked))
            if markup.issues:
                recommendations.append(f"Fix markup issues on {len(markup.issues)} elements")

        if color_pairs is not None:
            for pair in color_pairs:
                result = evaluate(pair.foreground, pair.background, pair.is_large_text)
                contrast[pair.name] = result
                if not result.passes:
                    issues.append(self._contrast_issue(pair.name, result))
            failed = sum(1 for r in contrast.values() if not r.passes)
            scores.append(self._ratio_score(len(contrast) - failed, len(contrast)))
            if failed:
                recommendations.append(f"Fix {failed} color contrast failures")

        score = sum(scores) / len(scores) if scores else 100.0
        logger.debug("Compliance audit finished: %d issues, score %.1f", len(issues), score)

        return ComplianceReport(
            score=score,
            touch_targets=touch_targets,
            markup=markup,
            contrast=contrast,
            issues=issues,
            recommendations=recommendations,
        )

    def _ratio_score(self, passed: int, total: int) -> float:
        if total == 0:
            return 100.0
        return passed / total * 100.0

    def _touch_target_recommendations(
        self,
        root: AccessibleElement,
        report: TouchTargetReport,
    ) -> list[str]:
        recommendations = []
        if report.issues:
            recommendations.append(f"Fix {len(report.issues)} touch target size issues")

        # Compliant, but below the more comfortable recommended size
        recommended = self.config.recommended_touch_target
        snug = []
        for element in collect_interactive(root):
            size = element.measure()
            if self.config.min_touch_target <= min(size.width, size.height) < recommended:
                snug.append(element)
        if snug:
            recommendations.append(
                f"Consider enlarging {len(snug)} compliant targets to {round(recommended)}px for easier touch use"
            )
        return recommendations

    def _touch_target_issue(self, verdict: TouchTargetVerdict) -> Issue:
        minimum = round(self.config.min_touch_target)
        size = verdict.size
        if verdict.unmeasured:
            description = f"Touch target '{verdict.name}' has no rendered size"
            severity = "high"
        else:
            description = (
                f"Touch target '{verdict.name}' is {round(size.width)}x{round(size.height)}px "
                f"(minimum {minimum}x{minimum}px)"
            )
            severity = "high" if min(size.width, size.height) < minimum * 0.75 else "medium"

        return Issue(
            dimension="touch_target",
            severity=severity,
            description=description,
            location=verdict.name,
            suggestion="; ".join(verdict.recommendations),
        )

    def _markup_issue(self, verdict: MarkupVerdict, problem: str) -> Issue:
        severity, suggestion = MARKUP_FIXES[problem]
        return Issue(
            dimension="semantics",
            severity=severity,
            description=f"{problem}: '{verdict.name}'",
            location=verdict.name,
            suggestion=suggestion,
        )

    def _contrast_issue(self, name: str, result: ContrastResult) -> Issue:
        return Issue(
            dimension="contrast",
            severity="high" if result.ratio < 3 else "medium",
            description=(
                f"Contrast for '{name}' is {result.ratio}:1 "
                f"(needs {result.required_ratio}:1)"
            ),
            location=f"{result.foreground} on {result.background}",
            suggestion=(
                f"Consider using {recommended_text_color(result.background)} text on "
                f"{result.background} background for better contrast"
            ),
        )
