"""
Data Models for the Compliance Runtime

Type-safe Pydantic models shared by the checks, the auditor and the CLI.
Element references are carried as arbitrary types; everything else is
validated on construction.
"""

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Color(BaseModel):
    """
    An sRGB color with 8-bit channels.

    Use ``checks.contrast.parse_color`` to build one from a hex string;
    the constructor validates channel ranges but does not parse text.
    """

    model_config = ConfigDict(frozen=True)

    r: int = Field(ge=0, le=255)
    g: int = Field(ge=0, le=255)
    b: int = Field(ge=0, le=255)

    @property
    def hex(self) -> str:
        """Canonical ``#RRGGBB`` form"""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    def __str__(self) -> str:
        return self.hex


class ContrastResult(BaseModel):
    """
    Outcome of a WCAG contrast evaluation.

    Attributes:
        foreground: Canonical hex of the text color
        background: Canonical hex of the background color
        ratio: Contrast ratio rounded to 2 decimals (1-21)
        required_ratio: AA requirement for the text size (3 or 4.5)
        level: Highest WCAG level met
        passes: Whether the AA requirement is met
    """

    foreground: str
    background: str
    ratio: float = Field(ge=1, le=21)
    required_ratio: float
    level: Literal["AAA", "AA", "Fail"]
    passes: bool
    is_large_text: bool = False


class Size(BaseModel):
    """Measured geometry in device-independent pixels"""

    model_config = ConfigDict(frozen=True)

    width: float = Field(default=0, ge=0)
    height: float = Field(default=0, ge=0)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0


class TouchTargetVerdict(BaseModel):
    """
    Result of checking one interactive element against the minimum
    touch-target size.

    Attributes:
        element: The audited element (opaque reference)
        name: Human-readable identifier (text or accessible name)
        tag: Tag name of the element, if known
        size: Measured size at audit time
        is_valid: True iff the element was measured and both axes meet the minimum
        recommendations: Remediation steps, one per failing axis
        unmeasured: True when the element had no layout (zero area)
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    element: Any = Field(exclude=True)
    name: str
    tag: str = ""
    size: Size
    is_valid: bool
    recommendations: list[str] = Field(default_factory=list)
    unmeasured: bool = False


class TouchTargetReport(BaseModel):
    """
    Aggregate touch-target audit.

    ``issues`` only contains the failing verdicts, in traversal order.
    """

    total: int = Field(ge=0)
    compliant: int = Field(ge=0)
    min_size: float
    issues: list[TouchTargetVerdict] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues


class MarkupVerdict(BaseModel):
    """Markup problems found on one element (missing alt, label or role)"""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    element: Any = Field(exclude=True)
    name: str
    tag: str = ""
    problems: list[str] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.problems


class MarkupReport(BaseModel):
    """
    Aggregate markup audit.

    ``checked`` counts the elements a rule applied to (images, form
    controls, click targets); ``issues`` holds the failing verdicts.
    """

    checked: int = Field(ge=0)
    issues: list[MarkupVerdict] = Field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.issues


class Issue(BaseModel):
    """
    A specific accessibility issue found by the auditor.

    Attributes:
        dimension: Which check produced the issue
        severity: How important this issue is to fix
        description: Clear explanation of the problem
        location: Element name or color pair the issue refers to
        suggestion: Actionable recommendation for fixing the issue
    """

    dimension: Literal["contrast", "touch_target", "semantics"]
    severity: Literal["high", "medium", "low"]
    description: str = Field(min_length=10)
    location: Optional[str] = Field(default=None, description="Element or color pair")
    suggestion: str = Field(min_length=10, description="Actionable fix recommendation")

    def __str__(self) -> str:
        return f"[{self.severity}] [{self.dimension}] {self.description}"


class ComplianceReport(BaseModel):
    """
    Combined result of a compliance audit.

    Attributes:
        score: 0-100, averaged across the checks that had input
        touch_targets: Touch-target audit, if an element tree was given
        markup: Markup-semantics audit, if an element tree was given
        contrast: Contrast results keyed by pair name
        issues: Findings from all checks
        recommendations: Short summary actions for the host application
        timestamp: When the audit ran
    """

    score: float = Field(ge=0, le=100)
    touch_targets: Optional[TouchTargetReport] = None
    markup: Optional[MarkupReport] = None
    contrast: dict[str, ContrastResult] = Field(default_factory=dict)
    issues: list[Issue] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    timestamp: str = Field(default_factory=lambda: datetime.now().isoformat())

    @field_validator("score")
    @classmethod
    def round_score(cls, v: float) -> float:
        """Round score to 1 decimal place for readability"""
        return round(v, 1)

    @property
    def passed(self) -> bool:
        return not self.issues

    def get_grade(self) -> str:
        """Get letter grade for the score"""
        if self.score >= 90:
            return "A"
        elif self.score >= 75:
            return "B"
        elif self.score >= 60:
            return "C"
        elif self.score >= 40:
            return "D"
        else:
            return "F"

    def summary(self) -> str:
        """Generate a human-readable summary"""
        summary = f"Grade: {self.get_grade()} ({self.score}/100)\n"
        summary += f"Issues: {len(self.issues)} total\n"

        if self.recommendations:
            summary += "\nRecommendations:\n"
            for i, recommendation in enumerate(self.recommendations, 1):
                summary += f"  {i}. {recommendation}\n"

        return summary


class Config(BaseModel):
    """
    Configuration for the compliance runtime.

    Loaded from environment variables and an optional .env file by
    ``config.load_config``.

    Attributes:
        min_touch_target: Minimum touch-target edge in pixels (WCAG 2.1 AA)
        recommended_touch_target: Preferred touch-target edge for good UX
        polite_delay_ms: Auto-clear delay for polite announcements
        assertive_delay_ms: Auto-clear delay for assertive announcements
        large_text_px: Font size at which text counts as large
        large_bold_text_px: Font size at which bold text counts as large
    """

    min_touch_target: float = Field(default=44, gt=0, le=200)
    recommended_touch_target: float = Field(default=48, gt=0, le=200)
    polite_delay_ms: int = Field(default=1000, ge=0)
    assertive_delay_ms: int = Field(default=2000, ge=0)
    large_text_px: float = Field(default=24.0, gt=0)
    large_bold_text_px: float = Field(default=18.66, gt=0)

    def delay_for(self, urgency: str) -> float:
        """Auto-clear delay in seconds for an announcement urgency"""
        if urgency == "assertive":
            return self.assertive_delay_ms / 1000.0
        return self.polite_delay_ms / 1000.0
