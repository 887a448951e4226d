"""
WCAG Contrast Ratio Checker

Relative luminance and contrast ratio per WCAG 2.1, classified against
AA (4.5:1 normal text, 3:1 large text) and AAA (7:1 / 4.5:1).
"""

import re
from typing import Optional, Union

from ..errors import InvalidColorFormat
from ..models import Color, Config, ContrastResult

HEX_COLOR = re.compile(r"^#?([0-9a-f]{2})([0-9a-f]{2})([0-9a-f]{2})$", re.IGNORECASE)

AA_NORMAL = 4.5
AA_LARGE = 3.0
AAA_NORMAL = 7.0
AAA_LARGE = 4.5

ColorLike = Union[str, Color]


def parse_color(value: ColorLike) -> Color:
    """
    Parse a ``#RRGGBB`` (or ``RRGGBB``) string into a Color.

    Args:
        value: Hex string, case-insensitive, or an existing Color

    Returns:
        Parsed Color

    Raises:
        InvalidColorFormat: If the value is not exactly six hex digits

    Example:
        parse_color("#1c8282").hex  # "#1C8282"
    """
    if isinstance(value, Color):
        return value
    if not isinstance(value, str):
        raise InvalidColorFormat(value)

    match = HEX_COLOR.match(value.strip())
    if match is None:
        raise InvalidColorFormat(value)

    r, g, b = (int(channel, 16) for channel in match.groups())
    return Color(r=r, g=g, b=b)


def _linearize(channel: int) -> float:
    c = channel / 255.0
    return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: ColorLike) -> float:
    """
    Calculate relative luminance (0 = black, 1 = white).

    Raises:
        InvalidColorFormat: If ``color`` is a malformed string
    """
    rgb = parse_color(color)
    return (
        0.2126 * _linearize(rgb.r)
        + 0.7152 * _linearize(rgb.g)
        + 0.0722 * _linearize(rgb.b)
    )


def contrast_ratio(color1: ColorLike, color2: ColorLike) -> float:
    """
    Calculate WCAG contrast ratio between two colors.

    Formula: (L1 + 0.05) / (L2 + 0.05) where L1 is the lighter color's
    relative luminance. The result is unrounded and symmetric in its
    arguments.

    Returns:
        Contrast ratio (1-21, where 21 is maximum contrast)

    Raises:
        InvalidColorFormat: If either color is malformed

    Example:
        ratio = contrast_ratio("#000000", "#FFFFFF")  # 21.0
    """
    l1 = relative_luminance(color1)
    l2 = relative_luminance(color2)

    lighter, darker = max(l1, l2), min(l1, l2)
    ratio = (lighter + 0.05) / (darker + 0.05)
    # Float error can push pure black/white a hair past the bounds
    return min(21.0, max(1.0, ratio))


def required_ratios(is_large_text: bool) -> tuple[float, float]:
    """Return the (AA, AAA) requirements for a text size class"""
    if is_large_text:
        return AA_LARGE, AAA_LARGE
    return AA_NORMAL, AAA_NORMAL


def evaluate(
    foreground: ColorLike,
    background: ColorLike,
    is_large_text: bool = False,
) -> ContrastResult:
    """
    Check a color combination against WCAG AA and AAA.

    Thresholds are compared against the unrounded ratio; the reported
    ratio is rounded to 2 decimals.

    Args:
        foreground: Text color
        background: Background color
        is_large_text: Large text only needs 3:1 for AA

    Returns:
        ContrastResult with ratio, requirement and level

    Raises:
        InvalidColorFormat: If either color is malformed
    """
    fg = parse_color(foreground)
    bg = parse_color(background)
    ratio = contrast_ratio(fg, bg)
    required, required_aaa = required_ratios(is_large_text)

    if ratio >= required_aaa:
        level = "AAA"
    elif ratio >= required:
        level = "AA"
    else:
        level = "Fail"

    return ContrastResult(
        foreground=fg.hex,
        background=bg.hex,
        ratio=round(ratio, 2),
        required_ratio=required,
        level=level,
        passes=ratio >= required,
        is_large_text=is_large_text,
    )


def is_large_text(
    font_size_px: float,
    bold: bool = False,
    config: Optional[Config] = None,
) -> bool:
    """
    Classify text as large for the 3:1 rule.

    WCAG treats 18pt (24px) regular or 14pt (about 18.66px) bold text as
    large; both thresholds come from ``config``.
    """
    config = config or Config()
    threshold = config.large_bold_text_px if bold else config.large_text_px
    return font_size_px >= threshold
