"""
Application Palette

The portal's named color combinations and a reference palette of
accessible alternatives, plus helpers to pick and validate text colors.
"""

from typing import Literal, Optional

from pydantic import BaseModel

from .checks.contrast import ColorLike, contrast_ratio, evaluate, parse_color
from .models import ContrastResult

PRIMARY = "#1C8282"
PRIMARY_HOVER = "#158080"
WHITE = "#FFFFFF"
BLACK = "#000000"
GRAY_900 = "#111827"
GRAY_600 = "#4B5563"
GRAY_500 = "#6B7280"
GRAY_400 = "#9CA3AF"
GRAY_50 = "#F9FAFB"
BLUE_50 = "#EFF6FF"


class ColorPair(BaseModel):
    name: str
    foreground: str
    background: str
    is_large_text: bool = False


class PaletteCheck(BaseModel):
    pair: ColorPair
    result: ContrastResult


APPLICATION_COLORS: list[ColorPair] = [
    # Primary button
    ColorPair(name="Primary Button Text", foreground=WHITE, background=PRIMARY),
    ColorPair(name="Primary Button Hover", foreground=WHITE, background=PRIMARY_HOVER),
    # Text
    ColorPair(name="Body Text on White", foreground=GRAY_900, background=WHITE),
    ColorPair(name="Secondary Text on White", foreground=GRAY_600, background=WHITE),
    ColorPair(name="Muted Text on White", foreground=GRAY_500, background=WHITE),
    ColorPair(name="Placeholder Text on White", foreground=GRAY_400, background=WHITE),
    # Primary color text
    ColorPair(name="Primary Text on White", foreground=PRIMARY, background=WHITE),
    ColorPair(name="Primary Text on Gray50", foreground=PRIMARY, background=GRAY_50),
    # Status badges
    ColorPair(name="Success Badge", foreground="#065F46", background="#D1FAE5"),
    ColorPair(name="Warning Badge", foreground="#92400E", background="#FEF3C7"),
    ColorPair(name="Error Badge", foreground="#991B1B", background="#FEE2E2"),
    ColorPair(name="Info Badge", foreground="#1E40AF", background="#DBEAFE"),
    # Focus indicator
    ColorPair(name="Focus Ring", foreground=PRIMARY, background=WHITE),
    # Cards
    ColorPair(name="Card Text on Blue50", foreground=GRAY_900, background=BLUE_50),
    ColorPair(name="Secondary Text on Blue50", foreground=GRAY_600, background=BLUE_50),
    # Skip link
    ColorPair(name="Skip Link", foreground=WHITE, background=PRIMARY),
]

ACCESSIBLE_COLORS = {
    "primary": {
        50: "#F0FDFA",
        100: "#CCFBF1",
        200: "#99F6E4",
        300: "#5EEAD4",
        400: "#2DD4BF",
        500: "#14B8A6",
        600: "#0D9488",
        700: "#0F766E",
        800: "#115E59",
        900: "#134E4A",
    },
    "status": {
        "success": {"bg": "#D1FAE5", "text": "#065F46"},
        "warning": {"bg": "#FEF3C7", "text": "#92400E"},
        "error": {"bg": "#FEE2E2", "text": "#991B1B"},
        "info": {"bg": "#DBEAFE", "text": "#1E40AF"},
    },
    "gray": {
        50: "#F9FAFB",
        100: "#F3F4F6",
        200: "#E5E7EB",
        300: "#D1D5DB",
        400: "#9CA3AF",  # large text only
        500: "#6B7280",
        600: "#4B5563",
        700: "#374151",
        800: "#1F2937",
        900: "#111827",
    },
}


def check_palette(pairs: list[ColorPair]) -> list[PaletteCheck]:
    """Evaluate each named pair; raises InvalidColorFormat on a bad entry"""
    return [
        PaletteCheck(pair=pair, result=evaluate(pair.foreground, pair.background, pair.is_large_text))
        for pair in pairs
    ]


def check_application_colors() -> list[PaletteCheck]:
    return check_palette(APPLICATION_COLORS)


def recommended_text_color(background: ColorLike) -> str:
    """Black or white, whichever contrasts more with ``background``"""
    white = contrast_ratio(WHITE, background)
    black = contrast_ratio(BLACK, background)
    return WHITE if white > black else BLACK


class ColorValidation(BaseModel):
    is_accessible: bool
    contrast_ratio: float
    recommendation: Optional[str] = None


def validate_color_combination(
    foreground: ColorLike,
    background: ColorLike,
    context: Literal["normal", "large", "ui"] = "normal",
) -> ColorValidation:
    """
    Validate a combination for a usage context.

    Only ``"large"`` relaxes the requirement to 3:1; ``"ui"`` is held to
    the normal-text rule.
    """
    result = evaluate(foreground, background, is_large_text=context == "large")

    recommendation = None
    if not result.passes:
        bg = parse_color(background).hex
        recommendation = (
            f"Consider using {recommended_text_color(bg)} text on {bg} "
            f"background for better contrast"
        )

    return ColorValidation(
        is_accessible=result.passes,
        contrast_ratio=result.ratio,
        recommendation=recommendation,
    )
