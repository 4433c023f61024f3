"""
Perceptual appearance model used to read and build colors.

Colors travel through the project as 32-bit ARGB integers. Anything that needs
hue, chroma or tone goes through an AppearanceModel, a pair of plain callables,
so a different color appearance model can be dropped in without touching the
selection or shade code.
"""

from dataclasses import dataclass
from typing import Callable

from materialyoucolor.hct import Hct


Appearance = tuple[float, float, float]  # (hue, chroma, tone)


@dataclass(frozen=True)
class AppearanceModel:
    """Forward and inverse transform between ARGB and (hue, chroma, tone)."""
    to_appearance: Callable[[int], Appearance]
    from_appearance: Callable[[float, float, float], int]


# =============================================================================
# ARGB helpers
# =============================================================================

def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 0xFF


def rgb_from_argb(argb: int) -> tuple[int, int, int]:
    """Split an ARGB integer into (R, G, B)."""
    return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF)


def argb_from_rgb(r: int, g: int, b: int) -> int:
    """Pack (R, G, B) into an opaque ARGB integer."""
    return (0xFF << 24) | ((r & 0xFF) << 16) | ((g & 0xFF) << 8) | (b & 0xFF)


def argb_to_hex(argb: int) -> str:
    """Format as #RRGGBB, dropping alpha."""
    r, g, b = rgb_from_argb(argb)
    return f"#{r:02x}{g:02x}{b:02x}"


def argb_from_hex(text: str) -> int:
    """
    Parse #RRGGBB or #AARRGGBB (leading # optional).

    Six-digit values are treated as opaque.

    Raises:
        ValueError: If the text is not a 6 or 8 digit hex color
    """
    digits = text.strip().lstrip('#')
    if len(digits) not in (6, 8):
        raise ValueError(f"Not a hex color: {text!r}")
    try:
        value = int(digits, 16)
    except ValueError:
        raise ValueError(f"Not a hex color: {text!r}")
    if len(digits) == 6:
        value |= 0xFF000000
    return value


# =============================================================================
# HCT (materialyoucolor)
# =============================================================================

def hct_from_argb(argb: int) -> Appearance:
    hct = Hct.from_int(argb)
    return (hct.hue, hct.chroma, hct.tone)


def argb_from_hct(hue: float, chroma: float, tone: float) -> int:
    # Tone is L*; the ladder may ask for values outside the gamut's range
    tone = min(max(tone, 0.0), 100.0)
    return Hct.from_hct(hue % 360.0, max(chroma, 0.0), tone).to_int()


HCT = AppearanceModel(to_appearance=hct_from_argb, from_appearance=argb_from_hct)
