"""
Derive the five key hue/chroma pairs (three accents, two neutrals) from a seed color.
"""

from dataclasses import dataclass

from appearance import HCT, AppearanceModel


MIN_PRIMARY_CHROMA = 48.0
SECONDARY_CHROMA = 16.0
TERTIARY_CHROMA = 32.0
TERTIARY_HUE_SHIFT = 60.0
NEUTRAL_CHROMA = 4.0
NEUTRAL_VARIANT_CHROMA = 8.0


@dataclass(frozen=True)
class HueChroma:
    """Seed of one shade family: a hue and chroma without tone."""
    hue: float
    chroma: float


@dataclass(frozen=True)
class CorePalette:
    """Key colors of the five families."""
    a1: HueChroma
    a2: HueChroma
    a3: HueChroma
    n1: HueChroma
    n2: HueChroma


def core_palette(argb: int, model: AppearanceModel = HCT) -> CorePalette:
    """Default palette policy: every family shares the seed's hue except the tertiary accent."""
    hue, chroma, _ = model.to_appearance(argb)
    return CorePalette(
        a1=HueChroma(hue, max(MIN_PRIMARY_CHROMA, chroma)),
        a2=HueChroma(hue, SECONDARY_CHROMA),
        a3=HueChroma((hue + TERTIARY_HUE_SHIFT) % 360.0, TERTIARY_CHROMA),
        n1=HueChroma(hue, NEUTRAL_CHROMA),
        n2=HueChroma(hue, NEUTRAL_VARIANT_CHROMA),
    )
