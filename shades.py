"""
Expand a hue/chroma pair into the 13-step tonal ladder used by every palette family.
"""

from appearance import HCT, AppearanceModel


MAX_CHROMA = 40.0  # Mutes saturation so ladders stay close to the stock palettes
SHADE_COUNT = 13

# WCAG 2.0 AA needs 4.5:1 for normal text. Tone 50 at this slot misses it;
# 49.6 is the closest tone that meets it.
ACCESSIBLE_MIDTONE = 49.6
ACCESSIBLE_MIDTONE_INDEX = 6


def _tone_schedule() -> tuple[float, ...]:
    tones = [99.0, 95.0]
    for i in range(2, SHADE_COUNT):
        if i == ACCESSIBLE_MIDTONE_INDEX:
            tones.append(ACCESSIBLE_MIDTONE)
        else:
            tones.append(float(100 - 10 * (i - 1)))
    return tuple(tones)


SHADE_TONES = _tone_schedule()

# Resource suffixes of the matching system colors, e.g. system_accent1_400
SHADE_NAMES = ('0', '10', '50', '100', '200', '300', '400', '500', '600', '700', '800', '900', '1000')


def capped_chroma(chroma: float) -> float:
    return min(chroma, MAX_CHROMA)


def synthesize_ladder(hue: float, chroma: float, model: AppearanceModel = HCT) -> tuple[int, ...]:
    """
    Build one ladder of shades, lightest first.

    Args:
        hue: Hue angle in degrees
        chroma: Requested chroma; capped at MAX_CHROMA for the whole ladder
        model: Appearance model that turns (hue, chroma, tone) into ARGB

    Returns:
        Tuple of SHADE_COUNT ARGB colors following SHADE_TONES
    """
    chroma = capped_chroma(chroma)
    return tuple(model.from_appearance(hue, chroma, tone) for tone in SHADE_TONES)


def name_shades(ladder: tuple[int, ...]) -> dict[str, int]:
    """Key a ladder by its shade names."""
    return dict(zip(SHADE_NAMES, ladder))
