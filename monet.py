"""
Turn a seed color into the accent and neutral shade ladders of a dynamic theme.

    result = result_from_wallpaper(wallpaper_colors.from_image('wallpaper.png'))
    result.accent1_shades        # 13 colors, lightest first
    result.all_neutral_shades    # neutral1 + neutral2, 26 colors
"""

import logging
from dataclasses import dataclass
from typing import Callable

from appearance import HCT, AppearanceModel, alpha_from_argb, argb_to_hex
from core_palette import CorePalette, core_palette
from score import GOOGLE_BLUE, score_population
from select_colors import ScorePolicy, select_main_color
from shades import name_shades, synthesize_ladder
from wallpaper_colors import WallpaperColors


logger = logging.getLogger(__name__)

TRANSPARENT = 0x00000000

PalettePolicy = Callable[[int, AppearanceModel], CorePalette]

FAMILIES = ('accent1', 'accent2', 'accent3', 'neutral1', 'neutral2')


@dataclass(frozen=True)
class MonetResult:
    """Five shade ladders derived from one seed color."""
    seed: int
    accent1_shades: tuple
    accent2_shades: tuple
    accent3_shades: tuple
    neutral1_shades: tuple
    neutral2_shades: tuple

    @property
    def all_accent_shades(self) -> tuple:
        return self.accent1_shades + self.accent2_shades + self.accent3_shades

    @property
    def all_neutral_shades(self) -> tuple:
        return self.neutral1_shades + self.neutral2_shades

    def ladder(self, family: str) -> tuple:
        return getattr(self, f'{family}_shades')

    def to_dict(self) -> dict:
        """Hex colors keyed by family and shade name."""
        return {
            'seed': argb_to_hex(self.seed),
            **{
                family: {name: argb_to_hex(argb) for name, argb in name_shades(self.ladder(family)).items()}
                for family in FAMILIES
            },
        }


def build_result(
    seed: int,
    model: AppearanceModel = HCT,
    palette_policy: PalettePolicy = core_palette,
) -> MonetResult:
    """
    Build every ladder for a seed color.

    A fully transparent seed means no wallpaper color is available and is
    replaced by GOOGLE_BLUE.
    """
    if alpha_from_argb(seed) == 0:
        logger.debug("Transparent seed, using #%08x", GOOGLE_BLUE)
        seed = GOOGLE_BLUE

    palette = palette_policy(seed, model)
    return MonetResult(
        seed=seed,
        accent1_shades=synthesize_ladder(palette.a1.hue, palette.a1.chroma, model),
        accent2_shades=synthesize_ladder(palette.a2.hue, palette.a2.chroma, model),
        accent3_shades=synthesize_ladder(palette.a3.hue, palette.a3.chroma, model),
        neutral1_shades=synthesize_ladder(palette.n1.hue, palette.n1.chroma, model),
        neutral2_shades=synthesize_ladder(palette.n2.hue, palette.n2.chroma, model),
    )


def result_from_wallpaper(
    colors: WallpaperColors,
    model: AppearanceModel = HCT,
    policy: ScorePolicy = score_population,
    palette_policy: PalettePolicy = core_palette,
) -> MonetResult:
    """Seed the ladders with the wallpaper's main color."""
    return build_result(select_main_color(colors, model, policy), model, palette_policy)
