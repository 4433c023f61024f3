"""
Pick seed colors from a wallpaper's color population.
"""

import logging
from typing import Callable

from appearance import HCT, AppearanceModel
from score import CUTOFF_CHROMA, CUTOFF_TONE, GOOGLE_BLUE, score_population
from wallpaper_colors import WallpaperColors


logger = logging.getLogger(__name__)

ScorePolicy = Callable[[dict, AppearanceModel], list]


def usable_colors(colors: list, model: AppearanceModel = HCT) -> list[int]:
    """
    Drop duplicates and colors too grey or too dark to serve as an accent.

    Order of first occurrence is kept.
    """
    unique = list(dict.fromkeys(colors))
    usable = []
    for argb in unique:
        _, chroma, tone = model.to_appearance(argb)
        if chroma >= CUTOFF_CHROMA and tone >= CUTOFF_TONE:
            usable.append(argb)
    return usable


def select_seed_candidates(
    colors: WallpaperColors,
    model: AppearanceModel = HCT,
    policy: ScorePolicy = score_population,
) -> list[int]:
    """
    Obtain the colors distinct enough to be usable in a UI.

    Args:
        colors: Population of the wallpaper
        model: Appearance model used for filtering and scoring
        policy: Ranking of a non-empty population, best first

    Returns:
        Distinct ARGB colors, most dominant first. Never empty.
    """
    if colors.population > 0:
        return policy(colors.all_colors, model)

    # Live wallpapers end up with a population of 0; their main colors
    # may still be usable.
    logger.debug("Empty population, filtering %d main colors", len(colors.main_colors))
    candidates = usable_colors(list(colors.main_colors), model)
    if not candidates:
        logger.debug("No usable main colors, falling back to #%08x", GOOGLE_BLUE)
        return [GOOGLE_BLUE]
    return candidates


def select_main_color(
    colors: WallpaperColors,
    model: AppearanceModel = HCT,
    policy: ScorePolicy = score_population,
) -> int:
    """The most common UI-ready color of the wallpaper."""
    return select_seed_candidates(colors, model, policy)[0]
