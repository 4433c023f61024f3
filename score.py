"""
Rank a weighted color population by how well each color works as a UI seed.

A color scores well when its hue neighbourhood covers a large share of the
wallpaper and its chroma sits near TARGET_CHROMA. Colors that are too grey,
too dark or too rare are dropped, and near-duplicate hues collapse onto the
best scoring representative.
"""

import numpy as np
from materialyoucolor.score.score import Score

from appearance import AppearanceModel


# =============================================================================
# Constants
# =============================================================================

CUTOFF_CHROMA = 15.0  # Minimum chroma for a usable accent
CUTOFF_TONE = 10.0  # Minimum tone (L*) for a usable accent
CUTOFF_EXCITED_PROPORTION = 0.01  # Minimum share of the hue neighbourhood

TARGET_CHROMA = 48.0
WEIGHT_PROPORTION = 0.7
WEIGHT_CHROMA_ABOVE = 0.3
WEIGHT_CHROMA_BELOW = 0.1

HUE_NEIGHBOURHOOD = 15  # Degrees either side counted towards a hue's proportion
MIN_HUE_DISTANCE = 15.0  # Chosen colors are at least this far apart in hue

GOOGLE_BLUE = 0xFF4285F4


def circular_hue_distance(hue1: float, hue2: float) -> float:
    """Compute minimum angular distance between two hues (0-180)."""
    diff = abs(hue1 - hue2) % 360.0
    return min(diff, 360.0 - diff)


def excited_proportions(hues: np.ndarray, weights: np.ndarray) -> np.ndarray:
    """
    Share of the population within HUE_NEIGHBOURHOOD degrees of each color.

    Args:
        hues: Array of shape (n,) with hue angles in degrees
        weights: Array of shape (n,) with non-negative weights (sum > 0)

    Returns:
        Array of shape (n,), each entry in [0, 1]
    """
    hue_bins = np.round(hues).astype(np.int64) % 360
    histogram = np.bincount(hue_bins, weights=weights, minlength=360) / weights.sum()

    offsets = np.arange(-HUE_NEIGHBOURHOOD, HUE_NEIGHBOURHOOD + 1)
    window = (hue_bins[:, None] + offsets[None, :]) % 360
    return histogram[window].sum(axis=1)


def score_appearance(chroma: np.ndarray, proportion: np.ndarray) -> np.ndarray:
    """Combine coverage and chroma into a single score per color."""
    proportion_score = WEIGHT_PROPORTION * 100.0 * proportion
    chroma_weight = np.where(chroma < TARGET_CHROMA, WEIGHT_CHROMA_BELOW, WEIGHT_CHROMA_ABOVE)
    chroma_score = (chroma - TARGET_CHROMA) * chroma_weight
    return proportion_score + chroma_score


def score_population(population: dict[int, float], model: AppearanceModel) -> list[int]:
    """
    Default ranking policy.

    Args:
        population: ARGB color -> non-negative weight, total weight > 0
        model: Appearance model used to read hue, chroma and tone

    Returns:
        Distinct ARGB colors, best first. Never empty: falls back to
        [GOOGLE_BLUE] when nothing survives the cutoffs.
    """
    # Sorting by color makes the result independent of dict insertion order
    colors = np.array(sorted(population), dtype=np.int64)
    if len(colors) == 0:
        return [GOOGLE_BLUE]
    weights = np.array([population[int(c)] for c in colors], dtype=np.float64)
    if weights.sum() <= 0:
        return [GOOGLE_BLUE]

    appearance = np.array([model.to_appearance(int(c)) for c in colors], dtype=np.float64)
    hues, chromas, tones = appearance[:, 0], appearance[:, 1], appearance[:, 2]

    proportions = excited_proportions(hues, weights)
    scores = score_appearance(chromas, proportions)

    usable = (
        (chromas >= CUTOFF_CHROMA)
        & (tones >= CUTOFF_TONE)
        & (proportions >= CUTOFF_EXCITED_PROPORTION)
    )
    candidates = np.flatnonzero(usable)
    # Stable sort keeps ties in ascending ARGB order
    candidates = candidates[np.argsort(-scores[candidates], kind='stable')]

    chosen: list[int] = []
    for index in candidates:
        if any(circular_hue_distance(hues[index], hues[other]) < MIN_HUE_DISTANCE for other in chosen):
            continue
        chosen.append(int(index))

    if not chosen:
        return [GOOGLE_BLUE]
    return [int(colors[index]) for index in chosen]


def material_score(population: dict[int, float], model: AppearanceModel) -> list[int]:
    """
    Ranking policy backed by materialyoucolor's Score.

    That implementation reads colors through its own HCT model, so `model`
    is unused here.
    """
    ranked = Score.score({color: population[color] for color in sorted(population)})
    return list(ranked) or [GOOGLE_BLUE]
