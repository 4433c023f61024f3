"""
Collect the weighted color population of a wallpaper.

An image is downscaled, converted to LAB and quantized into perceptually sized
bins. Each bin becomes one opaque ARGB color (the mean sRGB of its pixels)
weighted by its pixel count. Live wallpapers have no pixels to sample; for
those a zero-weight population is built from a short list of main colors.
"""

import logging
import math
from dataclasses import dataclass, field
from pathlib import Path

import numpy as np
from PIL import Image

from appearance import argb_from_rgb


logger = logging.getLogger(__name__)


# =============================================================================
# Constants
# =============================================================================

JND = 2.3  # Just Noticeable Difference in LAB units
COARSE_SCALE = 5.0  # Coarse bins: ~12 LAB units
MAX_EXTRACTION_AREA = 112 * 112  # Pixels sampled per wallpaper
MAIN_COLOR_COUNT = 3

# Image size limits (security: prevent decompression bombs)
MAX_IMAGE_PIXELS = 50_000_000  # 50 megapixels
MAX_IMAGE_DIMENSION = 10_000  # 10k pixels per side


@dataclass(frozen=True)
class WallpaperColors:
    """Population of sampled colors plus the few most prominent ones."""
    all_colors: dict = field(default_factory=dict)  # ARGB -> weight
    main_colors: tuple = ()  # ARGB, most prominent first

    @property
    def population(self) -> float:
        return float(sum(self.all_colors.values()))


def rgb_to_lab(rgb: np.ndarray) -> np.ndarray:
    """Convert RGB array (0-255) to LAB color space."""
    rgb_norm = rgb.astype(np.float64) / 255.0

    # Apply gamma correction
    mask = rgb_norm > 0.04045
    rgb_linear = np.where(mask, ((rgb_norm + 0.055) / 1.055) ** 2.4, rgb_norm / 12.92)

    # RGB to XYZ matrix
    r, g, b = rgb_linear[:, 0], rgb_linear[:, 1], rgb_linear[:, 2]
    x = r * 0.4124564 + g * 0.3575761 + b * 0.1804375
    y = r * 0.2126729 + g * 0.7151522 + b * 0.0721750
    z = r * 0.0193339 + g * 0.1191920 + b * 0.9503041

    # XYZ to LAB (D65 reference white)
    xn, yn, zn = 0.95047, 1.0, 1.08883
    x, y, z = x / xn, y / yn, z / zn

    epsilon = 0.008856
    kappa = 903.3
    fx = np.where(x > epsilon, np.cbrt(x), (kappa * x + 16) / 116)
    fy = np.where(y > epsilon, np.cbrt(y), (kappa * y + 16) / 116)
    fz = np.where(z > epsilon, np.cbrt(z), (kappa * z + 16) / 116)

    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b_val = 200 * (fy - fz)

    return np.column_stack([L, a, b_val])


def rank_main_colors(population: dict, count: int = MAIN_COLOR_COUNT) -> tuple:
    """Heaviest colors first; equal weights are ordered by ARGB value."""
    ranked = sorted(population, key=lambda color: (-population[color], color))
    return tuple(ranked[:count])


def from_population(population: dict) -> WallpaperColors:
    """
    Wrap an explicit ARGB -> weight mapping.

    Raises:
        ValueError: If any weight is negative
    """
    for color, weight in population.items():
        if weight < 0:
            raise ValueError(f"Negative weight {weight} for color #{color:08x}")
    return WallpaperColors(all_colors=dict(population), main_colors=rank_main_colors(population))


def from_colors(colors: list) -> WallpaperColors:
    """Zero-population colors for wallpapers that report only main colors."""
    return WallpaperColors(all_colors={color: 0 for color in colors}, main_colors=tuple(colors))


def quantize_pixels(rgb: np.ndarray, bin_scale: float = COARSE_SCALE) -> dict:
    """
    Quantize pixels into JND-sized LAB bins.

    Args:
        rgb: Array of shape (n, 3) with 0-255 channels
        bin_scale: Bin edge length in JNDs

    Returns:
        Dict mapping ARGB colors (mean sRGB of each bin) to pixel counts
    """
    if len(rgb) == 0:
        return {}

    lab = rgb_to_lab(rgb)
    binned = np.round(lab / (bin_scale * JND)).astype(np.int32)
    _, inverse, counts = np.unique(binned, axis=0, return_inverse=True, return_counts=True)
    inverse = inverse.reshape(-1)

    sums = np.zeros((len(counts), 3), dtype=np.float64)
    np.add.at(sums, inverse, rgb.astype(np.float64))
    means = np.clip(np.round(sums / counts[:, None]), 0, 255).astype(np.int64)

    population: dict = {}
    for (r, g, b), count in zip(means, counts):
        argb = argb_from_rgb(int(r), int(g), int(b))
        # Two bins can average to the same sRGB value
        population[argb] = population.get(argb, 0) + int(count)
    return population


def from_image(image_path, max_area: int = MAX_EXTRACTION_AREA, bin_scale: float = COARSE_SCALE) -> WallpaperColors:
    """
    Sample the color population of an image file.

    Only fully opaque pixels are counted.

    Raises:
        FileNotFoundError: If image file doesn't exist
        ValueError: If file is not a valid image or exceeds size limits
    """
    path = Path(image_path)
    try:
        img = Image.open(path)
    except FileNotFoundError:
        raise FileNotFoundError(f"Image not found: {path}")
    except Exception as e:
        raise ValueError(f"Could not open image: {e}")

    width, height = img.size
    if width > MAX_IMAGE_DIMENSION or height > MAX_IMAGE_DIMENSION:
        raise ValueError(
            f"Image dimensions {width}x{height} exceed maximum "
            f"{MAX_IMAGE_DIMENSION}x{MAX_IMAGE_DIMENSION}"
        )
    if width * height > MAX_IMAGE_PIXELS:
        raise ValueError(
            f"Image has {width * height:,} pixels, exceeding maximum {MAX_IMAGE_PIXELS:,}"
        )

    img = img.convert('RGBA')
    if width * height > max_area:
        factor = math.sqrt(max_area / (width * height))
        size = (max(1, int(width * factor)), max(1, int(height * factor)))
        img = img.resize(size, Image.Resampling.BILINEAR)
        logger.debug("Downscaled %s from %dx%d to %dx%d", path.name, width, height, *size)

    pixels = np.array(img).reshape(-1, 4)
    opaque = pixels[pixels[:, 3] == 255][:, :3]
    if len(opaque) == 0:
        logger.debug("%s has no opaque pixels", path.name)

    population = quantize_pixels(opaque, bin_scale)
    return WallpaperColors(all_colors=population, main_colors=rank_main_colors(population))
