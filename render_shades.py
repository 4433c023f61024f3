#!/usr/bin/env python3
"""Print or render the shade ladders generated from a wallpaper or a seed color."""

import argparse
import json
import logging
import sys
from pathlib import Path

from PIL import Image, ImageDraw

import wallpaper_colors
from appearance import argb_from_hex, argb_to_hex, rgb_from_argb
from monet import FAMILIES, MonetResult, build_result
from score import material_score, score_population
from select_colors import select_seed_candidates
from shades import SHADE_NAMES


POLICIES = {
    'default': score_population,
    'material': material_score,
}


def visualize_shades(result: MonetResult, output_path: Path) -> None:
    """
    Create a swatch grid: one row per family, one column per shade.

    Args:
        result: Ladders to draw
        output_path: Path to save the output image
    """
    swatch_size = 48
    padding = 8
    label_width = 80
    text_height = 16

    img_width = label_width + len(SHADE_NAMES) * (swatch_size + padding) + padding
    img_height = text_height + len(FAMILIES) * (swatch_size + padding) + padding

    img = Image.new('RGB', (img_width, img_height), (240, 240, 240))
    draw = ImageDraw.Draw(img)

    for col, name in enumerate(SHADE_NAMES):
        x = label_width + col * (swatch_size + padding)
        draw.text((x, 2), name, fill=(100, 100, 100))

    for row, family in enumerate(FAMILIES):
        y = text_height + row * (swatch_size + padding)
        draw.text((padding, y + swatch_size // 2 - 5), family, fill=(0, 0, 0))

        for col, argb in enumerate(result.ladder(family)):
            x = label_width + col * (swatch_size + padding)
            draw.rectangle([x, y, x + swatch_size, y + swatch_size], fill=rgb_from_argb(argb))

    img.save(output_path)
    print(f"Saved visualization to {output_path}", file=sys.stderr)


def format_ladders(result: MonetResult) -> str:
    lines = [f"seed      {argb_to_hex(result.seed)}"]
    for family in FAMILIES:
        hexes = ' '.join(argb_to_hex(argb) for argb in result.ladder(family))
        lines.append(f"{family:<9} {hexes}")
    return '\n'.join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Generate accent and neutral shade ladders from a wallpaper.'
    )
    parser.add_argument(
        'image',
        nargs='?',
        type=Path,
        help='Wallpaper image to sample colors from'
    )
    parser.add_argument(
        '--seed', '-s',
        help='Seed color as #RRGGBB or #AARRGGBB (skips color selection)'
    )
    parser.add_argument(
        '--policy',
        choices=sorted(POLICIES),
        default='default',
        help='Ranking policy for sampled colors (default: default)'
    )
    parser.add_argument(
        '--json',
        action='store_true',
        help='Print ladders as JSON'
    )
    parser.add_argument(
        '--swatch',
        type=Path,
        help='Render the ladders to a PNG swatch grid'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Log fallback decisions'
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    if args.image is None and args.seed is None:
        print("Error: Give a wallpaper image or --seed", file=sys.stderr)
        sys.exit(2)

    try:
        if args.seed is not None:
            seed = argb_from_hex(args.seed)
            candidates = [seed]
        else:
            colors = wallpaper_colors.from_image(args.image)
            candidates = select_seed_candidates(colors, policy=POLICIES[args.policy])
            seed = candidates[0]
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    result = build_result(seed)

    if args.json:
        output = result.to_dict()
        output['candidates'] = [argb_to_hex(argb) for argb in candidates]
        print(json.dumps(output, indent=2))
    else:
        print(f"candidates {' '.join(argb_to_hex(argb) for argb in candidates)}")
        print(format_ladders(result))

    if args.swatch is not None:
        visualize_shades(result, args.swatch)


if __name__ == '__main__':
    main()
