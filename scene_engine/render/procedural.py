"""
Procedural stand-ins for missing asset categories.

When a wallpaper or icon category is empty the scene still has to be
constructible, so these generate plausible imagery from the injected RNG.
"""
import random
from typing import Tuple

import numpy as np
from PIL import Image, ImageDraw, ImageFilter

from ..utils.random_utils import numpy_generator

# Wallpaper palettes (top color, bottom color)
WALLPAPER_PALETTES = [
    ((24, 40, 72), (75, 108, 183)),
    ((67, 33, 110), (219, 112, 147)),
    ((18, 18, 18), (60, 60, 70)),
    ((0, 92, 151), (54, 55, 149)),
    ((236, 233, 230), (255, 255, 255)),
    ((15, 32, 39), (44, 83, 100)),
]

ICON_COLORS = [
    (0, 123, 255), (40, 167, 69), (220, 53, 69), (255, 193, 7),
    (23, 162, 184), (108, 117, 125), (124, 58, 237), (236, 72, 153),
]


def gradient_wallpaper(rng: random.Random, size: Tuple[int, int]) -> Image.Image:
    """Vertical two-color gradient with slight noise/texture."""
    width, height = size
    top, bottom = WALLPAPER_PALETTES[rng.randrange(len(WALLPAPER_PALETTES))]
    t = np.linspace(0.0, 1.0, height, dtype=np.float32)[:, None, None]
    top_arr = np.array(top, dtype=np.float32)[None, None, :]
    bottom_arr = np.array(bottom, dtype=np.float32)[None, None, :]
    arr = np.broadcast_to(top_arr + (bottom_arr - top_arr) * t, (height, width, 3)).copy()

    noise = numpy_generator(rng).normal(0, 3, arr.shape)
    arr = np.clip(arr + noise, 0, 255).astype(np.uint8)
    return Image.fromarray(arr).convert('RGBA')


def flat_icon(rng: random.Random, size: int = 128) -> Image.Image:
    """Rounded colored tile with a simple glyph (circle or bar)."""
    color = ICON_COLORS[rng.randrange(len(ICON_COLORS))]
    icon = Image.new('RGBA', (size, size), (0, 0, 0, 0))
    draw = ImageDraw.Draw(icon)
    draw.rounded_rectangle([0, 0, size - 1, size - 1], radius=size // 5, fill=color + (255,))
    inner = size // 4
    if rng.random() < 0.5:
        draw.ellipse([inner, inner, size - inner, size - inner],
                     outline=(255, 255, 255, 255), width=max(2, size // 16))
    else:
        mid = size // 2
        draw.line([(inner, mid), (size - inner, mid)],
                  fill=(255, 255, 255, 255), width=max(2, size // 12))
    return icon


def noise_content(rng: random.Random, size: Tuple[int, int]) -> Image.Image:
    """Blurred noise block used as image-like window content."""
    width, height = max(1, size[0]), max(1, size[1])
    noise = numpy_generator(rng).integers(100, 200, (height, width, 3), dtype=np.uint8)
    return Image.fromarray(noise).filter(ImageFilter.GaussianBlur(radius=3)).convert('RGBA')
