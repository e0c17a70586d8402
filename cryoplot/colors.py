from __future__ import annotations

import cmath
import math
from typing import Sequence


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)
WHITE: RGBA = (255, 255, 255, 255)
WHITESMOKE: RGBA = (245, 245, 245, 255)

_TWO_PI = 2.0 * math.pi


def coerce_color(color: Sequence[int]) -> RGBA:
    """Return ``color`` as an RGBA tuple; RGB input becomes opaque."""
    if isinstance(color, (str, bytes)) or len(color) not in (3, 4):
        raise ValueError(f"color must be an RGB or RGBA tuple, got {color!r}")
    channels = tuple(color)
    for c in channels:
        if isinstance(c, bool) or not isinstance(c, int) or not 0 <= c <= 255:
            raise ValueError(f"color channels must be ints in 0..255, got {color!r}")
    if len(channels) == 3:
        return (channels[0], channels[1], channels[2], 255)
    return (channels[0], channels[1], channels[2], channels[3])


def complex_to_color(z: complex) -> RGBA:
    """Domain-coloring color of ``z``.

    Hue follows the argument of ``z``. Saturation and value oscillate with
    ``ln(1 + |z|)``, which draws rings of constant magnitude. The HSV triple
    is converted with chroma ``sat * val`` and offset ``val - sat * val``.
    """
    hue = math.degrees(cmath.phase(z)) % 360.0
    r = math.log1p(abs(z))
    sat = 0.25 * (1.0 + math.sin(_TWO_PI * r)) + 0.5
    val = 0.25 * (1.0 + math.cos(_TWO_PI * r)) + 0.5

    col = sat * val
    xcol = col * (1.0 - abs(((hue / 60.0) % 2.0) - 1.0))
    m = val - col

    if 0.0 <= hue < 60.0:
        rgb = (col, xcol, 0.0)
    elif 60.0 <= hue < 120.0:
        rgb = (xcol, col, 0.0)
    elif 120.0 <= hue < 180.0:
        rgb = (0.0, col, xcol)
    elif 180.0 <= hue < 240.0:
        rgb = (0.0, xcol, col)
    elif 240.0 <= hue < 300.0:
        rgb = (xcol, 0.0, col)
    elif 300.0 <= hue < 360.0:
        rgb = (col, 0.0, xcol)
    else:
        rgb = (0.0, 0.0, 0.0)

    red, green, blue = (int((c + m) * 255) for c in rgb)
    return (red, green, blue, 255)
