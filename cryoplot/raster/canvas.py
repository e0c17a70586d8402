from __future__ import annotations

from pathlib import Path

import numpy as np
from PIL import Image

from cryoplot.colors import RGBA


def _new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 255)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


class RasterCanvas:
    """Fixed-size RGBA pixel buffer with pixel and line primitives.

    Writes replace the destination pixel; coordinates outside the canvas are
    ignored.
    """

    def __init__(self, width: int, height: int, background: RGBA = (0, 0, 0, 255)) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas width and height must be > 0")
        self.width = width
        self.height = height
        self.background = background
        self._pixels = _new_canvas(width, height, background)

    def get_pixel(self, x: int, y: int) -> RGBA:
        r, g, b, a = (int(c) for c in self._pixels[y, x])
        return (r, g, b, a)

    def set_pixel(self, x: int, y: int, color: RGBA) -> None:
        if y < 0 or y >= self.height or x < 0 or x >= self.width:
            return
        self._pixels[y, x] = color

    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None:
        """Bresenham line including both endpoints."""
        dx = abs(x1 - x0)
        sx = 1 if x0 < x1 else -1
        dy = -abs(y1 - y0)
        sy = 1 if y0 < y1 else -1
        err = dx + dy

        while True:
            self.set_pixel(x0, y0, color)
            if x0 == x1 and y0 == y1:
                break
            e2 = 2 * err
            if e2 >= dy:
                err += dy
                x0 += sx
            if e2 <= dx:
                err += dx
                y0 += sy

    def to_rgba(self) -> np.ndarray:
        return self._pixels.copy()

    def save_png(self, path: str | Path) -> Path:
        out = Path(path)
        Image.fromarray(self._pixels).save(out, format="PNG")
        return out
