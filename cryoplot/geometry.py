from __future__ import annotations

from dataclasses import dataclass
import math

from cryoplot.errors import PlotGeometryError


@dataclass(frozen=True)
class PlotGeometry:
    """Maps graph-area pixels onto a rectangle of the complex plane.

    Pixel ``(left_margin, top_margin)`` samples ``min_r + max_i*j`` and pixel
    ``(left_margin + width - 1, top_margin + height - 1)`` samples
    ``max_r + min_i*j``. Rows grow downwards while the imaginary axis grows
    upwards.
    """

    width: int
    height: int
    min_r: float
    max_r: float
    min_i: float
    max_i: float
    top_margin: int = 0
    bottom_margin: int = 0
    left_margin: int = 0
    right_margin: int = 0

    def validate(self) -> None:
        if self.width <= 1 or self.height <= 1:
            raise PlotGeometryError(f"graph width/height must be > 1, got {self.width}x{self.height}")
        for name in ("top_margin", "bottom_margin", "left_margin", "right_margin"):
            if getattr(self, name) < 0:
                raise PlotGeometryError(f"{name} must be >= 0")
        bounds = (self.min_r, self.max_r, self.min_i, self.max_i)
        if not all(math.isfinite(v) for v in bounds):
            raise PlotGeometryError(f"domain bounds must be finite, got {bounds}")
        if self.max_r <= self.min_r:
            raise PlotGeometryError(f"max_r must be > min_r ({self.max_r} <= {self.min_r})")
        if self.max_i <= self.min_i:
            raise PlotGeometryError(f"max_i must be > min_i ({self.max_i} <= {self.min_i})")

    @property
    def image_width(self) -> int:
        return self.width + self.left_margin + self.right_margin

    @property
    def image_height(self) -> int:
        return self.height + self.top_margin + self.bottom_margin

    @property
    def real_step(self) -> float:
        return (self.max_r - self.min_r) / (self.width - 1)

    @property
    def imag_step(self) -> float:
        return (self.max_i - self.min_i) / (self.height - 1)

    def columns(self) -> range:
        return range(self.left_margin, self.left_margin + self.width)

    def rows(self) -> range:
        return range(self.top_margin, self.top_margin + self.height)

    def pixel_to_complex(self, x: float, y: float) -> complex:
        re = self.min_r + (x - self.left_margin) * self.real_step
        im = self.max_i - (y - self.top_margin) * self.imag_step
        return complex(re, im)

    def complex_to_pixel(self, z: complex) -> tuple[float, float]:
        # Not snapped and not clipped; callers range-check with in_range().
        x = self.left_margin + (z.real - self.min_r) / self.real_step
        y = self.top_margin + (self.max_i - z.imag) / self.imag_step
        return (x, y)

    def in_range(self, x: float, y: float) -> bool:
        return (
            self.left_margin <= x < self.left_margin + self.width
            and self.top_margin <= y < self.top_margin + self.height
        )
