from __future__ import annotations

from typing import Iterable, Protocol

from cryoplot.colors import RGBA
from cryoplot.geometry import PlotGeometry
from cryoplot.sampling import ComplexFunction, PassStats, evaluate


Point = tuple[float, float]


class LineSink(Protocol):
    def draw_line(self, x0: int, y0: int, x1: int, y1: int, color: RGBA) -> None: ...


def grid_positions(lo: int, hi: int, count: int) -> list[int]:
    """``count`` evenly spaced integer positions from ``lo`` to ``hi`` inclusive."""
    if count < 2:
        raise ValueError("count must be >= 2")
    steps = count - 1
    return [(lo * (steps - k) + hi * k) // steps for k in range(count)]


def render_contour(
    canvas: LineSink,
    geometry: PlotGeometry,
    func: ComplexFunction,
    color: RGBA,
    vert: int,
    horz: int,
) -> PassStats:
    """Draw the image under ``func`` of a ``vert`` x ``horz`` grid of domain lines.

    Each grid line is walked one pixel at a time. Consecutive images are
    joined by a segment when both fall inside the graph area; a point where
    ``func`` is undefined breaks the line.
    """
    stats = PassStats(kind="contour")
    x_lo, x_hi = geometry.left_margin, geometry.left_margin + geometry.width - 1
    y_lo, y_hi = geometry.top_margin, geometry.top_margin + geometry.height - 1

    for px in grid_positions(x_lo, x_hi, vert):
        _trace(canvas, geometry, func, color, ((px, py) for py in geometry.rows()), stats)
    for py in grid_positions(y_lo, y_hi, horz):
        _trace(canvas, geometry, func, color, ((px, py) for px in geometry.columns()), stats)
    return stats


def _trace(
    canvas: LineSink,
    geometry: PlotGeometry,
    func: ComplexFunction,
    color: RGBA,
    pixels: Iterable[tuple[int, int]],
    stats: PassStats,
) -> None:
    old_p: Point | None = None
    for px, py in pixels:
        sample = evaluate(func, geometry.pixel_to_complex(px, py))
        stats.record(sample)
        if not sample.ok:
            old_p = None
            continue
        new_p = geometry.complex_to_pixel(sample.value)
        if old_p is not None and geometry.in_range(*old_p) and geometry.in_range(*new_p):
            x0, y0 = _snap(geometry, old_p)
            x1, y1 = _snap(geometry, new_p)
            canvas.draw_line(x0, y0, x1, y1, color)
            stats.drawn += 1
        old_p = new_p


def _snap(geometry: PlotGeometry, point: Point) -> tuple[int, int]:
    # Pixel k samples coordinate k exactly; clamp keeps x.5 inside the graph area.
    x = min(int(round(point[0])), geometry.left_margin + geometry.width - 1)
    y = min(int(round(point[1])), geometry.top_margin + geometry.height - 1)
    return (x, y)
