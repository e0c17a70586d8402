from __future__ import annotations

from typing import Protocol

from cryoplot.colors import RGBA, complex_to_color
from cryoplot.geometry import PlotGeometry
from cryoplot.sampling import ComplexFunction, PassStats, evaluate


class PixelSink(Protocol):
    def set_pixel(self, x: int, y: int, color: RGBA) -> None: ...


def render_domain_coloring(
    canvas: PixelSink,
    geometry: PlotGeometry,
    func: ComplexFunction,
    fallback: RGBA,
) -> PassStats:
    """Color every graph-area pixel by ``func`` at that pixel's complex value.

    Pixels where ``func`` is undefined get ``fallback``. Each pixel is written
    exactly once, so earlier plots inside the graph area are overwritten.
    """
    stats = PassStats(kind="domain")
    for y in geometry.rows():
        for x in geometry.columns():
            sample = evaluate(func, geometry.pixel_to_complex(x, y))
            stats.record(sample)
            if sample.ok:
                canvas.set_pixel(x, y, complex_to_color(sample.value))
            else:
                canvas.set_pixel(x, y, fallback)
            stats.drawn += 1
    return stats
