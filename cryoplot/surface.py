from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import numpy as np

from cryoplot.colors import RGBA, WHITESMOKE, coerce_color
from cryoplot.contour import render_contour
from cryoplot.domain_coloring import render_domain_coloring
from cryoplot.errors import PlotConfigError
from cryoplot.geometry import PlotGeometry
from cryoplot.options import DOMAIN_COLORED_PLOT, PlotOptions, resolve_plot_options
from cryoplot.raster import RasterCanvas
from cryoplot.sampling import ComplexFunction, PassStats


LOGGER = logging.getLogger(__name__)
DEFAULT_BACKGROUND: RGBA = WHITESMOKE


class ComplexPlot:
    """A canvas holding one or more plots of complex-valued functions.

    ``width`` and ``height`` size the graph area; margins are added around
    it. Several functions may be drawn on one instance. A domain-colored plot
    repaints the whole graph area, so it should be drawn first.
    """

    def __init__(
        self,
        width: int,
        height: int,
        min_r: float,
        max_r: float,
        min_i: float,
        max_i: float,
        top_margin: int = 0,
        bottom_margin: int = 0,
        left_margin: int = 0,
        right_margin: int = 0,
        bg_color: RGBA = DEFAULT_BACKGROUND,
    ) -> None:
        self.geometry = PlotGeometry(
            width=width,
            height=height,
            min_r=float(min_r),
            max_r=float(max_r),
            min_i=float(min_i),
            max_i=float(max_i),
            top_margin=top_margin,
            bottom_margin=bottom_margin,
            left_margin=left_margin,
            right_margin=right_margin,
        )
        self.geometry.validate()
        self.background = coerce_color(bg_color)
        self.canvas = RasterCanvas(self.geometry.image_width, self.geometry.image_height, self.background)
        self._size = 0

    @property
    def size(self) -> int:
        """Number of functions plotted so far."""
        return self._size

    @property
    def width(self) -> int:
        return self.geometry.width

    @property
    def height(self) -> int:
        return self.geometry.height

    @property
    def image_width(self) -> int:
        return self.geometry.image_width

    @property
    def image_height(self) -> int:
        return self.geometry.image_height

    def pixel_to_complex(self, x: float, y: float) -> complex:
        return self.geometry.pixel_to_complex(x, y)

    def complex_to_pixel(self, z: complex) -> tuple[float, float]:
        return self.geometry.complex_to_pixel(z)

    def in_range(self, x: float, y: float) -> bool:
        return self.geometry.in_range(x, y)

    def plot(self, func: ComplexFunction, options: PlotOptions | None = None, **overrides: Any) -> PassStats:
        """Draw ``func`` onto the plot.

        Keyword overrides (``type``/``kind``, ``color``, ``vert``, ``horz``) are applied
        on top of ``options``. Invalid options raise ``PlotConfigError`` before
        anything is drawn.
        """
        if not callable(func):
            raise PlotConfigError(f"func must be callable, got {type(func).__name__}")
        opts = resolve_plot_options(options, **overrides)

        if opts.kind == DOMAIN_COLORED_PLOT:
            if self._size > 0:
                LOGGER.warning(
                    "domain-colored plot will overdraw %d existing plot(s); draw it first", self._size
                )
            stats = render_domain_coloring(self.canvas, self.geometry, func, opts.color)
        else:
            stats = render_contour(self.canvas, self.geometry, func, opts.color, opts.vert, opts.horz)

        LOGGER.debug(
            "%s plot #%d: %d samples, %d undefined, %d drawn",
            stats.kind,
            self._size + 1,
            stats.samples,
            stats.failures,
            stats.drawn,
        )
        self._size += 1
        return stats

    def to_rgba(self) -> np.ndarray:
        return self.canvas.to_rgba()

    def save_png(self, path: str | Path) -> Path:
        return self.canvas.save_png(path)
