from __future__ import annotations

import cmath
import logging
from pathlib import Path

from cryoplot import COMPLEX_CONTOUR_PLOT, ComplexPlot, PlotOptions


def _render_domain_coloring(out_dir: Path) -> Path:
    plot = ComplexPlot(640, 480, -4.0, 4.0, -3.0, 3.0, 16, 16, 16, 16)
    # log has a branch point at 0; sqrt keeps the plot busy around it
    plot.plot(lambda z: cmath.sqrt(cmath.log(z)), color=(255, 0, 255))
    return plot.save_png(out_dir / "domain_sqrt_log.png")


def _render_contours(out_dir: Path) -> Path:
    plot = ComplexPlot(640, 480, -4.0, 4.0, -3.0, 3.0, 16, 16, 16, 16, bg_color=(255, 255, 255))
    plot.plot(lambda z: z, PlotOptions(kind=COMPLEX_CONTOUR_PLOT, color=(200, 200, 200), vert=17, horz=13))
    plot.plot(lambda z: 1 / z, kind=COMPLEX_CONTOUR_PLOT, color=(30, 90, 200), vert=33, horz=25)
    return plot.save_png(out_dir / "contour_reciprocal.png")


def _render_layered(out_dir: Path) -> Path:
    plot = ComplexPlot(480, 480, -2.0, 2.0, -2.0, 2.0)
    plot.plot(lambda z: (z * z - 1) / (z * z + 1))
    plot.plot(cmath.exp, kind=COMPLEX_CONTOUR_PLOT, color=(20, 20, 20))
    return plot.save_png(out_dir / "layered_mobius_exp.png")


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    out_dir = Path(__file__).resolve().parent / "output"
    out_dir.mkdir(parents=True, exist_ok=True)
    for render in (_render_domain_coloring, _render_contours, _render_layered):
        print(f"wrote {render(out_dir)}")


if __name__ == "__main__":
    main()
