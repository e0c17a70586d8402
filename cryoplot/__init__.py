from cryoplot.colors import BLACK, WHITE, WHITESMOKE, complex_to_color
from cryoplot.errors import CryoplotError, PlotConfigError, PlotGeometryError
from cryoplot.geometry import PlotGeometry
from cryoplot.options import COMPLEX_CONTOUR_PLOT, DOMAIN_COLORED_PLOT, PlotOptions
from cryoplot.sampling import PassStats, Sample, evaluate
from cryoplot.surface import ComplexPlot

__all__ = [
    "BLACK",
    "COMPLEX_CONTOUR_PLOT",
    "ComplexPlot",
    "CryoplotError",
    "DOMAIN_COLORED_PLOT",
    "PassStats",
    "PlotConfigError",
    "PlotGeometry",
    "PlotGeometryError",
    "PlotOptions",
    "Sample",
    "WHITE",
    "WHITESMOKE",
    "complex_to_color",
    "evaluate",
]
