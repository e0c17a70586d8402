from __future__ import annotations

from dataclasses import dataclass, fields, replace
from typing import Any, Literal

from cryoplot.colors import BLACK, RGBA, coerce_color
from cryoplot.errors import PlotConfigError


PlotKind = Literal["domain", "contour"]

DOMAIN_COLORED_PLOT: PlotKind = "domain"
COMPLEX_CONTOUR_PLOT: PlotKind = "contour"
PLOT_KINDS: tuple[PlotKind, ...] = (DOMAIN_COLORED_PLOT, COMPLEX_CONTOUR_PLOT)

DEFAULT_PLOT_COLOR: RGBA = BLACK
DEFAULT_GRID_LINES = 10


@dataclass(frozen=True)
class PlotOptions:
    """Options for one ``ComplexPlot.plot`` call.

    ``color`` is the fallback color of a domain-colored plot (used where the
    function is undefined) and the line color of a contour plot. ``vert`` and
    ``horz`` count the vertical and horizontal grid lines of a contour plot,
    boundary lines included.
    """

    kind: PlotKind = DOMAIN_COLORED_PLOT
    color: RGBA = DEFAULT_PLOT_COLOR
    vert: int = DEFAULT_GRID_LINES
    horz: int = DEFAULT_GRID_LINES

    def validated(self) -> "PlotOptions":
        if self.kind not in PLOT_KINDS:
            raise PlotConfigError(f"invalid plot type {self.kind!r}; expected one of {PLOT_KINDS}")
        try:
            color = coerce_color(self.color)
        except (TypeError, ValueError) as exc:
            raise PlotConfigError(str(exc)) from exc
        for name in ("vert", "horz"):
            count = getattr(self, name)
            if isinstance(count, bool) or not isinstance(count, int) or count < 2:
                raise PlotConfigError(f"{name} must be an int >= 2, got {count!r}")
        return replace(self, color=color)


_OPTION_NAMES = frozenset(f.name for f in fields(PlotOptions))


def resolve_plot_options(options: PlotOptions | None = None, **overrides: Any) -> PlotOptions:
    """Apply keyword overrides to ``options``; ``type`` is accepted for ``kind``."""
    if "type" in overrides:
        if "kind" in overrides:
            raise PlotConfigError("pass either `type` or `kind`, not both")
        overrides["kind"] = overrides.pop("type")
    if options is not None and not isinstance(options, PlotOptions):
        raise PlotConfigError(f"options must be PlotOptions, got {type(options).__name__}")
    unknown = sorted(set(overrides) - _OPTION_NAMES)
    if unknown:
        raise PlotConfigError(f"unknown plot option(s): {', '.join(unknown)}")
    base = options if options is not None else PlotOptions()
    return replace(base, **overrides).validated()
