from __future__ import annotations


class CryoplotError(Exception):
    """Base class for errors raised by cryoplot."""


class PlotConfigError(CryoplotError, ValueError):
    """Raised when plot options are invalid; nothing has been drawn."""


class PlotGeometryError(CryoplotError, ValueError):
    """Raised when a plot surface is built with a degenerate geometry."""
