from .canvas import RasterCanvas

__all__ = [
    "RasterCanvas",
]
