"""Typed units, controllers, feedforward models, filters, 2D/3D geometry and a robot loop."""

__version__ = "0.1.0"
__all__ = [
    "units",
    "math_util",
    "controllers",
    "feed_forward",
    "filters",
    "geometry2d",
    "geometry3d",
    "robots",
]