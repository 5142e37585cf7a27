from .core import (
    Point,
    CurveSegment,
    CurvePath,
    DEFAULT_ALPHA,
    HermiteInterpolator,
    interpolate_continuous,
    interpolate_segmented,
)
from .config import TrailConfig
from .trail import TrailBuffer

__all__ = [
    "Point",
    "CurveSegment",
    "CurvePath",
    "DEFAULT_ALPHA",
    "HermiteInterpolator",
    "interpolate_continuous",
    "interpolate_segmented",
    "TrailConfig",
    "TrailBuffer",
]
