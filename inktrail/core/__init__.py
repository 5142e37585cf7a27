from .math import Point, Op
from .segments import CurveSegment
from .path import CurvePath
from .interpolation import (
    DEFAULT_ALPHA,
    Interpolator,
    HermiteInterpolator,
    interpolate_continuous,
    interpolate_segmented,
    resolve_alpha,
)
