import logging
import math
from abc import ABC, abstractmethod
from typing import Iterator, Sequence, override

from .math import Point, add, sub, scale, half_delta
from .path import CurvePath
from .segments import CurveSegment

logger = logging.getLogger(__name__)

DEFAULT_ALPHA = 1.0 / 3.0


def resolve_alpha(alpha: float | None) -> float:
    """
    Missing, NaN and non-positive tensions fall back to 1/3.
    Anything above 1 is kept as is.
    """
    if alpha is None or math.isnan(alpha) or alpha <= 0.0:
        return DEFAULT_ALPHA
    return float(alpha)


class Interpolator(ABC):
    """
    GUI-agnostic interpolator interface.
    """

    @abstractmethod
    def segments(self, pts: Sequence[Point], alpha: float, /) -> Iterator[CurveSegment]:
        """
        Yield one CurveSegment per consecutive pair of pts, starting at pts[0].
        """

    # ---- output adapters built on top of `segments` ------------------------
    def interpolate_continuous(self, pts: Sequence[Point], alpha: float | None = DEFAULT_ALPHA) -> CurvePath:
        """
        Chain every segment into one path: moveTo pts[0], then one op per pair.
        """
        if not pts:
            return CurvePath()
        ops = [("M", pts[0])]
        for seg in self.segments(pts, resolve_alpha(alpha)):
            ops.append(seg.op())
        return CurvePath(ops)

    def interpolate_segmented(self, pts: Sequence[Point], alpha: float | None = DEFAULT_ALPHA
                              ) -> tuple[list[CurveSegment], list[list[Point]]]:
        """
        Same segments as interpolate_continuous, returned one by one together
        with the point group each of them needs to be redrawn independently.
        """
        segments = list(self.segments(pts, resolve_alpha(alpha)))
        logger.debug("segmented %d points into %d segments", len(pts), len(segments))
        return segments, [seg.point_group() for seg in segments]


class HermiteInterpolator(Interpolator):
    """
    Catmull-Rom style cubic Hermite tangents turned into Bezier handles:
      - interior tangent: (next - prev) / 2, scaled by alpha
      - first point: forward difference, last point: backward difference
      - the last leg of a trail with more than two points is a straight line
    Neighbour lookup wraps around the sequence ends; the wrapped neighbours
    only ever land in branches that use the one-sided differences instead.
    """

    @override
    def segments(self, pts: Sequence[Point], alpha: float, /) -> Iterator[CurveSegment]:
        count = len(pts)
        n = count - 1
        for i in range(n):
            current = pts[i]
            prev = pts[i - 1] if i > 0 else pts[count - 1]
            nxt = pts[(i + 1) % count]
            end = nxt

            if i > 0:
                m = half_delta(prev, nxt)
            else:
                m = half_delta(current, nxt)
            c1 = add(current, scale(m, alpha))

            # tangent at the end point
            prev = pts[i]
            nxt = pts[(i + 2) % count]
            if i < n - 1:
                m = half_delta(prev, nxt)
            else:
                m = half_delta(prev, end)
            c2 = sub(end, scale(m, alpha))

            if i == n - 1 and count > 2:
                yield CurveSegment.line(current, end)
            else:
                yield CurveSegment(current, c1, c2, end)


_default = HermiteInterpolator()


def interpolate_continuous(pts: Sequence[Point], alpha: float | None = DEFAULT_ALPHA) -> CurvePath:
    return _default.interpolate_continuous(pts, alpha)


def interpolate_segmented(pts: Sequence[Point], alpha: float | None = DEFAULT_ALPHA
                          ) -> tuple[list[CurveSegment], list[list[Point]]]:
    return _default.interpolate_segmented(pts, alpha)
