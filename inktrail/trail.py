import logging
from collections import deque
from typing import Iterable

from inktrail.config import TrailConfig
from inktrail.core import Point, CurvePath, CurveSegment, HermiteInterpolator

logger = logging.getLogger(__name__)


class TrailBuffer:
    """
    Caller-side state of one stroke.

    Two windows are fed from the same point stream: the raw points behind the
    continuous trail, and the waiting points that get cut into segments which
    retire one by one. Expiry is driven by the timestamps the caller passes
    in, so the same sequence of calls always leaves the same state.
    """

    def __init__(self, config: TrailConfig | None = None, interpolator: HermiteInterpolator | None = None):
        self._config = config or TrailConfig()
        self._interpolator = interpolator or HermiteInterpolator()
        self._raw: deque[tuple[float, Point]] = deque()
        self._waiting: list[Point] = []
        self._live: deque[tuple[float, CurveSegment]] = deque()
        self._last_point: Point | None = None
        self._ended_at: float | None = None

    # ---- accessors -------------------------------------------------------------
    @property
    def config(self) -> TrailConfig:
        return self._config

    @property
    def raw_points(self) -> list[Point]:
        return [p for _, p in self._raw]

    @property
    def waiting_points(self) -> list[Point]:
        return list(self._waiting)

    @property
    def segments(self) -> list[CurveSegment]:
        return [seg for _, seg in self._live]

    @property
    def last_point(self) -> Point | None:
        return self._last_point

    @property
    def ended_at(self) -> float | None:
        return self._ended_at

    @property
    def is_empty(self) -> bool:
        return not self._live and not self._raw

    def __len__(self) -> int:
        return len(self._live)

    def __getitem__(self, index: int) -> CurveSegment:
        return self._live[index][1]

    # ---- stream ----------------------------------------------------------------
    def add_points(self, points: Iterable[Point], now: float, ended: bool = False) -> list[CurveSegment]:
        """
        Append a batch of samples taken at `now` and cut the waiting window
        into segments. Returns the segments emitted by this batch.
        """
        batch = [(float(x), float(y)) for x, y in points]
        if ended:
            self._ended_at = now
        if not batch:
            return []

        self._raw.extend((now, p) for p in batch)
        self._waiting.extend(batch)
        self._last_point = batch[-1]

        if len(self._waiting) < 2:
            return []

        emitted, _ = self._interpolator.interpolate_segmented(self._waiting, self._config.alpha)
        self._live.extend((now, seg) for seg in emitted)
        # keep the last leg so the next batch re-curves it with a real tangent
        self._waiting = self._waiting[-2:]
        logger.debug("emitted %d segments, %d live", len(emitted), len(self._live))
        return emitted

    def expire(self, now: float) -> list[CurveSegment]:
        """
        Drop raw points and live segments whose time-to-live has run out at
        `now`, oldest first. Returns the retired segments.
        """
        raw_ttl = self._config.raw_point_ttl
        while self._raw and self._raw[0][0] + raw_ttl <= now:
            self._raw.popleft()

        retired: list[CurveSegment] = []
        seg_ttl = self._config.segment_ttl
        while self._live and self._live[0][0] + seg_ttl <= now:
            retired.append(self._live.popleft()[1])
        if retired:
            logger.debug("retired %d segments, %d live", len(retired), len(self._live))
        return retired

    def raw_path(self) -> CurvePath:
        return self._interpolator.interpolate_continuous(self.raw_points, self._config.alpha)

    def clear(self):
        self._raw.clear()
        self._waiting = []
        self._live.clear()
        self._last_point = None
        self._ended_at = None
