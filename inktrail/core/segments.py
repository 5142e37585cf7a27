from dataclasses import dataclass

from .math import Point, Op, cubic_eval, lerp


@dataclass(frozen=True)
class CurveSegment:
    """
    One cubic Bezier piece start -> end.
      - control1, control2: Bezier handles
      - is_line: degenerate straight segment; its handles sit on the endpoints
    """
    start: Point
    control1: Point
    control2: Point
    end: Point
    is_line: bool = False

    @classmethod
    def line(cls, start: Point, end: Point) -> "CurveSegment":
        return cls(start, start, end, end, is_line=True)

    def point_group(self) -> list[Point]:
        """
        Points a caller keeps to redraw or fade this segment on its own:
        [end, control1, control2] for a curve, [start, end] for a line.
        """
        if self.is_line:
            return [self.start, self.end]
        return [self.end, self.control1, self.control2]

    def op(self) -> Op:
        if self.is_line:
            return ("L", self.end)
        return ("C", (self.control1, self.control2, self.end))

    def path_ops(self) -> list[Op]:
        return [("M", self.start), self.op()]

    def point_at(self, t: float) -> Point:
        if self.is_line:
            return lerp(self.start, self.end, t)
        return cubic_eval(self.start, self.control1, self.control2, self.end, t)
