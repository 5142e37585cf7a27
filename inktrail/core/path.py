from dataclasses import dataclass, field
from typing import Iterator, TYPE_CHECKING

from .math import Point, Op
from .segments import CurveSegment

if TYPE_CHECKING:
    from PySide6 import QtGui


_OP_ARITY = {"M": 1, "L": 1, "C": 3}


@dataclass()
class CurvePath:
    """
    A chained path as simple drawing ops:
      - ("M", (x,y))       moveTo
      - ("L", (x,y))       lineTo
      - ("C", (c1,c2,p2))  cubicTo
    """
    ops: list[Op] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ops)

    def __bool__(self) -> bool:
        return bool(self.ops)

    def __iter__(self) -> Iterator[Op]:
        return iter(self.ops)

    @property
    def start(self) -> Point | None:
        return self.ops[0][1] if self.ops else None

    def segments(self) -> list[CurveSegment]:
        """
        Rebuild the standalone segments, tracking the current point across ops.
        """
        out: list[CurveSegment] = []
        current: Point | None = None
        for op, data in self.ops:
            if op == "M":
                current = data
            elif op == "L":
                out.append(CurveSegment.line(current, data))
                current = data
            elif op == "C":
                c1, c2, p2 = data
                out.append(CurveSegment(current, c1, c2, p2))
                current = p2
        return out

    def sample(self, total: int = 100) -> list[Point]:
        """
        Sample 'total' points across all segments.
        Segments share samples evenly (simple and fast).
        """
        if not self.ops:
            return []
        segs = self.segments()
        if not segs:
            return [self.start]

        m = len(segs)
        per = max(1, total // m)
        out: list[Point] = []
        for seg in segs:
            for i in range(per):
                out.append(seg.point_at(i / per))
        # ensure last endpoint is included
        out.append(segs[-1].end)
        if total > 1 and len(out) > total:
            step = (len(out) - 1) / (total - 1)
            return [out[int(round(i * step))] for i in range(total)]
        return out

    # ---- serialization -------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "ops": [[op, [list(p) for p in _op_points(op, data)]] for op, data in self.ops],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "CurvePath":
        ops: list[Op] = []
        for op, pts in data["ops"]:
            if op not in _OP_ARITY:
                raise ValueError(f"Unknown path op '{op}'")
            pts = [tuple(map(float, p)) for p in pts]
            if len(pts) != _OP_ARITY[op]:
                raise ValueError(f"Op '{op}' expects {_OP_ARITY[op]} point(s), got {len(pts)}")
            ops.append((op, pts[0] if op != "C" else tuple(pts)))
        return cls(ops=ops)

    def make_qpath(self) -> "QtGui.QPainterPath":
        from inktrail.qt import make_qpath
        return make_qpath(self)


def _op_points(op: str, data) -> tuple[Point, ...]:
    return data if op == "C" else (data,)
