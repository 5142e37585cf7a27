from PySide6 import QtCore, QtGui

from inktrail.core import Point, CurvePath, CurveSegment


def qpoint_to_point(p: QtCore.QPointF) -> Point:
    return float(p.x()), float(p.y())

def point_to_qpoint(p: Point) -> QtCore.QPointF:
    return QtCore.QPointF(p[0], p[1])


def make_qpath(path: CurvePath | CurveSegment) -> QtGui.QPainterPath:
    """
    Replay M/L/C ops into a QPainterPath. A single segment gets its own moveTo.
    """
    ops = path.path_ops() if isinstance(path, CurveSegment) else path.ops

    qp = QtGui.QPainterPath()
    for op, data in ops:
        if op == "M":
            qp.moveTo(point_to_qpoint(data))
        elif op == "L":
            qp.lineTo(point_to_qpoint(data))
        elif op == "C":
            c1, c2, p2 = data
            qp.cubicTo(point_to_qpoint(c1), point_to_qpoint(c2), point_to_qpoint(p2))
    return qp
