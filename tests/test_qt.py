import pytest

QtCore = pytest.importorskip("PySide6.QtCore")

from inktrail.core import CurveSegment, interpolate_continuous
from inktrail.qt import make_qpath, point_to_qpoint, qpoint_to_point


def test_point_conversion():
    q = point_to_qpoint((1.5, -2.0))
    assert isinstance(q, QtCore.QPointF)
    assert qpoint_to_point(q) == (1.5, -2.0)


def test_path_replays_ops():
    path = interpolate_continuous([(0, 0), (10, 0), (20, 0)])
    qp = make_qpath(path)
    # moveTo + cubicTo (3 elements) + lineTo
    assert qp.elementCount() == 5
    assert qpoint_to_point(qp.currentPosition()) == (20.0, 0.0)


def test_segment_gets_its_own_move():
    seg = CurveSegment((0.0, 0.0), (1.0, 2.0), (3.0, 2.0), (4.0, 0.0))
    qp = make_qpath(seg)
    assert qp.elementCount() == 4
    assert qpoint_to_point(qp.currentPosition()) == (4.0, 0.0)


def test_curve_path_delegates_to_qt():
    path = interpolate_continuous([(0, 0), (10, 10)])
    assert path.make_qpath().elementCount() == 4
