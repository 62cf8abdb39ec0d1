import logging
import math

import numpy
import pytest

from spgeom import BBox, DistError, Point, distance, mindist, minmaxdist


EPS = 10**-9


@pytest.fixture
def sample():
    rng = numpy.random.default_rng(12)
    points = [Point(*xy) for xy in rng.uniform(-10, 10, size=(50, 2))]
    corners = rng.uniform(-10, 10, size=(50, 2))
    lengths = rng.uniform(0.1, 5, size=(50, 2))
    boxes = [BBox.from_corner(c, *l) for c, l in zip(corners, lengths)]
    return points, boxes


def test_dist():
    p = Point(2, 3)
    q = Point(5, 6)
    assert p.distance(q) == math.sqrt(18)
    assert distance(p, q) == math.sqrt(18)


def test_dist_properties(sample):
    points, _ = sample
    for p, q in zip(points, points[1:]):
        assert distance(p, q) == distance(q, p)
        assert distance(p, q) > 0
        assert distance(p, p) == 0


def test_triangle_inequality(sample):
    points, _ = sample
    for p, q, r in zip(points, points[1:], points[2:]):
        assert distance(p, r) <= distance(p, q) + distance(q, r) + EPS


def test_str():
    assert str(Point(-2.4, 0.)) == "[-2.40, 0.00]"


def test_point_is_a_value():
    assert Point(1, 2) == Point(1., 2.)
    assert len({Point(1, 2), Point(1., 2.)}) == 1
    with pytest.raises(AttributeError):
        Point(1, 2).x = 3


def test_to_bbox():
    rect = Point(-2.4, 0.0).to_bbox(0.05)
    assert distance(rect.min, Point(-2.45, -0.05)) < EPS
    assert distance(rect.max, Point(-2.35, 0.05)) < EPS


@pytest.mark.parametrize("tol", [0, -0.05])
def test_to_bbox_non_positive_tolerance(tol):
    with pytest.raises(DistError) as err:
        Point(1, 1).to_bbox(tol)
    assert err.value.length == tol


def test_mindist_zero():
    p = Point(2, 3)
    assert p.mindist(p.to_bbox(1)) < EPS


def test_mindist_on_boundary():
    bb = BBox((0, 0), (2, 3))
    assert mindist(Point(0, 1), bb) == 0
    assert mindist(Point(2, 3), bb) == 0
    assert not bb.contains_point(Point(0, 1))


def test_mindist_positive():
    p = Point(2, 3)
    r = BBox((-4, 7), (-2, 9))
    expected = (-2 - 2)**2 + (7 - 3)**2
    assert abs(p.mindist(r) - expected) < EPS


def test_mindist_one_axis():
    bb = BBox((0, 0), (2, 3))
    assert mindist(Point(1, 5), bb) == pytest.approx(4)
    assert mindist(Point(-1.5, 2), bb) == pytest.approx(2.25)


def test_minmaxdist():
    p = Point(-2, -1)
    r = BBox((0, 0), (2, 3))
    # furthest points from p on the faces closest to p in each dimension
    candidates = [Point(2, 3), Point(0, 3), Point(2, 0)]
    expected = min(p.distance(q)**2 for q in candidates)
    assert abs(p.minmaxdist(r) - expected) < EPS
    assert expected == pytest.approx(17)


def test_minmaxdist_inside():
    # Nearest faces are x = 0 and y = 0; the far corners on them are (0, 3)
    # and (2, 0).
    p = Point(0.5, 1)
    r = BBox((0, 0), (2, 3))
    assert minmaxdist(p, r) == pytest.approx(min(0.25 + 4, 1 + 2.25))


def test_minmaxdist_bounds_mindist(sample):
    points, boxes = sample
    for p in points:
        for bb in boxes:
            lower = mindist(p, bb)
            upper = minmaxdist(p, bb)
            assert upper >= lower
            # Some corner of the box is within the upper bound.
            corners = [(bb.min.x, bb.min.y), (bb.min.x, bb.max.y),
                       (bb.max.x, bb.min.y), (bb.max.x, bb.max.y)]
            assert min(distance(p, c)**2 for c in corners) <= upper + EPS


def test_mindist_is_a_lower_bound(sample):
    points, boxes = sample
    rng = numpy.random.default_rng(3)
    for bb in boxes[:10]:
        inner = rng.uniform(bb.min, bb.max, size=(20, 2))
        for p in points[:10]:
            lower = math.sqrt(mindist(p, bb))
            assert all(distance(p, q) >= lower - EPS for q in inner)


def test_mindist_zero_iff_closed_containment(sample):
    points, boxes = sample
    for p in points:
        for bb in boxes:
            closed = (bb.min.x <= p.x <= bb.max.x
                      and bb.min.y <= p.y <= bb.max.y)
            assert (mindist(p, bb) == 0) == closed
            if bb.contains_point(p):
                assert mindist(p, bb) == 0


def test_no_tuple_arithmetic():
    p = Point(1, 2)
    assert p == (1, 2)
    with pytest.raises(TypeError):
        p + Point(3, 4)
    with pytest.raises(TypeError):
        (0, 0) + p
    with pytest.raises(TypeError):
        p * 2
    with pytest.raises(TypeError):
        2 * p


def test_to_bbox_rejection_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="spgeom"):
        with pytest.raises(DistError):
            Point(1, 1).to_bbox(-1)
    assert "Rejected tolerance -1" in caplog.text


def test_to_bbox_tolerance_lost_to_rounding():
    # 1e17 + 1 rounds back to 1e17: the box would be flat along x.
    with pytest.raises(DistError) as err:
        Point(1e17, 0).to_bbox(1.)
    assert err.value.length == 0
