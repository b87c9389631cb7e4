import math

import pytest
from epsgeom.geom2d import *
from epsgeom.primitives import point, segment
from epsgeom.tolerance import close, epsilon
## unit tests for epsgeom geom2d.py

class TestProducts:
    """cross, dot and distance"""

    def test_cross_sign(self):
        o = point(0, 0)
        assert cross(point(1, 0), point(0, 1), o) > 0
        assert cross(point(0, 1), point(1, 0), o) < 0
        assert cross(point(1, 1), point(2, 2), o) == 0

    def test_cross_antisymmetric(self):
        pts = [point(0, 0), point(3, -1), point(-2.5, 4), point(7, 7)]
        for p1 in pts:
            for p2 in pts:
                for o in pts:
                    assert cross(p1, p2, o) == -cross(p2, p1, o)

    def test_dot(self):
        assert dot(point(1, 0), point(0, 1), point(0, 0)) == 0
        assert dot(point(3, 1), point(3, 1), point(1, 1)) == 4

    def test_distance(self):
        a = point(1, 1)
        b = point(4, 5)
        assert distance(a, a) == 0
        assert distance(a, b) == 5
        assert distance(a, b) == distance(b, a)


class TestCollinear:
    def test_collinear(self):
        assert collinear(point(0, 0), point(1, 1), point(2, 2))
        assert not collinear(point(0, 0), point(1, 0), point(0, 1))

    def test_near_collinear(self):
        assert collinear(point(0, 0), point(1, 0), point(2, epsilon / 10))


class TestOnSegment:
    def test_inclusive(self):
        s = segment((0, 0), (4, 2))
        assert point_on_segment_inclusive(s.a, s)
        assert point_on_segment_inclusive(s.b, s)
        assert point_on_segment_inclusive(point(2, 1), s)
        assert not point_on_segment_inclusive(point(6, 3), s)
        assert not point_on_segment_inclusive(point(2, 1.5), s)

    def test_interval_bound_is_inclusive(self):
        ## offsets product exactly epsilon still counts as on the segment
        assert point_on_segment_inclusive(point(0, 0), segment((epsilon, 0), (1, 0)))
        assert not point_on_segment_inclusive(point(0, 0), segment((epsilon * 4, 0), (1, 0)))

    def test_exclusive(self):
        s = segment((0, 0), (4, 2))
        assert not point_on_segment_exclusive(s.a, s)
        assert not point_on_segment_exclusive(s.b, s)
        assert point_on_segment_exclusive(point(2, 1), s)

    def test_vertical(self):
        s = segment((1, -1), (1, 1))
        assert point_on_segment_inclusive(point(1, 0), s)
        assert not point_on_segment_inclusive(point(1, 2), s)


class TestSides:
    def test_same_side(self):
        s = segment((0, 0), (2, 0))
        assert same_side(point(0, 1), point(5, 3), s)
        assert not same_side(point(0, 1), point(5, -3), s)
        ## a point on the line is on neither side
        assert not same_side(point(0, 1), point(7, 0), s)

    def test_opposite_side(self):
        s = segment((0, 0), (2, 0))
        assert opposite_side(point(0, 1), point(5, -3), s)
        assert not opposite_side(point(0, 1), point(5, 3), s)
        assert not opposite_side(point(0, -1), point(-4, 0), s)

    def test_endpoint_order_irrelevant(self):
        s = segment((0, 0), (2, 1))
        r = segment((2, 1), (0, 0))
        p1 = point(0, 3)
        p2 = point(3, -3)
        assert opposite_side(p1, p2, s) == opposite_side(p1, p2, r)
        assert same_side(p1, p1, s) == same_side(p1, p1, r)


class TestLines:
    def test_parallel(self):
        assert parallel(segment((0, 0), (1, 1)), segment((0, 1), (3, 4)))
        assert not parallel(segment((0, 0), (1, 1)), segment((0, 1), (1, 0)))

    def test_perpendicular(self):
        assert perpendicular(segment((0, 0), (1, 1)), segment((0, 1), (1, 0)))
        assert perpendicular(segment((0, 0), (0, 5)), segment((2, 2), (7, 2)))
        assert not perpendicular(segment((0, 0), (1, 1)), segment((0, 1), (3, 4)))


class TestReflect:
    def test_horizontal(self):
        r = reflect(point(1, 2), segment((0, 0), (5, 0)))
        assert close(r.x, 1) and close(r.y, -2)

    def test_vertical(self):
        r = reflect(point(3, 2), segment((1, 0), (1, 5)))
        assert close(r.x, -1) and close(r.y, 2)

    def test_diagonal(self):
        r = reflect(point(2, 0), segment((0, 0), (1, 1)))
        assert close(r.x, 0) and close(r.y, 2)

    def test_on_line(self):
        r = reflect(point(2, 2), segment((0, 0), (1, 1)))
        assert close(r.x, 2) and close(r.y, 2)

    def test_degenerate(self):
        assert reflect(point(1, 1), segment((0, 0), (0, 0))) is None


class TestRotate:
    def test_quarter_turn(self):
        r = rotate(point(2, 1), point(1, 1), math.pi / 2)
        assert close(r.x, 1) and close(r.y, 2)

    def test_scale(self):
        r = rotate(point(2, 0), point(0, 0), math.pi, scale=0.5)
        assert close(r.x, -1) and close(r.y, 0)
