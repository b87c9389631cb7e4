import pytest
from epsgeom.geom3d import *
from epsgeom.primitives import Point3D, plane, point3, segment3
from epsgeom.tolerance import close, epsilon
## unit tests for epsgeom geom3d.py

class TestVectors:
    """vector algebra on Point3D values"""

    def test_add_sub_scale(self):
        a = point3(1, 2, 3)
        b = point3(-1, 0, 5)
        assert add(a, b) == Point3D(0, 2, 8)
        assert sub(a, b) == Point3D(2, 2, -2)
        assert scale(a, 2) == Point3D(2, 4, 6)

    def test_cross(self):
        x = point3(1, 0, 0)
        y = point3(0, 1, 0)
        assert cross(x, y) == Point3D(0, 0, 1)
        assert cross(y, x) == Point3D(0, 0, -1)

    def test_dot_mag_dist(self):
        a = point3(1, 2, 2)
        assert dot(a, point3(2, 0, -1)) == 0
        assert mag(a) == 3
        assert dist(a, a) == 0
        assert dist(a, point3(1, 5, 6)) == 5

    def test_normal(self):
        s = plane((0, 0, 0), (1, 0, 0), (0, 1, 0))
        assert normal(s) == Point3D(0, 0, 1)
        assert normal(s.a, s.b, s.c) == normal(s)
        assert normal(s.a, s.c, s.b) == Point3D(0, 0, -1)


class TestCollinearCoplanar:
    def test_collinear(self):
        assert collinear(point3(0, 0, 0), point3(1, 1, 1), point3(2, 2, 2))
        assert not collinear(point3(0, 0, 0), point3(1, 0, 0), point3(0, 1, 0))

    def test_coplanar(self):
        a, b, c = point3(0, 0, 0), point3(1, 0, 0), point3(0, 1, 0)
        assert coplanar(a, b, c, point3(5, -7, 0))
        assert coplanar(a, b, c, point3(5, -7, epsilon / 10))
        assert not coplanar(a, b, c, point3(0, 0, 1))


class TestOnSegment:
    def test_inclusive(self):
        s = segment3((0, 0, 0), (2, 4, 6))
        assert point_on_segment_inclusive(s.a, s)
        assert point_on_segment_inclusive(s.b, s)
        assert point_on_segment_inclusive(point3(1, 2, 3), s)
        assert not point_on_segment_inclusive(point3(3, 6, 9), s)
        assert not point_on_segment_inclusive(point3(1, 2, 4), s)

    def test_interval_bound_is_inclusive(self):
        ## offsets product exactly epsilon still counts as on the segment
        assert point_on_segment_inclusive(point3(0, 0, 0), segment3((epsilon, 0, 0), (1, 0, 0)))
        assert not point_on_segment_inclusive(point3(0, 0, 0), segment3((epsilon * 4, 0, 0), (1, 0, 0)))

    def test_exclusive(self):
        s = segment3((0, 0, 0), (2, 4, 6))
        assert not point_on_segment_exclusive(s.a, s)
        assert not point_on_segment_exclusive(s.b, s)
        assert point_on_segment_exclusive(point3(1, 2, 3), s)


class TestInTriangle:
    TRI = plane((0, 0, 1), (4, 0, 1), (0, 4, 1))

    def test_inside(self):
        assert point_in_triangle_inclusive(point3(1, 1, 1), self.TRI)
        assert point_in_triangle_exclusive(point3(1, 1, 1), self.TRI)

    def test_boundary(self):
        for p in (point3(2, 0, 1), point3(0, 0, 1), point3(2, 2, 1)):
            assert point_in_triangle_inclusive(p, self.TRI)
            assert not point_in_triangle_exclusive(p, self.TRI)

    def test_outside(self):
        assert not point_in_triangle_inclusive(point3(3, 3, 1), self.TRI)
        assert not point_in_triangle_inclusive(point3(1, 1, 2), self.TRI)
