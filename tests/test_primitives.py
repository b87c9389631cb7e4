import pytest
from epsgeom.errors import DegenerateGeometryError, GeometryError
from epsgeom.primitives import *
## unit tests for epsgeom primitives.py

class TestPoint:
    """point constructors and value semantics"""

    def test_create(self):
        a = point(5, 0)
        b = point((1.5, -2))
        c = point(b)
        assert a == Point2D(5.0, 0.0)
        assert b == Point2D(1.5, -2.0)
        assert c is b
        x, y = a
        assert (x, y) == (5.0, 0.0)

    def test_create3(self):
        a = point3(1, 2, 3)
        b = point3([4, 5, 6])
        assert a == Point3D(1.0, 2.0, 3.0)
        assert tuple(b) == (4.0, 5.0, 6.0)
        assert point3(a) is a

    def test_immutable(self):
        a = point(1, 2)
        with pytest.raises(AttributeError):
            a.x = 3

    def test_bad_coordinates(self):
        with pytest.raises(GeometryError):
            point('a', 1)
        with pytest.raises(GeometryError):
            point((1, 2, 3))
        with pytest.raises(GeometryError):
            point3(1, 2)
        with pytest.raises(GeometryError):
            point(7)
        with pytest.raises(ValueError):
            point(True, 1)


class TestShapes:
    def test_segment(self):
        s = segment((0, 0), (1, 1))
        assert s.a == Point2D(0.0, 0.0)
        assert s.b == Point2D(1.0, 1.0)
        s3 = segment3((0, 0, 0), (1, 2, 3))
        assert s3.b == Point3D(1.0, 2.0, 3.0)

    def test_circle(self):
        c = circle((1, 2), 3)
        assert c.center == Point2D(1.0, 2.0)
        assert c.radius == 3.0
        assert circle((0, 0), 0).radius == 0.0
        with pytest.raises(GeometryError):
            circle((0, 0), -1)
        with pytest.raises(GeometryError):
            circle((0, 0), None)

    def test_polygon(self):
        p = polygon([(0, 0), (1, 0), (0, 1)])
        assert isinstance(p, tuple)
        assert p[1] == Point2D(1.0, 0.0)
        with pytest.raises(GeometryError):
            polygon([(0, 0), (1, 0)])

    def test_plane(self):
        s = plane((0, 0, 0), (1, 0, 0), (0, 1, 0))
        assert s.normal == Point3D(0.0, 0.0, 1.0)
        assert triangle3 is plane
        assert Triangle3D is Plane3D

    def test_collinear_plane(self):
        with pytest.raises(DegenerateGeometryError):
            plane((0, 0, 0), (1, 1, 1), (2, 2, 2))
        ## unchecked construction is still possible
        s = Plane3D(point3(0, 0, 0), point3(1, 1, 1), point3(2, 2, 2))
        assert s.normal == Point3D(0.0, 0.0, 0.0)
