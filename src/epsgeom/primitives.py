## value types and constructors for epsgeom
## Copyright (c) 2026 epsgeom contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
# 
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
# 
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Value types for epsgeom geometry.

Points, segments, circles, polygons and planes are small immutable
values.  Predicates read them and return new values; nothing in
epsgeom mutates its arguments.

A segment doubles as the infinite line through its endpoints wherever
an operation asks for a "line".  A polygon is a tuple of ``Point2D``
vertices, implicitly closed, in either winding order.  A plane is
defined by three non-collinear points and its normal is derived, not
stored.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence, Tuple, Union

from epsgeom.errors import DegenerateGeometryError, GeometryError
from epsgeom.tolerance import epsilon, isgoodnum


@dataclass(frozen=True)
class Point2D:
    """A point (or free vector) in the plane."""

    x: float
    y: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y))


@dataclass(frozen=True)
class Segment2D:
    """Ordered pair of points; also stands for the line through them."""

    a: Point2D
    b: Point2D


@dataclass(frozen=True)
class Circle:
    center: Point2D
    radius: float


@dataclass(frozen=True)
class Point3D:
    """A point (or free vector) in space."""

    x: float
    y: float
    z: float

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))


@dataclass(frozen=True)
class Segment3D:
    a: Point3D
    b: Point3D


@dataclass(frozen=True)
class Plane3D:
    """Plane through three points; also a triangle with those vertices.

    The points must not be collinear.  Use ``plane()`` to have that
    checked.
    """

    a: Point3D
    b: Point3D
    c: Point3D

    @property
    def normal(self) -> Point3D:
        """``(b - a) x (c - a)``, not normalized."""
        ux, uy, uz = self.b.x - self.a.x, self.b.y - self.a.y, self.b.z - self.a.z
        vx, vy, vz = self.c.x - self.a.x, self.c.y - self.a.y, self.c.z - self.a.z
        return Point3D(uy * vz - uz * vy,
                       uz * vx - ux * vz,
                       ux * vy - uy * vx)


Triangle3D = Plane3D
Polygon = Tuple[Point2D, ...]

Point2DLike = Union[Point2D, Sequence[float]]
Point3DLike = Union[Point3D, Sequence[float]]


## constructors
## ------------

def _coords(values, n, kind):
    try:
        values = tuple(values)
    except TypeError:
        raise GeometryError(f'bad {kind} coordinates: {values!r}') from None
    if len(values) != n or not all(isgoodnum(v) for v in values):
        raise GeometryError(f'bad {kind} coordinates: {values!r}')
    return tuple(float(v) for v in values)


def point(x: Union[float, Point2DLike], y: float = None) -> Point2D:
    """Make a ``Point2D`` from two numbers, a pair, or another point."""
    if isinstance(x, Point2D):
        return x
    if y is None:
        return Point2D(*_coords(x, 2, '2D point'))
    return Point2D(*_coords((x, y), 2, '2D point'))


def point3(x: Union[float, Point3DLike], y: float = None, z: float = None) -> Point3D:
    """Make a ``Point3D`` from three numbers, a triple, or another point."""
    if isinstance(x, Point3D):
        return x
    if y is None and z is None:
        return Point3D(*_coords(x, 3, '3D point'))
    return Point3D(*_coords((x, y, z), 3, '3D point'))


def segment(a: Point2DLike, b: Point2DLike) -> Segment2D:
    return Segment2D(point(a), point(b))


def segment3(a: Point3DLike, b: Point3DLike) -> Segment3D:
    return Segment3D(point3(a), point3(b))


def circle(center: Point2DLike, radius: float) -> Circle:
    """Make a circle, rejecting negative or non-numeric radii."""
    if not isgoodnum(radius) or radius < 0:
        raise GeometryError(f'bad circle radius: {radius!r}')
    return Circle(point(center), float(radius))


def polygon(vertices: Iterable[Point2DLike]) -> Polygon:
    """Make a polygon (tuple of ``Point2D``) of at least three vertices."""
    verts = tuple(point(v) for v in vertices)
    if len(verts) < 3:
        raise GeometryError(f'polygon needs at least 3 vertices, got {len(verts)}')
    return verts


def plane(a: Point3DLike, b: Point3DLike, c: Point3DLike) -> Plane3D:
    """Make a plane, raising ``DegenerateGeometryError`` if the three
    points are collinear."""
    p = Plane3D(point3(a), point3(b), point3(c))
    n = p.normal
    if (n.x * n.x + n.y * n.y + n.z * n.z) ** 0.5 < epsilon:
        raise DegenerateGeometryError('plane points are collinear')
    return p


triangle3 = plane


__all__ = [
    'Point2D',
    'Segment2D',
    'Circle',
    'Point3D',
    'Segment3D',
    'Plane3D',
    'Triangle3D',
    'Polygon',
    'Point2DLike',
    'Point3DLike',
    'point',
    'point3',
    'segment',
    'segment3',
    'circle',
    'polygon',
    'plane',
    'triangle3',
]
