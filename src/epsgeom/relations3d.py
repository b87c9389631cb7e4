## 3D relational predicates for epsgeom
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

"""3D relational predicates

Parallelism and perpendicularity of lines and planes, and same/
opposite side classification relative to a segment or a plane.
Lines are ``Segment3D`` values; planes are ``Plane3D`` values.
"""

from epsgeom.geom3d import cross, dot, mag, normal, sub
from epsgeom.tolerance import epsilon, is_zero


def _direction(line):
    return sub(line.a, line.b)


## parallelism
## -----------

def parallel_lines(u, v):
    return mag(cross(_direction(u), _direction(v))) < epsilon


def parallel_planes(u, v):
    return mag(cross(normal(u), normal(v))) < epsilon


def line_parallel_plane(line, s):
    """ is ``line`` parallel to (or lying in) plane ``s``? """
    return is_zero(dot(_direction(line), normal(s)))


## perpendicularity
## ----------------

def perpendicular_lines(u, v):
    return is_zero(dot(_direction(u), _direction(v)))


def perpendicular_planes(u, v):
    return is_zero(dot(normal(u), normal(v)))


def line_perpendicular_plane(line, s):
    return mag(cross(_direction(line), normal(s))) < epsilon


## sides
## -----

## the two points' offsets from the line, crossed with the line's
## direction, point the same way iff the points are on the same side.
## Only meaningful when both points are coplanar with the segment.
def _segment_side_product(p1, p2, seg):
    d = sub(seg.a, seg.b)
    return dot(cross(d, sub(p1, seg.b)), cross(d, sub(p2, seg.b)))


def same_side_segment(p1, p2, seg):
    """ are ``p1`` and ``p2`` strictly on the same side of the line
    through ``seg`` (within their common plane)?  A point on the line
    gives False. """
    return _segment_side_product(p1, p2, seg) > epsilon


def opposite_side_segment(p1, p2, seg):
    return _segment_side_product(p1, p2, seg) < -epsilon


def _plane_side_product(p1, p2, a, b, c):
    n = normal(a, b, c)
    return dot(n, sub(p1, a)) * dot(n, sub(p2, a))


def same_side_points(p1, p2, a, b, c):
    """ are ``p1`` and ``p2`` strictly on the same side of the plane
    through ``a``, ``b`` and ``c``?  A point in the plane gives False. """
    return _plane_side_product(p1, p2, a, b, c) > epsilon


def opposite_side_points(p1, p2, a, b, c):
    return _plane_side_product(p1, p2, a, b, c) < -epsilon


def same_side_plane(p1, p2, s):
    return same_side_points(p1, p2, s.a, s.b, s.c)


def opposite_side_plane(p1, p2, s):
    return opposite_side_points(p1, p2, s.a, s.b, s.c)


__all__ = [
    'parallel_lines',
    'parallel_planes',
    'line_parallel_plane',
    'perpendicular_lines',
    'perpendicular_planes',
    'line_perpendicular_plane',
    'same_side_segment',
    'opposite_side_segment',
    'same_side_points',
    'opposite_side_points',
    'same_side_plane',
    'opposite_side_plane',
]
