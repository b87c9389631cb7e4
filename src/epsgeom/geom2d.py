## 2D vector and orientation algebra for epsgeom
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

"""2D vector and orientation algebra

The orientation primitive is ``cross(p1, p2, origin)``, the z
component of ``(p1 - origin) x (p2 - origin)``.  Its sign says which
way ``origin -> p1 -> p2`` turns:

  * positive: counter-clockwise
  * negative: clockwise
  * zero (to within ``epsilon``): collinear

Everything else in this module, and most of ``segment2d``,
``polygon`` and ``circle``, is built from ``cross`` and ``dot``.
"""

from math import cos, hypot, sin

from epsgeom.logging_utils import get_logger
from epsgeom.primitives import Point2D
from epsgeom.tolerance import epsilon, is_zero

logger = get_logger(__name__)


def cross(p1, p2, origin):
    """ z component of `(p1 - origin) x (p2 - origin)` """
    return (p1.x - origin.x) * (p2.y - origin.y) - (p2.x - origin.x) * (p1.y - origin.y)


def dot(p1, p2, origin):
    """ `(p1 - origin) . (p2 - origin)` """
    return (p1.x - origin.x) * (p2.x - origin.x) + (p1.y - origin.y) * (p2.y - origin.y)


def distance(p1, p2):
    """ euclidean distance between points ``p1`` and ``p2`` """
    return hypot(p1.x - p2.x, p1.y - p2.y)


def collinear(p1, p2, p3):
    return is_zero(cross(p1, p2, p3))


## does p lie on segment seg, endpoints included?  Collinear, and
## inside the endpoints' interval on both axes
def point_on_segment_inclusive(p, seg):
    a, b = seg.a, seg.b
    return is_zero(cross(p, a, b)) and \
        (a.x - p.x) * (b.x - p.x) <= epsilon and \
        (a.y - p.y) * (b.y - p.y) <= epsilon


def _same_point(p, q):
    return is_zero(p.x - q.x) and is_zero(p.y - q.y)


def point_on_segment_exclusive(p, seg):
    """ does ``p`` lie on ``seg`` strictly between its endpoints? """
    return point_on_segment_inclusive(p, seg) and \
        not _same_point(p, seg.a) and not _same_point(p, seg.b)


## points on the line through seg are on neither side
def same_side(p1, p2, seg):
    """ do ``p1`` and ``p2`` lie strictly on the same side of the line
    through ``seg``?  A point on the line gives False.
    """
    return cross(seg.a, p1, seg.b) * cross(seg.a, p2, seg.b) > epsilon


def opposite_side(p1, p2, seg):
    """ do ``p1`` and ``p2`` lie strictly on opposite sides of the line
    through ``seg``?  A point on the line gives False.
    """
    return cross(seg.a, p1, seg.b) * cross(seg.a, p2, seg.b) < -epsilon


def parallel(u, v):
    """ are the lines through segments ``u`` and ``v`` parallel? """
    return is_zero((u.a.x - u.b.x) * (v.a.y - v.b.y) - (v.a.x - v.b.x) * (u.a.y - u.b.y))


def perpendicular(u, v):
    """ are the lines through segments ``u`` and ``v`` perpendicular? """
    return is_zero((u.a.x - u.b.x) * (v.a.x - v.b.x) + (u.a.y - u.b.y) * (v.a.y - v.b.y))


## foot of the perpendicular from p onto the line through a and b,
## or None if a and b coincide
def _foot(p, a, b):
    dx = b.x - a.x
    dy = b.y - a.y
    len2 = dx * dx + dy * dy
    if is_zero(len2):
        logger.debug('zero-length line passed to perpendicular foot')
        return None
    t = ((p.x - a.x) * dx + (p.y - a.y) * dy) / len2
    return Point2D(a.x + t * dx, a.y + t * dy)


def reflect(p, seg):
    """Mirror image of ``p`` across the infinite line through ``seg``.

    Returns None if ``seg`` has zero length.  Works for vertical and
    horizontal lines alike, since no slope is ever formed.
    """
    f = _foot(p, seg.a, seg.b)
    if f is None:
        return None
    return Point2D(2.0 * f.x - p.x, 2.0 * f.y - p.y)


def rotate(v, p, angle, scale=1.0):
    """Rotate point ``v`` about ``p`` counter-clockwise by ``angle``
    radians, scaling its distance from ``p`` by ``scale``.
    """
    dx = v.x - p.x
    dy = v.y - p.y
    c = cos(angle)
    s = sin(angle)
    return Point2D(p.x + (dx * c - dy * s) * scale,
                   p.y + (dx * s + dy * c) * scale)


__all__ = [
    'cross',
    'dot',
    'distance',
    'collinear',
    'point_on_segment_inclusive',
    'point_on_segment_exclusive',
    'same_side',
    'opposite_side',
    'parallel',
    'perpendicular',
    'reflect',
    'rotate',
]
