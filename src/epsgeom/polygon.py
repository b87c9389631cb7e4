## 2D polygon predicates for epsgeom
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

"""2D polygon predicates

A polygon is a sequence of ``Point2D`` vertices, implicitly closed,
given in either winding order.  The predicates here never assume a
winding: ``is_convex`` and ``point_in_convex_polygon`` track whether
a positive and a negative orientation have each been seen, and a
polygon (or point) fails as soon as both have.

The public functions are value-safe: they check that they were given
at least three vertices and raise ``GeometryError`` otherwise.  The
underscore-prefixed versions skip the check.
"""

from itertools import count
from math import cos, pi, sin, sqrt

from epsgeom.errors import DegenerateGeometryError, GeometryError
from epsgeom.geom2d import cross, opposite_side, point_on_segment_inclusive
from epsgeom.logging_utils import get_logger
from epsgeom.primitives import Point2D, Segment2D
from epsgeom.tolerance import NEGATIVE, POSITIVE, epsilon, is_zero, sign

logger = get_logger(__name__)

## successive ray directions for the crossing-number test: +x first,
## then multiples of the golden angle, which never repeat modulo pi
_GOLDEN_ANGLE = pi * (3.0 - sqrt(5.0))


def _check(poly):
    if len(poly) < 3:
        raise GeometryError(f'polygon needs at least 3 vertices, got {len(poly)}')


def _edges(poly):
    n = len(poly)
    for i in range(n):
        yield poly[i], poly[(i + 1) % n]


## sign-consistency accumulator shared by the convexity and
## convex-containment tests
class _SignTracker:

    def __init__(self):
        self.positive = False
        self.negative = False
        self.zero = False

    def add(self, s):
        if s == POSITIVE:
            self.positive = True
        elif s == NEGATIVE:
            self.negative = True
        else:
            self.zero = True

    @property
    def mixed(self):
        return self.positive and self.negative


def _is_convex(poly, strict=False):
    n = len(poly)
    seen = _SignTracker()
    for i in range(n):
        seen.add(sign(cross(poly[(i + 1) % n], poly[(i + 2) % n], poly[i])))
        if seen.mixed or (strict and seen.zero):
            return False
    return True


def is_convex(poly, strict=False):
    """Is ``poly`` convex?

    Every consecutive vertex triple must turn the same way; collinear
    triples are ignored unless ``strict`` is true, in which case they
    disqualify the polygon.
    """
    _check(poly)
    return _is_convex(poly, strict)


def _point_in_convex_polygon(q, poly, inclusive=False):
    seen = _SignTracker()
    for p0, p1 in _edges(poly):
        seen.add(sign(cross(p1, q, p0)))
        if seen.mixed or (seen.zero and not inclusive):
            return False
    return True


def point_in_convex_polygon(q, poly, inclusive=False):
    """Is ``q`` inside the convex polygon ``poly``?

    ``q`` must lie on the same side of every edge.  A point exactly on
    an edge (zero orientation) is outside unless ``inclusive`` is true.
    """
    _check(poly)
    return _point_in_convex_polygon(q, poly, inclusive)


## crossing count for one ray direction; None if a vertex lies on the
## ray's supporting line, in which case the parity can't be trusted
def _count_crossings(q, q2, poly, on_edge):
    crossings = 0
    for p0, p1 in _edges(poly):
        if point_on_segment_inclusive(q, Segment2D(p0, p1)):
            return on_edge
        if is_zero(cross(q, q2, p0)):
            return None
        if cross(q, p0, q2) * cross(q, p1, q2) < -epsilon and \
           cross(p0, q, p1) * cross(p0, q2, p1) < -epsilon:
            crossings += 1
    return crossings % 2 == 1


def _point_in_polygon(q, poly, on_edge=True):
    ## the ray's far end must lie beyond every vertex
    reach = 1.0 + 2.0 * max(abs(p.x - q.x) + abs(p.y - q.y) for p in poly)
    limit = 4 * len(poly) + 16
    for k in count():
        if k >= limit:
            raise DegenerateGeometryError('could not find a ray direction clear of every vertex')
        theta = k * _GOLDEN_ANGLE
        q2 = Point2D(q.x + reach * cos(theta), q.y + reach * sin(theta))
        result = _count_crossings(q, q2, poly, on_edge)
        if result is not None:
            return result
        logger.debug('vertex on ray from %s in direction %d, retrying', q, k)


def point_in_polygon(q, poly, on_edge=True):
    """Is ``q`` inside the (possibly non-convex) polygon ``poly``?

    Crossing-number test.  A ray is cast from ``q`` in the +x
    direction, far enough to leave the polygon, and the edges it
    properly crosses are counted: an edge counts when its endpoints are
    separated by the ray and the ray's endpoints are separated by the
    edge's line.  An odd count means inside.

    If ``q`` lies on an edge, ``on_edge`` is returned.  If some vertex
    lies on the ray's line the crossing count is ambiguous, so that
    direction is dropped and the next one in a fixed sequence is tried.
    """
    _check(poly)
    return _point_in_polygon(q, poly, on_edge)


def _segment_in_polygon(seg, poly):
    if not _point_in_polygon(seg.a, poly) or not _point_in_polygon(seg.b, poly):
        return False
    touching = []
    for p0, p1 in _edges(poly):
        edge = Segment2D(p0, p1)
        ## a proper crossing leaves the polygon
        if opposite_side(seg.a, seg.b, edge) and opposite_side(p0, p1, seg):
            return False
        elif point_on_segment_inclusive(seg.a, edge):
            touching.append(seg.a)
        elif point_on_segment_inclusive(seg.b, edge):
            touching.append(seg.b)
        elif point_on_segment_inclusive(p0, seg):
            touching.append(p0)
    ## a segment grazing a reflex vertex has no proper crossing, but
    ## some stretch between two touch points is outside
    for i, t0 in enumerate(touching):
        for t1 in touching[i + 1:]:
            mid = Point2D((t0.x + t1.x) / 2.0, (t0.y + t1.y) / 2.0)
            if not _point_in_polygon(mid, poly):
                return False
    return True


def segment_in_polygon(seg, poly):
    """Does segment ``seg`` lie entirely inside ``poly``?  Lying along
    the boundary counts as inside.
    """
    _check(poly)
    return _segment_in_polygon(seg, poly)


def polygon_area(poly):
    """Signed area of ``poly`` by the shoelace formula, positive for
    counter-clockwise vertex order."""
    _check(poly)
    total = 0.0
    for p0, p1 in _edges(poly):
        total += p0.x * p1.y - p1.x * p0.y
    return total / 2.0


def polygon_centroid(poly):
    """Area centroid of ``poly``, or None if its area is zero."""
    _check(poly)
    area2 = 0.0
    cx = 0.0
    cy = 0.0
    for p0, p1 in _edges(poly):
        w = p0.x * p1.y - p1.x * p0.y
        area2 += w
        cx += (p0.x + p1.x) * w
        cy += (p0.y + p1.y) * w
    if is_zero(area2):
        logger.debug('zero-area polygon passed to polygon_centroid')
        return None
    return Point2D(cx / (3.0 * area2), cy / (3.0 * area2))


__all__ = [
    'is_convex',
    'point_in_convex_polygon',
    'point_in_polygon',
    'segment_in_polygon',
    'polygon_area',
    'polygon_centroid',
]
