## 2D segment geometry for epsgeom
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

"""2D segment geometry

Segment/segment intersection tests and constructions, and
projections of points onto lines and segments.  "Line" arguments are
``Segment2D`` values standing for the infinite line through their
endpoints.
"""

from epsgeom.geom2d import (
    collinear,
    cross,
    distance,
    opposite_side,
    point_on_segment_inclusive,
    same_side,
)
from epsgeom.logging_utils import get_logger
from epsgeom.primitives import Point2D, Segment2D
from epsgeom.tolerance import epsilon, is_zero

logger = get_logger(__name__)


## do the segments intersect, touching endpoints included?  The
## bounding-box overlap test is required, not just a shortcut: it is
## what rejects disjoint collinear segments, for which every
## orientation product below is zero.
def segments_intersect(s1, s2):
    """Do segments ``s1`` and ``s2`` intersect?  Touching at an
    endpoint counts.
    """
    if max(s1.a.x, s1.b.x) + epsilon < min(s2.a.x, s2.b.x) or \
       max(s2.a.x, s2.b.x) + epsilon < min(s1.a.x, s1.b.x) or \
       max(s1.a.y, s1.b.y) + epsilon < min(s2.a.y, s2.b.y) or \
       max(s2.a.y, s2.b.y) + epsilon < min(s1.a.y, s1.b.y):
        return False
    ## each segment's endpoints straddle or touch the other's line
    return cross(s1.b, s2.a, s1.a) * cross(s1.b, s2.b, s1.a) <= epsilon and \
        cross(s2.b, s1.a, s2.a) * cross(s2.b, s1.b, s2.a) <= epsilon


def segments_intersect_inclusive(u, v):
    """Do ``u`` and ``v`` intersect, counting shared endpoints and
    collinear overlap?
    """
    if not collinear(u.a, u.b, v.a) or not collinear(u.a, u.b, v.b):
        return not same_side(u.a, u.b, v) and not same_side(v.a, v.b, u)
    return point_on_segment_inclusive(u.a, v) or point_on_segment_inclusive(u.b, v) or \
        point_on_segment_inclusive(v.a, u) or point_on_segment_inclusive(v.b, u)


def segments_intersect_exclusive(u, v):
    """Do ``u`` and ``v`` properly cross?  Touching and overlap do not
    count.
    """
    return opposite_side(u.a, u.b, v) and opposite_side(v.a, v.b, u)


def intersection_point(s1, s2):
    """Intersection of the lines through ``s1`` and ``s2``.

    Solves for the parameter ``t`` along ``s1`` from the determinant
    form of the two line equations.  Returns None when the lines are
    parallel (or either segment has zero length).  Nothing checks that
    the point falls inside either segment; use ``segments_intersect()``
    for that.
    """
    denom = (s1.a.x - s1.b.x) * (s2.a.y - s2.b.y) - (s1.a.y - s1.b.y) * (s2.a.x - s2.b.x)
    if is_zero(denom):
        logger.debug('parallel lines passed to intersection_point: %s, %s', s1, s2)
        return None
    t = ((s1.a.x - s2.a.x) * (s2.a.y - s2.b.y) - (s1.a.y - s2.a.y) * (s2.a.x - s2.b.x)) / denom
    return Point2D(s1.a.x + (s1.b.x - s1.a.x) * t,
                   s1.a.y + (s1.b.y - s1.a.y) * t)


## a second point on the perpendicular to line through p
def _perp_through(p, line):
    return Point2D(p.x + line.a.y - line.b.y, p.y + line.b.x - line.a.x)


def project_point_to_line(p, line):
    """Orthogonal projection of ``p`` onto the line through ``line``:
    the intersection of that line with the perpendicular through ``p``.
    Returns None for a zero-length ``line``.
    """
    return intersection_point(Segment2D(p, _perp_through(p, line)), line)


def distance_point_to_line(p, line):
    """Distance from ``p`` to the infinite line through ``line``, or
    None for a zero-length ``line``."""
    f = project_point_to_line(p, line)
    if f is None:
        return None
    return distance(p, f)


def closest_point_on_segment(p, seg):
    """Point of segment ``seg`` closest to ``p``.

    If the perpendicular from ``p`` meets the line outside the
    segment, the nearer endpoint is returned; otherwise the projection.
    """
    a, b = seg.a, seg.b
    if is_zero(a.x - b.x) and is_zero(a.y - b.y):
        return a
    t = _perp_through(p, seg)
    ## both endpoints strictly on the same side of the perpendicular
    if cross(a, t, p) * cross(b, t, p) > epsilon:
        return a if distance(p, a) < distance(p, b) else b
    return intersection_point(Segment2D(p, t), seg)


def distance_point_to_segment(p, seg):
    return distance(p, closest_point_on_segment(p, seg))


__all__ = [
    'segments_intersect',
    'segments_intersect_inclusive',
    'segments_intersect_exclusive',
    'intersection_point',
    'project_point_to_line',
    'distance_point_to_line',
    'closest_point_on_segment',
    'distance_point_to_segment',
]
