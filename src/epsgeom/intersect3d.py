## 3D intersection and metric geometry for epsgeom
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

"""3D intersection and metric geometry

Constructions of line/line, line/plane and plane/plane intersections,
distances, angles, and the segment/segment and segment/triangle
intersection tests in their inclusive (touching counts) and exclusive
(proper crossing only) forms.

Constructions return None when their precondition fails (parallel or
skew lines, a line parallel to the plane, parallel planes) instead of
dividing by a vanishing denominator.
"""

from epsgeom.geom3d import (
    add,
    collinear,
    coplanar,
    cross,
    dist,
    dot,
    mag,
    normal,
    point_in_triangle_inclusive,
    point_on_segment_inclusive,
    scale,
    sub,
)
from epsgeom.logging_utils import get_logger
from epsgeom.primitives import Segment3D
from epsgeom.relations3d import (
    line_parallel_plane,
    opposite_side_plane,
    opposite_side_points,
    opposite_side_segment,
    parallel_planes,
    same_side_plane,
    same_side_points,
    same_side_segment,
)
from epsgeom.tolerance import epsilon, is_zero

logger = get_logger(__name__)


## constructions
## -------------

def line_intersection(u, v):
    """Intersection point of the lines through ``u`` and ``v``.

    Solves ``u.a + t*du = v.a + s*dv`` for ``t`` by crossing both
    sides with ``dv``.  Returns None if the lines are parallel or do
    not share a plane.
    """
    du = sub(u.b, u.a)
    dv = sub(v.b, v.a)
    n = cross(du, dv)
    if mag(n) < epsilon:
        logger.debug('parallel lines passed to line_intersection: %s, %s', u, v)
        return None
    if not coplanar(u.a, u.b, v.a, v.b):
        logger.debug('skew lines passed to line_intersection: %s, %s', u, v)
        return None
    t = dot(cross(sub(v.a, u.a), dv), n) / dot(n, n)
    return add(u.a, scale(du, t))


def line_plane_intersection(line, s):
    """Point where the line through ``line`` meets plane ``s``, or None
    if the line is parallel to the plane."""
    n = normal(s)
    denom = dot(n, sub(line.b, line.a))
    if is_zero(denom):
        logger.debug('line parallel to plane in line_plane_intersection: %s, %s', line, s)
        return None
    t = dot(n, sub(s.a, line.a)) / denom
    return add(line.a, scale(sub(line.b, line.a), t))


def _edge_hit(p, q, s):
    edge = Segment3D(p, q)
    if line_parallel_plane(edge, s):
        return None
    return line_plane_intersection(edge, s)


def plane_intersection(u, v):
    """Line of intersection of planes ``u`` and ``v``, as a
    ``Segment3D`` whose endpoints both lie in both planes.

    Two edges of ``v``'s defining triangle are intersected with ``u``;
    an edge parallel to ``u`` is replaced by the remaining edge.  If
    both hits land on the same point (a vertex of ``v`` lying in
    ``u``), the second endpoint is taken along ``normal(u) x normal(v)``.
    Returns None for parallel planes.
    """
    if parallel_planes(u, v):
        logger.debug('parallel planes passed to plane_intersection: %s, %s', u, v)
        return None
    first = _edge_hit(v.a, v.b, u)
    if first is None:
        first = _edge_hit(v.b, v.c, u)
    second = _edge_hit(v.c, v.a, u)
    if second is None:
        second = _edge_hit(v.b, v.c, u)
    if first is None or second is None:
        logger.debug('nearly parallel planes passed to plane_intersection: %s, %s', u, v)
        return None
    if dist(first, second) < epsilon:
        alt = _edge_hit(v.b, v.c, u)
        if alt is not None and dist(first, alt) >= epsilon:
            second = alt
        else:
            second = add(first, cross(normal(u), normal(v)))
    return Segment3D(first, second)


## distances
## ---------

def distance_point_to_plane(p, s):
    """Distance from ``p`` to plane ``s``, or None if the plane's points
    are collinear."""
    n = normal(s)
    length = mag(n)
    if length < epsilon:
        logger.debug('degenerate plane passed to distance_point_to_plane: %s', s)
        return None
    return abs(dot(n, sub(p, s.a))) / length


def distance_point_to_line(p, line):
    """Distance from ``p`` to the line through ``line``, or None for a
    zero-length ``line``."""
    length = dist(line.a, line.b)
    if length < epsilon:
        return None
    return mag(cross(sub(p, line.a), sub(line.b, line.a))) / length


def line_to_line_distance(u, v):
    """Distance between the lines through ``u`` and ``v``, measured
    along their common perpendicular.  For parallel lines, the distance
    from any point of one to the other."""
    n = cross(sub(u.a, u.b), sub(v.a, v.b))
    length = mag(n)
    if length < epsilon:
        return distance_point_to_line(u.a, v)
    return abs(dot(sub(u.a, v.a), n)) / length


## angles
## ------

## both vectors are normalized here; None if either has zero length
def _cos_between(u, v, what):
    mu = mag(u)
    mv = mag(v)
    if mu < epsilon or mv < epsilon:
        logger.debug('zero-length %s passed to angle function', what)
        return None
    return dot(u, v) / mu / mv


def angle_cos_lines(u, v):
    """Cosine of the angle between the directions of ``u`` and ``v``,
    or None if either segment has zero length."""
    return _cos_between(sub(u.a, u.b), sub(v.a, v.b), 'line')


def angle_cos_planes(u, v):
    """ cosine of the angle between the normals of ``u`` and ``v`` """
    return _cos_between(normal(u), normal(v), 'plane normal')


def angle_sin_line_plane(line, s):
    """Sine of the angle between ``line`` and plane ``s``, signed by
    which way the line points through the plane.  None for a
    zero-length line or a degenerate plane."""
    return _cos_between(sub(line.a, line.b), normal(s), 'line or plane normal')


## segment tests
## -------------

def segments_intersect_inclusive(u, v):
    """Do segments ``u`` and ``v`` meet?  Shared endpoints and
    collinear overlap count.

    Segments that do not share a plane never meet.
    """
    if not coplanar(u.a, u.b, v.a, v.b):
        return False
    if not collinear(u.a, u.b, v.a) or not collinear(u.a, u.b, v.b):
        return not same_side_segment(u.a, u.b, v) and not same_side_segment(v.a, v.b, u)
    return point_on_segment_inclusive(u.a, v) or point_on_segment_inclusive(u.b, v) or \
        point_on_segment_inclusive(v.a, u) or point_on_segment_inclusive(v.b, u)


def segments_intersect_exclusive(u, v):
    """ do coplanar segments ``u`` and ``v`` properly cross each other? """
    return coplanar(u.a, u.b, v.a, v.b) and \
        opposite_side_segment(u.a, u.b, v) and opposite_side_segment(v.a, v.b, u)


def _triangle_edges(s):
    return (Segment3D(s.a, s.b), Segment3D(s.b, s.c), Segment3D(s.c, s.a))


def segment_triangle_intersect_inclusive(seg, s):
    """Does segment ``seg`` meet triangle ``s``, boundary included?

    The segment's endpoints must not be strictly on the same side of
    the triangle's plane, and for each edge the plane through the
    segment and the opposite vertex must not have that edge's endpoints
    strictly on one side.  A segment lying in the triangle's plane is
    tested in-plane: an endpoint inside the triangle, or a crossing
    with one of its edges.
    """
    if coplanar(s.a, s.b, s.c, seg.a) and coplanar(s.a, s.b, s.c, seg.b):
        return point_in_triangle_inclusive(seg.a, s) or \
            point_in_triangle_inclusive(seg.b, s) or \
            any(segments_intersect_inclusive(seg, e) for e in _triangle_edges(s))
    return not same_side_plane(seg.a, seg.b, s) and \
        not same_side_points(s.a, s.b, seg.a, seg.b, s.c) and \
        not same_side_points(s.b, s.c, seg.a, seg.b, s.a) and \
        not same_side_points(s.c, s.a, seg.a, seg.b, s.b)


def segment_triangle_intersect_exclusive(seg, s):
    """ does segment ``seg`` pass through the interior of triangle
    ``s``, with its endpoints strictly on either side of the plane? """
    return opposite_side_plane(seg.a, seg.b, s) and \
        opposite_side_points(s.a, s.b, seg.a, seg.b, s.c) and \
        opposite_side_points(s.b, s.c, seg.a, seg.b, s.a) and \
        opposite_side_points(s.c, s.a, seg.a, seg.b, s.b)


__all__ = [
    'line_intersection',
    'line_plane_intersection',
    'plane_intersection',
    'distance_point_to_plane',
    'distance_point_to_line',
    'line_to_line_distance',
    'angle_cos_lines',
    'angle_cos_planes',
    'angle_sin_line_plane',
    'segments_intersect_inclusive',
    'segments_intersect_exclusive',
    'segment_triangle_intersect_inclusive',
    'segment_triangle_intersect_exclusive',
]
