## 2D circle geometry for epsgeom
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

"""2D circle geometry

Intersection tests reduce to comparing a distance against the radius
(or the sum and difference of radii), with ``epsilon`` slack on both
bounds so that tangency counts as intersecting.

The constructions take the square root of ``r*r - d*d``, which
cancels badly when a line is nearly tangent; those square roots are
evaluated with ``mpmath`` and clamped at zero, so a tangent line
yields a repeated point rather than a NaN.
"""

import mpmath as mpm

from epsgeom.geom2d import cross, distance
from epsgeom.logging_utils import get_logger
from epsgeom.primitives import Point2D, Segment2D
from epsgeom.segment2d import distance_point_to_line, project_point_to_line
from epsgeom.tolerance import epsilon

logger = get_logger(__name__)


## sqrt(a*a - b*b) in extended precision, clamped at zero
def _leg(a, b):
    mpa = mpm.mpf(a)
    mpb = mpm.mpf(b)
    d = mpa * mpa - mpb * mpb
    if d <= 0:
        return 0.0
    return float(mpm.sqrt(d))


def line_intersects_circle(c, line):
    """ does the infinite line through ``line`` meet circle ``c``? """
    d = distance_point_to_line(c.center, line)
    if d is None:
        return distance(c.center, line.a) < c.radius + epsilon
    return d < c.radius + epsilon


def segment_intersects_circle(c, seg):
    """Does segment ``seg`` meet the circumference of ``c``?

    A segment lying wholly inside the circle does not meet it.
    """
    t1 = distance(c.center, seg.a) - c.radius
    t2 = distance(c.center, seg.b) - c.radius
    ## an endpoint inside or on the circle: it meets the circle iff
    ## the other endpoint is not strictly inside
    if t1 < epsilon or t2 < epsilon:
        return t1 > -epsilon or t2 > -epsilon
    ## both endpoints outside: the foot of the perpendicular from the
    ## center must fall within the segment, and be close enough
    t = Point2D(c.center.x + seg.a.y - seg.b.y, c.center.y + seg.b.x - seg.a.x)
    d = distance_point_to_line(c.center, seg)
    return cross(seg.a, c.center, t) * cross(seg.b, c.center, t) < epsilon and \
        d is not None and d - c.radius < epsilon


def circles_intersect(c1, c2):
    """ do the circumferences of ``c1`` and ``c2`` meet?  Tangency counts. """
    d = distance(c1.center, c2.center)
    return d < c1.radius + c2.radius + epsilon and d > abs(c1.radius - c2.radius) - epsilon


def closest_point_on_circle(c, p):
    """Point on the circumference of ``c`` nearest to ``p``.

    If ``p`` is at the center every point is equally near, and the
    center itself is returned.
    """
    d = distance(p, c.center)
    if d < epsilon:
        return c.center
    ux = c.radius * (p.x - c.center.x) / d
    uy = c.radius * (p.y - c.center.y) / d
    u = Point2D(c.center.x + ux, c.center.y + uy)
    v = Point2D(c.center.x - ux, c.center.y - uy)
    return u if distance(u, p) < distance(v, p) else v


def line_circle_intersection_points(c, line):
    """Points where the infinite line through ``line`` meets ``c``.

    Returns an empty tuple if they don't meet, otherwise a pair of
    points, equal to each other when the line is tangent.
    """
    d = distance_point_to_line(c.center, line)
    if d is None:
        logger.debug('zero-length line passed to line_circle_intersection_points')
        return ()
    if d > c.radius + epsilon:
        return ()
    foot = project_point_to_line(c.center, line)
    length = distance(line.a, line.b)
    h = _leg(c.radius, d) / length
    dx = (line.b.x - line.a.x) * h
    dy = (line.b.y - line.a.y) * h
    return (Point2D(foot.x + dx, foot.y + dy),
            Point2D(foot.x - dx, foot.y - dy))


def circle_circle_intersection_points(c1, c2):
    """Points where the circumferences of ``c1`` and ``c2`` meet.

    Builds the radical line (through the point at the computed
    fraction of the center-to-center segment, perpendicular to it) and
    intersects it with ``c1``.  Returns an empty tuple when the circles
    don't meet or are concentric.
    """
    d = distance(c1.center, c2.center)
    if d < epsilon or not circles_intersect(c1, c2):
        return ()
    t = (1.0 + (c1.radius * c1.radius - c2.radius * c2.radius) / (d * d)) / 2.0
    u = Point2D(c1.center.x + (c2.center.x - c1.center.x) * t,
                c1.center.y + (c2.center.y - c1.center.y) * t)
    v = Point2D(u.x + c1.center.y - c2.center.y,
                u.y - c1.center.x + c2.center.x)
    return line_circle_intersection_points(c1, Segment2D(u, v))


def tangent_points(c, p):
    """Points of tangency on ``c`` of the two tangent lines through
    ``p``.

    Empty tuple if ``p`` is strictly inside the circle; the point
    itself, twice, if it lies on the circle.
    """
    d = distance(p, c.center)
    if d < c.radius - epsilon:
        return ()
    if d < c.radius + epsilon:
        return (p, p)
    a = c.radius * c.radius / d
    h = _leg(c.radius, a)
    ex = (p.x - c.center.x) / d
    ey = (p.y - c.center.y) / d
    base = Point2D(c.center.x + ex * a, c.center.y + ey * a)
    return (Point2D(base.x - ey * h, base.y + ex * h),
            Point2D(base.x + ey * h, base.y - ex * h))


__all__ = [
    'line_intersects_circle',
    'segment_intersects_circle',
    'circles_intersect',
    'closest_point_on_circle',
    'line_circle_intersection_points',
    'circle_circle_intersection_points',
    'tangent_points',
]
