## triangle centers for epsgeom
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

"""Centers of plane triangles.

Each center is the intersection of two of the triangle's
characteristic lines (perpendicular bisectors, angle bisectors,
altitudes), built with ``segment2d.intersection_point``.  Collinear
vertices have no triangle and give None.
"""

from math import hypot

from epsgeom.geom2d import collinear, cross
from epsgeom.primitives import Point2D, Segment2D
from epsgeom.segment2d import intersection_point


def triangle_area(a, b, c):
    """ signed area, positive when ``a, b, c`` run counter-clockwise """
    return cross(b, c, a) / 2.0


def centroid(a, b, c):
    return Point2D((a.x + b.x + c.x) / 3.0, (a.y + b.y + c.y) / 3.0)


## line through the midpoint of p-q, perpendicular to it
def _bisector(p, q):
    m = Point2D((p.x + q.x) / 2.0, (p.y + q.y) / 2.0)
    return Segment2D(m, Point2D(m.x - p.y + q.y, m.y + p.x - q.x))


def circumcenter(a, b, c):
    if collinear(a, b, c):
        return None
    return intersection_point(_bisector(a, b), _bisector(a, c))


## bisector of the angle at vertex v between rays toward p and q
def _angle_bisector(v, p, q):
    lp = hypot(p.x - v.x, p.y - v.y)
    lq = hypot(q.x - v.x, q.y - v.y)
    return Segment2D(v, Point2D(v.x + (p.x - v.x) / lp + (q.x - v.x) / lq,
                                v.y + (p.y - v.y) / lp + (q.y - v.y) / lq))


def incenter(a, b, c):
    if collinear(a, b, c):
        return None
    return intersection_point(_angle_bisector(a, b, c), _angle_bisector(b, a, c))


## line through v perpendicular to p-q
def _altitude(v, p, q):
    return Segment2D(v, Point2D(v.x - p.y + q.y, v.y + p.x - q.x))


def orthocenter(a, b, c):
    if collinear(a, b, c):
        return None
    return intersection_point(_altitude(c, a, b), _altitude(b, a, c))


__all__ = [
    'triangle_area',
    'centroid',
    'circumcenter',
    'incenter',
    'orthocenter',
]
