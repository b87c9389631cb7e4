## 3D vector and coplanarity algebra for epsgeom
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

"""3D vector and coplanarity algebra

``Point3D`` values serve as both points and free vectors.  A plane's
normal is always derived from its three points as
``(b - a) x (c - a)``; see ``normal()``.
"""

from math import sqrt

from epsgeom.primitives import Point3D
from epsgeom.tolerance import epsilon, is_zero


## R^3 -> R^3 functions
## --------------------

def add(a, b):
    """ `a + b` """
    return Point3D(a.x + b.x, a.y + b.y, a.z + b.z)


def sub(a, b):
    """ `a - b` """
    return Point3D(a.x - b.x, a.y - b.y, a.z - b.z)


def scale(a, c):
    """ vector ``a`` times scalar ``c`` """
    return Point3D(a.x * c, a.y * c, a.z * c)


def cross(a, b):
    """ `a x b` """
    return Point3D(a.y * b.z - a.z * b.y,
                   a.z * b.x - a.x * b.z,
                   a.x * b.y - a.y * b.x)


## R^3 -> R functions
## ------------------

def dot(a, b):
    """ `a . b` """
    return a.x * b.x + a.y * b.y + a.z * b.z


def mag(a):
    """ magnitude of vector ``a`` """
    return sqrt(a.x * a.x + a.y * a.y + a.z * a.z)


def dist(a, b):
    """ euclidean distance between points ``a`` and ``b`` """
    return mag(sub(a, b))


def normal(a, b=None, c=None):
    """Normal of the plane through ``a``, ``b`` and ``c``, not
    normalized.  Also accepts a single ``Plane3D``.
    """
    if b is None and c is None:
        a, b, c = a.a, a.b, a.c
    return cross(sub(b, a), sub(c, a))


## R^3 -> bool functions
## ---------------------

def collinear(p1, p2, p3):
    return mag(cross(sub(p1, p2), sub(p2, p3))) < epsilon


def coplanar(a, b, c, d):
    """ does ``d`` lie in the plane through ``a``, ``b`` and ``c``? """
    return is_zero(dot(normal(a, b, c), sub(d, a)))


def point_on_segment_inclusive(p, seg):
    a, b = seg.a, seg.b
    return mag(cross(sub(p, a), sub(p, b))) < epsilon and \
        (a.x - p.x) * (b.x - p.x) <= epsilon and \
        (a.y - p.y) * (b.y - p.y) <= epsilon and \
        (a.z - p.z) * (b.z - p.z) <= epsilon


def _same_point(p, q):
    return is_zero(p.x - q.x) and is_zero(p.y - q.y) and is_zero(p.z - q.z)


def point_on_segment_exclusive(p, seg):
    return point_on_segment_inclusive(p, seg) and \
        not _same_point(p, seg.a) and not _same_point(p, seg.b)


## point-in-triangle by area sums: p is in the triangle iff the three
## sub-triangles it makes with the edges exactly tile the whole
def _sub_areas(p, tri):
    return (mag(cross(sub(p, tri.a), sub(p, tri.b))),
            mag(cross(sub(p, tri.b), sub(p, tri.c))),
            mag(cross(sub(p, tri.c), sub(p, tri.a))))


def point_in_triangle_inclusive(p, tri):
    """ does ``p`` lie in triangle ``tri`` (a ``Plane3D``), boundary included? """
    whole = mag(normal(tri))
    return is_zero(whole - sum(_sub_areas(p, tri)))


def point_in_triangle_exclusive(p, tri):
    """ does ``p`` lie strictly inside triangle ``tri``? """
    return point_in_triangle_inclusive(p, tri) and \
        all(s > epsilon for s in _sub_areas(p, tri))


__all__ = [
    'add',
    'sub',
    'scale',
    'cross',
    'dot',
    'mag',
    'dist',
    'normal',
    'collinear',
    'coplanar',
    'point_on_segment_inclusive',
    'point_on_segment_exclusive',
    'point_in_triangle_inclusive',
    'point_in_triangle_exclusive',
]
