## spherical distances for epsgeom
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

"""Distances between points on a sphere.

Points are given as (longitude, latitude) in degrees, with
``-90 <= latitude <= 90``; longitudes may be any value and are
reduced modulo 360.
"""

from math import acos, cos, pi, radians, sin, sqrt

from epsgeom.errors import GeometryError

pi2 = 2.0 * pi


def _cos_central(lng1, lat1, lng2, lat2):
    for lat in (lat1, lat2):
        if not -90.0 <= lat <= 90.0:
            raise GeometryError(f'latitude out of range: {lat!r}')
    dlng = radians(abs(lng1 - lng2)) % pi2
    if dlng > pi:
        dlng = pi2 - dlng
    la1 = radians(lat1)
    la2 = radians(lat2)
    c = cos(la1) * cos(la2) * cos(dlng) + sin(la1) * sin(la2)
    ## rounding can push c just outside [-1, 1]
    return max(-1.0, min(1.0, c))


def central_angle(lng1, lat1, lng2, lat2):
    """Angle at the sphere's center subtended by the two points, in
    radians, on the minor arc (``0 <= angle <= pi``)."""
    return acos(_cos_central(lng1, lat1, lng2, lat2))


def great_circle_distance(r, lng1, lat1, lng2, lat2):
    """ distance along the surface of a sphere of radius ``r`` """
    return r * central_angle(lng1, lat1, lng2, lat2)


def chord_distance(r, lng1, lat1, lng2, lat2):
    """ straight-line distance through a sphere of radius ``r`` """
    return r * sqrt(2.0 - 2.0 * _cos_central(lng1, lat1, lng2, lat2))


__all__ = [
    'central_angle',
    'great_circle_distance',
    'chord_distance',
]
