## tolerance and sign kernel for epsgeom
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

"""tolerance and sign kernel for **epsgeom**

Every predicate in epsgeom decides "is this value zero?" through the
functions in this module, and through nothing else.  Mixing ad-hoc
comparisons with the shared tolerance is how a geometry library ends
up classifying the same boundary point as inside by one test and
outside by another.

constants
=========

``epsilon`` is the absolute tolerance below which a floating point
value is treated as zero.  Redefine it at your peril: the boundary
behaviour of every predicate is calibrated against it.

"""

## constants
epsilon = 1e-8

NEGATIVE = -1
ZERO = 0
POSITIVE = 1


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints
def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float))


def is_zero(v):
    """ is scalar ``v`` zero to within ``epsilon``?"""
    return abs(v) < epsilon


def sign(v):
    """three-way sign classification of scalar ``v``.

    Returns ``NEGATIVE`` (-1), ``ZERO`` (0) or ``POSITIVE`` (1), using
    the same ``epsilon`` threshold on both sides of zero.
    """
    if abs(v) < epsilon:
        return ZERO
    return POSITIVE if v > 0 else NEGATIVE


## are two scalars the same to within epsilon
def close(a, b):
    """ are two scalars the same within epsilon
    """
    return is_zero(a - b)


__all__ = [
    'epsilon',
    'NEGATIVE',
    'ZERO',
    'POSITIVE',
    'isgoodnum',
    'is_zero',
    'sign',
    'close',
]
