## epsgeom package
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

"""epsilon-robust geometric primitives and predicates

Submodules, leaves first: ``tolerance``, ``primitives``, ``geom2d``,
``segment2d``, ``polygon``, ``circle``, ``triangle``, ``geom3d``,
``relations3d``, ``intersect3d`` and ``sphere``.  The value types,
their constructors, the tolerance kernel and the exceptions are
re-exported here; the geometric operations are reached through their
submodules, since several names (``cross``, ``dot``,
``point_on_segment_inclusive``) exist in both a 2D and a 3D form.
"""

import logging
from importlib.metadata import PackageNotFoundError, version

from epsgeom.logging_utils import ROOT_NAME, configure_logging, get_logger

logging.getLogger(ROOT_NAME).addHandler(logging.NullHandler())

from epsgeom import (  # noqa: E402
    circle,
    geom2d,
    geom3d,
    intersect3d,
    polygon,
    relations3d,
    segment2d,
    sphere,
    triangle,
)
from epsgeom.errors import DegenerateGeometryError, GeometryError  # noqa: E402
from epsgeom.primitives import (  # noqa: E402
    Circle,
    Plane3D,
    Point2D,
    Point3D,
    Segment2D,
    Segment3D,
    Triangle3D,
    plane,
    point,
    point3,
    segment,
    segment3,
    triangle3,
)
from epsgeom.primitives import circle as make_circle  # noqa: E402
from epsgeom.primitives import polygon as make_polygon  # noqa: E402
from epsgeom.tolerance import NEGATIVE, POSITIVE, ZERO, close, epsilon, is_zero, sign  # noqa: E402

try:
    __version__ = version("epsgeom")
except PackageNotFoundError:  # pragma: no cover - handled when package not installed
    __version__ = "unknown"
