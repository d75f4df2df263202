## affine3d composite-primitive superclass
## =====================================

## Copyright (c) 2020 Richard W. DeVaul
## Copyright (c) 2020 yapCAD contributors
## All rights reserved

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

"""object-oriented superclass for composite **affine3d** primitives

The ``Geometry`` class holds the state shared by every primitive built
from more than one point: a single translation ``offset`` and the
convention that all other coordinates are stored relative to it.
Translating a composite primitive is therefore a single assignment to
``offset``, whatever the number of points it owns.

Intersection results
--------------------

An intersection query returns ``None`` when the operands do not meet,
and otherwise the geometry of the overlap.  The type of that geometry
depends on the data, not on the operand types: two triangles can meet
in a ``Point``, a ``LineSegment``, a ``Triangle`` or a ``ConvexArea``.
Callers dispatch on the result with ``isinstance``.  The
``IntersectionResult`` alias spells the possibilities out for type
checkers.
"""

import logging
from typing import TYPE_CHECKING, Union

from affine3d import scalar
from affine3d.point import Point
from affine3d.vector import ZERO

if TYPE_CHECKING:  # pragma: no cover
    from affine3d.convex import ConvexArea
    from affine3d.line import Line, LineSegment, Ray
    from affine3d.plane import Plane
    from affine3d.triangle import Triangle

logger = logging.getLogger(__name__)

IntersectionResult = Union['Point', 'Line', 'Ray', 'LineSegment', 'Plane',
                           'Triangle', 'ConvexArea', None]


class Geometry:
    """base class of the composite primitives"""

    def __init__(self, offset=None):
        self.offset = ZERO if offset is None else offset

    def _point(self, rel):
        """a ``Point`` for the relative vector ``rel`` sharing our offset"""
        return Point.from_vector(rel, offset=self.offset)

    def translate(self, v):
        """move the primitive in place by the vector ``v``"""
        self.offset = self.offset + v

    def points(self):
        """a finite list of points bounding the primitive.  Unbounded
        primitives return their anchor points."""
        raise NotImplementedError

    def rotate(self, axis, theta):
        raise NotImplementedError

    def intersects(self, p, epsilon):
        raise NotImplementedError

    def get_intersection(self, other, epsilon):
        raise NotImplementedError

    def distance_squared(self, other, epsilon):
        raise NotImplementedError

    def distance(self, other, epsilon):
        return scalar.sqrt(self.distance_squared(other, epsilon))


def unsupported(op, a, b):
    logger.debug('%s: no rule for %r and %r', op, a, b)
    return TypeError('{}() not supported between {} and {}'.format(
        op, type(a).__name__, type(b).__name__))
