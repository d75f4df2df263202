## points with a shared translation offset for affine3d

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

"""positions in space for **affine3d**

A ``Point`` is stored as an ``offset`` vector plus a relative vector
``rel``; its effective position is ``offset + rel``.  The split is
invisible to equality and distance, but lets a composite object move
all of its points by replacing a single offset.
"""

from affine3d import scalar
from affine3d.vector import ZERO, Vector


class Point:
    """a point ``(x, y, z)``, optionally relative to ``offset``"""

    __slots__ = ('offset', 'rel')

    def __init__(self, x=0, y=0, z=0, offset=None):
        self.rel = Vector(x, y, z)
        self.offset = ZERO if offset is None else offset

    @classmethod
    def from_vector(cls, rel, offset=None):
        return cls(rel.dx, rel.dy, rel.dz, offset=offset)

    @property
    def vector(self):
        """effective position as a ``Vector``"""
        return self.offset + self.rel

    @property
    def x(self):
        return self.offset.dx + self.rel.dx

    @property
    def y(self):
        return self.offset.dy + self.rel.dy

    @property
    def z(self):
        return self.offset.dz + self.rel.dz

    def __iter__(self):
        return iter(self.vector)

    def __repr__(self):
        return 'Point({}, {}, {})'.format(self.x, self.y, self.z)

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self.vector == other.vector

    def equals(self, p, epsilon):
        """same effective position within ``epsilon`` on each axis"""
        return self.vector.equals(p.vector, epsilon)

    def is_origin(self, epsilon=0):
        return self.vector.is_zero(epsilon)

    def add(self, v):
        """a new point displaced by the vector ``v``"""
        return Point.from_vector(self.vector + v)

    def subtract(self, p):
        """the vector from ``p`` to this point"""
        return self.vector - p.vector

    def translate(self, v):
        """move this point in place by ``v``; only ``offset`` changes"""
        self.offset = self.offset + v

    def rotate(self, axis, theta):
        """a new point rotated by ``theta`` radians about the line or
        ray ``axis``"""
        pivot = axis.p.vector
        u = axis.v.unit_vector()
        return Point.from_vector((self.vector - pivot).rotate(u, theta) + pivot)

    def distance_squared(self, other, epsilon=0):
        if isinstance(other, Point):
            return (self.vector - other.vector).magnitude_squared()
        return other.distance_squared(self, epsilon)

    def distance(self, other, epsilon=0):
        return scalar.sqrt(self.distance_squared(other, epsilon))

    def intersects(self, other, epsilon):
        if isinstance(other, Point):
            return self.equals(other, epsilon)
        return other.intersects(self, epsilon)

    def get_intersection(self, other, epsilon):
        """the point itself if it lies on ``other``, else ``None``"""
        if other.intersects(self, epsilon):
            return self
        return None

    def points(self):
        return [self]

    @staticmethod
    def unique(points, epsilon):
        """drop points equal (within ``epsilon``) to an earlier one,
        preserving order"""
        result = []
        for p in points:
            if not any(p.equals(q, epsilon) for q in result):
                result.append(p)
        return result
