## infinite planes for affine3d

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

"""planes for **affine3d**

A ``Plane`` is an anchor point ``p`` and a nonzero normal ``n``; it
can also be built from three non-collinear points, in which case the
normal is ``(q - p) x (r - p)``.  The normal's length and sign carry
no meaning for membership or distance, so ``equals`` ignores
orientation and ``equals_with_orientation`` is available when the
sign matters.

Tolerances
----------

``is_on_plane`` compares ``|n . (x - p)|`` against ``epsilon * |n|``,
which makes ``epsilon`` a distance from the plane.  Parallelism is
decided on unit vectors so that it does not depend on how long the
normal or direction vectors happen to be.
"""

import logging
from collections import namedtuple

from affine3d import scalar
from affine3d.errors import DegenerateGeometryError
from affine3d.geometry import Geometry, unsupported
from affine3d.line import Line, LinearGeometry
from affine3d.point import Point
from affine3d.vector import I, J, K

logger = logging.getLogger(__name__)

## coefficients of ``a x + b y + c z + d = 0``
Equation = namedtuple('Equation', ['a', 'b', 'c', 'd'])


class Plane(Geometry):
    """the plane through ``p`` with normal ``n``"""

    def __init__(self, p, n, epsilon=0.0):
        if n.is_zero(epsilon):
            raise DegenerateGeometryError('plane normal is the zero vector',
                                          {'p': p, 'n': n})
        super().__init__()
        self._pv = p.vector
        self._n = n

    @classmethod
    def from_points(cls, p, q, r, epsilon=0.0):
        """the plane through three points; collinear points raise
        ``DegenerateGeometryError``"""
        n = (q.vector - p.vector).cross(r.vector - p.vector)
        if n.is_zero(epsilon):
            raise DegenerateGeometryError(
                'collinear points do not define a plane',
                {'p': p, 'q': q, 'r': r})
        return cls(p, n)

    @classmethod
    def x0(cls):
        """the plane ``x = 0``"""
        return cls(Point(), I)

    @classmethod
    def y0(cls):
        return cls(Point(), J)

    @classmethod
    def z0(cls):
        return cls(Point(), K)

    def __repr__(self):
        return 'Plane({!r}, {!r})'.format(self.p, self._n)

    @property
    def p(self):
        return self._point(self._pv)

    @property
    def n(self):
        return self._n

    @property
    def unit_normal(self):
        return self._n.unit_vector()

    @property
    def equation(self):
        n = self._n
        return Equation(n.dx, n.dy, n.dz, -n.dot(self.p.vector))

    def reverse(self):
        """the same plane with the opposite normal"""
        return Plane(self.p, self._n.reverse())

    ## point classification

    def residual(self, pt):
        """``n . (pt - p)``, positive on the side the normal points to"""
        return self._n.dot(pt.vector - self.p.vector)

    def signed_distance(self, pt):
        return self.residual(pt) / self._n.magnitude()

    def side_of(self, pt, epsilon):
        """-1, 0 or 1; points within ``epsilon`` of the plane are 0"""
        return scalar.sign(self.signed_distance(pt), epsilon)

    def is_on_plane(self, pt, epsilon):
        return abs(self.residual(pt)) <= epsilon * self._n.magnitude()

    def is_on_same_side(self, a, b, epsilon):
        """true unless ``a`` and ``b`` are strictly on opposite sides;
        a point on the plane counts as being on either side"""
        sa = self.side_of(a, epsilon)
        sb = self.side_of(b, epsilon)
        return sa == 0 or sb == 0 or sa == sb

    def all_on_same_side(self, points, epsilon):
        sides = {self.side_of(p, epsilon) for p in points}
        sides.discard(0)
        return len(sides) <= 1

    def project(self, pt):
        """orthogonal projection of ``pt`` onto the plane"""
        n = self._n
        return Point.from_vector(pt.vector - n * (self.residual(pt) / n.dot(n)))

    @staticmethod
    def is_coplanar(epsilon, *points):
        """true if all ``points`` lie on one plane"""
        pts = Point.unique(points, epsilon)
        if len(pts) < 4:
            return True
        a, b = pts[0], pts[1]
        for c in pts[2:]:
            if not Line.through(a, b).on_line(c, epsilon):
                plane = Plane.from_points(a, b, c)
                return all(plane.is_on_plane(p, epsilon) for p in pts)
        ## everything collinear
        return True

    ## predicates against other geometry

    def is_parallel(self, other, epsilon):
        if isinstance(other, Plane):
            return self.unit_normal.is_scalar_multiple(other.unit_normal, epsilon)
        if isinstance(other, LinearGeometry):
            return self.unit_normal.is_orthogonal(other.v.unit_vector(), epsilon)
        if isinstance(other, Geometry):
            return other.is_parallel(self, epsilon)
        raise unsupported('is_parallel', self, other)

    def equals(self, plane, epsilon):
        """same set of points; the sign of the normal is ignored"""
        return self.is_parallel(plane, epsilon) and self.is_on_plane(plane.p, epsilon)

    def equals_with_orientation(self, plane, epsilon):
        return self.equals(plane, epsilon) and self._n.dot(plane.n) > 0

    def intersects(self, other, epsilon):
        if isinstance(other, Point):
            return self.is_on_plane(other, epsilon)
        return self.get_intersection(other, epsilon) is not None

    ## intersection

    def get_intersection(self, other, epsilon):
        """intersection with a point, linear primitive or plane;
        triangles and tetrahedra compute it themselves.

        A line lying in the plane and a coincident plane are returned
        as they are."""
        if isinstance(other, Point):
            return other if self.is_on_plane(other, epsilon) else None
        if isinstance(other, LinearGeometry):
            return self._intersect_linear(other, epsilon)
        if isinstance(other, Plane):
            return self._intersect_plane(other, epsilon)
        if isinstance(other, Geometry):
            return other.get_intersection(self, epsilon)
        raise unsupported('get_intersection', self, other)

    def _intersect_linear(self, line, epsilon):
        if self.is_parallel(line, epsilon):
            if self.is_on_plane(line.p, epsilon):
                return line
            return None
        n = self._n
        t = n.dot(self.p.vector - line.p.vector) / n.dot(line.v)
        x = line.point_at(t)
        if line.in_bounds(x, epsilon):
            return x
        return None

    def _intersect_plane(self, plane, epsilon):
        if self.is_parallel(plane, epsilon):
            if self.is_on_plane(plane.p, epsilon):
                return self
            logger.debug('parallel, distinct planes: %r, %r', self, plane)
            return None
        n1 = self._n
        n2 = plane.n
        u = n1.cross(n2)
        d1 = n1.dot(self.p.vector)
        d2 = n2.dot(plane.p.vector)
        x0 = (n2.cross(u) * d1 + u.cross(n1) * d2) / u.magnitude_squared()
        return Line(Point.from_vector(x0), u)

    def get_intersection3(self, plane1, plane2, epsilon):
        """common intersection of three planes: a ``Point``, ``Line``,
        ``Plane`` or ``None``"""
        g = self.get_intersection(plane1, epsilon)
        if g is None:
            return None
        return plane2.get_intersection(g, epsilon)

    ## distance

    def distance_squared(self, other, epsilon=0):
        if isinstance(other, Point):
            r = self.residual(other)
            return r*r / self._n.magnitude_squared()
        if isinstance(other, LinearGeometry):
            if self.get_intersection(other, epsilon) is not None:
                return 0
            ends = other.endpoints() or [other.p]
            return min(self.distance_squared(p) for p in ends)
        if isinstance(other, Plane):
            if not self.is_parallel(other, epsilon):
                return 0
            return self.distance_squared(other.p)
        if isinstance(other, Geometry):
            return other.distance_squared(self, epsilon)
        raise unsupported('distance_squared', self, other)

    ## transformation

    def rotate(self, axis, theta):
        u = axis.v.unit_vector()
        return Plane(self.p.rotate(axis, theta), self._n.rotate(u, theta))

    def points(self):
        return [self.p]
