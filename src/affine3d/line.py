## lines, rays and line segments for affine3d

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

"""linear primitives for **affine3d**

``Line``, ``Ray`` and ``LineSegment`` share one parametric form,
``x(t) = p + t v``, and differ only in the admissible range of ``t``:

=============== ==================
``Line``        ``-inf < t < inf``
``Ray``         ``0 <= t < inf``
``LineSegment`` ``0 <= t <= 1``
=============== ==================

Every pairwise query is computed once for the unrestricted lines and
then clipped against those parameter bounds.  When two linear
primitives are collinear their overlap is an interval of ``t`` and is
rebuilt as a ``Point``, ``LineSegment``, ``Ray`` or ``Line`` as
appropriate.

Queries against higher-dimensional primitives (planes, triangles,
tetrahedra) are delegated to those primitives.
"""

import logging

from affine3d import scalar
from affine3d.errors import DegenerateGeometryError
from affine3d.geometry import Geometry, unsupported
from affine3d.point import Point
from affine3d.vector import I, J, K

logger = logging.getLogger(__name__)

INF = float('inf')


class LinearGeometry(Geometry):
    """common machinery of ``Line``, ``Ray`` and ``LineSegment``"""

    ## admissible parameter range, narrowed by subclasses
    lo = -INF
    hi = INF

    def __init__(self, p, v, epsilon=0.0):
        if v.is_zero(epsilon):
            raise DegenerateGeometryError(
                '{} direction is the zero vector'.format(type(self).__name__),
                {'p': p, 'v': v})
        super().__init__()
        self._pv = p.vector
        self._v = v

    @property
    def p(self):
        return self._point(self._pv)

    @property
    def v(self):
        return self._v

    @property
    def l(self):
        """the unbounded line carrying this primitive"""
        return Line(self.p, self._v)

    def parameter(self, pt):
        """the ``t`` of the orthogonal projection of ``pt``"""
        v = self._v
        return (pt.vector - self.p.vector).dot(v) / v.dot(v)

    def point_at(self, t):
        return Point.from_vector(self.p.vector + self._v * t)

    def closest_point(self, pt):
        """the point of this primitive nearest to ``pt``"""
        t = self.parameter(pt)
        if t < self.lo:
            t = self.lo
        elif t > self.hi:
            t = self.hi
        return self.point_at(t)

    def on_line(self, pt, epsilon):
        """true if ``pt`` lies on the carrying line, ignoring bounds"""
        return (pt.vector - self.p.vector).is_scalar_multiple(self._v, epsilon)

    def in_bounds(self, pt, epsilon):
        """true if the projection of ``pt`` falls in the parameter
        range; ``epsilon`` is a distance along the line"""
        t = self.parameter(pt)
        tol = epsilon / self._v.magnitude()
        return self.lo - tol <= t <= self.hi + tol

    def intersects(self, other, epsilon):
        if isinstance(other, Point):
            return self.on_line(other, epsilon) and self.in_bounds(other, epsilon)
        return self.get_intersection(other, epsilon) is not None

    def is_parallel(self, other, epsilon):
        if isinstance(other, LinearGeometry):
            return self._v.unit_vector().is_scalar_multiple(
                other.v.unit_vector(), epsilon)
        if isinstance(other, Geometry):
            return other.is_parallel(self, epsilon)
        raise unsupported('is_parallel', self, other)

    def get_intersection(self, other, epsilon):
        if isinstance(other, Point):
            return other if self.intersects(other, epsilon) else None
        if isinstance(other, LinearGeometry):
            return linear_intersection(self, other, epsilon)
        if isinstance(other, Geometry):
            return other.get_intersection(self, epsilon)
        raise unsupported('get_intersection', self, other)

    def distance_squared(self, other, epsilon=0):
        if isinstance(other, Point):
            return (other.vector - self.closest_point(other).vector).magnitude_squared()
        if isinstance(other, LinearGeometry):
            return linear_distance_squared(self, other, epsilon)
        if isinstance(other, Geometry):
            return other.distance_squared(self, epsilon)
        raise unsupported('distance_squared', self, other)

    def endpoints(self):
        """the points at finite parameter bounds"""
        return [self.point_at(t) for t in (self.lo, self.hi) if abs(t) != INF]


class Line(LinearGeometry):
    """the infinite line through ``p`` with direction ``v``"""

    @classmethod
    def through(cls, p, q, epsilon=0.0):
        return cls(p, q.vector - p.vector, epsilon)

    @classmethod
    def x_axis(cls):
        return cls(Point(), I)

    @classmethod
    def y_axis(cls):
        return cls(Point(), J)

    @classmethod
    def z_axis(cls):
        return cls(Point(), K)

    @property
    def l(self):
        return self

    def __repr__(self):
        return 'Line({!r}, {!r})'.format(self.p, self._v)

    def equals(self, line, epsilon):
        """same set of points; the direction sign is ignored"""
        return self.is_parallel(line, epsilon) and self.on_line(line.p, epsilon)

    def equals_with_direction(self, line, epsilon):
        return (self.equals(line, epsilon)
                and self._v.unit_vector().equals(line.v.unit_vector(), epsilon))

    def points(self):
        return [self.p]

    def rotate(self, axis, theta):
        u = axis.v.unit_vector()
        return Line(self.p.rotate(axis, theta), self._v.rotate(u, theta))

    @staticmethod
    def is_collinear(epsilon, *points):
        """true if all ``points`` lie on one line"""
        pts = Point.unique(points, epsilon)
        if len(pts) < 3:
            return True
        line = Line.through(pts[0], pts[1])
        return all(line.on_line(p, epsilon) for p in pts[2:])


class Ray(LinearGeometry):
    """the half line starting at ``p`` in the direction ``v``"""

    lo = 0

    @classmethod
    def through(cls, p, q, epsilon=0.0):
        return cls(p, q.vector - p.vector, epsilon)

    def __repr__(self):
        return 'Ray({!r}, {!r})'.format(self.p, self._v)

    def equals(self, ray, epsilon):
        return (self.p.equals(ray.p, epsilon)
                and self._v.unit_vector().equals(ray.v.unit_vector(), epsilon))

    def points(self):
        return [self.p]

    def rotate(self, axis, theta):
        u = axis.v.unit_vector()
        return Ray(self.p.rotate(axis, theta), self._v.rotate(u, theta))


class LineSegment(LinearGeometry):
    """the closed segment from ``p`` to ``q``"""

    lo = 0
    hi = 1

    def __init__(self, p, q, epsilon=0.0):
        if p.equals(q, epsilon):
            raise DegenerateGeometryError('line segment has zero length',
                                          {'p': p, 'q': q})
        super().__init__(p, q.vector - p.vector)

    def __repr__(self):
        return 'LineSegment({!r}, {!r})'.format(self.p, self.q)

    @property
    def q(self):
        return self._point(self._pv + self._v)

    def length_squared(self):
        return self._v.magnitude_squared()

    def length(self):
        return self._v.magnitude()

    def midpoint(self):
        return Point.from_vector((self.p.vector + self.q.vector) / 2)

    def reverse(self):
        return LineSegment(self.q, self.p)

    def other_point(self, pt, epsilon):
        """the endpoint that is not ``pt``, or ``None`` if ``pt`` is
        not an endpoint"""
        if self.p.equals(pt, epsilon):
            return self.q
        if self.q.equals(pt, epsilon):
            return self.p
        return None

    def equals(self, segment, epsilon):
        """same endpoints in the same order"""
        return self.p.equals(segment.p, epsilon) and self.q.equals(segment.q, epsilon)

    def equals_ignore_direction(self, segment, epsilon):
        return (self.equals(segment, epsilon)
                or (self.p.equals(segment.q, epsilon)
                    and self.q.equals(segment.p, epsilon)))

    def points(self):
        return [self.p, self.q]

    def rotate(self, axis, theta):
        return LineSegment(self.p.rotate(axis, theta), self.q.rotate(axis, theta))


## pairwise algorithms
## -------------------

def closest_parameters(a, b):
    """parameters ``(s, t)`` of the closest points of the carrying
    lines of two non-parallel linear primitives"""
    w0 = a.p.vector - b.p.vector
    u = a.v
    v = b.v
    A = u.dot(u)
    B = u.dot(v)
    C = v.dot(v)
    D = u.dot(w0)
    E = v.dot(w0)
    den = A*C - B*B
    return (B*E - C*D) / den, (A*E - B*D) / den


def linear_intersection(a, b, epsilon):
    """intersection of two linear primitives: ``None``, a ``Point``, or
    for collinear inputs the overlapping ``LineSegment``, ``Ray`` or
    ``Line``"""
    if a.is_parallel(b, epsilon):
        if not a.on_line(b.p, epsilon):
            logger.debug('parallel, distinct lines: %r, %r', a, b)
            return None
        return collinear_overlap(a, b, epsilon)
    s, t = closest_parameters(a, b)
    pa = a.point_at(s)
    pb = b.point_at(t)
    if (pa.vector - pb.vector).magnitude_squared() > epsilon*epsilon:
        return None
    x = Point.from_vector((pa.vector + pb.vector) / 2)
    if a.in_bounds(x, epsilon) and b.in_bounds(x, epsilon):
        return x
    return None


def collinear_overlap(a, b, epsilon):
    """overlap of two collinear linear primitives, as an interval of
    ``a``'s parameter"""
    vv = a.v.dot(a.v)
    c = a.parameter(b.p)
    k = b.v.dot(a.v) / vv
    blo = c + k*b.lo
    bhi = c + k*b.hi
    if k < 0:
        blo, bhi = bhi, blo

    lo_from_a = a.lo >= blo
    hi_from_a = a.hi <= bhi
    lo = a.lo if lo_from_a else blo
    hi = a.hi if hi_from_a else bhi
    tol = epsilon / scalar.sqrt(vv)
    if lo > hi + tol:
        return None
    if lo_from_a and hi_from_a:
        return a
    if blo >= a.lo and bhi <= a.hi:
        return b
    if lo == -INF:
        return Ray(a.point_at(hi), a.v.reverse())
    if hi == INF:
        return Ray(a.point_at(lo), a.v)
    if hi - lo <= tol:
        return a.point_at((lo + hi) / 2)
    return LineSegment(a.point_at(lo), a.point_at(hi))


def linear_distance_squared(a, b, epsilon):
    """squared distance between two linear primitives.

    If the unconstrained closest points of the carrying lines are
    admissible for both primitives they give the answer; otherwise the
    minimum lies on the boundary of the parameter domain, which means
    at a finite endpoint of one primitive measured against the other.
    """
    if not a.is_parallel(b, epsilon):
        s, t = closest_parameters(a, b)
        if a.lo <= s <= a.hi and b.lo <= t <= b.hi:
            return (a.point_at(s).vector - b.point_at(t).vector).magnitude_squared()
    candidates = [b.distance_squared(p) for p in a.endpoints()]
    candidates += [a.distance_squared(p) for p in b.endpoints()]
    if not candidates:
        ## two parallel unbounded lines
        return a.distance_squared(b.p)
    return min(candidates)
