## triangles for affine3d

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

"""triangles for **affine3d**

A ``Triangle`` is three non-collinear vertices ``p, q, r`` and the plane
they span.  Containment is decided by three edge planes, each
perpendicular to the triangle and passing through one edge; a point is
*aligned* with the triangle when it is on the same side of every edge
plane as the opposite vertex.  Points on an edge count, so
``intersects`` is inclusive, while ``contains`` excludes the boundary.

Intersections go through the triangle's plane first.  A transverse hit
is a single point that is kept when aligned; a coplanar operand is
clipped against the edges.  Two coplanar triangles are clipped with the
Sutherland-Hodgman algorithm, which may produce a convex polygon of up
to six sides.
"""

import logging

from affine3d.errors import DegenerateGeometryError
from affine3d.geometry import Geometry, unsupported
from affine3d.line import Line, LinearGeometry, LineSegment, linear_intersection
from affine3d.plane import Plane
from affine3d.point import Point

logger = logging.getLogger(__name__)


class Triangle(Geometry):
    """the triangle with vertices ``p``, ``q``, ``r``"""

    def __init__(self, p, q, r, epsilon=0.0):
        n = (q.vector - p.vector).cross(r.vector - p.vector)
        if n.is_zero(epsilon):
            raise DegenerateGeometryError('triangle vertices are collinear',
                                          {'p': p, 'q': q, 'r': r})
        super().__init__()
        self._pv = p.vector
        self._qv = q.vector
        self._rv = r.vector
        self._n = n

    @classmethod
    def from_plane(cls, plane, p, q, r, epsilon=0.0):
        """a triangle on ``plane``, keeping the plane's normal.  Each
        vertex must lie on the plane within ``epsilon``."""
        for v in (p, q, r):
            if not plane.is_on_plane(v, epsilon):
                raise DegenerateGeometryError('triangle vertex is not on its plane',
                                              {'plane': plane, 'vertex': v})
        t = cls(p, q, r, epsilon)
        t._n = plane.n
        return t

    def __repr__(self):
        return 'Triangle({!r}, {!r}, {!r})'.format(self.p, self.q, self.r)

    ## accessors

    @property
    def p(self):
        return self._point(self._pv)

    @property
    def q(self):
        return self._point(self._qv)

    @property
    def r(self):
        return self._point(self._rv)

    @property
    def n(self):
        return self._n

    @property
    def pl(self):
        """the plane of the triangle"""
        return Plane(self.p, self._n)

    @property
    def pq(self):
        return LineSegment(self.p, self.q)

    @property
    def qr(self):
        return LineSegment(self.q, self.r)

    @property
    def rp(self):
        return LineSegment(self.r, self.p)

    def edges(self):
        return [self.pq, self.qr, self.rp]

    def points(self):
        return [self.p, self.q, self.r]

    def _edge_planes(self):
        """``(edge_plane, opposite_vertex)`` for the three edges"""
        p, q, r = self.points()
        n = self._n
        return [(Plane(a, (b.vector - a.vector).cross(n)), c)
                for a, b, c in ((p, q, r), (q, r, p), (r, p, q))]

    ## measures

    def area(self):
        v = (self._qv - self._pv).cross(self._rv - self._pv)
        return v.magnitude() / 2

    def perimeter(self):
        return sum(e.length() for e in self.edges())

    def centroid(self):
        return Point.from_vector((self.p.vector + self.q.vector + self.r.vector) / 3)

    ## comparison

    def equals(self, t, epsilon):
        """same vertex set, in any order"""
        mine = self.points()
        theirs = t.points()
        return (all(any(a.equals(b, epsilon) for b in theirs) for a in mine)
                and all(any(b.equals(a, epsilon) for a in mine) for b in theirs))

    def opposite(self, edge, epsilon):
        """the vertex not on the segment ``edge``; ``None`` if ``edge``
        is not an edge of the triangle"""
        rest = [v for v in self.points()
                if not (edge.p.equals(v, epsilon) or edge.q.equals(v, epsilon))]
        if len(rest) != 1:
            return None
        return rest[0]

    ## point classification

    def collapse(self, epsilon):
        """``None`` for a triangle that is proper at tolerance
        ``epsilon``.  A sliver, with some vertex within ``epsilon`` of the
        line through the other two, collapses to its longest edge, or to
        ``p`` when even that edge is shorter than ``epsilon``."""
        if all(plane.side_of(c, epsilon) != 0 for plane, c in self._edge_planes()):
            return None
        longest = max(self.edges(), key=lambda e: e.length_squared())
        if longest.length_squared() <= epsilon*epsilon:
            return self.p
        return longest

    def is_aligned(self, pt, epsilon):
        """true if ``pt`` projects onto the triangle (edges included)"""
        flat = self.collapse(epsilon)
        if flat is not None:
            return flat.distance_squared(self.pl.project(pt)) <= epsilon*epsilon
        return all(plane.is_on_same_side(pt, c, epsilon)
                   for plane, c in self._edge_planes())

    def contains(self, pt, epsilon):
        """true if ``pt`` is strictly inside; the edges are excluded"""
        if self.collapse(epsilon) is not None:
            return False
        if not self.pl.is_on_plane(pt, epsilon):
            return False
        for plane, c in self._edge_planes():
            side = plane.side_of(pt, epsilon)
            if side == 0 or side != plane.side_of(c, epsilon):
                return False
        return True

    def is_parallel(self, other, epsilon):
        if isinstance(other, Triangle):
            other = other.pl
        return self.pl.is_parallel(other, epsilon)

    def intersects(self, other, epsilon):
        flat = self.collapse(epsilon)
        if flat is not None:
            return flat.intersects(other, epsilon)
        if isinstance(other, Point):
            return self.pl.is_on_plane(other, epsilon) and self.is_aligned(other, epsilon)
        return self.get_intersection(other, epsilon) is not None

    ## intersection

    def get_intersection(self, other, epsilon):
        flat = self.collapse(epsilon)
        if flat is not None:
            logger.debug('%r collapses to %r at tolerance %s', self, flat, epsilon)
            return flat.get_intersection(other, epsilon)
        if isinstance(other, Point):
            return other if self.intersects(other, epsilon) else None
        if isinstance(other, Triangle) and other.collapse(epsilon) is not None:
            return self.get_intersection(other.collapse(epsilon), epsilon)
        if isinstance(other, LinearGeometry):
            return self._intersect_linear(other, epsilon)
        if isinstance(other, Plane):
            return self._intersect_plane(other, epsilon)
        if isinstance(other, Triangle):
            return self._intersect_triangle(other, epsilon)
        if isinstance(other, Geometry):
            return other.get_intersection(self, epsilon)
        raise unsupported('get_intersection', self, other)

    def _intersect_linear(self, line, epsilon):
        from affine3d.convex import get_geometry

        g = self.pl.get_intersection(line.l, epsilon)
        if g is None:
            return None
        if isinstance(g, Point):
            if self.is_aligned(g, epsilon) and line.in_bounds(g, epsilon):
                return g
            return None
        ## the line lies in the plane: cut it with the edges
        pts = []
        for e in self.edges():
            x = linear_intersection(e, g, epsilon)
            if x is not None:
                pts.extend(x.points())
        chord = get_geometry(pts, epsilon)
        if chord is None or isinstance(line, Line):
            return chord
        return chord.get_intersection(line, epsilon)

    def _intersect_plane(self, plane, epsilon):
        from affine3d.convex import get_geometry

        if self.pl.is_parallel(plane, epsilon):
            if plane.is_on_plane(self.p, epsilon):
                return self
            return None
        pts = []
        for e in self.edges():
            x = plane.get_intersection(e, epsilon)
            if x is not None:
                pts.extend(x.points())
        return get_geometry(pts, epsilon)

    def _intersect_triangle(self, t, epsilon):
        from affine3d.convex import clip_polygon, get_geometry

        if self.equals(t, epsilon):
            return self
        if self.pl.is_parallel(t.pl, epsilon):
            if not self.pl.is_on_plane(t.p, epsilon):
                return None
            logger.debug('clipping coplanar triangles %r and %r', self, t)
            poly = t.points()
            for plane, c in self._edge_planes():
                poly = clip_polygon(poly, plane, c, epsilon)
                if not poly:
                    return None
            return get_geometry(poly, epsilon)
        ## both chords lie on the line where the two planes meet
        c1 = self._intersect_plane(t.pl, epsilon)
        if c1 is None:
            return None
        c2 = t._intersect_plane(self.pl, epsilon)
        if c2 is None:
            return None
        return c1.get_intersection(c2, epsilon)

    ## distance

    def distance_squared(self, other, epsilon=0):
        flat = self.collapse(epsilon)
        if flat is not None:
            return flat.distance_squared(other, epsilon)
        if isinstance(other, Triangle) and other.collapse(epsilon) is not None:
            return self.distance_squared(other.collapse(epsilon), epsilon)
        if isinstance(other, Point):
            if self.is_aligned(other, epsilon):
                return self.pl.distance_squared(other)
            return min(e.distance_squared(other) for e in self.edges())
        if isinstance(other, LinearGeometry):
            if self.get_intersection(other, epsilon) is not None:
                return 0
            candidates = [e.distance_squared(other, epsilon) for e in self.edges()]
            candidates += [self.distance_squared(p, epsilon) for p in other.endpoints()]
            return min(candidates)
        if isinstance(other, Plane):
            if self.get_intersection(other, epsilon) is not None:
                return 0
            return min(other.distance_squared(v) for v in self.points())
        if isinstance(other, Triangle):
            if self.get_intersection(other, epsilon) is not None:
                return 0
            candidates = [self.distance_squared(e, epsilon) for e in other.edges()]
            candidates += [other.distance_squared(e, epsilon) for e in self.edges()]
            return min(candidates)
        if isinstance(other, Geometry):
            return other.distance_squared(self, epsilon)
        raise unsupported('distance_squared', self, other)

    ## transformation

    def rotate(self, axis, theta):
        return Triangle(self.p.rotate(axis, theta),
                        self.q.rotate(axis, theta),
                        self.r.rotate(axis, theta))
