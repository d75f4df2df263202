## tetrahedra for affine3d

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

"""tetrahedra for **affine3d**

A ``Tetrahedron`` is four affinely independent vertices ``p, q, r, s``.
Its faces are the triangles ``pqr``, ``qsr``, ``spr`` and ``psq``; they
are built on first use and cached until the tetrahedron is moved.

A point is inside when, for every face, it lies on the same side of the
face's plane as the vertex opposite that face (or on the plane).

Intersecting a tetrahedron with a line, ray, segment, plane or
triangle yields the part of that operand inside the solid.  It is
assembled from the operand's intersections with the four faces plus
those of the operand's own vertices that are inside, then reduced to
the smallest primitive spanning those points.  Shared edges and
vertices reported by two faces collapse in that reduction.
"""

import logging

from affine3d.convex import ConvexArea, get_geometry
from affine3d.errors import DegenerateGeometryError
from affine3d.geometry import Geometry, unsupported
from affine3d.line import LinearGeometry, LineSegment
from affine3d.plane import Plane
from affine3d.point import Point
from affine3d.triangle import Triangle

logger = logging.getLogger(__name__)


class Tetrahedron(Geometry):
    """the tetrahedron with vertices ``p``, ``q``, ``r``, ``s``"""

    def __init__(self, p, q, r, s, epsilon=0.0):
        pv = p.vector
        vol6 = (q.vector - pv).dot((r.vector - pv).cross(s.vector - pv))
        if abs(vol6) <= epsilon:
            logger.debug('rejecting flat tetrahedron, 6V = %s', vol6)
            raise DegenerateGeometryError('tetrahedron vertices are coplanar',
                                          {'p': p, 'q': q, 'r': r, 's': s})
        super().__init__()
        self._pv = pv
        self._qv = q.vector
        self._rv = r.vector
        self._sv = s.vector
        self._faces = None

    def __repr__(self):
        return 'Tetrahedron({!r}, {!r}, {!r}, {!r})'.format(
            self.p, self.q, self.r, self.s)

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
    def s(self):
        return self._point(self._sv)

    def points(self):
        return [self.p, self.q, self.r, self.s]

    def translate(self, v):
        super().translate(v)
        self._faces = None

    ## faces

    def faces(self):
        """``[pqr, qsr, spr, psq]``"""
        if self._faces is None:
            p, q, r, s = self.points()
            self._faces = [Triangle(p, q, r), Triangle(q, s, r),
                           Triangle(s, p, r), Triangle(p, s, q)]
        return self._faces

    @property
    def pqr(self):
        return self.faces()[0]

    @property
    def qsr(self):
        return self.faces()[1]

    @property
    def spr(self):
        return self.faces()[2]

    @property
    def psq(self):
        return self.faces()[3]

    def _face_planes(self):
        """``(face_plane, opposite_vertex)`` for the four faces"""
        p, q, r, s = self.points()
        return [(f.pl, v) for f, v in zip(self.faces(), (s, p, q, r))]

    def edges(self):
        p, q, r, s = self.points()
        return [LineSegment(p, q), LineSegment(p, r), LineSegment(p, s),
                LineSegment(q, r), LineSegment(q, s), LineSegment(r, s)]

    ## measures

    def volume(self):
        pv = self._pv
        vol6 = (self._qv - pv).dot((self._rv - pv).cross(self._sv - pv))
        return abs(vol6) / 6

    def area(self):
        """total surface area"""
        return sum(f.area() for f in self.faces())

    def centroid(self):
        return Point.from_vector(
            (self._pv + self._qv + self._rv + self._sv) / 4 + self.offset)

    ## point classification

    def collapse(self, epsilon):
        """``None`` for a solid tetrahedron at tolerance ``epsilon``.  A
        flat one, with some vertex within ``epsilon`` of the opposite face
        plane, collapses to the convex hull of its vertices: a
        ``Triangle``, ``ConvexArea``, ``LineSegment`` or ``Point``."""
        if all(plane.side_of(v, epsilon) != 0 for plane, v in self._face_planes()):
            return None
        return get_geometry(self.points(), epsilon)

    def intersects(self, other, epsilon):
        flat = self.collapse(epsilon)
        if flat is not None:
            return flat.intersects(other, epsilon)
        if isinstance(other, Point):
            return all(plane.is_on_same_side(other, v, epsilon)
                       for plane, v in self._face_planes())
        if isinstance(other, Tetrahedron):
            thin = other.collapse(epsilon)
            if thin is not None:
                return self.intersects(thin, epsilon)
            return self._meets(other, epsilon)
        return self.get_intersection(other, epsilon) is not None

    def _meets(self, other, epsilon):
        """true if two solid tetrahedra share a point: a vertex of one
        lies in the other, or an edge of one crosses a face of the other"""
        if any(other.intersects(v, epsilon) for v in self.points()):
            return True
        if any(self.intersects(v, epsilon) for v in other.points()):
            return True
        return any(other.get_intersection(f, epsilon) is not None for f in self.faces())

    def contains(self, pt, epsilon):
        """true if ``pt`` is strictly inside; the boundary is excluded"""
        if self.collapse(epsilon) is not None:
            return False
        for plane, v in self._face_planes():
            side = plane.side_of(pt, epsilon)
            if side == 0 or side != plane.side_of(v, epsilon):
                return False
        return True

    ## intersection

    def get_intersection(self, other, epsilon):
        """the part of ``other`` inside the tetrahedron"""
        flat = self.collapse(epsilon)
        if flat is not None:
            logger.debug('%r collapses to %r at tolerance %s', self, flat, epsilon)
            return flat.get_intersection(other, epsilon)
        if isinstance(other, Point):
            return other if self.intersects(other, epsilon) else None
        if isinstance(other, LinearGeometry):
            own = other.endpoints()
        elif isinstance(other, (Triangle, ConvexArea)):
            own = other.points()
        elif isinstance(other, Plane):
            own = []
        elif isinstance(other, Tetrahedron) and other.collapse(epsilon) is not None:
            return self.get_intersection(other.collapse(epsilon), epsilon)
        else:
            raise unsupported('get_intersection', self, other)
        pts = []
        for f in self.faces():
            piece = f.get_intersection(other, epsilon)
            if piece is not None:
                pts.extend(piece.points())
        pts.extend(p for p in own if self.intersects(p, epsilon))
        return get_geometry(pts, epsilon)

    ## distance

    def distance_squared(self, other, epsilon=0):
        flat = self.collapse(epsilon)
        if flat is not None:
            return flat.distance_squared(other, epsilon)
        if isinstance(other, Point):
            if self.intersects(other, epsilon):
                return 0
            return min(f.distance_squared(other, epsilon) for f in self.faces())
        if isinstance(other, (LinearGeometry, Triangle)):
            if self.get_intersection(other, epsilon) is not None:
                return 0
            return min(f.distance_squared(other, epsilon) for f in self.faces())
        if isinstance(other, Plane):
            if self.get_intersection(other, epsilon) is not None:
                return 0
            return min(other.distance_squared(v) for v in self.points())
        if isinstance(other, Tetrahedron):
            thin = other.collapse(epsilon)
            if thin is not None:
                return self.distance_squared(thin, epsilon)
            if self._meets(other, epsilon):
                return 0
            return min(other.distance_squared(f, epsilon) for f in self.faces())
        if isinstance(other, Geometry):
            return other.distance_squared(self, epsilon)
        raise unsupported('distance_squared', self, other)

    ## transformation

    def rotate(self, axis, theta):
        return Tetrahedron(*(v.rotate(axis, theta) for v in self.points()))
