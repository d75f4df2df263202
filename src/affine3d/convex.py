## convex polygons and the polygon helpers behind intersection results

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

"""convex polygons for **affine3d**

Intersections between triangles and tetrahedra produce convex
regions whose shape is only known once they have been computed.  The
helpers here turn a bag of points into the smallest primitive that
describes their convex hull:

* no points: ``None``
* one point: ``Point``
* collinear points: ``LineSegment`` between the extreme pair
* three hull vertices: ``Triangle``
* four or more: ``ConvexArea``

``clip_polygon`` is a single Sutherland-Hodgman pass against a half
space, and ``convex_hull`` is Andrew's monotone chain run in a 2-D
basis of the polygon's plane.
"""

import logging

from affine3d import scalar
from affine3d.errors import DegenerateGeometryError
from affine3d.geometry import Geometry
from affine3d.line import Line, LineSegment
from affine3d.plane import Plane
from affine3d.point import Point
from affine3d.triangle import Triangle
from affine3d.vector import I, J, K

logger = logging.getLogger(__name__)


def _farthest(points, key):
    return max(points, key=key)


def _spanning_normal(points, epsilon):
    """normal of the plane spanned by ``points``, or ``None`` if they
    are collinear within ``epsilon``.  ``points`` must be unique."""
    if len(points) < 3:
        return None
    a = points[0]
    b = _farthest(points, lambda p: (p.vector - a.vector).magnitude_squared())
    line = Line.through(a, b)
    c = _farthest(points, line.distance_squared)
    if line.distance_squared(c) <= epsilon*epsilon:
        return None
    return (b.vector - a.vector).cross(c.vector - a.vector)


def plane_basis(n):
    """orthonormal ``(u, w)`` with ``u x w`` along ``n``"""
    nu = n.unit_vector()
    ## seed with the coordinate axis least aligned with the normal
    axis = min((I, J, K), key=lambda e: abs(nu.dot(e)))
    u = nu.cross(axis).unit_vector()
    w = nu.cross(u)
    return u, w


def convex_hull(points, n, epsilon):
    """vertices of the convex hull of coplanar ``points``, counter
    clockwise about ``n``.  Vertices within ``epsilon`` of the line
    through their neighbours are dropped."""
    pts = Point.unique(points, epsilon)
    if len(pts) < 3:
        return pts
    u, w = plane_basis(n)
    coords = [(p.vector.dot(u), p.vector.dot(w)) for p in pts]
    order = sorted(range(len(pts)), key=lambda i: coords[i])

    def turn(o, a, b):
        ## twice the signed area; positive for a left turn
        return ((coords[a][0] - coords[o][0]) * (coords[b][1] - coords[o][1])
                - (coords[a][1] - coords[o][1]) * (coords[b][0] - coords[o][0]))

    def dist(a, b):
        return scalar.sqrt((coords[a][0] - coords[b][0])**2
                           + (coords[a][1] - coords[b][1])**2)

    def chain(indices):
        h = []
        for i in indices:
            while len(h) >= 2 and turn(h[-2], h[-1], i) <= epsilon * dist(h[-2], i):
                h.pop()
            h.append(i)
        return h

    lower = chain(order)
    upper = chain(reversed(order))
    hull = lower[:-1] + upper[:-1]
    return [pts[i] for i in hull]


def clip_polygon(points, plane, inside, epsilon):
    """one Sutherland-Hodgman pass: the part of the polygon ``points``
    on the same side of ``plane`` as the point ``inside``.  Vertices
    on the plane are kept."""
    keep = plane.side_of(inside, epsilon)
    if keep == 0:
        raise DegenerateGeometryError('clip reference point lies on the clip plane',
                                      {'plane': plane, 'inside': inside})
    out = []
    for i, cur in enumerate(points):
        prev = points[i - 1]
        sc = plane.side_of(cur, epsilon) * keep
        sp = plane.side_of(prev, epsilon) * keep
        if sc >= 0:
            if sc > 0 and sp < 0:
                out.append(_crossing(plane, prev, cur))
            out.append(cur)
        elif sp > 0:
            out.append(_crossing(plane, prev, cur))
    return out


def _crossing(plane, a, b):
    da = plane.residual(a)
    db = plane.residual(b)
    t = da / (da - db)
    return Point.from_vector(a.vector + (b.vector - a.vector) * t)


def get_geometry(points, epsilon):
    """the smallest primitive describing the convex hull of ``points``"""
    pts = Point.unique(points, epsilon)
    if not pts:
        return None
    if len(pts) == 1:
        return pts[0]
    n = _spanning_normal(pts, epsilon)
    if n is None:
        a = _farthest(pts, lambda p: (p.vector - pts[0].vector).magnitude_squared())
        b = _farthest(pts, lambda p: (p.vector - a.vector).magnitude_squared())
        return LineSegment(a, b)
    hull = convex_hull(pts, n, epsilon)
    if len(hull) == 3:
        return Triangle(*hull)
    return ConvexArea._from_hull(hull, n)


class ConvexArea(Geometry):
    """a convex polygon with four or more vertices, represented by a
    fan of triangles"""

    def __init__(self, points, n=None, epsilon=0.0):
        pts = Point.unique(points, epsilon)
        if n is None:
            n = _spanning_normal(pts, epsilon)
            if n is None:
                raise DegenerateGeometryError('convex area points are collinear',
                                              {'points': pts})
        plane = Plane(pts[0], n)
        for p in pts:
            if not plane.is_on_plane(p, epsilon):
                raise DegenerateGeometryError('convex area points are not coplanar',
                                              {'point': p})
        hull = convex_hull(pts, n, epsilon)
        if len(hull) < 4:
            logger.debug('rejecting convex area with hull %r', hull)
            raise DegenerateGeometryError(
                'convex area needs at least four hull vertices, got {}'.format(len(hull)),
                {'points': hull})
        super().__init__()
        self._rels = [p.vector for p in hull]
        self._n = n

    @classmethod
    def _from_hull(cls, hull, n):
        """wrap vertices already known to form a convex polygon"""
        area = cls.__new__(cls)
        Geometry.__init__(area)
        area._rels = [p.vector for p in hull]
        area._n = n
        return area

    @classmethod
    def from_triangles(cls, *triangles, epsilon=0.0):
        """the convex hull of a set of coplanar triangles"""
        pts = [p for t in triangles for p in t.points()]
        return cls(pts, triangles[0].n, epsilon)

    def __repr__(self):
        return 'ConvexArea({!r})'.format(self.points())

    @property
    def n(self):
        return self._n

    @property
    def pl(self):
        return Plane(self._point(self._rels[0]), self._n)

    def points(self):
        return [self._point(v) for v in self._rels]

    def edges(self):
        pts = self.points()
        return [LineSegment(pts[i - 1], pts[i]) for i in range(len(pts))]

    @property
    def triangles(self):
        pts = self.points()
        return [Triangle(pts[0], pts[i], pts[i + 1]) for i in range(1, len(pts) - 1)]

    def area(self):
        return sum(t.area() for t in self.triangles)

    def perimeter(self):
        return sum(e.length() for e in self.edges())

    def centroid(self):
        tris = self.triangles
        total = sum(t.area() for t in tris)
        acc = sum((t.centroid().vector * t.area() for t in tris[1:]),
                  tris[0].centroid().vector * tris[0].area())
        return Point.from_vector(acc / total)

    def equals(self, other, epsilon):
        """same vertex set, in any order"""
        mine = self.points()
        theirs = other.points()
        return (len(mine) == len(theirs)
                and all(any(a.equals(b, epsilon) for b in theirs) for a in mine))

    def intersects(self, other, epsilon):
        if isinstance(other, Point):
            return any(t.intersects(other, epsilon) for t in self.triangles)
        return self.get_intersection(other, epsilon) is not None

    def get_intersection(self, other, epsilon):
        """the region shared with ``other``: each fan triangle is
        intersected and the convex hull of the pieces returned"""
        pts = []
        for t in self.triangles:
            piece = t.get_intersection(other, epsilon)
            if piece is not None:
                pts.extend(piece.points())
        return get_geometry(pts, epsilon)

    def distance_squared(self, other, epsilon=0):
        return min(t.distance_squared(other, epsilon) for t in self.triangles)

    def rotate(self, axis, theta):
        u = axis.v.unit_vector()
        return ConvexArea._from_hull([p.rotate(axis, theta) for p in self.points()],
                                     self._n.rotate(u, theta))
