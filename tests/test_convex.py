import math

import pytest

from affine3d import *
from affine3d.convex import clip_polygon, convex_hull, plane_basis
## unit tests for affine3d convex.py

EPS = 1e-9


def square():
    return [Point(0, 0, 0), Point(1, 0, 0), Point(1, 1, 0), Point(0, 1, 0)]


class TestGetGeometry:
    """reduction of a point set to its smallest primitive"""

    def test_empty_and_point(self):
        assert get_geometry([], EPS) is None
        x = get_geometry([Point(1, 1, 1), Point(1, 1, 1 + 1e-12)], EPS)
        assert isinstance(x, Point)

    def test_collinear(self):
        s = get_geometry([Point(1, 0, 0), Point(3, 0, 0), Point(0, 0, 0), Point(2, 0, 0)], EPS)
        assert isinstance(s, LineSegment)
        assert s.equals_ignore_direction(LineSegment(Point(0, 0, 0), Point(3, 0, 0)), EPS)

    def test_triangle(self):
        t = get_geometry([Point(0, 0, 0), Point(2, 0, 0), Point(0, 2, 0), Point(1, 0, 0)], EPS)
        assert isinstance(t, Triangle)
        assert t.equals(Triangle(Point(0, 0, 0), Point(2, 0, 0), Point(0, 2, 0)), EPS)

    def test_convex_area(self):
        pts = square() + [Point(0.5, 0.5, 0)]
        a = get_geometry(pts, EPS)
        assert isinstance(a, ConvexArea)
        assert len(a.points()) == 4


class TestHull:
    """monotone chain hull and half-space clipping"""

    def test_basis(self):
        for n in (I, J, K, Vector(1, 2, 3)):
            u, w = plane_basis(n)
            assert math.isclose(u.magnitude(), 1)
            assert math.isclose(w.magnitude(), 1)
            assert abs(u.dot(w)) < EPS
            assert u.cross(w).is_scalar_multiple(n, EPS)
            assert u.cross(w).dot(n) > 0

    def test_hull_order(self):
        pts = [Point(1, 1, 0), Point(0, 0, 0), Point(0.5, 0.5, 0),
               Point(1, 0, 0), Point(0, 1, 0), Point(0.5, 0, 0)]
        hull = convex_hull(pts, K, EPS)
        assert len(hull) == 4
        ## counter clockwise about +z
        a, b, c = hull[0], hull[1], hull[2]
        assert (b.vector - a.vector).cross(c.vector - b.vector).dz > 0
        hull = convex_hull(pts, K.reverse(), EPS)
        a, b, c = hull[0], hull[1], hull[2]
        assert (b.vector - a.vector).cross(c.vector - b.vector).dz < 0

    def test_clip(self):
        pl = Plane(Point(0.5, 0, 0), I)
        kept = clip_polygon(square(), pl, Point(0, 0.5, 0), EPS)
        assert len(kept) == 4
        assert all(p.x <= 0.5 + EPS for p in kept)
        assert math.isclose(get_geometry(kept, EPS).area(), 0.5)

    def test_clip_all_outside(self):
        pl = Plane(Point(5, 0, 0), I)
        assert clip_polygon(square(), pl, Point(6, 0, 0), EPS) == []

    def test_clip_reference_on_plane(self):
        with pytest.raises(DegenerateGeometryError):
            clip_polygon(square(), Plane.x0(), Point(0, 5, 0), EPS)


class TestConvexArea:
    """the polygon result type"""

    def test_create(self):
        a = ConvexArea(square())
        assert len(a.points()) == 4
        assert len(a.edges()) == 4
        assert len(a.triangles) == 2
        assert math.isclose(a.area(), 1)
        assert math.isclose(a.perimeter(), 4)
        assert a.centroid().equals(Point(0.5, 0.5, 0), EPS)
        assert a.pl.equals(Plane.z0(), EPS)

    def test_rejects_degenerate(self):
        with pytest.raises(DegenerateGeometryError):
            ConvexArea([Point(0, 0, 0), Point(1, 0, 0), Point(2, 0, 0), Point(3, 0, 0)])
        with pytest.raises(DegenerateGeometryError):
            ConvexArea([Point(0, 0, 0), Point(1, 0, 0), Point(0, 1, 0), Point(0.2, 0.2, 0)])
        with pytest.raises(DegenerateGeometryError):
            ConvexArea(square()[:3] + [Point(0, 1, 1)])

    def test_from_triangles(self):
        a = ConvexArea.from_triangles(
            Triangle(Point(0, 0, 0), Point(1, 0, 0), Point(1, 1, 0)),
            Triangle(Point(0, 0, 0), Point(1, 1, 0), Point(0, 1, 0)))
        assert a.equals(ConvexArea(square()), EPS)

    def test_intersects(self):
        a = ConvexArea(square())
        assert a.intersects(Point(0.5, 0.5, 0), EPS)
        assert a.intersects(Point(1, 1, 0), EPS)
        assert not a.intersects(Point(1.5, 0.5, 0), EPS)
        assert not a.intersects(Point(0.5, 0.5, 1), EPS)

    def test_get_intersection(self):
        a = ConvexArea(square())
        s = a.get_intersection(Line(Point(-1, 0.5, 0), I), EPS)
        assert s.equals_ignore_direction(LineSegment(Point(0, 0.5, 0), Point(1, 0.5, 0)), EPS)
        x = a.get_intersection(Line(Point(0.25, 0.75, -1), K), EPS)
        assert x.equals(Point(0.25, 0.75, 0), EPS)
        assert a.get_intersection(Plane.z0(), EPS).equals(a, EPS)
        assert a.get_intersection(Plane(Point(0, 0, 1), K), EPS) is None

    def test_distance(self):
        a = ConvexArea(square())
        assert math.isclose(a.distance_squared(Point(0.5, 0.5, 2)), 4)
        assert math.isclose(a.distance_squared(Point(3, 0.5, 0)), 4)
        assert math.isclose(Point(3, 0.5, 0).distance_squared(a), 4)

    def test_translate_rotate(self):
        a = ConvexArea(square())
        a.translate(Vector(0, 0, 2))
        assert all(p.z == 2 for p in a.points())
        r = a.rotate(Line.z_axis(), math.pi)
        assert r.equals(ConvexArea([Point(0, 0, 2), Point(-1, 0, 2),
                                    Point(-1, -1, 2), Point(0, -1, 2)]), EPS)
        assert math.isclose(r.area(), 1)
