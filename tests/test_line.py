import math

import pytest

from affine3d import *
## unit tests for affine3d line.py: Line, Ray and LineSegment

EPS = 1e-9


class TestLine:
    """unit tests for the unbounded Line"""

    def test_create(self):
        l = Line(Point(1, 2, 3), Vector(0, 0, 2))
        assert l.p == Point(1, 2, 3)
        assert l.v == Vector(0, 0, 2)
        assert l.l is l
        assert l.points() == [Point(1, 2, 3)]
        with pytest.raises(DegenerateGeometryError):
            Line(Point(), ZERO)
        with pytest.raises(DegenerateGeometryError):
            Line(Point(), Vector(1e-12, 0, 0), EPS)

    def test_through(self):
        l = Line.through(Point(1, 1, 0), Point(3, 1, 0))
        assert l.v == Vector(2, 0, 0)
        assert l.equals(Line(Point(-5, 1, 0), I), EPS)

    def test_membership(self):
        l = Line.x_axis()
        assert l.intersects(Point(-100, 0, 0), EPS)
        assert l.intersects(Point(1e6, 0, 0), EPS)
        assert not l.intersects(Point(1, 1e-3, 0), EPS)

    def test_equality_ignores_direction(self):
        a = Line.x_axis()
        b = Line(Point(3, 0, 0), Vector(-2, 0, 0))
        assert a.equals(b, EPS)
        assert not a.equals_with_direction(b, EPS)
        assert a.equals_with_direction(Line(Point(7, 0, 0), I), EPS)
        assert not a.equals(Line(Point(0, 1, 0), I), EPS)

    def test_parameter(self):
        l = Line(Point(1, 0, 0), Vector(2, 0, 0))
        assert l.parameter(Point(5, 3, 0)) == 2
        assert l.point_at(-1) == Point(-1, 0, 0)
        assert l.closest_point(Point(5, 3, 0)) == Point(5, 0, 0)

    def test_is_collinear(self):
        assert Line.is_collinear(EPS, Point(0, 0, 0), Point(1, 1, 1), Point(-2, -2, -2))
        assert not Line.is_collinear(EPS, Point(0, 0, 0), Point(1, 1, 1), Point(1, 0, 0))
        assert Line.is_collinear(EPS, Point(0, 0, 0), Point(1, 1, 1))

    def test_intersect_crossing(self):
        x = Line.x_axis().get_intersection(Line(Point(2, -1, 0), J), EPS)
        assert isinstance(x, Point)
        assert x.equals(Point(2, 0, 0), EPS)

    def test_intersect_skew(self):
        assert Line.x_axis().get_intersection(Line(Point(0, 0, 1), J), EPS) is None

    def test_intersect_parallel(self):
        a = Line.x_axis()
        assert a.get_intersection(Line(Point(0, 1, 0), I), EPS) is None
        assert a.get_intersection(Line(Point(4, 0, 0), Vector(-1, 0, 0)), EPS) is a
        assert a.get_intersection(a, EPS) is a
        assert a.is_parallel(a, EPS)

    def test_distance(self):
        a = Line.x_axis()
        assert a.distance_squared(Point(3, 3, 4)) == 25
        assert a.distance_squared(Line(Point(0, 0, 2), J)) == 4
        assert a.distance_squared(Line(Point(0, 0, 2), I)) == 4
        assert a.distance_squared(Line(Point(5, 0, 0), J)) == 0

    def test_rotate(self):
        l = Line(Point(1, 0, 0), J)
        r = l.rotate(Line.z_axis(), math.pi/2)
        assert r.equals(Line(Point(0, 1, 0), I), EPS)
        assert r.rotate(Line.z_axis(), -math.pi/2).equals(l, EPS)

    def test_translate(self):
        l = Line(Point(1, 0, 0), J)
        l.translate(Vector(0, 0, 5))
        assert l.p == Point(1, 0, 5)
        assert l.v == J


class TestRay:
    """unit tests for Ray"""

    def test_membership(self):
        r = Ray(Point(0, 0, 0), I)
        assert r.intersects(Point(5, 0, 0), EPS)
        assert r.intersects(Point(0, 0, 0), EPS)
        assert not r.intersects(Point(-1, 0, 0), EPS)
        assert r.intersects(Point(-1e-12, 0, 0), EPS)

    def test_intersect_line(self):
        r = Ray(Point(0, 0, 0), I)
        x = r.get_intersection(Line(Point(2, -3, 0), J), EPS)
        assert x.equals(Point(2, 0, 0), EPS)
        assert r.get_intersection(Line(Point(-2, -3, 0), J), EPS) is None
        ## a ray on its own carrying line is returned as is
        assert r.get_intersection(Line.x_axis(), EPS) is r
        assert Line.x_axis().get_intersection(r, EPS) is r

    def test_collinear_same_direction(self):
        a = Ray(Point(0, 0, 0), I)
        b = Ray(Point(3, 0, 0), Vector(2, 0, 0))
        assert a.get_intersection(b, EPS) is b
        assert b.get_intersection(a, EPS) is b

    def test_collinear_opposite(self):
        a = Ray(Point(0, 0, 0), I)
        b = Ray(Point(3, 0, 0), Vector(-1, 0, 0))
        s = a.get_intersection(b, EPS)
        assert isinstance(s, LineSegment)
        assert s.equals_ignore_direction(LineSegment(Point(0, 0, 0), Point(3, 0, 0)), EPS)
        c = Ray(Point(0, 0, 0), Vector(-1, 0, 0))
        x = a.get_intersection(c, EPS)
        assert isinstance(x, Point)
        assert x.equals(Point(0, 0, 0), EPS)
        d = Ray(Point(-1, 0, 0), Vector(-1, 0, 0))
        assert a.get_intersection(d, EPS) is None

    def test_distance(self):
        r = Ray(Point(0, 0, 0), I)
        assert r.distance_squared(Point(-3, 4, 0)) == 25
        assert r.distance_squared(Point(3, 4, 0)) == 16
        assert r.distance_squared(Line(Point(-2, 0, 1), J)) == 5
        assert r.distance_squared(Ray(Point(-2, 0, 0), Vector(-1, 0, 0))) == 4

    def test_equals(self):
        a = Ray(Point(0, 0, 0), I)
        assert a.equals(Ray(Point(0, 0, 0), Vector(4, 0, 0)), EPS)
        assert not a.equals(Ray(Point(0, 0, 0), Vector(-4, 0, 0)), EPS)

    def test_rotate(self):
        r = Ray(Point(1, 0, 0), I)
        s = r.rotate(Line.z_axis(), math.pi)
        assert s.equals(Ray(Point(-1, 0, 0), Vector(-1, 0, 0)), EPS)


class TestLineSegment:
    """unit tests for LineSegment"""

    def test_create(self):
        s = LineSegment(Point(0, 0, 0), Point(3, 4, 0))
        assert s.q == Point(3, 4, 0)
        assert s.length_squared() == 25
        assert math.isclose(s.length(), 5.0)
        assert s.midpoint().equals(Point(1.5, 2, 0), EPS)
        assert s.points() == [Point(0, 0, 0), Point(3, 4, 0)]
        with pytest.raises(DegenerateGeometryError):
            LineSegment(Point(1, 1, 1), Point(1, 1, 1))

    def test_other_point(self):
        s = LineSegment(Point(0, 0, 0), Point(1, 0, 0))
        assert s.other_point(Point(0, 0, 0), EPS) == Point(1, 0, 0)
        assert s.other_point(Point(1, 0, 0), EPS) == Point(0, 0, 0)
        assert s.other_point(Point(0.5, 0, 0), EPS) is None

    def test_equality(self):
        s = LineSegment(Point(0, 0, 0), Point(1, 0, 0))
        r = s.reverse()
        assert not s.equals(r, EPS)
        assert s.equals_ignore_direction(r, EPS)

    def test_membership(self):
        s = LineSegment(Point(0, 0, 0), Point(2, 0, 0))
        assert s.intersects(Point(0, 0, 0), EPS)
        assert s.intersects(Point(1, 0, 0), EPS)
        assert s.intersects(Point(2, 0, 0), EPS)
        assert not s.intersects(Point(2.001, 0, 0), EPS)
        assert not s.intersects(Point(1, 0.001, 0), EPS)

    def test_intersect_crossing(self):
        a = LineSegment(Point(0, 0, 0), Point(2, 2, 0))
        b = LineSegment(Point(0, 2, 0), Point(2, 0, 0))
        x = a.get_intersection(b, EPS)
        assert x.equals(Point(1, 1, 0), EPS)
        c = LineSegment(Point(3, 0, 0), Point(5, 2, 0))
        assert a.get_intersection(c, EPS) is None

    def test_intersect_touching(self):
        a = LineSegment(Point(0, 0, 0), Point(1, 0, 0))
        b = LineSegment(Point(1, 0, 0), Point(1, 1, 0))
        assert a.get_intersection(b, EPS).equals(Point(1, 0, 0), EPS)

    def test_collinear_overlap(self):
        a = LineSegment(Point(0, 0, 0), Point(2, 0, 0))
        b = LineSegment(Point(3, 0, 0), Point(1, 0, 0))
        s = a.get_intersection(b, EPS)
        assert isinstance(s, LineSegment)
        assert s.equals_ignore_direction(LineSegment(Point(1, 0, 0), Point(2, 0, 0)), EPS)
        c = LineSegment(Point(2, 0, 0), Point(5, 0, 0))
        x = a.get_intersection(c, EPS)
        assert isinstance(x, Point)
        assert x.equals(Point(2, 0, 0), EPS)
        d = LineSegment(Point(3, 0, 0), Point(5, 0, 0))
        assert a.get_intersection(d, EPS) is None
        inner = LineSegment(Point(0.5, 0, 0), Point(1, 0, 0))
        assert a.get_intersection(inner, EPS) is inner
        assert a.get_intersection(a, EPS) is a

    def test_clip_by_ray_and_line(self):
        s = LineSegment(Point(-1, 0, 0), Point(1, 0, 0))
        r = Ray(Point(0, 0, 0), I)
        c = s.get_intersection(r, EPS)
        assert c.equals_ignore_direction(LineSegment(Point(0, 0, 0), Point(1, 0, 0)), EPS)
        assert s.get_intersection(Line.x_axis(), EPS) is s

    def test_distance(self):
        s = LineSegment(Point(0, 0, 0), Point(2, 0, 0))
        assert s.distance_squared(Point(1, 3, 0)) == 9
        assert s.distance_squared(Point(5, 4, 0)) == 25
        t = LineSegment(Point(4, 1, 0), Point(4, 5, 0))
        assert s.distance_squared(t) == 5
        assert t.distance_squared(s) == 5
        u = LineSegment(Point(1, -1, 3), Point(1, 1, 3))
        assert s.distance_squared(u) == 9
        ## parallel, offset sideways, overlapping in projection
        v = LineSegment(Point(1, 2, 0), Point(5, 2, 0))
        assert s.distance_squared(v) == 4
        ## parallel, disjoint along the axis
        w = LineSegment(Point(4, 0, 0), Point(6, 0, 0))
        assert s.distance_squared(w) == 4

    def test_rotate(self):
        s = LineSegment(Point(1, 0, 0), Point(2, 0, 0))
        r = s.rotate(Line.z_axis(), math.pi/2)
        assert r.equals(LineSegment(Point(0, 1, 0), Point(0, 2, 0)), EPS)
