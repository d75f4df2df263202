import math
from fractions import Fraction

import mpmath as mpm
import pytest

from affine3d import *
## unit tests for affine3d vector.py

EPS = 1e-9


class TestVector:
    """unit tests for affine3d Vector"""

    def test_create(self):
        a = Vector(1, 2, 3)
        assert a.dx == 1 and a.dy == 2 and a.dz == 3
        assert list(a) == [1, 2, 3]
        assert a[2] == 3
        assert Vector() == ZERO
        with pytest.raises(ValueError):
            Vector(1, True, 0)
        with pytest.raises(ValueError):
            Vector('1', 0, 0)

    def test_immutable(self):
        a = Vector(1, 2, 3)
        with pytest.raises(AttributeError):
            a.dx = 5
        b = a + Vector(1, 1, 1)
        assert a == Vector(1, 2, 3)
        assert b == Vector(2, 3, 4)

    def test_arithmetic(self):
        a = Vector(1, 2, 3)
        b = Vector(-1, 0, 4)
        assert a.add(b) == Vector(0, 2, 7)
        assert a - b == Vector(2, 2, -1)
        assert a * 2 == Vector(2, 4, 6)
        assert 2 * a == a.multiply(2)
        assert (a / 2).equals(Vector(0.5, 1, 1.5), EPS)
        assert -a == a.reverse()
        with pytest.raises(ZeroDivisionError):
            a.divide(0)

    def test_products(self):
        assert I.dot(J) == 0
        assert I.cross(J) == K
        assert J.cross(I) == K.reverse()
        assert Vector(1, 2, 3).dot(Vector(4, 5, 6)) == 32
        assert Vector(3, 4, 0).magnitude_squared() == 25
        assert math.isclose(Vector(3, 4, 0).magnitude(), 5.0)

    def test_unit_vector(self):
        u = Vector(0, 3, 4).unit_vector()
        assert u.equals(Vector(0, 0.6, 0.8), EPS)
        assert math.isclose(u.magnitude(), 1.0)
        with pytest.raises(DegenerateGeometryError):
            ZERO.unit_vector()

    def test_zero(self):
        assert ZERO.is_zero()
        assert Vector(1e-12, -1e-12, 0).is_zero(EPS)
        assert not Vector(1e-12, 0, 0).is_zero()
        assert not Vector(1e-3, 0, 0).is_zero(EPS)

    def test_scalar_multiple(self):
        a = Vector(1, 2, 3)
        assert a.is_scalar_multiple(a * -2.5, EPS)
        assert not a.is_scalar_multiple(Vector(1, 2, 4), EPS)
        assert ZERO.is_scalar_multiple(a, EPS)
        assert not a.is_scalar_multiple(ZERO, EPS)
        assert Vector(0, 0, 2).is_scalar_multiple(K, EPS)

    def test_orthogonal_reverse(self):
        assert I.is_orthogonal(K, EPS)
        assert not I.is_orthogonal(Vector(1, 1, 0), EPS)
        assert I.is_reverse(Vector(-3, 0, 0), EPS)
        assert not I.is_reverse(Vector(3, 0, 0), EPS)

    def test_angle(self):
        assert math.isclose(I.angle(J), math.pi/2)
        assert math.isclose(I.angle(Vector(1, 1, 0)), math.pi/4)
        assert math.isclose(I.angle(I.reverse()), math.pi)
        with pytest.raises(DegenerateGeometryError):
            I.angle(ZERO)

    def test_direction(self):
        assert ZERO.direction() == -1
        assert Vector(1, 1, 1).direction() == 0
        assert Vector(-1, 1, 1).direction() == 1
        assert Vector(1, -1, -1).direction() == 6
        assert Vector(-1, -1, -1).direction() == 7

    def test_between(self):
        assert Vector.between(Point(1, 1, 1), Point(2, 3, 4)) == Vector(1, 2, 3)


class TestRotation:
    """Rodrigues rotation about a unit axis"""

    def test_quarter_turn(self):
        assert I.rotate(K, math.pi/2).equals(J, EPS)
        assert J.rotate(K, math.pi/2).equals(I.reverse(), EPS)
        assert I.rotate(J, math.pi/2).equals(K.reverse(), EPS)

    def test_zero_angle_copy(self):
        a = Vector(1, 2, 3)
        b = a.rotate(K, 0)
        assert b == a
        assert b is not a
        assert a.rotate(K, 2*math.pi).equals(a, EPS)

    def test_normalised_angle(self):
        a = Vector(1, 2, 3)
        assert a.rotate(K, 5*math.pi/2).equals(a.rotate(K, math.pi/2), EPS)
        assert a.rotate(K, -math.pi/2).equals(a.rotate(K, 3*math.pi/2), EPS)

    def test_axis_is_fixed_point(self):
        v = Vector(1, 1, 0).unit_vector()
        axis = Vector(1, 1, 0) / math.sqrt(2)
        assert v.rotate(axis, math.pi).equals(v, EPS)

    def test_preserves_length(self):
        a = Vector(1, -2, 5)
        axis = Vector(1, 1, 1).unit_vector()
        b = a.rotate(axis, 1.234)
        assert math.isclose(a.magnitude(), b.magnitude())
        assert b.rotate(axis, -1.234).equals(a, EPS)


class TestScalars:
    """exact and arbitrary precision coordinates"""

    def test_fraction(self):
        a = Vector(Fraction(1, 3), 0, 0)
        b = a * 3
        assert b == I
        assert a.dot(a) == Fraction(1, 9)

    def test_mpmath(self):
        with mpm.workdps(40):
            a = Vector(mpm.mpf(2), 0, 0)
            m = a.magnitude()
            assert isinstance(m, mpm.mpf)
            assert m == 2
            u = Vector(mpm.mpf(1), mpm.mpf(1), 0).unit_vector()
            assert abs(u.magnitude() - 1) < mpm.mpf('1e-35')
