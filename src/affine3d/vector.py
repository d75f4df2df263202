## immutable three-component vectors for affine3d

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

"""three-component vector algebra for **affine3d**

``Vector`` is an immutable value type: every operation returns a new
vector.  Components may be any scalar supporting ``+ - * /`` and
comparison (``float``, ``mpmath.mpf``, ``fractions.Fraction``).

Tests that decide topology (is this the zero vector, are these two
vectors parallel) take an explicit ``epsilon`` that bounds the
relevant residual; plain ``==`` is exact.
"""

import logging

from affine3d import scalar
from affine3d.errors import DegenerateGeometryError
from affine3d.scalar import isgoodnum

logger = logging.getLogger(__name__)


class Vector:
    """a free vector ``(dx, dy, dz)``"""

    __slots__ = ('dx', 'dy', 'dz')

    def __init__(self, dx=0, dy=0, dz=0):
        for c in (dx, dy, dz):
            if not isgoodnum(c):
                raise ValueError('bad vector component: {}'.format(c))
        object.__setattr__(self, 'dx', dx)
        object.__setattr__(self, 'dy', dy)
        object.__setattr__(self, 'dz', dz)

    def __setattr__(self, name, value):
        raise AttributeError('Vector is immutable')

    @classmethod
    def between(cls, p, q):
        """the vector from point ``p`` to point ``q``"""
        return q.vector - p.vector

    ## container protocol

    def __iter__(self):
        yield self.dx
        yield self.dy
        yield self.dz

    def __getitem__(self, i):
        return (self.dx, self.dy, self.dz)[i]

    def __len__(self):
        return 3

    def __repr__(self):
        return 'Vector({}, {}, {})'.format(self.dx, self.dy, self.dz)

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return self.dx == other.dx and self.dy == other.dy and self.dz == other.dz

    def __hash__(self):
        return hash((self.dx, self.dy, self.dz))

    ## arithmetic

    def add(self, v):
        return Vector(self.dx + v.dx, self.dy + v.dy, self.dz + v.dz)

    def subtract(self, v):
        return Vector(self.dx - v.dx, self.dy - v.dy, self.dz - v.dz)

    def multiply(self, s):
        return Vector(self.dx * s, self.dy * s, self.dz * s)

    def divide(self, s):
        if s == 0:
            raise ZeroDivisionError('vector divided by zero')
        return Vector(self.dx / s, self.dy / s, self.dz / s)

    def reverse(self):
        return Vector(-self.dx, -self.dy, -self.dz)

    def __add__(self, v):
        if not isinstance(v, Vector):
            return NotImplemented
        return self.add(v)

    def __sub__(self, v):
        if not isinstance(v, Vector):
            return NotImplemented
        return self.subtract(v)

    def __mul__(self, s):
        if not isgoodnum(s):
            return NotImplemented
        return self.multiply(s)

    __rmul__ = __mul__

    def __truediv__(self, s):
        if not isgoodnum(s):
            return NotImplemented
        return self.divide(s)

    def __neg__(self):
        return self.reverse()

    ## products and norms

    def dot(self, v):
        return self.dx*v.dx + self.dy*v.dy + self.dz*v.dz

    def cross(self, v):
        return Vector(self.dy*v.dz - self.dz*v.dy,
                      self.dz*v.dx - self.dx*v.dz,
                      self.dx*v.dy - self.dy*v.dx)

    def magnitude_squared(self):
        return self.dot(self)

    def magnitude(self):
        return scalar.sqrt(self.magnitude_squared())

    def unit_vector(self):
        """return the vector scaled to unit length.  The zero vector
        has no direction and raises ``DegenerateGeometryError``"""
        m = self.magnitude()
        if m == 0:
            logger.debug('unit_vector called on %r', self)
            raise DegenerateGeometryError('unit vector of the zero vector',
                                          {'vector': self})
        return self.divide(m)

    ## predicates

    def is_zero(self, epsilon=0):
        """true if every component is within ``epsilon`` of zero"""
        return (scalar.iszero(self.dx, epsilon) and scalar.iszero(self.dy, epsilon)
                and scalar.iszero(self.dz, epsilon))

    def equals(self, v, epsilon):
        return (scalar.close(self.dx, v.dx, epsilon)
                and scalar.close(self.dy, v.dy, epsilon)
                and scalar.close(self.dz, v.dz, epsilon))

    def is_scalar_multiple(self, v, epsilon):
        """true if ``self == k * v`` for some scalar ``k``.

        The residual is the magnitude of the cross product.  The zero
        vector is a multiple of every vector, but a nonzero vector is
        not a multiple of the zero vector.
        """
        if self.is_zero(epsilon):
            return True
        if v.is_zero(epsilon):
            return False
        return self.cross(v).magnitude_squared() <= epsilon*epsilon

    def is_orthogonal(self, v, epsilon):
        return abs(self.dot(v)) <= epsilon

    def is_reverse(self, v, epsilon):
        """true if ``v`` points the opposite way along the same axis"""
        return self.is_scalar_multiple(v, epsilon) and self.dot(v) < 0

    def angle(self, v):
        """unsigned angle in radians between two nonzero vectors"""
        m = self.magnitude() * v.magnitude()
        if m == 0:
            raise DegenerateGeometryError('angle with the zero vector',
                                          {'a': self, 'b': v})
        return scalar.acos(self.dot(v) / m)

    def direction(self):
        """octant code: bit 0 set for negative x, bit 1 for negative y,
        bit 2 for negative z.  The zero vector returns -1"""
        if self.is_zero():
            return -1
        code = 0
        if self.dx < 0:
            code |= 1
        if self.dy < 0:
            code |= 2
        if self.dz < 0:
            code |= 4
        return code

    ## transformation

    def rotate(self, axis, theta):
        """rotate by ``theta`` radians about the unit vector ``axis``
        using Rodrigues' formula

        ``v' = v cos t + (a x v) sin t + a (a . v)(1 - cos t)``
        """
        theta = scalar.normalize_angle(theta)
        if theta == 0:
            return Vector(self.dx, self.dy, self.dz)
        c = scalar.cos(theta)
        s = scalar.sin(theta)
        return (self.multiply(c)
                + axis.cross(self).multiply(s)
                + axis.multiply(axis.dot(self) * (1 - c)))


ZERO = Vector(0, 0, 0)
I = Vector(1, 0, 0)
J = Vector(0, 1, 0)
K = Vector(0, 0, 1)
