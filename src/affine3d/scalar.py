## scalar helpers shared by every affine3d primitive

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

"""scalar helpers for **affine3d**

Every algorithm in affine3d is written against plain arithmetic
operators, so the same code runs on ``float``, ``mpmath.mpf`` or
``fractions.Fraction`` coordinates.  The only operations that cannot
be expressed that way are square roots and trigonometry; the functions
here dispatch those to ``mpmath`` when handed an ``mpf`` and to
``math`` otherwise.

Tolerant comparisons never use a hidden global: the caller passes an
``epsilon`` that is applied as an absolute bound on the residual.
"""

import math
from fractions import Fraction

import mpmath as mpm

pi = math.pi
pi2 = 2.0*pi


def isgoodnum(n):
    """ determine if an argument is actually a scalar number, and not boolean
    """
    return (not isinstance(n, bool)) and \
        isinstance(n, (int, float, Fraction, mpm.mpf))


def _is_mp(x):
    return isinstance(x, mpm.mpf)


def sqrt(x):
    """square root, computed in mpmath for ``mpf`` arguments"""
    if _is_mp(x):
        return mpm.sqrt(x)
    return math.sqrt(x)


def sin(x):
    if _is_mp(x):
        return mpm.sin(x)
    return math.sin(x)


def cos(x):
    if _is_mp(x):
        return mpm.cos(x)
    return math.cos(x)


def acos(x):
    ## clamp, rounding can push a cosine just outside [-1, 1]
    if x > 1:
        x = 1
    elif x < -1:
        x = -1
    if _is_mp(x):
        return mpm.acos(x)
    return math.acos(x)


def close(a, b, epsilon):
    """ are two scalars the same within ``epsilon``
    """
    return abs(a-b) <= epsilon


def iszero(a, epsilon):
    return abs(a) <= epsilon


def sign(a, epsilon):
    """return -1, 0 or 1; values within ``epsilon`` of zero are 0"""
    if a > epsilon:
        return 1
    if a < -epsilon:
        return -1
    return 0


def normalize_angle(theta):
    """map ``theta`` (radians) into ``[0, 2pi)``"""
    if _is_mp(theta):
        return theta % (2*mpm.pi)
    return theta % pi2
