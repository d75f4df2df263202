## numeric configuration for affine3d

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

"""numeric configuration for **affine3d**

The kernel has no global tolerance: every predicate and intersection
query takes ``epsilon`` explicitly.  ``Environment`` bundles a
tolerance with a numeric backend so that callers can keep one value
around instead of threading two::

    env = Environment.from_environ()
    with env.precision():
        a = env.point(0, 0, 0)
        b = env.point(1, 1, 1)
        print(a.distance(b))

``dps`` selects mpmath arbitrary precision (decimal places); ``None``
means native floats.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Mapping, Optional

import mpmath as mpm

logger = logging.getLogger(__name__)

## recommended tolerance for double precision work at unit scale
DEFAULT_EPSILON = 1e-9

EPSILON_VAR = 'AFFINE3D_EPSILON'
DPS_VAR = 'AFFINE3D_DPS'
LOG_LEVEL_VAR = 'AFFINE3D_LOG_LEVEL'


@dataclass(frozen=True)
class Environment:
    """tolerance and scalar backend used for a batch of computations"""

    epsilon: float = DEFAULT_EPSILON
    dps: Optional[int] = None
    log_level: str = 'WARNING'

    def __post_init__(self):
        if self.epsilon < 0:
            raise ValueError('epsilon must be non-negative, got {}'.format(self.epsilon))
        if self.dps is not None and self.dps <= 0:
            raise ValueError('dps must be a positive integer, got {}'.format(self.dps))
        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError('unknown log level {!r}'.format(self.log_level))

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "Environment":
        """build an ``Environment`` from ``AFFINE3D_EPSILON``,
        ``AFFINE3D_DPS`` and ``AFFINE3D_LOG_LEVEL``; unset variables keep
        the defaults"""
        if environ is None:
            environ = os.environ
        kwargs = {}
        raw = environ.get(EPSILON_VAR)
        if raw:
            try:
                kwargs['epsilon'] = float(raw)
            except ValueError:
                raise ValueError('bad value for {}: {!r}'.format(EPSILON_VAR, raw))
        raw = environ.get(DPS_VAR)
        if raw:
            try:
                kwargs['dps'] = int(raw)
            except ValueError:
                raise ValueError('bad value for {}: {!r}'.format(DPS_VAR, raw))
        raw = environ.get(LOG_LEVEL_VAR)
        if raw:
            kwargs['log_level'] = raw.strip().upper()
        env = cls(**kwargs)
        logger.debug('environment from process settings: %s', env)
        return env

    @property
    def multiprecision(self) -> bool:
        return self.dps is not None

    def scalar(self, x):
        """convert ``x`` to the configured scalar type"""
        if self.multiprecision:
            return mpm.mpf(x)
        return float(x)

    def tolerance(self):
        """``epsilon`` in the configured scalar type"""
        return self.scalar(self.epsilon)

    def vector(self, dx=0, dy=0, dz=0):
        from affine3d.vector import Vector
        return Vector(self.scalar(dx), self.scalar(dy), self.scalar(dz))

    def point(self, x=0, y=0, z=0):
        from affine3d.point import Point
        return Point(self.scalar(x), self.scalar(y), self.scalar(z))

    @contextmanager
    def precision(self):
        """context in which mpmath works at ``dps`` decimal places;
        a no-op for the float backend"""
        if not self.multiprecision:
            yield self
            return
        with mpm.workdps(self.dps):
            yield self
