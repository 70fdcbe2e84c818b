## immutable three-dimensional vectors for svgplot
## Copyright (c) svgplot contributors
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

"""Immutable 3D vector value type.

A :class:`Vector3` is a frozen ``(x, y, z)`` triple of floats.  Every
operation returns a new instance, so vectors can be shared freely
between cameras, wireframes and callers.  Vectors also behave like a
read-only 3-sequence, which lets them be unpacked (``x, y, z = v``) or
handed to code that expects plain tuples.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import isfinite, sqrt
from typing import Iterator, Sequence, Union

from svgplot.errors import DegenerateVectorError

## constants
epsilon = 0.000005


## utility function to determine if argument is a "real" python
## number, since booleans are considered ints
def isgoodnum(n) -> bool:
    """determine if an argument is actually a finite scalar number, and
    not boolean
    """
    return (not isinstance(n, bool)) and isinstance(n, (int, float)) and isfinite(n)


def close(a: float, b: float, tol: float = epsilon) -> bool:
    """are two scalars the same within ``tol``"""
    return abs(a - b) < tol


@dataclass(frozen=True)
class Vector3:
    """Immutable three-dimensional vector."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ('x', 'y', 'z'):
            val = getattr(self, name)
            if not isgoodnum(val):
                raise ValueError('bad vector component {}: {}'.format(name, val))
            object.__setattr__(self, name, float(val))

    ## sequence protocol
    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __len__(self) -> int:
        return 3

    def __getitem__(self, i: int) -> float:
        return (self.x, self.y, self.z)[i]

    def __repr__(self) -> str:
        return 'Vector3({:g}, {:g}, {:g})'.format(self.x, self.y, self.z)

    ## R^3 -> R^3 operations
    def add(self, other: Vector3) -> Vector3:
        """``self + other``"""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def subtract(self, other: Vector3) -> Vector3:
        """``self - other``"""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def scale(self, c: float) -> Vector3:
        """vector times scalar ``c``"""
        return Vector3(self.x * c, self.y * c, self.z * c)

    def cross(self, other: Vector3) -> Vector3:
        """right-handed cross product ``self x other``"""
        return Vector3(self.y * other.z - self.z * other.y,
                       self.z * other.x - self.x * other.z,
                       self.x * other.y - self.y * other.x)

    def unit(self) -> Vector3:
        """Return the vector scaled to magnitude one.

        Raises :class:`~svgplot.errors.DegenerateVectorError` when the
        magnitude is below ``epsilon``.
        """
        m = self.magnitude
        if m < epsilon:
            raise DegenerateVectorError('cannot normalize zero-length vector {}'.format(self))
        return self.scale(1.0 / m)

    ## R^3 -> R operations
    def dot(self, other: Vector3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    @property
    def magnitude(self) -> float:
        return sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def is_close(self, other: Vector3, tol: float = epsilon) -> bool:
        """are two vectors the same to within ``tol``"""
        return self.subtract(other).magnitude < tol

    ## operator forms
    def __add__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Vector3) -> Vector3:
        if not isinstance(other, Vector3):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, c: float) -> Vector3:
        if not isgoodnum(c):
            return NotImplemented
        return self.scale(c)

    __rmul__ = __mul__

    def __neg__(self) -> Vector3:
        return self.scale(-1.0)


VectorLike = Union[Vector3, Sequence[float]]


def vec3(v: VectorLike) -> Vector3:
    """Convenience function for making a :class:`Vector3` from a vector or
    any 3-sequence of numbers.
    """
    if isinstance(v, Vector3):
        return v
    if isinstance(v, (tuple, list)) and len(v) == 3:
        return Vector3(v[0], v[1], v[2])
    raise ValueError('bad thing passed to vec3(): {}'.format(v))


ORIGIN = Vector3(0.0, 0.0, 0.0)


__all__ = [
    'epsilon',
    'isgoodnum',
    'close',
    'Vector3',
    'VectorLike',
    'vec3',
    'ORIGIN',
]
