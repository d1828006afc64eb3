## immutable three-component vectors for polytess

## Copyright (c) 2026 polytess contributors
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

"""
Vectors
=======

``Vector`` is a value type: no method mutates the receiver, every
operation hands back a fresh instance.  Components are stored as
floats, and a vector can be indexed or unpacked like a 3-tuple, so it
drops straight into code that expects ``(x, y, z)`` sequences.

``normalize()`` divides by the length.  A zero-length vector raises
``ZeroDivisionError``; it is up to the caller not to ask for the
direction of nothing.
"""

from __future__ import annotations

import math
from typing import Iterator, Sequence


class Vector:
    """Immutable 3D vector"""

    __slots__ = ('_x', '_y', '_z')

    def __init__(self, x=0.0, y=0.0, z=0.0):
        self._x = float(x)
        self._y = float(y)
        self._z = float(z)

    @classmethod
    def from_sequence(cls, seq: Sequence[float]) -> 'Vector':
        if isinstance(seq, Vector):
            return seq
        if len(seq) < 3:
            raise ValueError('vector needs three components, got {}'.format(seq))
        return cls(seq[0], seq[1], seq[2])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def z(self) -> float:
        return self._z

    def __repr__(self):
        return 'Vector({}, {}, {})'.format(self._x, self._y, self._z)

    def __iter__(self) -> Iterator[float]:
        return iter((self._x, self._y, self._z))

    def __len__(self):
        return 3

    def __getitem__(self, i):
        return (self._x, self._y, self._z)[i]

    def __eq__(self, other):
        if not isinstance(other, Vector):
            return NotImplemented
        return (self._x == other._x and self._y == other._y
                and self._z == other._z)

    def __hash__(self):
        return hash((self._x, self._y, self._z))

    def add(self, other: 'Vector') -> 'Vector':
        return Vector(self._x + other.x, self._y + other.y, self._z + other.z)

    def sub(self, other: 'Vector') -> 'Vector':
        return Vector(self._x - other.x, self._y - other.y, self._z - other.z)

    def dot(self, other: 'Vector') -> float:
        return self._x * other.x + self._y * other.y + self._z * other.z

    def cross(self, other: 'Vector') -> 'Vector':
        return Vector(
            self._y * other.z - self._z * other.y,
            self._z * other.x - self._x * other.z,
            self._x * other.y - self._y * other.x)

    def scale(self, s: float) -> 'Vector':
        return Vector(self._x * s, self._y * s, self._z * s)

    def negated(self) -> 'Vector':
        return Vector(-self._x, -self._y, -self._z)

    def length(self) -> float:
        return math.sqrt(self.dot(self))

    def normalize(self) -> 'Vector':
        """Return the unit vector in this direction.

        Raises ``ZeroDivisionError`` for the zero vector.
        """
        ln = self.length()
        return Vector(self._x / ln, self._y / ln, self._z / ln)

    def lerp(self, other: 'Vector', t: float) -> 'Vector':
        """Linear interpolation, ``self`` at ``t=0`` and ``other`` at ``t=1``"""
        return Vector(self._x + (other.x - self._x) * t,
                      self._y + (other.y - self._y) * t,
                      self._z + (other.z - self._z) * t)

    def min(self, other: 'Vector') -> 'Vector':
        return Vector(min(self._x, other.x), min(self._y, other.y),
                      min(self._z, other.z))

    def max(self, other: 'Vector') -> 'Vector':
        return Vector(max(self._x, other.x), max(self._y, other.y),
                      max(self._z, other.z))

    def abs(self) -> 'Vector':
        return Vector(abs(self._x), abs(self._y), abs(self._z))

    def array(self) -> list:
        return [self._x, self._y, self._z]


def vec3(x, y, z) -> Vector:
    return Vector(x, y, z)


def isclose(a: Vector, b: Vector, tol: float = 1e-9) -> bool:
    """componentwise comparison within an absolute tolerance"""
    return (abs(a.x - b.x) <= tol and abs(a.y - b.y) <= tol
            and abs(a.z - b.z) <= tol)


__all__ = ['Vector', 'vec3', 'isclose']
