## oriented half-space planes for polytess

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

"""Oriented planes, represented as a unit normal and an offset ``w``.

A plane stands for the closed half-space ``{p : normal . p >= w}``.
"""

from __future__ import annotations

from polytess.vector import Vector


class Plane:
    """half-space ``normal . p >= w``; ``normal`` must be unit length"""

    __slots__ = ('normal', 'w')

    def __init__(self, normal: Vector, w: float):
        self.normal = Vector.from_sequence(normal)
        self.w = float(w)

    def __repr__(self):
        return 'Plane({!r}, {})'.format(self.normal, self.w)

    def flip(self) -> 'Plane':
        """Return the complementary half-space (not a mirror image)."""
        return Plane(self.normal.negated(), -self.w)

    def signed_distance(self, p: Vector) -> float:
        return self.normal.dot(p) - self.w

    def test(self, p: Vector) -> bool:
        """``True`` if ``p`` lies inside the half-space, boundary included."""
        return self.normal.dot(p) >= self.w


def plane_from_points(a: Vector, b: Vector, c: Vector) -> Plane:
    """Plane through three points, normal following ``a -> b -> c``.

    Collinear points have no normal; ``normalize()`` raises
    ``ZeroDivisionError`` in that case.
    """
    n = b.sub(a).cross(c.sub(a)).normalize()
    return Plane(n, n.dot(a))


__all__ = ['Plane', 'plane_from_points']
