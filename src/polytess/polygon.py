## planar polygons and plane splitting for polytess

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
Polygons
========

A ``Polygon`` is an ordered ring of three or more coplanar ``Vertex``
instances, an opaque ``shared`` tag that geometry operations pass
through untouched, and a cached supporting ``Plane``.  The vertex
order, together with the plane normal, decides which face is the
front.

Splitting
---------

``Polygon.split_polygon(plane, coplanar_front, coplanar_back, front,
back)`` sorts the polygon relative to ``plane`` and appends it (or the
pieces it was cut into) to the caller's lists.  Nothing is returned
and nothing is raised:

* polygons entirely in front of / behind the plane are appended as-is
  (the same object, not a copy);
* polygons lying in the plane go to ``coplanar_front`` when their own
  normal agrees with the clip normal and to ``coplanar_back``
  otherwise;
* spanning polygons are cut along the plane.  Each piece reuses the
  original ``shared`` tag and plane object.  A piece with fewer than
  three vertices is dropped without complaint.

Vertices within ``SPLIT_EPSILON`` of the plane count as lying on it.

One shortcut applies before any classification: a polygon split by its
*own* cached plane object (``plane is polygon.plane``) goes straight to
``coplanar_back``.  This is an identity test, not a geometric one; an
equal but distinct plane is classified normally.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from polytess.aabb import AABB, aabb_from_points
from polytess.config import SPLIT_EPSILON
from polytess.geometry_checks import polygon_area
from polytess.plane import Plane, plane_from_points
from polytess.vector import Vector
from polytess.vertex import Vertex

COPLANAR = 0
FRONT = 1
BACK = 2
SPANNING = 3


def _supporting_plane(a: Vector, b: Vector, c: Vector) -> Plane:
    try:
        return plane_from_points(a, b, c)
    except ZeroDivisionError:
        raise ValueError('first three vertices are collinear: {!r}, {!r}, {!r}'.format(
            a, b, c)) from None


class Polygon:
    """Planar polygon with a cached supporting plane"""

    def __init__(self, vertices: Sequence[Vertex], shared=None,
                 plane: Optional[Plane] = None):
        if len(vertices) < 3:
            raise ValueError('a polygon needs at least 3 vertices, got {}'.format(
                len(vertices)))
        self.vertices: List[Vertex] = list(vertices)
        self.shared = shared
        if plane is None:
            plane = _supporting_plane(self.vertices[0].pos,
                                      self.vertices[1].pos,
                                      self.vertices[2].pos)
        self.plane = plane

    @classmethod
    def from_points(cls, points: Iterable, shared=None) -> 'Polygon':
        """Build a polygon from bare positions.

        Each vertex gets the supporting plane's normal.
        """
        pts = [Vector.from_sequence(p) for p in points]
        if len(pts) < 3:
            raise ValueError('a polygon needs at least 3 points, got {}'.format(len(pts)))
        plane = _supporting_plane(pts[0], pts[1], pts[2])
        return cls([Vertex(p, plane.normal) for p in pts], shared, plane)

    def __repr__(self):
        return 'Polygon({!r}, shared={!r})'.format(self.positions(), self.shared)

    def __len__(self):
        return len(self.vertices)

    def __iter__(self):
        return iter(self.vertices)

    def positions(self) -> List[Vector]:
        return [v.pos for v in self.vertices]

    def clone(self) -> 'Polygon':
        return Polygon([v.clone() for v in self.vertices], self.shared, self.plane)

    def area(self) -> float:
        return polygon_area(self.positions())

    def bounding_box(self) -> AABB:
        return aabb_from_points(self.positions())

    def invert(self) -> 'Polygon':
        """Reverse the winding in place and return ``self``.

        The vertex list is replaced by flipped clones, so vertices shared
        with other polygons are left alone.
        """
        flipped = []
        for v in reversed(self.vertices):
            v = v.clone()
            v.flip()
            flipped.append(v)
        self.vertices = flipped
        self.plane = self.plane.flip()
        return self

    def is_own_plane(self, plane: Plane) -> bool:
        """``True`` if ``plane`` is this polygon's cached plane object."""
        return plane is self.plane

    def classify(self, plane: Plane) -> Tuple[int, List[int]]:
        """Return the polygon class and the per-vertex classes against ``plane``."""
        polygon_type = COPLANAR
        types = []
        for v in self.vertices:
            t = plane.normal.dot(v.pos) - plane.w
            if t < -SPLIT_EPSILON:
                vtype = BACK
            elif t > SPLIT_EPSILON:
                vtype = FRONT
            else:
                vtype = COPLANAR
            polygon_type |= vtype
            types.append(vtype)
        return polygon_type, types

    def split_polygon(self, plane: Plane, coplanar_front: list,
                      coplanar_back: list, front: list, back: list) -> None:
        """Put this polygon, or the pieces it splits into, in the right lists."""

        if self.is_own_plane(plane):
            coplanar_back.append(self)
            return

        polygon_type, types = self.classify(plane)

        if polygon_type == COPLANAR:
            if plane.normal.dot(self.plane.normal) > 0:
                coplanar_front.append(self)
            else:
                coplanar_back.append(self)
        elif polygon_type == FRONT:
            front.append(self)
        elif polygon_type == BACK:
            back.append(self)
        else:
            f = []
            b = []
            count = len(self.vertices)
            for i in range(count):
                j = (i + 1) % count
                ti = types[i]
                tj = types[j]
                vi = self.vertices[i]
                vj = self.vertices[j]
                if ti != BACK:
                    f.append(vi)
                if ti != FRONT:
                    b.append(vi)
                if (ti | tj) == SPANNING:
                    t = (plane.w - plane.normal.dot(vi.pos)) / plane.normal.dot(
                        vj.pos.sub(vi.pos))
                    v = vi.interpolate(vj, t)
                    f.append(v)
                    b.append(v)
            if len(f) >= 3:
                front.append(Polygon(f, self.shared, self.plane))
            if len(b) >= 3:
                back.append(Polygon(b, self.shared, self.plane))


def clip_to_planes(polygons: Iterable[Polygon],
                   planes: Sequence[Plane]) -> Tuple[List[Polygon], List[Polygon]]:
    """Partition ``polygons`` against the convex region bounded by ``planes``.

    Returns ``(inside, outside)``.  A polygon (or piece) is inside when it
    is in front of, or coplanar and facing the same way as, every plane.
    Anything that lands behind any plane, or coplanar and facing away, is
    outside.
    """
    inside = list(polygons)
    outside: List[Polygon] = []
    for plane in planes:
        next_inside: List[Polygon] = []
        for poly in inside:
            coplanar_front: List[Polygon] = []
            coplanar_back: List[Polygon] = []
            front: List[Polygon] = []
            back: List[Polygon] = []
            poly.split_polygon(plane, coplanar_front, coplanar_back, front, back)
            next_inside.extend(front)
            next_inside.extend(coplanar_front)
            outside.extend(back)
            outside.extend(coplanar_back)
        inside = next_inside
        if not inside:
            break
    return inside, outside


__all__ = [
    'COPLANAR',
    'FRONT',
    'BACK',
    'SPANNING',
    'Polygon',
    'clip_to_planes',
]
