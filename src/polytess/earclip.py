## ear-clipping triangulation of planar polygons for polytess

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
Ear-clipping triangulation
==========================

``earclip(vertices)`` turns one simple, planar polygon (convex or not,
at any orientation in 3D) into a flat triangle list: three consecutive
entries per triangle, each entry one of the input vertex objects.

The method follows Eberly's "Triangulation by Ear Clipping":

(1) The polygon normal is estimated from the first two edges and the
    coordinate axis with the largest normal component is dropped.  The
    remaining two axes are taken in cyclic order, so the 2D frame is
    right-handed about the dropped axis.

(2) If the projected ring runs clockwise it is reversed and the
    working set remembers that with a ``reverse`` flag.  The ring is
    counter-clockwise from here on.

(3) The ring is a cyclic doubly linked list kept in a flat arena of
    ``prev``/``next`` index lists.  Ears live in a second, non-cyclic
    doubly linked list over the same arena; ``is_ear`` marks which
    nodes are on it.

(4) A node is an ear when it is strictly convex and no other reflex
    node of the current ring lies in the triangle formed with its two
    neighbours, boundary included.  Collinear nodes count as reflex, so
    no zero-area ear is ever cut.

(5) Each step cuts the ear at the head of the ear list, unlinks it, and
    re-tests only its two neighbours.  Cutting a convex node cannot
    change the status of any other node.

Winding
-------

Triangles are emitted ``(prev, tip, next)`` when the ring was reversed
and ``(next, tip, prev)`` otherwise.  Either way the output winds
*opposite* to the input polygon: a polygon that is counter-clockwise
seen from its front yields triangles that are counter-clockwise when
looking along its normal.  Renderers cull accordingly.

Failure
-------

``DegeneratePolygon`` is raised when the first three points are
collinear, when the projected ring has no area, when the ear list runs
dry with more than three nodes left, or when the last three nodes do
not form a convex triangle (the ring crossed itself).  Each step
removes one node, so the loop always terminates.  Cost is O(n^2).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from polytess.config import AREA_EPSILON, trace_enabled
from polytess.errors import DegeneratePolygon
from polytess.vector import Vector

logger = logging.getLogger(__name__)

# drop axis -> the two kept axes, in cyclic order
_KEPT_AXES = {0: (1, 2), 1: (2, 0), 2: (0, 1)}


def _position(v) -> Vector:
    pos = getattr(v, 'pos', None)
    if pos is None:
        return Vector.from_sequence(v)
    return pos


def _orient(ax, ay, bx, by, cx, cy) -> float:
    """twice the signed area of triangle abc; positive when counter-clockwise"""
    return (bx - ax) * (cy - ay) - (by - ay) * (cx - ax)


def _signed_area(us: Sequence[float], vs: Sequence[float]) -> float:
    total = 0.0
    count = len(us)
    for i in range(count):
        j = (i + 1) % count
        total += us[i] * vs[j] - us[j] * vs[i]
    return total / 2.0


def project(positions: Sequence[Vector]) -> Tuple[int, List[float], List[float]]:
    """Project a planar loop onto its best-fitting coordinate plane.

    Returns ``(dropped_axis, us, vs)``.  Raises ``DegeneratePolygon`` if the
    first three positions are collinear.
    """
    p0, p1, p2 = positions[0], positions[1], positions[2]
    e0 = p1.sub(p0)
    e1 = p2.sub(p1)
    normal = e0.cross(e1)
    dropped = max(range(3), key=lambda k: abs(normal[k]))
    # relative to the edge lengths, so the test does not depend on scale
    if abs(normal[dropped]) <= AREA_EPSILON * e0.length() * e1.length():
        raise DegeneratePolygon('first three vertices are collinear', len(positions))
    i, j = _KEPT_AXES[dropped]
    us = [p[i] for p in positions]
    vs = [p[j] for p in positions]
    return dropped, us, vs


class _Ring:
    """Working set for one triangulation: the vertex ring and the ear list."""

    def __init__(self, us: Sequence[float], vs: Sequence[float], reverse: bool):
        count = len(us)
        # node k of the ring is input vertex order[k]
        if reverse:
            self.order = list(range(count - 1, -1, -1))
        else:
            self.order = list(range(count))
        self.u = [us[k] for k in self.order]
        self.v = [vs[k] for k in self.order]
        self.reverse = reverse
        self.prev = [(k - 1) % count for k in range(count)]
        self.next = [(k + 1) % count for k in range(count)]
        self.head = 0
        self.count = count
        self.is_ear = [False] * count
        self.ear_prev: List[Optional[int]] = [None] * count
        self.ear_next: List[Optional[int]] = [None] * count
        self.ear_head: Optional[int] = None

    def nodes(self):
        k = self.head
        for _ in range(self.count):
            yield k
            k = self.next[k]

    def orient(self, a: int, b: int, c: int) -> float:
        u = self.u
        v = self.v
        return _orient(u[a], v[a], u[b], v[b], u[c], v[c])

    def is_convex(self, k: int) -> bool:
        return self.orient(self.prev[k], k, self.next[k]) > 0.0

    def in_triangle(self, p: int, a: int, b: int, c: int) -> bool:
        # a, b, c are counter-clockwise; points on an edge count as inside
        return (self.orient(a, b, p) >= 0.0 and
                self.orient(b, c, p) >= 0.0 and
                self.orient(c, a, p) >= 0.0)

    def test_ear(self, k: int) -> bool:
        if not self.is_convex(k):
            return False
        a = self.prev[k]
        c = self.next[k]
        for j in self.nodes():
            if j == a or j == k or j == c:
                continue
            if not self.is_convex(j) and self.in_triangle(j, a, k, c):
                return False
        return True

    def push_ear(self, k: int) -> None:
        self.ear_prev[k] = None
        self.ear_next[k] = self.ear_head
        if self.ear_head is not None:
            self.ear_prev[self.ear_head] = k
        self.ear_head = k
        self.is_ear[k] = True

    def drop_ear(self, k: int) -> None:
        before = self.ear_prev[k]
        after = self.ear_next[k]
        if before is None:
            self.ear_head = after
        else:
            self.ear_next[before] = after
        if after is not None:
            self.ear_prev[after] = before
        self.ear_prev[k] = None
        self.ear_next[k] = None
        self.is_ear[k] = False

    def update_ear(self, k: int) -> None:
        ear = self.test_ear(k)
        if ear and not self.is_ear[k]:
            self.push_ear(k)
        elif not ear and self.is_ear[k]:
            self.drop_ear(k)

    def unlink(self, k: int) -> None:
        a = self.prev[k]
        c = self.next[k]
        self.next[a] = c
        self.prev[c] = a
        if self.head == k:
            self.head = a
        self.count -= 1
        if self.is_ear[k]:
            self.drop_ear(k)


def earclip(vertices: Sequence) -> list:
    """Triangulate a simple planar polygon by ear clipping.

    ``vertices`` is the polygon's ordered vertex list (``Vertex`` objects,
    or anything with a ``pos``; bare 3-sequences are accepted too).
    Returns a flat list of the same objects, three per triangle, ``n - 2``
    triangles for ``n`` vertices.  Raises ``DegeneratePolygon`` when the
    polygon cannot be triangulated.
    """
    count = len(vertices)
    if count < 3:
        raise DegeneratePolygon('need at least three vertices', count)

    positions = [_position(v) for v in vertices]
    _, us, vs = project(positions)
    area = _signed_area(us, vs)
    extent = max(max(us) - min(us), max(vs) - min(vs))
    if abs(area) <= AREA_EPSILON * extent * extent:
        raise DegeneratePolygon('polygon has no signed area', count)

    ring = _Ring(us, vs, reverse=area < 0.0)
    trace = trace_enabled()

    for k in ring.nodes():
        if ring.test_ear(k):
            ring.push_ear(k)

    triangles = []

    def emit(a: int, tip: int, c: int) -> None:
        order = ring.order
        if ring.reverse:
            triangles.extend((vertices[order[a]], vertices[order[tip]], vertices[order[c]]))
        else:
            triangles.extend((vertices[order[c]], vertices[order[tip]], vertices[order[a]]))

    while ring.count > 3:
        tip = ring.ear_head
        if tip is None:
            raise DegeneratePolygon('ran out of ears with {} vertices left'.format(
                ring.count), count)
        a = ring.prev[tip]
        c = ring.next[tip]
        emit(a, tip, c)
        ring.unlink(tip)
        ring.update_ear(a)
        ring.update_ear(c)
        if trace:
            logger.debug('clipped ear at input vertex %d, %d vertices left',
                         ring.order[tip], ring.count)

    tip = ring.head
    if not ring.is_convex(tip):
        raise DegeneratePolygon('remaining triangle is inverted, polygon is not simple',
                                count)
    emit(ring.prev[tip], tip, ring.next[tip])
    return triangles


def triangulate(polygon) -> list:
    """Triangulate a ``Polygon`` (or a plain vertex list)."""
    return earclip(getattr(polygon, 'vertices', polygon))


def triangulate_polygons(polygons) -> Tuple[list, list]:
    """Triangulate a batch, skipping polygons that cannot be triangulated.

    Returns ``(triangles, skipped)``: one flat triangle list for the whole
    batch, and the polygons that raised ``DegeneratePolygon``.  Each skip
    is logged at WARNING level.
    """
    triangles = []
    skipped = []
    for index, polygon in enumerate(polygons):
        try:
            triangles.extend(triangulate(polygon))
        except DegeneratePolygon as exc:
            logger.warning('skipping polygon %d: %s', index, exc)
            skipped.append(polygon)
    return triangles, skipped


def triangle_count(vertices: Sequence) -> int:
    if len(vertices) % 3 != 0:
        raise ValueError('triangle list length {} is not a multiple of 3'.format(
            len(vertices)))
    return len(vertices) // 3


__all__ = [
    'earclip',
    'project',
    'triangulate',
    'triangulate_polygons',
    'triangle_count',
]
