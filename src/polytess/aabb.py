"""Axis-aligned bounding boxes."""

from __future__ import annotations

from typing import Iterable

from polytess.vector import Vector


class AABB:
    """Box spanned by ``min`` and ``max`` corners.

    Nothing keeps ``min <= max``: ``intersection()`` of two disjoint
    boxes returns an inverted box, and callers check ``size()`` (or
    ``is_empty()``) before trusting it.
    """

    __slots__ = ('min', 'max')

    def __init__(self, min: Vector, max: Vector):
        self.min = Vector.from_sequence(min)
        self.max = Vector.from_sequence(max)

    def __repr__(self):
        return 'AABB({!r}, {!r})'.format(self.min, self.max)

    def intersection(self, other: 'AABB') -> 'AABB':
        return AABB(self.min.max(other.min), self.max.min(other.max))

    def union(self, other: 'AABB') -> 'AABB':
        return AABB(self.min.min(other.min), self.max.max(other.max))

    def center(self) -> Vector:
        return self.min.add(self.max).scale(0.5)

    def size(self) -> Vector:
        return self.max.sub(self.min)

    def is_empty(self) -> bool:
        s = self.size()
        return s.x < 0 or s.y < 0 or s.z < 0

    def contains(self, p: Vector) -> bool:
        return (self.min.x <= p.x <= self.max.x and
                self.min.y <= p.y <= self.max.y and
                self.min.z <= p.z <= self.max.z)


def aabb_from_points(points: Iterable[Vector]) -> AABB:
    """tight bounding box of a non-empty collection of points"""
    it = iter(points)
    try:
        first = Vector.from_sequence(next(it))
    except StopIteration:
        raise ValueError('cannot bound an empty set of points') from None
    lo = hi = first
    for p in it:
        p = Vector.from_sequence(p)
        lo = lo.min(p)
        hi = hi.max(p)
    return AABB(lo, hi)


__all__ = ['AABB', 'aabb_from_points']
