"""Polygon vertices with interpolable attributes."""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from polytess.vector import Vector

Attribute = Union[float, Vector]


def _lerp_attribute(a: Attribute, b: Attribute, t: float) -> Attribute:
    if isinstance(a, Vector):
        if not isinstance(b, Vector):
            raise ValueError('cannot interpolate vector attribute with {!r}'.format(b))
        return a.lerp(b, t)
    if isinstance(b, Vector):
        raise ValueError('cannot interpolate scalar attribute with {!r}'.format(b))
    return a + (b - a) * t


class Vertex:
    """A polygon corner: position, normal, and optional extra attributes.

    ``attributes`` is a tuple of floats or ``Vector`` instances (texture
    coordinates, colours, ...).  Every attribute is blended by
    ``interpolate()``, so new vertices created along a split edge carry
    smoothly varying normals and attributes for lighting downstream.

    ``flip()`` is the only mutating operation.  Polygons clone their
    vertices before flipping them, so a vertex handed to one polygon is
    never changed behind the back of another.
    """

    __slots__ = ('pos', 'normal', 'attributes')

    def __init__(self, pos, normal=None, attributes: Sequence[Attribute] = ()):
        self.pos = Vector.from_sequence(pos)
        self.normal = Vector() if normal is None else Vector.from_sequence(normal)
        self.attributes: Tuple[Attribute, ...] = tuple(attributes)

    def __repr__(self):
        if self.attributes:
            return 'Vertex({!r}, {!r}, {!r})'.format(self.pos, self.normal,
                                                     self.attributes)
        return 'Vertex({!r}, {!r})'.format(self.pos, self.normal)

    def clone(self) -> 'Vertex':
        return Vertex(self.pos, self.normal, self.attributes)

    def flip(self) -> None:
        """Invert orientation-specific data (the normal) in place."""
        self.normal = self.normal.negated()

    def interpolate(self, other: 'Vertex', t: float) -> 'Vertex':
        """Return a new vertex ``t`` of the way from ``self`` to ``other``."""
        if len(self.attributes) != len(other.attributes):
            raise ValueError('vertices carry {} and {} attributes'.format(
                len(self.attributes), len(other.attributes)))
        attrs = tuple(_lerp_attribute(a, b, t)
                      for a, b in zip(self.attributes, other.attributes))
        return Vertex(self.pos.lerp(other.pos, t),
                      self.normal.lerp(other.normal, t),
                      attrs)


__all__ = ['Vertex', 'Attribute']
