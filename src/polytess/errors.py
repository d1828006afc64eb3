"""Exceptions raised by polytess."""

from typing import Optional


class PolytessError(Exception):
    """Base class for polytess failures."""


class DegeneratePolygon(PolytessError, ValueError):
    """A polygon could not be triangulated.

    Raised when the leading vertices are collinear (no winding can be
    established), when the ring has no signed area, or when ear clipping
    runs out of ears before the ring is reduced to a triangle.  Batch
    callers are expected to catch this per polygon and carry on.
    """

    def __init__(self, reason: str, vertex_count: Optional[int] = None):
        self.reason = reason
        self.vertex_count = vertex_count
        if vertex_count is None:
            super().__init__(reason)
        else:
            super().__init__(f'{reason} ({vertex_count} vertices)')


__all__ = ['PolytessError', 'DegeneratePolygon']
