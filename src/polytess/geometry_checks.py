"""Validation helpers for polygons and triangle lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

from polytess.vector import Vector

# relative to the product of the two edge lengths
DEGENERATE_TOL = 1e-12


def triangle_normal(v0: Vector, v1: Vector, v2: Vector) -> Optional[Vector]:
    """Return the unit normal of a triangle or ``None`` if degenerate."""

    e1 = v1.sub(v0)
    e2 = v2.sub(v0)
    n = e1.cross(e2)
    length = n.length()
    if length <= DEGENERATE_TOL * e1.length() * e2.length():
        return None
    return n.scale(1.0 / length)


def triangle_area(v0: Vector, v1: Vector, v2: Vector) -> float:
    """Return the (unsigned) area of a triangle."""

    return 0.5 * v1.sub(v0).cross(v2.sub(v0)).length()


def newell_normal(points: Sequence[Vector]) -> Vector:
    """Area-weighted normal of a closed loop; its length is twice the area."""

    nx = ny = nz = 0.0
    count = len(points)
    for i in range(count):
        a = points[i]
        b = points[(i + 1) % count]
        nx += (a.y - b.y) * (a.z + b.z)
        ny += (a.z - b.z) * (a.x + b.x)
        nz += (a.x - b.x) * (a.y + b.y)
    return Vector(nx, ny, nz)


def polygon_area(points: Sequence[Vector]) -> float:
    """Area of a planar (possibly concave) loop embedded in 3D."""

    if len(points) < 3:
        return 0.0
    return 0.5 * newell_normal(points).length()


def _positions(vertices) -> List[Vector]:
    return [getattr(v, 'pos', v) for v in vertices]


def _triangles(vertices):
    pts = _positions(vertices)
    if len(pts) % 3 != 0:
        raise ValueError('triangle list length {} is not a multiple of 3'.format(len(pts)))
    for i in range(0, len(pts), 3):
        yield i // 3, pts[i], pts[i + 1], pts[i + 2]


def triangles_oriented(vertices, reference_normal: Vector) -> "CheckResult":
    """Check that every triangle winds the same way about ``reference_normal``.

    ``vertices`` is a flat triangle list (``Vertex`` objects or bare
    positions).  Degenerate triangles are reported as warnings but do
    not fail the check.
    """

    inconsistent = []
    degenerate = []
    for idx, v0, v1, v2 in _triangles(vertices):
        normal = triangle_normal(v0, v1, v2)
        if normal is None:
            degenerate.append(idx)
            continue
        if normal.dot(reference_normal) <= 0:
            inconsistent.append(idx)

    warnings: List[str] = []
    if degenerate:
        warnings.append(f'degenerate triangle indices: {degenerate}')
    if inconsistent:
        warnings.append(f'inconsistent triangle orientation indices: {inconsistent}')
        return CheckResult(False, warnings)
    return CheckResult(True, warnings)


def triangles_cover_area(vertices, expected: float, tol: float = 1e-9) -> "CheckResult":
    """Check that a triangle list has the expected total area, to relative ``tol``."""

    total = sum(triangle_area(v0, v1, v2) for _, v0, v1, v2 in _triangles(vertices))
    if abs(total - expected) > tol * max(abs(total), abs(expected)):
        return CheckResult(False, [f'triangle area {total} differs from expected {expected}'])
    return CheckResult(True, [])


@dataclass
class CheckResult:
    ok: bool
    warnings: List[str]

    def __bool__(self) -> bool:
        return self.ok


__all__ = [
    'CheckResult',
    'triangle_normal',
    'triangle_area',
    'newell_normal',
    'polygon_area',
    'triangles_oriented',
    'triangles_cover_area',
]
