import math

import pytest

from polytess.geometry_checks import (
    CheckResult,
    newell_normal,
    polygon_area,
    triangle_area,
    triangle_normal,
    triangles_cover_area,
    triangles_oriented,
)
from polytess.vector import isclose, vec3
from polytess.vertex import Vertex


def test_triangle_normal_and_area():
    v0 = vec3(0, 0, 0)
    v1 = vec3(1, 0, 0)
    v2 = vec3(0, 1, 0)

    assert triangle_normal(v0, v1, v2) == vec3(0, 0, 1)
    assert math.isclose(triangle_area(v0, v1, v2), 0.5)


def test_triangle_normal_degenerate():
    assert triangle_normal(vec3(0, 0, 0), vec3(1, 1, 1), vec3(2, 2, 2)) is None


def test_polygon_area_concave():
    pts = [vec3(0, 0, 0), vec3(2, 0, 0), vec3(2, 1, 0), vec3(1, 1, 0),
           vec3(1, 2, 0), vec3(0, 2, 0)]
    assert math.isclose(polygon_area(pts), 3.0)
    assert isclose(newell_normal(pts), vec3(0, 0, 6))
    assert isclose(newell_normal(list(reversed(pts))), vec3(0, 0, -6))


def test_polygon_area_tilted():
    pts = [vec3(0, 0, 0), vec3(0, 3, 4), vec3(2, 3, 4), vec3(2, 0, 0)]
    assert math.isclose(polygon_area(pts), 10.0)
    assert polygon_area(pts[:2]) == 0.0


def test_triangles_oriented_ok_and_flipped():
    a, b, c, d = vec3(0, 0, 0), vec3(1, 0, 0), vec3(1, 1, 0), vec3(0, 1, 0)
    good = [a, b, c, a, c, d]
    result = triangles_oriented(good, vec3(0, 0, 1))
    assert isinstance(result, CheckResult)
    assert result.ok
    assert result.warnings == []

    bad = [a, b, c, a, d, c]
    result = triangles_oriented(bad, vec3(0, 0, 1))
    assert not result
    assert '[1]' in result.warnings[0]


def test_triangles_oriented_accepts_vertices():
    verts = [Vertex(p) for p in (vec3(0, 0, 0), vec3(0, 1, 0), vec3(1, 0, 0))]
    assert triangles_oriented(verts, vec3(0, 0, -1))


def test_triangles_oriented_reports_degenerate():
    tri = [vec3(0, 0, 0), vec3(1, 0, 0), vec3(2, 0, 0)]
    result = triangles_oriented(tri, vec3(0, 0, 1))
    assert result.ok
    assert 'degenerate' in result.warnings[0]


def test_triangles_cover_area():
    tris = [vec3(0, 0, 0), vec3(2, 0, 0), vec3(0, 2, 0)]
    assert triangles_cover_area(tris, 2.0)
    assert not triangles_cover_area(tris, 2.5)


def test_partial_triangle_list_raises():
    with pytest.raises(ValueError):
        triangles_cover_area([vec3(0, 0, 0), vec3(1, 0, 0)], 0.0)


def test_small_triangles_are_not_degenerate():
    scale = 1e-7
    v0, v1, v2 = vec3(0, 0, 0), vec3(scale, 0, 0), vec3(0, scale, 0)
    assert isclose(triangle_normal(v0, v1, v2), vec3(0, 0, 1))
    assert triangles_cover_area([v0, v1, v2], 0.5 * scale * scale)
    assert not triangles_cover_area([v0, v1, v2], 0.6 * scale * scale)
