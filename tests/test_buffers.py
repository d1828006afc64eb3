import numpy as np
import pytest

from polytess.buffers import flat_position_buffer, interleaved_array, position_array
from polytess.earclip import triangulate
from polytess.polygon import Polygon


def _square_triangles():
    poly = Polygon.from_points([(0, 0, 1), (1, 0, 1), (1, 1, 1), (0, 1, 1)])
    return triangulate(poly)


def test_position_array_shape():
    tris = _square_triangles()
    arr = position_array(tris)
    assert arr.dtype == np.float32
    assert arr.shape == (6, 3)
    assert np.all(arr[:, 2] == 1.0)


def test_interleaved_array_carries_normals():
    tris = _square_triangles()
    arr = interleaved_array(tris)
    assert arr.dtype == np.float32
    assert arr.shape == (6, 6)
    assert np.allclose(arr[:, 3:], [0.0, 0.0, 1.0])


def test_flat_position_buffer():
    tris = _square_triangles()
    buf = flat_position_buffer(tris)
    assert buf.shape == (18,)
    assert np.allclose(buf.reshape(-1, 3), position_array(tris))


def test_partial_triangle_list_raises():
    tris = _square_triangles()
    with pytest.raises(ValueError):
        position_array(tris[:4])
    with pytest.raises(ValueError):
        interleaved_array(tris[:5])
