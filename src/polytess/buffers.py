"""Flat float32 arrays for handing triangle lists to a GPU buffer builder.

The renderer uploads positions (and normals, for lighting) as tightly
packed 32-bit floats.  These helpers only reshape data; they make no
graphics API calls.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np


def _check_triangles(vertices: Sequence) -> None:
    if len(vertices) % 3 != 0:
        raise ValueError('triangle list length {} is not a multiple of 3'.format(
            len(vertices)))


def position_array(vertices: Sequence) -> np.ndarray:
    """Return an ``(n, 3)`` float32 array of vertex positions."""

    _check_triangles(vertices)
    return np.asarray([tuple(v.pos) for v in vertices],
                      dtype=np.float32).reshape(-1, 3)


def interleaved_array(vertices: Sequence) -> np.ndarray:
    """Return an ``(n, 6)`` float32 array of ``x y z nx ny nz`` rows."""

    _check_triangles(vertices)
    return np.asarray([tuple(v.pos) + tuple(v.normal) for v in vertices],
                      dtype=np.float32).reshape(-1, 6)


def flat_position_buffer(vertices: Sequence) -> np.ndarray:
    """Return positions as a 1-D float32 array, ``x0 y0 z0 x1 ...``."""

    return position_array(vertices).ravel()


__all__ = ['position_array', 'interleaved_array', 'flat_position_buffer']
