"""Tolerances and environment switches for polytess.

Tolerances are module constants rather than call parameters; the
environment switches are read at call time so tests and long-running
hosts can toggle them without reloading the module.
"""

from __future__ import annotations

import os

#: signed-distance band treated as "on the plane" by ``Polygon.split_polygon``
SPLIT_EPSILON = 1e-8

#: relative zero-area tolerance, scaled by the squared size of the input
AREA_EPSILON = 1e-12

TRACE_ENV_VAR = 'POLYTESS_TRACE'

_TRUTHY = ('1', 'true', 'yes')


def trace_enabled() -> bool:
    """Return ``True`` when per-ear triangulation tracing is requested."""

    return os.environ.get(TRACE_ENV_VAR, '').lower().strip() in _TRUTHY


__all__ = [
    'SPLIT_EPSILON',
    'AREA_EPSILON',
    'TRACE_ENV_VAR',
    'trace_enabled',
]
