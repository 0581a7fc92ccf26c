"""Octile distance: the length of the shortest path using 45-degree moves."""

from __future__ import annotations

import math

from pcbrouting.vec2 import FixedVec2, FloatVec2

_DIAGONAL_EXTRA = math.sqrt(2.0) - 1.0


def octile_distance_float(start: FloatVec2, end: FloatVec2) -> float:
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    return max(dx, dy) + _DIAGONAL_EXTRA * min(dx, dy)


def octile_distance_fixed(start: FixedVec2, end: FixedVec2) -> float:
    return octile_distance_float(start.to_float(), end.to_float())