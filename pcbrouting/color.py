"""RGB colours and a generator of visually distinct colours."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True)
class ColorFloat3:
    """An RGB colour with components in [0.0, 1.0]."""

    r: float
    g: float
    b: float

    def to_float4(self, alpha: float) -> tuple[float, float, float, float]:
        return (self.r, self.g, self.b, alpha)


def hsv_to_rgb(h: float, s: float, v: float) -> ColorFloat3:
    """Convert hue (wrapped into [0, 1)), saturation and value to RGB."""
    h = math.modf(h)[0] * 6.0
    i = math.floor(h)
    f = h - i
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    match max(int(i), 0):
        case 0:
            return ColorFloat3(v, t, p)
        case 1:
            return ColorFloat3(q, v, p)
        case 2:
            return ColorFloat3(p, v, t)
        case 3:
            return ColorFloat3(p, q, v)
        case 4:
            return ColorFloat3(t, p, v)
        case _:
            return ColorFloat3(v, p, q)


class DistinctColorGenerator(Iterator[ColorFloat3]):
    """Endless stream of colours whose hues are spread by the golden ratio."""

    GOLDEN_RATIO_CONJUGATE = 0.61803398875
    SATURATION = 0.8
    VALUE = 0.75

    def __init__(self) -> None:
        self._index = 0

    def __iter__(self) -> DistinctColorGenerator:
        return self

    def __next__(self) -> ColorFloat3:
        hue = math.modf(self._index * self.GOLDEN_RATIO_CONJUGATE)[0]
        self._index += 1
        return hsv_to_rgb(hue, self.SATURATION, self.VALUE)