"""Fixed-point and floating-point two-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from functools import total_ordering
from typing import Any, Mapping, Union

FRAC_BITS = 16
_SCALE = 1 << FRAC_BITS
_MIN_BITS = -(1 << 31)
_MAX_BITS = (1 << 31) - 1

#: Machine epsilon of a single-precision float, used as the normalisation cut-off.
FLOAT_EPSILON = 1.1920929e-07


def _checked(bits: int) -> int:
    if not _MIN_BITS <= bits <= _MAX_BITS:
        raise OverflowError(
            f"value {bits / _SCALE} is out of range for a 16.16 fixed-point number"
        )
    return bits


def _bits_from_num(value: Any) -> int:
    if isinstance(value, FixedPoint):
        return value.to_bits()
    if isinstance(value, bool):
        raise TypeError("a bool is not a number for a fixed-point value")
    if isinstance(value, int):
        return _checked(value << FRAC_BITS)
    if isinstance(value, float):
        if not math.isfinite(value):
            raise ValueError(f"cannot convert {value} to a fixed-point number")
        return _checked(round(value * _SCALE))
    raise TypeError(f"cannot convert {type(value).__name__} to a fixed-point number")


Number = Union[int, float, "FixedPoint"]


@total_ordering
class FixedPoint:
    """A signed 16.16 fixed-point number."""

    __slots__ = ("_bits",)

    ZERO: FixedPoint
    DELTA: FixedPoint
    MIN: FixedPoint
    MAX: FixedPoint

    def __init__(self, value: Number = 0) -> None:
        self._bits = _bits_from_num(value)

    @classmethod
    def from_num(cls, value: Number) -> FixedPoint:
        """Convert an int or float, rounding floats to the nearest step."""
        return cls(value)

    @classmethod
    def from_bits(cls, bits: int) -> FixedPoint:
        """Build a value from its raw two's-complement representation."""
        if isinstance(bits, bool) or not isinstance(bits, int):
            raise TypeError("bits must be an int")
        obj = cls.__new__(cls)
        obj._bits = _checked(bits)
        return obj

    def to_bits(self) -> int:
        return self._bits

    def to_float(self) -> float:
        return self._bits / _SCALE

    def sqrt(self) -> FixedPoint:
        """Square root, rounded down to the nearest step."""
        if self._bits < 0:
            raise ValueError("square root of a negative fixed-point number")
        return FixedPoint.from_bits(math.isqrt(self._bits << FRAC_BITS))

    @staticmethod
    def _coerce(other: Any) -> FixedPoint | None:
        if isinstance(other, FixedPoint):
            return other
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return FixedPoint(other)
        return None

    def __float__(self) -> float:
        return self.to_float()

    def __add__(self, other: Any) -> FixedPoint:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return FixedPoint.from_bits(self._bits + rhs._bits)

    __radd__ = __add__

    def __sub__(self, other: Any) -> FixedPoint:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return FixedPoint.from_bits(self._bits - rhs._bits)

    def __rsub__(self, other: Any) -> FixedPoint:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs - self

    def __mul__(self, other: Any) -> FixedPoint:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return FixedPoint.from_bits((self._bits * rhs._bits) >> FRAC_BITS)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> FixedPoint:
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        if rhs._bits == 0:
            raise ZeroDivisionError("fixed-point division by zero")
        numerator = self._bits << FRAC_BITS
        quotient = abs(numerator) // abs(rhs._bits)
        if (numerator < 0) != (rhs._bits < 0):
            quotient = -quotient
        return FixedPoint.from_bits(quotient)

    def __rtruediv__(self, other: Any) -> FixedPoint:
        lhs = self._coerce(other)
        if lhs is None:
            return NotImplemented
        return lhs / self

    def __neg__(self) -> FixedPoint:
        return FixedPoint.from_bits(-self._bits)

    def __abs__(self) -> FixedPoint:
        return FixedPoint.from_bits(abs(self._bits))

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FixedPoint):
            return self._bits == other._bits
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.to_float() == other
        return NotImplemented

    def __lt__(self, other: object) -> bool:
        if isinstance(other, FixedPoint):
            return self._bits < other._bits
        if isinstance(other, (int, float)) and not isinstance(other, bool):
            return self.to_float() < other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_float())

    def __repr__(self) -> str:
        return f"FixedPoint({self.to_float()!r})"

    def __str__(self) -> str:
        return str(self.to_float())


FixedPoint.ZERO = FixedPoint.from_bits(0)
FixedPoint.DELTA = FixedPoint.from_bits(1)
FixedPoint.MIN = FixedPoint.from_bits(_MIN_BITS)
FixedPoint.MAX = FixedPoint.from_bits(_MAX_BITS)


def _as_fixed(value: Number) -> FixedPoint:
    return value if isinstance(value, FixedPoint) else FixedPoint.from_num(value)


@dataclass(frozen=True, order=True)
class FixedVec2:
    """A point or vector with fixed-point coordinates, ordered by x then y."""

    x: FixedPoint
    y: FixedPoint

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _as_fixed(self.x))
        object.__setattr__(self, "y", _as_fixed(self.y))

    def to_float(self) -> FloatVec2:
        return FloatVec2(self.x.to_float(), self.y.to_float())

    def length(self) -> FixedPoint:
        return (self.x * self.x + self.y * self.y).sqrt()

    def is_x_odd_y_odd(self) -> bool:
        return self.x.to_bits() & 1 == 1 and self.y.to_bits() & 1 == 1

    def is_sum_even(self) -> bool:
        return (self.x.to_bits() + self.y.to_bits()) % 2 == 0

    def to_nearest_even_even(self) -> FixedVec2:
        """Step each odd coordinate down by one unit so both raw values are even."""
        x = self.x - FixedPoint.DELTA if self.x.to_bits() & 1 else self.x
        y = self.y - FixedPoint.DELTA if self.y.to_bits() & 1 else self.y
        return FixedVec2(x, y)

    def __add__(self, other: FixedVec2) -> FixedVec2:
        if not isinstance(other, FixedVec2):
            return NotImplemented
        return FixedVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: FixedVec2) -> FixedVec2:
        if not isinstance(other, FixedVec2):
            return NotImplemented
        return FixedVec2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> FixedVec2:
        return FixedVec2(-self.x, -self.y)

    def __mul__(self, scalar: Number) -> FixedVec2:
        factor = _as_fixed(scalar)
        return FixedVec2(self.x * factor, self.y * factor)

    def __truediv__(self, scalar: Number) -> FixedVec2:
        divisor = _as_fixed(scalar)
        if divisor == FixedPoint.ZERO:
            raise ZeroDivisionError("Division by zero in FixedVec2")
        return FixedVec2(self.x / divisor, self.y / divisor)


@dataclass(frozen=True)
class FloatVec2:
    """A point or vector with floating-point coordinates."""

    x: float = 0.0
    y: float = 0.0

    def to_fixed(self) -> FixedVec2:
        return FixedVec2(FixedPoint.from_num(float(self.x)), FixedPoint.from_num(float(self.y)))

    def dot(self, other: FloatVec2) -> float:
        return self.x * other.x + self.y * other.y

    def perp(self) -> FloatVec2:
        """A vector perpendicular to this one, rotated a quarter turn anticlockwise."""
        return FloatVec2(-self.y, self.x)

    def normalize(self) -> FloatVec2:
        """Unit vector in the same direction; a near-zero vector is returned unchanged."""
        length = self.length()
        if length > FLOAT_EPSILON:
            return FloatVec2(self.x / length, self.y / length)
        return self

    def magnitude2(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.magnitude2())

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> FloatVec2:
        try:
            return cls(float(data["x"]), float(data["y"]))
        except (KeyError, TypeError) as exc:
            raise ValueError(f"invalid vector data: {data!r}") from exc

    def __add__(self, other: FloatVec2) -> FloatVec2:
        if not isinstance(other, FloatVec2):
            return NotImplemented
        return FloatVec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: FloatVec2) -> FloatVec2:
        if not isinstance(other, FloatVec2):
            return NotImplemented
        return FloatVec2(self.x - other.x, self.y - other.y)

    def __truediv__(self, scalar: float) -> FloatVec2:
        if scalar == 0.0:
            raise ZeroDivisionError("Division by zero in FloatVec2")
        return FloatVec2(self.x / scalar, self.y / scalar)


@dataclass(frozen=True)
class IntVec2:
    """A vector with integer coordinates."""

    x: int = 0
    y: int = 0

    def to_fixed(self) -> FixedVec2:
        return FixedVec2(FixedPoint.from_num(self.x), FixedPoint.from_num(self.y))