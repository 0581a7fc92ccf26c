"""The eight compass directions a trace may run in."""

from __future__ import annotations

from enum import Enum
from functools import total_ordering
from typing import Any

from pcbrouting.vec2 import FixedPoint, FixedVec2, IntVec2


@total_ordering
class Direction(Enum):
    """A planar direction; members order in the sequence they are declared."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    TOP_RIGHT = 4
    TOP_LEFT = 5
    BOTTOM_RIGHT = 6
    BOTTOM_LEFT = 7

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Direction):
            return NotImplemented
        return self.value < other.value

    @property
    def _clockwise_index(self) -> int:
        return _CLOCKWISE_INDEX[self]

    def _turn_from(self, other: Direction) -> int:
        """Clockwise steps of 45 degrees from other to self, in 0..7."""
        return (self._clockwise_index - other._clockwise_index) % 8

    def opposite(self) -> Direction:
        return _rotated(self, 4)

    def is_diagonal(self) -> bool:
        return self in (
            Direction.TOP_RIGHT,
            Direction.TOP_LEFT,
            Direction.BOTTOM_RIGHT,
            Direction.BOTTOM_LEFT,
        )

    def to_degree_angle(self) -> float:
        """Counterclockwise angle from the positive x axis, in degrees."""
        return _DEGREES[self]

    def is_right_angle(self, other: Direction) -> bool:
        return self._turn_from(other) in (2, 6)

    def is_sharp_angle(self, other: Direction) -> bool:
        return self._turn_from(other) in (3, 5)

    def between_sharp_angle(self, other: Direction) -> Direction:
        """The direction 45 degrees from other, turning towards self, for a 135-degree pair."""
        turn = self._turn_from(other)
        if turn == 3:
            return _rotated(other, 1)
        if turn == 5:
            return _rotated(other, 7)
        raise ValueError(f"Not a sharp angle between directions: {self} and {other}")

    def between_right_angle(self, other: Direction) -> Direction:
        """The direction halfway between two directions at a right angle."""
        turn = self._turn_from(other)
        if turn == 2:
            return _rotated(other, 1)
        if turn == 6:
            return _rotated(other, 7)
        raise ValueError(f"Not a right angle between directions: {self} and {other}")

    def left_45_90_135(self, other: Direction) -> bool:
        return self._turn_from(other) in (5, 6, 7)

    def right_45_90_135(self, other: Direction) -> bool:
        return self._turn_from(other) in (1, 2, 3)

    def left_90_dir(self) -> Direction:
        return _rotated(self, 6)

    def right_90_dir(self) -> Direction:
        return _rotated(self, 2)

    def left_45_dir(self) -> Direction:
        return _rotated(self, 7)

    def right_45_dir(self) -> Direction:
        return _rotated(self, 1)

    @classmethod
    def all_directions(cls) -> list[Direction]:
        return list(cls)

    def to_int_vec2(self) -> IntVec2:
        x, y = _UNIT_STEPS[self]
        return IntVec2(x, y)

    def to_fixed_vec2(self, scale: Any) -> FixedVec2:
        step = self.to_int_vec2()
        return FixedVec2(
            FixedPoint.from_num(step.x) * scale,
            FixedPoint.from_num(step.y) * scale,
        )

    @classmethod
    def from_points(cls, start: FixedVec2, end: FixedVec2) -> Direction | None:
        """Direction from start to end, or None if they coincide.

        Raises ValueError when the two points are not on a common
        horizontal, vertical or 45-degree line.
        """
        dx = end.x - start.x
        dy = end.y - start.y
        skew = abs(abs(dy) - abs(dx))
        zero = FixedPoint.ZERO

        def sign(value: FixedPoint) -> int:
            return (value > zero) - (value < zero)

        key = (sign(dx), sign(dy), sign(skew))
        if key == (0, 0, 0):
            return None
        direction = _BY_SIGNS.get(key)
        if direction is None:
            raise ValueError(
                "Invalid points for direction calculation: "
                f"dx: {dx}, dy: {dy}, dy_minus_dx_abs: {skew}"
            )
        return direction

    @classmethod
    def is_two_points_valid_direction(cls, start: FixedVec2, end: FixedVec2) -> bool:
        try:
            return cls.from_points(start, end) is not None
        except ValueError:
            return False


_CLOCKWISE: tuple[Direction, ...] = (
    Direction.UP,
    Direction.TOP_RIGHT,
    Direction.RIGHT,
    Direction.BOTTOM_RIGHT,
    Direction.DOWN,
    Direction.BOTTOM_LEFT,
    Direction.LEFT,
    Direction.TOP_LEFT,
)
_CLOCKWISE_INDEX: dict[Direction, int] = {d: i for i, d in enumerate(_CLOCKWISE)}


def _rotated(direction: Direction, steps: int) -> Direction:
    return _CLOCKWISE[(_CLOCKWISE_INDEX[direction] + steps) % 8]


_DEGREES: dict[Direction, float] = {
    Direction.UP: 90.0,
    Direction.DOWN: 270.0,
    Direction.LEFT: 180.0,
    Direction.RIGHT: 0.0,
    Direction.TOP_RIGHT: 45.0,
    Direction.TOP_LEFT: 135.0,
    Direction.BOTTOM_RIGHT: 315.0,
    Direction.BOTTOM_LEFT: 225.0,
}

_UNIT_STEPS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, 1),
    Direction.DOWN: (0, -1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
    Direction.TOP_RIGHT: (1, 1),
    Direction.TOP_LEFT: (-1, 1),
    Direction.BOTTOM_RIGHT: (1, -1),
    Direction.BOTTOM_LEFT: (-1, -1),
}

# Keyed by the signs of dx, dy and ||dy| - |dx||.
_BY_SIGNS: dict[tuple[int, int, int], Direction] = {
    (0, 1, 1): Direction.UP,
    (0, -1, 1): Direction.DOWN,
    (1, 0, 1): Direction.RIGHT,
    (-1, 0, 1): Direction.LEFT,
    (1, 1, 0): Direction.TOP_RIGHT,
    (-1, 1, 0): Direction.TOP_LEFT,
    (1, -1, 0): Direction.BOTTOM_RIGHT,
    (-1, -1, 0): Direction.BOTTOM_LEFT,
}