"""Component pads and their shapes."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Union

from pcbrouting.render_model import Color, ShapeRenderable
from pcbrouting.shapes import CircleShape, PrimShape, RectangleShape
from pcbrouting.vec2 import FloatVec2


@dataclass(frozen=True)
class CirclePadShape:
    diameter: float


@dataclass(frozen=True)
class RectanglePadShape:
    width: float
    height: float


@dataclass(frozen=True)
class RoundRectPadShape:
    width: float
    height: float
    corner_radius: float


PadShape = Union[CirclePadShape, RectanglePadShape, RoundRectPadShape]


class PadLayer(Enum):
    FRONT = "front"
    BACK = "back"
    ALL = "all"

    def layers(self, num_layers: int) -> range:
        """Indices of the layers the pad occupies; 0 is the front."""
        if self is PadLayer.FRONT:
            return range(0, 1)
        if self is PadLayer.BACK:
            if num_layers < 1:
                raise ValueError("a board needs at least one layer")
            return range(num_layers - 1, num_layers)
        return range(0, num_layers)


def _rounded_rect_to_shapes(
    width: float,
    height: float,
    corner_radius: float,
    position: FloatVec2,
    rotation: float,
) -> list[PrimShape]:
    """Two crossing rectangles plus a circle at each corner."""
    vertical = RectangleShape(position, width - 2.0 * corner_radius, height, rotation)
    horizontal = RectangleShape(position, width, height - 2.0 * corner_radius, rotation)
    dx = abs(width / 2.0 - corner_radius)
    dy = abs(height / 2.0 - corner_radius)
    theta = math.radians(rotation)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    corners = ((dx, dy), (-dx, dy), (dx, -dy), (-dx, -dy))
    circles = [
        CircleShape(
            position + FloatVec2(cos_t * x + sin_t * y, -sin_t * x + cos_t * y),
            corner_radius * 2.0,
        )
        for x, y in corners
    ]
    return [vertical, horizontal, *circles]


@dataclass(frozen=True)
class Pad:
    """A pad with its position, shape, rotation in degrees and clearance."""

    name: str
    position: FloatVec2
    shape: PadShape
    rotation: float
    clearance: float
    pad_layer: PadLayer

    def to_shapes(self) -> list[PrimShape]:
        match self.shape:
            case CirclePadShape(diameter=diameter):
                return [CircleShape(self.position, diameter)]
            case RectanglePadShape(width=width, height=height):
                return [RectangleShape(self.position, width, height, self.rotation)]
            case RoundRectPadShape(width=width, height=height, corner_radius=radius):
                return _rounded_rect_to_shapes(
                    width, height, radius, self.position, self.rotation
                )
        raise TypeError(f"unknown pad shape: {self.shape!r}")

    def to_clearance_shapes(self) -> list[PrimShape]:
        margin = self.clearance * 2.0
        match self.shape:
            case CirclePadShape(diameter=diameter):
                return [CircleShape(self.position, diameter + margin)]
            case RectanglePadShape(width=width, height=height):
                return [
                    RectangleShape(
                        self.position, width + margin, height + margin, self.rotation
                    )
                ]
            case RoundRectPadShape(width=width, height=height, corner_radius=radius):
                return _rounded_rect_to_shapes(
                    width + margin,
                    height + margin,
                    radius + self.clearance,
                    self.position,
                    self.rotation,
                )
        raise TypeError(f"unknown pad shape: {self.shape!r}")

    def to_renderables(self, color: Color) -> list[ShapeRenderable]:
        return [ShapeRenderable(shape, color) for shape in self.to_shapes()]

    def to_clearance_renderables(self, color: Color) -> list[ShapeRenderable]:
        return [ShapeRenderable(shape, color) for shape in self.to_clearance_shapes()]