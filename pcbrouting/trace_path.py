"""Routed traces: straight segments joined at anchors, with vias between layers."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import TypeVar

from pcbrouting.collider import Collider, collider_from_shape, collides
from pcbrouting.direction import Direction
from pcbrouting.hyperparameters import HYPERPARAMETERS, LAYER_TO_TRACE_COLOR
from pcbrouting.render_model import Color, RenderableBatch, ShapeRenderable
from pcbrouting.shapes import CircleShape, PrimShape, RectangleShape
from pcbrouting.vec2 import FixedVec2, FloatVec2

T = TypeVar("T")


@dataclass(frozen=True)
class TraceSegment:
    """A straight piece of trace on one layer."""

    start: FixedVec2
    end: FixedVec2
    width: float
    clearance: float
    layer: int

    def get_direction(self) -> Direction:
        """Direction from start to end; raises ValueError for a degenerate or skewed segment."""
        direction = Direction.from_points(self.start, self.end)
        if direction is None:
            raise ValueError("a trace segment with coincident ends has no direction")
        return direction

    def _shapes_with_width(self, width: float) -> list[PrimShape]:
        start = self.start.to_float()
        end = self.end.to_float()
        length = (end - start).length()
        middle = FloatVec2((start.x + end.x) / 2.0, (start.y + end.y) / 2.0)
        return [
            CircleShape(start, width),
            CircleShape(end, width),
            RectangleShape(middle, length, width, self.get_direction().to_degree_angle()),
        ]

    def to_shapes(self) -> list[PrimShape]:
        """Two end circles and the rectangle between them."""
        return self._shapes_with_width(self.width)

    def to_clearance_shapes(self) -> list[PrimShape]:
        return self._shapes_with_width(self.width + self.clearance * 2.0)

    def to_colliders(self) -> list[Collider]:
        return [collider_from_shape(shape) for shape in self.to_shapes()]

    def to_clearance_colliders(self) -> list[Collider]:
        return [collider_from_shape(shape) for shape in self.to_clearance_shapes()]

    def collides_with(self, other: TraceSegment) -> bool:
        """Whether either segment's copper enters the other's clearance on a shared layer."""
        if self.layer != other.layer:
            return False
        other_clearance = other.to_clearance_colliders()
        if any(collides(mine, theirs) for mine in self.to_colliders() for theirs in other_clearance):
            return True
        other_copper = other.to_colliders()
        return any(
            collides(mine, theirs)
            for mine in self.to_clearance_colliders()
            for theirs in other_copper
        )

    def to_renderables(self, color: Color) -> list[ShapeRenderable]:
        return [ShapeRenderable(shape, color) for shape in self.to_shapes()]

    def to_clearance_renderables(self, color: Color) -> list[ShapeRenderable]:
        return [ShapeRenderable(shape, color) for shape in self.to_clearance_shapes()]

    def calculate_length(self) -> float:
        start = self.start.to_float()
        end = self.end.to_float()
        return math.hypot(end.x - start.x, end.y - start.y)


@dataclass(frozen=True)
class Via:
    """A plated hole joining the layers from min_layer to max_layer inclusive."""

    position: FixedVec2
    diameter: float
    clearance: float
    min_layer: int
    max_layer: int

    def to_shape(self) -> PrimShape:
        return CircleShape(self.position.to_float(), self.diameter)

    def to_clearance_shape(self) -> PrimShape:
        return CircleShape(self.position.to_float(), self.diameter + self.clearance * 2.0)

    def to_collider(self) -> Collider:
        return collider_from_shape(self.to_shape())

    def to_clearance_collider(self) -> Collider:
        return collider_from_shape(self.to_clearance_shape())

    def to_renderables(self, color: Color) -> list[ShapeRenderable]:
        return [ShapeRenderable(self.to_shape(), color)]

    def to_clearance_renderables(self, color: Color) -> list[ShapeRenderable]:
        return [ShapeRenderable(self.to_clearance_shape(), color)]


@dataclass(frozen=True, order=True)
class TraceAnchor:
    """A turning point of a trace; the trace arrives on start_layer and leaves on end_layer."""

    position: FixedVec2
    start_layer: int
    end_layer: int


def _bucket(layers: dict[int, list[T]], layer: int) -> list[T]:
    try:
        return layers[layer]
    except KeyError:
        raise ValueError(f"layer {layer} is outside the board's {len(layers)} layers") from None


@dataclass
class TracePath:
    """A complete trace: its anchors, the segments between them and its vias."""

    anchors: tuple[TraceAnchor, ...]
    segments: list[TraceSegment] = field(default_factory=list)
    vias: list[Via] = field(default_factory=list)
    total_length: float = 0.0

    @classmethod
    def from_anchors(
        cls,
        anchors: Iterable[TraceAnchor],
        trace_width: float,
        trace_clearance: float,
        via_diameter: float,
    ) -> TracePath:
        """Build segments between consecutive anchors and vias at interior layer changes."""
        anchors = tuple(anchors)
        if not anchors:
            raise ValueError("a trace path needs at least one anchor")
        segments = [
            TraceSegment(
                start.position, end.position, trace_width, trace_clearance, start.end_layer
            )
            for start, end in zip(anchors, anchors[1:])
        ]
        vias = [
            Via(
                anchor.position,
                via_diameter,
                trace_clearance,
                min(anchor.start_layer, anchor.end_layer),
                max(anchor.start_layer, anchor.end_layer),
            )
            for anchor in anchors[1:-1]
            if anchor.start_layer != anchor.end_layer
        ]
        total_length = sum(segment.calculate_length() for segment in segments)
        return cls(anchors, segments, vias, total_length)

    def _per_layer(
        self,
        num_layers: int,
        from_segment: Callable[[TraceSegment], list[T]],
        from_via: Callable[[Via], T],
    ) -> dict[int, list[T]]:
        layers: dict[int, list[T]] = {layer: [] for layer in range(num_layers)}
        for segment in self.segments:
            _bucket(layers, segment.layer).extend(from_segment(segment))
        for via in self.vias:
            item = from_via(via)
            for layer in range(via.min_layer, via.max_layer + 1):
                _bucket(layers, layer).append(item)
        return layers

    def to_shapes(self, num_layers: int) -> dict[int, list[PrimShape]]:
        return self._per_layer(num_layers, TraceSegment.to_shapes, Via.to_shape)

    def to_clearance_shapes(self, num_layers: int) -> dict[int, list[PrimShape]]:
        return self._per_layer(
            num_layers, TraceSegment.to_clearance_shapes, Via.to_clearance_shape
        )

    def to_colliders(self, num_layers: int) -> dict[int, list[Collider]]:
        return self._per_layer(num_layers, TraceSegment.to_colliders, Via.to_collider)

    def to_clearance_colliders(self, num_layers: int) -> dict[int, list[Collider]]:
        return self._per_layer(
            num_layers, TraceSegment.to_clearance_colliders, Via.to_clearance_collider
        )

    def collides_with(self, other: TracePath) -> bool:
        return any(
            mine.collides_with(theirs) for mine in self.segments for theirs in other.segments
        )

    def get_score(self) -> float:
        """Score in [0, 1] that halves every time the length grows by the half-score length."""
        k = math.log(2.0) / HYPERPARAMETERS.half_probability_raw_score
        score = math.exp(-k * self.total_length)
        if not 0.0 <= score <= 1.0:
            raise ValueError(f"Score must be between 0 and 1, got: {score}")
        return score

    def to_renderables(self, color: Color) -> tuple[RenderableBatch, RenderableBatch]:
        """The trace batch and its semi-transparent clearance batch."""
        clearance_color = (color[0], color[1], color[2], color[3] / 2.0)
        renderables: list[ShapeRenderable] = []
        clearance_renderables: list[ShapeRenderable] = []
        for segment in self.segments:
            segment_color = LAYER_TO_TRACE_COLOR[segment.layer].to_float4(color[3] / 2.0)
            renderables.extend(segment.to_renderables(segment_color))
            clearance_renderables.extend(segment.to_clearance_renderables(clearance_color))
        for via in self.vias:
            renderables.extend(via.to_renderables(color))
            clearance_renderables.extend(via.to_clearance_renderables(clearance_color))
        return RenderableBatch(renderables), RenderableBatch(clearance_renderables)

    def calculate_total_length(self) -> float:
        return sum(segment.calculate_length() for segment in self.segments)

    def num_vias(self) -> int:
        return len(self.vias)