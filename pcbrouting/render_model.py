"""What the viewer draws: coloured shapes grouped into batches."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator

from pcbrouting.shapes import PrimShape, shape_to_dict
from pcbrouting.vec2 import FloatVec2

Color = tuple[float, float, float, float]


@dataclass(frozen=True)
class ShapeRenderable:
    """A shape with an RGBA colour."""

    shape: PrimShape
    color: Color

    def __post_init__(self) -> None:
        color = tuple(float(component) for component in self.color)
        if len(color) != 4:
            raise ValueError(f"an RGBA colour needs four components, got {len(color)}")
        object.__setattr__(self, "color", color)

    def to_dict(self) -> dict[str, Any]:
        return {"shape": shape_to_dict(self.shape), "color": list(self.color)}


@dataclass
class RenderableBatch:
    """Shapes drawn together."""

    renderables: list[ShapeRenderable] = field(default_factory=list)

    def __iter__(self) -> Iterator[ShapeRenderable]:
        return iter(self.renderables)

    def __len__(self) -> int:
        return len(self.renderables)

    def to_dict(self) -> list[dict[str, Any]]:
        """Serialise as the plain list of its renderables."""
        return [renderable.to_dict() for renderable in self.renderables]


@dataclass
class PcbRenderModel:
    """Everything needed to draw one frame of a board."""

    width: float = 0.0
    height: float = 0.0
    center: FloatVec2 = field(default_factory=FloatVec2)
    trace_shape_renderables: list[RenderableBatch] = field(default_factory=list)
    pad_shape_renderables: list[ShapeRenderable] = field(default_factory=list)
    other_shape_renderables: list[ShapeRenderable] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "center": self.center.to_dict(),
            "trace_shape_renderables": [b.to_dict() for b in self.trace_shape_renderables],
            "pad_shape_renderables": [r.to_dict() for r in self.pad_shape_renderables],
            "other_shape_renderables": [r.to_dict() for r in self.other_shape_renderables],
        }