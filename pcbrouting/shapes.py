"""Primitive shapes used for rendering and collision checks."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Union

from pcbrouting.vec2 import FloatVec2


@dataclass(frozen=True)
class CircleShape:
    position: FloatVec2
    diameter: float


@dataclass(frozen=True)
class RectangleShape:
    """A rectangle centred on position, rotated counterclockwise in degrees."""

    position: FloatVec2
    width: float
    height: float
    rotation_in_degs: float


@dataclass(frozen=True)
class Line:
    start: FloatVec2
    end: FloatVec2


PrimShape = Union[CircleShape, RectangleShape, Line]


def shape_to_dict(shape: PrimShape) -> dict[str, Any]:
    """Serialise a shape as a single-key mapping tagged with its variant name."""
    match shape:
        case CircleShape(position=position, diameter=diameter):
            return {"Circle": {"position": position.to_dict(), "diameter": diameter}}
        case RectangleShape():
            return {
                "Rectangle": {
                    "position": shape.position.to_dict(),
                    "width": shape.width,
                    "height": shape.height,
                    "rotation_in_degs": shape.rotation_in_degs,
                }
            }
        case Line(start=start, end=end):
            return {"Line": {"start": start.to_dict(), "end": end.to_dict()}}
    raise TypeError(f"not a primitive shape: {shape!r}")


def shape_from_dict(data: Mapping[str, Any]) -> PrimShape:
    """Rebuild a shape from the mapping produced by shape_to_dict."""
    if not isinstance(data, Mapping) or len(data) != 1:
        raise ValueError(f"a shape must be a mapping with one variant key: {data!r}")
    ((tag, body),) = data.items()
    try:
        if tag == "Circle":
            return CircleShape(FloatVec2.from_dict(body["position"]), float(body["diameter"]))
        if tag == "Rectangle":
            return RectangleShape(
                FloatVec2.from_dict(body["position"]),
                float(body["width"]),
                float(body["height"]),
                float(body["rotation_in_degs"]),
            )
        if tag == "Line":
            return Line(FloatVec2.from_dict(body["start"]), FloatVec2.from_dict(body["end"]))
    except (KeyError, TypeError) as exc:
        raise ValueError(f"invalid {tag} shape data: {body!r}") from exc
    raise ValueError(f"unknown shape variant: {tag!r}")