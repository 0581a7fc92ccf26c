"""Collision detection between circles, convex polygons and half-plane borders."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import chain, islice
from typing import Union

from pcbrouting.shapes import CircleShape, Line, PrimShape, RectangleShape
from pcbrouting.vec2 import FloatVec2


@dataclass(frozen=True)
class CircleCollider:
    position: FloatVec2
    diameter: float


@dataclass(frozen=True)
class PolygonCollider:
    """A convex polygon used only for collision checks; two vertices make a line."""

    vertices: tuple[FloatVec2, ...]

    def __post_init__(self) -> None:
        vertices = tuple(self.vertices)
        if not vertices:
            raise ValueError("a polygon collider needs at least one vertex")
        object.__setattr__(self, "vertices", vertices)


@dataclass(frozen=True)
class BorderCollider:
    """A half-plane: everything beyond point_on_border in the direction of normal."""

    point_on_border: FloatVec2
    normal: FloatVec2


Collider = Union[CircleCollider, PolygonCollider, BorderCollider]


def rectangle_to_polygon(rectangle: RectangleShape) -> PolygonCollider:
    """Corners of a rectangle rotated counterclockwise about its centre."""
    hw = rectangle.width / 2.0
    hh = rectangle.height / 2.0
    theta = math.radians(rectangle.rotation_in_degs)
    cos_t, sin_t = math.cos(theta), math.sin(theta)
    corners = ((-hw, -hh), (hw, -hh), (hw, hh), (-hw, hh))
    return PolygonCollider(
        tuple(
            FloatVec2(
                rectangle.position.x + x * cos_t - y * sin_t,
                rectangle.position.y + x * sin_t + y * cos_t,
            )
            for x, y in corners
        )
    )


def collider_from_shape(shape: PrimShape) -> Collider:
    match shape:
        case CircleShape():
            return CircleCollider(shape.position, shape.diameter)
        case RectangleShape():
            return rectangle_to_polygon(shape)
        case Line():
            return PolygonCollider((shape.start, shape.end))
    raise TypeError(f"not a primitive shape: {shape!r}")


def _edge_axes(polygon: PolygonCollider) -> Iterator[FloatVec2]:
    """Unit normals of the polygon's edges; a line contributes a single axis."""
    vertices = polygon.vertices
    edges = zip(vertices, vertices[1:] + vertices[:1])
    if len(vertices) == 2:
        edges = islice(edges, 1)
    for start, end in edges:
        yield (end - start).perp().normalize()


def _project_polygon(polygon: PolygonCollider, axis: FloatVec2) -> tuple[float, float]:
    projections = [vertex.dot(axis) for vertex in polygon.vertices]
    return min(projections), max(projections)


def _project_circle(center: FloatVec2, radius: float, axis: FloatVec2) -> tuple[float, float]:
    center_projection = center.dot(axis)
    return center_projection - radius, center_projection + radius


def _overlap(a: tuple[float, float], b: tuple[float, float]) -> bool:
    return not (a[1] < b[0] or b[1] < a[0])


def _circle_circle(first: CircleCollider, second: CircleCollider) -> bool:
    reach = first.diameter / 2.0 + second.diameter / 2.0
    return (first.position - second.position).magnitude2() < reach * reach


def _polygon_circle(polygon: PolygonCollider, circle: CircleCollider) -> bool:
    radius = circle.diameter / 2.0
    for axis in _edge_axes(polygon):
        if not _overlap(
            _project_polygon(polygon, axis), _project_circle(circle.position, radius, axis)
        ):
            return False
    closest = min(polygon.vertices, key=lambda v: (v - circle.position).magnitude2())
    axis = (closest - circle.position).normalize()
    return _overlap(
        _project_polygon(polygon, axis), _project_circle(circle.position, radius, axis)
    )


def _polygon_polygon(first: PolygonCollider, second: PolygonCollider) -> bool:
    return all(
        _overlap(_project_polygon(first, axis), _project_polygon(second, axis))
        for axis in chain(_edge_axes(first), _edge_axes(second))
    )


def _polygon_border(polygon: PolygonCollider, border: BorderCollider) -> bool:
    axis = border.normal.normalize()
    _, poly_max = _project_polygon(polygon, axis)
    return poly_max > border.point_on_border.dot(axis)


def _circle_border(circle: CircleCollider, border: BorderCollider) -> bool:
    _, circle_max = _project_circle(circle.position, circle.diameter / 2.0, border.normal)
    return circle_max > border.point_on_border.dot(border.normal.normalize())


def collides(first: Collider, second: Collider) -> bool:
    """Whether two colliders overlap, tested with the separating axis theorem."""
    match first, second:
        case CircleCollider(), CircleCollider():
            return _circle_circle(first, second)
        case CircleCollider(), PolygonCollider():
            return _polygon_circle(second, first)
        case PolygonCollider(), CircleCollider():
            return _polygon_circle(first, second)
        case PolygonCollider(), PolygonCollider():
            return _polygon_polygon(first, second)
        case PolygonCollider(), BorderCollider():
            return _polygon_border(first, second)
        case CircleCollider(), BorderCollider():
            return _circle_border(first, second)
        case BorderCollider(), PolygonCollider():
            return _polygon_border(second, first)
        case BorderCollider(), CircleCollider():
            return _circle_border(second, first)
        case BorderCollider(), BorderCollider():
            raise ValueError("Border with border collision is not defined")
    raise TypeError(f"cannot test collision between {first!r} and {second!r}")