import pytest

from pcbrouting.pad import (
    CirclePadShape,
    Pad,
    PadLayer,
    RectanglePadShape,
    RoundRectPadShape,
)
from pcbrouting.shapes import CircleShape, RectangleShape
from pcbrouting.vec2 import FloatVec2


def make_pad(shape, rotation=0.0, clearance=0.05, position=FloatVec2(-6.0, 0.0)):
    return Pad("red_source", position, shape, rotation, clearance, PadLayer.FRONT)


def test_pad_layer_ranges():
    num_layers = 4
    assert list(PadLayer.FRONT.layers(num_layers)) == [0]
    assert list(PadLayer.BACK.layers(num_layers)) == [num_layers - 1]
    assert list(PadLayer.ALL.layers(num_layers)) == list(range(num_layers))


def test_back_layer_needs_a_layer():
    with pytest.raises(ValueError):
        PadLayer.BACK.layers(0)


def test_circle_pad_shapes():
    pad = make_pad(CirclePadShape(0.6))
    assert pad.to_shapes() == [CircleShape(pad.position, 0.6)]
    (clearance_shape,) = pad.to_clearance_shapes()
    assert clearance_shape.position == pad.position
    assert clearance_shape.diameter - 0.6 == pytest.approx(2 * pad.clearance)


def test_rectangle_pad_keeps_rotation():
    pad = make_pad(RectanglePadShape(1.0, 1.0), rotation=30.0, position=FloatVec2(-3.0, 5.0))
    assert pad.to_shapes() == [RectangleShape(FloatVec2(-3.0, 5.0), 1.0, 1.0, 30.0)]
    (clearance_shape,) = pad.to_clearance_shapes()
    assert clearance_shape.rotation_in_degs == 30.0
    assert clearance_shape.width - 1.0 == pytest.approx(2 * pad.clearance)
    assert clearance_shape.height - 1.0 == pytest.approx(2 * pad.clearance)


def test_round_rect_layout():
    pad = make_pad(RoundRectPadShape(2.0, 1.0, 0.25), rotation=0.0, position=FloatVec2(1.0, 1.0))
    shapes = pad.to_shapes()
    assert len(shapes) == 6
    vertical, horizontal, *circles = shapes
    assert isinstance(vertical, RectangleShape) and isinstance(horizontal, RectangleShape)
    assert vertical.height == 1.0
    assert horizontal.width == 2.0
    assert all(circle.diameter == pytest.approx(0.5) for circle in circles)
    # each corner circle touches the outline of the pad
    for circle in circles:
        offset = circle.position - pad.position
        assert abs(offset.x) + circle.diameter / 2 == pytest.approx(2.0 / 2)
        assert abs(offset.y) + circle.diameter / 2 == pytest.approx(1.0 / 2)


@pytest.mark.parametrize("rotation", [0.0, 30.0, 90.0, 217.0])
def test_round_rect_corners_symmetric(rotation):
    pad = make_pad(RoundRectPadShape(2.0, 1.0, 0.25), rotation=rotation)
    circles = pad.to_shapes()[2:]
    offsets = [circle.position - pad.position for circle in circles]
    distances = [offset.length() for offset in offsets]
    assert distances == pytest.approx([distances[0]] * 4)
    assert sum(o.x for o in offsets) == pytest.approx(0.0, abs=1e-9)
    assert sum(o.y for o in offsets) == pytest.approx(0.0, abs=1e-9)


def test_round_rect_clearance_grows_corners():
    pad = make_pad(RoundRectPadShape(2.0, 1.0, 0.25), clearance=0.1)
    shapes = pad.to_shapes()
    clearance_shapes = pad.to_clearance_shapes()
    assert len(clearance_shapes) == 6
    for plain, grown in zip(shapes[2:], clearance_shapes[2:]):
        assert grown.diameter - plain.diameter == pytest.approx(2 * pad.clearance)


def test_renderables_carry_color():
    pad = make_pad(RoundRectPadShape(2.0, 1.0, 0.25))
    color = (1.0, 0.0, 0.0, 0.5)
    renderables = pad.to_renderables(color)
    assert [r.shape for r in renderables] == pad.to_shapes()
    assert all(r.color == color for r in renderables)
    clearance = pad.to_clearance_renderables(color)
    assert [r.shape for r in clearance] == pad.to_clearance_shapes()
    assert all(r.color == color for r in clearance)