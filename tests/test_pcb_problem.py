import pytest

from pcbrouting.color import ColorFloat3
from pcbrouting.pad import CirclePadShape, Pad, PadLayer
from pcbrouting.pcb_problem import Connection, FixedTrace, NetInfo, PcbProblem, PcbSolution
from pcbrouting.trace_path import TraceAnchor, TracePath
from pcbrouting.vec2 import FixedVec2, FloatVec2


def make_path(points, layers=None):
    layers = layers or [(0, 0)] * len(points)
    anchors = [
        TraceAnchor(FixedVec2(x, y), start, end) for (x, y), (start, end) in zip(points, layers)
    ]
    return TracePath.from_anchors(anchors, 0.5, 0.05, 0.8)


def test_empty_solution_has_no_length_or_vias():
    solution = PcbSolution()
    assert solution.total_length() == 0
    assert solution.num_vias() == 0


def test_solution_sums_over_traces():
    first = make_path([(0, 0), (3, 0)])
    second = make_path([(0, 0), (2, 0), (2, 2)], [(0, 0), (0, 1), (1, 1)])
    solution = PcbSolution(
        {
            0: FixedTrace("red", 0, first),
            1: FixedTrace("blue", 1, second),
        },
        scale_down_factor=1.0,
    )
    assert solution.total_length() == pytest.approx(
        first.calculate_total_length() + second.calculate_total_length()
    )
    assert solution.num_vias() == first.num_vias() + second.num_vias() == 1


def test_problem_defaults_are_independent():
    a = PcbProblem(15.0, 15.0, FloatVec2(0.0, 0.0), 1)
    b = PcbProblem(20.0, 20.0, FloatVec2(0.0, 0.0), 2)
    a.obstacle_polygons.append(None)
    assert b.obstacle_polygons == []
    assert a.nets == {} and a.scale_down_factor == 1.0


def test_net_holds_pads_and_connections():
    source = Pad("red_source", FloatVec2(-6.0, 0.0), CirclePadShape(0.6), 0.0, 0.05, PadLayer.FRONT)
    sink = Pad("red_sink1", FloatVec2(-3.0, 5.0), CirclePadShape(0.6), 0.0, 0.05, PadLayer.FRONT)
    connection = Connection("red", 0, source.name, sink.name)
    net = NetInfo(
        "red",
        ColorFloat3(1.0, 0.0, 0.0),
        {source.name: source, sink.name: sink},
        0.5,
        0.05,
        0.8,
        {0: connection},
    )
    problem = PcbProblem(15.0, 15.0, FloatVec2(0.0, 0.0), 1, nets={"red": net})
    stored = problem.nets["red"].connections[0]
    assert stored.start_pad == "red_source"
    assert problem.nets["red"].pads[stored.end_pad].position == FloatVec2(-3.0, 5.0)


def test_fixed_trace_is_immutable():
    trace = FixedTrace("red", 0, make_path([(0, 0), (1, 0)]))
    with pytest.raises(AttributeError):
        trace.net_name = "blue"
    assert trace.net_name == "red"
    assert trace.connection_id == 0
    assert trace.trace_path.calculate_total_length() == pytest.approx(1.0)