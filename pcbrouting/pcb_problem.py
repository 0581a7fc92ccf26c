"""A board to route, and the traces chosen for it."""

from __future__ import annotations

from dataclasses import dataclass, field

from pcbrouting.collider import BorderCollider, PolygonCollider
from pcbrouting.color import ColorFloat3
from pcbrouting.pad import Pad
from pcbrouting.shapes import Line
from pcbrouting.trace_path import TracePath
from pcbrouting.vec2 import FloatVec2


@dataclass(frozen=True)
class Connection:
    """A pair of pads in one net that must be joined by a trace."""

    net_name: str
    connection_id: int
    start_pad: str
    end_pad: str


@dataclass
class NetInfo:
    """A net: its pads, the trace parameters it uses and its connections by id."""

    net_name: str
    color: ColorFloat3
    pads: dict[str, Pad] = field(default_factory=dict)
    trace_width: float = 0.0
    trace_clearance: float = 0.0
    via_diameter: float = 0.0
    connections: dict[int, Connection] = field(default_factory=dict)


@dataclass
class PcbProblem:
    """A board centred on center, with layer 0 at the front and num_layers - 1 at the back."""

    width: float
    height: float
    center: FloatVec2
    num_layers: int
    obstacle_borders: list[BorderCollider] = field(default_factory=list)
    obstacle_border_outlines: list[Line] = field(default_factory=list)
    obstacle_polygons: list[PolygonCollider] = field(default_factory=list)
    nets: dict[str, NetInfo] = field(default_factory=dict)
    scale_down_factor: float = 1.0


@dataclass(frozen=True)
class FixedTrace:
    """A trace that has been settled for one connection."""

    net_name: str
    connection_id: int
    trace_path: TracePath


@dataclass
class PcbSolution:
    """The settled traces, keyed by connection id."""

    determined_traces: dict[int, FixedTrace] = field(default_factory=dict)
    scale_down_factor: float = 1.0

    def total_length(self) -> float:
        return sum(
            trace.trace_path.calculate_total_length()
            for trace in self.determined_traces.values()
        )

    def num_vias(self) -> int:
        return sum(trace.trace_path.num_vias() for trace in self.determined_traces.values())