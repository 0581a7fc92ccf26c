"""Tunable parameters of the router."""

from __future__ import annotations

from dataclasses import dataclass, field

from pcbrouting.color import ColorFloat3
from pcbrouting.vec2 import FixedPoint

LAYER_TO_TRACE_COLOR: tuple[ColorFloat3, ...] = (
    ColorFloat3(1.0, 0.0, 0.0),  # front
    ColorFloat3(0.0, 0.0, 1.0),  # back
    ColorFloat3(1.0, 1.0, 0.0),
    ColorFloat3(0.0, 1.0, 0.0),
    ColorFloat3(1.0, 0.0, 1.0),
    ColorFloat3(0.0, 1.0, 1.0),
)


def astar_stride_from_raw(raw_stride: float) -> FixedPoint:
    """Convert a stride to fixed point, bumping it up one step if its raw value is odd."""
    result = FixedPoint.from_num(raw_stride)
    if result.to_bits() & 1:
        result += FixedPoint.DELTA
    return result


def _default_stride() -> FixedPoint:
    return astar_stride_from_raw(1.0)


@dataclass
class Hyperparameters:
    """Router settings and call counters, with their default values."""

    half_probability_raw_score: float = 10.0
    half_probability_opportunity_cost: float = 0.5
    max_generation_attempts: int = 4
    first_iteration_probability: float = 0.8
    second_iteration_probability: float = 0.6
    first_iteration_num_traces: int = 1
    second_iteration_num_traces: int = 3
    astar_max_expansions: int = 3000
    via_cost: float = 5.0
    num_top_ranked_to_try: int = 3
    sample_iterations: int = 2
    update_proba_skip_stride: int = 2
    astar_stride: FixedPoint = field(default_factory=_default_stride)
    num_bayesian_path_finding_calls: int = 0
    num_naive_path_finding_calls: int = 0


#: Parameters shared by the whole process.
HYPERPARAMETERS = Hyperparameters()