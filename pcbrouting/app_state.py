"""Application state: router settings, run statistics and the board preview."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field

from pcbrouting.hyperparameters import (
    HYPERPARAMETERS,
    Hyperparameters,
    astar_stride_from_raw,
)
from pcbrouting.messages import SettingsValue, StatsValue, ValueKind
from pcbrouting.pcb_problem import PcbProblem, PcbSolution
from pcbrouting.render_model import PcbRenderModel, ShapeRenderable

BORDER_COLOR = (1.0, 0.0, 1.0, 1.0)

# Setting name -> (attribute of Hyperparameters, kind of value it holds).
_HYPERPARAMETER_SETTINGS: dict[str, tuple[str, ValueKind]] = {
    "astar_max_expansions": ("astar_max_expansions", ValueKind.USIZE),
    "trace_score_halved": ("half_probability_raw_score", ValueKind.FLOAT),
    "opportunity_cost_halved": ("half_probability_opportunity_cost", ValueKind.FLOAT),
    "max_trace_generation_attempts": ("max_generation_attempts", ValueKind.USIZE),
    "first_iteration_prior_probability": ("first_iteration_probability", ValueKind.FLOAT),
    "second_iteration_prior_probability": ("second_iteration_probability", ValueKind.FLOAT),
    "second_iteration_num_traces": ("second_iteration_num_traces", ValueKind.USIZE),
    "via_cost": ("via_cost", ValueKind.FLOAT),
    "num_top_ranked_to_try": ("num_top_ranked_to_try", ValueKind.USIZE),
    "sample_iterations": ("sample_iterations", ValueKind.USIZE),
    "update_probability_skip_stride": ("update_proba_skip_stride", ValueKind.USIZE),
}

_USE_BAYESIAN = "use_bayesian_inference"
_ASTAR_STRIDE = "astar_stride"


def _default_hyperparameters() -> Hyperparameters:
    return HYPERPARAMETERS


@dataclass
class AppState:
    """Settings the user can change and statistics of the last routing run."""

    hyperparameters: Hyperparameters = field(default_factory=_default_hyperparameters)
    use_bayesian: bool = True
    total_length: float = 0.0
    num_vias: int = 0
    time_elapsed: float = 0.0
    _lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)

    def get_setting(self, name: str) -> SettingsValue:
        """Current value of a setting; raises KeyError for an unknown name."""
        with self._lock:
            if name == _USE_BAYESIAN:
                return SettingsValue(ValueKind.BOOL, self.use_bayesian)
            if name == _ASTAR_STRIDE:
                return SettingsValue(
                    ValueKind.FLOAT, self.hyperparameters.astar_stride.to_float()
                )
            try:
                attribute, kind = _HYPERPARAMETER_SETTINGS[name]
            except KeyError:
                raise KeyError(f"Unknown setting: {name}") from None
            return SettingsValue(kind, getattr(self.hyperparameters, attribute))

    def set_setting(self, name: str, value: SettingsValue) -> None:
        """Change a setting.

        Raises KeyError for an unknown name and TypeError when the value is
        of the wrong kind for the setting.
        """
        if not isinstance(value, SettingsValue):
            raise TypeError("Invalid value type")
        with self._lock:
            if name == _USE_BAYESIAN:
                kind = ValueKind.BOOL
            elif name == _ASTAR_STRIDE:
                kind = ValueKind.FLOAT
            elif name in _HYPERPARAMETER_SETTINGS:
                attribute, kind = _HYPERPARAMETER_SETTINGS[name]
            else:
                raise KeyError(f"Unknown setting: {name}")
            if value.kind is not kind:
                raise TypeError("Invalid value type")
            if name == _USE_BAYESIAN:
                self.use_bayesian = value.value
            elif name == _ASTAR_STRIDE:
                self.hyperparameters.astar_stride = astar_stride_from_raw(value.value)
            else:
                setattr(self.hyperparameters, attribute, value.value)

    def get_stat(self, name: str) -> StatsValue:
        """A statistic of the last run; raises KeyError for an unknown name."""
        with self._lock:
            stats = {
                "total_length": StatsValue(ValueKind.FLOAT, self.total_length),
                "num_vias": StatsValue(ValueKind.USIZE, self.num_vias),
                "time_elapsed": StatsValue(ValueKind.FLOAT, self.time_elapsed),
                "num_bayesian_path_finding_calls": StatsValue(
                    ValueKind.USIZE, self.hyperparameters.num_bayesian_path_finding_calls
                ),
                "num_naive_path_finding_calls": StatsValue(
                    ValueKind.USIZE, self.hyperparameters.num_naive_path_finding_calls
                ),
            }
        try:
            return stats[name]
        except KeyError:
            raise KeyError(f"Unknown stat: {name}") from None

    def record_solution(self, solution: PcbSolution, elapsed_seconds: float) -> None:
        """Store the statistics of a finished routing run."""
        if elapsed_seconds < 0:
            raise ValueError("elapsed time must not be negative")
        total_length = solution.total_length()
        num_vias = solution.num_vias()
        with self._lock:
            self.time_elapsed = float(elapsed_seconds)
            self.total_length = total_length
            self.num_vias = num_vias


def render_pcb(problem: PcbProblem) -> PcbRenderModel:
    """A preview of the unrouted board: every pad with its clearance, and the board outline."""
    pad_renderables: list[ShapeRenderable] = []
    for net in problem.nets.values():
        for pad in net.pads.values():
            pad_renderables.extend(pad.to_renderables(net.color.to_float4(1.0)))
            pad_renderables.extend(pad.to_clearance_renderables(net.color.to_float4(0.5)))
    other_renderables = [
        ShapeRenderable(line, BORDER_COLOR) for line in problem.obstacle_border_outlines
    ]
    return PcbRenderModel(
        width=problem.width,
        height=problem.height,
        center=problem.center,
        trace_shape_renderables=[],
        pad_shape_renderables=pad_renderables,
        other_shape_renderables=other_renderables,
    )