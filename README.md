# pcbrouting

Building blocks for a printed circuit board auto-router: 16.16 fixed-point
and floating-point vectors, primitive shapes, separating-axis collision
tests, pads, the eight routing directions, trace paths with vias, render
models, tunable routing settings and the statistics of a routing run.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `pcbrouting.vec2` – `FixedPoint` (signed 16.16 fixed point with
  arithmetic, `from_num`, `from_bits`, `to_bits`, `sqrt`; values outside the
  range raise `OverflowError`), `FixedVec2`, `FloatVec2` (`dot`, `perp`,
  `normalize`, `length`, `to_dict` / `from_dict`) and `IntVec2`.
- `pcbrouting.heap_item` – `BinaryHeapItem`, a key/value pair that compares
  by its key only, for use with `heapq`.
- `pcbrouting.color` – `ColorFloat3`, `hsv_to_rgb` and
  `DistinctColorGenerator`, an endless iterator of colours whose hues are
  spread by the golden ratio.
- `pcbrouting.octile_distance` – `octile_distance_float` and
  `octile_distance_fixed`.
- `pcbrouting.shapes` – `CircleShape`, `RectangleShape`, `Line`, with
  `shape_to_dict` / `shape_from_dict` (a one-key mapping tagged `Circle`,
  `Rectangle` or `Line`).
- `pcbrouting.messages` – `MyResult` (`{"Ok": ...}` / `{"Err": ...}`),
  `ValueKind`, `SettingsValue`, `StatsValue`, `GetSettingsArg`,
  `SetSettingsArg` and `StatsArgs`.
- `pcbrouting.render_model` – `ShapeRenderable`, `RenderableBatch`,
  `PcbRenderModel`, each with `to_dict`.
- `pcbrouting.collider` – `CircleCollider`, `PolygonCollider`,
  `BorderCollider`, `rectangle_to_polygon`, `collider_from_shape` and
  `collides`. Testing two borders against each other raises `ValueError`.
- `pcbrouting.pad` – `Pad`, its shapes (`CirclePadShape`,
  `RectanglePadShape`, `RoundRectPadShape`) and `PadLayer` with
  `layers(num_layers)`. A rounded rectangle becomes two crossing rectangles
  and four corner circles.
- `pcbrouting.hyperparameters` – `Hyperparameters` with its defaults, the
  process-wide `HYPERPARAMETERS`, `LAYER_TO_TRACE_COLOR` and
  `astar_stride_from_raw`, which bumps an odd raw stride up by one step.
- `pcbrouting.direction` – `Direction`, the eight routing directions, with
  rotations, angle relations and `from_points`, which returns `None` for
  coincident points and raises `ValueError` for points not on a horizontal,
  vertical or 45-degree line.
- `pcbrouting.trace_path` – `TraceAnchor`, `TraceSegment`, `Via` and
  `TracePath`, with lengths, score, per-layer shapes and colliders, clearance
  collision checks and renderables.
- `pcbrouting.pcb_problem` – `PcbProblem`, `NetInfo`, `Connection`,
  `FixedTrace` and `PcbSolution` (`total_length`, `num_vias`).
- `pcbrouting.app_state` – `AppState` for reading and changing settings by
  name and for the statistics of a run, and `render_pcb`, which turns a
  problem into a preview render model of its pads, pad clearances and board
  outline.

## Example

```python
from pcbrouting.vec2 import FloatVec2
from pcbrouting.trace_path import TraceAnchor, TracePath

anchors = [
    TraceAnchor(FloatVec2(0.0, 0.0).to_fixed(), 0, 0),
    TraceAnchor(FloatVec2(3.0, 0.0).to_fixed(), 0, 1),
    TraceAnchor(FloatVec2(3.0, 4.0).to_fixed(), 1, 1),
]
path = TracePath.from_anchors(anchors, trace_width=0.5,
                              trace_clearance=0.1, via_diameter=0.8)
print(path.calculate_total_length())  # 7.0
print(path.num_vias())                # 1
print(path.get_score())               # halves every 10.0 units of length by default
```

Settings are read and written by name through `AppState`:

```python
from pcbrouting.app_state import AppState
from pcbrouting.messages import SettingsValue

state = AppState()
state.set_setting("via_cost", SettingsValue.from_dict({"Float": 3.0}))
print(state.get_setting("via_cost").as_float())  # 3.0
```

The setting names are `use_bayesian_inference`, `astar_max_expansions`,
`astar_stride`, `trace_score_halved`, `opportunity_cost_halved`,
`max_trace_generation_attempts`, `first_iteration_prior_probability`,
`second_iteration_prior_probability`, `second_iteration_num_traces`,
`via_cost`, `num_top_ranked_to_try`, `sample_iterations` and
`update_probability_skip_stride`. An unknown name raises `KeyError`; a value
of the wrong kind raises `TypeError`. By default an `AppState` works on the
shared `HYPERPARAMETERS`, so its changes are seen by everything that reads
them, including `TracePath.get_score`.

`get_stat` offers `total_length`, `num_vias`, `time_elapsed`,
`num_bayesian_path_finding_calls` and `num_naive_path_finding_calls`;
`record_solution(solution, elapsed_seconds)` stores the first three from a
`PcbSolution`.

## What this package does not do

It models boards, traces and settings but does not route them: there is no
path search or solver that produces a `PcbSolution`, no reader for board
design files and no writer for routed session files. It has no command-line
program, no window or viewer and no event loop; `render_pcb` and the
`to_dict` methods produce data for a viewer to draw, but nothing here draws
it.