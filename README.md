# quadkit

Small, dependency-free building blocks for writing games in Python. Nothing
here opens a window or talks to a GPU; the package computes values and keeps
state that a renderer or window layer of your choice can use.

## Modules

- `quadkit.color`: the frozen `Color` dataclass (components 0..1) with
  `Color.from_rgba`, `Color.from_bytes`, `to_bytes` and `to_tuple`; the
  `color_u8` helper; `hsl_to_rgb` and `rgb_to_hsl`; and named constants such
  as `RED`, `WHITE`, `BLACK` and `BLANK`.
- `quadkit.vector`: immutable `Vec2` and `Vec3` with arithmetic, plus
  `polar_to_cartesian`, `cartesian_to_polar` and `clamp`.
- `quadkit.rect`: `Rect` (top-left corner, width, height) with `contains`,
  `overlaps`, `combine_with`, `intersect`, `offset` and friends, and
  `RectOffset`.
- `quadkit.circle`: `Circle` with `contains`, `overlaps` and `overlaps_rect`.
- `quadkit.shapes`: functions such as `line`, `rectangle`, `rectangle_lines`,
  `rectangle_ex`, `triangle`, `poly`, `circle` and `hexagon` that return lists
  of `Geometry` batches (vertices, indices and a `DrawMode`).
- `quadkit.shader`: `preprocess_shader` expands `#include "name"` directives
  from a `PreprocessorConfig`; an unknown name raises `IncludeNotFoundError`.
- `quadkit.input`: `InputState`, fed by window event callbacks, answers
  questions such as `is_key_pressed`, `is_mouse_button_down`,
  `mouse_position` and `touches`; `end_frame` clears per-frame state.
  Subscribers registered with `register_input_subscriber` receive recorded
  `InputEvent`s through `drain_input_events`.
- `quadkit.files`: `load_file` and `load_string`, optionally relative to a
  folder set with `set_pc_assets_folder`; failures raise `FileError`.
- `quadkit.generational`: `GenerationalStorage`, slot storage whose
  `GenerationalId`s go stale once their slot is freed.
- `quadkit.storage`: `TypeStorage`, holding one value per type, and the
  module-level `store`, `get` and `try_get` over a shared instance.
- `quadkit.animation`: `AnimatedSprite` steps through `Animation` rows of a
  sprite sheet and reports the current `AnimationFrame`.
- `quadkit.mouse_camera`: `MouseCamera`, panned by mouse movement and zoomed
  around a point.
- `quadkit.telemetry`: `Profiler` records nested timing `Zone`s per `Frame`
  and logs strings, with `zone` and `log_time` context managers.

## Example

```python
from quadkit.circle import Circle
from quadkit.color import Color
from quadkit.input import InputState
from quadkit.rect import Rect
from quadkit.shader import PreprocessorConfig, preprocess_shader
from quadkit.shapes import rectangle
from quadkit.vector import Vec2

player = Rect(10, 10, 32, 32)
ball = Circle(40, 20, 8)
print(ball.overlaps_rect(player))      # True
print(player.contains(Vec2(20, 20)))   # True

batches = rectangle(0, 0, 100, 50, Color.from_rgba(255, 0, 0, 255))
print(batches[0].indices)              # (0, 1, 2, 0, 2, 3)

state = InputState()
state.key_down_event("space")
print(state.is_key_pressed("space"))   # True
state.end_frame()
print(state.is_key_pressed("space"))   # False
print(state.is_key_down("space"))      # True

config = PreprocessorConfig(includes=[("common.glsl", "float k;")])
print(preprocess_shader('#include "common.glsl"\nvoid main() {}', config))
```

## What it does not do

quadkit has no frame loop, no coroutine scheduler, no scene graph of nodes
and no state-machine helper. It does not draw anything either: the shape
functions only return geometry, and `InputState` only records the events you
pass to it.

## Running the tests

```
pip install -e .[test]
pytest
```