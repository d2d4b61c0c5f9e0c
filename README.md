# astrocel

Small building blocks for orbital mechanics and spaceflight simulation. The
package needs nothing outside the Python standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### Dynamics and integration

- `astrocel.odes`
  - `State`: a frozen dataclass that holds `position` and `velocity` as
    `(x, y, z)` tuples. It supports `+`, multiplication by a number from
    either side, and division by a number, so it can be used as an
    integrator state.
  - `NewtonianTwoBody(central_mass, gravitational_constant=6.67430e-11)`:
    calling it as `f(state, t)` returns the time derivative of the state
    under point-mass gravity. Closer than `1e-12` to the centre, the
    acceleration is zero.
- `astrocel.integrators`
  - `rk4_step(state, t, dt, f)` returns the state after one fourth-order
    Runge-Kutta step.
  - `symplectic_euler_step(position, velocity, acceleration, dt)` returns the
    new `(position, velocity)`. The position is advanced with the velocity it
    had before the step.
- `astrocel.clock`
  - `Clock(time_source=time.perf_counter)`: `update_delta_time()` measures
    the seconds since the previous update, stores them in `delta_time` and
    returns them. `time_scale` is a plain attribute and starts at `0.0`.

### Space and reference frames

- `astrocel.spaceutils`: vectors are `(x, y, z)` and quaternions are
  `(w, x, y, z)`.
  - `to_simulation_space`, `to_render_space_position` and
    `to_render_space_scale` take the simulation scale as an explicit
    argument.
  - `renderable_scale` clamps a scale to at least `0.1`.
  - `euler_angles_to_quat` and `quat_to_euler_angles` work in degrees unless
    told to use radians.
  - `quat_multiply`, `quat_normalize` and `quat_rotate` are quaternion
    helpers. `quat_normalize` turns a zero quaternion into the identity.
- `astrocel.refframes`
  - `Transform` and `ReferenceFrame` are dataclasses. A frame holds
    `parent_id`, `scale`, `visual_scale`, `local_transform` and
    `global_transform`.
  - `ReferenceFrameSystem(frames, names=None)` works on a mapping of entity
    IDs to frames, holding it by reference. `sort_frame_tree()` orders the
    frames so that every parent comes before its children.
    `compute_global_transforms()` combines each frame's local transform with
    its parent's global transform. `update_all_frames()` sorts the frames
    once and then computes the transforms. Call `invalidate()` after you add
    frames or change a parent. The computed order is available as `order`.
  - A cycle in the parent links raises `CyclicFrameError`. A parent without a
    frame raises `KeyError`.

### Colours and layout

- `astrocel.colors`: `srgb_channel_to_linear`, `srgb_to_linear` and
  `srgb_gray_to_linear` convert sRGB colours to linear space.
  `message_type_color` gives the display colour for each `MessageType`.
- `astrocel.appearance`: `Appearance` (dark or light), `appearance_name`,
  the `ThemeColors` dataclass, `dark_theme_colors()`,
  `light_theme_colors()` and `theme_colors(appearance)`.
- `astrocel.layout`: layout arithmetic for panels.
  - `resize_image_preserve_aspect_ratio` fits an image into a viewport.
  - `aligned_offset` gives the offset for `Alignment.MIDDLE` or
    `Alignment.RIGHT`; the result is never negative.
  - `available_width`, `bottom_button_area_height` and `icon_string`.

### Files and system helpers

- `astrocel.filepaths`
  - `exec_dir`, `join_paths`, `parent_directory` (the file must exist),
    `file_name` and `file_extension`.
  - `read_file(file_path, working_directory="")` returns the file's bytes.
    When a working directory is given, the path is read relative to it.
- `astrocel.sysutils`
  - `combine_hash` gives a 64-bit mixed hash.
  - `align` rounds up to a power-of-two alignment. Any other alignment raises
    `ValueError`.
  - `aligned_buffer_offset` and `generate_random_string` (alphanumeric).
- `astrocel.yamlrefs`: helpers for scene documents that are already parsed
  into mappings.
  - `component_data` returns the `Data` entry and raises `KeyError` if it is
    missing.
  - `is_reference` checks for the `ref.` prefix.
  - `reference_substring` strips that prefix.

## Example

```python
from astrocel.integrators import rk4_step
from astrocel.odes import NewtonianTwoBody, State

earth = NewtonianTwoBody(central_mass=5.972e24)
state = State(position=(7.0e6, 0.0, 0.0), velocity=(0.0, 7546.0, 0.0))

t, dt = 0.0, 1.0
for _ in range(60):
    state = rk4_step(state, t, dt, earth)
    t += dt
print(state.position)
```

## What it does not do

This is a library only. It has:

- no command-line program;
- no window, renderer or interactive user interface. The theme and layout
  modules compute colours and sizes but draw nothing;
- no loader or saver for scene files. `astrocel.yamlrefs` works on documents
  you have already parsed yourself, and the package contains no YAML parser.