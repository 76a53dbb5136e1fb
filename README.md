# flock3d

A three-dimensional boids flocking simulation. Boids fly inside a box, steered
by four rules (separation, alignment, cohesion and edge avoidance), and a
control panel beside the 3D view lets you tune the flock while it runs.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Running

```
flock3d
```

By default this opens a full-screen window of 2560 x 1440. The flock is drawn
on the left and the control panel, 700 pixels wide, is on the right. The
frame rate is shown in the top-left corner, and "PAUSED" appears in the
middle of the view while the simulation is paused.

Options:

- `--seed N` seeds the random placement of the boids.
- `--windowed` opens a resizable window instead of going full screen.
- `--width N` and `--height N` set the window size.
- `--frames N` stops after N frames.

### Controls

- **P** pauses and resumes the simulation.
- **Esc**, or closing the window, quits.
- The panel sliders set the number of boids (1 to 1000), maximum speed,
  perception radius, separation radius, edge margin, and the weights of the
  separation, alignment, cohesion and edge-avoidance rules. Click or drag a
  slider to change its value.
- Check boxes turn each rule on and off, and turn camera auto-rotation on
  and off. While auto-rotation is on, the camera orbits the box.
- Buttons reset the flock, pause or resume it, and exit the application.

## Using the library

`flock3d.simulation` does not import pygame, so the flock can be run and
inspected without a display:

```python
from flock3d.simulation import Simulation

sim = Simulation(seed=42)
sim.set_boid_count(250)
for _ in range(100):
    sim.update()

for boid in sim.active_boids():
    print(boid.position, boid.velocity)
```

The main pieces are:

- `flock3d.vector.Vec3`: an immutable 3D vector supporting `+`, `-` and
  scaling by a number, with `length`, `length_sqr`, `normalized`,
  `distance_sqr` and `limited`.
- `flock3d.boid.Boid`: a single boid. `Boid.spawn` places it at random inside
  the box's margins, `apply_force` adds steering, and `step` moves it and keeps
  it inside the box. `avoid_edges` computes the force that turns it away from
  the walls.
- `flock3d.grid.SpatialGrid`: a uniform grid of boid indices. `rebuild` fills
  it and `neighbors` yields `(boid, distance_squared)` pairs from the 3x3x3
  block of cells around a boid.
- `flock3d.rules`: the `separation`, `alignment` and `cohesion` steering
  forces.
- `flock3d.simulation.Simulation`: the whole flock, its tunable parameters,
  `update`, `reset`, `set_boid_count` and `toggle_pause`.
- `flock3d.render.Camera` and `draw_scene`: a perspective camera and the
  drawing of the box and the boids onto a pygame surface.
- `flock3d.gui.ControlPanel` and `panel_rect`: the control panel, which takes
  pygame mouse events with `handle_event` and draws itself with `draw`.
- `flock3d.app.main`: the entry point behind the `flock3d` command.

After you change `perception_radius` or `separation_radius` on a
`Simulation` yourself, call `update_squared_radii()` so that the rules and
the grid follow the new values. The grid's cell size follows the perception
radius.

## Limitations

The 3D view is drawn in software with pygame: the box is a wireframe and each
boid is a flat triangle pointing along its velocity, with no lighting or
depth buffer. The camera can only orbit automatically; there is no mouse or
keyboard control of it.