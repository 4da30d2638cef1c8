# gorobot

A small 2D simulation. Round objects move in a straight line across a
gridded world and bounce off its edges, while a clock in the corner
counts down the run time. Drawing is done with pygame.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## The environment file

The world's size is read from a plain text file of whitespace-separated
integers, `env.txt` by default. The first number is the width, the
second the height:

```
800 600
```

Reading stops at the first token that is not an integer, and at most
512 numbers are read. A file with fewer than two numbers raises
`ValueError`. Numbers after the first two are kept in
`EnvConfig.values` (and can be looked up with `EnvConfig.value(index)`)
but do not change how the simulation runs. The simulation always starts
with one object (`EnvConfig.num_objects`).

## Running

```
gorobot
```

This prints `Entering main`, reads `env.txt` from the current directory,
opens a window and runs the simulation until the window is closed or F1
is pressed, then prints `Leaving main`. A different file can be named on
the command line:

```
gorobot path/to/env.txt
```

The window is opened with the height as its horizontal size and the
width as its vertical size; the objects bounce within the width and
height as read from the file.

The clock is divided into 60 ticks over 60 seconds and fills in red as
the ticks pass. Once all the ticks have passed it flashes between black
and white every half second.

## Using it from Python

- `gorobot.envfile.parse_env(text)` and `gorobot.envfile.read_env(path)`
  turn an environment file into an `EnvConfig`.
- `gorobot.simulation.Simulation(config, clock=None, rng=None)` holds the
  objects, the managers and the timers. `init()`, `update(surface=None)`
  and `shutdown()` drive it one frame at a time; without a surface,
  `update` moves the objects and draws nothing, so it can be stepped
  without opening a window. After 60 seconds its `you_lose` flag is set.
- `gorobot.simulation.run(config)` opens a pygame window and runs the
  loop; `gorobot.simulation.main(argv=None)` is the `gorobot` command.
- `gorobot.objects.SimObject`, `ObjectMover` and `World` are the actors
  and their behaviour. A `SimObject` starts at (1, 2) with radius 10 and
  a random heading; its `ObjectMover` moves it at 30 units per second.
- `gorobot.actor.Actor` holds position, size, heading and motion;
  `normalize_angle` keeps headings within [-360, 360].
- `gorobot.managers.ComponentManager` and `RenderManager` keep the
  ordered lists of things to update and to draw; `ComponentObject` and
  `RenderObject` are their base classes.
- `gorobot.render` draws objects, the grid (`grid_lines`,
  `WorldRenderer`) and the clock (`draw_visible_timer`).
- `gorobot.timing.Timer` and `VisibleTimer` measure frame time and the
  countdown clock; both take a clock function returning milliseconds, so
  they can be driven by a fake one.

## What it does not do

Objects do not collide with one another, only with the edges of the
world. Nothing is shown on screen when the time runs out beyond the
flashing clock, and there is no win condition: `you_win` is never set.
`Simulation` does not add a `World` grid to the scene by itself.