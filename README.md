# particle_evolution

A small 2D sandbox of charged particles. Each particle belongs to a coloured
group and carries an integer charge. Particles pull on or push away from one
another depending on their charges and on the distance between them, within
their group's interaction radius. Particles that touch bounce off each other.
If their charges have opposite signs they bond, and the bond takes the smaller
of the two charge magnitudes from each particle. After that the bond holds its
two particles at a fixed distance from each other. Particles also bounce off
the walls of the world, their speed is capped, and friction slows them down.

## Installing

```
pip install .
```

pygame draws the window and is installed with the package.

## Running

```
particle-evolution
```

This opens a 1280×720 window with four groups of fifty particles each, placed
at random: red (charge −1), blue (+1), green (+2) and yellow (−5). Bonds are
drawn as white lines between the particles they join. Close the window to quit.

Options:

- `--seed N` seeds the random placement, so a run can be repeated.
- `--frames N` stops after `N` frames. The default `0` runs until the window is
  closed. A negative value is rejected.

`python -m particle_evolution.app` runs the same program.

## Using the simulation from code

The simulation does not need a display:

```python
import random

from particle_evolution.components import Settings
from particle_evolution.simulation import create_world

world = create_world(Settings(), random.Random(42))
for _ in range(600):
    world.step(1 / 60)
```

`particle_evolution.components` holds the value types:

- `Vec2` is an immutable 2D vector with arithmetic, `length`, `normalize`,
  `clamp_length_max`, `distance`, `midpoint` and `to_angle`.
- `Group`, `Particle` and `Bond` are plain records.
- `Settings` holds the world extents and the friction. The defaults are
  1280×720 and 0.01.

`particle_evolution.simulation.World` holds the groups, particles and bonds in
dictionaries keyed by integer ids. To set up your own arrangement, use
`add_group`, `add_particle` and `add_bond`. Use `populate(rng)` to add the
standard groups, or `create_world(settings, rng)` to get a new world that is
already populated.

Each call to `World.step(dt)` runs three stages in turn:

1. `interact` handles pairwise forces, collisions, bond breaking and bond
   forming.
2. `update_bonds` pulls bonded particles back to the bond length and records
   where each bond is placed.
3. `update_particles(dt)` handles the walls, the speed cap, friction and
   movement.

`particle_evolution.app.to_screen(position, extents)` converts a world
position into window pixel coordinates. World positions have their origin at
the centre of the window and y pointing up.

## What it does not do

The window only shows the simulation. It has no controls apart from closing
it. A world cannot be saved or loaded, and the number of groups, their charges
and their particle counts cannot be changed from the command line. To set up a
different arrangement, build it with `World` from code.

## Tests

```
pip install .[test]
pytest
```