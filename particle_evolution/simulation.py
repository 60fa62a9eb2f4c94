"""Charged particles that attract, repel, collide and form bonds."""

from __future__ import annotations

import itertools
import logging
import math
import random
from collections.abc import Iterable

from .components import Bond, Group, Particle, Settings, Vec2

log = logging.getLogger(__name__)

PARTICLE_RADIUS = 3.0
BOND_LENGTH = 12.0
MAX_SPEED = 100.0
GROUP_RADIUS = 100.0
PARTICLES_PER_GROUP = 50

# (name, group charge, particle charge)
SPECIES = (
    ("red", -1, -1),
    ("blue", 1, 1),
    ("green", 2, 2),
    ("yellow", -6, -5),
)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


class World:
    """All groups, particles and bonds, advanced one frame at a time."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or Settings()
        self.groups: dict[int, Group] = {}
        self.particles: dict[int, Particle] = {}
        self.bonds: dict[int, Bond] = {}
        self._ids = itertools.count()

    def add_group(self, name: str, radius: float, charge: int) -> int:
        group_id = next(self._ids)
        self.groups[group_id] = Group(name, radius, charge)
        return group_id

    def add_particle(self, group: int, charge: int, x: float, y: float) -> int:
        if group not in self.groups:
            raise KeyError(f"no group with id {group}")
        particle_id = next(self._ids)
        self.particles[particle_id] = Particle(
            group=group,
            charge=charge,
            position=Vec2(x, y),
            mass=abs(charge),
            positive=charge > 0,
        )
        return particle_id

    def add_bond(self, particle_a: int, particle_b: int, charge: int) -> int:
        """Create a bond; recording it on the particles is left to the caller."""
        for particle in (particle_a, particle_b):
            if particle not in self.particles:
                raise KeyError(f"no particle with id {particle}")
        bond_id = next(self._ids)
        self.bonds[bond_id] = Bond(particle_a, particle_b, charge)
        return bond_id

    def populate(self, rng: random.Random) -> None:
        """Create the four coloured groups and scatter their particles."""
        half_x = self.settings.extents.x / 2.0 - PARTICLE_RADIUS
        half_y = self.settings.extents.y / 2.0 - PARTICLE_RADIUS
        group_ids = [
            self.add_group(name, GROUP_RADIUS, group_charge)
            for name, group_charge, _ in SPECIES
        ]
        for group_id, (_, _, particle_charge) in zip(group_ids, SPECIES):
            for _ in range(PARTICLES_PER_GROUP):
                x = rng.uniform(-half_x, half_x)
                y = rng.uniform(-half_y, half_y)
                self.add_particle(group_id, particle_charge, x, y)

    def interact(self) -> None:
        """Apply pairwise forces, collisions, bond breaking and bond forming.

        Bonds created or removed here only take effect once every pair has
        been visited.
        """
        new_bonds: dict[int, Bond] = {}
        doomed: set[int] = set()
        self._interact_pairs(new_bonds, doomed)
        for bond_id in doomed:
            self.bonds.pop(bond_id, None)
        self.bonds.update(new_bonds)

    def _interact_pairs(self, new_bonds: dict[int, Bond], doomed: set[int]) -> None:
        contact_sq = (PARTICLE_RADIUS * 2.0) ** 2
        overlap_sq = PARTICLE_RADIUS**2
        for (id_a, a), (id_b, b) in itertools.combinations(self.particles.items(), 2):
            radius_a = self.groups[a.group].radius
            radius_b = self.groups[b.group].radius

            force = -((abs(a.charge) + abs(a.charge)) * (_sign(a.charge) * _sign(b.charge)))
            offset = a.position - b.position
            distance_sq = offset.length_squared()

            if distance_sq <= contact_sq:
                if distance_sq < overlap_sq:
                    a.position = a.position - offset * PARTICLE_RADIUS
                    b.position = b.position + offset * PARTICLE_RADIUS
                    a.velocity = a.velocity - offset * 10.0
                    b.velocity = b.velocity + offset * 10.0

                a.velocity = -a.velocity
                b.velocity = -b.velocity

                self._break_bonds(a, b, doomed)
                self._form_bond(id_a, a, id_b, b, new_bonds)

            if id_b in a.bonds:
                return

            if distance_sq > contact_sq:
                pull = force * a.mass / (math.sqrt(distance_sq) * 2.0)
                if distance_sq < radius_a**2:
                    b.velocity = b.velocity + offset * pull
                if distance_sq < radius_b**2:
                    a.velocity = a.velocity + (-offset) * pull

    def _bonds_of(self, particle: Particle) -> Iterable[Bond]:
        for bond_id in particle.bonds:
            bond = self.bonds.get(bond_id)
            if bond is None:
                log.warning("Bond did not exist")
                continue
            yield bond_id, bond

    def _break_bonds(self, a: Particle, b: Particle, doomed: set[int]) -> None:
        for bond_id, bond in self._bonds_of(a):
            if b.charge > bond.charge and a.mass > 1:
                a.charge += bond.charge if a.positive else -bond.charge
                doomed.add(bond_id)
        for bond_id, bond in self._bonds_of(b):
            if a.charge > bond.charge and b.mass > 1 and b.charge > bond.charge:
                a.charge += bond.charge if a.positive else -bond.charge
                doomed.add(bond_id)

    def _form_bond(
        self, id_a: int, a: Particle, id_b: int, b: Particle, new_bonds: dict[int, Bond]
    ) -> None:
        if a.charge == 0 or b.charge == 0 or (a.charge < 0) == (b.charge < 0):
            return
        bond_charge = min(abs(a.charge), abs(b.charge))
        a.charge += -bond_charge if a.charge > 0 else bond_charge
        b.charge += -bond_charge if b.charge > 0 else bond_charge
        log.debug("bond of charge %d leaves charges %d, %d", bond_charge, a.charge, b.charge)
        bond_id = next(self._ids)
        new_bonds[bond_id] = Bond(id_a, id_b, bond_charge)
        a.bonds.append(bond_id)
        b.bonds.append(bond_id)

    def update_bonds(self) -> None:
        """Pull bonded particles to the bond length and place each bond."""
        for bond in self.bonds.values():
            a = self.particles[bond.particle_a]
            b = self.particles[bond.particle_b]
            direction = (a.position - b.position).normalize()
            distance = a.position.distance(b.position)
            if a.mass > b.mass:
                b.position = a.position + direction * BOND_LENGTH
            else:
                a.position = b.position + direction * BOND_LENGTH
            bond.position = a.position.midpoint(b.position)
            bond.length = distance
            bond.angle = direction.to_angle()

    def update_particles(self, dt: float) -> None:
        """Bounce off walls, cap speed, apply friction and move."""
        half = self.settings.extents * 0.5
        damping = (1.0 - self.settings.friction) * dt
        for particle in self.particles.values():
            x, y = particle.position
            vx, vy = particle.velocity
            if x < -half.x:
                x = -half.x + PARTICLE_RADIUS
                vx = -vx
            if x > half.x:
                x = half.x - PARTICLE_RADIUS
                vx = -vx
            if y > half.y:
                y = half.y - PARTICLE_RADIUS
                vy = -vy
            if y < -half.y:
                y = -half.y + PARTICLE_RADIUS
                vy = -vy

            velocity = Vec2(vx, vy).clamp_length_max(MAX_SPEED)
            velocity = velocity - velocity * damping
            particle.velocity = velocity
            particle.position = Vec2(x + velocity.x * dt, y + velocity.y * dt)

    def step(self, dt: float) -> None:
        """Advance one frame of ``dt`` seconds."""
        self.interact()
        self.update_bonds()
        self.update_particles(dt)


def create_world(settings: Settings | None = None, rng: random.Random | None = None) -> World:
    """A populated world."""
    world = World(settings)
    world.populate(rng if rng is not None else random.Random())
    return world