"""Window that runs and draws the particle simulation."""

from __future__ import annotations

import argparse
import colorsys
import math
import random
from collections.abc import Sequence

import pygame

from .components import Settings, Vec2
from .simulation import PARTICLE_RADIUS, World, create_world

TITLE = "Particle Evolution"
FRAMES_PER_SECOND = 60
BACKGROUND = (43, 44, 47)
WHITE = (255, 255, 255)


def _hsl(hue: float, saturation: float, lightness: float) -> tuple[int, int, int]:
    r, g, b = colorsys.hls_to_rgb(hue / 360.0, lightness, saturation)
    return round(r * 255), round(g * 255), round(b * 255)


GROUP_COLORS = {
    "red": _hsl(0.0, 1.0, 0.5),
    "blue": _hsl(240.0, 1.0, 0.5),
    "green": _hsl(100.0, 1.0, 0.5),
    "yellow": _hsl(60.0, 1.0, 0.5),
}


def to_screen(position: Vec2, extents: Vec2) -> tuple[float, float]:
    """Map world coordinates (origin centred, y up) to window pixels."""
    return position.x + extents.x / 2.0, extents.y / 2.0 - position.y


def _finite(point: tuple[float, float]) -> bool:
    return all(math.isfinite(c) for c in point)


def _draw(surface: pygame.Surface, world: World) -> None:
    extents = world.settings.extents
    surface.fill(BACKGROUND)
    for bond in world.bonds.values():
        half = Vec2(math.cos(bond.angle), math.sin(bond.angle)) * (bond.length / 2.0)
        start = to_screen(bond.position - half, extents)
        end = to_screen(bond.position + half, extents)
        if _finite(start) and _finite(end):
            pygame.draw.line(surface, WHITE, start, end)
    for particle in world.particles.values():
        centre = to_screen(particle.position, extents)
        if _finite(centre):
            color = GROUP_COLORS.get(world.groups[particle.group].name, WHITE)
            pygame.draw.circle(surface, color, centre, PARTICLE_RADIUS)


def _parse(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="particle-evolution", description=TITLE)
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument(
        "--frames", type=int, default=0, help="stop after this many frames (0: run until closed)"
    )
    args = parser.parse_args(argv)
    if args.frames < 0:
        parser.error("--frames must not be negative")
    return args


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse(argv)
    settings = Settings()
    world = create_world(settings, random.Random(args.seed))

    pygame.init()
    try:
        surface = pygame.display.set_mode((int(settings.extents.x), int(settings.extents.y)))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        dt = 0.0
        frame = 0
        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            world.step(dt)
            _draw(surface, world)
            pygame.display.flip()
            dt = clock.tick(FRAMES_PER_SECOND) / 1000.0
            frame += 1
            if args.frames and frame >= args.frames:
                running = False
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())