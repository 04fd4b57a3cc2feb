# particle.py
"""
Manages the state of all particles in the field.

This module defines the Particle and Field classes. A Field owns the ordered
list of particles together with the bounds they bounce within, and knows how
to populate itself with randomly placed, randomly moving particles.
"""
import logging
import math
from typing import List, Optional, Sequence

import numpy as np

from constants import (
    PARTICLE_COLORS, PARTICLE_COUNT, PARTICLE_RADIUS, VELOCITY_MAX, VELOCITY_MIN
)

# --- Data Contracts ---
#
# random_int(rng: np.random.Generator, low: int, high: int) -> int:
#   - Outputs: an integer uniformly drawn from [low, high], both inclusive.
#   - Side Effects: advances `rng` by one draw.
#
# class Field:
#   - __init__(self, width: int, height: int, particles: Optional[list] = None)
#   - populate(cls, width, height, rng, count, colors) -> Field:
#     - Outputs: a Field of exactly `count` particles, each with radius
#       PARTICLE_RADIUS, a color from `colors`, a position in
#       [1, width] x [1, height] and velocity components in [-1, 1].
#     - Invariants: particle order is stable for the lifetime of the field.


def random_int(rng: np.random.Generator, low: int, high: int) -> int:
    """Draws an integer from [low, high] inclusive as floor(u * (high - low + 1)) + low."""
    return math.floor(rng.random() * (high - low + 1)) + low


class Delta:
    """Per-tick velocity of a particle."""
    __slots__ = ('x', 'y')

    def __init__(self, x: int, y: int):
        self.x = x
        self.y = y

    def __repr__(self):
        return f"Delta(x={self.x}, y={self.y})"


class Particle:
    """A drifting circle. Position and velocity are mutated in place every tick."""
    __slots__ = ('x', 'y', 'radius', 'color', 'delta')

    def __init__(self, x: float, y: float, radius: float, color: str, delta: Delta):
        self.x = x
        self.y = y
        self.radius = radius
        self.color = color
        self.delta = delta

    def __repr__(self):
        return f"Particle(x={self.x}, y={self.y}, color={self.color!r}, delta={self.delta!r})"


class Field:
    """
    The particles of one animation together with the bounds they move within.
    """
    def __init__(self, width: int, height: int, particles: Optional[List[Particle]] = None):
        self.width = width
        self.height = height
        self.particles = particles if particles is not None else []

    def __len__(self):
        return len(self.particles)

    def __iter__(self):
        return iter(self.particles)

    @classmethod
    def populate(
        cls,
        width: int,
        height: int,
        rng: np.random.Generator,
        count: int = PARTICLE_COUNT,
        colors: Sequence[str] = PARTICLE_COLORS,
    ) -> "Field":
        """
        Creates a field of randomly placed particles.

        Args:
            width (int): Width of the drawing surface.
            height (int): Height of the drawing surface.
            rng (np.random.Generator): Source of all randomness. Seed it to
                make the layout reproducible.
            count (int): Number of particles to create.
            colors (Sequence[str]): Palette to draw particle colors from.

        Returns:
            Field: The populated field.
        """
        particles = []
        for _ in range(count):
            particles.append(Particle(
                x=float(random_int(rng, 1, width)),
                y=float(random_int(rng, 1, height)),
                radius=PARTICLE_RADIUS,
                color=colors[random_int(rng, 0, len(colors) - 1)],
                delta=Delta(
                    random_int(rng, VELOCITY_MIN, VELOCITY_MAX),
                    random_int(rng, VELOCITY_MIN, VELOCITY_MAX),
                ),
            ))

        field = cls(width, height, particles)
        logging.info(f"Field initialized with {count} particles on a {width}x{height} surface.")
        return field

    def mean_speed(self) -> float:
        """Average velocity magnitude across the field, 0.0 for an empty field."""
        if not self.particles:
            return 0.0
        deltas = np.array([(p.delta.x, p.delta.y) for p in self.particles], dtype=np.float64)
        return float(np.mean(np.linalg.norm(deltas, axis=1)))
