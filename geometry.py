# geometry.py
"""
Distance and neighbor lookups used by the line pass.
"""
import math
from typing import List, Sequence

from particle import Particle


def distance(x1: float, y1: float, x2: float, y2: float) -> float:
    """Euclidean distance between (x1, y1) and (x2, y2)."""
    return math.sqrt((x2 - x1) ** 2 + (y2 - y1) ** 2)


def find_nearest(particles: Sequence[Particle], x: float, y: float, radius: float) -> List[Particle]:
    """
    Finds the particles within `radius` of the point (x, y).

    A particle only qualifies if its x differs from `x` AND its y differs
    from `y`. This keeps the particle at the query point out of its own
    neighbor list, but it also hides any other particle that happens to
    share one coordinate with the query. That behavior is inherited and
    kept as is; do not replace it with an identity check without a bug
    report asking for it.

    This is a linear scan. The tick calls it once per particle, which is
    quadratic per frame and fine for a couple of hundred particles.

    Args:
        particles (Sequence[Particle]): Particles to search, in field order.
        x (float): X coordinate of the query point.
        y (float): Y coordinate of the query point.
        radius (float): Exclusive upper bound on the distance.

    Returns:
        List[Particle]: Matching particles in input order.
    """
    nearest = []
    for particle in particles:
        if particle.x != x and particle.y != y:
            if distance(x, y, particle.x, particle.y) < radius:
                nearest.append(particle)
    return nearest
