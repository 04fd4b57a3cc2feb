"""Unit tests for particles and field initialization."""

import numpy as np
import pytest

from constants import PARTICLE_COLORS, PARTICLE_COUNT, PARTICLE_RADIUS
from conftest import make_particle
from particle import Field, random_int


class SequenceRng:
    """Stand-in for a Generator that returns preset uniform draws."""

    def __init__(self, values):
        self._values = iter(values)

    def random(self):
        return next(self._values)


class TestRandomInt:
    """Tests for random_int."""

    def test_bounds_inclusive(self, rng):
        """Draws cover both ends of the range and nothing outside it."""
        draws = {random_int(rng, -1, 1) for _ in range(500)}
        assert draws == {-1, 0, 1}

    def test_formula(self):
        """The draw is floor(u * (high - low + 1)) + low."""
        rng = SequenceRng([0.0, 0.3333, 0.3334, 0.9999])
        assert [random_int(rng, -1, 1) for _ in range(4)] == [-1, -1, 0, 1]

    def test_single_value_range(self, rng):
        assert random_int(rng, 7, 7) == 7


class TestField:
    """Tests for Field."""

    def test_populate_default_count(self, rng):
        """A populated field has the configured number of particles."""
        field = Field.populate(1024, 768, rng)
        assert len(field) == PARTICLE_COUNT

    def test_populate_particle_properties(self, rng):
        """Every particle starts inside the surface with palette color and small velocity."""
        width, height = 640, 480
        field = Field.populate(width, height, rng, count=300)

        assert len(field) == 300
        for particle in field:
            assert particle.radius == PARTICLE_RADIUS
            assert particle.color in PARTICLE_COLORS
            assert 1 <= particle.x <= width
            assert 1 <= particle.y <= height
            assert particle.delta.x in (-1, 0, 1)
            assert particle.delta.y in (-1, 0, 1)

    def test_populate_is_reproducible(self):
        """The same seed lays out the same field."""
        first = Field.populate(500, 500, np.random.default_rng(42), count=20)
        second = Field.populate(500, 500, np.random.default_rng(42), count=20)
        assert [(p.x, p.y, p.color, p.delta.x, p.delta.y) for p in first] == \
               [(p.x, p.y, p.color, p.delta.x, p.delta.y) for p in second]

    def test_populate_zero_sized_surface(self, rng):
        """A zero-sized surface still yields a field instead of failing."""
        field = Field.populate(0, 0, rng, count=5)
        assert len(field) == 5
        assert all(p.x == 1 and p.y == 1 for p in field)

    def test_populate_custom_palette(self, rng):
        field = Field.populate(100, 100, rng, count=50, colors=["#ffffff"])
        assert {p.color for p in field} == {"#ffffff"}

    def test_mean_speed(self):
        field = Field(10, 10, [make_particle(1, 1, dx=1, dy=0), make_particle(2, 2, dx=1, dy=1)])
        assert field.mean_speed() == pytest.approx((1 + 2 ** 0.5) / 2)

    def test_mean_speed_empty(self):
        assert Field(10, 10).mean_speed() == 0.0

    def test_iteration_order_is_stable(self):
        particles = [make_particle(i + 1, i + 2) for i in range(5)]
        field = Field(10, 10, particles)
        assert list(field) == particles
        assert list(field) == particles
