"""Pytest fixtures for all tests."""

import os

# Pygame must pick the headless drivers before it is first imported.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import numpy as np
import pytest

from particle import Delta, Field, Particle


class RecordingContext:
    """Drawing context that records every call instead of drawing."""

    def __init__(self, width=800, height=600):
        self.width = width
        self.height = height
        self.calls = []

    @property
    def size(self):
        return (self.width, self.height)

    def clear(self):
        self.calls.append(("clear",))

    def fill_circle(self, x, y, radius, color):
        self.calls.append(("circle", x, y, radius, color))

    def gradient_line(self, x1, y1, x2, y2, color1, color2):
        self.calls.append(("line", x1, y1, x2, y2, color1, color2))

    def of_kind(self, kind):
        return [call for call in self.calls if call[0] == kind]


def make_particle(x, y, color="#fb4934", dx=0, dy=0, radius=3):
    return Particle(x=x, y=y, radius=radius, color=color, delta=Delta(dx, dy))


@pytest.fixture
def context():
    """Create a recording drawing context."""
    return RecordingContext()


@pytest.fixture
def rng():
    """Create a seeded random source."""
    return np.random.default_rng(1234)


@pytest.fixture
def small_field():
    """Create a field of three stationary particles."""
    return Field(800, 600, [
        make_particle(100, 100, "#fb4934"),
        make_particle(150, 140, "#83a598"),
        make_particle(700, 500, "#ebdbb2"),
    ])
