"""Pytest configuration for pathtrace tests.

Shared fixtures: seeded random sources, a deterministic stand-in for one,
and the handful of materials most tests need.
"""

import random

import pytest

from pathtrace.core.vector import Vector3
from pathtrace.materials.dielectric import Dielectric
from pathtrace.materials.diffuse_light import DiffuseLight
from pathtrace.materials.lambertian import Lambertian
from pathtrace.materials.metal import Metal


class FixedRandom:
    """Random source that always draws the same value."""

    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value

    def uniform(self, a, b):
        return a + (b - a) * self.value

    def randrange(self, n):
        return 0


@pytest.fixture
def rng():
    """A seeded random source, fresh for every test."""
    return random.Random(1234)


@pytest.fixture
def fixed_rng():
    """Factory for random sources pinned to a single value."""
    return FixedRandom


@pytest.fixture
def white():
    return Lambertian(Vector3(0.73, 0.73, 0.73))


@pytest.fixture
def red():
    return Lambertian(Vector3(0.65, 0.05, 0.05))


@pytest.fixture
def mirror():
    return Metal(Vector3(1.0, 1.0, 1.0), 0.0)


@pytest.fixture
def glass():
    return Dielectric(1.5)


@pytest.fixture
def lamp():
    return DiffuseLight(Vector3(4.0, 4.0, 4.0))
