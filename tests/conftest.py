"""Pytest configuration and shared fixtures."""

import numpy as np
import pytest

from galaxybody import Diagnostics, GalaxyConfig, GalaxyGenerator


@pytest.fixture(autouse=True)
def reset_diag_counts():
    """Give every test a fresh rate limiter."""
    Diagnostics._GLOBAL_DIAG_COUNTS.clear()
    yield
    Diagnostics._GLOBAL_DIAG_COUNTS.clear()


@pytest.fixture
def small_config():
    """Default physical constants with a population small enough for quick ticks."""
    return GalaxyConfig(n_bodies=24)


@pytest.fixture
def loose_config():
    """Unit-scale constants with clamps far out of reach."""
    return GalaxyConfig(
        G=1.0,
        n_bodies=2,
        galaxy_diameter=1.0e6,
        time_factor=1.0,
        max_acceleration=1.0e9,
        max_velocity=1.0e9,
        min_gravity_distance=1.0e-3,
    )


@pytest.fixture
def two_bodies():
    """Light body at the origin and a heavier one 1e12 m along +x."""
    masses = np.array([1.0e30, 3.0e30])
    positions = np.array([[0.0, 0.0, 0.0], [1.0e12, 0.0, 0.0]])
    return masses, positions


@pytest.fixture
def generated(small_config):
    """Seeded population arrays (mass, pos, vel, acc)."""
    return GalaxyGenerator(small_config, seed=7).generate()
