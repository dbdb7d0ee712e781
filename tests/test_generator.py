"""Tests for initial population sampling."""

import numpy as np
import pytest

from galaxybody import GalaxyConfig, GalaxyGenerator


def test_anchor_sits_at_origin_with_configured_mass():
    cfg = GalaxyConfig(n_bodies=50, anchor_mass=1.0e20)
    mass, pos, _, _ = GalaxyGenerator(cfg, seed=1).generate()
    assert pos[0].tolist() == [0.0, 0.0, 0.0]
    assert mass[0] == 1.0e20


def test_positions_fill_flattened_cuboid():
    cfg = GalaxyConfig(n_bodies=400)
    _, pos, _, _ = GalaxyGenerator(cfg, seed=2).generate()
    d = cfg.galaxy_diameter
    others = pos[1:]
    assert np.all(np.abs(others[:, :2]) <= d)
    assert np.all(np.abs(others[:, 2]) <= d / 10.0)
    # the z spread is visibly thinner than the x/y spread
    assert np.abs(others[:, 2]).max() < 0.2 * np.abs(others[:, 0]).max()


def test_masses_are_drawn_from_configured_range():
    cfg = GalaxyConfig(n_bodies=200, mass_range=(2.0, 5.0))
    mass, _, _, _ = GalaxyGenerator(cfg, seed=3).generate()
    assert np.all(mass[1:] >= 2.0)
    assert np.all(mass[1:] < 5.0)


def test_spin_follows_atan2_of_x_then_y():
    cfg = GalaxyConfig(n_bodies=40)
    _, pos, vel, acc = GalaxyGenerator(cfg, seed=4).generate()
    for i in range(1, cfg.n_bodies):
        theta = np.arctan2(pos[i, 0], pos[i, 1])
        expected = cfg.spin_factor * np.array([np.cos(theta), np.sin(theta), 0.0])
        assert vel[i] == pytest.approx(expected)
    assert np.array_equal(vel, acc)
    assert vel is not acc
    assert np.allclose(np.linalg.norm(vel, axis=1), cfg.spin_factor)


def test_same_seed_gives_same_population():
    cfg = GalaxyConfig(n_bodies=30)
    first = GalaxyGenerator(cfg, seed=99).generate()
    second = GalaxyGenerator(cfg, seed=99).generate()
    for a, b in zip(first, second):
        assert np.array_equal(a, b)


def test_generate_bodies_and_empty_population():
    cfg = GalaxyConfig(n_bodies=5)
    bodies = GalaxyGenerator(cfg, seed=5).generate_bodies()
    assert len(bodies) == 5
    assert bodies[0].position.tolist() == [0.0, 0.0, 0.0]

    mass, pos, vel, acc = GalaxyGenerator(GalaxyConfig(n_bodies=0)).generate()
    assert mass.shape == (0,)
    assert pos.shape == vel.shape == acc.shape == (0, 3)


def test_create_simulation_uses_generated_state():
    cfg = GalaxyConfig(n_bodies=12)
    sim = GalaxyGenerator(cfg, seed=6).create_simulation()
    mass, pos, vel, acc = GalaxyGenerator(cfg, seed=6).generate()
    assert sim.n_bodies == 12
    assert np.array_equal(sim.store.mass, mass)
    assert np.array_equal(sim.store.pos, pos)
    assert np.array_equal(sim.store.vel, vel)
