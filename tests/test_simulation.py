"""Tests for the full per-tick pipeline."""

import numpy as np
import pytest

from galaxybody import (
    Body,
    GalaxyConfig,
    GalaxyGenerator,
    GalaxySimulation,
    Integrator,
    gravitational_acceleration,
)

FRAME = 1.0 / 60.0


def _elapsed_sequence(n=8):
    return [FRAME * (1.0 + 0.1 * (i % 3)) for i in range(n)]


class TestScenarios:

    def test_zero_mass_anchor_leaves_lone_star_in_place(self):
        cfg = GalaxyConfig(n_bodies=2)
        sim = GalaxySimulation(
            cfg,
            masses=[0.0, 1.0e30],
            positions=[[0.0, 0.0, 0.0], [1.0e12, 0.0, 0.0]],
        )

        out = sim.tick(1.0)

        assert np.array_equal(sim.store.acc[1], np.zeros(3))
        assert np.array_equal(sim.store.vel[1], np.zeros(3))
        assert sim.store.pos[1].tolist() == [1.0e12, 0.0, 0.0]
        assert sim.store.pos[0].tolist() == [0.0, 0.0, 0.0]
        assert out[1].tolist() == pytest.approx([100.0, 0.0, 0.0])

    def test_anchor_still_attracts_with_its_mass(self):
        cfg = GalaxyConfig(n_bodies=2)
        sim = GalaxySimulation(
            cfg,
            masses=[1.0e30, 1.0e20],
            positions=[[0.0, 0.0, 0.0], [1.0e12, 0.0, 0.0]],
        )
        sim.tick(FRAME)

        expected = cfg.G * 1.0e30 / 1.0e24
        assert sim.store.acc[1, 0] == pytest.approx(-expected, rel=1e-12)
        assert sim.store.pos[1, 0] < 1.0e12

    def test_tick_accepts_body_records(self):
        bodies = [
            Body(0.0, [0.0, 0.0, 0.0]),
            Body(1.0e30, [1.0e12, 0.0, 0.0], velocity=[0.0, 1e-3, 0.0]),
        ]
        sim = GalaxySimulation(GalaxyConfig(n_bodies=2), bodies=bodies)
        out = sim.tick(0.0)
        assert out.shape == (2, 3)
        assert sim.bodies[1].velocity.tolist() == [0.0, 1e-3, 0.0]


class TestInvariants:

    def test_anchor_is_at_origin_after_every_tick(self, small_config):
        sim = GalaxyGenerator(small_config, seed=11).create_simulation()
        for dt in _elapsed_sequence(10):
            out = sim.tick(dt)
            assert sim.store.pos[0].tolist() == [0.0, 0.0, 0.0]
            assert out[0].tolist() == [0.0, 0.0, 0.0]

    def test_clamps_hold_after_every_tick(self):
        cfg = GalaxyConfig(n_bodies=30, galaxy_diameter=1.0e11)
        sim = GalaxyGenerator(cfg, seed=5).create_simulation()
        for dt in _elapsed_sequence(6):
            sim.tick(dt)
            store = sim.store
            assert np.all(np.linalg.norm(store.acc, axis=1) <= cfg.max_acceleration * (1 + 1e-12))
            assert np.all(np.linalg.norm(store.vel, axis=1) <= cfg.max_velocity * (1 + 1e-12))
            assert np.all(np.linalg.norm(store.pos, axis=1) <= 2 * cfg.galaxy_diameter * (1 + 1e-12))

    def test_identical_runs_are_bit_identical(self, small_config):
        a = GalaxyGenerator(small_config, seed=21).create_simulation()
        b = GalaxyGenerator(small_config, seed=21).create_simulation()
        for dt in _elapsed_sequence():
            out_a = a.tick(dt)
            out_b = b.tick(dt)
            assert np.array_equal(out_a, out_b)
            for x, y in zip(a.store.snapshot(), b.store.snapshot()):
                assert np.array_equal(x, y)

    def test_threaded_force_loop_gives_same_trajectory(self, small_config):
        serial = GalaxyGenerator(small_config, seed=9).create_simulation()
        threaded_cfg = small_config.with_overrides(force_workers=4)
        threaded = GalaxyGenerator(threaded_cfg, seed=9).create_simulation()
        for dt in _elapsed_sequence():
            serial.tick(dt)
            threaded.tick(dt)
        assert np.array_equal(serial.store.pos, threaded.store.pos)
        assert np.array_equal(serial.store.vel, threaded.store.vel)

    def test_tick_integrates_from_one_snapshot(self, small_config, generated):
        mass, pos, vel, acc = generated
        sim = GalaxySimulation(small_config, masses=mass, positions=pos,
                               velocities=vel, accelerations=acc)

        sim.tick(FRAME)

        forces = gravitational_acceleration(pos, mass, small_config.G, small_config.min_gravity_distance)
        exp_pos, exp_vel, exp_acc = Integrator(small_config).step(pos, vel, forces, FRAME)
        assert np.array_equal(sim.store.pos, exp_pos)
        assert np.array_equal(sim.store.vel, exp_vel)
        assert np.array_equal(sim.store.acc, exp_acc)

    def test_display_positions_do_not_mutate_store(self, small_config):
        sim = GalaxyGenerator(small_config, seed=2).create_simulation()
        sim.tick(FRAME)
        before = sim.store.snapshot()
        sim.display_positions()
        for x, y in zip(before, sim.store.snapshot()):
            assert np.array_equal(x, y)


class TestEdgeCases:

    def test_zero_bodies_is_a_no_op(self):
        sim = GalaxySimulation(GalaxyConfig(n_bodies=0), masses=[], positions=np.zeros((0, 3)))
        out = sim.tick(FRAME)
        assert out.shape == (0, 3)
        assert out.dtype == np.float32
        assert sim.tick_count == 1

    def test_negative_elapsed_is_reported_not_raised(self, small_config, capsys):
        sim = GalaxyGenerator(small_config, seed=4).create_simulation()
        sim.tick(-1.0)
        assert "[warning] elapsed time" in capsys.readouterr().out

    def test_missing_positions_leave_empty_store(self, capsys):
        sim = GalaxySimulation(GalaxyConfig(), masses=[1.0, 2.0])
        assert sim.n_bodies == 0
        assert "[error]" in capsys.readouterr().out

    def test_camera_orbits_with_configured_speed(self):
        cfg = GalaxyConfig(n_bodies=2, camera_speed=0.5)
        sim = GalaxySimulation(cfg, masses=[0.0, 1.0], positions=[[0, 0, 0], [1.0e12, 0, 0]])
        sim.run([1.0, 1.0])
        assert sim.camera.angle == pytest.approx(1.0)
        assert sim.tick_count == 2


class TestForcePool:

    def test_serial_simulation_has_no_pool(self, small_config):
        sim = GalaxyGenerator(small_config, seed=3).create_simulation()
        sim.tick(FRAME)
        assert sim.force_pool is None

    def test_pool_is_kept_across_ticks_until_close(self, small_config):
        cfg = small_config.with_overrides(force_workers=3)
        with GalaxyGenerator(cfg, seed=3).create_simulation() as sim:
            sim.tick(FRAME)
            pool = sim.force_pool
            sim.tick(FRAME)
            assert pool is not None
            assert sim.force_pool is pool
        assert sim._pool is None
        with pytest.raises(RuntimeError):
            pool.submit(lambda: None)
