"""
This module provides GalaxySimulation, the per-tick entry point that a render loop
drives once per frame.

The class owns the BodyStore, the Integrator, the DisplayMapper, the Diagnostics and the
camera orbit value. tick(elapsed) takes an independent snapshot of the store, computes
every body's acceleration against that snapshot, integrates velocities and positions
(pinning the anchor to the origin), commits the result back in one step, advances the
camera, and returns float32 display positions in body-index order. Construction accepts
either a list of Body records or raw arrays and validates them, reporting problems
rather than raising; invalid values are propagated through the arithmetic unchanged.
When the force loop is threaded, one pool is created on first use and kept until
close(), which the context-manager form calls on exit.
"""

from __future__ import annotations
import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import numpy as np

from .sim_config import GalaxyConfig
from .simulation_state import BodyStore
from .body_view import BodyView
from .forces import gravitational_acceleration
from .integrator import Integrator
from .display import DisplayMapper
from .camera import CameraOrbit, orbit_step
from .diagnostics import Diagnostics
from .simulation_validator import SimulationValidator
from .body import Body




class GalaxySimulation:

	def __init__(
		self,
		config: Optional[GalaxyConfig] = None,
		bodies: Optional[List[Body]] = None,
		masses=None,
		positions=None,
		velocities=None,
		accelerations=None,
	) -> None:
		self.cfg: GalaxyConfig = config if config is not None else GalaxyConfig()
		self.store = BodyStore()
		if not self.store.build_state(bodies, masses, positions, velocities, accelerations):
			print("[error] could not build body store; starting with zero bodies")

		self._integrator = Integrator(self.cfg)
		self._mapper = DisplayMapper(self.cfg)
		self.diagnostics = Diagnostics(self)
		self.camera = CameraOrbit(
			distance=float(self.cfg.camera_distance),
			speed=float(self.cfg.camera_speed),
		)
		self.tick_count = 0
		self._pool: Optional[ThreadPoolExecutor] = None

		if not SimulationValidator.state_is_valid(
			self.store.mass, self.store.pos, self.store.vel, self.cfg.min_gravity_distance
		):
			SimulationValidator.report_invalid_state(
				"initial body store",
				masses=self.store.mass,
				min_gravity_distance=self.cfg.min_gravity_distance,
			)

	@property
	def n_bodies(self) -> int:
		return self.store.n_bodies

	@property
	def G(self) -> float:
		return float(self.cfg.G)

	@property
	def bodies(self) -> List[BodyView]:
		return [BodyView(self.store, i) for i in range(self.store.n_bodies)]

	@property
	def integrator(self) -> Integrator:
		return self._integrator

	@property
	def mapper(self) -> DisplayMapper:
		return self._mapper

	@property
	def force_pool(self) -> Optional[ThreadPoolExecutor]:
		if self.cfg.force_workers > 1 and self._pool is None:
			self._pool = ThreadPoolExecutor(max_workers=self.cfg.force_workers)
		return self._pool

	def close(self) -> None:
		if self._pool is not None:
			self._pool.shutdown(wait=True)
			self._pool = None

	def __enter__(self) -> "GalaxySimulation":
		return self

	def __exit__(self, *exc) -> None:
		self.close()

	def compute_accelerations(self, pos: np.ndarray, mass: np.ndarray) -> np.ndarray:
		cfg = self.cfg
		return gravitational_acceleration(
			pos, mass, cfg.G, cfg.min_gravity_distance,
			workers=cfg.force_workers, pool=self.force_pool,
		)

	def tick(self, elapsed: float) -> np.ndarray:
		elapsed = float(elapsed)
		if not SimulationValidator.elapsed_is_valid(elapsed):
			self.diagnostics.report_elapsed(elapsed)

		if self.store.n_bodies == 0:
			self.tick_count += 1
			return np.zeros((0, 3), dtype=np.float32)

		mass, pos, vel, _ = self.store.snapshot()
		acc = self.compute_accelerations(pos, mass)
		pos_new, vel_new, acc_new = self._integrator.step(pos, vel, acc, elapsed)
		self.store.commit(pos_new, vel_new, acc_new)

		if math.isfinite(elapsed):
			self.camera = orbit_step(self.camera, elapsed)
		self.tick_count += 1
		self.diagnostics.check_finite()
		return self.display_positions()

	def run(self, elapsed_times) -> np.ndarray:
		out = self.display_positions()
		for dt in elapsed_times:
			out = self.tick(dt)
		return out

	def display_positions(self) -> np.ndarray:
		return self._mapper.map(self.store.pos)
