from __future__ import annotations
from typing import TYPE_CHECKING, Tuple
import numpy as np
from .physics_utils import limit_lengths

if TYPE_CHECKING:
	from .sim_config import GalaxyConfig

"""
This module implements the Integrator that advances velocities and positions once per tick from freshly computed accelerations. The update is deliberately not a textbook scheme: the clamped acceleration is added straight into the velocity with no timestep factor, and only the position delta (velocity plus half the acceleration) is scaled by elapsed time and the configured time factor. Three magnitude clamps keep the population bounded every tick (acceleration, then velocity, then position against a sphere of twice the galaxy diameter), after which the anchor body is pinned back to the origin. Inputs are never mutated; the caller commits the returned arrays.

"""

class Integrator:
	anchor_index: int = 0

	def __init__(self, cfg: "GalaxyConfig") -> None:
		self.cfg = cfg
		self._steps = 0

	@property
	def steps(self) -> int:
		return self._steps

	def step(
		self,
		pos: np.ndarray,
		vel: np.ndarray,
		acc: np.ndarray,
		elapsed: float,
	) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
		if pos.shape[0] == 0:
			return pos.copy(), vel.copy(), acc.copy()

		cfg = self.cfg
		elapsed = float(elapsed)

		acc_new = limit_lengths(acc, cfg.max_acceleration)

		vel_new = vel + acc_new
		vel_new = limit_lengths(vel_new, cfg.max_velocity)

		delta = vel_new + acc_new * 0.5
		pos_new = pos + delta * elapsed * cfg.time_factor
		pos_new = limit_lengths(pos_new, cfg.position_limit)

		pos_new[self.anchor_index] = 0.0

		self._steps += 1
		return pos_new, vel_new, acc_new
