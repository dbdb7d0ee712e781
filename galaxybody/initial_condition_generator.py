"""
This module generates the initial galaxy population handed to GalaxySimulation.

The GalaxyGenerator class samples positions uniformly inside a flattened cuboid (the full
galaxy diameter D on x and y, D/10 on z), draws masses uniformly from the configured
range, and gives every body the same small tangential spin: velocity and acceleration
are both spin_factor * (cos t, sin t, 0) with t = atan2(x, y) of the sampled position.
Body 0 is the anchor: it is placed at the origin with the configured anchor mass, but a
position sample is still drawn for it and its spin comes from that sample, so every index
consumes the random stream identically. Seeding follows the package-wide global seed.
"""

from __future__ import annotations

import numpy as np
from typing import List, Optional, Tuple

from .sim_config import GalaxyConfig
from .body import Body
from .simulation import GalaxySimulation
from .utils import set_global_seed




class GalaxyGenerator:

	def __init__(self, config: GalaxyConfig | None = None, seed: Optional[int] = None):
		self.config: GalaxyConfig = config or GalaxyConfig()
		if seed is not None:
			set_global_seed(seed)


	def _generate_positions(self, n: int) -> np.ndarray:
		d = float(self.config.galaxy_diameter)
		pos = np.empty((n, 3), dtype=np.float64)
		pos[:, 0] = np.random.uniform(-d, d, n)
		pos[:, 1] = np.random.uniform(-d, d, n)
		pos[:, 2] = np.random.uniform(-d / 10.0, d / 10.0, n)
		return pos

	def _generate_masses(self, n: int) -> np.ndarray:
		min_m, max_m = self.config.mass_range
		m = np.empty(n, dtype=np.float64)
		if n == 0:
			return m
		m[0] = float(self.config.anchor_mass)
		m[1:] = np.random.uniform(min_m, max_m, n - 1)
		return m

	def _spin(self, pos: np.ndarray) -> np.ndarray:
		angle = np.arctan2(pos[:, 0], pos[:, 1])
		spin = np.zeros_like(pos)
		spin[:, 0] = np.cos(angle) * self.config.spin_factor
		spin[:, 1] = np.sin(angle) * self.config.spin_factor
		return spin

	def generate(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
		n = int(self.config.n_bodies)
		if n <= 0:
			empty = np.zeros((0, 3), dtype=np.float64)
			return np.zeros(0, dtype=np.float64), empty, empty.copy(), empty.copy()

		sampled = self._generate_positions(n)
		m = self._generate_masses(n)
		spin = self._spin(sampled)

		pos = sampled.copy()
		pos[0] = 0.0
		return m, pos, spin.copy(), spin

	def generate_bodies(self) -> List[Body]:
		m, pos, vel, acc = self.generate()
		return [Body(m[i], pos[i], vel[i], acc[i]) for i in range(m.size)]

	def create_simulation(self) -> GalaxySimulation:
		m, pos, vel, acc = self.generate()
		return GalaxySimulation(
			self.config,
			masses=m,
			positions=pos,
			velocities=vel,
			accelerations=acc,
		)
