"""
This module provides validation utilities for galaxy simulation states.

The SimulationValidator class offers static methods to check state validity
(non-negative finite masses, finite three-component positions and velocities, matching
lengths, a non-negative softening threshold) and to report detailed diagnostics for
invalid states. Invalid input is a caller contract violation: validation only reports,
it never raises, and the simulation carries on with whatever values it was given.
"""

from __future__ import annotations
import math
from typing import Sequence
import numpy as np





class SimulationValidator:
	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions,
		velocities,
		min_gravity_distance: float,
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 3:
			return False

		for m_i in m:
			if not (m_i >= 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		if not (min_gravity_distance >= 0.0):
			return False

		return True

	@staticmethod
	def elapsed_is_valid(elapsed: float) -> bool:
		return math.isfinite(elapsed) and elapsed >= 0.0

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
		min_gravity_distance=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			m = np.asarray(masses, dtype=float).ravel()
			bad = np.flatnonzero(~np.isfinite(m) | (m < 0.0))
			print("masses", m)
			for i in bad:
				print(f"  mass[{i}] = {m[i]} (expected finite and >= 0)")
		if positions is not None:
			print("positions", positions)
			for i, pos in enumerate(positions):
				if len(pos) != 3:
					print(f"  position[{i}] has {len(pos)} dimensions (expected 3)")
		if velocities is not None:
			print("velocities", velocities)
			for i, vel in enumerate(velocities):
				if len(vel) != 3:
					print(f"  velocity[{i}] has {len(vel)} dimensions (expected 3)")
		if min_gravity_distance is not None:
			print("min_gravity_distance", min_gravity_distance)
