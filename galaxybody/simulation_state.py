"""
This module manages the body store that persists across galaxy ticks.

The BodyStore class keeps numpy arrays for masses, positions, velocities and
accelerations, provides property accessors that refuse shape-changing assignments,
builds itself from a list of Body records or from raw arrays, and supports the per-tick
snapshot/commit cycle. A tick reads an independent snapshot, computes every new value
against it, and only then commits velocities, positions and accelerations back in one
step, so no consumer ever sees a partially updated body. The population size is fixed
once the store is built.
"""

from __future__ import annotations
import numpy as np
from typing import List, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .body import Body




class BodyStore:

	def __init__(self):
		self.n_bodies: int = 0
		self._mass: np.ndarray = np.empty(0, dtype=np.float64)
		self._pos: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._vel: np.ndarray = np.empty((0, 3), dtype=np.float64)
		self._acc: np.ndarray = np.empty((0, 3), dtype=np.float64)

	@property
	def pos(self) -> np.ndarray:
		return self._pos

	@property
	def vel(self) -> np.ndarray:
		return self._vel

	@property
	def acc(self) -> np.ndarray:
		return self._acc

	@property
	def mass(self) -> np.ndarray:
		return self._mass



	def _assign_vectors(self, name: str, target: np.ndarray, value) -> bool:
		arr = np.asarray(value, dtype=np.float64)
		if arr.ndim == 1 and arr.size == target.size:
			arr = arr.reshape(-1, 3)
		if arr.shape != target.shape:
			print(f"shape mismatch when assigning to store.{name}: "
				  f"expected {target.shape}, got {arr.shape}")
			return False
		target[...] = arr
		return True

	@pos.setter
	def pos(self, value: np.ndarray) -> None:
		self._assign_vectors("pos", self._pos, value)

	@vel.setter
	def vel(self, value: np.ndarray) -> None:
		self._assign_vectors("vel", self._vel, value)

	@acc.setter
	def acc(self, value: np.ndarray) -> None:
		self._assign_vectors("acc", self._acc, value)

	@mass.setter
	def mass(self, value: np.ndarray) -> None:
		arr = np.asarray(value, dtype=np.float64).ravel()
		if arr.shape != self._mass.shape:
			print(f"shape mismatch when assigning to store.mass: "
				  f"expected {self._mass.shape}, got {arr.shape}")
			return
		if np.any(arr < 0) or not np.all(np.isfinite(arr)):
			print("all masses must be non-negative finite numbers")
			return
		self._mass[...] = arr

	def build_state(self, bodies: List[Body] | None, masses=None, positions=None,
					velocities=None, accelerations=None) -> bool:
		if bodies is None:
			if masses is None or positions is None:
				return False

			mass_arr = np.asarray(masses, dtype=np.float64).ravel()
			n = mass_arr.size
			pos_arr = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
			if pos_arr.shape[0] != n:
				print(f"[error] {pos_arr.shape[0]} positions for {n} masses")
				return False

			if velocities is None:
				vel_arr = np.zeros((n, 3), dtype=np.float64)
			else:
				vel_arr = np.asarray(velocities, dtype=np.float64).reshape(-1, 3)
			if accelerations is None:
				acc_arr = np.zeros((n, 3), dtype=np.float64)
			else:
				acc_arr = np.asarray(accelerations, dtype=np.float64).reshape(-1, 3)

			if vel_arr.shape[0] != n or acc_arr.shape[0] != n:
				print(f"[error] velocity/acceleration count does not match {n} masses")
				return False

			self._mass = mass_arr.copy()
			self._pos = pos_arr.copy()
			self._vel = vel_arr.copy()
			self._acc = acc_arr.copy()

		else:
			n = len(bodies)
			self._mass = np.array([b.mass for b in bodies], dtype=np.float64)
			self._pos = np.array([b.position for b in bodies], dtype=np.float64).reshape(n, 3)
			self._vel = np.array([b.velocity for b in bodies], dtype=np.float64).reshape(n, 3)
			self._acc = np.array([b.acceleration for b in bodies], dtype=np.float64).reshape(n, 3)

		self.n_bodies = int(self._mass.size)
		return True

	def snapshot(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
		return (self._mass.copy(), self._pos.copy(), self._vel.copy(), self._acc.copy())

	def commit(self, pos: np.ndarray, vel: np.ndarray, acc: np.ndarray) -> None:
		expected = (self.n_bodies, 3)
		if pos.shape != expected or vel.shape != expected or acc.shape != expected:
			print(f"[error] commit shape mismatch: expected {expected}, got "
				  f"{pos.shape}, {vel.shape}, {acc.shape}")
			return
		self._pos[...] = pos
		self._vel[...] = vel
		self._acc[...] = acc

	def bodies(self) -> List[Body]:
		from .body import Body
		return [
			Body(self._mass[i], self._pos[i], self._vel[i], self._acc[i])
			for i in range(self.n_bodies)
		]
