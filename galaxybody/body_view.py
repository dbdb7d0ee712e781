"""
This module implements BodyView, a proxy class providing Body-like access to individual
point masses stored in the body store's numpy arrays.

The class uses properties to map attribute access (mass, position, velocity,
acceleration) onto the matching row of the parent store, so a caller can inspect or
adjust one body without copying the arrays. Vector getters return copies; writing goes
through the setters. The view assumes the store keeps its arrays and the index stays in
bounds, which holds because the population size never changes.
"""

from __future__ import annotations
from typing import TYPE_CHECKING
import numpy as np
if TYPE_CHECKING:
    from .simulation_state import BodyStore




class BodyView:
	__slots__ = ("_store", "_i")

	def __init__(self, store: "BodyStore", idx: int) -> None:
		self._store = store
		self._i = int(idx)

	@property
	def index(self) -> int:
		return self._i

	@property
	def mass(self) -> float:
		return float(self._store._mass[self._i])
	@mass.setter
	def mass(self, v: float) -> None:
		self._store._mass[self._i] = float(v)

	@property
	def position(self) -> np.ndarray:
		return self._store._pos[self._i].copy()
	@position.setter
	def position(self, v) -> None:
		self._store._pos[self._i] = np.asarray(v, dtype=np.float64).reshape(3)

	@property
	def velocity(self) -> np.ndarray:
		return self._store._vel[self._i].copy()
	@velocity.setter
	def velocity(self, v) -> None:
		self._store._vel[self._i] = np.asarray(v, dtype=np.float64).reshape(3)

	@property
	def acceleration(self) -> np.ndarray:
		return self._store._acc[self._i].copy()
	@acceleration.setter
	def acceleration(self, v) -> None:
		self._store._acc[self._i] = np.asarray(v, dtype=np.float64).reshape(3)

	def __repr__(self) -> str:
		return (f"Body(mass={self.mass}, position={self.position.tolist()}, "
				f"velocity={self.velocity.tolist()}, acceleration={self.acceleration.tolist()})")
